"""Diagnostic codes and messages."""

from dataclasses import dataclass
from typing import Final

from i18nlens.diagnostics.diagnostic import Severity

DIAGNOSTIC_SOURCE: Final[str] = "i18n"


@dataclass(frozen=True, slots=True)
class DiagnosticSpec:
    code: str
    message: str
    hint: str | None = None
    severity: Severity = "error"
    category: str | None = None


MISSING_TRANSLATION: Final[DiagnosticSpec] = DiagnosticSpec(
    code="missing-translation",
    message="Translation key '{key}' not found",
    hint="Add the key to at least one locale resource file.",
    severity="warning",
    category="translation",
)

INCOMPLETE_TRANSLATION: Final[DiagnosticSpec] = DiagnosticSpec(
    code="incomplete-translation",
    message="Translation '{key}' missing in: {locales}",
    hint="Add the key to the listed locale resource files.",
    severity="hint",
    category="translation",
)

RESOURCE_INVALID_JSON: Final[DiagnosticSpec] = DiagnosticSpec(
    code="RESOURCE_INVALID_JSON",
    message="Invalid JSON resource file.",
    category="resource",
)

RESOURCE_INVALID_YAML: Final[DiagnosticSpec] = DiagnosticSpec(
    code="RESOURCE_INVALID_YAML",
    message="Invalid YAML resource file.",
    category="resource",
)

RESOURCE_ARRAY_NOT_FOUND: Final[DiagnosticSpec] = DiagnosticSpec(
    code="RESOURCE_ARRAY_NOT_FOUND",
    message="No array literal found in resource file.",
    hint="Return an array like `return ['key' => 'value'];`.",
    category="resource",
)

RESOURCE_EXPECTED_TOKEN: Final[DiagnosticSpec] = DiagnosticSpec(
    code="RESOURCE_EXPECTED_TOKEN",
    message="Expected token",
    category="resource",
)

RESOURCE_UNEXPECTED_TOKEN: Final[DiagnosticSpec] = DiagnosticSpec(
    code="RESOURCE_UNEXPECTED_TOKEN",
    message="Unexpected token",
    category="resource",
)

RESOURCE_UNEXPECTED_EOF: Final[DiagnosticSpec] = DiagnosticSpec(
    code="RESOURCE_UNEXPECTED_EOF",
    message="Unexpected end of input",
    category="resource",
)

RESOURCE_TOO_DEEP: Final[DiagnosticSpec] = DiagnosticSpec(
    code="RESOURCE_TOO_DEEP",
    message="Resource file is nested too deeply.",
    category="resource",
)

RESOURCE_CYCLIC_VALUE: Final[DiagnosticSpec] = DiagnosticSpec(
    code="RESOURCE_CYCLIC_VALUE",
    message="Resource value refers to itself.",
    hint="Remove the self-referencing YAML alias.",
    category="resource",
)

RESOURCE_READ_FAILED: Final[DiagnosticSpec] = DiagnosticSpec(
    code="RESOURCE_READ_FAILED",
    message="Resource file could not be read.",
    category="resource",
)
