"""Diagnostics."""

from i18nlens.diagnostics.codes import (
    DIAGNOSTIC_SOURCE,
    INCOMPLETE_TRANSLATION,
    MISSING_TRANSLATION,
    RESOURCE_ARRAY_NOT_FOUND,
    RESOURCE_CYCLIC_VALUE,
    RESOURCE_EXPECTED_TOKEN,
    RESOURCE_INVALID_JSON,
    RESOURCE_INVALID_YAML,
    RESOURCE_READ_FAILED,
    RESOURCE_TOO_DEEP,
    RESOURCE_UNEXPECTED_EOF,
    RESOURCE_UNEXPECTED_TOKEN,
    DiagnosticSpec,
)
from i18nlens.diagnostics.diagnostic import Diagnostic, Severity
from i18nlens.diagnostics.report import (
    collect_diagnostics,
    count_by_severity,
    has_errors,
    sort_diagnostics,
)

__all__ = [
    "DIAGNOSTIC_SOURCE",
    "INCOMPLETE_TRANSLATION",
    "MISSING_TRANSLATION",
    "RESOURCE_ARRAY_NOT_FOUND",
    "RESOURCE_CYCLIC_VALUE",
    "RESOURCE_EXPECTED_TOKEN",
    "RESOURCE_INVALID_JSON",
    "RESOURCE_INVALID_YAML",
    "RESOURCE_READ_FAILED",
    "RESOURCE_TOO_DEEP",
    "RESOURCE_UNEXPECTED_EOF",
    "RESOURCE_UNEXPECTED_TOKEN",
    "Diagnostic",
    "DiagnosticSpec",
    "Severity",
    "collect_diagnostics",
    "count_by_severity",
    "has_errors",
    "sort_diagnostics",
]
