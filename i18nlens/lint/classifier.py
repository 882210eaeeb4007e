"""Classify usage sites against the translation index."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Protocol

from i18nlens.diagnostics import (
    DIAGNOSTIC_SOURCE,
    INCOMPLETE_TRANSLATION,
    MISSING_TRANSLATION,
    Diagnostic,
    DiagnosticSpec,
)
from i18nlens.usage import FoundKey, KeyFinder


class KeyLookup(Protocol):
    """Completeness queries the classifier needs; both the index and the store satisfy it."""

    def key_exists(self, key: str) -> bool: ...

    def missing_locales(self, key: str) -> tuple[str, ...]: ...


def classify_found_key(found_key: FoundKey, index: KeyLookup) -> Diagnostic | None:
    """Missing everywhere, missing in some locales, or fine (`None`)."""
    if not index.key_exists(found_key.key):
        return _diagnostic(MISSING_TRANSLATION, found_key, MISSING_TRANSLATION.message.format(key=found_key.key))

    missing = index.missing_locales(found_key.key)
    if not missing:
        return None
    message = INCOMPLETE_TRANSLATION.message.format(key=found_key.key, locales=", ".join(missing))
    return _diagnostic(INCOMPLETE_TRANSLATION, found_key, message)


def classify_found_keys(found_keys: Iterable[FoundKey], index: KeyLookup) -> list[Diagnostic]:
    diagnostics: list[Diagnostic] = []
    for found_key in found_keys:
        diagnostic = classify_found_key(found_key, index)
        if diagnostic is not None:
            diagnostics.append(diagnostic)
    return diagnostics


def compute_diagnostics(text: str, key_finder: KeyFinder, index: KeyLookup) -> list[Diagnostic]:
    """Diagnostics for every usage site in `text`, in document order."""
    return classify_found_keys(key_finder.find_keys(text), index)


def _diagnostic(spec: DiagnosticSpec, found_key: FoundKey, message: str) -> Diagnostic:
    return Diagnostic(
        code=spec.code,
        message=message,
        range=found_key.range,
        severity=spec.severity,
        hint=spec.hint,
        category=spec.category,
        span=found_key.span,
        source=DIAGNOSTIC_SOURCE,
    )
