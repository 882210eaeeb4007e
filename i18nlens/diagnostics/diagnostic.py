"""Diagnostics core types."""

from dataclasses import dataclass
from typing import Literal

from i18nlens.text import LineSpan, TextRange

Severity = Literal["error", "warning", "information", "hint"]


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic emitted by resource parsers and the key classifier."""

    code: str
    message: str
    range: TextRange
    severity: Severity = "error"
    hint: str | None = None
    category: str | None = None
    span: LineSpan | None = None
    source: str | None = None
