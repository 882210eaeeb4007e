"""Models for translation entries and scan results."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True, slots=True)
class TranslationEntry:
    """One translated key in one locale."""

    key: str
    value: str
    file_path: Path
    locale: str
    line: int = 0


@dataclass(frozen=True, slots=True)
class TranslationLocation:
    """Best-effort position of a key's definition (0-based line)."""

    file_path: Path
    locale: str
    line: int


@dataclass(frozen=True, slots=True)
class ScanFailure:
    """A resource file that could not be read or parsed."""

    file_path: Path
    locale: str
    code: str
    message: str
