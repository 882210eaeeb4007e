"""Locale code recognition for resource file and directory names."""

from __future__ import annotations

import re
from pathlib import Path
from typing import Final

LOCALE_CODE_PATTERNS: Final[tuple[re.Pattern[str], ...]] = (
    re.compile(r"^[a-z]{2}$"),
    re.compile(r"^[a-z]{2}[-_][A-Z]{2}$"),
    re.compile(r"^[a-z]{2}[-_][a-z]{2}$"),
)

COMMON_LOCALES: Final[frozenset[str]] = frozenset(
    {
        "en",
        "en-US",
        "en-GB",
        "es",
        "es-ES",
        "fr",
        "fr-FR",
        "de",
        "de-DE",
        "it",
        "it-IT",
        "pt",
        "pt-BR",
        "ja",
        "ja-JP",
        "ko",
        "ko-KR",
        "zh",
        "zh-CN",
        "zh-TW",
        "ru",
        "ru-RU",
        "ar",
        "ar-SA",
        "vi",
        "vi-VN",
    }
)


def has_locale_shape(name: str) -> bool:
    """`en`, `fr-FR`, `pt_BR` or `zh-tw`."""
    return any(pattern.match(name) for pattern in LOCALE_CODE_PATTERNS)


def is_locale_code(name: str) -> bool:
    return has_locale_shape(name) or name in COMMON_LOCALES


def infer_locale(path: str | Path) -> str | None:
    """Infer the locale of a resource file from its name or its parent directory.

    `locales/fr.json` and `locales/fr/messages.json` both give `fr`. Files that
    match neither are not translation resources and yield `None`.
    """
    file_path = Path(path)
    stem = file_path.stem
    parent = file_path.parent.name

    if has_locale_shape(stem):
        return stem
    if has_locale_shape(parent):
        return parent
    if stem in COMMON_LOCALES:
        return stem
    if parent in COMMON_LOCALES:
        return parent
    return None
