"""Locale resource discovery, translation index and store."""

from i18nlens.localisation.codes import (
    COMMON_LOCALES,
    has_locale_shape,
    infer_locale,
    is_locale_code,
)
from i18nlens.localisation.index import (
    LoadedResource,
    TranslationIndex,
    build_translation_index,
    find_key_line,
)
from i18nlens.localisation.model import (
    ScanFailure,
    TranslationEntry,
    TranslationLocation,
)
from i18nlens.localisation.scanner import (
    MAX_SCAN_DEPTH,
    ScanResult,
    collect_resource_files,
    scan_locale_directories,
)
from i18nlens.localisation.store import TranslationStore

__all__ = [
    "COMMON_LOCALES",
    "MAX_SCAN_DEPTH",
    "LoadedResource",
    "ScanFailure",
    "ScanResult",
    "TranslationEntry",
    "TranslationIndex",
    "TranslationLocation",
    "TranslationStore",
    "build_translation_index",
    "collect_resource_files",
    "find_key_line",
    "has_locale_shape",
    "infer_locale",
    "is_locale_code",
    "scan_locale_directories",
]
