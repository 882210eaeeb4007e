"""Shared holder that publishes translation index snapshots by swap."""

from __future__ import annotations

import threading
from pathlib import Path
from typing import Iterable, Mapping

import structlog

from i18nlens.localisation.index import TranslationIndex
from i18nlens.localisation.model import TranslationEntry, TranslationLocation
from i18nlens.localisation.scanner import ScanResult, scan_locale_directories

logger = structlog.get_logger()


class TranslationStore:
    """Workspace translation store.

    Readers get whichever index is current when they ask and keep using it;
    `reload` builds a complete replacement before swapping the reference, so no
    reader ever sees a cleared or half-populated index.
    """

    def __init__(self, workspace_root: str | Path, index: TranslationIndex | None = None) -> None:
        self._workspace_root = Path(workspace_root)
        self._index = index if index is not None else TranslationIndex()
        self._last_scan: ScanResult | None = None
        self._write_lock = threading.Lock()

    @property
    def workspace_root(self) -> Path:
        return self._workspace_root

    @property
    def index(self) -> TranslationIndex:
        return self._index

    @property
    def last_scan(self) -> ScanResult | None:
        return self._last_scan

    def scan_and_load(self, locale_paths: Iterable[str]) -> ScanResult:
        """Scan `locale_paths` and publish the result as the current index."""
        scan = scan_locale_directories(self._workspace_root, tuple(locale_paths))
        self.publish(scan.index, scan)
        return scan

    def reload(self, locale_paths: Iterable[str]) -> ScanResult:
        previous = self._index
        scan = self.scan_and_load(locale_paths)
        logger.info(
            "translations_reloaded",
            previous_keys=previous.key_count,
            keys=scan.index.key_count,
            locales=list(scan.index.get_locales()),
        )
        return scan

    def publish(self, index: TranslationIndex, scan: ScanResult | None = None) -> None:
        with self._write_lock:
            self._index = index
            self._last_scan = scan

    def get_translation(self, key: str, locale: str) -> str | None:
        return self._index.get_translation(key, locale)

    def get_all_translations(self, key: str) -> Mapping[str, TranslationEntry]:
        return self._index.get_all_translations(key)

    def get_translation_location(self, key: str, locale: str) -> TranslationLocation | None:
        return self._index.get_translation_location(key, locale)

    def get_all_keys(self) -> tuple[str, ...]:
        return self._index.get_all_keys()

    def get_locales(self) -> tuple[str, ...]:
        return self._index.get_locales()

    def key_exists(self, key: str) -> bool:
        return self._index.key_exists(key)

    def missing_locales(self, key: str) -> tuple[str, ...]:
        return self._index.missing_locales(key)
