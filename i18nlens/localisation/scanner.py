"""Filesystem scanner for locale resource directories."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Final, Iterable

import structlog

from i18nlens.diagnostics.codes import RESOURCE_READ_FAILED
from i18nlens.localisation.codes import infer_locale
from i18nlens.localisation.index import (
    LoadedResource,
    TranslationIndex,
    build_translation_index,
)
from i18nlens.localisation.model import ScanFailure
from i18nlens.resources import (
    ResourceParseError,
    is_resource_path,
    load_translations,
)

logger = structlog.get_logger()

MAX_SCAN_DEPTH: Final[int] = 3
"""Files at most this many levels below a configured locale directory are scanned."""


@dataclass(frozen=True, slots=True)
class ScanResult:
    """Index built from one scan, plus what was loaded, skipped and rejected."""

    index: TranslationIndex
    loaded_files: tuple[Path, ...]
    skipped_files: tuple[Path, ...]
    failures: tuple[ScanFailure, ...]


def scan_locale_directories(
    root: str | Path,
    locale_paths: Iterable[str],
    *,
    max_depth: int = MAX_SCAN_DEPTH,
) -> ScanResult:
    """Scan configured locale directories under `root` and build a fresh index.

    Directories that do not exist are ignored. One unreadable or malformed file
    never aborts the scan; it is logged and reported in `failures`.
    """
    workspace_root = Path(root)
    candidates = collect_resource_files(workspace_root, locale_paths, max_depth=max_depth)

    resources: list[LoadedResource] = []
    loaded: list[Path] = []
    skipped: list[Path] = []
    failures: list[ScanFailure] = []

    for path in candidates:
        locale = infer_locale(path)
        if locale is None:
            logger.debug("resource_skipped_no_locale", path=str(path))
            skipped.append(path)
            continue
        try:
            translations = load_translations(path)
        except ResourceParseError as exc:
            logger.warning("resource_parse_failed", path=str(path), locale=locale, code=exc.code, error=str(exc))
            failures.append(ScanFailure(file_path=path, locale=locale, code=exc.code, message=str(exc)))
            continue
        except (OSError, UnicodeDecodeError) as exc:
            logger.warning("resource_read_failed", path=str(path), locale=locale, error=str(exc))
            failures.append(ScanFailure(file_path=path, locale=locale, code=RESOURCE_READ_FAILED.code, message=str(exc)))
            continue

        logger.debug("resource_loaded", path=str(path), locale=locale, keys=len(translations))
        resources.append(LoadedResource(file_path=path, locale=locale, translations=translations))
        loaded.append(path)

    index = build_translation_index(resources)
    logger.info(
        "locale_scan_finished",
        root=str(workspace_root),
        locales=len(index.get_locales()),
        keys=index.key_count,
        files=len(loaded),
        failures=len(failures),
    )
    return ScanResult(
        index=index,
        loaded_files=tuple(loaded),
        skipped_files=tuple(skipped),
        failures=tuple(failures),
    )


def collect_resource_files(
    root: Path,
    locale_paths: Iterable[str],
    *,
    max_depth: int = MAX_SCAN_DEPTH,
) -> list[Path]:
    """Resource files under every existing locale directory, sorted by path.

    The sort makes cross-file precedence deterministic: when two files define
    the same key for the same locale, the one later in path order wins.
    """
    found: set[Path] = set()
    for locale_path in locale_paths:
        directory = root / locale_path
        if not directory.is_dir():
            continue
        found.update(_walk_resource_files(directory, max_depth))
    return sorted(found)


def _walk_resource_files(directory: Path, max_depth: int) -> list[Path]:
    files: list[Path] = []
    for current, dirnames, filenames in os.walk(directory):
        current_path = Path(current)
        depth = len(current_path.relative_to(directory).parts)
        if depth >= max_depth - 1:
            dirnames.clear()
        for filename in filenames:
            path = current_path / filename
            if is_resource_path(path) and path.is_file():
                files.append(path)
    return files
