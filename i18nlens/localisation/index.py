"""Immutable translation index: locale -> dotted key -> entry."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Iterable, Mapping

import structlog

from i18nlens.localisation.model import TranslationEntry, TranslationLocation
from i18nlens.resources import KEY_SEPARATOR

logger = structlog.get_logger()


@dataclass(frozen=True, slots=True)
class LoadedResource:
    """Flattened translations of one resource file."""

    file_path: Path
    locale: str
    translations: Mapping[str, str]


@dataclass(frozen=True, slots=True)
class TranslationIndex:
    """Snapshot of all loaded translations.

    Never mutated after construction; a reload builds a new index. Locale and
    key enumeration is sorted so results do not depend on scan order.
    """

    entries_by_locale: Mapping[str, Mapping[str, TranslationEntry]] = field(default_factory=lambda: MappingProxyType({}))
    files_by_locale: Mapping[str, tuple[Path, ...]] = field(default_factory=lambda: MappingProxyType({}))
    _locales: tuple[str, ...] = field(init=False, repr=False)
    _keys: frozenset[str] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        keys: set[str] = set()
        for entries in self.entries_by_locale.values():
            keys.update(entries)
        object.__setattr__(self, "_locales", tuple(sorted(self.entries_by_locale)))
        object.__setattr__(self, "_keys", frozenset(keys))

    @property
    def is_empty(self) -> bool:
        return not self.entries_by_locale

    @property
    def key_count(self) -> int:
        return len(self._keys)

    @property
    def locale_files(self) -> Mapping[str, tuple[Path, ...]]:
        return self.files_by_locale

    def get_locales(self) -> tuple[str, ...]:
        return self._locales

    def get_all_keys(self) -> tuple[str, ...]:
        return tuple(sorted(self._keys))

    def key_exists(self, key: str) -> bool:
        return key in self._keys

    def get_entry(self, key: str, locale: str) -> TranslationEntry | None:
        entries = self.entries_by_locale.get(locale)
        if entries is None:
            return None
        return entries.get(key)

    def get_translation(self, key: str, locale: str) -> str | None:
        entry = self.get_entry(key, locale)
        return entry.value if entry is not None else None

    def get_all_translations(self, key: str) -> Mapping[str, TranslationEntry]:
        found = {
            locale: self.entries_by_locale[locale][key]
            for locale in self._locales
            if key in self.entries_by_locale[locale]
        }
        return MappingProxyType(found)

    def missing_locales(self, key: str) -> tuple[str, ...]:
        """Loaded locales lacking `key`; every locale when the key is defined nowhere."""
        return tuple(locale for locale in self._locales if key not in self.entries_by_locale[locale])

    def get_translation_location(self, key: str, locale: str) -> TranslationLocation | None:
        entry = self.get_entry(key, locale)
        if entry is None:
            return None
        line = find_key_line(entry.file_path, key)
        if line is None:
            return None
        return TranslationLocation(file_path=entry.file_path, locale=entry.locale, line=line)


def build_translation_index(resources: Iterable[LoadedResource]) -> TranslationIndex:
    """Merge flattened resources into one index.

    Resources are applied in iteration order, so for the same locale and key
    the last resource wins.
    """
    entries_by_locale: dict[str, dict[str, TranslationEntry]] = {}
    files_by_locale: dict[str, list[Path]] = {}

    for resource in resources:
        locale_entries = entries_by_locale.setdefault(resource.locale, {})
        for key, value in resource.translations.items():
            locale_entries[key] = TranslationEntry(
                key=key,
                value=value,
                file_path=resource.file_path,
                locale=resource.locale,
            )
        files_by_locale.setdefault(resource.locale, []).append(resource.file_path)

    return TranslationIndex(
        entries_by_locale=MappingProxyType(
            {locale: MappingProxyType(entries) for locale, entries in entries_by_locale.items()}
        ),
        files_by_locale=MappingProxyType({locale: tuple(files) for locale, files in files_by_locale.items()}),
    )


def find_key_line(file_path: Path, key: str) -> int | None:
    """Best-effort 0-based line of `key` in a resource file.

    Only the last dotted segment is searched for (`"hello"`, `'hello'`,
    `hello: `, `hello:`), so a file where that segment also appears under
    another parent resolves to the first occurrence, which may be the wrong one.
    """
    try:
        content = file_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        logger.warning("definition_lookup_failed", path=str(file_path), key=key, error=str(exc))
        return None

    last_segment = key.rsplit(KEY_SEPARATOR, 1)[-1]
    needles = (
        f'"{last_segment}"',
        f"'{last_segment}'",
        f"{last_segment}: ",
        f"{last_segment}:",
    )
    for line_number, line in enumerate(content.split("\n")):
        if any(needle in line for needle in needles):
            return line_number
    return None
