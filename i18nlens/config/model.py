"""Workspace configuration model."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, replace
from enum import StrEnum
from typing import Any, Final

from i18nlens.usage import DEFAULT_FUNCTION_PATTERNS

DEFAULT_LOCALE_PATHS: Final[tuple[str, ...]] = (
    "locales",
    "i18n",
    "translations",
    "public/locales",
    "src/locales",
    "src/i18n",
)
DEFAULT_SOURCE_LOCALE: Final[str] = "en"


class ConfigError(ValueError):
    """Configuration document has a field of the wrong type or value."""


class KeyStyle(StrEnum):
    """How keys are written in resource files. Recorded but not yet acted on."""

    NESTED = "nested"
    FLAT = "flat"
    AUTO = "auto"


@dataclass(frozen=True, slots=True)
class I18nConfig:
    locale_paths: tuple[str, ...] = DEFAULT_LOCALE_PATHS
    source_locale: str = DEFAULT_SOURCE_LOCALE
    key_style: KeyStyle = KeyStyle.AUTO
    namespace_enabled: bool = False
    function_patterns: tuple[str, ...] = DEFAULT_FUNCTION_PATTERNS

    @classmethod
    def from_mapping(cls, data: Any) -> I18nConfig:
        """Build a config from a decoded JSON object.

        Every field may be spelled camelCase or snake_case; absent fields take
        their defaults and unknown fields are ignored.
        """
        if not isinstance(data, Mapping):
            raise ConfigError(f"Expected a JSON object, found {type(data).__name__}")

        config = cls()
        locale_paths = _field(data, "localePaths", "locale_paths")
        if locale_paths is not None:
            config = replace(config, locale_paths=_string_tuple(locale_paths, "localePaths"))

        source_locale = _field(data, "sourceLocale", "source_locale")
        if source_locale is not None:
            if not isinstance(source_locale, str):
                raise ConfigError("`sourceLocale` must be a string")
            config = replace(config, source_locale=source_locale)

        key_style = _field(data, "keyStyle", "key_style")
        if key_style is not None:
            try:
                config = replace(config, key_style=KeyStyle(key_style))
            except ValueError as exc:
                raise ConfigError(f"Unknown `keyStyle` {key_style!r}") from exc

        namespace_enabled = _field(data, "namespaceEnabled", "namespace_enabled")
        if namespace_enabled is not None:
            if not isinstance(namespace_enabled, bool):
                raise ConfigError("`namespaceEnabled` must be a boolean")
            config = replace(config, namespace_enabled=namespace_enabled)

        function_patterns = _field(data, "functionPatterns", "function_patterns")
        if function_patterns is not None:
            config = replace(config, function_patterns=_string_tuple(function_patterns, "functionPatterns"))

        return config

    def with_extra_locale_paths(self, paths: tuple[str, ...]) -> I18nConfig:
        """Append `paths` not already configured, keeping order."""
        merged = list(self.locale_paths)
        for path in paths:
            if path not in merged:
                merged.append(path)
        return replace(self, locale_paths=tuple(merged))


def has_locale_paths(data: Any) -> bool:
    return isinstance(data, Mapping) and ("localePaths" in data or "locale_paths" in data)


def _field(data: Mapping[str, Any], camel: str, snake: str) -> Any:
    if camel in data:
        return data[camel]
    return data.get(snake)


def _string_tuple(value: Any, name: str) -> tuple[str, ...]:
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        raise ConfigError(f"`{name}` must be a list of strings")
    return tuple(value)
