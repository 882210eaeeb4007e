"""Workspace configuration."""

from i18nlens.config.detect import (
    detect_framework_locale_paths,
    is_angular_project,
    is_flutter_project,
    is_laravel_project,
    is_vue_project,
    read_arb_dir,
)
from i18nlens.config.load import (
    CONFIG_CANDIDATES,
    config_candidate_paths,
    is_config_path,
    load_config_from_workspace,
)
from i18nlens.config.model import (
    DEFAULT_LOCALE_PATHS,
    DEFAULT_SOURCE_LOCALE,
    ConfigError,
    I18nConfig,
    KeyStyle,
    has_locale_paths,
)

__all__ = [
    "CONFIG_CANDIDATES",
    "DEFAULT_LOCALE_PATHS",
    "DEFAULT_SOURCE_LOCALE",
    "ConfigError",
    "I18nConfig",
    "KeyStyle",
    "config_candidate_paths",
    "detect_framework_locale_paths",
    "has_locale_paths",
    "is_angular_project",
    "is_config_path",
    "is_flutter_project",
    "is_laravel_project",
    "is_vue_project",
    "load_config_from_workspace",
    "read_arb_dir",
]
