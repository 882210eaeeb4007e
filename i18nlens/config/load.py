"""Workspace configuration discovery."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Final

import structlog

from i18nlens.config.detect import detect_framework_locale_paths
from i18nlens.config.model import ConfigError, I18nConfig, has_locale_paths

logger = structlog.get_logger()

CONFIG_CANDIDATES: Final[tuple[str, ...]] = (
    ".i18n-ally.json",
    "i18n-ally.config.json",
    ".zed/i18n.json",
)


def config_candidate_paths(root: str | Path) -> tuple[Path, ...]:
    workspace_root = Path(root)
    return tuple(workspace_root / candidate for candidate in CONFIG_CANDIDATES)


def is_config_path(path: str | Path) -> bool:
    """Whether `path` ends with one of the configuration candidate names."""
    posix = Path(path).as_posix()
    return any(posix == candidate or posix.endswith(f"/{candidate}") for candidate in CONFIG_CANDIDATES)


def load_config_from_workspace(root: str | Path) -> I18nConfig:
    """Load the first valid candidate config under `root`, else the defaults.

    When the chosen document does not set locale paths, the conventional
    locale directories of detected frameworks are appended.
    """
    workspace_root = Path(root)
    for config_path in config_candidate_paths(workspace_root):
        try:
            data = json.loads(config_path.read_text(encoding="utf-8"))
            config = I18nConfig.from_mapping(data)
        except FileNotFoundError:
            continue
        except (OSError, UnicodeDecodeError, json.JSONDecodeError, ConfigError) as exc:
            logger.warning("config_invalid", path=str(config_path), error=str(exc))
            continue

        if not has_locale_paths(data):
            config = config.with_extra_locale_paths(detect_framework_locale_paths(workspace_root))
        logger.info("config_loaded", path=str(config_path), locale_paths=list(config.locale_paths))
        return config

    config = I18nConfig().with_extra_locale_paths(detect_framework_locale_paths(workspace_root))
    logger.info("config_defaulted", root=str(workspace_root), locale_paths=list(config.locale_paths))
    return config
