"""Framework detection and the locale directories each framework conventionally uses."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Final

import structlog
import yaml

logger = structlog.get_logger()

NPM_DEPENDENCY_SECTIONS: Final[tuple[str, ...]] = ("dependencies", "devDependencies")
COMPOSER_DEPENDENCY_SECTIONS: Final[tuple[str, ...]] = ("require", "require-dev")

ANGULAR_LOCALE_PATHS: Final[tuple[str, ...]] = ("src/assets/i18n",)
LARAVEL_LOCALE_PATHS: Final[tuple[str, ...]] = ("resources/lang", "lang")
FLUTTER_LOCALE_PATHS: Final[tuple[str, ...]] = (
    "lib/l10n",
    "assets/translations",
    "assets/flutter_i18n",
    "assets/i18n",
)
VUE_LOCALE_PATHS: Final[tuple[str, ...]] = (
    "src/locales",
    "src/i18n",
    "locales",
    "i18n",
    "public/locales",
)

VUE_PACKAGES: Final[tuple[str, ...]] = ("vue", "vue-i18n", "@intlify/vue-i18n", "@nuxtjs/i18n")
VUE_MARKER_FILES: Final[tuple[str, ...]] = (
    "vue.config.js",
    "vite.config.js",
    "vite.config.ts",
    "nuxt.config.js",
)


def detect_framework_locale_paths(root: Path) -> tuple[str, ...]:
    """Conventional locale directories of every framework detected under `root`.

    Only directories that exist are returned; order follows detection order
    and duplicates are left for the caller to merge.
    """
    paths: list[str] = []
    frameworks: list[str] = []

    if is_angular_project(root):
        frameworks.append("angular")
        paths.extend(ANGULAR_LOCALE_PATHS)
    if is_laravel_project(root):
        frameworks.append("laravel")
        paths.extend(LARAVEL_LOCALE_PATHS)
    if is_flutter_project(root):
        frameworks.append("flutter")
        arb_dir = read_arb_dir(root)
        if arb_dir is not None:
            paths.append(arb_dir)
        paths.extend(FLUTTER_LOCALE_PATHS)
    if is_vue_project(root):
        frameworks.append("vue")
        paths.extend(VUE_LOCALE_PATHS)

    existing = tuple(path for path in paths if (root / path).exists())
    if frameworks:
        logger.debug("frameworks_detected", frameworks=frameworks, locale_paths=list(existing))
    return existing


def is_angular_project(root: Path) -> bool:
    package_json = _read_json(root / "package.json")
    return _has_dependency(package_json, "@angular/core", NPM_DEPENDENCY_SECTIONS) or _has_dependency(
        package_json, "@angular/cli", NPM_DEPENDENCY_SECTIONS
    )


def is_laravel_project(root: Path) -> bool:
    composer_json = _read_json(root / "composer.json")
    if _has_dependency(composer_json, "laravel/framework", COMPOSER_DEPENDENCY_SECTIONS):
        return True
    return isinstance(composer_json, dict) and composer_json.get("name") == "laravel/laravel"


def is_flutter_project(root: Path) -> bool:
    try:
        content = (root / "pubspec.yaml").read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError):
        return False
    return "flutter:" in content and "sdk: flutter" in content


def read_arb_dir(root: Path) -> str | None:
    """`arb-dir` from the Flutter `l10n.yaml`, if it is set to a string."""
    try:
        content = (root / "l10n.yaml").read_text(encoding="utf-8")
        data = yaml.safe_load(content)
    except (OSError, UnicodeDecodeError, yaml.YAMLError):
        return None
    if not isinstance(data, dict):
        return None
    arb_dir = data.get("arb-dir")
    return arb_dir if isinstance(arb_dir, str) else None


def is_vue_project(root: Path) -> bool:
    package_json = _read_json(root / "package.json")
    if any(_has_dependency(package_json, package, NPM_DEPENDENCY_SECTIONS) for package in VUE_PACKAGES):
        return True
    return any((root / marker).exists() for marker in VUE_MARKER_FILES)


def _read_json(path: Path) -> Any:
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError):
        return None


def _has_dependency(document: Any, dependency: str, sections: tuple[str, ...]) -> bool:
    if not isinstance(document, dict):
        return False
    for section in sections:
        dependencies = document.get(section)
        if isinstance(dependencies, dict) and dependency in dependencies:
            return True
    return False
