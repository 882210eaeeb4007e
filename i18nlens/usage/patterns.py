"""Default regular expressions locating translation keys in source code.

Each pattern captures the key in group 1.
"""

from __future__ import annotations

from typing import Final

JAVASCRIPT_PATTERNS: Final[tuple[str, ...]] = (
    r"""(?:^|[^\w.])t\s*\(\s*["']([^"']+)["']""",
    r"""i18n\.t\s*\(\s*["']([^"']+)["']""",
    r"""useTranslation\s*\(\s*\)\s*.*?t\s*\(\s*["']([^"']+)["']""",
    r"""\$t\s*\(\s*["']([^"']+)["']""",
    r"""\$tc\s*\(\s*["']([^"']+)["']""",
    r"""\$te\s*\(\s*["']([^"']+)["']""",
    r"""useI18n\s*\(\s*\)\s*.*?\.t\s*\(\s*["']([^"']+)["']""",
    r"""formatMessage\s*\(\s*\{\s*id:\s*["']([^"']+)["']""",
    r"""<Trans\s+i18nKey\s*=\s*["']([^"']+)["']""",
)

ANGULAR_PATTERNS: Final[tuple[str, ...]] = (
    r"""translateService\.(?:instant|get|stream)\s*\(\s*["']([^"']+)["']""",
    r"""translocoService\.(?:translate|selectTranslate)\s*\(\s*["']([^"']+)["']""",
    r"""["']([^"']+)["']\s*\|\s*(?:translate|transloco)\b""",
)

LARAVEL_PATTERNS: Final[tuple[str, ...]] = (
    r"""__\s*\(\s*["']([^"']+)["']""",
    r"""trans(?:_choice)?\s*\(\s*["']([^"']+)["']""",
    r"""Lang::(?:get|choice)\s*\(\s*["']([^"']+)["']""",
    r"""@lang\s*\(\s*["']([^"']+)["']""",
    r"""@choice\s*\(\s*["']([^"']+)["']""",
)

# easy_localization, flutter_i18n, then GetX.
FLUTTER_PATTERNS: Final[tuple[str, ...]] = (
    r"""['"]([^'"]+)['"]\s*\.tr\(""",
    r"""['"]([^'"]+)['"]\s*\.tr\(\)""",
    r"""(?:^|[^\w.])tr\(\s*['"]([^'"]+)['"]""",
    r"""context\.tr\(\s*['"]([^'"]+)['"]""",
    r"""['"]([^'"]+)['"]\s*\.plural\(""",
    r"""FlutterI18n\.translate\([^,]+,\s*['"]([^'"]+)['"]""",
    r"""FlutterI18n\.plural\([^,]+,\s*['"]([^'"]+)['"]""",
    r"""I18nText\(\s*['"]([^'"]+)['"]""",
    r"""I18nPlural\(\s*['"]([^'"]+)['"]""",
    r"""['"]([^'"]+)['"]\s*\.tr(?:\s|$|\)|,)""",
    r"""['"]([^'"]+)['"]\s*\.trParams\(""",
    r"""['"]([^'"]+)['"]\s*\.trPlural\(""",
)

DEFAULT_FUNCTION_PATTERNS: Final[tuple[str, ...]] = (
    *JAVASCRIPT_PATTERNS,
    *ANGULAR_PATTERNS,
    *LARAVEL_PATTERNS,
    *FLUTTER_PATTERNS,
)
