"""Usage-site key discovery."""

from i18nlens.usage.completion import COMPLETION_TRIGGERS, extract_completion_prefix, line_at
from i18nlens.usage.key_finder import FoundKey, KeyFinder
from i18nlens.usage.patterns import DEFAULT_FUNCTION_PATTERNS

__all__ = [
    "COMPLETION_TRIGGERS",
    "DEFAULT_FUNCTION_PATTERNS",
    "FoundKey",
    "KeyFinder",
    "extract_completion_prefix",
    "line_at",
]
