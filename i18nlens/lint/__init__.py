"""Translation usage diagnostics."""

from i18nlens.lint.classifier import (
    KeyLookup,
    classify_found_key,
    classify_found_keys,
    compute_diagnostics,
)

__all__ = [
    "KeyLookup",
    "classify_found_key",
    "classify_found_keys",
    "compute_diagnostics",
]
