"""Flatten value trees into dotted-key translation maps."""

from __future__ import annotations

from i18nlens.resources.value import (
    ArrayValue,
    ObjectValue,
    Value,
    render_scalar,
)

KEY_SEPARATOR = "."


def flatten_value(value: Value) -> dict[str, str]:
    """Flatten a value tree into `{dotted.key: text}`.

    Null leaves produce no entry. A scalar at the root has no key and is
    dropped, since consumers only look up non-empty dotted names.
    """
    result: dict[str, str] = {}
    _flatten_into(value, "", result)
    return result


def join_key(prefix: str, segment: str) -> str:
    if not prefix:
        return segment
    return f"{prefix}{KEY_SEPARATOR}{segment}"


def _flatten_into(value: Value, prefix: str, result: dict[str, str]) -> None:
    match value:
        case ObjectValue(entries=entries):
            for key, child in entries:
                _flatten_into(child, join_key(prefix, key), result)
        case ArrayValue(items=items):
            for index, child in enumerate(items):
                _flatten_into(child, join_key(prefix, str(index)), result)
        case _:
            text = render_scalar(value)
            if text is None or not prefix:
                return
            result[prefix] = text
