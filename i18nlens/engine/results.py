"""Result carriers returned by engine queries."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

from i18nlens.text import LinePosition

INLAY_HINT_MAX_CHARS: Final[int] = 30
MAX_COMPLETION_ITEMS: Final[int] = 100


@dataclass(frozen=True, slots=True)
class CompletionItem:
    label: str
    insert_text: str
    detail: str | None = None
    documentation: str | None = None
    kind: str = "text"


@dataclass(frozen=True, slots=True)
class InlayHint:
    """Inline annotation showing a key's source-locale value."""

    position: LinePosition
    label: str
    kind: str = "type"
    padding_left: bool = True


def truncate_text(text: str, max_chars: int = INLAY_HINT_MAX_CHARS) -> str:
    """`text` unchanged if it fits, else cut so that it plus `...` is `max_chars` long."""
    if len(text) <= max_chars:
        return text
    return text[: max(0, max_chars - 3)] + "..."
