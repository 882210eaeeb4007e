"""Completion prefix extraction for partially typed keys."""

from __future__ import annotations

from typing import Final

COMPLETION_TRIGGERS: Final[tuple[str, ...]] = (
    't("',
    "t('",
    '$t("',
    "$t('",
    'i18n.t("',
    "i18n.t('",
)


def extract_completion_prefix(line: str, character: int) -> str | None:
    """Partial key typed between an opening trigger and the cursor.

    Triggers are tried in order against the text before the cursor, each at
    its last occurrence. A trigger whose quoted text is already closed is
    skipped. Returns `None` when no trigger applies.
    """
    before_cursor = line[: max(0, min(character, len(line)))]
    for trigger in COMPLETION_TRIGGERS:
        position = before_cursor.rfind(trigger)
        if position == -1:
            continue
        prefix = before_cursor[position + len(trigger) :]
        if '"' not in prefix and "'" not in prefix:
            return prefix
    return None


def line_at(text: str, line: int) -> str:
    """Text of the 0-based `line`, without its line ending; empty past the end."""
    lines = text.split("\n")
    if line < 0 or line >= len(lines):
        return ""
    return lines[line].removesuffix("\r")
