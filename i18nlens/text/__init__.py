"""Text offsets, ranges and line mapping."""

from i18nlens.text.lines import LineIndex, LinePosition, LineSpan
from i18nlens.text.text import TextRange, TextSize, slice_text_range

__all__ = [
    "LineIndex",
    "LinePosition",
    "LineSpan",
    "TextRange",
    "TextSize",
    "slice_text_range",
]
