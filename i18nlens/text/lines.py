"""Offset to line/column mapping."""

from __future__ import annotations

from bisect import bisect_right
from dataclasses import dataclass


@dataclass(frozen=True, slots=True, order=True)
class LinePosition:
    """Zero-based line and character position."""

    line: int
    character: int


@dataclass(frozen=True, slots=True)
class LineSpan:
    """Single-line span: `start_char` and `end_char` are columns on `line`."""

    line: int
    start_char: int
    end_char: int

    @property
    def start(self) -> LinePosition:
        return LinePosition(self.line, self.start_char)

    @property
    def end(self) -> LinePosition:
        return LinePosition(self.line, self.end_char)

    def contains_character(self, line: int, character: int) -> bool:
        """Inclusive on both ends, so a cursor right after the last character still hits."""
        return self.line == line and self.start_char <= character <= self.end_char


class LineIndex:
    """Precomputed table of line starts for one text.

    Lines break on `\\n` only; a `\\r` before it stays part of the previous line.
    """

    __slots__ = ("_line_starts", "_length")

    def __init__(self, text: str) -> None:
        starts = [0]
        position = text.find("\n")
        while position != -1:
            starts.append(position + 1)
            position = text.find("\n", position + 1)
        self._line_starts = starts
        self._length = len(text)

    def line_start(self, line: int) -> int:
        return self._line_starts[line]

    def position(self, offset: int) -> LinePosition:
        if offset < 0 or offset > self._length:
            raise ValueError(f"Offset {offset} outside text of length {self._length}")
        line = bisect_right(self._line_starts, offset) - 1
        return LinePosition(line, offset - self._line_starts[line])

