"""Text offsets and half-open ranges, in Python string indices."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True, order=True)
class TextSize:
    """Offset or length in a text, measured in Python string indices."""

    value: int

    def __post_init__(self):
        if self.value < 0:
            raise ValueError("TextSize cannot be negative")

    @staticmethod
    def from_int(value: int) -> "TextSize":
        return TextSize(value)

    def __repr__(self) -> str:
        return f"TextSize({self.value})"


@dataclass(frozen=True, slots=True, order=True)
class TextRange:
    """
    Half-open range [start, end) in text.

    Invariant:
    - 0 <= start <= end
    """

    _start: int
    _end: int

    def __post_init__(self):
        if self._start < 0 or self._end < 0:
            raise ValueError("TextRange positions cannot be negative")
        if self._start > self._end:
            raise ValueError("TextRange invariant violated: start > end")

    @staticmethod
    def empty(offset: TextSize) -> "TextRange":
        """Create an empty TextRange at the given offset."""
        return TextRange(offset.value, offset.value)

    @staticmethod
    def from_offsets(start: int, end: int) -> "TextRange":
        """Create a TextRange from plain integer offsets (regex match spans, token cursors)."""
        return TextRange(start, end)

    @property
    def start(self) -> TextSize:
        return TextSize(self._start)

    @property
    def end(self) -> TextSize:
        return TextSize(self._end)

    def __repr__(self) -> str:
        return f"TextRange({self._start}, {self._end})"


def slice_text_range(source: str, range: TextRange) -> str:
    """Get the substring of the source text covered by the given TextRange."""
    return source[range.start.value : range.end.value]
