"""Pattern-based discovery of translation keys in arbitrary source text."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable

import structlog

from i18nlens.text import LineIndex, LineSpan, TextRange
from i18nlens.usage.patterns import DEFAULT_FUNCTION_PATTERNS

logger = structlog.get_logger()


@dataclass(frozen=True, slots=True)
class FoundKey:
    """One usage site: the key text and where it sits in the document.

    Offsets index the whole text; `line`, `start_char` and `end_char` are
    0-based and `end_char` is exclusive.
    """

    key: str
    start_offset: int
    end_offset: int
    line: int
    start_char: int
    end_char: int

    @property
    def range(self) -> TextRange:
        return TextRange.from_offsets(self.start_offset, self.end_offset)

    @property
    def span(self) -> LineSpan:
        return LineSpan(line=self.line, start_char=self.start_char, end_char=self.end_char)


class KeyFinder:
    """Finds translation keys using regular expressions whose group 1 is the key."""

    __slots__ = ("_patterns",)

    def __init__(self, patterns: Iterable[str]) -> None:
        compiled: list[re.Pattern[str]] = []
        for pattern in patterns:
            try:
                compiled.append(re.compile(pattern))
            except re.error as exc:
                logger.warning("key_pattern_invalid", pattern=pattern, error=str(exc))
        self._patterns = tuple(compiled)

    @classmethod
    def default(cls) -> KeyFinder:
        return cls(DEFAULT_FUNCTION_PATTERNS)

    @property
    def patterns(self) -> tuple[re.Pattern[str], ...]:
        return self._patterns

    def find_keys(self, text: str) -> list[FoundKey]:
        """All usage sites in `text`, ordered by start offset.

        Matches from every pattern are pooled; when several land on the same
        start offset, the match from the earliest pattern is kept.
        """
        matches: list[tuple[int, int, str]] = []
        for pattern in self._patterns:
            for match in pattern.finditer(text):
                if match.lastindex is None or match.group(1) is None:
                    continue
                matches.append((match.start(1), match.end(1), match.group(1)))

        matches.sort(key=lambda item: item[0])

        line_index = LineIndex(text)
        found: list[FoundKey] = []
        previous_start: int | None = None
        for start, end, key in matches:
            if start == previous_start:
                continue
            previous_start = start
            position = line_index.position(start)
            line_start = line_index.line_start(position.line)
            found.append(
                FoundKey(
                    key=key,
                    start_offset=start,
                    end_offset=end,
                    line=position.line,
                    start_char=position.character,
                    end_char=end - line_start,
                )
            )
        return found

    def find_key_at_position(self, text: str, line: int, character: int) -> FoundKey | None:
        """First key on `line` whose span contains `character`, ends inclusive."""
        for found_key in self.find_keys(text):
            if found_key.span.contains_character(line, character):
                return found_key
        return None
