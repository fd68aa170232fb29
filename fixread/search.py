"""Occurrence index for substring search over the whole document."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from .errors import NoMatch
from .text import CodepointText, TextLike

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Occurrence:
    """Inclusive code-point span of one match."""
    start_index: int
    end_index: int

    def __contains__(self, index: int) -> bool:
        return self.start_index <= index <= self.end_index


class SearchIndex:
    """All non-overlapping matches of one pattern, with a movable cursor.

    Build one with ``SearchIndex.build`` (returns None when the pattern is
    absent) or ``SearchIndex.find`` (raises NoMatch).
    """

    def __init__(self, pattern: str, occurrences: list[Occurrence]):
        if not occurrences:
            raise NoMatch(pattern)
        self.pattern = pattern
        self.occurrences = occurrences
        self.cursor = 0

    @classmethod
    def find(cls, text: CodepointText, pattern: TextLike) -> "SearchIndex":
        needle = CodepointText(pattern)
        width = len(needle)
        occurrences = [Occurrence(start, start + width - 1) for start in text.find_all(needle)]
        logger.debug("Search for %r found %d occurrence(s)", str(needle), len(occurrences))
        return cls(str(needle), occurrences)

    @classmethod
    def build(cls, text: CodepointText, pattern: TextLike) -> Optional["SearchIndex"]:
        try:
            return cls.find(text, pattern)
        except NoMatch:
            return None

    def __len__(self) -> int:
        return len(self.occurrences)

    @property
    def current(self) -> Occurrence:
        return self.occurrences[self.cursor]

    def select(self, occurrence_number: int) -> bool:
        if 0 <= occurrence_number < len(self.occurrences):
            self.cursor = occurrence_number
            return True
        return False

    def next(self) -> bool:
        if self.cursor < len(self.occurrences) - 1:
            self.cursor += 1
            return True
        return False

    def previous(self) -> bool:
        if self.cursor > 0:
            self.cursor -= 1
            return True
        return False

    def nearest_forward(self, from_index: int) -> Occurrence:
        """Select the first occurrence starting at or after ``from_index``.

        Wraps to the first occurrence of the document when every match
        starts before ``from_index``. Moves the cursor to the result.
        """
        best: Optional[int] = None
        for number, occurrence in enumerate(self.occurrences):
            delta = occurrence.start_index - from_index
            if delta >= 0 and (best is None or delta < self.occurrences[best].start_index - from_index):
                best = number
        self.cursor = 0 if best is None else best
        return self.current

    def is_inside(self, index: int) -> bool:
        return any(index in occurrence for occurrence in self.occurrences)

    def is_inside_current(self, index: int) -> bool:
        return index in self.current
