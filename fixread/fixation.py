"""Word segmentation and fixation anchors for bionic-reading emphasis."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable

import regex

# Unicode Alphabetic covers combining vowel signs that str.isalnum rejects
WORD_RUN = regex.compile(r"[\p{Alphabetic}\p{N}]+")


class EmphasisStyle(Enum):
    """Which part of a word gets painted bold."""
    PREFIX = "prefix"  # Word start through the anchor
    ANCHOR = "anchor"  # Only the anchor code points


@dataclass(frozen=True)
class WordSpan:
    start: int
    end: int  # exclusive
    emphasis_start: int
    emphasis_end: int  # inclusive
    numeric: bool = False

    def fixation_range(self, style: EmphasisStyle = EmphasisStyle.PREFIX) -> tuple[int, int]:
        """Return the inclusive range painted bold for ``style``."""
        if style is EmphasisStyle.ANCHOR:
            return (self.emphasis_start, self.emphasis_end)
        if self.numeric:
            return (self.start, self.end - 1)
        return (self.start, self.emphasis_start)


def emphasis_range(start: int, end: int) -> tuple[int, int]:
    """Return the inclusive anchor around the middle of word ``[start, end)``.

    One-letter words anchor on themselves. Odd words of five or more
    letters anchor on the middle letter and the one after it; everything
    else anchors on the two letters either side of the midpoint.
    """
    length = end - start
    half = length // 2
    if length == 1:
        return (start, start)
    if length >= 5 and length % 2 == 1:
        return (start + half, start + half + 1)
    return (start + half - 1, start + half)


def _make_span(chars: str, start: int, end: int) -> WordSpan:
    if chars[start].isdecimal():
        # Numbers are emphasized in full
        return WordSpan(start, end, start, end - 1, numeric=True)
    emphasis_start, emphasis_end = emphasis_range(start, end)
    return WordSpan(start, end, emphasis_start, emphasis_end)


def segment(chars: Iterable[str]) -> list[WordSpan]:
    """Split a page slice into words with their emphasis anchors.

    A word is a maximal run of Alphabetic or Numeric code points, so
    vowel signs in scripts such as Devanagari stay inside their word;
    everything else separates words. Span indices are relative to the
    slice.
    """
    text = "".join(chars)
    return [_make_span(text, m.start(), m.end()) for m in WORD_RUN.finditer(text)]


def emphasis_mask(spans: list[WordSpan], length: int,
                  style: EmphasisStyle = EmphasisStyle.PREFIX) -> list[bool]:
    """Return a per-code-point flag telling whether it is painted bold."""
    mask = [False] * length
    for span in spans:
        first, last = span.fixation_range(style)
        for i in range(first, last + 1):
            mask[i] = True
    return mask
