"""Code-point addressed text buffer.

Python strings already index by code point, so ``CodepointText`` wraps a
single ``str`` and rebuilds it on every edit. Every string that enters the
buffer, and every edit result, is NFC-normalized; that keeps a composed character such as
"é" at one index no matter how the source file spelled it.
"""

from __future__ import annotations

import logging
import unicodedata
from typing import Iterable, Iterator, Mapping, Optional, Union

from .errors import IndexOutOfRange, InvalidInsertionIndex

logger = logging.getLogger(__name__)

TextLike = Union[str, "CodepointText"]


def normalize(text: str) -> str:
    """Return the canonical composition (NFC) of ``text``."""
    return unicodedata.normalize("NFC", text)


class CodepointText:
    """Mutable sequence of Unicode code points with search and edit helpers.

    Indices are code-point offsets. Ranges passed as ``(start, end)`` are
    inclusive on both sides, matching the page and occurrence spans built
    on top of this buffer.
    """

    __slots__ = ("_text",)

    def __init__(self, text: TextLike = "") -> None:
        self._text = self._coerce(text)

    @classmethod
    def _from_normalized(cls, text: str) -> "CodepointText":
        obj = cls.__new__(cls)
        obj._text = text
        return obj

    @staticmethod
    def _coerce(value: TextLike) -> str:
        if isinstance(value, CodepointText):
            return value._text
        return normalize(value)

    # --- Sequence protocol ---

    def __len__(self) -> int:
        return len(self._text)

    def __iter__(self) -> Iterator[str]:
        return iter(self._text)

    def __getitem__(self, key):
        if isinstance(key, slice):
            return self._from_normalized(self._text[key])
        return self._text[key]

    def __str__(self) -> str:
        return self._text

    def __repr__(self) -> str:
        return f"CodepointText({self._text!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, CodepointText):
            return self._text == other._text
        if isinstance(other, str):
            return self._text == normalize(other)
        return NotImplemented

    # Mutable, so not hashable
    __hash__ = None  # type: ignore[assignment]

    def copy(self) -> "CodepointText":
        return self._from_normalized(self._text)

    def substring(self, start: int, length: int) -> "CodepointText":
        """Return up to ``length`` code points starting at ``start``.

        Runs past the end are clipped rather than raising.
        """
        return self._from_normalized(self._text[start:start + length])

    def slice(self, start: int, end: int) -> "CodepointText":
        """Return the inclusive range ``[start, end]``."""
        return self._from_normalized(self._text[start:end + 1])

    # --- Searching ---

    def find(self, pattern: TextLike, start: int = 0, end: Optional[int] = None) -> Optional[int]:
        """Return the index of the first match lying inside ``[start, end]``.

        Args:
            pattern: Text to look for, compared code point by code point.
            start: First index a match may start at.
            end: Last index a match may cover; defaults to the last index.

        Returns:
            The match index, or None for an empty buffer, an empty pattern,
            a pattern longer than the range, or no match.

        Raises:
            IndexOutOfRange: If ``start`` or ``end`` is outside the buffer
                or ``end`` precedes ``start``.
        """
        length = len(self._text)
        if length == 0:
            return None
        if start < 0 or start >= length:
            raise IndexOutOfRange(start, length, "start")
        if end is None:
            end = length - 1
        elif end >= length or end < start:
            raise IndexOutOfRange(end, length, "end")
        needle = self._coerce(pattern)
        if not needle or len(needle) > end - start + 1:
            return None
        index = self._text.find(needle, start, end + 1)
        return index if index >= 0 else None

    def _scan(self, needle: str) -> list[int]:
        # Resumes after each match, so matches never overlap
        matches: list[int] = []
        position = 0
        while position < len(self._text):
            index = self.find(needle, position)
            if index is None:
                break
            matches.append(index)
            position = index + len(needle)
        return matches

    def find_all(self, pattern: TextLike) -> list[int]:
        """Return the start of every non-overlapping match, left to right.

        "aaaa" searched for "aa" yields [0, 2], never [0, 1, 2].
        """
        needle = self._coerce(pattern)
        if not needle:
            return []
        return self._scan(needle)

    def contains(self, pattern: TextLike) -> bool:
        return self.find(pattern) is not None

    def startswith(self, pattern: TextLike) -> bool:
        return self._text.startswith(self._coerce(pattern))

    def endswith(self, pattern: TextLike) -> bool:
        return self._text.endswith(self._coerce(pattern))

    # --- Editing ---

    def _splice(self, text: str) -> None:
        # A fragment starting with a combining mark can compose with the
        # code point before the seam
        self._text = normalize(text)

    def append(self, text: TextLike) -> None:
        self._splice(self._text + self._coerce(text))

    def prepend(self, text: TextLike) -> None:
        self._splice(self._coerce(text) + self._text)

    def insert(self, text: TextLike, at_index: int) -> None:
        """Insert ``text`` before the code point at ``at_index``.

        The index must address an existing code point; inserting at
        ``len(self)`` is rejected (use ``append``).

        Raises:
            InvalidInsertionIndex: If ``at_index`` is negative or not below
                the buffer length.
        """
        length = len(self._text)
        if at_index < 0 or at_index >= length:
            raise InvalidInsertionIndex(at_index, length)
        self._splice(self._text[:at_index] + self._coerce(text) + self._text[at_index:])

    def replace(self, pattern: TextLike, replacement: TextLike,
                start: int = 0, end: Optional[int] = None) -> Optional[int]:
        """Replace the first match inside ``[start, end]``.

        Returns:
            The index where the replacement begins, or None if nothing matched.
        """
        needle = self._coerce(pattern)
        index = self.find(needle, start, end)
        if index is None:
            return None
        self._splice(self._text[:index]
                     + self._coerce(replacement)
                     + self._text[index + len(needle):])
        return index

    def replace_all(self, pattern: TextLike, replacement: TextLike) -> Optional[int]:
        """Replace every non-overlapping match in one rebuild.

        Returns:
            The number of replacements, or None if the pattern never occurs.
        """
        needle = self._coerce(pattern)
        if not needle:
            return None
        matches = self._scan(needle)
        if not matches:
            return None
        substitute = self._coerce(replacement)
        pieces: list[str] = []
        last = 0
        for index in matches:
            pieces.append(self._text[last:index])
            pieces.append(substitute)
            last = index + len(needle)
        pieces.append(self._text[last:])
        self._splice("".join(pieces))
        logger.debug("Replaced %d occurrence(s) of %r", len(matches), needle)
        return len(matches)

    def map_replace(self, mapping: Mapping[str, str]) -> dict[str, int]:
        """Apply ``replace_all`` for each pair, in mapping order.

        Returns:
            Replacement count per pattern; 0 when a pattern did not occur.
        """
        counts: dict[str, int] = {}
        for pattern, replacement in mapping.items():
            counts[pattern] = self.replace_all(pattern, replacement) or 0
        return counts

    def split(self, delimiter: TextLike) -> list["CodepointText"]:
        """Return the non-empty pieces between delimiter occurrences.

        The delimiter is located with the same non-overlapping scan as
        ``find_all``. If the delimiter never occurs the result is empty.
        """
        needle = self._coerce(delimiter)
        if not needle:
            return []
        matches = self._scan(needle)
        pieces: list[CodepointText] = []
        if not matches:
            return pieces
        last = 0
        for index in matches + [len(self._text)]:
            piece = self._text[last:index]
            if piece:
                pieces.append(self._from_normalized(piece))
            last = index + len(needle)
        return pieces

    def trim_start(self) -> None:
        self._text = self._text.lstrip()

    def trim_end(self) -> None:
        self._text = self._text.rstrip()

    def trim(self) -> None:
        self._text = self._text.strip()

    @classmethod
    def join(cls, parts: Iterable[TextLike]) -> "CodepointText":
        """Concatenate ``parts`` into a new buffer."""
        return cls("".join(cls._coerce(part) for part in parts))
