"""Exception hierarchy for the fixread reader.

Every failure raised by the text, pagination and search layers is
recoverable: callers keep their previous state and report the problem.
"""

from __future__ import annotations


class FixreadError(Exception):
    """Base class for all fixread errors."""


class InvalidViewport(FixreadError, ValueError):
    """Raised when a viewport has fewer than one column or one row."""

    def __init__(self, columns: int, rows: int) -> None:
        super().__init__(f"Viewport must be at least 1x1, got {columns}x{rows}")
        self.columns = columns
        self.rows = rows


class IndexOutOfRange(FixreadError, IndexError):
    """Raised when a page, occurrence or text index is out of bounds."""

    def __init__(self, index: int, length: int, what: str = "index") -> None:
        super().__init__(f"{what} {index} out of range for length {length}")
        self.index = index
        self.length = length


class NoMatch(FixreadError, LookupError):
    """Raised when a search pattern does not occur in the text."""

    def __init__(self, pattern: str) -> None:
        super().__init__(f"Pattern not found: {pattern}")
        self.pattern = pattern


class InvalidInsertionIndex(FixreadError, IndexError):
    """Raised when text is inserted at or past the end of the buffer."""

    def __init__(self, index: int, length: int) -> None:
        super().__init__(
            f"Cannot insert at {index}: position must be below buffer length {length}"
        )
        self.index = index
        self.length = length
