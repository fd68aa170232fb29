"""Split a text buffer into screen-sized pages.

A page is an inclusive range of code-point indices. The page table for a
buffer always partitions ``[0, len - 1]``: pages are ascending, touch end
to start, and never overlap.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import NamedTuple, Optional

from .errors import IndexOutOfRange, InvalidViewport
from .text import CodepointText

logger = logging.getLogger(__name__)


class Viewport(NamedTuple):
    """Visible area of the renderer, in terminal cells."""
    columns: int
    rows: int


@dataclass(frozen=True)
class Page:
    start_index: int
    end_index: int

    def __contains__(self, index: int) -> bool:
        return self.start_index <= index <= self.end_index

    def __len__(self) -> int:
        return self.end_index - self.start_index + 1


def _page_boundaries(text: CodepointText, viewport: Viewport) -> list[int]:
    """Return the index ending each page except the last one.

    A boundary normally falls on the code point that ends the last row.
    A newline that ends the last row and is also the final code point
    cannot end its page with nothing after it, so the page ends just
    before it and the newline becomes a page of its own.
    """
    last_column = viewport.columns - 1
    last_row = viewport.rows - 1
    last_index = len(text) - 1
    boundaries: list[int] = []
    column = 0
    row = 0
    page_start = 0
    for i, ch in enumerate(text):
        if ch != "\n" and column < last_column:
            column += 1
            continue
        # Either a newline or a code point filling the last column: the row ends here
        column = 0
        if row == last_row:
            row = 0
            if i < last_index:
                boundaries.append(i)
            elif ch == "\n" and i - 1 >= page_start:
                boundaries.append(i - 1)
            page_start = i + 1
        else:
            row += 1
    return boundaries


class PageTable:
    """Ordered pages of one buffer plus the page currently on screen."""

    def __init__(self, pages: list[Page], viewport: Viewport):
        self.pages = pages
        self.viewport = viewport
        self._current = 0

    @property
    def page_count(self) -> int:
        return len(self.pages)

    @property
    def current_page_number(self) -> int:
        return self._current

    @property
    def current_page(self) -> Optional[Page]:
        """The page on screen, or None for an empty buffer."""
        if not self.pages:
            return None
        return self.pages[self._current]

    def page(self, page_number: int) -> Page:
        if not 0 <= page_number < len(self.pages):
            raise IndexOutOfRange(page_number, len(self.pages), "page")
        return self.pages[page_number]

    def find_page_for_index(self, index: int) -> int:
        """Return the number of the first page containing ``index``.

        Falls back to page 0 when no page matches, which can only happen
        for an index outside the buffer.
        """
        for page_number, page in enumerate(self.pages):
            if index in page:
                return page_number
        return 0

    def set_current(self, page_number: int) -> bool:
        """Make ``page_number`` current; returns False and keeps state if out of range."""
        if 0 <= page_number < len(self.pages):
            self._current = page_number
            return True
        return False

    def next_page(self) -> bool:
        if self._current < len(self.pages) - 1:
            self._current += 1
            return True
        return False

    def previous_page(self) -> bool:
        if self._current > 0:
            self._current -= 1
            return True
        return False

    def repaginate(self, text: CodepointText, viewport: Viewport) -> "PageTable":
        """Build a table for a new viewport, keeping the reading position.

        The new current page is the one holding the first code point of
        the old current page.
        """
        table = paginate(text, viewport)
        page = self.current_page
        if page is not None:
            table.set_current(table.find_page_for_index(page.start_index))
        return table

    def __iter__(self):
        return iter(self.pages)

    def __len__(self) -> int:
        return len(self.pages)


def paginate(text: CodepointText, viewport: Viewport) -> PageTable:
    """Tile ``text`` into pages that fit ``viewport``.

    Each visual row holds up to ``viewport.columns`` code points; a newline
    ends its row early. A page holds ``viewport.rows`` rows. The code point
    that ends the last row of a page ends the page, and the next code
    point starts the following one.

    Raises:
        InvalidViewport: If either dimension is below 1.
    """
    columns, rows = viewport
    if columns < 1 or rows < 1:
        raise InvalidViewport(columns, rows)
    viewport = Viewport(columns, rows)
    if len(text) == 0:
        return PageTable([], viewport)

    pages: list[Page] = []
    start = 0
    for boundary in _page_boundaries(text, viewport):
        pages.append(Page(start, boundary))
        start = boundary + 1
    pages.append(Page(start, len(text) - 1))
    logger.debug("Paginated %d code points into %d page(s) for %dx%d",
                 len(text), len(pages), columns, rows)
    return PageTable(pages, viewport)
