"""Reading session state for the fixread reader.

This module ties the text buffer, the page table and the search index
together and applies navigation commands to them. Every failed request
leaves the previous state in place and records a status message instead.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Optional

from .constants import ReaderConstants
from .errors import InvalidViewport, NoMatch
from .fixation import EmphasisStyle, WordSpan, segment
from .pagination import Page, Viewport, paginate
from .search import SearchIndex
from .text import CodepointText

logger = logging.getLogger(__name__)


class SearchMode(Enum):
    NOT_SEARCHING = "not_searching"
    ENTERING_QUERY = "entering_query"
    BROWSING_RESULTS = "browsing_results"


class ReadingSession:
    """Owns one document and the reader's position in it.

    Args:
        text: The normalized document.
        viewport: Initial text area size. An invalid size here is fatal
            because there is no earlier page table to fall back to.
        style: How fixation anchors are painted.
    """

    def __init__(self, text: CodepointText, viewport: Viewport,
                 style: EmphasisStyle = EmphasisStyle.PREFIX):
        self.text = text
        self.style = style
        self.pages = paginate(text, viewport)
        self.search: Optional[SearchIndex] = None
        self.mode = SearchMode.NOT_SEARCHING
        self.query = ""
        self.status_message: Optional[str] = None

    @property
    def current_page(self) -> Optional[Page]:
        return self.pages.current_page

    def current_slice(self) -> str:
        """Return the code points of the page on screen."""
        page = self.current_page
        if page is None:
            return ""
        return str(self.text.slice(page.start_index, page.end_index))

    def word_spans(self) -> list[WordSpan]:
        return segment(self.current_slice())

    # --- Layout ---

    def resize(self, viewport: Viewport) -> bool:
        """Repaginate for a new viewport, staying on the same text."""
        try:
            self.pages = self.pages.repaginate(self.text, viewport)
        except InvalidViewport as e:
            logger.warning("Ignoring resize: %s", e)
            self.status_message = str(e)
            return False
        logger.debug("Resized to %dx%d, now on page %d of %d", viewport.columns, viewport.rows,
                     self.pages.current_page_number + 1, self.pages.page_count)
        return True

    # --- Paging ---

    def next_page(self) -> bool:
        return self.pages.next_page()

    def previous_page(self) -> bool:
        return self.pages.previous_page()

    def go_to_page(self, page_number: int) -> bool:
        if not self.pages.set_current(page_number):
            self.status_message = f"No page {page_number + 1}"
            return False
        return True

    def _show_index(self, index: int) -> None:
        self.pages.set_current(self.pages.find_page_for_index(index))

    # --- Searching ---

    def enter_search(self) -> None:
        self.mode = SearchMode.ENTERING_QUERY
        self.query = ""

    def type_query(self, chars: str) -> None:
        self.query += chars

    def erase_query(self) -> None:
        self.query = self.query[:-1]

    def submit_search(self) -> bool:
        """Search for the typed query and jump to the next match on or after this page.

        An empty query simply leaves search mode.
        """
        if not self.query:
            self.exit_search()
            return False
        try:
            search = SearchIndex.find(self.text, self.query)
        except NoMatch as e:
            logger.info("%s", e)
            self.exit_search()
            self.status_message = ReaderConstants.PATTERN_NOT_FOUND_MESSAGE.format(e.pattern)
            return False
        page = self.current_page
        occurrence = search.nearest_forward(page.start_index if page else 0)
        self.search = search
        self.mode = SearchMode.BROWSING_RESULTS
        self._show_index(occurrence.start_index)
        return True

    def exit_search(self) -> None:
        self.mode = SearchMode.NOT_SEARCHING
        self.search = None
        self.query = ""

    def next_occurrence(self) -> bool:
        if self.mode is not SearchMode.BROWSING_RESULTS or self.search is None:
            return False
        if not self.search.next():
            return False
        self._show_index(self.search.current.start_index)
        return True

    def previous_occurrence(self) -> bool:
        if self.mode is not SearchMode.BROWSING_RESULTS or self.search is None:
            return False
        if not self.search.previous():
            return False
        self._show_index(self.search.current.start_index)
        return True

    def is_match(self, index: int) -> bool:
        return self.search is not None and self.search.is_inside(index)

    def is_current_match(self, index: int) -> bool:
        return self.search is not None and self.search.is_inside_current(index)

    # --- Status ---

    def status_line(self) -> str:
        if self.mode is SearchMode.ENTERING_QUERY:
            return ReaderConstants.SEARCH_PROMPT + self.query
        if self.status_message:
            return self.status_message
        if not self.pages.page_count:
            return ReaderConstants.EMPTY_DOCUMENT_MESSAGE
        status = ReaderConstants.PAGE_STATUS.format(self.pages.current_page_number + 1,
                                                   self.pages.page_count)
        if self.mode is SearchMode.BROWSING_RESULTS and self.search is not None:
            status += "  " + ReaderConstants.MATCH_STATUS.format(
                self.search.cursor + 1, len(self.search), self.search.pattern)
        return status
