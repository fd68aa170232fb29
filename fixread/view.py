"""Lay out the current page as styled terminal lines."""

from __future__ import annotations

from .fixation import emphasis_mask
from .session import ReadingSession

STYLE_BOLD = 1
STYLE_MATCH = 2
STYLE_CURRENT_MATCH = 4


def wrap_slice(chars: str, num_columns: int) -> tuple[list[str], list[list[int]]]:
    """Break a page slice into visual lines.

    Uses the same rules as the paginator: a row ends after ``num_columns``
    code points or at a newline, whichever comes first. Newlines are not
    drawn.

    Returns (lines, cells) where cells[y][x] is the slice index of the code
    point drawn at column x of line y.
    """
    lines: list[str] = []
    cells: list[list[int]] = []
    line: list[str] = []
    line_cells: list[int] = []
    for i, ch in enumerate(chars):
        if ch == "\n":
            lines.append("".join(line))
            cells.append(line_cells)
            line, line_cells = [], []
            continue
        line.append(ch)
        line_cells.append(i)
        if len(line) == num_columns:
            lines.append("".join(line))
            cells.append(line_cells)
            line, line_cells = [], []
    if line:
        lines.append("".join(line))
        cells.append(line_cells)
    return (lines, cells)


class PageView:
    """Styled lines for the page a session is showing.

    ``styles`` mirrors ``lines`` with one bitmask per column:
    1 = fixation bold, 2 = search match, 4 = the selected match.
    """

    def __init__(self, session: ReadingSession, num_columns: int):
        self.session = session
        self.num_columns = num_columns
        self.lines: list[str] = []
        self.styles: list[list[int]] = []

    def render(self) -> None:
        session = self.session
        page = session.current_page
        if page is None:
            self.lines, self.styles = [], []
            return
        chars = session.current_slice()
        bold = emphasis_mask(session.word_spans(), len(chars), session.style)
        self.lines, cells = wrap_slice(chars, self.num_columns)
        self.styles = []
        for line_cells in cells:
            line_styles = []
            for i in line_cells:
                flags = STYLE_BOLD if bold[i] else 0
                global_index = page.start_index + i
                if session.is_current_match(global_index):
                    flags |= STYLE_CURRENT_MATCH
                elif session.is_match(global_index):
                    flags |= STYLE_MATCH
                line_styles.append(flags)
            self.styles.append(line_styles)
