"""Screen output through blessed, key input through curtsies."""

import blessed
from typing import Optional
import sys
import select

from .constants import ReaderConstants


class TerminalInterface:
    """Fullscreen page display with a status row at the bottom."""

    def __init__(self, terminal: Optional[blessed.Terminal] = None):
        self.term = terminal or blessed.Terminal()
        self.is_fullscreen = False
        self._keys = None  # curtsies Input while the reader runs
        # What is on screen now, so repaints only touch changed rows
        self._screen_rows: Optional[list[str]] = None
        self._screen_status: Optional[str] = None

    def setup(self):
        """Switch to the alternate screen and start reading keys."""
        print(self.term.enter_fullscreen + self.term.hide_cursor + self.term.clear)
        self.is_fullscreen = True
        if self._keys is None:
            self._keys = self._open_key_input()

    @staticmethod
    def _open_key_input():
        from curtsies import Input  # type: ignore
        try:
            keys = Input(keynames="curtsies")
            keys.__enter__()
        except Exception:
            # No tty (pipes, CI): the reader shows the page but gets no keys
            return None
        return keys

    def cleanup(self):
        """Leave the alternate screen and give the tty back."""
        if self.is_fullscreen:
            print(self.term.normal + self.term.exit_fullscreen + self.term.normal_cursor)
            self.is_fullscreen = False
        keys, self._keys = self._keys, None
        if keys is not None:
            try:
                keys.__exit__(None, None, None)
            except Exception:
                # Restoring the tty must not hide the error that ended the loop
                pass

    def invalidate_frame(self) -> None:
        """Forget the cached frame so the next update repaints everything."""
        self._screen_rows = None
        self._screen_status = None

    def _attr(self, name: str) -> str:
        return str(getattr(self.term, name))

    def _compose_display_line(self, line: str, styles: Optional[list[int]] = None) -> str:
        """Compose a display line with fixation bold and match colors, padded to width.

        Styles is a per-column bitmask list with 1=bold, 2=match, 4=current match.
        """
        width = self.term.width
        text = line[:width].ljust(width)
        styles = (styles or [])[:width]
        styles = styles + [0] * (width - len(styles))

        out = []
        active = None
        for ch, flags in zip(text, styles):
            if flags != active:
                out.append(self.term.normal)
                if flags & 4:
                    out.append(self._attr(ReaderConstants.CURRENT_MATCH_COLOR))
                elif flags & 2:
                    out.append(self._attr(ReaderConstants.MATCH_COLOR))
                else:
                    out.append(self._attr(ReaderConstants.TEXT_COLOR))
                # The selected match is always bold so it stands out
                if flags & 1 or flags & 4:
                    out.append(self.term.bold)
                active = flags
            out.append(ch)
        out.append(self.term.normal)
        return ''.join(out)

    def update_frame(
        self,
        lines: list[str],
        styles_by_line: Optional[list[list[int]]] = None,
        status: str = "",
        prompt_active: bool = False,
    ) -> None:
        """Diff against last frame and write only changes.

        Lines below the page are blanked; the status line sits on the last row.
        """
        rows = self.height
        if self._screen_rows is None or len(self._screen_rows) != rows:
            print(self.term.home + self.term.normal + self.term.clear, end='')
            self._screen_rows = ["" for _ in range(rows)]
            self._screen_status = None

        for y in range(rows):
            line = lines[y] if y < len(lines) else ""
            style_line = styles_by_line[y] if styles_by_line and y < len(styles_by_line) else None
            new_disp = self._compose_display_line(line, style_line)
            if new_disp != self._screen_rows[y]:
                print(self.term.move(y, 0) + new_disp, end='')
                self._screen_rows[y] = new_disp

        status_text = status[:self.term.width].ljust(self.term.width)
        if prompt_active:
            status_text = self._attr(ReaderConstants.PROMPT_COLOR) + status_text + self.term.normal
        if status_text != (self._screen_status or ""):
            print(self.term.move(self.term.height - 1, 0) + status_text, end='')
            self._screen_status = status_text

        if prompt_active:
            print(self.term.move(self.term.height - 1, min(len(status), self.term.width - 1))
                  + self.term.normal_cursor, end='', flush=True)
        else:
            print(self.term.hide_cursor, end='', flush=True)

    def draw_error_message(self, message1: str, message2: str = ""):
        """Draw an error message in the center of the screen."""
        print(self.term.home + self.term.normal + self.term.clear, end='')
        center_y = self.term.height // 2
        box_width = min(max(len(message1), len(message2)) + 4, self.term.width)
        left_margin = max(0, (self.term.width - box_width) // 2)

        print(self.term.move(max(0, center_y - 1), left_margin) + message1.center(box_width)[:self.term.width], end='')
        if message2:
            print(self.term.move(center_y, left_margin) + message2.center(box_width)[:self.term.width], end='')
        print('', end='', flush=True)
        self.invalidate_frame()

    def get_key(self, timeout=None):
        """Return the next curtsies key name, or None.

        ``timeout`` None blocks; a number waits at most that many seconds.
        """
        if self._keys is None:
            return None
        if timeout is not None:
            ready, _, _ = select.select([sys.stdin], [], [], float(timeout))
            if not ready:
                return None
        return str(next(self._keys))

    @property
    def width(self):
        return self.term.width

    @property
    def height(self):
        """Rows available for text; the bottom row holds the status line."""
        return self.term.height - 1
