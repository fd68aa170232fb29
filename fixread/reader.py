"""Main reader controller: event loop, resize handling and drawing."""

import logging
import os
import sys
import select
import signal
import termios
from typing import Optional

from .commands import CommandRegistry
from .constants import ReaderConstants
from .fixation import EmphasisStyle
from .keyboard import KeyboardHandler, KeyEvent, KeyType
from .loader import load_text
from .pagination import Viewport
from .session import ReadingSession, SearchMode
from .terminal import TerminalInterface
from .text import CodepointText
from .view import PageView

logger = logging.getLogger(__name__)


class Reader:
    """Full-screen pager showing one document with fixation emphasis."""

    def __init__(self, text: Optional[CodepointText] = None,
                 style: EmphasisStyle = EmphasisStyle.PREFIX,
                 terminal: Optional[TerminalInterface] = None):
        self.terminal = terminal or TerminalInterface()
        self.keyboard = KeyboardHandler(self.terminal)
        self.command_registry = CommandRegistry()
        self.text = text if text is not None else CodepointText()
        self.style = style
        self.session: Optional[ReadingSession] = None
        self.filename: Optional[str] = None
        self.running = False
        self.error_mode = False  # True when the terminal is too small
        # Create pipe for resize signaling
        self._resize_pipe_r, self._resize_pipe_w = os.pipe()

    def load_file(self, filename: str) -> None:
        """Load a document, replacing the current one."""
        self.text = load_text(filename)
        self.filename = filename
        self.session = None

    def viewport(self) -> Viewport:
        return Viewport(self.terminal.width, self.terminal.height)

    def _terminal_too_small(self) -> bool:
        return (self.terminal.width < ReaderConstants.MIN_TERMINAL_WIDTH
                or self.terminal.term.height < ReaderConstants.MIN_TERMINAL_HEIGHT)

    def _handle_resize(self, signum, frame):
        """Handle terminal resize signal."""
        del signum, frame  # Unused
        os.write(self._resize_pipe_w, ReaderConstants.RESIZE_PIPE_MARKER)

    def _drain_resize_pipe(self) -> int:
        """Consume a burst of resize markers; returns how many were read."""
        count = len(os.read(self._resize_pipe_r, 1024))
        while True:
            ready, _, _ = select.select([self._resize_pipe_r], [], [],
                                        ReaderConstants.RESIZE_SETTLE_DELAY)
            if not ready:
                return count
            count += len(os.read(self._resize_pipe_r, 1024))

    def apply_resize(self) -> None:
        """Repaginate for the current terminal size."""
        if self._terminal_too_small():
            return
        viewport = self.viewport()
        if self.session is None:
            # No earlier layout to fall back to: an invalid size is fatal here
            self.session = ReadingSession(self.text, viewport, self.style)
            logger.info("Opened %s with %d page(s)", self.filename or "<text>",
                        self.session.pages.page_count)
        elif self.session.pages.viewport != viewport:
            self.session.resize(viewport)
        self.terminal.invalidate_frame()

    def run(self):
        """Run the main reader loop."""
        self.terminal.setup()
        self.running = True
        original_winch_handler = signal.signal(signal.SIGWINCH, self._handle_resize)

        try:
            with self.terminal.term.cbreak():
                old_settings = None
                try:
                    # Disable flow control so Ctrl-Q reaches us
                    old_settings = termios.tcgetattr(sys.stdin)
                    new_settings = list(old_settings)
                    new_settings[0] &= ~(termios.IXON | termios.IXOFF)
                    termios.tcsetattr(sys.stdin, termios.TCSANOW, new_settings)
                except (termios.error, AttributeError, OSError):
                    old_settings = None

                self.apply_resize()
                need_draw = True

                while self.running:
                    if need_draw:
                        self._draw()
                        need_draw = False

                    ready, _, _ = select.select([0, self._resize_pipe_r], [], [])

                    if self._resize_pipe_r in ready:
                        signals = self._drain_resize_pipe()
                        logger.debug("Coalesced %d resize signal(s)", signals)
                        self.apply_resize()
                        need_draw = True
                    elif 0 in ready:
                        key_event = self.keyboard.get_key_event(timeout=0)
                        if key_event:
                            need_draw = self._handle_key_event(key_event)

                if old_settings:
                    try:
                        termios.tcsetattr(sys.stdin, termios.TCSANOW, old_settings)
                    except (termios.error, OSError):
                        logger.warning("Could not restore terminal settings")
        except KeyboardInterrupt:
            pass
        finally:
            signal.signal(signal.SIGWINCH, original_winch_handler)
            os.close(self._resize_pipe_r)
            os.close(self._resize_pipe_w)
            self.terminal.cleanup()

    def _draw(self):
        """Draw the current page and status line."""
        if self._terminal_too_small() or self.session is None:
            self.error_mode = True
            self.terminal.draw_error_message(
                ReaderConstants.TERMINAL_TOO_SMALL_MESSAGE.format(
                    ReaderConstants.MIN_TERMINAL_WIDTH, ReaderConstants.MIN_TERMINAL_HEIGHT),
                ReaderConstants.CURRENT_SIZE_MESSAGE.format(
                    self.terminal.width, self.terminal.term.height),
            )
            return
        self.error_mode = False
        view = PageView(self.session, self.terminal.width)
        view.render()
        self.terminal.update_frame(
            view.lines,
            view.styles,
            status=self.session.status_line(),
            prompt_active=self.session.mode is SearchMode.ENTERING_QUERY,
        )

    def _handle_key_event(self, key_event: KeyEvent) -> bool:
        """Handle a keyboard event.

        Returns:
            True if the screen needs to be redrawn
        """
        if self.error_mode or self.session is None:
            # Only quitting works until the terminal is big enough again
            if key_event.value == 'escape' or key_event.key_type == KeyType.CTRL and key_event.value in ('q', 'c'):
                self.running = False
            return False

        had_message = self.session.status_message is not None
        self.session.status_message = None
        changed = self.command_registry.execute(self, key_event)
        return changed or had_message
