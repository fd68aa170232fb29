"""Test the reader controller with a mocked terminal."""

import os
import termios
from unittest.mock import MagicMock, patch
import pytest
from fixread import CodepointText, Viewport
from fixread.keyboard import KeyEvent, KeyType
from fixread.reader import Reader
from fixread.session import SearchMode


def make_terminal(width=20, height=5):
    terminal = MagicMock()
    resize_terminal(terminal, width, height)
    return terminal


def resize_terminal(terminal, width, height):
    terminal.width = width
    terminal.height = height - 1
    terminal.term.width = width
    terminal.term.height = height


def close_pipes(reader):
    for fd in (reader._resize_pipe_r, reader._resize_pipe_w):
        try:
            os.close(fd)
        except OSError:
            pass


@pytest.fixture
def terminal():
    return make_terminal()


@pytest.fixture
def reader(terminal):
    reader = Reader(text=CodepointText("the quick brown fox\njumps over the lazy dog\n" * 10),
                    terminal=terminal)
    yield reader
    close_pipes(reader)


def test_apply_resize_opens_session(reader, terminal):
    reader.apply_resize()
    assert reader.session is not None
    assert reader.session.pages.viewport == Viewport(20, 4)
    terminal.invalidate_frame.assert_called()


def test_draw_sends_page_and_status(reader, terminal):
    reader.apply_resize()
    reader._draw()
    assert not reader.error_mode
    args, kwargs = terminal.update_frame.call_args
    lines, styles = args
    assert lines[0] == "the quick brown fox"
    assert len(styles[0]) == len(lines[0])
    assert kwargs["status"].startswith("Page 1 of ")
    assert kwargs["prompt_active"] is False


def test_draw_shows_prompt_while_typing(reader, terminal):
    reader.apply_resize()
    reader._handle_key_event(KeyEvent(KeyType.REGULAR, '/', '/'))
    reader._handle_key_event(KeyEvent(KeyType.REGULAR, 'd', 'd'))
    reader._draw()
    _, kwargs = terminal.update_frame.call_args
    assert kwargs["status"] == "/ d"
    assert kwargs["prompt_active"] is True


def test_resize_keeps_reading_position(reader, terminal):
    """Test that a resize repaginates and keeps the same text on screen."""
    reader.apply_resize()
    reader.session.go_to_page(3)
    first_index = reader.session.current_page.start_index

    resize_terminal(terminal, 40, 8)
    reader.apply_resize()
    assert reader.session.pages.viewport == Viewport(40, 7)
    assert first_index in reader.session.current_page


def test_same_size_does_not_repaginate(reader):
    reader.apply_resize()
    pages = reader.session.pages
    reader.apply_resize()
    assert reader.session.pages is pages


def test_too_small_terminal_enters_error_mode(reader, terminal):
    resize_terminal(terminal, 5, 5)
    reader.apply_resize()
    assert reader.session is None
    reader._draw()
    assert reader.error_mode
    terminal.draw_error_message.assert_called_once()
    terminal.update_frame.assert_not_called()

    # Navigation is ignored, Esc still quits
    reader.running = True
    assert not reader._handle_key_event(KeyEvent(KeyType.REGULAR, 'a', 'a'))
    assert reader.running
    reader._handle_key_event(KeyEvent(KeyType.SPECIAL, 'escape', '<ESC>'))
    assert not reader.running


def test_recovering_from_small_terminal(reader, terminal):
    resize_terminal(terminal, 5, 5)
    reader.apply_resize()
    reader._draw()
    resize_terminal(terminal, 30, 6)
    reader.apply_resize()
    reader._draw()
    assert not reader.error_mode
    terminal.update_frame.assert_called_once()


def test_status_message_cleared_by_next_key(reader):
    reader.apply_resize()
    reader.session.status_message = "Pattern not found: zz"
    # An unbound key still redraws to clear the message
    assert reader._handle_key_event(KeyEvent(KeyType.REGULAR, 'z', 'z'))
    assert reader.session.status_message is None
    assert not reader._handle_key_event(KeyEvent(KeyType.REGULAR, 'z', 'z'))


def test_resize_signals_are_coalesced(reader):
    for _ in range(3):
        reader._handle_resize(None, None)
    assert reader._drain_resize_pipe() == 3


def test_load_file_replaces_document(reader, tmp_path):
    path = tmp_path / "doc.txt"
    path.write_text("new text", encoding="utf-8")
    reader.apply_resize()
    reader.load_file(str(path))
    assert reader.session is None
    assert reader.filename == str(path)
    reader.apply_resize()
    assert reader.session.current_slice() == "new text"


def test_run_loop_until_quit(terminal):
    """Test the event loop with keys from a mocked curtsies stream."""
    terminal.get_key.side_effect = ['a', '/', 'f', 'o', 'x', '<Ctrl-j>', '<Ctrl-q>']
    reader = Reader(text=CodepointText("one\ntwo\nthree\nfour\nfive fox\n"), terminal=terminal)
    with patch("fixread.reader.select.select", return_value=([0], [], [])), \
            patch("fixread.reader.termios.tcgetattr", side_effect=termios.error):
        reader.run()

    terminal.setup.assert_called_once()
    terminal.cleanup.assert_called_once()
    assert not reader.running
    assert reader.session.mode is SearchMode.BROWSING_RESULTS
    assert reader.session.search.pattern == "fox"
    _, kwargs = terminal.update_frame.call_args
    assert "Match 1 of 1 for 'fox'" in kwargs["status"]
