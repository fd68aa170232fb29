"""Test frame composition against a fake blessed terminal."""

from unittest.mock import Mock
import pytest
from fixread.terminal import TerminalInterface


@pytest.fixture
def term():
    term = Mock()
    term.width = 6
    term.height = 3
    term.normal = "<n>"
    term.bold = "<b>"
    term.green_on_black = "<t>"
    term.blue_on_white = "<m>"
    term.bright_black_on_white = "<c>"
    term.white_on_blue = "<p>"
    term.home = "<home>"
    term.clear = "<clear>"
    term.hide_cursor = "<hide>"
    term.normal_cursor = "<show>"
    term.move = lambda y, x: f"<{y},{x}>"
    return term


def test_height_excludes_status_row(term):
    assert TerminalInterface(term).height == 2
    assert TerminalInterface(term).width == 6


def test_compose_line_styles_runs(term):
    interface = TerminalInterface(term)
    line = interface._compose_display_line("ab cd", [1, 0, 0, 4, 2])
    assert line == "<n><t><b>a<n><t>b <n><c><b>c<n><m>d<n><t> <n>"


def test_compose_line_truncates_to_width(term):
    interface = TerminalInterface(term)
    assert interface._compose_display_line("abcdefgh") == "<n><t>abcdef<n>"


def test_update_frame_repaints_only_changes(term, capsys):
    """Test that an unchanged frame writes nothing but the cursor state."""
    interface = TerminalInterface(term)
    interface.update_frame(["abc", "def"], status="Page 1 of 2")
    first = capsys.readouterr().out
    assert first.startswith("<home><n><clear>")
    assert "<0,0>" in first and "<1,0>" in first and "<2,0>Page 1" in first

    interface.update_frame(["abc", "def"], status="Page 1 of 2")
    assert capsys.readouterr().out == "<hide>"

    interface.update_frame(["abc", "xyz"], status="Page 1 of 2")
    out = capsys.readouterr().out
    assert "<0,0>" not in out
    assert "<1,0>" in out


def test_prompt_shows_cursor_after_query(term, capsys):
    interface = TerminalInterface(term)
    interface.update_frame(["abc"], status="/ ab", prompt_active=True)
    out = capsys.readouterr().out
    assert "<p>/ ab  <n>" in out
    assert out.endswith("<2,4><show>")


def test_error_message_forces_full_repaint(term, capsys):
    interface = TerminalInterface(term)
    interface.update_frame(["abc"])
    interface.draw_error_message("Too small", "6x3")
    capsys.readouterr()
    interface.update_frame(["abc"])
    assert capsys.readouterr().out.startswith("<home><n><clear>")


def test_get_key_without_input_returns_none(term):
    assert TerminalInterface(term).get_key(timeout=0) is None
