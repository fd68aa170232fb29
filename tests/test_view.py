"""Tests for laying out a page with fixation and match styles."""

from fixread import CodepointText, EmphasisStyle, Viewport
from fixread.session import ReadingSession
from fixread.view import PageView, wrap_slice


def test_wrap_slice_follows_page_rules():
    lines, cells = wrap_slice("abcd\nef", 3)
    assert lines == ["abc", "d", "ef"]
    assert cells == [[0, 1, 2], [3], [5, 6]]


def test_wrap_slice_full_row_then_newline():
    """Test that a newline after a full row gives an empty line."""
    lines, _ = wrap_slice("abc\nd", 3)
    assert lines == ["abc", "", "d"]


def test_rendered_lines_fit_viewport():
    """Test that a page never needs more lines than the viewport has rows."""
    text = CodepointText("one two\nthree four five six\n\nseven eight nine ten")
    session = ReadingSession(text, Viewport(6, 3))
    while True:
        view = PageView(session, 6)
        view.render()
        assert len(view.lines) <= 3
        assert all(len(line) <= 6 for line in view.lines)
        if not session.next_page():
            break


def test_prefix_bold():
    session = ReadingSession(CodepointText("cat dog"), Viewport(10, 2))
    view = PageView(session, 10)
    view.render()
    assert view.lines == ["cat dog"]
    assert view.styles == [[1, 0, 0, 0, 1, 0, 0]]


def test_anchor_bold():
    session = ReadingSession(CodepointText("reading"), Viewport(10, 2), EmphasisStyle.ANCHOR)
    view = PageView(session, 10)
    view.render()
    assert view.styles == [[0, 0, 0, 1, 1, 0, 0]]


def test_match_highlighting():
    """Test that the selected match and the other matches are flagged apart."""
    session = ReadingSession(CodepointText("cat cat"), Viewport(10, 2))
    session.enter_search()
    session.type_query("cat")
    session.submit_search()
    view = PageView(session, 10)
    view.render()
    assert view.styles == [[5, 4, 4, 0, 3, 2, 2]]

    session.next_occurrence()
    view.render()
    assert view.styles == [[3, 2, 2, 0, 5, 4, 4]]


def test_styles_use_slice_offsets_on_later_pages():
    session = ReadingSession(CodepointText("aa bb\ncc dd"), Viewport(10, 1))
    session.next_page()
    view = PageView(session, 10)
    view.render()
    assert view.lines == ["cc dd"]
    assert view.styles == [[1, 0, 0, 1, 0]]


def test_empty_document_renders_nothing():
    session = ReadingSession(CodepointText(""), Viewport(10, 2))
    view = PageView(session, 10)
    view.render()
    assert view.lines == []
    assert view.styles == []
