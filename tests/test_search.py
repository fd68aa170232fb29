"""Tests for the search occurrence index."""

import pytest
from fixread import CodepointText, Occurrence, SearchIndex
from fixread.errors import NoMatch


def test_finds_every_occurrence_in_order():
    """Test the two letter-o positions in a short sentence."""
    index = SearchIndex.build(CodepointText("the quick brown fox"), "o")
    assert index is not None
    assert index.occurrences == [Occurrence(12, 12), Occurrence(17, 17)]
    assert index.cursor == 0


def test_next_previous_stop_at_ends():
    """Test that the cursor moves one step at a time without wrapping."""
    index = SearchIndex.build(CodepointText("the quick brown fox"), "o")
    assert index.nearest_forward(0) == Occurrence(12, 12)
    assert not index.previous()
    assert index.next()
    assert index.current == Occurrence(17, 17)
    assert not index.next()
    assert index.cursor == 1
    assert index.previous()
    assert index.cursor == 0
    assert not index.previous()


def test_absent_pattern():
    """Test that a missing pattern gives None or NoMatch."""
    text = CodepointText("the quick brown fox")
    assert SearchIndex.build(text, "cat") is None
    with pytest.raises(NoMatch) as excinfo:
        SearchIndex.find(text, "cat")
    assert excinfo.value.pattern == "cat"
    assert SearchIndex.build(text, "") is None


def test_nearest_forward_picks_first_at_or_after_position():
    """Test the forward-only nearest rule and its wraparound."""
    index = SearchIndex.build(CodepointText("ab ab ab"), "ab")
    assert [o.start_index for o in index.occurrences] == [0, 3, 6]

    assert index.nearest_forward(3).start_index == 3
    assert index.cursor == 1
    assert index.nearest_forward(4).start_index == 6
    assert index.cursor == 2
    # Nothing after 7: wrap to the first occurrence
    assert index.nearest_forward(7).start_index == 0
    assert index.cursor == 0


def test_occurrence_spans_count_code_points():
    """Test that end indices use the pattern length in code points."""
    index = SearchIndex.build(CodepointText("naïve naïve"), "ïv")
    assert index.occurrences == [Occurrence(2, 3), Occurrence(8, 9)]


def test_occurrences_do_not_overlap():
    index = SearchIndex.build(CodepointText("aaaa"), "aa")
    assert index.occurrences == [Occurrence(0, 1), Occurrence(2, 3)]
    assert len(index) == 2


def test_membership_predicates():
    """Test highlighting queries for all and the current occurrence."""
    index = SearchIndex.build(CodepointText("cat dog cat"), "cat")
    assert index.is_inside(0)
    assert index.is_inside(2)
    assert not index.is_inside(3)
    assert index.is_inside(10)

    assert index.is_inside_current(1)
    assert not index.is_inside_current(9)
    index.next()
    assert index.is_inside_current(9)
    assert not index.is_inside_current(1)


def test_select():
    index = SearchIndex.build(CodepointText("cat dog cat"), "cat")
    assert index.select(1)
    assert index.current == Occurrence(8, 10)
    assert not index.select(2)
    assert index.cursor == 1
