"""Tests for sorting module."""

from todoview.numbering import number_lines
from todoview.sorting import sort_by_priority


class TestSortByPriority:
    """Test priority ordering."""

    def test_case_insensitive_order_with_unprioritized_last(self):
        """Test C, A, b, (none) sorts as A, b, C, (none)."""
        lines = number_lines(["(C) third", "plain one", "(A) first", "(b) second", "plain two"])

        result = sort_by_priority(lines)

        assert [line.text for line in result] == [
            "(A) first",
            "(b) second",
            "(C) third",
            "plain one",
            "plain two",
        ]

    def test_stable_within_same_priority(self):
        lines = number_lines(["(a) one", "(A) two", "(a) three"])

        result = sort_by_priority(lines)

        assert [line.number for line in result] == [1, 2, 3]

    def test_numbers_travel_with_lines(self):
        lines = number_lines(["later", "(A) sooner"])

        result = sort_by_priority(lines)

        assert [(line.label, line.text) for line in result] == [("2", "(A) sooner"), ("1", "later")]

    def test_does_not_mutate_input(self):
        lines = number_lines(["b", "(A) a"])
        original = list(lines)

        sort_by_priority(lines)

        assert lines == original
