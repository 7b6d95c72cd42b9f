"""Tests for numbering module."""

import io

from todoview.models import NumberedLine
from todoview.numbering import format_numbered, number_lines, padding_width


class TestPaddingWidth:
    """Test padding width calculation."""

    def test_padding_width(self):
        assert padding_width(0) == 1
        assert padding_width(9) == 1
        assert padding_width(10) == 2
        assert padding_width(123) == 3


class TestNumberLines:
    """Test stable numbering."""

    def test_numbers_start_at_one(self):
        result = number_lines(["a", "b"])

        assert [(line.number, line.label, line.text) for line in result] == [
            (1, "1", "a"),
            (2, "2", "b"),
        ]

    def test_width_follows_total_line_count(self):
        lines = [f"task {i}" for i in range(1, 13)]

        result = number_lines(lines)

        assert result[0].label == "01"
        assert result[8].label == "09"
        assert result[11].label == "12"

    def test_explicit_width(self):
        result = number_lines(["a"], width=3)

        assert result[0].label == "001"

    def test_blank_lines_are_dropped_but_keep_their_number(self):
        """Test that blank lines consume a number without being shown."""
        result = number_lines(["first", "", "   ", "fourth"])

        assert [(line.number, line.text) for line in result] == [(1, "first"), (4, "fourth")]

    def test_reads_from_stream(self):
        stream = io.StringIO("one\ntwo\r\nthree\n")

        result = number_lines(stream)

        assert [line.text for line in result] == ["one", "two", "three"]

    def test_format_numbered(self):
        assert format_numbered(NumberedLine(number=3, label="03", text="x")) == "03 x"
