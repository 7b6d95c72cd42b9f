"""Stable line numbering."""

from typing import Iterable

from todoview.models import NumberedLine


def padding_width(total_lines: int) -> int:
    """Digit count of the total line count (at least 1)."""
    return len(str(max(total_lines, 0)))


def number_lines(lines: Iterable[str], width: int | None = None) -> list[NumberedLine]:
    """Number every physical line from 1, then drop blank ones.

    Numbers are assigned before anything is filtered, so a number always
    identifies the same line of the file whichever view shows it.

    Args:
        lines: Raw lines (a list, a file object or any text stream)
        width: Zero-padding width; defaults to the digits of the line count

    Returns:
        Numbered non-blank lines in file order
    """
    raw = [line.rstrip("\r\n") for line in lines]
    if width is None:
        width = padding_width(len(raw))

    return [
        NumberedLine(number=number, label=str(number).zfill(width), text=text)
        for number, text in enumerate(raw, start=1)
        if text.strip()
    ]


def format_numbered(line: NumberedLine) -> str:
    """Render a numbered line as ``<label> <text>``."""
    return f"{line.label} {line.text}"
