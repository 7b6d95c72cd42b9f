"""Inline tag parsing for task lines.

Recognized syntax:
    (A) call the bank :phone t:2024-06-15

- ``(A)`` at the very start is the priority marker (any ASCII letter, either case).
- ``:name`` is a context tag when the colon starts a whitespace-delimited token.
- ``t:YYYY-MM-DD`` is the date tag; only the first one on a line counts.
"""

import re
from datetime import date

from todoview.errors import DateParseError

_PRIORITY_RE = re.compile(r"^\(([A-Za-z])\)(?=\s|$)")
_CONTEXT_RE = re.compile(r"(?<!\S):(\S+)")
_DATE_TAG_RE = re.compile(r"(?<!\S)t:(\S+)")
_ISO_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def priority_of(text: str) -> str | None:
    """Return the upper-cased priority letter, or None if the task has none."""
    match = _PRIORITY_RE.match(text)
    if match is None:
        return None
    return match.group(1).upper()


def contexts_of(text: str) -> list[str]:
    """Return the distinct context tag values of a task in order of appearance."""
    seen: list[str] = []
    for value in _CONTEXT_RE.findall(text):
        if value not in seen:
            seen.append(value)
    return seen


def date_tag_of(text: str) -> str | None:
    """Return the raw value of the first date tag, unparsed."""
    match = _DATE_TAG_RE.search(text)
    if match is None:
        return None
    return match.group(1)


def parse_tag_date(value: str) -> date:
    """Parse a date tag value strictly as YYYY-MM-DD.

    Raises:
        DateParseError: If the value is not a valid calendar date
    """
    if not _ISO_DATE_RE.match(value):
        raise DateParseError(f"Invalid date tag: t:{value}. Expected t:YYYY-MM-DD")
    try:
        return date.fromisoformat(value)
    except ValueError as e:
        raise DateParseError(f"Invalid date tag: t:{value}. {e}") from e
