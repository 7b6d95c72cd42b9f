"""Priority sort stage."""

from todoview.models import NumberedLine
from todoview.tags import priority_of


def priority_key(line: NumberedLine) -> tuple[int, str]:
    """Collation key: prioritized lines first, by letter; the rest keep file order."""
    priority = priority_of(line.text)
    if priority is None:
        return (1, "")
    return (0, priority)


def sort_by_priority(lines: list[NumberedLine]) -> list[NumberedLine]:
    """Return a stable, locale-independent priority ordering of ``lines``."""
    return sorted(lines, key=priority_key)
