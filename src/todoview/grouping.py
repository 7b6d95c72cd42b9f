"""Tag grouping for context and date views."""

import logging
from datetime import date
from typing import Callable

from todoview.models import (
    GroupedView,
    GroupKind,
    NumberedLine,
    SearchPredicate,
    TagGroup,
    Threshold,
)
from todoview.sorting import sort_by_priority
from todoview.tags import contexts_of, date_tag_of, parse_tag_date
from todoview.thresholds import in_window, shows_undated

logger = logging.getLogger(__name__)


def distinct_contexts(lines: list[NumberedLine]) -> list[str]:
    """Return every context value in the file, sorted by code point."""
    values: set[str] = set()
    for line in lines:
        values.update(contexts_of(line.text))
    return sorted(values)


def distinct_dates(lines: list[NumberedLine]) -> list[str]:
    """Return every literal date tag value in the file, sorted."""
    values = {date_tag_of(line.text) for line in lines}
    values.discard(None)
    return sorted(values)


def _select(
    lines: list[NumberedLine],
    predicate: SearchPredicate,
    in_scope: Callable[[NumberedLine], bool],
) -> list[NumberedLine]:
    return sort_by_priority(
        [line for line in lines if in_scope(line) and predicate(line.text)]
    )


def group_by_context(lines: list[NumberedLine], predicate: SearchPredicate) -> GroupedView:
    """Group lines by context, then collect matching lines without any context.

    A line tagged with several contexts appears in each of their groups.
    """
    view = GroupedView(kind=GroupKind.CONTEXT, total_count=len(lines))

    for context in distinct_contexts(lines):
        items = _select(lines, predicate, lambda line: context in contexts_of(line.text))
        logger.debug("context %s: %d matching", context, len(items))
        if items:
            view.groups.append(TagGroup(tag=context, items=items))

    untagged = _select(lines, predicate, lambda line: not contexts_of(line.text))
    if untagged:
        view.untagged = TagGroup(tag="", items=untagged)

    return view


def group_by_date(
    lines: list[NumberedLine],
    predicate: SearchPredicate,
    threshold: Threshold,
    today: date,
) -> GroupedView:
    """Group lines by date tag within the threshold window.

    Dates outside the window are skipped before the search terms are
    consulted. Undated lines are listed only for the ``date`` and ``nodate``
    views.

    Raises:
        DateParseError: If any date tag in the file is malformed
    """
    view = GroupedView(kind=GroupKind.DATE, total_count=len(lines))

    for value in distinct_dates(lines):
        candidate = parse_tag_date(value)
        if not in_window(threshold, today, candidate):
            continue
        items = _select(lines, predicate, lambda line: date_tag_of(line.text) == value)
        logger.debug("date %s: %d matching", value, len(items))
        if items:
            view.groups.append(TagGroup(tag=value, items=items))

    if shows_undated(threshold):
        untagged = _select(lines, predicate, lambda line: date_tag_of(line.text) is None)
        if untagged:
            view.untagged = TagGroup(tag="", items=untagged)

    return view
