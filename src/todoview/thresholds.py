"""Date threshold resolution and classification."""

import calendar
import re
from datetime import date, timedelta

from todoview.errors import DateParseError
from todoview.models import OffsetUnit, Threshold, ThresholdMode

OFFSET_RE = re.compile(r"^([+-]?)(\d+)(days|weeks|months|years)$")

NAMED_MODES = {
    "date": ThresholdMode.DATE,
    "nodate": ThresholdMode.NODATE,
    "past": ThresholdMode.PAST,
    "future": ThresholdMode.FUTURE,
}
NAMED_DAYS = {
    "today": 0,
    "tomorrow": 1,
    "yesterday": -1,
}


def add_months(day: date, months: int) -> date:
    """Shift ``day`` by whole months, clamping to the end of the target month.

    Example:
        2024-01-31 + 1 month -> 2024-02-29
    """
    month_index = day.year * 12 + (day.month - 1) + months
    year, month = divmod(month_index, 12)
    month += 1
    if not date.min.year <= year <= date.max.year:
        raise DateParseError(f"Date out of range: {day.isoformat()} {months:+d} months")
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, min(day.day, last_day))


def apply_offset(today: date, count: int, unit: OffsetUnit) -> date:
    """Return ``today`` shifted by a signed count of days/weeks/months/years.

    Raises:
        DateParseError: If the result falls outside the supported calendar
    """
    try:
        if unit == OffsetUnit.DAYS:
            return today + timedelta(days=count)
        if unit == OffsetUnit.WEEKS:
            return today + timedelta(weeks=count)
    except OverflowError as e:
        raise DateParseError(f"Date out of range: {today.isoformat()} {count:+d} {unit.value}") from e
    if unit == OffsetUnit.MONTHS:
        return add_months(today, count)
    return add_months(today, count * 12)


def parse_offset(token: str) -> tuple[int, OffsetUnit]:
    """Parse ``[sign]digits(days|weeks|months|years)``; unsigned means future."""
    match = OFFSET_RE.match(token)
    if match is None:
        raise DateParseError(f"Invalid relative offset: {token}")
    sign, digits, unit = match.groups()
    count = int(digits)
    if sign == "-":
        count = -count
    return count, OffsetUnit(unit)


def resolve_threshold(token: str, today: date) -> Threshold:
    """Resolve a date view option to the threshold for this invocation.

    Structural modes pass through by name; day names and offsets are
    normalized to an absolute day relative to ``today``.
    """
    if token in NAMED_MODES:
        return Threshold(NAMED_MODES[token])
    if token in NAMED_DAYS:
        return Threshold(ThresholdMode.DAY, today + timedelta(days=NAMED_DAYS[token]))
    count, unit = parse_offset(token)
    return Threshold(ThresholdMode.DAY, apply_offset(today, count, unit))


def in_window(threshold: Threshold, today: date, candidate: date) -> bool:
    """Check whether ``candidate`` falls inside the threshold's window.

    | mode     | rule                                  |
    |----------|---------------------------------------|
    | future   | candidate >= today                    |
    | past     | candidate <= today                    |
    | nodate   | never                                 |
    | date     | always                                |
    | day      | between today and the day, inclusive  |
    """
    mode = threshold.mode
    if mode == ThresholdMode.FUTURE:
        return candidate >= today
    if mode == ThresholdMode.PAST:
        return candidate <= today
    if mode == ThresholdMode.NODATE:
        return False
    if mode == ThresholdMode.DATE:
        return True

    day = threshold.day
    if day == today:
        return candidate == today
    if day > today:
        return today <= candidate <= day
    return day <= candidate <= today


def shows_undated(threshold: Threshold) -> bool:
    """Only the literal ``date`` and ``nodate`` views list undated tasks."""
    return threshold.mode in (ThresholdMode.DATE, ThresholdMode.NODATE)
