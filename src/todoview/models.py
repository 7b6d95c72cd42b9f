"""Typed domain models and payload DTOs for todoview."""

from dataclasses import dataclass, field
from datetime import date
from enum import Enum


@dataclass(frozen=True)
class NumberedLine:
    """One physical line of the todo file with its stable sequence number."""

    number: int
    label: str
    text: str


class Polarity(str, Enum):
    """Whether a search rule requires or forbids its pattern."""

    INCLUDE = "include"
    EXCLUDE = "exclude"


@dataclass(frozen=True)
class SearchRule:
    """A literal, case-insensitive substring rule."""

    polarity: Polarity
    pattern: str

    def matches(self, text: str) -> bool:
        found = self.pattern.casefold() in text.casefold()
        if self.polarity == Polarity.INCLUDE:
            return found
        return not found

    def describe(self) -> str:
        return f"{self.polarity.value}({self.pattern!r})"


@dataclass(frozen=True)
class SearchPredicate:
    """Ordered AND-composition of search rules.

    An empty predicate matches every line.
    """

    rules: tuple[SearchRule, ...] = ()

    def __call__(self, text: str) -> bool:
        return all(rule.matches(text) for rule in self.rules)

    def describe(self) -> str:
        """Return the composed filter expression for diagnostics."""
        if not self.rules:
            return "match-all"
        return " AND ".join(rule.describe() for rule in self.rules)


@dataclass
class TagGroup:
    """A tag value plus its priority-sorted lines."""

    tag: str
    items: list[NumberedLine] = field(default_factory=list)


class GroupKind(str, Enum):
    """Which tag a grouped view is partitioned by."""

    CONTEXT = "context"
    DATE = "date"


@dataclass
class GroupedView:
    """Grouping payload for presenters."""

    kind: GroupKind
    groups: list[TagGroup] = field(default_factory=list)
    untagged: TagGroup | None = None
    total_count: int = 0

    @property
    def shown_count(self) -> int:
        """Count distinct tasks across all sections."""
        numbers = {item.number for group in self.groups for item in group.items}
        if self.untagged is not None:
            numbers.update(item.number for item in self.untagged.items)
        return len(numbers)


class ThresholdMode(str, Enum):
    """Date view modes."""

    DATE = "date"
    NODATE = "nodate"
    PAST = "past"
    FUTURE = "future"
    DAY = "day"


@dataclass(frozen=True)
class Threshold:
    """Active date window for one invocation.

    ``day`` is set only for ``ThresholdMode.DAY``.
    """

    mode: ThresholdMode
    day: date | None = None

    def __post_init__(self) -> None:
        if (self.mode == ThresholdMode.DAY) != (self.day is not None):
            raise ValueError("A reference day is required for day thresholds only")

    def describe(self) -> str:
        if self.day is not None:
            return self.day.isoformat()
        return self.mode.value


class OffsetUnit(str, Enum):
    """Units accepted in relative offsets such as ``-2weeks``."""

    DAYS = "days"
    WEEKS = "weeks"
    MONTHS = "months"
    YEARS = "years"


@dataclass
class ViewerConfig:
    """Runtime configuration, loaded from the environment and CLI flags."""

    todo_file: str = "todo"
    base_dir: str | None = None
    verbosity: int = 0
    plain: bool = False
    sort_command: str | None = None
    final_filter: str | None = None
    context_strip: str = r"\s*(?<!\S):{tag}(?=\s|$)"
    date_strip: str = r"\s*(?<!\S)t:{tag}(?=\s|$)"
    timezone: str = "UTC"
    editor: str = "vi"


@dataclass
class OptionDocEntry:
    """Metadata for a single view option in the help/doc system."""

    option: str
    usage: str
    summary: str
