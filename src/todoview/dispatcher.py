"""View option dispatching for todoview."""

from dataclasses import dataclass
from typing import Callable

from todoview import clock, commands, formatters
from todoview.errors import UsageError
from todoview.models import OptionDocEntry, ViewerConfig
from todoview.thresholds import OFFSET_RE

OFFSET_USAGE = "[+|-]N(days|weeks|months|years)"


@dataclass
class OptionHandler:
    """Defines how to execute a view option."""

    executor: Callable[[str, list[str], ViewerConfig], str]
    usage: str = ""
    summary: str = ""


def _exec_help(option: str, terms: list[str], config: ViewerConfig) -> str:
    if terms:
        raise UsageError("Usage: help")
    return formatters.render_help_text(option_doc_entries())


def _exec_edit(option: str, terms: list[str], config: ViewerConfig) -> str:
    if terms:
        raise UsageError("Usage: edit")
    return commands.cmd_edit(config)


def _exec_context(option: str, terms: list[str], config: ViewerConfig) -> str:
    return commands.cmd_context(config, terms)


def _exec_dates(option: str, terms: list[str], config: ViewerConfig) -> str:
    today = clock.today_in(config.timezone)
    return commands.cmd_dates(config, option, terms, today)


# Option registry
OPTION_REGISTRY = {
    "help": OptionHandler(_exec_help, usage="help", summary="Show available options"),
    "edit": OptionHandler(_exec_edit, usage="edit", summary="Open the todo file in $EDITOR"),
    "context": OptionHandler(_exec_context, usage="context [TERM...]", summary="Group tasks by :context"),
    "date": OptionHandler(_exec_dates, usage="date [TERM...]", summary="Group dated tasks by date, then undated ones"),
    "nodate": OptionHandler(_exec_dates, usage="nodate [TERM...]", summary="Show only tasks without a date"),
    "future": OptionHandler(_exec_dates, usage="future [TERM...]", summary="Show tasks dated today or later"),
    "past": OptionHandler(_exec_dates, usage="past [TERM...]", summary="Show tasks dated today or earlier"),
    "today": OptionHandler(_exec_dates, usage="today [TERM...]", summary="Show tasks dated today"),
    "tomorrow": OptionHandler(_exec_dates, usage="tomorrow [TERM...]", summary="Show tasks dated today or tomorrow"),
    "yesterday": OptionHandler(_exec_dates, usage="yesterday [TERM...]", summary="Show tasks dated yesterday or today"),
}
OFFSET_HANDLER = OptionHandler(
    _exec_dates,
    usage=f"{OFFSET_USAGE} [TERM...]",
    summary="Show tasks dated between today and the offset day",
)


def resolve_option(option: str) -> OptionHandler:
    """Validate a view option against the option grammar."""
    handler = OPTION_REGISTRY.get(option)
    if handler is not None:
        return handler
    if OFFSET_RE.match(option):
        return OFFSET_HANDLER
    raise UsageError(f"Unknown option: {option}")


def option_doc_entries() -> list[OptionDocEntry]:
    """Return option metadata used for help and doc checks."""
    entries = [
        OptionDocEntry(option=option, usage=handler.usage, summary=handler.summary)
        for option, handler in OPTION_REGISTRY.items()
    ]
    entries.append(
        OptionDocEntry(option=OFFSET_USAGE, usage=OFFSET_HANDLER.usage, summary=OFFSET_HANDLER.summary)
    )
    return entries


def execute_option(args: list[str], config: ViewerConfig) -> str:
    """Execute ``OPTION [TERM...]`` and return user-facing text."""
    if not args:
        raise UsageError("No option given")

    option, terms = args[0], list(args[1:])
    handler = resolve_option(option)
    return handler.executor(option, terms, config)
