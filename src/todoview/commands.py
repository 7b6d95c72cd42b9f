"""View command logic for todoview."""

import logging
from datetime import date
from pathlib import Path

from todoview import formatters, grouping, hooks, source
from todoview.editor import open_in_editor
from todoview.models import (
    GroupKind,
    GroupedView,
    NumberedLine,
    SearchPredicate,
    ViewerConfig,
)
from todoview.numbering import format_numbered, number_lines
from todoview.search import build_predicate
from todoview.thresholds import resolve_threshold

logger = logging.getLogger(__name__)


def base_dir_of(config: ViewerConfig) -> Path:
    """Program directory used for todo file lookup."""
    if config.base_dir:
        return source.map_path(config.base_dir)
    return source.runtime_app_root()


def resolve_source(config: ViewerConfig) -> Path:
    """Resolve the configured todo file or raise SourceFileError."""
    return source.resolve_todo_file(config.todo_file, base_dir_of(config))


def load_numbered_lines(config: ViewerConfig) -> list[NumberedLine]:
    """Read and number the configured todo file."""
    return number_lines(source.read_lines(resolve_source(config)))


def _render_items(
    items: list[NumberedLine],
    config: ViewerConfig,
    strip_pattern: str,
    tag: str | None,
) -> list[str]:
    lines = [format_numbered(item) for item in items]
    if config.sort_command:
        lines = hooks.run_line_filter(config.sort_command, lines)
    if tag is None:
        return lines
    compiled = formatters.compile_strip_pattern(strip_pattern, tag)
    return [formatters.strip_tag(line, compiled) for line in lines]


def render_view(view: GroupedView, predicate: SearchPredicate, config: ViewerConfig) -> str:
    """Render a grouped view, run the output hook and append statistics."""
    strip_pattern = config.context_strip if view.kind == GroupKind.CONTEXT else config.date_strip

    sections = [
        (group.tag, _render_items(group.items, config, strip_pattern, group.tag))
        for group in view.groups
    ]
    if view.untagged is not None:
        sections.append(
            (
                formatters.UNTAGGED_HEADERS[view.kind],
                _render_items(view.untagged.items, config, strip_pattern, None),
            )
        )

    output = formatters.format_sections(sections)
    if config.final_filter and not config.plain:
        output = hooks.run_line_filter(config.final_filter, output)

    output.extend(formatters.format_stats(view, predicate, config.verbosity))
    return "\n".join(output)


def cmd_context(config: ViewerConfig, terms: list[str]) -> str:
    """Show tasks grouped by context."""
    predicate = build_predicate(terms)
    logger.debug("filter: %s", predicate.describe())

    view = grouping.group_by_context(load_numbered_lines(config), predicate)
    return render_view(view, predicate, config)


def cmd_dates(config: ViewerConfig, option: str, terms: list[str], today: date) -> str:
    """Show tasks grouped by date within the window selected by ``option``."""
    threshold = resolve_threshold(option, today)
    predicate = build_predicate(terms)
    logger.debug("threshold: %s (today %s)", threshold.describe(), today.isoformat())
    logger.debug("filter: %s", predicate.describe())

    view = grouping.group_by_date(load_numbered_lines(config), predicate, threshold, today)
    return render_view(view, predicate, config)


def cmd_edit(config: ViewerConfig) -> str:
    """Open the todo file in the configured editor."""
    open_in_editor(resolve_source(config), config.editor)
    return ""
