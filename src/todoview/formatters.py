"""Text formatters for view output."""

import re

from todoview.errors import ConfigError
from todoview.models import GroupKind, GroupedView, OptionDocEntry, SearchPredicate

UNTAGGED_HEADERS = {
    GroupKind.CONTEXT: "items without context",
    GroupKind.DATE: "items without date",
}
_ERROR_PREFIX = "ERROR:"
_ITEM_INDENT = "  "


def compile_strip_pattern(pattern: str, tag: str) -> re.Pattern[str] | None:
    """Compile a tag-stripping pattern for one tag value.

    ``{tag}`` in the pattern is replaced by the escaped tag value; an empty
    pattern disables stripping.
    """
    if not pattern:
        return None
    try:
        return re.compile(pattern.replace("{tag}", re.escape(tag)))
    except re.error as e:
        raise ConfigError(f"Invalid tag strip pattern '{pattern}': {e}") from e


def strip_tag(line: str, compiled: re.Pattern[str] | None) -> str:
    """Remove the tag token from a rendered line."""
    if compiled is None:
        return line
    return compiled.sub("", line)


def format_sections(sections: list[tuple[str, list[str]]]) -> list[str]:
    """Render (header, lines) sections, skipping empty ones."""
    output: list[str] = []
    for header, lines in sections:
        if not lines:
            continue
        if output:
            output.append("")
        output.append(header)
        output.extend(f"{_ITEM_INDENT}{line}" for line in lines)
    return output


def format_stats(view: GroupedView, predicate: SearchPredicate, verbosity: int) -> list[str]:
    """Render the verbose statistics tail."""
    if verbosity < 1:
        return []
    lines = ["--", f"TODO: {view.shown_count} of {view.total_count} tasks shown"]
    if verbosity >= 2:
        lines.append(f"TODO DEBUG: filter {predicate.describe()}")
    return lines


def render_help_text(entries: list[OptionDocEntry]) -> str:
    """Render help text from view option metadata."""
    width = max(len(entry.usage) for entry in entries)
    lines = ["Usage: todoview OPTION [TERM...]", "", "Options:"]
    for entry in entries:
        lines.append(f"  {entry.usage.ljust(width)} - {entry.summary}")
    lines.append("")
    lines.append("Terms are case-insensitive substrings; prefix a term with '-' to exclude it.")
    lines.append("For full documentation, see README.md")
    return "\n".join(lines)


def render_error(message: str) -> str:
    return f"{_ERROR_PREFIX} {message}"
