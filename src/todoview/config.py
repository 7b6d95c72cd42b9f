"""Configuration loading from the environment."""

import re
from dataclasses import replace
from typing import Mapping

from todoview import clock
from todoview.errors import ConfigError
from todoview.models import ViewerConfig

ENV_PREFIX = "TODOVIEW_"
DEFAULT_EDITOR = "vi"

_TRUE_VALUES = frozenset(("1", "true", "yes", "on"))
_FALSE_VALUES = frozenset(("0", "false", "no", "off", ""))
_VERBOSITY_LEVELS = (0, 1, 2)


def parse_bool(name: str, value: str) -> bool:
    """Parse a boolean setting (1/0, true/false, yes/no, on/off)."""
    lowered = value.strip().lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise ConfigError(f"{name} must be a boolean (1/0, true/false, yes/no, on/off)")


def parse_verbosity(name: str, value: str | int) -> int:
    """Parse a verbosity level in 0..2."""
    try:
        level = int(value)
    except (TypeError, ValueError):
        raise ConfigError(f"{name} must be 0, 1 or 2")
    if level not in _VERBOSITY_LEVELS:
        raise ConfigError(f"{name} must be 0, 1 or 2")
    return level


def _validate_strip_pattern(name: str, pattern: str) -> str:
    try:
        re.compile(pattern.replace("{tag}", "tag"))
    except re.error as e:
        raise ConfigError(f"{name} is not a valid regular expression: {e}") from e
    return pattern


def _optional_command(environ: Mapping[str, str], name: str) -> str | None:
    value = environ.get(name, "").strip()
    return value or None


def load_config(environ: Mapping[str, str]) -> ViewerConfig:
    """Build the configuration from environment variables.

    Args:
        environ: Environment mapping, usually ``os.environ``

    Returns:
        Validated ViewerConfig

    Raises:
        ConfigError: If any setting is invalid
    """
    defaults = ViewerConfig()
    config = ViewerConfig(
        todo_file=environ.get(f"{ENV_PREFIX}FILE") or defaults.todo_file,
        base_dir=environ.get(f"{ENV_PREFIX}DIR") or None,
        sort_command=_optional_command(environ, f"{ENV_PREFIX}SORT_COMMAND"),
        final_filter=_optional_command(environ, f"{ENV_PREFIX}FINAL_FILTER"),
        editor=environ.get("VISUAL") or environ.get("EDITOR") or DEFAULT_EDITOR,
    )

    if f"{ENV_PREFIX}VERBOSE" in environ:
        config.verbosity = parse_verbosity(
            f"{ENV_PREFIX}VERBOSE", environ[f"{ENV_PREFIX}VERBOSE"]
        )
    if f"{ENV_PREFIX}PLAIN" in environ:
        config.plain = parse_bool(f"{ENV_PREFIX}PLAIN", environ[f"{ENV_PREFIX}PLAIN"])

    for field_name in ("context_strip", "date_strip"):
        env_name = f"{ENV_PREFIX}{field_name.upper()}"
        if env_name in environ:
            setattr(config, field_name, _validate_strip_pattern(env_name, environ[env_name]))

    config.timezone = environ.get(f"{ENV_PREFIX}TIMEZONE") or clock.detect_timezone()
    return config


def apply_overrides(
    config: ViewerConfig,
    *,
    todo_file: str | None = None,
    verbosity: int | None = None,
    plain: bool = False,
) -> ViewerConfig:
    """Return a copy of ``config`` with command-line flags applied."""
    updates: dict[str, object] = {}
    if todo_file is not None:
        updates["todo_file"] = todo_file
    if verbosity is not None:
        updates["verbosity"] = parse_verbosity("--verbose", verbosity)
    if plain:
        updates["plain"] = True
    return replace(config, **updates)
