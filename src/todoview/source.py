"""Todo file resolution and reading."""

import logging
import re
import unicodedata
from pathlib import Path

from todoview.errors import ConfigError, SourceFileError

logger = logging.getLogger(__name__)

DEFAULT_EXTENSION = ".txt"
_WINDOWS_DRIVE_RELATIVE_RE = re.compile(r"^[A-Za-z]:[^/\\]")


def runtime_app_root() -> Path:
    return Path(__file__).resolve().parent


def map_path(path: str) -> Path:
    """Map ``~`` and ``@`` prefixes; other paths are returned unchanged.

    ~ or ~/...  -> user home directory
    @ or @/...  -> runtime app root (package directory)
    """
    normalized = unicodedata.normalize("NFC", path)
    if "\0" in normalized:
        raise ConfigError("Path cannot contain NUL bytes")
    if _WINDOWS_DRIVE_RELATIVE_RE.match(normalized):
        raise ConfigError(
            f"Invalid path: {path}. Windows drive path must be fully qualified "
            "(e.g. 'C:\\\\folder', not 'C:folder')."
        )

    if normalized.startswith("@"):
        suffix = re.sub(r"[\\/]+", "/", normalized[1:]).lstrip("/")
        return (runtime_app_root() / suffix) if suffix else runtime_app_root()

    if normalized.startswith("~"):
        try:
            return Path(normalized).expanduser()
        except RuntimeError as e:
            raise ConfigError(f"Failed to expand user home in path: {path}") from e

    return Path(normalized)


def candidate_paths(name: str, base_dir: Path, cwd: Path) -> list[Path]:
    """List the places a todo file name may refer to, in lookup order.

    1. the name itself, when absolute
    2. relative to the program directory
    3. relative to the working directory
    4. program directory with the default extension added
    """
    mapped = map_path(name)
    if mapped.is_absolute():
        return [mapped]
    return [
        base_dir / mapped,
        cwd / mapped,
        base_dir / f"{mapped}{DEFAULT_EXTENSION}",
    ]


def resolve_todo_file(name: str, base_dir: Path, cwd: Path | None = None) -> Path:
    """Return the first existing todo file for ``name``.

    Raises:
        SourceFileError: If no candidate exists
    """
    if cwd is None:
        cwd = Path.cwd()

    for candidate in candidate_paths(name, base_dir, cwd):
        if candidate.is_file():
            logger.debug("using todo file %s", candidate)
            return candidate.resolve()
        logger.debug("no todo file at %s", candidate)

    raise SourceFileError(f"File does not exist: {name}")


def read_lines(path: Path) -> list[str]:
    """Read the todo file as UTF-8 (a leading BOM is dropped), replacing undecodable bytes."""
    try:
        with open(path, "r", encoding="utf-8-sig", errors="replace") as f:
            return [line.rstrip("\n") for line in f]
    except OSError as e:
        raise SourceFileError(f"Failed to read todo file: {path}: {e}") from e
