"""External line-filter hooks (sort override and final output filter)."""

import logging
import shlex
import subprocess

from todoview.errors import HookError

logger = logging.getLogger(__name__)


def split_command(command: str) -> list[str]:
    """Split a hook command line without involving a shell."""
    try:
        argv = shlex.split(command)
    except ValueError as e:
        raise HookError(f"Cannot parse hook command '{command}': {e}") from e
    if not argv:
        raise HookError("Hook command is empty")
    return argv


def run_line_filter(command: str, lines: list[str]) -> list[str]:
    """Pipe ``lines`` through an external command and return its output lines.

    Raises:
        HookError: If the command cannot be started or exits non-zero
    """
    argv = split_command(command)
    logger.debug("running hook: %s", argv)

    stdin_text = "".join(f"{line}\n" for line in lines)
    try:
        result = subprocess.run(
            argv,
            input=stdin_text,
            capture_output=True,
            text=True,
            encoding="utf-8",
            errors="replace",
            check=True,
        )
    except FileNotFoundError as e:
        raise HookError(f"Hook command not found: {argv[0]}") from e
    except OSError as e:
        raise HookError(f"Cannot run hook command '{command}': {e}") from e
    except subprocess.CalledProcessError as e:
        detail = (e.stderr or "").strip()
        message = f"Hook command '{command}' exited with status {e.returncode}"
        raise HookError(f"{message}: {detail}" if detail else message) from e

    return result.stdout.splitlines()
