"""Editor integration for the ``edit`` option."""

import logging
import shlex
import subprocess
from pathlib import Path

from todoview.errors import EditorError

logger = logging.getLogger(__name__)


def open_in_editor(path: Path, editor: str) -> None:
    """Open ``path`` in ``editor`` and wait for it to exit.

    The editor's exit status is not inspected.

    Raises:
        EditorError: If the editor command is empty or cannot be started
    """
    try:
        argv = shlex.split(editor)
    except ValueError as e:
        raise EditorError(f"Cannot parse editor command '{editor}': {e}") from e
    if not argv:
        raise EditorError("No editor configured. Set $EDITOR to your preferred editor.")

    logger.debug("launching editor: %s %s", argv, path)
    try:
        subprocess.run([*argv, str(path)], check=False)
    except FileNotFoundError as e:
        raise EditorError(
            f"Editor '{argv[0]}' not found. Set $EDITOR to your preferred editor."
        ) from e
    except OSError as e:
        raise EditorError(f"Cannot run editor '{argv[0]}': {e}") from e
