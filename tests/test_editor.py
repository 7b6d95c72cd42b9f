"""Tests for editor module."""

from pathlib import Path

import pytest

from todoview.editor import open_in_editor
from todoview.errors import EditorError


class TestOpenInEditor:
    """Test editor launching."""

    def test_runs_editor_with_path(self, mocker):
        run = mocker.patch("todoview.editor.subprocess.run")

        open_in_editor(Path("/tmp/todo.txt"), "code --wait")

        run.assert_called_once_with(["code", "--wait", "/tmp/todo.txt"], check=False)

    def test_exit_status_is_ignored(self, mocker):
        run = mocker.patch("todoview.editor.subprocess.run")
        run.return_value.returncode = 1

        open_in_editor(Path("/tmp/todo.txt"), "vi")

        assert run.called

    def test_missing_editor(self, mocker):
        mocker.patch("todoview.editor.subprocess.run", side_effect=FileNotFoundError())

        with pytest.raises(EditorError) as exc_info:
            open_in_editor(Path("/tmp/todo.txt"), "nosuchedit")

        assert "Editor 'nosuchedit' not found" in str(exc_info.value)

    def test_permission_denied(self, mocker):
        mocker.patch(
            "todoview.editor.subprocess.run",
            side_effect=PermissionError(13, "Permission denied"),
        )

        with pytest.raises(EditorError) as exc_info:
            open_in_editor(Path("/tmp/todo.txt"), "/etc")

        assert "Cannot run editor '/etc'" in str(exc_info.value)

    def test_empty_editor(self, mocker):
        run = mocker.patch("todoview.editor.subprocess.run")

        with pytest.raises(EditorError):
            open_in_editor(Path("/tmp/todo.txt"), "")

        run.assert_not_called()
