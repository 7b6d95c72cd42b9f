"""Tests for hooks module."""

import subprocess

import pytest

from todoview import hooks
from todoview.errors import HookError


class TestSplitCommand:
    """Test hook command parsing."""

    def test_split_command(self):
        assert hooks.split_command("sort -r -k 2") == ["sort", "-r", "-k", "2"]

    def test_quoted_arguments_stay_together(self):
        assert hooks.split_command("grep -v 'a b'") == ["grep", "-v", "a b"]

    def test_empty_command(self):
        with pytest.raises(HookError):
            hooks.split_command("   ")

    def test_unbalanced_quotes(self):
        with pytest.raises(HookError):
            hooks.split_command("grep 'oops")


class TestRunLineFilter:
    """Test piping lines through external commands."""

    def test_lines_round_trip_through_stdin(self, mocker):
        run = mocker.patch(
            "todoview.hooks.subprocess.run",
            return_value=subprocess.CompletedProcess(["sort"], 0, stdout="b\na\n", stderr=""),
        )

        result = hooks.run_line_filter("sort -r", ["a", "b"])

        assert result == ["b", "a"]
        args, kwargs = run.call_args
        assert args[0] == ["sort", "-r"]
        assert kwargs["input"] == "a\nb\n"
        assert kwargs["check"] is True
        assert "shell" not in kwargs

    def test_missing_executable(self, mocker):
        mocker.patch("todoview.hooks.subprocess.run", side_effect=FileNotFoundError())

        with pytest.raises(HookError) as exc_info:
            hooks.run_line_filter("no-such-tool", ["a"])

        assert "Hook command not found: no-such-tool" in str(exc_info.value)

    def test_permission_denied(self, mocker):
        mocker.patch(
            "todoview.hooks.subprocess.run",
            side_effect=PermissionError(13, "Permission denied"),
        )

        with pytest.raises(HookError) as exc_info:
            hooks.run_line_filter("./sorter", ["a"])

        assert "Cannot run hook command './sorter'" in str(exc_info.value)

    def test_non_zero_exit(self, mocker):
        mocker.patch(
            "todoview.hooks.subprocess.run",
            side_effect=subprocess.CalledProcessError(2, ["sort"], stderr="sort: bad key\n"),
        )

        with pytest.raises(HookError) as exc_info:
            hooks.run_line_filter("sort -k x", ["a"])

        assert str(exc_info.value) == "Hook command 'sort -k x' exited with status 2: sort: bad key"

    def test_empty_input(self, mocker):
        run = mocker.patch(
            "todoview.hooks.subprocess.run",
            return_value=subprocess.CompletedProcess(["cat"], 0, stdout="", stderr=""),
        )

        assert hooks.run_line_filter("cat", []) == []
        assert run.call_args.kwargs["input"] == ""
