# tests/test_exceptions.py
"""
Unit tests for finally, propagation and process exit lessons.
"""

import io
import subprocess
import sys

import pytest

from objectlessons.exceptions import (
    TracedResource,
    exit_in_handler,
    try_without_except,
    with_resource,
)


class TestTryWithoutExcept:
    """Test finally followed by propagation."""

    def test_finally_runs_then_error_propagates(self, capsys):
        with pytest.raises(ZeroDivisionError):
            try_without_except()

        out = capsys.readouterr().out.splitlines()
        assert out == ["Inside try block", "Finally block executed"]


class TestExitInHandler:
    """Test sys.exit and os._exit from an except block."""

    def test_sys_exit_still_runs_finally(self, capsys):
        with pytest.raises(SystemExit) as excinfo:
            exit_in_handler()

        assert excinfo.value.code == 0
        out = capsys.readouterr().out.splitlines()
        assert out[0] == "Inside try block."
        assert out[1].startswith("Inside except block. ZeroDivisionError(")
        assert out[2] == "Inside finally block."

    def test_sys_exit_code(self):
        with pytest.raises(SystemExit) as excinfo:
            exit_in_handler(exit_code=5)

        assert excinfo.value.code == 5

    @pytest.mark.integration
    def test_hard_exit_skips_finally(self):
        """os._exit ends the process before finally can print."""
        code = "from objectlessons.exceptions import exit_in_handler; exit_in_handler(hard=True, exit_code=3)"
        result = subprocess.run(
            [sys.executable, "-c", code],
            capture_output=True,
            text=True,
            timeout=60,
        )

        assert result.returncode == 3
        lines = result.stdout.splitlines()
        assert lines[0] == "Inside try block."
        assert lines[1].startswith("Inside except block.")
        assert "Inside finally block." not in result.stdout


class TestTracedResource:
    """Test the traced context manager."""

    def test_normal_exit_closes_resource(self):
        buffer = io.StringIO("data")
        traced = TracedResource("r", buffer)
        with traced as resource:
            assert resource is buffer

        assert buffer.closed
        assert traced.events == ["enter", "exit:ok"]

    def test_error_exit_does_not_suppress(self):
        buffer = io.StringIO("data")
        traced = TracedResource("r", buffer)
        with pytest.raises(RuntimeError):
            with traced:
                raise RuntimeError("boom")

        assert buffer.closed
        assert traced.events == ["enter", "exit:error"]


class TestWithResource:
    """Test the with-resource lesson."""

    def test_reads_first_line_and_closes(self, tmp_path, capsys):
        path = tmp_path / "test.txt"
        path.write_text("first line\nsecond line\n", encoding="utf-8")

        observed = with_resource(str(path))

        assert observed["line"] == "first line"
        assert observed["closed"] is True
        assert observed["events"] == ["enter", "exit:ok"]
        out = capsys.readouterr().out.splitlines()
        assert out == [f"{path}: opened", f"{path}: closed (ok)", "first line"]

    def test_missing_file_is_never_opened(self, tmp_path, capsys):
        """A failed open() raises before the handle is traced."""
        with pytest.raises(FileNotFoundError):
            with_resource(str(tmp_path / "missing.txt"))

        assert capsys.readouterr().out == ""
