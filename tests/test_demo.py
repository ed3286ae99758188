"""Tests for the bundled demo application (demo.py).

Environment and filesystem state is controlled through ``monkeypatch``
and ``tmp_path`` only.
"""

from __future__ import annotations

from pathlib import Path
from unittest.mock import patch

import pytest

from command_cli import exit_codes
from command_cli.cli.streams import VirtualStreams
from command_cli.core.arguments import MissingRequiredParameter, match_arguments
from command_cli.core.models import ArgumentError, ExecutionError, Success
from command_cli.demo import APP, main


# ---------------------------------------------------------------------------
# cmd1 FOO BAR...
# ---------------------------------------------------------------------------

class TestCmd1:
    def test_binds_and_succeeds(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("HOME", "/home/tester")
        streams = VirtualStreams()

        outcome = APP.run(streams, ["app", "cmd1", "x", "y", "z"])

        assert outcome.exit_code == exit_codes.SUCCESS
        assert outcome.result == Success()
        assert streams.read_output() == "FOO: x\nBAR: y, z\nHOME: /home/tester\n"

    def test_missing_bar(self) -> None:
        cmd1 = APP.find_command("cmd1")
        assert cmd1 is not None
        assert match_arguments(cmd1.params, ["x"]) == MissingRequiredParameter("BAR")

        streams = VirtualStreams()
        outcome = APP.run(streams, ["app", "cmd1", "x"])
        assert outcome.exit_code == exit_codes.ARGUMENT_ERROR
        assert streams.read_error() == (
            "Error: Missing required parameter 'BAR'\n"
            "Usage: app cmd1 FOO BAR...\n"
        )

    def test_no_home_is_execution_error(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("HOME", raising=False)
        streams = VirtualStreams()

        outcome = APP.run(streams, ["app", "cmd1", "x", "y"])

        assert outcome.exit_code == exit_codes.EXECUTION_ERROR
        assert outcome.result == ExecutionError()
        assert streams.read_error() == "Error: Unable to get home directory\n"
        assert streams.read_output() == ""


# ---------------------------------------------------------------------------
# cmd2 [THING]
# ---------------------------------------------------------------------------

class TestCmd2:
    def test_explicit_thing(self) -> None:
        streams = VirtualStreams()
        assert APP.run(streams, ["app", "cmd2", "widget"]).exit_code == exit_codes.SUCCESS
        assert streams.read_output() == "thing: widget\n"

    def test_falls_back_to_env_var(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ENV_VAR", "gadget")
        streams = VirtualStreams()
        assert APP.run(streams, ["app", "cmd2"]).exit_code == exit_codes.SUCCESS
        assert streams.read_output() == "thing: gadget\n"

    def test_missing_env_var_is_argument_error(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("ENV_VAR", raising=False)
        streams = VirtualStreams()

        outcome = APP.run(streams, ["app", "cmd2"])

        assert outcome.exit_code == exit_codes.ARGUMENT_ERROR
        assert outcome.result == ArgumentError()
        assert streams.read_error() == (
            "Error: Unable to get 'ENV_VAR' environment variable\n"
            "Usage: app cmd2 [THING]\n"
        )

    def test_blank_thing_is_argument_error(self) -> None:
        streams = VirtualStreams()
        assert APP.run(streams, ["app", "cmd2", "  "]).exit_code == exit_codes.ARGUMENT_ERROR
        assert "THING must not be blank" in streams.read_error()


# ---------------------------------------------------------------------------
# cmd3 [FILE]...
# ---------------------------------------------------------------------------

class TestCmd3:
    def test_no_files(self) -> None:
        streams = VirtualStreams()
        assert APP.run(streams, ["app", "cmd3"]).exit_code == exit_codes.SUCCESS
        assert streams.read_output() == ""

    def test_prints_sizes(self, tmp_path: Path) -> None:
        first = tmp_path / "a.txt"
        second = tmp_path / "b.txt"
        first.write_bytes(b"12345")
        second.write_bytes(b"")
        streams = VirtualStreams()

        outcome = APP.run(streams, ["app", "cmd3", str(first), str(second)])

        assert outcome.exit_code == exit_codes.SUCCESS
        assert streams.read_output() == f"         5  {first}\n         0  {second}\n"

    def test_missing_file_is_execution_error(self, tmp_path: Path) -> None:
        missing = tmp_path / "missing.txt"
        streams = VirtualStreams()

        outcome = APP.run(streams, ["app", "cmd3", str(missing)])

        assert outcome.exit_code == exit_codes.EXECUTION_ERROR
        assert isinstance(outcome.result, ExecutionError)
        assert isinstance(outcome.result.detail, OSError)
        err = streams.read_error()
        assert err.startswith(f"Error: Unable to read '{missing}'\nInner error: ")


# ---------------------------------------------------------------------------
# Application-level behaviour
# ---------------------------------------------------------------------------

class TestDemoApp:
    def test_bad_command_lists_every_command(self) -> None:
        streams = VirtualStreams()
        outcome = APP.run(streams, ["app", "badcmd"])
        assert outcome.exit_code == exit_codes.ARGUMENT_ERROR
        err = streams.read_error()
        for command in APP.commands:
            assert command.name in err
            assert command.short_desc in err

    def test_main_exits_with_dispatch_code(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr("sys.argv", ["app", "cmd2", "thing"])
        with pytest.raises(SystemExit) as exc_info:
            main()
        assert exc_info.value.code == exit_codes.SUCCESS

    def test_module_entry_point_runs_demo(self) -> None:
        import runpy

        with patch("command_cli.demo.main") as mock_main:
            runpy.run_module("command_cli", run_name="__main__")
        mock_main.assert_called_once()
