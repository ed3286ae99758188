"""Shared pytest fixtures and configuration for the command-cli test suite.

Guidelines
----------
* Dispatch is tested against ``VirtualStreams``, never the real console.
* Core tests must be pure, with no side effects.
* Tests must not depend on OS state; environment is set via ``monkeypatch``.
"""

from __future__ import annotations

import pytest

from command_cli.cli.streams import VirtualStreams
from command_cli.core.arguments import Arguments
from command_cli.core.models import (
    Application,
    ArgumentError,
    Command,
    CommandResult,
    ExecutionError,
    Parameter,
    Success,
)
from command_cli.core.protocols import OutputStreams


def success_handler(streams: OutputStreams, args: Arguments) -> CommandResult:
    return Success()


def arg_error_handler(streams: OutputStreams, args: Arguments) -> CommandResult:
    return ArgumentError()


def exec_error_handler(streams: OutputStreams, args: Arguments) -> CommandResult:
    return ExecutionError()


_INNER = OSError(":(")


def exec_error_with_inner_handler(streams: OutputStreams, args: Arguments) -> CommandResult:
    return ExecutionError(_INNER)


@pytest.fixture()
def streams() -> VirtualStreams:
    return VirtualStreams()


@pytest.fixture()
def app() -> Application:
    """Four single-parameter commands, one per handler outcome."""
    param = Parameter("param1", required=True, repeating=False)
    return Application(
        name="app",
        commands=(
            Command("cmd1", "desc1", (param,), success_handler),
            Command("cmd2", "desc2", (param,), arg_error_handler),
            Command("cmd3", "desc3", (param,), exec_error_handler),
            Command("cmd4", "desc4", (param,), exec_error_with_inner_handler),
        ),
    )
