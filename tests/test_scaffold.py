"""Smoke tests — verify package wiring.

These tests prove that:
* The public API is importable from the package root.
* The exception hierarchy is correctly structured.
* Version is accessible.
* Exit codes are defined.
"""

from __future__ import annotations

import pytest

import command_cli
from command_cli import __version__, exit_codes
from command_cli.exceptions import (
    CommandCliError,
    ConfigurationError,
    DuplicateCommandError,
    HandlerAborted,
    HandlerContractError,
    InvalidCommandError,
)


# ---------------------------------------------------------------------------
# Version
# ---------------------------------------------------------------------------

class TestVersion:
    def test_version_is_string(self) -> None:
        assert isinstance(__version__, str)

    def test_version_is_semver_like(self) -> None:
        parts = __version__.split(".")
        assert len(parts) == 3
        assert all(part.isdigit() for part in parts)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

class TestPublicApi:
    @pytest.mark.parametrize("name", command_cli.__all__)
    def test_exported_names_resolve(self, name: str) -> None:
        assert hasattr(command_cli, name)


# ---------------------------------------------------------------------------
# Exception hierarchy
# ---------------------------------------------------------------------------

class TestExceptions:
    @pytest.mark.parametrize(
        "exc_class",
        [
            ConfigurationError,
            InvalidCommandError,
            DuplicateCommandError,
            HandlerContractError,
        ],
    )
    def test_all_exceptions_inherit_from_base(
        self, exc_class: type[CommandCliError]
    ) -> None:
        assert issubclass(exc_class, CommandCliError)

    @pytest.mark.parametrize("exc_class", [InvalidCommandError, DuplicateCommandError])
    def test_declaration_errors_are_configuration_errors(
        self, exc_class: type[CommandCliError]
    ) -> None:
        assert issubclass(exc_class, ConfigurationError)

    def test_base_inherits_from_exception(self) -> None:
        assert issubclass(CommandCliError, Exception)

    def test_hint_is_stored(self) -> None:
        err = CommandCliError("boom", hint="try this")
        assert str(err) == "boom"
        assert err.hint == "try this"

    def test_hint_defaults_to_none(self) -> None:
        err = CommandCliError("boom")
        assert err.hint is None

    def test_handler_aborted_carries_result(self) -> None:
        result = command_cli.ArgumentError()
        err = HandlerAborted(result)
        assert err.result is result


# ---------------------------------------------------------------------------
# Exit codes
# ---------------------------------------------------------------------------

class TestExitCodes:
    def test_success_is_zero(self) -> None:
        assert exit_codes.SUCCESS == 0

    def test_argument_error_is_one(self) -> None:
        assert exit_codes.ARGUMENT_ERROR == 1

    def test_execution_error_is_two(self) -> None:
        assert exit_codes.EXECUTION_ERROR == 2

    def test_keyboard_interrupt_is_130(self) -> None:
        assert exit_codes.KEYBOARD_INTERRUPT == 130
