"""Custom exception hierarchy for command-cli.

Malformed *user input* never raises: the matcher and dispatcher report
it through ordinary return values.  Exceptions are reserved for defects
in the application's own declarations and for the internal early-exit
used by the handler helpers.

Hierarchy
---------
CommandCliError
├── ConfigurationError
│   ├── InvalidCommandError
│   └── DuplicateCommandError
├── HandlerContractError
└── HandlerAborted
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from command_cli.core.models import CommandResult


class CommandCliError(Exception):
    """Base exception for all command-cli errors.

    The :func:`~command_cli.cli.app.cli` error boundary renders these as
    a clean ``Error:`` line instead of a stack trace.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Declarations ----------------------------------------------------------

class ConfigurationError(CommandCliError):
    """Raised when the declared command tree is inconsistent."""


class InvalidCommandError(ConfigurationError):
    """Raised when a command or its parameter list is malformed."""


class DuplicateCommandError(ConfigurationError):
    """Raised when two commands of one application share a name."""


# --- Handlers --------------------------------------------------------------

class HandlerContractError(CommandCliError):
    """Raised when a handler returns something other than a CommandResult."""


class HandlerAborted(CommandCliError):
    """Unwinds a handler early with a ready-made result.

    Raised by :func:`~command_cli.core.short_circuit.attempt` and
    :func:`~command_cli.core.short_circuit.expect`; the dispatcher
    catches it and treats :attr:`result` as the handler's return value.
    """

    def __init__(self, result: CommandResult) -> None:
        super().__init__(f"handler aborted with {result!r}")
        self.result: CommandResult = result
