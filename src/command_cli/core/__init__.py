"""Core layer — declarations, argument matching and dispatch.

Rules
-----
* No ``print()`` calls; all output goes through an injected
  :class:`~command_cli.core.protocols.OutputStreams`.
* No imports from ``cli``.
* Malformed user input is reported by return value, never raised.
"""

from command_cli.core.arguments import (
    ArgumentMismatch,
    Arguments,
    MissingRequiredParameter,
    TooManyArguments,
    match_arguments,
)
from command_cli.core.builder import ApplicationBuilder
from command_cli.core.dispatcher import RunOutcome, run
from command_cli.core.models import (
    Application,
    ArgumentError,
    Command,
    CommandResult,
    ExecutionError,
    Parameter,
    Success,
)
from command_cli.core.protocols import Handler, OutputStreams, TextSink
from command_cli.core.short_circuit import attempt, expect

__all__: list[str] = [
    "Application",
    "ApplicationBuilder",
    "ArgumentError",
    "ArgumentMismatch",
    "Arguments",
    "Command",
    "CommandResult",
    "ExecutionError",
    "Handler",
    "MissingRequiredParameter",
    "OutputStreams",
    "Parameter",
    "RunOutcome",
    "Success",
    "TextSink",
    "TooManyArguments",
    "attempt",
    "expect",
    "match_arguments",
    "run",
]
