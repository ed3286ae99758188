"""Command dispatch, from raw ``argv`` to an exit code.

State machine
-------------
1. **Start**: drop ``argv[0]`` (the program path) and take the next
   argument as the command name.  None left → application usage, 1.
2. **Lookup**: exact-name match.  Unknown → error line plus
   application usage, 1.
3. **Match**: bind the remaining arguments.  Mismatch → description
   plus the command's usage line, 1.
4. **Dispatch**: call the handler; a :class:`HandlerAborted` raised
   inside it stands in for its return value.
5. **Map**: ``Success`` → 0, ``ArgumentError`` → 1 (with usage line),
   ``ExecutionError`` → 2 (with ``Inner error:`` detail when present).

Every diagnostic goes to the error channel.  The standard channel
belongs to handlers.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import NamedTuple

from command_cli import exit_codes
from command_cli.core.arguments import Arguments, match_arguments
from command_cli.core.models import (
    Application,
    ArgumentError,
    Command,
    CommandResult,
    ExecutionError,
    Success,
)
from command_cli.core.protocols import OutputStreams
from command_cli.exceptions import HandlerAborted, HandlerContractError

logger = logging.getLogger(__name__)

SHORT_DESC_NAME_WIDTH: int = 22
"""Column width of the command name in the application usage listing."""


class RunOutcome(NamedTuple):
    """What a single dispatch produced."""

    exit_code: int
    result: CommandResult | None
    """The handler's result, or ``None`` if no handler ran."""


# ---------------------------------------------------------------------------
# Usage rendering
# ---------------------------------------------------------------------------

def format_short_desc(command: Command) -> str:
    return f"{command.name:<{SHORT_DESC_NAME_WIDTH}}  {command.short_desc}"


def format_application_usage(application: Application) -> str:
    """Render the program-level usage summary, one command per line."""
    lines = [f"Usage: {application.name} COMMAND [ARGS]", "", "commands:"]
    lines.extend(format_short_desc(command) for command in application.commands)
    return "\n".join(lines) + "\n"


def format_command_usage(app_name: str, command: Command) -> str:
    """Render ``Usage: <app> <command> <params>`` for a single command."""
    return f"Usage: {app_name} {command}\n"


# ---------------------------------------------------------------------------
# Dispatch
# ---------------------------------------------------------------------------

def _invoke(command: Command, streams: OutputStreams, arguments: Arguments) -> CommandResult:
    try:
        result = command.handler(streams, arguments)
    except HandlerAborted as aborted:
        logger.debug("Handler for '%s' aborted with %r", command.name, aborted.result)
        result = aborted.result

    if not isinstance(result, CommandResult):
        raise HandlerContractError(
            f"Handler for command '{command.name}' returned {result!r}, "
            "not a CommandResult.",
            hint="Return Success(), ArgumentError() or ExecutionError(...) from every handler.",
        )
    return result


def _exit_code_for(
    application: Application,
    command: Command,
    streams: OutputStreams,
    result: CommandResult,
) -> int:
    if isinstance(result, Success):
        return exit_codes.SUCCESS
    if isinstance(result, ArgumentError):
        streams.error().write(format_command_usage(application.name, command))
        return exit_codes.ARGUMENT_ERROR
    if isinstance(result, ExecutionError):
        if result.detail is not None:
            streams.error().write(f"Inner error: {result.detail}\n")
        return exit_codes.EXECUTION_ERROR
    raise HandlerContractError(f"Unknown CommandResult type: {type(result).__name__}")


def run(
    application: Application,
    streams: OutputStreams,
    argv: Sequence[str],
) -> RunOutcome:
    """Parse *argv*, run the selected command and return its outcome.

    Parameters
    ----------
    application:
        The command registry to dispatch against.
    streams:
        Output sink passed on to the handler; diagnostics are written
        to its error channel.
    argv:
        Full process argument list, ``argv[0]`` being the program path.

    Returns
    -------
    RunOutcome
        ``(exit_code, result)``; ``result`` is ``None`` whenever the
        invocation was rejected before a handler ran.
    """
    args = list(argv)

    if len(args) < 2:
        logger.debug("No command given to '%s'", application.name)
        streams.error().write(format_application_usage(application))
        return RunOutcome(exit_codes.ARGUMENT_ERROR, None)

    command_name = args[1]
    command = application.find_command(command_name)
    if command is None:
        logger.debug("Unrecognized command '%s'", command_name)
        err = streams.error()
        err.write(f"Error: Unrecognized command '{command_name}'\n\n")
        err.write(format_application_usage(application))
        return RunOutcome(exit_codes.ARGUMENT_ERROR, None)

    matched = match_arguments(command.params, args[2:])
    if not isinstance(matched, Arguments):
        logger.debug("Arguments rejected for '%s': %r", command.name, matched)
        err = streams.error()
        err.write(matched.describe() + "\n")
        err.write(format_command_usage(application.name, command))
        return RunOutcome(exit_codes.ARGUMENT_ERROR, None)

    logger.debug("Dispatching '%s' with %r", command.name, matched)
    result = _invoke(command, streams, matched)
    exit_code = _exit_code_for(application, command, streams, result)
    logger.debug("Command '%s' finished with %r (exit %d)", command.name, result, exit_code)
    return RunOutcome(exit_code, result)
