"""command-cli — a small framework for command-style CLIs.

Declare an :class:`Application` made of :class:`Command` objects, each
with positional :class:`Parameter` slots, and let the dispatcher match
``sys.argv`` against them and call the right handler.
"""

import logging

from command_cli.core.arguments import Arguments
from command_cli.core.builder import ApplicationBuilder
from command_cli.core.dispatcher import RunOutcome
from command_cli.core.models import (
    Application,
    ArgumentError,
    Command,
    CommandResult,
    ExecutionError,
    Parameter,
    Success,
)
from command_cli.core.short_circuit import attempt, expect
from command_cli.version import __version__

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__: list[str] = [
    "Application",
    "ApplicationBuilder",
    "ArgumentError",
    "Arguments",
    "Command",
    "CommandResult",
    "ExecutionError",
    "Parameter",
    "RunOutcome",
    "Success",
    "__version__",
    "attempt",
    "expect",
]
