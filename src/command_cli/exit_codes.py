"""Exit-code constants shared by the dispatcher and the entry point.

Centralised here so that every exit path uses a well-known, tested
value rather than magic integers scattered across the codebase.
"""

from __future__ import annotations

SUCCESS: int = 0
"""The handler returned :class:`~command_cli.core.models.Success`."""

ARGUMENT_ERROR: int = 1
"""Unknown command, bad argument count, or a handler ``ArgumentError``."""

EXECUTION_ERROR: int = 2
"""The handler returned ``ExecutionError``, or an unexpected exception escaped."""

KEYBOARD_INTERRUPT: int = 130
"""User pressed Ctrl+C.  Follows POSIX convention (128 + SIGINT=2)."""
