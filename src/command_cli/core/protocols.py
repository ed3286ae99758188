"""Protocols (interfaces) consumed by the core layer.

The core never touches ``sys.stdout`` directly: everything it prints
goes through an :class:`OutputStreams` object handed in by the caller.
That keeps dispatch deterministic under test.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from command_cli.core.arguments import Arguments
    from command_cli.core.models import CommandResult


class TextSink(Protocol):
    """Anything with a text ``write`` method (files, ``StringIO``...)."""

    def write(self, text: str, /) -> object:
        ...  # pragma: no cover


class OutputStreams(Protocol):
    """Contract for the two text channels a command writes to.

    Implementations satisfy this protocol structurally (no explicit
    inheritance required).  The core only ever writes to the returned
    sinks; it never reads from them.
    """

    def output(self) -> TextSink:
        """Return the standard-output channel."""
        ...  # pragma: no cover

    def error(self) -> TextSink:
        """Return the error channel (usage text and diagnostics go here)."""
        ...  # pragma: no cover


Handler = Callable[["OutputStreams", "Arguments"], "CommandResult"]
"""Signature every command handler must follow."""
