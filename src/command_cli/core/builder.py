"""Decorator-based construction of an :class:`Application`.

An alternative to writing the command tree out as one literal::

    builder = ApplicationBuilder("notes")

    @builder.command("add", "append a note", Parameter("TEXT", repeating=True))
    def add(streams, args):
        ...

    APP = builder.build()
"""

from __future__ import annotations

from collections.abc import Callable

from command_cli.core.models import Application, Command, Parameter
from command_cli.core.protocols import Handler


class ApplicationBuilder:
    """Collects commands, then freezes them into an :class:`Application`.

    Each command is validated as soon as it is registered; duplicate
    command names are reported by :meth:`build`.
    """

    def __init__(self, name: str) -> None:
        self._name: str = name
        self._commands: list[Command] = []

    def add(self, command: Command) -> ApplicationBuilder:
        """Register an already-built command.  Returns ``self`` for chaining."""
        self._commands.append(command)
        return self

    def command(
        self,
        name: str,
        short_desc: str,
        *params: Parameter,
    ) -> Callable[[Handler], Handler]:
        """Register the decorated function as the handler of *name*."""

        def register(handler: Handler) -> Handler:
            self.add(Command(name, short_desc, params, handler))
            return handler

        return register

    def build(self) -> Application:
        return Application(self._name, tuple(self._commands))
