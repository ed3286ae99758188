"""Domain models for command-cli.

All models are **frozen** dataclasses, built once at startup and never
mutated afterwards.  Declarations are validated eagerly in
``__post_init__`` so that an ambiguous command tree is rejected before
any argument is dispatched.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from command_cli.exceptions import DuplicateCommandError, InvalidCommandError

if TYPE_CHECKING:
    from command_cli.core.dispatcher import RunOutcome
    from command_cli.core.protocols import Handler, OutputStreams


# ---------------------------------------------------------------------------
# Parameter
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Parameter:
    """A named positional slot in a command's argument list."""

    name: str
    """Label used for usage text and for lookup in :class:`Arguments`."""

    required: bool = True
    """At least one value must be supplied for this slot."""

    repeating: bool = False
    """The slot absorbs every remaining value.  Only legal as the last slot."""

    def __post_init__(self) -> None:
        if not self.name:
            raise InvalidCommandError("Parameter name must be a non-empty string.")

    def __str__(self) -> str:
        token = self.name if self.required else f"[{self.name}]"
        return f"{token}..." if self.repeating else token


# ---------------------------------------------------------------------------
# Command
# ---------------------------------------------------------------------------

def _validate_params(command_name: str, params: Sequence[Parameter]) -> None:
    seen: set[str] = set()
    repeating: Parameter | None = None
    optional: Parameter | None = None

    for param in params:
        if param.name in seen:
            raise InvalidCommandError(
                f"Command '{command_name}' declares parameter "
                f"'{param.name}' more than once.",
            )
        seen.add(param.name)

        if repeating is not None:
            if param.repeating:
                raise InvalidCommandError(
                    f"Command '{command_name}' declares more than one repeating "
                    f"parameter ('{repeating.name}' and '{param.name}').",
                )
            raise InvalidCommandError(
                f"Command '{command_name}': repeating parameter "
                f"'{repeating.name}' must be the last parameter.",
                hint=f"Move '{repeating.name}' after '{param.name}'.",
            )

        if param.required and optional is not None:
            raise InvalidCommandError(
                f"Command '{command_name}': required parameter '{param.name}' "
                f"follows optional parameter '{optional.name}'.",
                hint="Declare every required parameter before the optional ones.",
            )

        if param.repeating:
            repeating = param
        if not param.required:
            optional = param


@dataclass(frozen=True, slots=True)
class Command:
    """A named subcommand: description, parameter schema and handler."""

    name: str
    short_desc: str
    params: tuple[Parameter, ...]
    handler: Handler = field(compare=False)

    def __post_init__(self) -> None:
        if not self.name:
            raise InvalidCommandError("Command name must be a non-empty string.")
        # Accept any sequence, store a tuple.
        object.__setattr__(self, "params", tuple(self.params))
        _validate_params(self.name, self.params)

    def __str__(self) -> str:
        return " ".join([self.name, *(str(param) for param in self.params)])


# ---------------------------------------------------------------------------
# Application
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Application:
    """Immutable registry of commands plus the program's display name."""

    name: str
    commands: tuple[Command, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "commands", tuple(self.commands))
        seen: set[str] = set()
        for command in self.commands:
            if command.name in seen:
                raise DuplicateCommandError(
                    f"Application '{self.name}' declares command "
                    f"'{command.name}' more than once.",
                )
            seen.add(command.name)

    def find_command(self, name: str) -> Command | None:
        """Return the command called exactly *name*, or ``None``."""
        for command in self.commands:
            if command.name == name:
                return command
        return None

    def run(self, streams: OutputStreams, argv: Sequence[str]) -> RunOutcome:
        """Dispatch *argv* (``argv[0]`` is the program path) to a command."""
        from command_cli.core.dispatcher import run

        return run(self, streams, argv)


# ---------------------------------------------------------------------------
# Handler results
# ---------------------------------------------------------------------------

class CommandResult:
    """Base class of the three handler outcomes."""

    __slots__ = ()


@dataclass(frozen=True, slots=True)
class Success(CommandResult):
    """The command completed successfully."""


@dataclass(frozen=True, slots=True)
class ArgumentError(CommandResult):
    """The arguments were well-formed but semantically unacceptable."""


@dataclass(frozen=True, slots=True)
class ExecutionError(CommandResult):
    """Something went wrong while running the command."""

    detail: BaseException | str | None = None
    """Underlying cause, printed as ``Inner error: ...`` when present."""
