"""Positional argument matching.

Every function in this module is a **pure** transformation: no I/O,
no side effects, fully deterministic.  Mismatches are returned as
values rather than raised, so a malformed invocation can never crash
the dispatcher.

Binding is greedy, left to right:

1. A non-repeating parameter takes one value when one is left.
2. A repeating parameter (always last) takes all remaining values.
3. A required parameter that ends up with nothing is a mismatch.
4. Values left over after the last parameter are a mismatch.

Because required parameters always precede optional ones (enforced by
:class:`~command_cli.core.models.Command`), greedy binding is never
ambiguous.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping, Sequence
from dataclasses import dataclass

from command_cli.core.models import Parameter


# ---------------------------------------------------------------------------
# Bound arguments
# ---------------------------------------------------------------------------

class Arguments(Mapping[str, tuple[str, ...]]):
    """Read-only mapping from parameter name to the values bound to it.

    Iteration follows declaration order.  Every declared parameter has
    an entry; slots that received nothing map to an empty tuple.
    """

    __slots__ = ("_bound",)

    def __init__(self, bound: Mapping[str, Sequence[str]]) -> None:
        self._bound: dict[str, tuple[str, ...]] = {
            name: tuple(values) for name, values in bound.items()
        }

    def __getitem__(self, name: str) -> tuple[str, ...]:
        return self._bound[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._bound)

    def __len__(self) -> int:
        return len(self._bound)

    def __repr__(self) -> str:
        return f"Arguments({self._bound!r})"

    def first(self, name: str, default: str | None = None) -> str | None:
        """Return the first value bound to *name*, or *default* if none.

        Raises ``KeyError`` for a name that was never declared.
        """
        values = self._bound[name]
        return values[0] if values else default


# ---------------------------------------------------------------------------
# Mismatches
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class MissingRequiredParameter:
    """A required parameter had no value left to bind."""

    name: str

    def describe(self) -> str:
        return f"Error: Missing required parameter '{self.name}'"


@dataclass(frozen=True, slots=True)
class TooManyArguments:
    """Values remained after every parameter was bound."""

    extra: tuple[str, ...]

    def describe(self) -> str:
        unexpected = ", ".join(f"'{value}'" for value in self.extra)
        return f"Error: Too many arguments (unexpected: {unexpected})"


ArgumentMismatch = MissingRequiredParameter | TooManyArguments


# ---------------------------------------------------------------------------
# Matcher
# ---------------------------------------------------------------------------

def match_arguments(
    params: Sequence[Parameter],
    raw_args: Sequence[str],
) -> Arguments | ArgumentMismatch:
    """Bind *raw_args* to *params*.

    *raw_args* are the values that follow the command name.  Returns the
    populated :class:`Arguments` or the first mismatch encountered.
    """
    values = tuple(raw_args)
    bound: dict[str, tuple[str, ...]] = {}
    position = 0

    for param in params:
        remaining = values[position:]
        taken = remaining if param.repeating else remaining[:1]
        if param.required and not taken:
            return MissingRequiredParameter(param.name)
        bound[param.name] = taken
        position += len(taken)

    if position < len(values):
        return TooManyArguments(values[position:])
    return Arguments(bound)
