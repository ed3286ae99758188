"""Early-exit helpers for handler bodies.

Both helpers either hand back a usable value or write a message to the
error channel and unwind the handler with a chosen
:class:`~command_cli.core.models.CommandResult`::

    def show(streams, args):
        home = expect(streams, "Error: HOME is not set", os.environ.get("HOME"))
        text = attempt(streams, "Error: cannot read notes", Path(home, "notes").read_text)
        streams.output().write(text)
        return Success()

The unwinding is done with :class:`~command_cli.exceptions.HandlerAborted`,
which only the dispatcher catches.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any, TypeVar

from command_cli.core.models import CommandResult, ExecutionError
from command_cli.core.protocols import OutputStreams
from command_cli.exceptions import HandlerAborted

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _abort(streams: OutputStreams, message: str, result: CommandResult) -> HandlerAborted:
    streams.error().write(f"{message}\n")
    return HandlerAborted(result)


def attempt(
    streams: OutputStreams,
    message: str,
    operation: Callable[..., T],
    *args: Any,
    failure: CommandResult | None = None,
    catch: type[BaseException] | tuple[type[BaseException], ...] = Exception,
    **kwargs: Any,
) -> T:
    """Call ``operation(*args, **kwargs)`` and return what it returns.

    If it raises an instance of *catch*, *message* is written to the
    error channel and the handler is aborted with *failure*, which
    defaults to ``ExecutionError(<the exception>)``.

    ``failure`` and ``catch`` are consumed here and never forwarded.  An
    operation that itself takes keywords with those names must be bound
    beforehand, e.g. ``attempt(streams, msg, functools.partial(op, catch=x))``.
    """
    try:
        return operation(*args, **kwargs)
    except HandlerAborted:
        raise
    except catch as exc:
        logger.debug("attempt: %r raised %r", operation, exc)
        raise _abort(
            streams,
            message,
            failure if failure is not None else ExecutionError(exc),
        ) from exc


def expect(
    streams: OutputStreams,
    message: str,
    value: T | None,
    *,
    failure: CommandResult | None = None,
) -> T:
    """Return *value* unless it is ``None``.

    On ``None``, *message* is written to the error channel and the
    handler is aborted with *failure* (default ``ExecutionError()``).
    """
    if value is None:
        raise _abort(
            streams,
            message,
            failure if failure is not None else ExecutionError(),
        )
    return value
