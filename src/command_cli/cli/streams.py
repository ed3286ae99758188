"""Concrete :class:`~command_cli.core.protocols.OutputStreams` implementations."""

from __future__ import annotations

import io
import sys
from typing import TextIO


class StdStreams:
    """The process's real ``stdout`` and ``stderr``.

    Looked up on every call rather than captured at construction, so
    redirection (``contextlib.redirect_stdout``, pytest's ``capsys``)
    is honoured.
    """

    def output(self) -> TextIO:
        return sys.stdout

    def error(self) -> TextIO:
        return sys.stderr


class VirtualStreams:
    """In-memory streams for tests and for capturing a command's output."""

    def __init__(self) -> None:
        self._output: io.StringIO = io.StringIO()
        self._error: io.StringIO = io.StringIO()

    def output(self) -> io.StringIO:
        return self._output

    def error(self) -> io.StringIO:
        return self._error

    def read_output(self) -> str:
        """Everything written to the output channel so far."""
        return self._output.getvalue()

    def read_error(self) -> str:
        """Everything written to the error channel so far."""
        return self._error.getvalue()
