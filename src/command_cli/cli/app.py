"""Process entry point and error boundary for command-cli applications.

:func:`cli` is the **sole error boundary** between an application and
the operating system.  It catches :class:`~command_cli.exceptions.CommandCliError`,
``KeyboardInterrupt`` and any unexpected ``Exception``, renders a
one-line message via Rich and exits with a well-defined code.

Typical use from an application's console-script function::

    def main() -> None:
        cli(APP)
"""

from __future__ import annotations

import sys
from collections.abc import Sequence
from typing import NoReturn

from command_cli import exit_codes
from command_cli.cli.console import console, escape
from command_cli.cli.streams import StdStreams
from command_cli.core.models import Application
from command_cli.core.protocols import OutputStreams
from command_cli.exceptions import CommandCliError, HandlerContractError


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(
    application: Application,
    argv: Sequence[str] | None = None,
    streams: OutputStreams | None = None,
) -> int:
    """Dispatch one invocation of *application*.

    Parameters
    ----------
    application:
        The command registry.
    argv:
        Full argument list including the program path.  When ``None``
        (default), ``sys.argv`` is used.  Accepting *argv* enables
        deterministic testing without monkeypatching.
    streams:
        Output sink; defaults to :class:`StdStreams`.

    Returns
    -------
    int
        OS process exit code.
    """
    if argv is None:
        argv = sys.argv
    if streams is None:
        streams = StdStreams()

    exit_code, _ = application.run(streams, argv)
    return exit_code


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def _print_error(exc: CommandCliError) -> None:
    console.print(f"[bold red]Error:[/bold red] {escape(str(exc))}")
    if exc.hint:
        console.print(f"[yellow]Hint:[/yellow] {escape(exc.hint)}")


def cli(application: Application, argv: Sequence[str] | None = None) -> NoReturn:
    """Run :func:`main` and terminate the process with its exit code.

    This function guarantees the process never exits with a raw stack
    trace during normal usage.
    """
    try:
        code = main(application, argv)
        sys.exit(code)
    except HandlerContractError as exc:
        _print_error(exc)
        sys.exit(exit_codes.EXECUTION_ERROR)
    except CommandCliError as exc:
        _print_error(exc)
        sys.exit(exit_codes.ARGUMENT_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {escape(str(exc))}"
        )
        sys.exit(exit_codes.EXECUTION_ERROR)
