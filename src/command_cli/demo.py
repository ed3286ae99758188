"""Demo application shipped with command-cli.

Run it with ``python -m command_cli`` (or the ``command-cli-demo``
script)::

    $ python -m command_cli cmd1 x y z
    FOO: x
    BAR: y, z
    HOME: /home/me

It covers every parameter shape and both early-exit helpers.
"""

from __future__ import annotations

import os

from command_cli.cli.app import cli
from command_cli.core.arguments import Arguments
from command_cli.core.models import (
    Application,
    ArgumentError,
    Command,
    CommandResult,
    Parameter,
    Success,
)
from command_cli.core.protocols import OutputStreams
from command_cli.core.short_circuit import attempt, expect


def cmd1_handler(streams: OutputStreams, args: Arguments) -> CommandResult:
    """Echo FOO and every BAR, along with the user's home directory."""
    home = expect(streams, "Error: Unable to get home directory", os.environ.get("HOME"))
    out = streams.output()
    out.write(f"FOO: {args.first('FOO')}\n")
    out.write(f"BAR: {', '.join(args['BAR'])}\n")
    out.write(f"HOME: {home}\n")
    return Success()


def cmd2_handler(streams: OutputStreams, args: Arguments) -> CommandResult:
    """Print THING, falling back to ``$ENV_VAR`` when it is omitted."""
    thing = args.first("THING")
    if thing is None:
        thing = attempt(
            streams,
            "Error: Unable to get 'ENV_VAR' environment variable",
            os.environ.__getitem__,
            "ENV_VAR",
            catch=KeyError,
            failure=ArgumentError(),
        )
    if not thing.strip():
        streams.error().write("Error: THING must not be blank\n")
        return ArgumentError()
    streams.output().write(f"thing: {thing}\n")
    return Success()


def cmd3_handler(streams: OutputStreams, args: Arguments) -> CommandResult:
    """Print the size in bytes of each FILE."""
    out = streams.output()
    for path in args["FILE"]:
        size = attempt(
            streams,
            f"Error: Unable to read '{path}'",
            os.path.getsize,
            path,
            catch=OSError,
        )
        out.write(f"{size:>10}  {path}\n")
    return Success()


APP = Application(
    name="app",
    commands=(
        Command(
            name="cmd1",
            short_desc="foos the bars via extensible frameworks",
            params=(
                Parameter("FOO", required=True, repeating=False),
                Parameter("BAR", required=True, repeating=True),
            ),
            handler=cmd1_handler,
        ),
        Command(
            name="cmd2",
            short_desc="executes command #2 on the thing",
            params=(Parameter("THING", required=False, repeating=False),),
            handler=cmd2_handler,
        ),
        Command(
            name="cmd3",
            short_desc="runs command #3 on the files",
            params=(Parameter("FILE", required=False, repeating=True),),
            handler=cmd3_handler,
        ),
    ),
)


def main() -> None:
    """Console-script entry point."""
    cli(APP)
