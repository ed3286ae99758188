"""CLI layer — real output streams, process entry point and error boundary.

This package is the outermost layer.  It may import from ``core``,
but ``core`` never imports from ``cli``.
"""

from command_cli.cli.app import cli, main
from command_cli.cli.streams import StdStreams, VirtualStreams

__all__: list[str] = ["StdStreams", "VirtualStreams", "cli", "main"]
