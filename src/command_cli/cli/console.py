"""Shared Rich console for the error boundary.

Targets stderr so boundary messages never mix with a command's own
standard output.
"""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape

console = Console(stderr=True)

__all__: list[str] = ["console", "escape"]
