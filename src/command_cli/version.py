"""Single source of truth for the command-cli version string."""

__version__: str = "0.3.0"
