"""Allow ``python -m command_cli`` invocation.

Runs the bundled demo application so the framework can be tried out
without writing any code.
"""

from __future__ import annotations

from command_cli.demo import main

if __name__ == "__main__":
    main()
