"""Allow ``python -m drills`` invocation.

Delegates to the CLI error-boundary entry point so that
``python -m drills`` behaves identically to the ``drills`` console
script.
"""

from __future__ import annotations

from drills.cli.app import cli

if __name__ == "__main__":
    cli()
