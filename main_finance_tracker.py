"""Mini README: Entry point script for the personal finance tracker.

Runs the Typer CLI defined in ``fintrack.interface``. Settings come from
``FINTRACK_`` environment variables or a ``.env`` file; command-line flags
override them. All data lives in memory and is discarded on exit.
"""

from __future__ import annotations

from fintrack.interface import cli

if __name__ == "__main__":
    cli()
