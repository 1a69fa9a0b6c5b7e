"""Module entry point for running the ledger via ``python -m coinbook``.

:func:`coinbook.cli.main` sets up the curses session itself with
:func:`curses.wrapper`, so this module only turns its return value into the
process exit status.
"""

import sys

from .cli import main


def entry_point() -> None:
    """Run the CLI and exit with its status."""
    sys.exit(main())


if __name__ == "__main__":  # pragma: no cover - manual execution entry
    entry_point()
