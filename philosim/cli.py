"""Command-line entry point for the dining philosophers simulation."""

from __future__ import annotations

import sys
import time
from collections.abc import Sequence
from typing import Optional

from .settings import NothingToDo, SettingsError, parse_settings
from .table import Table


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the simulation from command-line arguments; return the exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        settings = parse_settings(args)
    except NothingToDo:
        return 1
    except SettingsError as exc:
        sys.stderr.write(f"ERR : {exc}\n")
        return 1
    Table(settings, sys.stdout, time.sleep).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())