"""Command-line entry point for the dining-philosophers simulation."""

from __future__ import annotations

import sys
from typing import Optional, Sequence

from .args import ArgumentError, parse_settings
from .simulation import Simulation


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the simulation from arguments; return the process exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        settings = parse_settings(args)
    except ArgumentError as error:
        stream = sys.stdout if error.to_stdout else sys.stderr
        stream.write(f"{error.message}\n")
        return 1
    Simulation(settings, sys.stdout).run()
    sys.stdout.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())