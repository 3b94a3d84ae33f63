"""
main.py — Command line entry point for the reorientation search
===============================================================

Runs one search and prints the same text the desktop window shows.

Features & behavior:
 - The algorithm is given as positional words or with `--alg`.
 - `--cheap`, `--max-depth`, `--all` and `--sticker-notation` mirror the
   window's fields.
 - `--gui` opens the PyQt5 window instead (pre-filled with the arguments).
 - Debug logging is explicitly opt-in (`--debug`).

Exit codes: 0 on a finished run (including "No solutions?" and notation
errors, which are reported as output), 1 when the search itself fails,
2 for invalid options.

------------------------------------------------------------------

Copyright (c) 2025 Facundo Gauna & Ulises Carnevale. MIT License.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

from app_types import SearchConfig
from config import (
    DEFAULT_CHEAP_MOVES,
    DEFAULT_MAX_DEPTH,
    LOG_FORMAT,
    MAX_DEPTH_LIMIT,
)
from cube_solver import ReorientSolver

logger = logging.getLogger("main")


def create_arg_parser() -> argparse.ArgumentParser:
    """
    Build and return the CLI argument parser.
    """
    p = argparse.ArgumentParser(
        description="Find the cheapest reorientations that close an algorithm.",
        allow_abbrev=False,
    )

    p.add_argument("alg_words", nargs="*", metavar="MOVE", help="Algorithm moves, e.g. R U2 R2 U'.")
    p.add_argument("--alg", default=None, help="Algorithm as a single quoted string.")
    p.add_argument("--cheap", default=DEFAULT_CHEAP_MOVES,
                   help="Space-separated rotation names that cost 1 (e.g. 'xy2 y2').")
    p.add_argument("--max-depth", type=int, default=DEFAULT_MAX_DEPTH,
                   help=f"Maximum number of reorientations to try (0..{MAX_DEPTH_LIMIT}).")
    p.add_argument("--all", dest="show_all", action="store_true",
                   help="Show every minimal solution, not only the cheapest.")
    p.add_argument("--sticker-notation", action="store_true",
                   help="Print reorientations as 23I:... instead of O....")
    p.add_argument("--gui", action="store_true", help="Open the desktop window.")
    p.add_argument("--debug", action="store_true", help="Enable debug logging.")

    return p


def main(argv: Optional[Sequence[str]] = None) -> int:
    """
    Main entry point.

    Supports direct CLI invocation or programmatic use via:
        main(["R", "U", "R'", "--max-depth", "2"])

    Returns integer exit code.
    """
    parser = create_arg_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format=LOG_FORMAT)
    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)
        logger.debug("Debug mode enabled.")

    alg = args.alg if args.alg is not None else " ".join(args.alg_words)

    try:
        config = SearchConfig(
            max_depth=args.max_depth,
            cheap_moves=args.cheap,
            sticker_notation=args.sticker_notation,
            show_all=args.show_all,
        )
    except ValueError as e:
        parser.print_usage(sys.stderr)
        print(f"{parser.prog}: error: {e}", file=sys.stderr)
        return 2

    if args.gui:
        from runUI import run_gui
        return run_gui(alg, config)

    solver = ReorientSolver()
    try:
        solver.run(alg, config)
    except Exception as e:
        logger.error("Search aborted: %s", e)
        print(solver.output(), end="")
        return 1

    print(solver.output(), end="")
    return 0


if __name__ == "__main__":
    sys.exit(main())
