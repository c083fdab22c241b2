from __future__ import annotations

import argparse
import itertools
import logging
import sys
from datetime import date
from typing import List, Optional, Sequence

from board import Board, DateError
from pieces import PIECE_COLORS, build_roster
from render import COLOR_MODES, block_map, color_enabled, render_solution
from shape import Shape
from solver import FIRST_FREE_CELL, STRATEGIES, BacktrackingSearch

LOG_FORMAT = "{asctime} [{levelname:5}] {name} - {message}"


def positive_int(value: str) -> int:
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {value}")
    return number


def build_parser() -> argparse.ArgumentParser:
    today = date.today()
    parser = argparse.ArgumentParser(
        prog="calendar-tiler",
        description="Find every way to tile the calendar board around a month and day.",
    )
    parser.add_argument("-d", "--day", type=int, default=today.day, help="Day number starting at 1 (default: today)")
    parser.add_argument("-m", "--month", type=int, default=today.month, help="Month number starting at 1 (default: today)")
    parser.add_argument(
        "-c", "--color",
        choices=COLOR_MODES,
        default="auto",
        help="Colour the pieces (default: %(default)s)",
    )
    parser.add_argument(
        "-s", "--strategy",
        choices=STRATEGIES,
        default=FIRST_FREE_CELL,
        help="'pieces' places the roster in order at every anchor, "
        "'cells' always covers the first free cell (default: %(default)s)",
    )
    parser.add_argument("--prune", action="store_true", help="Skip boards with unfillable free regions")
    parser.add_argument("-n", "--limit", type=positive_int, default=None, help="Stop after this many solutions")
    parser.add_argument("--gui", action="store_true", help="Browse the solutions in a window afterwards")
    parser.add_argument(
        "-l", "--log-level",
        choices=["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"],
        default="WARNING",
        help="Set the logging output level (default: %(default)s)",
    )
    return parser


def setup_logging(level: str) -> None:
    root = logging.getLogger()
    for existing in [h for h in root.handlers if h.get_name() == "calendar-tiler"]:
        root.removeHandler(existing)

    handler = logging.StreamHandler(sys.stderr)
    handler.set_name("calendar-tiler")
    handler.setFormatter(logging.Formatter(LOG_FORMAT, "%H:%M:%S", style="{"))
    root.addHandler(handler)
    root.setLevel(getattr(logging, level, logging.WARNING))


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.log_level)

    try:
        board = Board.for_date(args.month, args.day)
    except DateError as exc:
        parser.error(str(exc))
    roster = build_roster()

    blocks = block_map(PIECE_COLORS) if color_enabled(args.color, sys.stdout) else {}
    search = BacktrackingSearch(board, roster, strategy=args.strategy, prune=args.prune)
    found: List[Shape] = []

    solutions = search.solutions()
    try:
        for n, solution in enumerate(itertools.islice(solutions, args.limit), start=1):
            print(f"#{n}:")
            print(render_solution(solution, args.month, args.day, blocks))
            if args.gui:
                found.append(solution)
    finally:
        solutions.close()
    print(f"Calls: {search.stats.calls}")

    if args.gui:
        from gui import run_viewer

        run_viewer(found, args.month, args.day)
    return 0


if __name__ == "__main__":
    sys.exit(main())
