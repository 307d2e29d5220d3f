"""Command-line entry point for solving a single board.

Usage::

    linequeens [--validate] [no-line-constraint] [queens]

The line constraint is on by default and the queen count defaults to 8. Only
two positional arguments are understood, so the interpretation below is done
by hand on top of ``argparse``.
"""
from __future__ import annotations

import argparse
from typing import List, Optional, Tuple

from .backtracking import QueensBoard

NO_LINE_FLAG = "no-line-constraint"
DEFAULT_QUEENS = 8

USAGE_TEXT = (
    "Usage: linequeens [args] queens\n"
    "  args:\n"
    f"    {NO_LINE_FLAG} - Don't enforce 3-queens line constraint.\n"
)


class UsageError(ValueError):
    """Positional arguments that cannot be interpreted."""


def build_arg_parser() -> argparse.ArgumentParser:
    """Construct the argument parser for the CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="linequeens",
        description="Find the first N-Queens placement, optionally with no three queens in a line.",
        epilog=USAGE_TEXT,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "args",
        nargs="*",
        metavar="ARG",
        help=f"Optional '{NO_LINE_FLAG}' followed by an optional queen count (default: {DEFAULT_QUEENS}).",
    )
    parser.add_argument("--validate", action="store_true", help="Re-check the solution with the independent validator.")
    return parser


def _to_queens(arg: str) -> int:
    try:
        queens = int(arg)
    except ValueError:
        raise UsageError(f"Unable to convert argument '{arg}' to a number.") from None
    if queens < 1:
        raise UsageError(f"Queen count must be at least 1, got {queens}.")
    return queens


def parse_positionals(args: List[str]) -> Tuple[bool, int]:
    """Map the positional arguments to ``(line_constraint, queens)``.

    Raises
    ------
    UsageError
        On more than two arguments, a misplaced flag, or a bad count.
    """
    line_constraint = True
    queens = DEFAULT_QUEENS

    if len(args) == 1:
        if args[0] == NO_LINE_FLAG:
            line_constraint = False
        else:
            queens = _to_queens(args[0])
    elif len(args) == 2:
        if args[0] != NO_LINE_FLAG:
            raise UsageError(f"Unexpected argument '{args[0]}'.")
        line_constraint = False
        queens = _to_queens(args[1])
    elif len(args) > 2:
        raise UsageError("Too many arguments.")

    return line_constraint, queens


def main(argv: Optional[List[str]] = None) -> int:
    """Parse arguments, solve, print the board; return the exit status."""
    parser = build_arg_parser()
    ns = parser.parse_intermixed_args(argv)

    try:
        line_constraint, queens = parse_positionals(ns.args)
    except UsageError as exc:
        print(exc)
        print(USAGE_TEXT, end="")
        return 1

    if not ns.args:
        print(f"Assuming {queens} Queens -- rerun with an integer argument to specify.")

    board = QueensBoard(queens, line_constraint)
    if not board.solve():
        print(f"No solution found for {queens} queens.")
        return 0

    print(board.render())

    if ns.validate:
        if not board.validate():
            print("Validation failed.")
            return 1
        print("Validation passed.")
    return 0
