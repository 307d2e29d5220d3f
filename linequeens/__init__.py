"""N-Queens backtracking solver with an optional no-three-in-line rule."""

from .backtracking import InvalidStateError, QueensBoard, SolveStatus, bt_nqueens_lines
from .board import InterdictionGrid, gcd, reduce_vector
from .utils import collinear_triples, conflicts, is_valid_solution, render_board
from .validation import validate_positions

__all__ = [
    "QueensBoard",
    "SolveStatus",
    "InvalidStateError",
    "bt_nqueens_lines",
    "InterdictionGrid",
    "gcd",
    "reduce_vector",
    "validate_positions",
    "conflicts",
    "collinear_triples",
    "is_valid_solution",
    "render_board",
]
