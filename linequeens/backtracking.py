"""Backtracking solver for N-Queens with an optional no-three-in-line rule.

The search places exactly one queen per row, recursing from the top row to
the bottom one. For each row the columns are tried left to right; the first
complete placement found is returned.

Implementation overview
-----------------------
- State representation: ``queen_column[row] = column`` for the rows placed
  so far; an :class:`~linequeens.board.InterdictionGrid` records which cells
  are still available to later rows.
- Clone per branch: every tentative placement works on a copy of the parent
  grid, so trying the next column never requires undoing markup.
- Constraint tracking: after placing a queen on (x, row) the solver marches
  rays straight down and along both downward diagonals. With the line rule
  active it also marches, for each queen already placed on an earlier row,
  the reduced direction from that queen through the new one. Any later cell
  on such a ray would complete a line of three.
- The grid is only kept accurate from the current row down; rows already
  passed are never read again.

Contract (public API)
---------------------
- ``QueensBoard(size, line_constraint=True)``; ``size >= 1``.
- ``solve() -> bool``: never raises; ``False`` means no placement exists.
- ``queen_positions() -> list[int]``: raises :class:`InvalidStateError`
  unless the last ``solve()`` succeeded.
- ``validate() -> bool``: independent re-check of the solution, ``False``
  before a successful solve.
- ``bt_nqueens_lines(size, line_constraint=True)`` returns
  ``(solution, nodes_explored, elapsed_seconds)`` for batch runs.

Nodes explored semantics: incremented every time a queen is tentatively
placed on an available cell.
"""

from __future__ import annotations

from enum import Enum
from time import perf_counter
from typing import List, Optional, Tuple

from .board import FORWARD_ATTACKS, InterdictionGrid, reduce_vector
from .utils import render_board
from .validation import validate_positions


class SolveStatus(Enum):
    """Lifecycle of a :class:`QueensBoard`."""

    NOT_ATTEMPTED = "not_attempted"
    NO_SOLUTION = "no_solution"
    SOLVED = "solved"


class InvalidStateError(RuntimeError):
    """Raised when a result is read from a board that holds no solution."""

    def __init__(self, message: str, status: SolveStatus):
        super().__init__(message)
        self.status = status


class QueensBoard:
    """N-Queens board with its own solver state.

    Parameters
    ----------
    size : int
        Board dimension N, which is also the number of queens.
    line_constraint : bool, default True
        When True, no three queens may lie on a common straight line.
    """

    def __init__(self, size: int, line_constraint: bool = True):
        if size < 1:
            raise ValueError(f"Board size must be at least 1, got {size}.")
        self._size = size
        self._line_constraint = line_constraint
        self._queen_column: List[int] = [0] * size
        self._attempted = False
        self._solved = False
        self.nodes_explored = 0
        self.elapsed = 0.0

    @property
    def size(self) -> int:
        return self._size

    @property
    def line_constraint(self) -> bool:
        return self._line_constraint

    @property
    def attempted(self) -> bool:
        return self._attempted

    @property
    def solved(self) -> bool:
        return self._solved

    @property
    def status(self) -> SolveStatus:
        if not self._attempted:
            return SolveStatus.NOT_ATTEMPTED
        return SolveStatus.SOLVED if self._solved else SolveStatus.NO_SOLUTION

    def _mark_board(self, grid: InterdictionGrid, row: int) -> None:
        """Interdict every cell below ``row`` reachable from its queen."""
        x = self._queen_column[row]

        for dx, dy in FORWARD_ATTACKS:
            grid.mark_ray(x, row, dx, dy)

        if self._line_constraint:
            # The direction from an earlier queen through this one always
            # points down (dy > 0), so the ray only touches future rows.
            for q in range(row):
                dx, dy = reduce_vector(x - self._queen_column[q], row - q)
                grid.mark_ray(x, row, dx, dy)

    def _solve_rest(self, row: int, grid: InterdictionGrid) -> bool:
        if row >= self._size:
            return True

        for x in range(self._size):
            if not grid.available(x, row):
                continue
            self.nodes_explored += 1
            branch = grid.copy()
            self._queen_column[row] = x
            self._mark_board(branch, row)
            if self._solve_rest(row + 1, branch):
                return True

        return False

    def solve(self) -> bool:
        """Search for the first solution; return True if one was found."""
        self._attempted = True
        self.nodes_explored = 0
        start = perf_counter()
        self._solved = self._solve_rest(0, InterdictionGrid(self._size))
        self.elapsed = perf_counter() - start
        return self._solved

    def queen_positions(self) -> List[int]:
        """Return the column of the queen in each row (copy).

        Raises
        ------
        InvalidStateError
            If ``solve()`` was never called or did not find a solution.
        """
        if not self._attempted:
            raise InvalidStateError("Board not solved yet.", self.status)
        if not self._solved:
            raise InvalidStateError("No solution found for board.", self.status)
        return list(self._queen_column)

    def validate(self) -> bool:
        """Re-derive every constraint from the solution; False if unsolved."""
        if self.status is not SolveStatus.SOLVED:
            return False
        return validate_positions(self._queen_column, self._line_constraint)

    def render(self) -> str:
        """Text diagram of the solution, one line per row."""
        return render_board(self.queen_positions())

    def __repr__(self) -> str:
        return (
            f"QueensBoard(size={self._size}, line_constraint={self._line_constraint}, "
            f"status={self.status.value})"
        )


def bt_nqueens_lines(
    size: int, line_constraint: bool = True
) -> Tuple[Optional[List[int]], int, float]:
    """Solve one board and report the search effort.

    Returns
    -------
    (solution, nodes_explored, elapsed_seconds)
        ``solution`` is ``queen_column`` (index = row) or None when no
        placement exists.
    """
    board = QueensBoard(size, line_constraint)
    solution = board.queen_positions() if board.solve() else None
    return solution, board.nodes_explored, board.elapsed
