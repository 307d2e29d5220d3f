"""Independent re-check of a finished queen placement.

The validator never looks at solver state. It rebuilds a clean grid from the
placement alone and fires every constraint in all directions:

- each queen attacks along the eight compass directions;
- with the line rule, every pair of queens fires its reduced direction
  outwards from both ends, away from each other.

A placement is valid when no queen's own cell ends up interdicted. Rays never
mark their starting cell, so a queen only loses its cell to another queen.
"""

from __future__ import annotations

from typing import Sequence

from .board import ALL_ATTACKS, InterdictionGrid, reduce_vector


def _in_range(positions: Sequence[int]) -> bool:
    n = len(positions)
    for column in positions:
        # bool is an int subclass but never a column index
        if not isinstance(column, int) or isinstance(column, bool):
            return False
        if column < 0 or column >= n:
            return False
    return True


def validate_positions(positions: Sequence[int], line_constraint: bool = True) -> bool:
    """Return True if ``positions`` is a valid placement.

    Parameters
    ----------
    positions : Sequence[int]
        ``positions[row] = column`` for every row of an N x N board, N >= 1.
    line_constraint : bool
        Also reject placements with three collinear queens.
    """
    n = len(positions)
    if n == 0 or not _in_range(positions):
        return False

    grid = InterdictionGrid(n)

    for y, x in enumerate(positions):
        for dx, dy in ALL_ATTACKS:
            grid.mark_ray(x, y, dx, dy)

    if line_constraint:
        for ya in range(n):
            xa = positions[ya]
            for yb in range(ya + 1, n):
                xb = positions[yb]
                dx, dy = reduce_vector(xa - xb, ya - yb)
                grid.mark_ray(xa, ya, dx, dy)
                grid.mark_ray(xb, yb, -dx, -dy)

    return all(grid.available(x, y) for y, x in enumerate(positions))
