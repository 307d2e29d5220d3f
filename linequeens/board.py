"""Interdiction grid and vector-marching primitives.

The grid tracks which cells of an N x N board can still receive a queen.
Cells are addressed as ``(x, y)`` where ``x`` is the column and ``y`` the row;
``True`` means available, ``False`` means interdicted by a queen already on
the board.

Every constraint in this project is expressed as a ray: starting from a
queen, step by a direction vector and interdict each visited cell until the
board edge is crossed. Standard attacks use the unit vectors below; the
no-three-in-line rule uses the direction between two queens, reduced by the
GCD of its components so the ray lands on every lattice point of the line.
"""

from __future__ import annotations

from typing import List, Optional, Tuple

Vector = Tuple[int, int]

# Attack directions that reach rows below (x, y). Rows above the current one
# are never revisited by the row-by-row search.
FORWARD_ATTACKS: Tuple[Vector, ...] = (
    (0, 1),   # down
    (-1, 1),  # down-left
    (1, 1),   # down-right
)

# Full queen attack in every direction, used by the validator.
ALL_ATTACKS: Tuple[Vector, ...] = (
    (1, 0),    # right
    (1, -1),   # right-up
    (0, -1),   # up
    (-1, -1),  # left-up
    (-1, 0),   # left
    (-1, 1),   # left-down
    (0, 1),    # down
    (1, 1),    # right-down
)


def gcd(a: int, b: int) -> int:
    """Greatest common divisor of ``|a|`` and ``|b|`` (Euclid)."""
    a, b = abs(a), abs(b)
    while b:
        a, b = b, a % b
    return a


def reduce_vector(dx: int, dy: int) -> Vector:
    """Reduce a displacement to its primitive integer direction.

    ``(4, 6)`` becomes ``(2, 3)``, ``(0, 4)`` becomes ``(0, 1)``; signs are
    preserved. The zero vector has no direction and raises ``ValueError``.
    """
    d = gcd(dx, dy)
    if d == 0:
        raise ValueError("Cannot reduce the zero vector (0, 0).")
    return dx // d, dy // d


class InterdictionGrid:
    """Square availability bitmap stored as a flat list of booleans.

    Parameters
    ----------
    size : int
        Board width and height (N >= 1).
    """

    __slots__ = ("size", "cells")

    def __init__(self, size: int, cells: Optional[List[bool]] = None):
        if size < 1:
            raise ValueError(f"Board size must be at least 1, got {size}.")
        self.size = size
        self.cells = cells if cells is not None else [True] * (size * size)

    def copy(self) -> "InterdictionGrid":
        """Return an independent grid with the same markup."""
        return InterdictionGrid(self.size, self.cells.copy())

    def contains(self, x: int, y: int) -> bool:
        return 0 <= x < self.size and 0 <= y < self.size

    def available(self, x: int, y: int) -> bool:
        """Return True if a queen may still be placed on (x, y)."""
        return self.cells[x + self.size * y]

    def mark(self, x: int, y: int) -> bool:
        """Interdict one cell.

        Returns False without touching anything when (x, y) lies outside the
        board; this is what stops ``mark_ray``.
        """
        if not self.contains(x, y):
            return False
        self.cells[x + self.size * y] = False
        return True

    def mark_ray(self, x: int, y: int, dx: int, dy: int) -> None:
        """March from (x, y) along (dx, dy), interdicting every cell reached.

        The starting cell itself is left untouched.
        """
        if dx == 0 and dy == 0:
            raise ValueError("Ray direction must be non-zero.")
        x += dx
        y += dy
        while self.mark(x, y):
            x += dx
            y += dy

    def count_available(self) -> int:
        return sum(self.cells)

    def __repr__(self) -> str:
        return f"InterdictionGrid(size={self.size}, available={self.count_available()})"
