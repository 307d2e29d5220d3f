"""Utility helpers for the line-constrained N-Queens project.

Brute-force counters that check a placement by pure arithmetic, without any
grid or ray marching. They are slower than the validator but share none of
its code, which makes them a useful oracle in tests and sweeps.

Representation
--------------
Placements are encoded as a 1D list where ``positions[row] = column``.
"""

from __future__ import annotations

from collections import Counter
from itertools import combinations
from typing import List, Sequence, Tuple

Point = Tuple[int, int]


def conflicts(positions: Sequence[int]) -> int:
    """Compute the number of attacking queen pairs in O(N).

    Rows are unique by representation, so only columns and the two diagonal
    families are counted.
    """
    column_count: Counter[int] = Counter()
    diag1: Counter[int] = Counter()
    diag2: Counter[int] = Counter()

    for row, column in enumerate(positions):
        column_count[column] += 1
        diag1[row - column] += 1
        diag2[row + column] += 1

    def _pairs(counter: Counter[int]) -> int:
        total = 0
        for count in counter.values():
            if count > 1:
                total += count * (count - 1) // 2
        return total

    return _pairs(column_count) + _pairs(diag1) + _pairs(diag2)


def find_collinear_triples(positions: Sequence[int]) -> List[Tuple[Point, Point, Point]]:
    """List every triple of queens lying on one straight line, in O(N^3).

    Points are ``(x, y)`` = ``(column, row)``, ordered by row within a triple.
    Three points are collinear when the cross product of the vectors from the
    first point to the other two is zero.
    """
    points = [(x, y) for y, x in enumerate(positions)]
    triples = []
    for a, b, c in combinations(points, 3):
        if (b[0] - a[0]) * (c[1] - a[1]) - (c[0] - a[0]) * (b[1] - a[1]) == 0:
            triples.append((a, b, c))
    return triples


def collinear_triples(positions: Sequence[int]) -> int:
    """Count queen triples lying on one straight line."""
    return len(find_collinear_triples(positions))


def is_valid_solution(positions: Sequence[int], line_constraint: bool = True) -> bool:
    """Return True if ``positions`` is a valid placement.

    Contract
    - Input: sequence of length N where positions[row] = column (0-based)
    - Valid if: all 0 <= column < N, no two queens attack each other and,
      with ``line_constraint``, no three queens are collinear
    """
    n = len(positions)
    if n == 0:
        return False
    for column in positions:
        if not isinstance(column, int) or isinstance(column, bool):
            return False
        if column < 0 or column >= n:
            return False
    if conflicts(positions) != 0:
        return False
    return not line_constraint or collinear_triples(positions) == 0


def render_board(positions: Sequence[int]) -> str:
    """Render a placement as text, one row per line.

    Each line starts with the queen's column right-aligned in three
    characters, then ``@`` for the queen and ``.`` for empty cells.
    """
    n = len(positions)
    lines = []
    for column in positions:
        cells = "".join("@ " if x == column else ". " for x in range(n))
        lines.append(f"{column:3d} {cells}")
    return "\n".join(lines)
