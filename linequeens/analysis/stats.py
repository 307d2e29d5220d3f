"""Typed result shapes and statistics helpers for solver sweeps.

Defines ``TypedDict`` structures for sweep outputs and provides utilities to
summarize repeated timings and to report progress of long loops.
"""
from __future__ import annotations

import statistics
from typing import Dict, List, Optional, TypedDict


class StatsSummary(TypedDict, total=False):
    count: int
    mean: Optional[float]
    median: Optional[float]
    std: Optional[float]
    min: Optional[float]
    max: Optional[float]
    q25: Optional[float]
    q75: Optional[float]
    range: Optional[float]


class RunRecord(TypedDict):
    run: int
    solution_found: bool
    nodes: int
    time: float


class SweepEntry(TypedDict):
    solution_found: bool
    validated: bool
    positions: Optional[List[int]]
    nodes: int
    collinear_triples: int
    time: StatsSummary
    raw_runs: List[RunRecord]


# mode label ("line" / "no_line") -> N -> entry
SweepResults = Dict[str, Dict[int, SweepEntry]]


class ProgressPrinter:
    """Minimal, stdout-only progress reporter for long-running loops.

    Parameters
    ----------
    total : int
        Total number of steps expected. Values <= 0 are coerced to 1 to avoid
        division by zero when reporting percentages.
    label : str
        Short label printed in front of the counters (e.g., the sweep phase).
    """

    def __init__(self, total: int, label: str):
        self.total = max(1, total)
        self.label = label

    def update(self, index: int, detail: str = "") -> None:
        """Print ``[label] index/total (pct%) - detail`` to stdout."""
        percent = (index / self.total) * 100
        suffix = f" - {detail}" if detail else ""
        print(f"[{self.label}] {index}/{self.total} ({percent:.0f}%)" + suffix)


def compute_detailed_statistics(values: List[float]) -> StatsSummary:
    """Compute summary statistics for a numeric sequence.

    Returns count, mean, median, population std, min, max, 25th and 75th
    percentiles and range. When ``values`` is empty every numeric field is
    ``None`` and ``count`` is 0, which keeps CSV and plot generation uniform.
    """
    if not values:
        return {
            "count": 0,
            "mean": None,
            "median": None,
            "std": None,
            "min": None,
            "max": None,
            "q25": None,
            "q75": None,
            "range": None,
        }

    sorted_vals = sorted(values)
    n = len(values)
    min_val = sorted_vals[0]
    max_val = sorted_vals[-1]

    return {
        "count": n,
        "mean": statistics.mean(values),
        "median": statistics.median(values),
        "std": statistics.pstdev(values) if n > 1 else 0.0,
        "min": min_val,
        "max": max_val,
        "q25": sorted_vals[n // 4] if n >= 4 else min_val,
        "q75": sorted_vals[3 * n // 4] if n >= 4 else max_val,
        "range": max_val - min_val,
    }
