"""Sweep runner: solve a range of board sizes under each constraint mode.

Every found solution is re-checked twice: by the ray-marching validator and
by the brute-force counters in :mod:`linequeens.utils`. The two checks share
no code, so any disagreement points at a bug and aborts the sweep.
"""
from __future__ import annotations

from typing import List, Optional

from .settings import mode_label
from .stats import (
    ProgressPrinter,
    RunRecord,
    SweepEntry,
    SweepResults,
    compute_detailed_statistics,
)
from linequeens.backtracking import bt_nqueens_lines
from linequeens.utils import collinear_triples, is_valid_solution
from linequeens.validation import validate_positions


def run_single(N: int, line_constraint: bool, runs: int) -> SweepEntry:
    """Solve one (N, mode) pair ``runs`` times and summarize.

    Raises
    ------
    AssertionError
        If repeated runs disagree, or if the validator and the brute-force
        oracle reach different verdicts on the solution.
    """
    raw_runs: List[RunRecord] = []
    solution: Optional[List[int]] = None
    nodes = 0

    for run in range(1, max(1, runs) + 1):
        sol, explored, elapsed = bt_nqueens_lines(N, line_constraint)
        if run == 1:
            solution, nodes = sol, explored
        elif sol != solution or explored != nodes:
            raise AssertionError(f"Non-deterministic result for N={N}, mode={mode_label(line_constraint)}.")
        raw_runs.append({"run": run, "solution_found": sol is not None, "nodes": explored, "time": elapsed})

    validated = False
    triples = 0
    if solution is not None:
        validated = validate_positions(solution, line_constraint)
        oracle = is_valid_solution(solution, line_constraint)
        if validated != oracle:
            raise AssertionError(
                f"Validator ({validated}) and brute-force check ({oracle}) disagree for N={N}: {solution}"
            )
        triples = collinear_triples(solution)

    return {
        "solution_found": solution is not None,
        "validated": validated,
        "positions": solution,
        "nodes": nodes,
        "collinear_triples": triples,
        "time": compute_detailed_statistics([r["time"] for r in raw_runs]),
        "raw_runs": raw_runs,
    }


def run_sweep(
    N_values: List[int],
    line_modes: List[bool],
    runs_per_n: int = 1,
    progress_label: Optional[str] = None,
) -> SweepResults:
    """Run :func:`run_single` for every N under every constraint mode.

    Returns
    -------
    SweepResults
        ``{mode_label: {N: SweepEntry}}`` with modes in the given order.
    """
    results: SweepResults = {mode_label(mode): {} for mode in line_modes}
    total = len(N_values) * len(line_modes)
    progress = ProgressPrinter(total, progress_label) if progress_label else None

    index = 0
    for mode in line_modes:
        label = mode_label(mode)
        for N in N_values:
            index += 1
            if progress:
                progress.update(index, f"N={N}, mode={label}")
            entry = run_single(N, mode, runs_per_n)
            results[label][N] = entry
            if entry["solution_found"]:
                print(f"  N={N} [{label}]: {entry['positions']} (nodes={entry['nodes']})")
            else:
                print(f"  N={N} [{label}]: no solution (nodes={entry['nodes']})")

    return results
