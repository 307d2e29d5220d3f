"""CSV export utilities for sweep outputs (aggregates and raw runs).

These helpers materialize a compact per-(mode, N) summary as well as every
timed run for downstream analysis or spreadsheet inspection.
"""
from __future__ import annotations

import csv
import os
from typing import List

from . import settings
from .stats import SweepResults


def _format_positions(positions) -> str:
    return " ".join(str(c) for c in positions) if positions is not None else ""


def save_results_to_csv(results: SweepResults, N_values: List[int], out_dir: str) -> str:
    """Write one row per (mode, N) and return the file path.

    Columns follow lowercase snake_case: ``mode, n, solution_found,
    validated, nodes_explored, collinear_triples, time_mean_seconds,
    time_std_seconds, positions``.
    """
    os.makedirs(out_dir, exist_ok=True)
    filename = os.path.join(out_dir, f"results{settings.filename_suffix()}.csv")

    with open(filename, "w", newline="") as f:
        writer = csv.writer(f)
        writer.writerow([
            "mode",
            "n",
            "solution_found",
            "validated",
            "nodes_explored",
            "collinear_triples",
            "time_mean_seconds",
            "time_std_seconds",
            "positions",
        ])
        for mode, per_n in results.items():
            for N in N_values:
                entry = per_n.get(N)
                if entry is None:
                    continue
                writer.writerow([
                    mode,
                    N,
                    entry["solution_found"],
                    entry["validated"],
                    entry["nodes"],
                    entry["collinear_triples"],
                    entry["time"].get("mean"),
                    entry["time"].get("std"),
                    _format_positions(entry["positions"]),
                ])

    print(f"Results saved to {filename}")
    return filename


def save_raw_data_to_csv(results: SweepResults, N_values: List[int], out_dir: str) -> str:
    """Write every timed run (mode, n, run, solution_found, nodes, time_seconds)."""
    os.makedirs(out_dir, exist_ok=True)
    filename = os.path.join(out_dir, f"raw_runs{settings.filename_suffix()}.csv")

    with open(filename, "w", newline="") as f:
        writer = csv.writer(f)
        writer.writerow(["mode", "n", "run", "solution_found", "nodes", "time_seconds"])
        for mode, per_n in results.items():
            for N in N_values:
                entry = per_n.get(N)
                if entry is None:
                    continue
                for record in entry["raw_runs"]:
                    writer.writerow([mode, N, record["run"], record["solution_found"], record["nodes"], record["time"]])

    print(f"Raw runs saved to {filename}")
    return filename
