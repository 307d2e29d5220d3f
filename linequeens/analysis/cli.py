"""Command-line interface and pipeline for solver sweeps.

This module wires together configuration loading, the sweep runner, CSV
export and chart generation. It keeps I/O, argument parsing and progress
reporting away from the solver modules so that the rest of the codebase
remains easy to test programmatically.
"""
from __future__ import annotations

import argparse
import os
import tempfile
from pathlib import Path
from time import perf_counter
from typing import List, Optional, Tuple

from . import settings
from .experiments import run_sweep
from .plots import plot_and_save
from .reporting import save_raw_data_to_csv, save_results_to_csv
from config_manager import ConfigManager
from linequeens.backtracking import QueensBoard
from linequeens.utils import is_valid_solution

MODE_CHOICES = {
    "line": [True],
    "no-line": [False],
    "both": [True, False],
}


# ------------- Utils --------------------------------------------------------

def parse_n_values(n_args: Optional[List[str]]) -> Optional[List[int]]:
    """Normalize ``--n`` inputs into a sorted list of unique board sizes.

    Accepts repeated flags (``--n 4 --n 8``) and comma-separated lists
    (``--n 4,5,6``). Returns None when no filter is provided so that callers
    can fall back to the configured sizes.
    """
    if not n_args:
        return None
    selected: List[int] = []
    for entry in n_args:
        for token in entry.split(","):
            token = token.strip()
            if not token:
                continue
            try:
                value = int(token)
            except ValueError:
                raise ValueError(f"Invalid board size '{token}'.") from None
            if value < 1:
                raise ValueError(f"Board sizes must be at least 1, got {value}.")
            selected.append(value)
    return sorted(set(selected)) or None


def apply_configuration(config_path: str) -> ConfigManager:
    """Load configuration and update the global ``settings`` module in-place."""
    config_mgr = ConfigManager(config_path)

    experiment_settings = config_mgr.get_experiment_settings()
    if experiment_settings:
        settings.N_VALUES = [int(n) for n in experiment_settings.get("n_values", settings.N_VALUES)]
        settings.LINE_MODES = config_mgr.get_line_modes()
        settings.RUNS_PER_N = int(experiment_settings.get("runs_per_n", settings.RUNS_PER_N))
        settings.OUT_DIR = experiment_settings.get("output_dir", settings.OUT_DIR)

    output_settings = config_mgr.get_output_settings()
    if output_settings:
        settings.DATE_IN_FILENAMES = bool(output_settings.get("date_in_filenames", settings.DATE_IN_FILENAMES))
        settings.RUN_TAG = output_settings.get("run_tag", settings.RUN_TAG)
        settings.PLOTS_ENABLED = bool(output_settings.get("plots", settings.PLOTS_ENABLED))

    if any(n < 1 for n in settings.N_VALUES):
        raise ValueError("Board sizes in configuration must be at least 1.")
    if not settings.LINE_MODES:
        raise ValueError("No constraint modes selected in configuration.")
    return config_mgr


# ------------- Pipeline ------------------------------------------------------

def run_pipeline(
    N_values: List[int],
    line_modes: List[bool],
    runs_per_n: int,
    out_dir: str,
    plots: bool = True,
) -> Tuple[str, str]:
    """Run the sweep, export CSVs and (optionally) charts.

    Returns the paths of the summary and raw-run CSV files.
    """
    os.makedirs(out_dir, exist_ok=True)
    start_total = perf_counter()

    print("\n============================================")
    print(f"SOLVER SWEEP: N = {N_values}")
    print("============================================")

    results = run_sweep(N_values, line_modes, runs_per_n, progress_label="Sweep")

    summary_csv = save_results_to_csv(results, N_values, out_dir)
    raw_csv = save_raw_data_to_csv(results, N_values, out_dir)
    if plots:
        plot_and_save(results, N_values, out_dir)

    total_time = perf_counter() - start_total
    print("\nSweep completed.")
    print(f"Total time: {total_time:.1f}s")
    return summary_csv, raw_csv


# ------------- Quick regression -------------------------------------------

def run_quick_regression_tests() -> None:
    """Execute a fast, deterministic check of the solver and exports.

    Verifies that:
    - N = 1, 4, 8 solve in both modes, 6 solves only without the line rule,
      and every solution passes the validator and the brute-force oracle.
    - The pipeline produces a non-empty CSV in a temporary folder.
    """
    print("Running quick regression tests (N = 1, 4, 6, 8)...")

    expected = {
        (1, True): True, (1, False): True,
        (4, True): True, (4, False): True,
        (6, True): False, (6, False): True,
        (8, True): True, (8, False): True,
    }
    for (N, line_constraint), should_solve in sorted(expected.items()):
        board = QueensBoard(N, line_constraint)
        solved = board.solve()
        label = settings.mode_label(line_constraint)
        if solved != should_solve:
            raise AssertionError(f"N={N} [{label}]: expected solved={should_solve}, got {solved}.")
        if solved:
            positions = board.queen_positions()
            if not board.validate() or not is_valid_solution(positions, line_constraint):
                raise AssertionError(f"N={N} [{label}]: invalid solution {positions}.")
        elif board.validate():
            raise AssertionError(f"N={N} [{label}]: validation succeeded without a solution.")
        print(f"  N={N} [{label}]: solved={solved}, nodes={board.nodes_explored}, time={board.elapsed:.4f}s")

    with tempfile.TemporaryDirectory() as tmpdir:
        summary_csv, _ = run_pipeline([4, 5, 6], [True, False], 1, tmpdir, plots=False)
        csv_path = Path(summary_csv)
        if not csv_path.exists() or csv_path.stat().st_size == 0:
            raise AssertionError("Results CSV was not generated successfully during quick tests.")

    print("Quick regression tests passed.")


# ------------- CLI wiring --------------------------------------------------

def build_arg_parser() -> argparse.ArgumentParser:
    """Construct the argument parser for the sweep entry point."""
    parser = argparse.ArgumentParser(description="Sweep the N-Queens solver over board sizes and constraint modes.")
    parser.add_argument("--config", default="config.json", help="Path to configuration file (default: config.json).")
    parser.add_argument(
        "--n",
        action="append",
        help="Board sizes to solve (comma-separated values or multiple flags). Default: from configuration.",
    )
    parser.add_argument(
        "--mode",
        choices=sorted(MODE_CHOICES),
        help="Constraint modes: line, no-line or both. Default: from configuration.",
    )
    parser.add_argument("--runs", type=int, help="Timed runs per board size (default: from configuration).")
    parser.add_argument("--out-dir", help="Output directory for CSV files and charts.")
    parser.add_argument("--no-plots", action="store_true", help="Skip chart generation.")
    parser.add_argument("--quick-test", action="store_true", help="Run quick regression tests and exit.")
    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """CLI entry point: parse arguments, apply configuration, run the sweep."""
    parser = build_arg_parser()
    args = parser.parse_args(argv)

    if args.quick_test:
        run_quick_regression_tests()
        return

    try:
        apply_configuration(args.config)
        n_values = parse_n_values(args.n) or settings.N_VALUES
    except FileNotFoundError as exc:
        print(f"Configuration file not found: {exc}")
        raise SystemExit(1) from exc
    except ValueError as exc:
        print(f"Configuration error: {exc}")
        raise SystemExit(1) from exc

    line_modes = MODE_CHOICES[args.mode] if args.mode else settings.LINE_MODES
    runs = args.runs if args.runs is not None else settings.RUNS_PER_N
    if runs < 1:
        print("Configuration error: --runs must be at least 1.")
        raise SystemExit(1)
    out_dir = args.out_dir or settings.OUT_DIR
    plots = settings.PLOTS_ENABLED and not args.no_plots

    try:
        run_pipeline(n_values, line_modes, runs, out_dir, plots=plots)
    except KeyboardInterrupt:
        print("\nExecution interrupted by user.")
        raise SystemExit(130) from None
