"""Visualization utilities for sweep outputs.

Overview
--------
Charts are written as PNG files with the non-interactive Agg backend, so
they can be produced on headless machines. All functions return the path(s)
they wrote.

Chart map
---------
- 01_nodes_vs_N.png: explored nodes per N (log scale), one line per mode,
  with a log-linear trend ``nodes ~ a * b^N`` fitted over the solved sizes.
- 02_time_vs_N.png: mean wall-clock time per N (log scale).
- 03_solvability.png: whether each N has a solution under each mode.
- board_<mode>_N<N>.png: the solution for the largest solved N per mode,
  with every collinear queen triple drawn as a line.
"""
from __future__ import annotations

import os
from typing import List, Optional, Sequence, Tuple

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402
import numpy as np  # noqa: E402

from . import settings  # noqa: E402
from .stats import SweepResults  # noqa: E402
from linequeens.utils import find_collinear_triples  # noqa: E402

MODE_STYLE = {
    "line": {"marker": "o", "color": "tab:red", "label": "No three in line"},
    "no_line": {"marker": "s", "color": "tab:blue", "label": "Classic rules"},
}


def _style(mode: str) -> dict:
    return MODE_STYLE.get(mode, {"marker": "^", "label": mode})


def fit_growth(N_values: Sequence[int], nodes: Sequence[int]) -> Optional[Tuple[float, float]]:
    """Fit ``nodes ~ a * b^N`` by least squares on ``log(nodes)``.

    Returns ``(a, b)``. Sizes with zero nodes are ignored; fewer than three
    usable points yield None.
    """
    pairs = [(n, c) for n, c in zip(N_values, nodes) if c > 0]
    if len(pairs) < 3:
        return None
    x = np.array([p[0] for p in pairs], dtype=float)
    y = np.log(np.array([p[1] for p in pairs], dtype=float))
    slope, intercept = np.polyfit(x, y, 1)
    return float(np.exp(intercept)), float(np.exp(slope))


def plot_nodes_vs_N(results: SweepResults, N_values: List[int], out_dir: str) -> str:
    """Explored nodes per N for each constraint mode (log scale)."""
    os.makedirs(out_dir, exist_ok=True)
    plt.figure(figsize=(12, 8))

    for mode, per_n in results.items():
        ns = [N for N in N_values if N in per_n]
        nodes = [per_n[N]["nodes"] for N in ns]
        style = _style(mode)
        plt.semilogy(ns, [max(c, 1) for c in nodes], linewidth=2, markersize=8, **style)

        solved = [N for N in ns if per_n[N]["solution_found"]]
        fit = fit_growth(solved, [per_n[N]["nodes"] for N in solved])
        if fit is not None:
            scale, growth = fit
            x_trend = np.linspace(min(solved), max(solved), 100)
            plt.semilogy(
                x_trend,
                scale * growth ** x_trend,
                "--",
                alpha=0.6,
                color=style.get("color"),
                label=f"{style['label']} trend: x{growth:.2f} per N",
            )

    plt.xlabel("N (board size)", fontsize=12)
    plt.ylabel("Explored nodes (log scale)", fontsize=12)
    plt.title("Search Effort vs Board Size\n(first solution, ascending column order)", fontsize=14)
    plt.legend(fontsize=11)
    plt.grid(True, alpha=0.7)
    plt.xticks(N_values)

    fname = os.path.join(out_dir, f"01_nodes_vs_N{settings.filename_suffix()}.png")
    plt.savefig(fname, bbox_inches="tight", dpi=150)
    plt.close()
    print(f"Saved explored-nodes chart: {fname}")
    return fname


def plot_time_vs_N(results: SweepResults, N_values: List[int], out_dir: str) -> str:
    """Mean solve time per N for each constraint mode (log scale)."""
    os.makedirs(out_dir, exist_ok=True)
    plt.figure(figsize=(12, 8))

    for mode, per_n in results.items():
        ns = [N for N in N_values if N in per_n]
        times = [per_n[N]["time"].get("mean") or 0.0 for N in ns]
        plt.semilogy(ns, [max(t, 1e-6) for t in times], linewidth=2, markersize=8, **_style(mode))

    plt.xlabel("N (board size)", fontsize=12)
    plt.ylabel("Mean time [s] (log scale)", fontsize=12)
    plt.title("Solve Time vs Board Size", fontsize=14)
    plt.legend(fontsize=11)
    plt.grid(True, alpha=0.7)
    plt.xticks(N_values)

    fname = os.path.join(out_dir, f"02_time_vs_N{settings.filename_suffix()}.png")
    plt.savefig(fname, bbox_inches="tight", dpi=150)
    plt.close()
    print(f"Saved solve-time chart: {fname}")
    return fname


def plot_solvability(results: SweepResults, N_values: List[int], out_dir: str) -> str:
    """Grouped bars: 1 when a solution exists for (mode, N), 0 otherwise."""
    os.makedirs(out_dir, exist_ok=True)
    modes = list(results)
    x = np.arange(len(N_values))
    width = 0.8 / max(1, len(modes))

    plt.figure(figsize=(12, 6))
    for i, mode in enumerate(modes):
        per_n = results[mode]
        found = [1.0 if per_n.get(N, {}).get("solution_found") else 0.0 for N in N_values]
        style = _style(mode)
        plt.bar(x + i * width, found, width, label=style["label"], color=style.get("color"))

    plt.xticks(x + width * (len(modes) - 1) / 2, [str(N) for N in N_values])
    plt.yticks([0, 1], ["none", "found"])
    plt.xlabel("N (board size)", fontsize=12)
    plt.title("Solution Existence per Board Size", fontsize=14)
    plt.legend(fontsize=11)
    plt.grid(True, axis="y", alpha=0.7)

    fname = os.path.join(out_dir, f"03_solvability{settings.filename_suffix()}.png")
    plt.savefig(fname, bbox_inches="tight", dpi=150)
    plt.close()
    print(f"Saved solvability chart: {fname}")
    return fname


def plot_board(positions: Sequence[int], fname: str, title: Optional[str] = None) -> str:
    """Draw a placement on a checkerboard and overlay collinear triples."""
    n = len(positions)
    rows, cols = np.indices((n, n))
    checker = (rows + cols) % 2

    fig, ax = plt.subplots(figsize=(max(4, n * 0.6), max(4, n * 0.6)))
    ax.imshow(checker, cmap="Greys", alpha=0.25, extent=(-0.5, n - 0.5, n - 0.5, -0.5))

    for a, _, c in find_collinear_triples(positions):
        ax.plot([a[0], c[0]], [a[1], c[1]], color="tab:red", alpha=0.6, linewidth=1.5)

    ax.scatter(list(positions), list(range(n)), s=max(40, 2400 // n), marker="*", color="black", zorder=3)
    ax.set_xticks(range(n))
    ax.set_yticks(range(n))
    ax.set_xlim(-0.5, n - 0.5)
    ax.set_ylim(n - 0.5, -0.5)
    ax.set_title(title or f"N={n}: {list(positions)}")

    os.makedirs(os.path.dirname(fname) or ".", exist_ok=True)
    fig.savefig(fname, bbox_inches="tight", dpi=150)
    plt.close(fig)
    return fname


def plot_and_save(results: SweepResults, N_values: List[int], out_dir: str) -> List[str]:
    """Generate the full chart set and return the written paths."""
    written = [
        plot_nodes_vs_N(results, N_values, out_dir),
        plot_time_vs_N(results, N_values, out_dir),
        plot_solvability(results, N_values, out_dir),
    ]

    for mode, per_n in results.items():
        solved = [N for N in N_values if N in per_n and per_n[N]["solution_found"]]
        if not solved:
            continue
        N = max(solved)
        positions = per_n[N]["positions"] or []
        fname = os.path.join(out_dir, f"board_{mode}_N{N}{settings.filename_suffix()}.png")
        written.append(plot_board(positions, fname, f"{_style(mode)['label']}, N={N}"))
        print(f"Saved board diagram: {fname}")

    return written
