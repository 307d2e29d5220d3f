"""
Sweep and reporting package for the line-constrained N-Queens solver.

This package contains:
- settings: global knobs and output naming
- stats: typed summaries and aggregation helpers
- experiments: sweep runner with solution cross-checks
- reporting: CSV exports
- plots: chart and board-diagram utilities
- cli: pipeline entry point and argument parser
"""

from . import settings as settings  # re-export for convenience
from .stats import (
    StatsSummary,
    RunRecord,
    SweepEntry,
    SweepResults,
    compute_detailed_statistics,
    ProgressPrinter,
)

__all__ = [
    # types
    "StatsSummary",
    "RunRecord",
    "SweepEntry",
    "SweepResults",
    # utils
    "compute_detailed_statistics",
    "ProgressPrinter",
    # settings module
    "settings",
]
