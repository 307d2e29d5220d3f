"""Global settings for the solver sweep pipeline.

This module centralizes tunable constants used across the orchestration code.
Values can be overridden at runtime via the configuration loader in
`linequeens.analysis.cli.apply_configuration`.
"""
from __future__ import annotations

from datetime import datetime
from typing import List, Optional

# Board sizes to evaluate (in ascending order)
N_VALUES: List[int] = [1, 2, 3, 4, 5, 6, 7, 8, 9, 10]

# Constraint modes to run: True = no three queens in a line, False = classic rules
LINE_MODES: List[bool] = [True, False]

# Timed repetitions per (N, mode). The search is deterministic, so extra runs
# only tighten the timing statistics.
RUNS_PER_N: int = 3

# Output directory for CSV and charts
OUT_DIR: str = "results_linequeens"

# Skip chart generation when False
PLOTS_ENABLED: bool = True

# Output naming policy --------------------------------------------------------

# When True, results and plots include a datestamp suffix (e.g., _20261018-142530)
# applied consistently across all artifacts produced within the same run.
DATE_IN_FILENAMES: bool = True

# Unique run identifier used for filename stamping; set once at import time.
RUN_ID: str = datetime.now().strftime("%Y%m%d-%H%M%S")

# Optional run label added to filenames to avoid overwriting outputs
RUN_TAG: Optional[str] = None


def mode_label(line_constraint: bool) -> str:
    """Key used for a constraint mode in results, filenames and CSV rows."""
    return "line" if line_constraint else "no_line"


def filename_suffix() -> str:
    """Return the ``_tag_runid`` suffix configured for this run (or empty)."""
    parts: List[str] = []
    if RUN_TAG:
        parts.append(str(RUN_TAG))
    if DATE_IN_FILENAMES and RUN_ID:
        parts.append(str(RUN_ID))
    return ("_" + "_".join(parts)) if parts else ""
