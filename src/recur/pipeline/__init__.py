"""Pipeline modules.

- levels: Per-level processing (detection, clustering, periodicity)
- formatting: DataFrame summaries and text rendering
- runner: Batch file processing and reference self-checks
"""

from recur.pipeline.levels import LevelProcessor
from recur.pipeline.runner import process_files, check_reference, run_levels, REFERENCE_OUTPUTS

__all__ = [
    "LevelProcessor",
    "process_files",
    "check_reference",
    "run_levels",
    "REFERENCE_OUTPUTS",
]
