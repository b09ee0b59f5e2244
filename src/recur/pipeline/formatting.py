"""Tabular summaries and text formatting of results.

Each level's result is first summarized as a DataFrame, one row per output
line, then rendered as space-separated values without header or index.
"""

from typing import Iterable, Sequence

import pandas as pd

from recur.tracking.cluster import ClusterRegistry
from recur.tracking.periodicity import PeriodicRun

__all__ = ['summarize_detections', 'summarize_clusters', 'summarize_runs', 'format_rows']

CLUSTER_COLUMNS = ["start", "end", "sample_count"]
RUN_COLUMNS = ["first", "last", "length", "interval", "cluster_index"]


def summarize_detections(timestamps: Iterable[int]) -> pd.DataFrame:
    return pd.DataFrame({"timestamp": list(timestamps)}, dtype="int64")


def summarize_clusters(registry: ClusterRegistry) -> pd.DataFrame:
    """One row per cluster, in creation order."""
    rows = [(cluster.start, cluster.end, len(cluster)) for cluster in registry]
    return pd.DataFrame(rows, columns=CLUSTER_COLUMNS, dtype="int64")


def summarize_runs(runs: Sequence[PeriodicRun]) -> pd.DataFrame:
    """One row per run, in the given order."""
    rows = [(run.first, run.last, len(run), run.interval, run.cluster_index) for run in runs]
    return pd.DataFrame(rows, columns=RUN_COLUMNS, dtype="int64")


def format_rows(df: pd.DataFrame, columns: Sequence[str] = None) -> str:
    """Render ``df`` as newline-terminated lines of space-separated values.

    Parameters
    ----------
    df : pd.DataFrame
        Summary frame.
    columns : sequence of str, optional
        Columns to print, in order. Defaults to all columns.

    Examples
    --------
    >>> format_rows(summarize_clusters(registry))
    '4260 7263 2\\n6547 6547 1\\n'
    """
    if columns is not None:
        df = df[list(columns)]
    return "".join(
        " ".join(str(value) for value in row) + "\n"
        for row in df.itertuples(index=False, name=None)
    )
