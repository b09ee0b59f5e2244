"""Test DataFrame summaries and text rendering."""

import pytest

from recur.frames.grid import Grid, binarize
from recur.frames.models import Sample
from recur.pipeline.formatting import (
    format_rows,
    summarize_clusters,
    summarize_detections,
    summarize_runs,
)
from recur.tracking.cluster import ClusterRegistry
from recur.tracking.periodicity import PeriodicRun
from tests.helpers.frames import BAR_SHAPE, L_SHAPE

pytestmark = pytest.mark.unit


def test_detections():
    assert format_rows(summarize_detections([3505, 4352])) == "3505\n4352\n"


def test_cluster_summary_columns():
    registry = ClusterRegistry()
    for t, shape in [(4260, L_SHAPE), (6547, BAR_SHAPE), (7263, L_SHAPE)]:
        registry.collect(Sample(t, Grid(shape)), binarize)

    df = summarize_clusters(registry)

    assert list(df.columns) == ["start", "end", "sample_count"]
    assert df["sample_count"].tolist() == [2, 1]
    assert format_rows(df) == "4260 7263 2\n6547 6547 1\n"


def test_run_summary_and_column_selection():
    runs = [PeriodicRun((1, 7, 13, 19), 0), PeriodicRun((4, 8, 12, 16), 1)]
    df = summarize_runs(runs)

    assert df["interval"].tolist() == [6, 4]
    assert format_rows(df, columns=["first", "last", "length"]) == "1 19 4\n4 16 4\n"


def test_empty_frames_render_empty():
    assert format_rows(summarize_detections([])) == ""
    assert format_rows(summarize_runs([]), columns=["first", "last", "length"]) == ""
