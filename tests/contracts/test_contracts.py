"""Tests for stage contracts.

These verify that contracts raise at stage boundaries, without relying on
defensive logic downstream.
"""

import pytest

from recur.contracts import (
    ContractViolation,
    assert_clustered,
    assert_grid,
    assert_runs,
    require,
)
from recur.frames.grid import Grid, binarize
from recur.frames.models import Sample
from recur.tracking.cluster import ClusterRegistry
from recur.tracking.periodicity import PeriodicRun
from tests.helpers.frames import BAR_SHAPE, L_SHAPE

pytestmark = pytest.mark.unit


def test_require_passes_silently():
    require(True, "never raised")


def test_require_raises_with_message():
    with pytest.raises(ContractViolation, match="broken invariant"):
        require(False, "broken invariant")


def test_contract_violation_is_runtime_error():
    assert issubclass(ContractViolation, RuntimeError)


class TestGridContract:

    def test_passes_for_valid_grid(self):
        assert_grid(Grid.from_cells((2, 3), range(6)))

    def test_passes_for_empty_grid(self):
        assert_grid(Grid.from_cells((0, 4), []))


class TestClusteringContract:

    @pytest.fixture
    def registry(self):
        registry = ClusterRegistry()
        for t, shape in enumerate([L_SHAPE, BAR_SHAPE, L_SHAPE]):
            registry.collect(Sample(t, Grid(shape)), binarize)
        return registry

    def test_passes_when_all_samples_clustered(self, registry):
        assert_clustered(registry, 3)

    def test_fails_on_lost_samples(self, registry):
        with pytest.raises(ContractViolation, match="3 clustered samples, expected 4"):
            assert_clustered(registry, 4)

    def test_fails_on_empty_cluster(self, registry):
        registry.clusters[1].samples.clear()
        with pytest.raises(ContractViolation, match="cluster #1 is empty"):
            assert_clustered(registry, 2)


class TestPeriodicityContract:

    def test_passes_for_sorted_disjoint_runs(self):
        runs = [
            PeriodicRun((1, 7, 13, 19), cluster_index=0),
            PeriodicRun((4, 8, 12, 16), cluster_index=1),
        ]
        assert_runs(runs, end=19)

    def test_passes_for_no_runs(self):
        assert_runs([], end=10)

    def test_fails_when_unsorted(self):
        runs = [PeriodicRun((4, 8, 12, 16), 1), PeriodicRun((1, 7, 13, 19), 0)]
        with pytest.raises(ContractViolation, match="not sorted"):
            assert_runs(runs, end=19)

    def test_fails_on_overlap_within_cluster(self):
        runs = [PeriodicRun((1, 5, 9, 13), 0), PeriodicRun((1, 6, 11, 16), 0)]
        with pytest.raises(ContractViolation, match="reuses timestamps \\[1\\]"):
            assert_runs(runs, end=16)

    def test_overlap_across_clusters_is_allowed(self):
        runs = [PeriodicRun((1, 5, 9, 13), 0), PeriodicRun((1, 5, 9, 13), 1)]
        assert_runs(runs, end=13)

    def test_fails_on_irregular_steps(self):
        with pytest.raises(ContractViolation, match="strictly increasing progression"):
            assert_runs([PeriodicRun((1, 2, 4, 8), 0)], end=8)

    def test_fails_past_end(self):
        with pytest.raises(ContractViolation, match="past end"):
            assert_runs([PeriodicRun((1, 5, 9, 13), 0)], end=12)

    def test_fails_on_empty_run(self):
        with pytest.raises(ContractViolation, match="empty run"):
            assert_runs([PeriodicRun((), 0)], end=12)
