"""Test greedy first-match, any-member shape clustering."""

import numpy as np
import pytest

from recur.frames.grid import Grid, binarize, identity
from recur.frames.models import Sample
from recur.tracking.cluster import ClusterRegistry, ShapeCluster, collect_shapes
from tests.helpers.frames import BAR_SHAPE, L_SHAPE, empty, place

pytestmark = pytest.mark.unit


class FakeImage:
    """Image stand-in whose equality is |a - b| <= 1, which is not transitive."""

    def __init__(self, value):
        self.value = value

    def equals(self, other, equality_mapper, require_same_dimensions=True):
        return abs(self.value - other.value) <= 1


def fake_sample(timestamp, value):
    return Sample(timestamp=timestamp, image=FakeImage(value))


class TestShapeCluster:

    def test_start_end_span(self):
        cluster = ShapeCluster(Sample(3, Grid(L_SHAPE)))
        cluster.save_matching(Sample(10, Grid(L_SHAPE)), binarize)
        assert (cluster.start, cluster.end, cluster.span, len(cluster)) == (3, 10, 7, 2)

    def test_rejects_non_matching_sample(self):
        cluster = ShapeCluster(Sample(3, Grid(L_SHAPE)))
        assert not cluster.save_matching(Sample(4, Grid(BAR_SHAPE)), binarize)
        assert len(cluster) == 1


class TestClusterRegistry:

    def test_any_member_chaining(self):
        """A~B and B~C join one cluster even though A!~C."""
        registry = ClusterRegistry()
        a, b, c = fake_sample(1, 0), fake_sample(2, 1), fake_sample(3, 2)
        assert not a.image.equals(c.image, binarize)

        for sample in (a, b, c):
            registry.collect(sample, binarize)

        assert len(registry) == 1
        assert [s.timestamp for s in registry.clusters[0].samples] == [1, 2, 3]

    def test_order_dependence(self):
        """Feeding the link last splits the same objects over two clusters."""
        registry = ClusterRegistry()
        for sample in (fake_sample(1, 0), fake_sample(2, 2), fake_sample(3, 1)):
            registry.collect(sample, binarize)

        assert len(registry) == 2
        assert [s.timestamp for s in registry.clusters[0].samples] == [1, 3]
        assert [s.timestamp for s in registry.clusters[1].samples] == [2]

    def test_first_matching_cluster_wins(self):
        registry = ClusterRegistry()
        for sample in (fake_sample(1, 0), fake_sample(2, 2), fake_sample(3, 1)):
            registry.collect(sample, binarize)
        # value 1 matches both clusters; it went to the older one
        assert registry.clusters[0].end == 3
        assert registry.clusters[1].end == 2

    def test_collect_returns_receiving_cluster(self):
        registry = ClusterRegistry()
        first = registry.collect(Sample(1, Grid(L_SHAPE)), binarize)
        second = registry.collect(Sample(2, Grid(L_SHAPE)), binarize)
        assert first is second

    def test_mapper_controls_matching(self):
        shapes = [Sample(1, Grid([[1, 2]])), Sample(2, Grid([[3, 4]]))]

        binary = ClusterRegistry()
        exact = ClusterRegistry()
        for sample in shapes:
            binary.collect(sample, binarize)
            exact.collect(sample, identity)

        assert len(binary) == 1
        assert len(exact) == 2

    def test_dimensions_required_by_default(self):
        registry = ClusterRegistry()
        registry.collect(Sample(1, Grid([[1]])), binarize)
        registry.collect(Sample(2, Grid([[1, 0]])), binarize)
        assert len(registry) == 2

    def test_relaxed_dimensions(self):
        registry = ClusterRegistry(require_same_dimensions=False)
        registry.collect(Sample(1, Grid([[1]])), binarize)
        registry.collect(Sample(2, Grid([[1, 0]])), binarize)
        assert len(registry) == 1

    def test_sample_count(self):
        registry = ClusterRegistry()
        for t, shape in enumerate([L_SHAPE, BAR_SHAPE, L_SHAPE]):
            registry.collect(Sample(t, Grid(shape)), binarize)
        assert registry.sample_count == 3
        assert [len(c) for c in registry] == [2, 1]


class TestCollectShapes:

    def test_crops_and_clusters_in_input_order(self):
        samples = [
            Sample(4000, Grid(empty())),
            Sample(4260, Grid(place(L_SHAPE, at=(0, 0)))),
            Sample(6547, Grid(place(BAR_SHAPE, at=(2, 1)))),
            Sample(7263, Grid(place(L_SHAPE, at=(3, 3), value=5))),
        ]
        registry = collect_shapes(samples, binarize)

        summary = [(c.start, c.end, len(c)) for c in registry]
        assert summary == [(4260, 7263, 2), (6547, 6547, 1)]

    def test_cluster_members_are_cropped(self):
        registry = collect_shapes([Sample(1, Grid(place(L_SHAPE, at=(2, 2))))])
        image = registry.clusters[0].samples[0].image
        np.testing.assert_array_equal(image.values, L_SHAPE)
