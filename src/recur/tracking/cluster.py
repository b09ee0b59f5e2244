"""Greedy shape clustering.

Cropped object samples are grouped into clusters of matching shapes. A new
sample joins the FIRST cluster, in creation order, that holds at least one
member equal to it under the equality mapper; otherwise it starts a new
cluster.

The rule is single-pass and order-dependent. Matching is not transitive, so
``A ~ B`` and ``B ~ C`` put all three in one cluster even when ``A !~ C``,
while the same object can end up split over two clusters if the linking
sample arrives late. This is intentional and must not be replaced by an
equivalence-class (union-find) computation.
"""

import logging
from typing import Iterable, Iterator, List

from recur.frames.detector import crop_objects
from recur.frames.grid import EqualityMapper, binarize
from recur.frames.models import Sample

__all__ = ['ShapeCluster', 'ClusterRegistry', 'collect_shapes']

logger = logging.getLogger(__name__)


class ShapeCluster:
    """Ordered samples that depict one recurring shape."""

    def __init__(self, sample: Sample):
        self.samples: List[Sample] = [sample]

    def matches(self, sample: Sample, equality_mapper: EqualityMapper,
                require_same_dimensions: bool = True) -> bool:
        """True if any member's image equals the sample's image."""
        return any(
            member.image.equals(sample.image, equality_mapper, require_same_dimensions)
            for member in self.samples
        )

    def save_matching(self, sample: Sample, equality_mapper: EqualityMapper,
                      require_same_dimensions: bool = True) -> bool:
        """Append ``sample`` if it matches a member. Returns whether it did."""
        is_matching = self.matches(sample, equality_mapper, require_same_dimensions)
        if is_matching:
            self.samples.append(sample)
        return is_matching

    @property
    def start(self) -> int:
        return self.samples[0].timestamp

    @property
    def end(self) -> int:
        return self.samples[-1].timestamp

    @property
    def span(self) -> int:
        return self.end - self.start

    def __len__(self) -> int:
        return len(self.samples)

    def __repr__(self) -> str:
        return f"ShapeCluster(start={self.start}, end={self.end}, samples={len(self)})"


class ClusterRegistry:
    """Clusters in creation order.

    Parameters
    ----------
    require_same_dimensions : bool
        Passed to ``Grid.equals`` for every comparison. Cropped objects of
        different sizes never match while this is True.
    """

    def __init__(self, require_same_dimensions: bool = True):
        self.clusters: List[ShapeCluster] = []
        self.require_same_dimensions = require_same_dimensions

    def collect(self, sample: Sample, equality_mapper: EqualityMapper = binarize) -> ShapeCluster:
        """Attach ``sample`` to the first matching cluster or open a new one."""
        for cluster in self.clusters:
            if cluster.save_matching(sample, equality_mapper, self.require_same_dimensions):
                return cluster

        cluster = ShapeCluster(sample)
        self.clusters.append(cluster)
        logger.debug("New cluster #%d at t=%d (%s)",
                     len(self.clusters) - 1, sample.timestamp, sample.image)
        return cluster

    @property
    def sample_count(self) -> int:
        return sum(len(cluster) for cluster in self.clusters)

    def __iter__(self) -> Iterator[ShapeCluster]:
        return iter(self.clusters)

    def __len__(self) -> int:
        return len(self.clusters)


def collect_shapes(samples: Iterable[Sample], equality_mapper: EqualityMapper = binarize,
                   require_same_dimensions: bool = True) -> ClusterRegistry:
    """Crop every frame to its object and cluster the crops in input order.

    Frames without an object are skipped.
    """
    registry = ClusterRegistry(require_same_dimensions=require_same_dimensions)
    for sample in crop_objects(samples):
        registry.collect(sample, equality_mapper)

    logger.debug("Collected %d samples into %d clusters", registry.sample_count, len(registry))
    return registry
