"""Shape tracking modules.

- cluster: Greedy first-match shape clustering
- rotation: Pluggable rotation comparators
- periodicity: Periodic run discovery per cluster
"""

from recur.tracking.cluster import ShapeCluster, ClusterRegistry, collect_shapes
from recur.tracking.rotation import RotationComparator, NullRotationComparator, get_rotation_comparator
from recur.tracking.periodicity import PeriodicRun, PeriodicityDetector

__all__ = [
    "ShapeCluster",
    "ClusterRegistry",
    "collect_shapes",
    "RotationComparator",
    "NullRotationComparator",
    "get_rotation_comparator",
    "PeriodicRun",
    "PeriodicityDetector",
]
