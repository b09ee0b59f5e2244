"""Clustering stage contract."""

from recur.contracts.base import require
from recur.tracking.cluster import ClusterRegistry


def assert_clustered(registry: ClusterRegistry, expected_samples: int) -> None:
    """Enforce clustering stage contract.

    Parameters
    ----------
    registry : ClusterRegistry
        Output of collect_shapes().
    expected_samples : int
        Number of object samples fed to the registry.

    Raises
    ------
    ContractViolation
        If a cluster is empty or samples were lost or duplicated.
    """
    for index, cluster in enumerate(registry):
        require(
            len(cluster) > 0,
            f"Clustering contract violated: cluster #{index} is empty"
        )
    require(
        registry.sample_count == expected_samples,
        f"Clustering contract violated: {registry.sample_count} clustered samples, "
        f"expected {expected_samples}"
    )
