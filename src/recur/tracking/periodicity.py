"""Periodic run discovery within shape clusters.

A run is an arithmetic progression of timestamps ``t0, t0+d, t0+2d, ...``
reaching up to the horizon ``end`` that is fully present in one cluster. It
models an object that first appears at ``t0`` and then reappears every ``d``
time units until the observation stops.

For every cluster the detector tries each still-available sample as a start
and each later sample as the second occurrence. A candidate interval ``d`` is
accepted when:

- the object cannot have appeared before ``t0`` (``t0 <= d``),
- at least ``min_occurrences`` occurrences fit before ``end``
  (``t0 + (min_occurrences - 1) * d <= end``),
- every step ``t0 + k*d <= end`` is an available timestamp, and
- with rotation checks enabled, every consecutive step turns the object by the
  same angle as the first pair.

Accepted runs consume their timestamps, so runs of one cluster never overlap.
Runs are never merged across clusters.
"""

import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence, Set, Tuple

from recur.frames.models import Sample
from recur.tracking.cluster import ShapeCluster
from recur.tracking.rotation import NullRotationComparator, RotationComparator

__all__ = ['PeriodicRun', 'PeriodicityDetector']

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PeriodicRun:
    """Timestamps of one periodic sighting, drawn from a single cluster."""

    timestamps: Tuple[int, ...]
    cluster_index: int = 0

    @property
    def first(self) -> int:
        return self.timestamps[0]

    @property
    def last(self) -> int:
        return self.timestamps[-1]

    @property
    def interval(self) -> int:
        if len(self.timestamps) < 2:
            return 0
        return self.timestamps[1] - self.timestamps[0]

    def __len__(self) -> int:
        return len(self.timestamps)


class PeriodicityDetector:
    """Find maximal periodic runs in clustered samples.

    Parameters
    ----------
    end : int
        Last observable timestamp (inclusive horizon).
    min_occurrences : int
        Minimum number of occurrences a run must fit before ``end``.
    rotation_comparator : RotationComparator, optional
        Used only when ``check_rotations`` is True. Defaults to the null
        comparator.
    check_rotations : bool
        Require a constant rotation angle between consecutive steps.

    Examples
    --------
    >>> detector = PeriodicityDetector(end=19)
    >>> runs = detector.find_runs(registry.clusters)
    >>> [(run.first, run.last, len(run)) for run in runs]
    [(1, 19, 4), (4, 16, 4)]
    """

    def __init__(self, end: int, min_occurrences: int = 4,
                 rotation_comparator: Optional[RotationComparator] = None,
                 check_rotations: bool = False):
        if min_occurrences < 2:
            raise ValueError(f"min_occurrences must be >= 2, got {min_occurrences}")
        self.end = end
        self.min_occurrences = min_occurrences
        self.rotation_comparator = rotation_comparator or NullRotationComparator()
        self.check_rotations = check_rotations

    def find_runs(self, clusters: Iterable[ShapeCluster]) -> List[PeriodicRun]:
        """Runs of all clusters, sorted by first timestamp."""
        runs = []
        for index, cluster in enumerate(clusters):
            runs.extend(self.find_cluster_runs(cluster.samples, cluster_index=index))

        runs.sort(key=lambda run: run.first)
        logger.debug("Found %d periodic runs (end=%d)", len(runs), self.end)
        return runs

    def find_cluster_runs(self, samples: Sequence[Sample], cluster_index: int = 0,
                          available: Optional[Set[int]] = None) -> List[PeriodicRun]:
        """Runs of one cluster, in discovery order.

        Parameters
        ----------
        samples : sequence of Sample
            Cluster members, assumed ordered by timestamp.
        cluster_index : int
            Stored on every returned run.
        available : set of int, optional
            Timestamps that may still be used. Consumed in place, so passing
            the same set again yields no further runs. Defaults to all sample
            timestamps.
        """
        lookup = {sample.timestamp: sample for sample in samples}
        if available is None:
            available = set(lookup)

        runs = []
        for i, first in enumerate(samples):
            if first.timestamp not in available:
                continue

            for second in samples[i:]:
                interval = second.timestamp - first.timestamp
                if not self._is_admissible(first.timestamp, interval):
                    continue
                if not self._walk(first, second, interval, lookup, available):
                    continue

                timestamps = tuple(range(first.timestamp, self.end + 1, interval))
                available.difference_update(timestamps)
                runs.append(PeriodicRun(timestamps=timestamps, cluster_index=cluster_index))
                logger.debug("Cluster #%d: run t0=%d interval=%d length=%d",
                             cluster_index, first.timestamp, interval, len(timestamps))
                # the start is consumed now
                break

        return runs

    def _is_admissible(self, start: int, interval: int) -> bool:
        if interval <= 0:
            return False
        # the object must not have appeared before the first sighting
        if start > interval:
            return False
        return start + (self.min_occurrences - 1) * interval <= self.end

    def _walk(self, first: Sample, second: Sample, interval: int,
              lookup: dict, available: Set[int]) -> bool:
        if self.check_rotations:
            rotation = self.rotation_comparator.angle(first.image, second.image)

        previous = first
        for timestamp in range(first.timestamp + interval, self.end + 1, interval):
            if timestamp not in available:
                return False
            current = lookup[timestamp]
            if self.check_rotations and \
                    self.rotation_comparator.angle(previous.image, current.image) != rotation:
                return False
            previous = current
        return True
