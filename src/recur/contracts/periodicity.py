"""Periodicity stage contract."""

from typing import Sequence

from recur.contracts.base import require
from recur.tracking.periodicity import PeriodicRun


def assert_runs(runs: Sequence[PeriodicRun], end: int) -> None:
    """Enforce periodicity stage contract.

    Every run must be a non-empty, strictly increasing, constant-step
    sequence within the horizon; runs must be sorted by first timestamp and
    runs of one cluster must not share timestamps.

    Raises
    ------
    ContractViolation
        If any invariant is violated
    """
    used = {}
    for run in runs:
        require(len(run) > 0, "Periodicity contract violated: empty run")
        require(
            run.last <= end,
            f"Periodicity contract violated: run ends at {run.last} past end={end}"
        )
        steps = {b - a for a, b in zip(run.timestamps, run.timestamps[1:])}
        require(
            len(steps) <= 1 and all(step > 0 for step in steps),
            f"Periodicity contract violated: run {run.timestamps} is not a "
            f"strictly increasing progression"
        )

        seen = used.setdefault(run.cluster_index, set())
        overlap = seen.intersection(run.timestamps)
        require(
            not overlap,
            f"Periodicity contract violated: cluster #{run.cluster_index} reuses "
            f"timestamps {sorted(overlap)}"
        )
        seen.update(run.timestamps)

    firsts = [run.first for run in runs]
    require(
        firsts == sorted(firsts),
        "Periodicity contract violated: runs not sorted by first timestamp"
    )
