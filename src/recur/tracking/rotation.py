"""Rotation comparators.

Periodicity detection can require every step of a run to turn the object by
the same angle. Rotation estimation is not implemented yet: the null
comparator reports 0 for every pair, so enabling the check never rejects a
run. A real comparator only has to implement ``angle``.
"""

from abc import ABC, abstractmethod

from recur.frames.grid import Grid

__all__ = ['RotationComparator', 'NullRotationComparator', 'get_rotation_comparator']


class RotationComparator(ABC):
    """Estimates the rotation that turns one object image into another."""

    @abstractmethod
    def angle(self, reference: Grid, candidate: Grid) -> float:
        """Rotation angle in degrees from ``reference`` to ``candidate``."""


class NullRotationComparator(RotationComparator):
    """Treats every pair of images as unrotated."""

    def angle(self, reference: Grid, candidate: Grid) -> float:
        return 0.0


ROTATION_COMPARATORS = {
    "none": NullRotationComparator,
}


def get_rotation_comparator(name: str) -> RotationComparator:
    try:
        return ROTATION_COMPARATORS[name]()
    except KeyError:
        raise ValueError(f"Unknown rotation comparator: {name}") from None
