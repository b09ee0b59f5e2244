"""Shared value types for frame processing."""

from dataclasses import dataclass
from typing import Tuple

from recur.frames.grid import Grid

__all__ = ['Sample', 'FrameSequence']


@dataclass(frozen=True)
class Sample:
    """One timestamped grid (a raw frame or a cropped object)."""

    timestamp: int
    image: Grid


@dataclass(frozen=True)
class FrameSequence:
    """A parsed input record: horizon bounds plus samples in input order."""

    start: int
    end: int
    samples: Tuple[Sample, ...]

    def __len__(self) -> int:
        return len(self.samples)
