"""Object detection over frames.

A frame "has an object" when any of its cells is nonzero. Cropping reduces
each such frame to the tight bounding box of its nonzero cells, which is the
image fed to shape clustering.
"""

import logging
from typing import Iterable, List

from recur.frames.models import Sample

__all__ = ['detect_object_frames', 'crop_objects']

logger = logging.getLogger(__name__)


def detect_object_frames(samples: Iterable[Sample]) -> List[int]:
    """Timestamps of the frames that contain an object, in input order."""
    return [sample.timestamp for sample in samples if sample.image.has_nonzero()]


def crop_objects(samples: Iterable[Sample]) -> List[Sample]:
    """Replace each frame by its object's bounding box; drop empty frames."""
    cropped = []
    skipped = 0
    for sample in samples:
        shape = sample.image.bounding_box()
        if shape is None:
            skipped += 1
            continue
        cropped.append(Sample(timestamp=sample.timestamp, image=shape))

    logger.debug("Cropped %d objects, skipped %d empty frames", len(cropped), skipped)
    return cropped
