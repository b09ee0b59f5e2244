"""Frame handling modules.

- grid: Immutable 2D grid with padded lookup, cropping and equality
- models: Sample and FrameSequence value types
- loader: Token reader and input record parsing
- detector: Object detection and bounding-box cropping
"""

from recur.frames.grid import Grid, EQUALITY_MAPPERS, binarize, identity
from recur.frames.models import Sample, FrameSequence
from recur.frames.loader import TokenReader, FrameParseError, parse_frame_sequence, load_frame_sequence
from recur.frames.detector import detect_object_frames, crop_objects

__all__ = [
    "Grid",
    "EQUALITY_MAPPERS",
    "binarize",
    "identity",
    "Sample",
    "FrameSequence",
    "TokenReader",
    "FrameParseError",
    "parse_frame_sequence",
    "load_frame_sequence",
    "detect_object_frames",
    "crop_objects",
]
