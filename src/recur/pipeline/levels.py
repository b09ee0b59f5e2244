"""Per-level processing.

Each level reads one input record from a TokenReader and returns its output
text:

1. detection: timestamps of frames that contain an object
2. clustering: ``start end sample_count`` per shape cluster
3. periodicity: ``first last length`` per periodic run
4. periodicity with rotation checks forced on

Contracts are enforced between stages.
"""

import logging
from typing import Callable, Dict, TYPE_CHECKING

from recur.contracts import assert_clustered, assert_grid, assert_runs
from recur.frames.detector import detect_object_frames
from recur.frames.grid import EQUALITY_MAPPERS
from recur.frames.loader import TokenReader, parse_frame_sequence
from recur.frames.models import FrameSequence
from recur.pipeline.formatting import (
    format_rows,
    summarize_clusters,
    summarize_detections,
    summarize_runs,
)
from recur.tracking.cluster import ClusterRegistry, collect_shapes
from recur.tracking.periodicity import PeriodicityDetector
from recur.tracking.rotation import get_rotation_comparator

if TYPE_CHECKING:
    from recur.schemas import InternalConfig

__all__ = ['LevelProcessor']

logger = logging.getLogger(__name__)


class LevelProcessor:
    """Runs the detection, clustering and periodicity levels.

    Parameters
    ----------
    config : InternalConfig
        Fully validated runtime configuration.

    Examples
    --------
    >>> from recur.schemas import resolve_config, ParamConfig
    >>> processor = LevelProcessor(resolve_config(ParamConfig()))
    >>> processor.run(3, TokenReader.from_file("level-3/lvl3-0.inp"))
    '1 19 4\\n4 16 4\\n'
    """

    def __init__(self, config: "InternalConfig"):
        self.config = config
        self.equality_mapper = EQUALITY_MAPPERS[config.matching.equality_mapper]
        self.require_same_dimensions = config.matching.require_same_dimensions
        self.min_occurrences = config.periodicity.min_occurrences
        self.check_rotations = config.periodicity.check_rotations
        self.rotation_comparator = get_rotation_comparator(config.periodicity.rotation_comparator)

        self._levels: Dict[int, Callable[[TokenReader], str]] = {
            1: self.detect,
            2: self.cluster,
            3: self.periodicity,
            4: self.periodicity_with_rotations,
        }

        logger.debug("LevelProcessor initialized: mapper=%s, min_occurrences=%d, rotations=%s",
                     config.matching.equality_mapper, self.min_occurrences, self.check_rotations)

    @property
    def levels(self) -> list:
        return sorted(self._levels)

    def run(self, level: int, reader: TokenReader) -> str:
        try:
            handler = self._levels[level]
        except KeyError:
            raise ValueError(f"Unknown level: {level}") from None
        return handler(reader)

    def read(self, reader: TokenReader) -> FrameSequence:
        sequence = parse_frame_sequence(reader)
        for sample in sequence.samples:
            assert_grid(sample.image)
        return sequence

    def collect(self, sequence: FrameSequence) -> ClusterRegistry:
        """Crop frames to their objects and cluster the crops."""
        registry = collect_shapes(sequence.samples, self.equality_mapper,
                                  self.require_same_dimensions)

        object_count = len(detect_object_frames(sequence.samples))
        assert_clustered(registry, object_count)
        logger.info("Clustered %d objects into %d clusters", object_count, len(registry))
        return registry

    def detect(self, reader: TokenReader) -> str:
        sequence = self.read(reader)
        timestamps = detect_object_frames(sequence.samples)
        logger.info("Detected objects in %d of %d frames", len(timestamps), len(sequence))
        return format_rows(summarize_detections(timestamps))

    def cluster(self, reader: TokenReader) -> str:
        registry = self.collect(self.read(reader))
        return format_rows(summarize_clusters(registry))

    def periodicity(self, reader: TokenReader) -> str:
        return self._periodicity(reader, self.check_rotations)

    def periodicity_with_rotations(self, reader: TokenReader) -> str:
        return self._periodicity(reader, True)

    def _periodicity(self, reader: TokenReader, check_rotations: bool) -> str:
        sequence = self.read(reader)
        registry = self.collect(sequence)

        detector = PeriodicityDetector(
            end=sequence.end,
            min_occurrences=self.min_occurrences,
            rotation_comparator=self.rotation_comparator,
            check_rotations=check_rotations,
        )
        runs = detector.find_runs(registry.clusters)
        assert_runs(runs, sequence.end)

        logger.info("Found %d periodic runs in %d clusters", len(runs), len(registry))
        return format_rows(summarize_runs(runs), columns=["first", "last", "length"])
