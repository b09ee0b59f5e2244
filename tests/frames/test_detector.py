"""Test object detection and cropping over frames."""

import numpy as np
import pytest

from recur.frames.detector import crop_objects, detect_object_frames
from recur.frames.grid import Grid
from recur.frames.loader import TokenReader, parse_frame_sequence
from recur.frames.models import Sample
from tests.helpers.frames import detection_record

pytestmark = pytest.mark.unit


def test_detects_frames_with_objects():
    sequence = parse_frame_sequence(TokenReader.from_string(detection_record()))
    assert detect_object_frames(sequence.samples) == [3505, 4352]


def test_detection_keeps_input_order():
    samples = [
        Sample(9, Grid([[1]])),
        Sample(2, Grid([[0]])),
        Sample(5, Grid([[3]])),
    ]
    assert detect_object_frames(samples) == [9, 5]


def test_no_objects():
    samples = [Sample(t, Grid(np.zeros((2, 2)))) for t in range(3)]
    assert detect_object_frames(samples) == []
    assert crop_objects(samples) == []


def test_crop_objects_keeps_timestamps():
    samples = [
        Sample(1, Grid([[0, 0], [0, 4]])),
        Sample(2, Grid([[0, 0], [0, 0]])),
        Sample(3, Grid([[5, 5], [0, 0]])),
    ]
    cropped = crop_objects(samples)

    assert [s.timestamp for s in cropped] == [1, 3]
    assert cropped[0].image.dimensions == (1, 1)
    assert cropped[1].image.dimensions == (1, 2)
