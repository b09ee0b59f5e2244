import numpy as np

from recur.frames.grid import Grid
from recur.frames.models import Sample


# Object shapes used across tests
L_SHAPE = [
    [1, 1],
    [1, 0],
]
BAR_SHAPE = [
    [1, 1, 1],
]


def place(shape, at=(0, 0), size=(5, 5), value=1):
    """
    Return a size[0] x size[1] frame with ``shape`` stamped at ``at``.
    Nonzero cells of the shape are set to ``value``.
    """
    frame = np.zeros(size)
    shape = np.asarray(shape)
    row, col = at
    rows, cols = shape.shape
    frame[row:row + rows, col:col + cols] = np.where(shape != 0, value, 0)
    return frame


def empty(size=(5, 5)):
    return np.zeros(size)


def make_record(start, end, frames):
    """
    Serialize ``(timestamp, 2D array)`` pairs into the whitespace token
    format read by parse_frame_sequence().
    """
    lines = [f"{start} {end} {len(frames)}"]
    for timestamp, frame in frames:
        frame = np.asarray(frame)
        rows, cols = frame.shape
        lines.append(f"{timestamp} {rows} {cols}")
        for row in frame:
            lines.append(" ".join(f"{v:g}" for v in row))
    return "\n".join(lines) + "\n"


def make_samples(timestamps, shape=L_SHAPE):
    """Cropped samples of one shape at the given timestamps."""
    return [Sample(timestamp=t, image=Grid(shape)) for t in timestamps]


def detection_record():
    """Objects only at 3505 and 4352."""
    return make_record(3000, 5000, [
        (3000, empty((3, 3))),
        (3505, place([[7]], at=(1, 2), size=(3, 3))),
        (4000, empty((3, 3))),
        (4352, place(BAR_SHAPE, at=(2, 0), size=(3, 3))),
        (4900, empty((3, 3))),
    ])


def clustering_record():
    """
    L shape at 4260 and 7263 (different positions and values),
    a bar at 6547, empty frames in between.
    """
    return make_record(4000, 8000, [
        (4000, empty()),
        (4260, place(L_SHAPE, at=(0, 0))),
        (5000, empty()),
        (6547, place(BAR_SHAPE, at=(2, 1))),
        (7263, place(L_SHAPE, at=(3, 3), value=5)),
    ])


def periodicity_record():
    """
    L shape every 6 from 1 (1, 7, 13, 19), bar every 4 from 4 (4, 8, 12, 16),
    horizon end=19.
    """
    frames = []
    for t in range(0, 20):
        if t in (1, 7, 13, 19):
            frames.append((t, place(L_SHAPE, at=(t % 3, 1))))
        elif t in (4, 8, 12, 16):
            frames.append((t, place(BAR_SHAPE, at=(4, t % 3))))
        elif t % 5 == 0:
            frames.append((t, empty()))
    return make_record(0, 19, frames)
