"""Token reader and frame-sequence loading.

Input records are whitespace-separated numbers::

    start end count
    timestamp rows cols cell cell ... (rows*cols cells)
    ...

The reader is strict: running out of tokens or meeting a non-numeric token
raises FrameParseError instead of letting NaN values leak into the grids.
"""

import logging
from collections import deque
from pathlib import Path
from typing import Union

from recur.frames.grid import Grid
from recur.frames.models import FrameSequence, Sample

__all__ = ['TokenReader', 'FrameParseError', 'parse_frame_sequence', 'load_frame_sequence']

logger = logging.getLogger(__name__)


class FrameParseError(ValueError):
    """Raised when an input record is truncated or holds a non-numeric token."""
    pass


class TokenReader:
    """Sequential reader over whitespace-separated tokens."""

    def __init__(self, text: str):
        self._tokens = deque(text.split())
        self._position = 0

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "TokenReader":
        path = Path(path)
        logger.debug("Reading tokens from %s", path)
        return cls(path.read_text(encoding="utf-8"))

    @classmethod
    def from_string(cls, text: str) -> "TokenReader":
        return cls(text)

    @property
    def remaining(self) -> int:
        return len(self._tokens)

    def token(self) -> str:
        if not self._tokens:
            raise FrameParseError(f"Input exhausted after {self._position} tokens")
        self._position += 1
        return self._tokens.popleft()

    def number(self) -> float:
        tok = self.token()
        try:
            return float(tok)
        except ValueError:
            raise FrameParseError(
                f"Token {self._position} is not a number: {tok!r}"
            ) from None

    def integer(self) -> int:
        value = self.number()
        if not value.is_integer():
            raise FrameParseError(f"Token {self._position} is not an integer: {value}")
        return int(value)


def parse_frame_sequence(reader: TokenReader) -> FrameSequence:
    """Parse one ``start end count`` record followed by its samples.

    Parameters
    ----------
    reader : TokenReader
        Reader positioned at the start of a record.

    Returns
    -------
    FrameSequence
        Samples in input order.

    Raises
    ------
    FrameParseError
        If the record is truncated or malformed.
    """
    start = reader.integer()
    end = reader.integer()
    count = reader.integer()

    samples = []
    for _ in range(count):
        timestamp = reader.integer()
        samples.append(Sample(timestamp=timestamp, image=Grid.from_reader(reader)))

    logger.debug("Parsed %d samples (start=%d, end=%d)", len(samples), start, end)
    return FrameSequence(start=start, end=end, samples=tuple(samples))


def load_frame_sequence(path: Union[str, Path]) -> FrameSequence:
    return parse_frame_sequence(TokenReader.from_file(path))
