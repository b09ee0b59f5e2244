"""Immutable 2D numeric grid.

A Grid is one frame's pixel buffer. It is backed by a read-only numpy array
and offers padded pixel lookup, bounding-box cropping of the nonzero region,
and a parameterized equality test used by shape clustering.

Coordinates are ``(row, col)`` tuples. Lookups outside the grid read as 0
(background), so crops and comparisons can freely run past the edges.
"""

import logging
from typing import Callable, Optional, Sequence, Tuple, TYPE_CHECKING

import numpy as np
from scipy import ndimage

if TYPE_CHECKING:
    from recur.frames.loader import TokenReader

__all__ = ['Grid', 'Point', 'EqualityMapper', 'binarize', 'identity', 'EQUALITY_MAPPERS']

logger = logging.getLogger(__name__)

Point = Tuple[int, int]
EqualityMapper = Callable[[np.ndarray], np.ndarray]


def binarize(values: np.ndarray) -> np.ndarray:
    """Map every nonzero cell to 1 and background to 0."""
    return (np.asarray(values) != 0).astype(np.int8)


def identity(values: np.ndarray) -> np.ndarray:
    """Compare cells by their exact value."""
    return np.asarray(values)


EQUALITY_MAPPERS = {
    "binary": binarize,
    "exact": identity,
}


class Grid:
    """Read-only 2D buffer of numbers.

    Parameters
    ----------
    cells : array-like
        2D array-like of numbers. It is copied; later changes to the source
        do not affect the grid.

    Raises
    ------
    ValueError
        If ``cells`` is not two-dimensional.

    Examples
    --------
    >>> grid = Grid.from_cells((2, 3), [0, 1, 0, 0, 2, 0])
    >>> grid.at(1, 1)
    2.0
    >>> grid.at(5, 5)
    0.0
    >>> grid.bounding_box().dimensions
    (2, 1)
    """

    __slots__ = ("_cells",)

    def __init__(self, cells):
        array = np.array(cells, dtype=np.float64)
        if array.ndim != 2:
            raise ValueError(f"Grid needs 2D cells, got {array.ndim} dims")
        array.setflags(write=False)
        self._cells = array

    @classmethod
    def from_cells(cls, dimensions: Point, cells: Sequence[float]) -> "Grid":
        """Build a grid from a flat row-major cell sequence."""
        rows, cols = dimensions
        if rows < 0 or cols < 0:
            raise ValueError(f"Grid dimensions must be non-negative, got {dimensions}")
        flat = np.asarray(cells, dtype=np.float64)
        if flat.size != rows * cols:
            raise ValueError(
                f"Grid {rows}x{cols} needs {rows * cols} cells, got {flat.size}"
            )
        return cls(flat.reshape(rows, cols))

    @classmethod
    def from_reader(cls, reader: "TokenReader") -> "Grid":
        """Read ``rows cols`` followed by ``rows*cols`` row-major cell values."""
        rows = reader.integer()
        cols = reader.integer()
        cells = [reader.number() for _ in range(rows * cols)]
        return cls.from_cells((rows, cols), cells)

    @property
    def dimensions(self) -> Point:
        rows, cols = self._cells.shape
        return int(rows), int(cols)

    @property
    def cells(self) -> np.ndarray:
        """Flat row-major view of the cell values (read-only)."""
        return self._cells.ravel()

    @property
    def values(self) -> np.ndarray:
        """2D view of the cell values (read-only)."""
        return self._cells

    def point_to_index(self, point: Point) -> int:
        row, col = point
        return row * self.dimensions[1] + col

    def index_to_point(self, index: int) -> Point:
        return divmod(index, self.dimensions[1])

    def at(self, row: int, col: int) -> float:
        """Cell value at ``(row, col)``, or 0 outside the grid."""
        rows, cols = self.dimensions
        if 0 <= row < rows and 0 <= col < cols:
            return float(self._cells[row, col])
        return 0.0

    def has_nonzero(self) -> bool:
        return bool(np.any(self._cells != 0))

    def bounding_box(self) -> Optional["Grid"]:
        """Tight crop around every nonzero cell.

        Returns
        -------
        Grid or None
            The inclusive ``[min_row..max_row] x [min_col..max_col]`` sub-grid,
            or None when the grid holds no object.
        """
        mask = (self._cells != 0).astype(np.int8)
        found = ndimage.find_objects(mask)
        if not found or found[0] is None:
            return None
        row_slice, col_slice = found[0]
        return self.crop(
            (row_slice.start, col_slice.start),
            (row_slice.stop - 1, col_slice.stop - 1),
        )

    def crop(self, top_left: Point, bottom_right: Point) -> "Grid":
        """Inclusive rectangular sub-grid, zero-padded outside the source."""
        top, left = top_left
        bottom, right = bottom_right
        out_rows = max(bottom - top + 1, 0)
        out_cols = max(right - left + 1, 0)
        out = np.zeros((out_rows, out_cols), dtype=np.float64)

        src_rows, src_cols = self.dimensions
        r0, r1 = max(top, 0), min(bottom + 1, src_rows)
        c0, c1 = max(left, 0), min(right + 1, src_cols)
        if r0 < r1 and c0 < c1:
            out[r0 - top:r1 - top, c0 - left:c1 - left] = self._cells[r0:r1, c0:c1]

        return Grid(out)

    def equals(self, other: "Grid", equality_mapper: EqualityMapper = binarize,
               require_same_dimensions: bool = True) -> bool:
        """Cell-by-cell comparison after mapping values with ``equality_mapper``.

        The comparison spans the union of both extents, so a smaller grid is
        compared as if padded with zeros. With ``require_same_dimensions``,
        grids of different raw dimensions are unequal without scanning.
        """
        if require_same_dimensions and self.dimensions != other.dimensions:
            return False

        rows = max(self.dimensions[0], other.dimensions[0])
        cols = max(self.dimensions[1], other.dimensions[1])
        mine = self.crop((0, 0), (rows - 1, cols - 1)).values
        theirs = other.crop((0, 0), (rows - 1, cols - 1)).values

        return bool(np.array_equal(equality_mapper(mine), equality_mapper(theirs)))

    def __repr__(self) -> str:
        rows, cols = self.dimensions
        return f"Grid({rows}x{cols}, nonzero={int(np.count_nonzero(self._cells))})"
