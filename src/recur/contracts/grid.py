"""Grid contract.

Checked on parsed frames before they enter detection or clustering.
"""

from recur.contracts.base import require
from recur.frames.grid import Grid


def assert_grid(grid: Grid) -> None:
    """Enforce the grid shape invariant.

    Raises
    ------
    ContractViolation
        If the cell buffer does not hold exactly rows*cols values.
    """
    rows, cols = grid.dimensions
    require(
        rows >= 0 and cols >= 0,
        f"Grid contract violated: negative dimensions {rows}x{cols}"
    )
    require(
        grid.cells.size == rows * cols,
        f"Grid contract violated: {grid.cells.size} cells for {rows}x{cols}"
    )
