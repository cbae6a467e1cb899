"""Static grid bounds for the snake simulation."""

from __future__ import annotations

from collections.abc import Iterable

import numpy as np

Cell = tuple[int, int]


class Grid:
    """Fixed ``width × height`` board of integer ``(x, y)`` cells.

    The occupancy mask is indexed ``[y, x]`` so it lines up with NumPy's
    row-major layout; it is only used to enumerate free cells.
    """

    def __init__(self, width: int = 10, height: int = 10) -> None:
        for name, value in (("width", width), ("height", height)):
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(
                    f"Grid {name} must be an int, got {type(value).__name__}."
                )
        if width < 1 or height < 1 or width * height < 2:
            raise ValueError("Grid must be at least 1×2 to hold a 2-cell snake.")
        self._width = width
        self._height = height

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def in_bounds(self, cell: Cell) -> bool:
        """Check whether a coordinate lies within the grid."""
        x, y = cell
        return 0 <= x < self._width and 0 <= y < self._height

    def occupancy(self, occupied: Iterable[Cell]) -> np.ndarray:
        """Return a boolean ``(height, width)`` mask of the given cells.

        Raises ``ValueError`` for a cell outside the grid.
        """
        mask = np.zeros((self._height, self._width), dtype=bool)
        for x, y in occupied:
            if not self.in_bounds((x, y)):
                raise ValueError(f"Cell {(x, y)} lies outside the grid.")
            mask[y, x] = True
        return mask

    def free_cells(self, occupied: Iterable[Cell]) -> list[Cell]:
        """Return every cell not present in *occupied*."""
        ys, xs = np.where(~self.occupancy(occupied))
        return list(zip(xs.tolist(), ys.tolist(), strict=True))
