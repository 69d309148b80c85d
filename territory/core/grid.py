"""
Territory Paint - Occupancy Grid

Bounded claimed/unclaimed map backed by a numpy boolean array. Its
occupied() method is the occupancy predicate handed to the geometry core;
take a snapshot() before a closing operation so the predicate cannot change
under a running flood fill.
"""

from typing import Iterable

import numpy as np

from ..geo.cell import GridCell
from .constants import CLAIMED_CHAR, FREE_CHAR


class OccupancyGrid:
    """
    Rectangular window of the claim grid on one plane.

    Array rows are z, columns are x, both offset by the origin.
    """

    def __init__(
        self,
        width: int,
        height: int,
        origin_x: int = 0,
        origin_z: int = 0,
        plane: int = 0,
    ):
        if width <= 0 or height <= 0:
            raise ValueError(f"Grid size must be positive, got {width}x{height}")

        self.origin_x = origin_x
        self.origin_z = origin_z
        self.plane = plane
        self._cells = np.zeros((height, width), dtype=bool)

    @property
    def width(self) -> int:
        return self._cells.shape[1]

    @property
    def height(self) -> int:
        return self._cells.shape[0]

    def _index(self, cell: GridCell) -> tuple[int, int] | None:
        """Array (row, col) for a cell, or None if outside this grid."""
        if cell.plane != self.plane:
            return None
        row = cell.z - self.origin_z
        col = cell.x - self.origin_x
        if 0 <= row < self.height and 0 <= col < self.width:
            return row, col
        return None

    def in_bounds(self, cell: GridCell) -> bool:
        return self._index(cell) is not None

    def occupied(self, cell: GridCell) -> bool:
        """True if cell is claimed. Cells outside the grid are unclaimed."""
        index = self._index(cell)
        if index is None:
            return False
        return bool(self._cells[index])

    def __contains__(self, cell: GridCell) -> bool:
        return self.occupied(cell)

    def _set(self, cells: Iterable[GridCell], value: bool) -> None:
        # Nothing is written unless every cell is in bounds
        indices = []
        for cell in cells:
            index = self._index(cell)
            if index is None:
                raise ValueError(f"{cell} is outside the grid")
            indices.append(index)

        for index in indices:
            self._cells[index] = value

    def claim(self, cells: Iterable[GridCell]) -> None:
        """
        Mark cells as claimed.

        Raises:
            ValueError: If any cell is outside the grid (nothing is written)
        """
        self._set(cells, True)

    def release(self, cells: Iterable[GridCell]) -> None:
        """Mark cells as unclaimed."""
        self._set(cells, False)

    def snapshot(self) -> "OccupancyGrid":
        """Independent copy of this grid."""
        copy = OccupancyGrid(
            self.width, self.height, self.origin_x, self.origin_z, self.plane
        )
        copy._cells = self._cells.copy()
        return copy

    def count(self) -> int:
        """Number of claimed cells."""
        return int(np.count_nonzero(self._cells))

    def claimed_cells(self) -> list[GridCell]:
        """Claimed cells in row-major order."""
        rows, cols = np.nonzero(self._cells)
        return [
            GridCell(int(col) + self.origin_x, int(row) + self.origin_z, self.plane)
            for row, col in zip(rows, cols)
        ]

    def to_array(self) -> np.ndarray:
        """Copy of the underlying boolean array."""
        return self._cells.copy()

    # -------------------------------------------------------------------------
    # ASCII helpers
    # -------------------------------------------------------------------------

    @classmethod
    def from_rows(
        cls,
        rows: list[str],
        origin_x: int = 0,
        origin_z: int = 0,
        plane: int = 0,
        claimed: str = CLAIMED_CHAR,
    ) -> "OccupancyGrid":
        """
        Parse an ASCII map, one string per z row.

        Any character other than `claimed` is free.

        Raises:
            ValueError: If rows are empty or ragged
        """
        if not rows or not rows[0]:
            raise ValueError("Map must have at least one non-empty row")
        width = len(rows[0])
        for i, row in enumerate(rows):
            if len(row) != width:
                raise ValueError(
                    f"Row {i} has width {len(row)}, expected {width}"
                )

        grid = cls(width, len(rows), origin_x, origin_z, plane)
        grid._cells = np.array(
            [[char == claimed for char in row] for row in rows], dtype=bool
        )
        return grid

    def to_rows(self, claimed: str = CLAIMED_CHAR, free: str = FREE_CHAR) -> list[str]:
        return [
            "".join(claimed if value else free for value in row)
            for row in self._cells
        ]

    def __repr__(self) -> str:
        return (
            f"OccupancyGrid({self.width}x{self.height}, "
            f"origin=({self.origin_x}, {self.origin_z}), claimed={self.count()})"
        )
