"""
Territory Paint - Path

An ordered trace of grid cells (a drawn stroke or a region boundary) with a
bounding box computed once at construction.
"""

from typing import Iterable, Iterator, NamedTuple

from .cell import GridCell
from .errors import IndexOutOfRange


class BoundingBox(NamedTuple):
    """Inclusive axis-aligned bounds of a non-empty Path."""

    x_min: int
    x_max: int
    z_min: int
    z_max: int

    @property
    def x_size(self) -> int:
        return self.x_max - self.x_min + 1

    @property
    def z_size(self) -> int:
        return self.z_max - self.z_min + 1

    def contains(self, x: int, z: int) -> bool:
        return self.x_min <= x <= self.x_max and self.z_min <= z <= self.z_max

    def expanded(self, margin: int) -> "BoundingBox":
        return BoundingBox(
            self.x_min - margin,
            self.x_max + margin,
            self.z_min - margin,
            self.z_max + margin,
        )


def force_distinct(cells: Iterable[GridCell]) -> list[GridCell]:
    """Drop repeated cells, keeping the first occurrence of each."""
    return list(dict.fromkeys(cells))


class Path:
    """
    Immutable ordered sequence of GridCells.

    Duplicates are kept; use distinct() when a deduplicated trace is needed.
    Membership and (x, z) lookup are backed by hash tables built once, so
    they answer exactly what a front-to-back scan would.
    """

    __slots__ = ("_cells", "_members", "_by_xz", "_bbox")

    def __init__(self, cells: Iterable[GridCell] = ()):
        self._cells: tuple[GridCell, ...] = tuple(cells)
        self._members = frozenset(self._cells)

        # First cell wins for each (x, z)
        self._by_xz: dict[tuple[int, int], GridCell] = {}
        for cell in self._cells:
            self._by_xz.setdefault((cell.x, cell.z), cell)

        self._bbox: BoundingBox | None = None
        if self._cells:
            xs = [cell.x for cell in self._cells]
            zs = [cell.z for cell in self._cells]
            self._bbox = BoundingBox(min(xs), max(xs), min(zs), max(zs))

    # -------------------------------------------------------------------------
    # Bounds
    # -------------------------------------------------------------------------

    def bounding_box(self) -> BoundingBox | None:
        """Bounds of the trace, or None when it is empty."""
        return self._bbox

    @property
    def x_min(self) -> int | None:
        return self._bbox.x_min if self._bbox else None

    @property
    def x_max(self) -> int | None:
        return self._bbox.x_max if self._bbox else None

    @property
    def z_min(self) -> int | None:
        return self._bbox.z_min if self._bbox else None

    @property
    def z_max(self) -> int | None:
        return self._bbox.z_max if self._bbox else None

    @property
    def x_size(self) -> int:
        return self._bbox.x_size if self._bbox else 0

    @property
    def z_size(self) -> int:
        return self._bbox.z_size if self._bbox else 0

    # -------------------------------------------------------------------------
    # Access
    # -------------------------------------------------------------------------

    @property
    def cells(self) -> tuple[GridCell, ...]:
        return self._cells

    def at(self, index: int) -> GridCell:
        """
        Return the cell at a position in the trace.

        Raises:
            IndexOutOfRange: If index is outside [0, len)
        """
        if not 0 <= index < len(self._cells):
            raise IndexOutOfRange(
                f"Index {index} out of range for path of length {len(self._cells)}"
            )
        return self._cells[index]

    def __getitem__(self, index: int) -> GridCell:
        return self.at(index)

    def cell_at(self, x: int, z: int) -> GridCell | None:
        """First cell of the trace at (x, z), ignoring the plane."""
        return self._by_xz.get((x, z))

    def index_of(self, cell: GridCell) -> int | None:
        """Position of the first occurrence of cell, or None."""
        if cell not in self._members:
            return None
        return self._cells.index(cell)

    def __contains__(self, cell: object) -> bool:
        return cell in self._members

    def contains(self, cell: GridCell) -> bool:
        return cell in self._members

    def length(self) -> int:
        return len(self._cells)

    def __len__(self) -> int:
        return len(self._cells)

    def last_index(self) -> int:
        """Index of the last cell; -1 for an empty trace."""
        return len(self._cells) - 1

    def __iter__(self) -> Iterator[GridCell]:
        return iter(self._cells)

    def __bool__(self) -> bool:
        return bool(self._cells)

    def distinct(self) -> "Path":
        """Copy of this trace with repeated cells removed."""
        return Path(force_distinct(self._cells))

    def __add__(self, other: "Path") -> "Path":
        if not isinstance(other, Path):
            return NotImplemented
        return Path(self._cells + other._cells)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Path):
            return NotImplemented
        return self._cells == other._cells

    def __hash__(self) -> int:
        return hash(self._cells)

    def __repr__(self) -> str:
        return f"Path({list(self._cells)!r})"
