"""
Territory Paint - Grid Cell

Immutable 2D grid coordinate on a fixed elevation plane.
"""

from dataclasses import dataclass
from numbers import Integral

from .errors import MisalignedCellError

# (dx, dz) offsets, orthogonal first
ORTHOGONAL_OFFSETS = ((0, -1), (0, 1), (-1, 0), (1, 0))
DIAGONAL_OFFSETS = ((-1, -1), (-1, 1), (1, -1), (1, 1))


def _to_grid_int(value, axis: str) -> int:
    """Convert a coordinate to int, rejecting fractional positions."""
    if isinstance(value, bool):
        raise MisalignedCellError(f"{axis} must be a number, got {value!r}")
    if isinstance(value, Integral):
        return int(value)
    if isinstance(value, float) and value.is_integer():
        return int(value)
    raise MisalignedCellError(f"{axis}={value!r} is not an integer grid position")


@dataclass(frozen=True)
class GridCell:
    """
    A single cell of the claim grid.

    Attributes:
        x: Column coordinate
        z: Row coordinate
        plane: Elevation the grid lives on (compared like x and z)

    Raises:
        MisalignedCellError: If any coordinate carries a fractional offset
    """

    x: int
    z: int
    plane: int = 0

    def __post_init__(self):
        object.__setattr__(self, "x", _to_grid_int(self.x, "x"))
        object.__setattr__(self, "z", _to_grid_int(self.z, "z"))
        object.__setattr__(self, "plane", _to_grid_int(self.plane, "plane"))

    @classmethod
    def from_position(cls, x: float, y: float, z: float) -> "GridCell":
        """Build a cell from a continuous world position (y is the plane)."""
        return cls(x, z, y)

    def translate(self, dx: int, dz: int) -> "GridCell":
        """Return the cell offset by (dx, dz) on the same plane."""
        return GridCell(self.x + dx, self.z + dz, self.plane)

    def neighbors4(self) -> set["GridCell"]:
        """Orthogonally adjacent cells."""
        return {self.translate(dx, dz) for dx, dz in ORTHOGONAL_OFFSETS}

    def neighbors8(self) -> set["GridCell"]:
        """All cells at Chebyshev distance 1, diagonals included."""
        offsets = ORTHOGONAL_OFFSETS + DIAGONAL_OFFSETS
        return {self.translate(dx, dz) for dx, dz in offsets}

    def __repr__(self) -> str:
        return f"GridCell({self.x}, {self.z}, plane={self.plane})"
