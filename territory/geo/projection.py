"""
Territory Paint - Boundary Projection

Thickens a free-hand trace by one cell on each of its four sides: for every
row or column of the trace's bounding box, scan in from just outside the box
until the trace is hit and emit the cell one step back toward the scan start.
"""

from enum import Enum

from .cell import GridCell
from .path import Path


class Direction(Enum):
    """Cardinal scan directions. Value is (scanned axis, scan step)."""

    NORTH = ("z", -1)
    SOUTH = ("z", 1)
    EAST = ("x", 1)
    WEST = ("x", -1)

    @property
    def axis(self) -> str:
        return self.value[0]

    @property
    def step(self) -> int:
        return self.value[1]


# Output ordering of project_all
PROJECTION_ORDER = (Direction.EAST, Direction.WEST, Direction.NORTH, Direction.SOUTH)


def project(path: Path, direction: Direction) -> list[GridCell]:
    """
    Project one side of a trace outward by a single cell.

    The scan along each line starts one cell outside the bounding box
    (max + 1 for a negative step, min - 1 for a positive one), walks toward
    the box, and on the first occupied cell emits the cell one step back.

    Args:
        path: Trace to project
        direction: Which side to scan from

    Returns:
        Emitted cells in line order; empty when the trace is empty
    """
    bbox = path.bounding_box()
    if bbox is None:
        return []

    plane = path.at(0).plane
    step = direction.step

    if direction.axis == "z":
        lines = range(bbox.x_min, bbox.x_max + 1)
        scan_min, scan_max = bbox.z_min, bbox.z_max
    else:
        lines = range(bbox.z_min, bbox.z_max + 1)
        scan_min, scan_max = bbox.x_min, bbox.x_max

    if step < 0:
        scan = range(scan_max + 1, scan_min - 1, -1)
    else:
        scan = range(scan_min - 1, scan_max + 1)

    emitted = []
    for line in lines:
        for pos in scan:
            if direction.axis == "z":
                hit = path.cell_at(line, pos)
                if hit is not None:
                    emitted.append(GridCell(line, pos - step, plane))
                    break
            else:
                hit = path.cell_at(pos, line)
                if hit is not None:
                    emitted.append(GridCell(pos - step, line, plane))
                    break
    return emitted


def project_all(path: Path) -> Path:
    """Concatenate the projections from all four sides (duplicates kept)."""
    cells: list[GridCell] = []
    for direction in PROJECTION_ORDER:
        cells.extend(project(path, direction))
    return Path(cells)
