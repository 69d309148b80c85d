"""
Territory Paint - Interior Fill

Turns a closed loop into the list of newly claimed cells.

Strategies:
    FROM_OUTSIDE: flood the loop's complement from just outside its
        bounding box; every box cell the flood cannot reach is enclosed.
    CROSSING_NUMBER: flood from the loop itself using is_inside as the
        predicate, clamped to the loop's bounding box.

Both drop every cell the outside flood reaches, drop projected cells that
face the outside (they sit one cell beyond the drawn trace) and keep the old
boundary arc.
"""

from enum import Enum

from .cell import ORTHOGONAL_OFFSETS, GridCell
from .classify import is_inside
from .closing import close_parts
from .grow import grow, grow_ordered
from .path import BoundingBox, Path
from .region import ClaimedRegion


class FillAlgorithm(Enum):
    """Interior strategy applied after closing."""

    FROM_OUTSIDE = "from_outside"
    CROSSING_NUMBER = "crossing_number"


def fill_inside(
    region: ClaimedRegion,
    contain_outline: bool = False,
    limit: int | None = None,
) -> list[GridCell]:
    """
    Flood a region from its first outline cell using is_inside.

    Growth is clamped to the outline's bounding box. Cells left of a
    horizontal outline run see a single crossing however far away they are.

    Args:
        region: Region whose interior to fill
        contain_outline: Append the outline cells to the result
        limit: Cell ceiling passed to grow_ordered
    """
    if not region.outline:
        return []

    bbox = region.outline.bounding_box()
    selected = grow_ordered(
        region.outline.at(0),
        lambda cell: bbox.contains(cell.x, cell.z) and is_inside(region, cell),
        limit,
    )
    if contain_outline:
        return selected + list(region.outline)
    return selected


def _touches(cell: GridCell, cells: set[GridCell]) -> bool:
    return any(cell.translate(dx, dz) in cells for dx, dz in ORTHOGONAL_OFFSETS)


def _box_cells(bbox: BoundingBox, plane: int):
    for z in range(bbox.z_min, bbox.z_max + 1):
        for x in range(bbox.x_min, bbox.x_max + 1):
            yield GridCell(x, z, plane)


def _outside_flood(loop: Path, limit: int | None) -> set[GridCell]:
    """Cells of the loop's box grown by one that are reachable from its corner."""
    outer = loop.bounding_box().expanded(1)
    barrier = set(loop)
    return grow(
        GridCell(outer.x_min, outer.z_min, loop.at(0).plane),
        lambda cell: outer.contains(cell.x, cell.z) and cell not in barrier,
        limit,
    )


def _enclosed(
    cells,
    outside: set[GridCell],
    projected: set[GridCell],
) -> list[GridCell]:
    claimed = []
    for cell in cells:
        if cell in outside:
            continue
        if cell in projected and _touches(cell, outside):
            continue
        claimed.append(cell)
    return claimed


def _fill_from_outside(
    loop: Path,
    projected: set[GridCell],
    limit: int | None,
) -> list[GridCell]:
    box_cells = _box_cells(loop.bounding_box(), loop.at(0).plane)
    return _enclosed(box_cells, _outside_flood(loop, limit), projected)


def _fill_crossing_number(
    loop: Path,
    projected: set[GridCell],
    limit: int | None,
) -> list[GridCell]:
    # Odd parity also leaks into corners beside a lone projected cell
    selected = fill_inside(ClaimedRegion(loop), limit=limit)
    return _enclosed(selected, _outside_flood(loop, limit), projected)


_STRATEGIES = {
    FillAlgorithm.FROM_OUTSIDE: _fill_from_outside,
    FillAlgorithm.CROSSING_NUMBER: _fill_crossing_number,
}


def fill(
    region: ClaimedRegion,
    path: Path,
    start: GridCell,
    end: GridCell,
    algorithm: FillAlgorithm = FillAlgorithm.FROM_OUTSIDE,
    limit: int | None = None,
) -> list[GridCell] | None:
    """
    Close a drawn trace against a region and compute the claimed cells.

    Args:
        region: Current claimed region
        path: Newly drawn trace
        start: Outline cell where the trace leaves the region
        end: Outline cell where the trace returns
        algorithm: Interior strategy
        limit: Cell ceiling for the flood fill

    Returns:
        Claimed cells (each once), or None for a rejected attempt

    Raises:
        FillLimitExceeded: If the flood fill passes limit
        InternalInconsistency: If the outline lookup fails after the checks
    """
    parts = close_parts(region, path, start, end)
    if parts is None:
        return None

    ring, arc = parts
    loop = Path(list(ring) + arc)
    projected = set(ring) - set(arc)
    return _STRATEGIES[algorithm](loop, projected, limit)
