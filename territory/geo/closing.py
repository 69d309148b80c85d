"""
Territory Paint - Region Closing

Splices a newly drawn trace onto an existing region's boundary to form a
candidate closed loop.

The boundary arc between start and end is taken in index order of the stored
outline. For a non-convex or self-overlapping outline that may be the wrong
side of the loop; the arc choice is kept as-is and isolated in
outline_arc() so an alternative selection can replace it.
"""

from .cell import GridCell
from .errors import InternalInconsistency
from .path import Path
from .projection import project_all
from .region import ClaimedRegion


def can_close(
    region: ClaimedRegion,
    path: Path,
    start: GridCell,
    end: GridCell,
) -> bool:
    """
    Check the closing preconditions.

    start and end must lie on the outline and each touch it through an
    8-neighbor. A non-empty trace must also begin and finish next to the
    outline.
    """
    if not (region.touches(start) and region.touches(end)):
        return False
    if start not in region.outline or end not in region.outline:
        return False
    if path:
        return region.touches(path.at(0)) and region.touches(path.at(path.last_index()))
    return True


def outline_arc(region: ClaimedRegion, start: GridCell, end: GridCell) -> list[GridCell]:
    """
    Outline cells between start and end, inclusive, in index order.

    Raises:
        InternalInconsistency: If start or end is not on the outline
    """
    start_index = region.outline.index_of(start)
    end_index = region.outline.index_of(end)
    if start_index is None or end_index is None:
        raise InternalInconsistency(f"{start} or {end} is not on the outline")

    low, high = min(start_index, end_index), max(start_index, end_index)
    return list(region.outline.cells[low:high + 1])


def close_parts(
    region: ClaimedRegion,
    path: Path,
    start: GridCell,
    end: GridCell,
) -> tuple[Path, list[GridCell]] | None:
    """Projected trace and boundary arc of a closing, or None if rejected."""
    if not can_close(region, path, start, end):
        return None
    arc = outline_arc(region, start, end)
    return project_all(path), arc


def close(
    region: ClaimedRegion,
    path: Path,
    start: GridCell,
    end: GridCell,
) -> Path | None:
    """
    Build the candidate closed loop for a drawn trace.

    Args:
        region: Current claimed region
        path: Newly drawn trace
        start: Outline cell where the trace leaves the region
        end: Outline cell where the trace returns

    Returns:
        Projected trace followed by the outline arc, or None when the
        attempt does not connect to the region
    """
    parts = close_parts(region, path, start, end)
    if parts is None:
        return None
    ring, arc = parts
    return Path(list(ring) + arc)
