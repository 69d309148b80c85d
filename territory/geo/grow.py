"""
Territory Paint - Region Growing

Breadth-first flood fill over orthogonal neighbors, driven by an arbitrary
occupancy predicate, and boundary extraction of the grown blob.
"""

from collections import deque
from typing import Callable

from .cell import ORTHOGONAL_OFFSETS, GridCell
from .errors import FillLimitExceeded
from .path import Path
from .region import ClaimedRegion

Predicate = Callable[[GridCell], bool]


def grow_ordered(
    seed: GridCell,
    predicate: Predicate,
    limit: int | None = None,
) -> list[GridCell]:
    """
    Flood fill from seed, returning accepted cells in discovery order.

    Every cell is tested at most once. The predicate must be false on a
    closed perimeter around the reachable true region, otherwise this only
    stops at the limit.

    Args:
        seed: Starting cell (tested like any other)
        predicate: Occupancy test; must stay stable for the whole call
        limit: Maximum accepted cells, None for unbounded

    Raises:
        FillLimitExceeded: If more than limit cells are accepted
    """
    accepted: list[GridCell] = []
    seen = {seed}
    queue = deque([seed])

    while queue:
        current = queue.popleft()
        if not predicate(current):
            continue

        accepted.append(current)
        if limit is not None and len(accepted) > limit:
            raise FillLimitExceeded(limit)

        for dx, dz in ORTHOGONAL_OFFSETS:
            neighbor = current.translate(dx, dz)
            if neighbor not in seen:
                seen.add(neighbor)
                queue.append(neighbor)

    return accepted


def grow(
    seed: GridCell,
    predicate: Predicate,
    limit: int | None = None,
) -> set[GridCell]:
    """Flood fill from seed; the set of cells satisfying predicate."""
    return set(grow_ordered(seed, predicate, limit))


def extract_outline(
    seed: GridCell,
    predicate: Predicate,
    limit: int | None = None,
) -> ClaimedRegion:
    """Grow from seed and keep the cells with an orthogonal neighbor outside."""
    selected = grow_ordered(seed, predicate, limit)
    outline = [
        cell for cell in selected
        if any(not predicate(neighbor) for neighbor in cell.neighbors4())
    ]
    return ClaimedRegion(Path(outline))
