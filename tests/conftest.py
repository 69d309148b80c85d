"""Shared pytest fixtures for territory tests."""

import pytest

from territory.core.grid import OccupancyGrid
from territory.geo import ClaimedRegion, GridCell, Path


def cells(*coords: tuple[int, int]) -> list[GridCell]:
    """Build GridCells on plane 0 from (x, z) pairs."""
    return [GridCell(x, z) for x, z in coords]


@pytest.fixture
def ring_5x5():
    """Clockwise outline of the square x, z in [0, 4] (boundary only)."""
    top = [(x, 0) for x in range(5)]
    right = [(4, z) for z in range(1, 5)]
    bottom = [(x, 4) for x in range(3, -1, -1)]
    left = [(0, z) for z in range(3, 0, -1)]
    return ClaimedRegion(Path(cells(*(top + right + bottom + left))))


@pytest.fixture
def vertical_stroke():
    """Gap-free straight stroke from (0, 0) to (0, 4)."""
    return Path(cells(*[(0, z) for z in range(5)]))


@pytest.fixture
def wall_region():
    """Region whose outline runs along x = -1 for z in [0, 4]."""
    return ClaimedRegion(Path(cells(*[(-1, z) for z in range(5)])))


@pytest.fixture
def block_3x3():
    """Predicate true exactly on x, z in [1, 3]."""
    return lambda cell: 1 <= cell.x <= 3 and 1 <= cell.z <= 3


@pytest.fixture
def column_grid():
    """8x7 grid (x in [-3, 4], z in [-1, 5]) with x = -1, z in [0, 4] claimed."""
    return OccupancyGrid.from_rows(
        [
            "........",
            "..#.....",
            "..#.....",
            "..#.....",
            "..#.....",
            "..#.....",
            "........",
        ],
        origin_x=-3,
        origin_z=-1,
    )
