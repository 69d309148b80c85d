"""
Territory Paint - PIL Renderer

PIL-based rendering of an occupancy grid with an optional region outline and
drawn stroke overlaid. Used by the visualize tool to create static images.
"""

from typing import Iterable

try:
    from PIL import Image
except ImportError:
    raise ImportError("Pillow library required. Install with: pip install Pillow")

from ..core.constants import (
    COLOR_CLAIMED,
    COLOR_FREE,
    COLOR_OUTLINE,
    COLOR_STROKE,
    DEFAULT_RENDER_SCALE,
)
from ..core.grid import OccupancyGrid
from ..geo.cell import GridCell
from ..geo.region import ClaimedRegion


def _paint_cell(pixels, col: int, row: int, scale: int, color: tuple[int, int, int]):
    base_x = col * scale
    base_y = row * scale
    for py in range(scale):
        for px in range(scale):
            pixels[base_x + px, base_y + py] = color


def _paint_overlay(
    pixels,
    grid: OccupancyGrid,
    cells: Iterable[GridCell],
    scale: int,
    color: tuple[int, int, int],
):
    for cell in cells:
        if not grid.in_bounds(cell):
            continue
        _paint_cell(pixels, cell.x - grid.origin_x, cell.z - grid.origin_z, scale, color)


def render_territory_to_image(
    grid: OccupancyGrid,
    region: ClaimedRegion | None = None,
    stroke: Iterable[GridCell] | None = None,
    scale: int = DEFAULT_RENDER_SCALE,
) -> Image.Image:
    """
    Render a claim grid to a PIL Image.

    Args:
        grid: Occupancy grid to draw
        region: Region whose outline is drawn over the claimed cells
        stroke: Drawn trace, drawn last
        scale: Pixels per cell (default: 8)

    Returns:
        PIL RGB Image of size (width * scale, height * scale)
    """
    if scale <= 0:
        raise ValueError(f"scale must be positive, got {scale}")

    img = Image.new("RGB", (grid.width * scale, grid.height * scale), COLOR_FREE)
    pixels = img.load()
    assert pixels is not None

    occupancy = grid.to_array()
    for row in range(grid.height):
        for col in range(grid.width):
            if occupancy[row, col]:
                _paint_cell(pixels, col, row, scale, COLOR_CLAIMED)

    if region is not None:
        _paint_overlay(pixels, grid, region.outline, scale, COLOR_OUTLINE)

    if stroke is not None:
        _paint_overlay(pixels, grid, stroke, scale, COLOR_STROKE)

    return img
