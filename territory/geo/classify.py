"""
Territory Paint - Point Classification

Even-odd (crossing-number) test against a region outline. Consecutive
outline cells along the scan row are merged into one crossing so a boundary
thicker than one cell does not flip parity per cell.
"""

from .cell import GridCell
from .region import ClaimedRegion


def is_inside(region: ClaimedRegion, cell: GridCell) -> bool:
    """
    Decide whether a cell lies inside a region.

    Cells on the outline count as inside. Otherwise the row at cell.z is
    scanned from cell.x to the outline's x_max and the cell is inside when
    the number of boundary runs crossed is odd.
    """
    outline = region.outline
    if cell in outline:
        return True

    x_max = outline.x_max
    if x_max is None:
        return False

    crossings = 0
    in_run = False
    for x in range(cell.x, x_max + 1):
        if outline.cell_at(x, cell.z) is not None:
            if not in_run:
                crossings += 1
                in_run = True
        else:
            in_run = False

    return crossings % 2 == 1
