"""
Territory Paint - Painter

Runs closing operations against a claimed region and an occupancy grid.
The last valid region is only replaced once a closing has fully succeeded;
any failure leaves both the region and the grid untouched.
"""

import logging
from typing import Callable

from ..geo.cell import GridCell
from ..geo.errors import FillLimitExceeded, InternalInconsistency
from ..geo.fill import fill
from ..geo.grow import extract_outline
from ..geo.path import Path
from ..geo.region import ClaimedRegion
from .config import TerritoryConfig
from .grid import OccupancyGrid

logger = logging.getLogger(__name__)

ClaimCallback = Callable[[list[GridCell]], None]


class TerritoryPainter:
    """Holds one player's claimed region and applies drawn strokes to it."""

    def __init__(
        self,
        grid: OccupancyGrid,
        region: ClaimedRegion,
        config: TerritoryConfig | None = None,
        on_claim: ClaimCallback | None = None,
    ):
        """
        Args:
            grid: Occupancy grid the claims are written to
            region: Current claimed region
            config: Fill settings (defaults to TerritoryConfig())
            on_claim: Receives newly claimed cells after each commit
        """
        self.grid = grid
        self.config = config or TerritoryConfig()
        self.on_claim = on_claim
        self._region = region

    @classmethod
    def from_seed(
        cls,
        grid: OccupancyGrid,
        seed: GridCell,
        config: TerritoryConfig | None = None,
        on_claim: ClaimCallback | None = None,
    ) -> "TerritoryPainter":
        """Start from the outline of the claimed blob containing seed."""
        config = config or TerritoryConfig()
        snapshot = grid.snapshot()
        region = extract_outline(seed, snapshot.occupied, config.max_fill_cells)
        return cls(grid, region, config, on_claim)

    @property
    def region(self) -> ClaimedRegion:
        return self._region

    def apply_stroke(
        self,
        path: Path,
        start: GridCell,
        end: GridCell,
    ) -> list[GridCell] | None:
        """
        Close a drawn stroke against the region and claim the enclosed cells.

        Args:
            path: Drawn stroke
            start: Outline cell where the stroke left the region
            end: Outline cell where the stroke returned

        Returns:
            Newly claimed cells, or None if the stroke was rejected or the
            operation aborted
        """
        limit = self.config.max_fill_cells
        try:
            claimed = fill(
                self._region, path, start, end, self.config.fill_algorithm, limit
            )
        except FillLimitExceeded as e:
            logger.warning("Fill aborted for stroke of %d cells: %s", len(path), e)
            return None
        except InternalInconsistency:
            logger.exception("Closing failed for stroke %s -> %s", start, end)
            return None

        if claimed is None:
            logger.debug("Stroke %s -> %s does not connect to the region", start, end)
            return None

        in_grid = [cell for cell in claimed if self.grid.in_bounds(cell)]
        if len(in_grid) != len(claimed):
            logger.debug("Dropped %d cells outside the grid", len(claimed) - len(in_grid))

        working = self.grid.snapshot()
        working.claim(in_grid)
        try:
            region = extract_outline(start, working.occupied, limit)
            if not region.outline:
                raise InternalInconsistency(f"No claimed area around {start} after fill")
        except (InternalInconsistency, FillLimitExceeded):
            logger.exception("Outline rebuild failed; keeping previous region")
            return None

        self.grid.claim(in_grid)
        self._region = region
        logger.info(
            "Claimed %d cells, outline now %d cells", len(in_grid), len(region.outline)
        )

        if self.on_claim is not None:
            self.on_claim(in_grid)
        return in_grid
