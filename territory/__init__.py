"""
Territory Paint - grid territory claiming engine.
"""

from .core.config import TerritoryConfig
from .core.grid import OccupancyGrid
from .core.painter import TerritoryPainter
from .geo import ClaimedRegion, FillAlgorithm, GridCell, Path

__version__ = "0.1.0"
__all__ = [
    "GridCell",
    "Path",
    "ClaimedRegion",
    "FillAlgorithm",
    "OccupancyGrid",
    "TerritoryConfig",
    "TerritoryPainter",
]
