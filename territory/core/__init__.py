"""
Host-facing glue around the geometry core.

Occupancy snapshots, painter sessions and configuration.
"""

from .config import TerritoryConfig
from .grid import OccupancyGrid
from .painter import TerritoryPainter

__all__ = [
    "TerritoryConfig",
    "OccupancyGrid",
    "TerritoryPainter",
]
