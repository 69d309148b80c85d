"""
Territory geometry core.

Traces, claimed regions, boundary projection, region closing, crossing-number
classification and flood-fill region growing on a 2D grid.
"""

from .cell import GridCell
from .classify import is_inside
from .closing import can_close, close, outline_arc
from .errors import (
    FillLimitExceeded,
    GeometryError,
    IndexOutOfRange,
    InternalInconsistency,
    MisalignedCellError,
)
from .fill import FillAlgorithm, fill, fill_inside
from .grow import extract_outline, grow, grow_ordered
from .path import BoundingBox, Path, force_distinct
from .projection import Direction, project, project_all
from .region import ClaimedRegion

__all__ = [
    "GridCell",
    "Path",
    "BoundingBox",
    "ClaimedRegion",
    "Direction",
    "FillAlgorithm",
    "project",
    "project_all",
    "can_close",
    "close",
    "outline_arc",
    "is_inside",
    "grow",
    "grow_ordered",
    "extract_outline",
    "fill",
    "fill_inside",
    "force_distinct",
    "GeometryError",
    "MisalignedCellError",
    "IndexOutOfRange",
    "InternalInconsistency",
    "FillLimitExceeded",
]
