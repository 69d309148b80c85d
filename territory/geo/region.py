"""
Territory Paint - Claimed Region

A claimed area described only by its boundary trace. Interior membership is
always derived from the outline (see classify.is_inside), never stored.
"""

from dataclasses import dataclass, field

from .cell import GridCell
from .path import Path


@dataclass(frozen=True)
class ClaimedRegion:
    """Region identified solely by its outline Path."""

    outline: Path = field(default_factory=Path)

    def __contains__(self, cell: GridCell) -> bool:
        return cell in self.outline

    def contains(self, cell: GridCell) -> bool:
        """True when cell lies on the outline."""
        return cell in self.outline

    def touches(self, cell: GridCell) -> bool:
        """True when any 8-neighbor of cell lies on the outline."""
        return any(neighbor in self.outline for neighbor in cell.neighbors8())

    def __len__(self) -> int:
        return len(self.outline)
