"""
Territory Paint - Configuration

Settings consumed by the painter to select the interior fill strategy and
bound flood fills.
"""

from dataclasses import dataclass, fields
from typing import Any

from ..geo.fill import FillAlgorithm
from .constants import DEFAULT_MAX_FILL_CELLS


@dataclass(frozen=True)
class TerritoryConfig:
    """
    Painter configuration.

    Attributes:
        fill_algorithm: Strategy used to fill a closed loop
        max_fill_cells: Flood-fill ceiling, None for unbounded
    """

    fill_algorithm: FillAlgorithm = FillAlgorithm.FROM_OUTSIDE
    max_fill_cells: int | None = DEFAULT_MAX_FILL_CELLS

    def __post_init__(self):
        """Validate configuration."""
        if not isinstance(self.fill_algorithm, FillAlgorithm):
            raise ValueError(
                f"fill_algorithm must be a FillAlgorithm, got {self.fill_algorithm!r}"
            )
        limit = self.max_fill_cells
        if limit is not None and (isinstance(limit, bool) or not isinstance(limit, int)):
            raise ValueError(f"max_fill_cells must be an int or None, got {limit!r}")
        if limit is not None and limit <= 0:
            raise ValueError(
                f"max_fill_cells must be positive or None, got {self.max_fill_cells}"
            )

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "TerritoryConfig":
        """
        Build a config from plain values.

        fill_algorithm may be given by enum name or value, in any case.

        Raises:
            ValueError: On unknown keys or an unknown algorithm
        """
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ValueError(f"Unknown config keys: {sorted(unknown)}")

        values = dict(data)
        algorithm = values.get("fill_algorithm")
        if isinstance(algorithm, str):
            values["fill_algorithm"] = _parse_algorithm(algorithm)
        return cls(**values)


def _parse_algorithm(name: str) -> FillAlgorithm:
    key = name.strip().lower()
    for algorithm in FillAlgorithm:
        if key in (algorithm.name.lower(), algorithm.value):
            return algorithm
    valid = [a.name for a in FillAlgorithm]
    raise ValueError(f"Invalid fill_algorithm: {name}. Must be one of {valid}")
