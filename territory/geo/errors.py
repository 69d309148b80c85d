"""
Territory Paint - Geometry Errors

Exceptions raised by the geometry core. A rejected closing attempt is not
an error and is reported as ``None`` instead.
"""


class GeometryError(Exception):
    """Base class for geometry core failures."""

    pass


class MisalignedCellError(GeometryError, ValueError):
    """Raised when a position does not fall on an integer grid cell."""

    pass


class IndexOutOfRange(GeometryError, IndexError):
    """Raised when a Path is indexed outside [0, len)."""

    pass


class InternalInconsistency(GeometryError, RuntimeError):
    """Raised when an invariant fails that earlier checks should guarantee."""

    pass


class FillLimitExceeded(GeometryError, RuntimeError):
    """Raised when region growing accepts more cells than its ceiling."""

    def __init__(self, limit: int):
        super().__init__(f"Region growing exceeded {limit} cells")
        self.limit = limit
