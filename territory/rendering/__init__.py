"""
Debug rendering of claim grids.
"""

from .pil_renderer import render_territory_to_image

__all__ = ["render_territory_to_image"]
