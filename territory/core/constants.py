"""
Territory Paint - Constants

Defaults shared by the config, grid and renderer.
"""

# Flood-fill ceiling applied by the painter unless configured otherwise
DEFAULT_MAX_FILL_CELLS = 65536

# ASCII map symbols
CLAIMED_CHAR = "#"
FREE_CHAR = "."

# Render colours (RGB tuples)
COLOR_FREE = (32, 32, 32)
COLOR_CLAIMED = (60, 120, 200)
COLOR_OUTLINE = (255, 255, 255)
COLOR_STROKE = (255, 200, 0)

# Pixels per cell when rendering
DEFAULT_RENDER_SCALE = 8
