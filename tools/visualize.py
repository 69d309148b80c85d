#!/usr/bin/env python3
"""
Territory Paint - Map Visualizer

Renders an ASCII claim map as a PNG, optionally after applying a stroke.
"""

import argparse
import sys
from pathlib import Path as FilePath

from territory.core.config import TerritoryConfig
from territory.core.constants import DEFAULT_RENDER_SCALE
from territory.core.grid import OccupancyGrid
from territory.core.painter import TerritoryPainter
from territory.geo import ClaimedRegion, FillAlgorithm, GridCell, Path
from territory.rendering.pil_renderer import render_territory_to_image


def parse_cell(text: str) -> GridCell:
    """Parse "x,z" into a GridCell."""
    try:
        x, z = (int(part) for part in text.split(","))
    except ValueError:
        raise argparse.ArgumentTypeError(f"Expected x,z but got '{text}'")
    return GridCell(x, z)


def parse_stroke(text: str) -> Path:
    """Parse "x,z;x,z;..." into a Path."""
    return Path(parse_cell(part) for part in text.split(";") if part.strip())


def load_map(map_path: str) -> OccupancyGrid:
    """Load an ASCII map file ('#' claimed, anything else free)."""
    with open(map_path) as f:
        rows = [line.rstrip("\n") for line in f if line.strip()]
    return OccupancyGrid.from_rows(rows)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Render a territory claim map as a PNG image",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  Render a map:
    python tools/visualize.py maps/start.txt

  Apply a stroke from (3,2) back to (3,6) and render the result:
    python tools/visualize.py maps/start.txt after.png \\
        --stroke "4,2;5,2;6,2;6,3;6,4;6,5;6,6;5,6;4,6" --start 3,2 --end 3,6
        """,
    )
    parser.add_argument("map", help="Path to ASCII map file")
    parser.add_argument("output", nargs="?", help="Output PNG file (optional)")
    parser.add_argument("--stroke", type=parse_stroke, help="Stroke cells as x,z;x,z;...")
    parser.add_argument("--start", type=parse_cell, help="Outline cell the stroke leaves from")
    parser.add_argument("--end", type=parse_cell, help="Outline cell the stroke returns to")
    parser.add_argument(
        "--algorithm",
        choices=[a.value for a in FillAlgorithm],
        default=FillAlgorithm.FROM_OUTSIDE.value,
        help="Interior fill strategy (default: from_outside)",
    )
    parser.add_argument(
        "-s",
        "--scale",
        type=int,
        default=DEFAULT_RENDER_SCALE,
        help=f"Pixels per cell (default: {DEFAULT_RENDER_SCALE})",
    )
    return parser


def main():
    args = build_parser().parse_args()

    map_path = FilePath(args.map)
    if not map_path.exists():
        print(f"Error: {args.map} not found")
        sys.exit(1)

    if (args.start is None) != (args.end is None):
        print("Error: --start and --end must be given together")
        sys.exit(1)
    if args.start is not None and args.stroke is None:
        print("Error: --start/--end require --stroke")
        sys.exit(1)

    grid = load_map(args.map)
    region = ClaimedRegion()

    if args.start is not None:
        config = TerritoryConfig(fill_algorithm=FillAlgorithm(args.algorithm))
        painter = TerritoryPainter.from_seed(grid, args.start, config)
        claimed = painter.apply_stroke(args.stroke, args.start, args.end)
        if claimed is None:
            print("Stroke rejected: it does not close against the claimed area")
        else:
            print(f"Claimed {len(claimed)} cells")
        region = painter.region

    img = render_territory_to_image(grid, region, args.stroke, args.scale)
    output_path = args.output if args.output else map_path.stem + ".png"
    img.save(output_path)
    print(f"Saved: {output_path} ({img.width}x{img.height})")


if __name__ == "__main__":
    main()
