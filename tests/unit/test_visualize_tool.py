"""Unit tests for the visualize tool's argument handling."""

import argparse

import pytest

from territory.core.constants import DEFAULT_RENDER_SCALE
from territory.geo import GridCell, Path
from tools.visualize import build_parser, parse_cell, parse_stroke


class TestArguments:
    """Tests for command-line parsing."""

    def test_scale_defaults_to_render_scale(self):
        """--scale should fall back to the renderer's default scale."""
        args = build_parser().parse_args(["map.txt"])
        assert args.scale == DEFAULT_RENDER_SCALE

    def test_scale_override(self):
        """-s should override the default scale."""
        args = build_parser().parse_args(["map.txt", "-s", "3"])
        assert args.scale == 3

    def test_stroke_and_endpoints_are_parsed(self):
        """Stroke and endpoint arguments should become cells."""
        args = build_parser().parse_args(
            ["map.txt", "--stroke", "0,0;0,1", "--start", "-1,0", "--end", "-1,1"]
        )
        assert args.stroke == Path([GridCell(0, 0), GridCell(0, 1)])
        assert args.start == GridCell(-1, 0)
        assert args.end == GridCell(-1, 1)


class TestCellParsing:
    """Tests for x,z parsing helpers."""

    def test_parse_cell(self):
        """A comma pair should parse to a cell."""
        assert parse_cell("3,-2") == GridCell(3, -2)

    def test_parse_cell_rejects_garbage(self):
        """Malformed cells should raise an argparse error."""
        with pytest.raises(argparse.ArgumentTypeError):
            parse_cell("3")

    def test_parse_stroke_skips_empty_parts(self):
        """Trailing separators should be ignored."""
        assert parse_stroke("1,1;2,1;") == Path([GridCell(1, 1), GridCell(2, 1)])
