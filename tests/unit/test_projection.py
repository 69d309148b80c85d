"""Unit tests for boundary projection."""

import pytest

from territory.geo import Direction, GridCell, Path, project, project_all


def make_path(*coords: tuple[int, int], plane: int = 0) -> Path:
    return Path(GridCell(x, z, plane) for x, z in coords)


def as_coords(cells) -> list[tuple[int, int]]:
    return [(cell.x, cell.z) for cell in cells]


@pytest.fixture
def line():
    """Vertical line from (0, 0) to (0, 4)."""
    return make_path(*[(0, z) for z in range(5)])


@pytest.fixture
def square():
    """Filled 3x3 square at x, z in [2, 4]."""
    return make_path(*[(x, z) for z in range(2, 5) for x in range(2, 5)])


class TestEmptyPath:
    """Projection of an empty trace."""

    @pytest.mark.parametrize("direction", list(Direction))
    def test_project_is_empty(self, direction):
        """Every direction should project an empty path to nothing."""
        assert project(Path(), direction) == []

    def test_project_all_is_empty_path(self):
        """project_all of an empty path should be an empty Path."""
        result = project_all(Path())
        assert isinstance(result, Path)
        assert len(result) == 0


class TestDirections:
    """Per-direction scan parameters."""

    def test_north_emits_above_z_max(self, line):
        """North should emit the cell past the top end."""
        assert as_coords(project(line, Direction.NORTH)) == [(0, 5)]

    def test_south_emits_below_z_min(self, line):
        """South should emit the cell past the bottom end."""
        assert as_coords(project(line, Direction.SOUTH)) == [(0, -1)]

    def test_east_scans_from_x_min(self, line):
        """East should emit the column left of the line."""
        assert as_coords(project(line, Direction.EAST)) == [(-1, z) for z in range(5)]

    def test_west_scans_from_x_max(self, line):
        """West should emit the column right of the line."""
        assert as_coords(project(line, Direction.WEST)) == [(1, z) for z in range(5)]

    def test_plane_is_copied_from_first_cell(self):
        """Projected cells should take the first cell's plane."""
        path = make_path((0, 0), (1, 0), plane=70)
        for direction in Direction:
            assert all(cell.plane == 70 for cell in project(path, direction))

    def test_single_cell(self):
        """A single cell should project to its four neighbors."""
        path = make_path((3, 3))
        assert as_coords(project_all(path)) == [(2, 3), (4, 3), (3, 4), (3, 2)]

    def test_emits_before_first_hit_not_box_edge(self):
        """A U-shaped trace opening west projects into its pocket from the east scan."""
        u_shape = make_path((0, 0), (1, 0), (2, 0), (2, 1), (2, 2), (1, 2), (0, 2))
        assert as_coords(project(u_shape, Direction.EAST)) == [(-1, 0), (1, 1), (-1, 2)]

    def test_one_cell_per_scan_line(self, square):
        """Each scan line should emit one cell."""
        assert len(project(square, Direction.NORTH)) == 3
        assert len(project(square, Direction.EAST)) == 3


class TestProjectAll:
    """Concatenation over all four sides."""

    def test_order_is_east_west_north_south(self, line):
        """project_all should concatenate E, W, N, S."""
        expected = (
            project(line, Direction.EAST)
            + project(line, Direction.WEST)
            + project(line, Direction.NORTH)
            + project(line, Direction.SOUTH)
        )
        assert list(project_all(line)) == expected

    def test_duplicates_are_not_removed(self):
        """project_all should keep repeats."""
        # Both the north and east scans of a 2-cell diagonal land on (0, 1)
        path = make_path((0, 0), (1, 1))
        result = project_all(path)
        assert result.cells.count(GridCell(0, 1)) == 2

    @pytest.mark.parametrize("fixture_name", ["line", "square"])
    def test_cells_lie_outside_the_box(self, fixture_name, request):
        """Box-tight traces should project outside the box."""
        path = request.getfixturevalue(fixture_name)
        box = path.bounding_box()
        for direction in Direction:
            for cell in project(path, direction):
                assert not box.contains(cell.x, cell.z)
                if direction is Direction.NORTH:
                    assert cell.z > box.z_max
                elif direction is Direction.SOUTH:
                    assert cell.z < box.z_min
                elif direction is Direction.EAST:
                    assert cell.x < box.x_min
                else:
                    assert cell.x > box.x_max

    def test_thickened_trace_surrounds_itself(self, line):
        """Projection should not overlap the trace."""
        ring = set(project_all(line))
        assert not ring & set(line)
