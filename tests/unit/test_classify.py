"""Unit tests for crossing-number point classification."""

import pytest

from territory.geo import ClaimedRegion, GridCell, Path, is_inside


class TestSquareRing:
    """Classification against a 5x5 boundary-only ring."""

    def test_center_is_inside(self, ring_5x5):
        """The center cell of the ring should be inside."""
        assert is_inside(ring_5x5, GridCell(2, 2))

    def test_whole_interior_is_inside(self, ring_5x5):
        """Every cell enclosed by the ring should be inside."""
        for x in range(1, 4):
            for z in range(1, 4):
                assert is_inside(ring_5x5, GridCell(x, z))

    def test_boundary_cells_are_inside(self, ring_5x5):
        """Outline cells should count as inside."""
        for cell in ring_5x5.outline:
            assert is_inside(ring_5x5, cell)

    @pytest.mark.parametrize(
        "x, z",
        [(-1, 2), (5, 2), (2, -1), (2, 5), (-3, -3), (6, 0), (9, 9), (5, 4)],
    )
    def test_cells_outside_the_box_are_outside(self, ring_5x5, x, z):
        """Cells beyond the ring should be outside."""
        assert not is_inside(ring_5x5, GridCell(x, z))


class TestRunMerging:
    """Adjacent boundary cells on the scan row count as one crossing."""

    @pytest.fixture
    def thick_row(self):
        return ClaimedRegion(Path([GridCell(0, 0), GridCell(1, 0), GridCell(5, 0)]))

    def test_two_runs_are_even(self, thick_row):
        """Crossing two runs should give even parity."""
        assert not is_inside(thick_row, GridCell(-1, 0))

    def test_one_run_is_odd(self, thick_row):
        """Crossing one run should give odd parity."""
        assert is_inside(thick_row, GridCell(3, 0))

    def test_other_rows_are_ignored(self, thick_row):
        """Only the cell's own row should be scanned."""
        assert not is_inside(thick_row, GridCell(3, 1))


class TestEmptyOutline:
    """An empty outline encloses nothing."""

    @pytest.mark.parametrize("x, z", [(0, 0), (-4, 2), (100, -100)])
    def test_always_outside(self, x, z):
        """No cell should be inside an empty outline."""
        assert not is_inside(ClaimedRegion(), GridCell(x, z))
