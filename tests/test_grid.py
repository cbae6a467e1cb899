"""Tests for the Grid module."""

import pytest

from snake_sim.grid import Grid


class TestGridInit:
    def test_default_dimensions(self):
        grid = Grid()
        assert grid.width == 10
        assert grid.height == 10

    def test_custom_dimensions(self):
        grid = Grid(width=12, height=8)
        assert grid.width == 12
        assert grid.height == 8

    def test_minimum_size_enforced(self):
        with pytest.raises(ValueError, match="at least 1×2"):
            Grid(width=1, height=1)
        with pytest.raises(ValueError, match="at least 1×2"):
            Grid(width=4, height=0)

    def test_narrow_grid_allowed(self):
        grid = Grid(width=1, height=2)
        assert grid.in_bounds((0, 1))

    @pytest.mark.parametrize("width", [10.0, 10.5, "10", True])
    def test_non_int_width_rejected(self, width):
        with pytest.raises(ValueError, match="width must be an int"):
            Grid(width=width, height=10)

    def test_non_int_height_rejected(self):
        with pytest.raises(ValueError, match="height must be an int"):
            Grid(width=10, height=7.5)


class TestGridBounds:
    def test_in_bounds(self):
        grid = Grid(width=5, height=6)
        assert grid.in_bounds((0, 0))
        assert grid.in_bounds((4, 5))
        assert not grid.in_bounds((-1, 0))
        assert not grid.in_bounds((0, -1))
        assert not grid.in_bounds((5, 0))
        assert not grid.in_bounds((0, 6))


class TestGridOccupancy:
    def test_mask_is_row_major(self):
        grid = Grid(width=5, height=4)
        mask = grid.occupancy([(4, 1)])
        assert mask.shape == (4, 5)
        assert mask[1, 4]
        assert mask.sum() == 1

    def test_mask_rejects_out_of_bounds(self):
        grid = Grid(width=4, height=4)
        with pytest.raises(ValueError, match="outside the grid"):
            grid.occupancy([(-1, 0)])
        with pytest.raises(ValueError, match="outside the grid"):
            grid.free_cells([(9, 9)])

    def test_free_cells(self):
        grid = Grid(width=4, height=4)
        assert len(grid.free_cells([])) == 16
        free = grid.free_cells([(0, 0), (3, 2)])
        assert len(free) == 14
        assert (0, 0) not in free
        assert (3, 2) not in free
        assert (2, 3) in free

    def test_free_cells_full_board(self):
        grid = Grid(width=4, height=4)
        every = [(x, y) for x in range(4) for y in range(4)]
        assert grid.free_cells(every) == []
