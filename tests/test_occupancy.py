import pytest

from masonry_quilt.utils.occupancy import OccupancyGrid


@pytest.fixture
def grid():
    grid = OccupancyGrid(8, 4)
    grid.occupy(0, 0, 4, 2)
    return grid


class TestOccupancyGrid:
    def test_is_free(self, grid):
        assert not grid.is_free(0, 0, 1, 1)
        assert not grid.is_free(3, 1, 2, 2)
        assert grid.is_free(4, 0, 4, 4)
        assert grid.is_free(0, 2, 8, 2)

    def test_is_free_outside_bounds(self, grid):
        assert not grid.is_free(6, 0, 4, 1)
        assert not grid.is_free(0, 3, 1, 2)
        assert not grid.is_free(-1, 0, 1, 1)

    def test_release(self, grid):
        grid.release(0, 0, 2, 2)

        assert grid.is_free(0, 0, 2, 2)
        assert grid.used_area() == 4

    def test_first_fit_is_row_major(self, grid):
        assert grid.find_first_fit(4, 2) == (4, 0)
        assert grid.find_first_fit(8, 2) == (0, 2)
        assert grid.find_first_fit(1, 1) == (4, 0)

    def test_first_fit_without_room(self, grid):
        assert grid.find_first_fit(8, 3) is None
        assert grid.find_first_fit(9, 1) is None
        assert grid.find_first_fit(1, 5) is None

    def test_grow_appends_empty_rows(self, grid):
        start = grid.grow(10)

        assert start == 4
        assert grid.rows == 14
        assert grid.cells.shape == (14, 8)
        assert grid.cells[0, 0]
        assert not grid.cells[4:].any()

        grid.occupy(0, 13, 1, 1)
        assert grid.used_area() == 9

    def test_grow_makes_room_for_first_fit(self, grid):
        grid.occupy(0, 0, 8, 4)
        assert grid.find_first_fit(4, 4) is None

        grid.grow(4)
        assert grid.find_first_fit(4, 4) == (0, 4)

    def test_resize_drops_empty_rows(self, grid):
        grid.resize(2)

        assert grid.rows == 2
        assert grid.find_first_fit(4, 2) == (4, 0)

    def test_resize_refuses_occupied_rows(self, grid):
        with pytest.raises(ValueError):
            grid.resize(1)

    def test_cells_view_is_read_only(self, grid):
        with pytest.raises(ValueError):
            grid.cells[3, 3] = True
