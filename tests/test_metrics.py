import pytest

from masonry_quilt.utils.coordinates import grid_area, to_pixels
from masonry_quilt.utils.metrics import find_free_spaces, order_fidelity, reading_order, utilization
from masonry_quilt.utils.occupancy import OccupancyGrid


class TestUtilization:
    def test_fraction(self):
        assert utilization(50, 10, 10) == 0.5

    def test_empty_grid(self):
        assert utilization(0, 0, 0) == 0.0


class TestOrderFidelity:
    def test_reading_order(self, make_card):
        cards = [make_card(0, 8, 0, 4, 4), make_card(1, 0, 4, 4, 4), make_card(2, 0, 0, 4, 4)]

        assert [card.index for card in reading_order(cards)] == [2, 0, 1]

    def test_perfect_order(self, make_card):
        cards = [make_card(0, 0, 0, 4, 4), make_card(1, 4, 0, 4, 4), make_card(2, 0, 4, 4, 4)]

        assert order_fidelity(cards, 3) == 1.0

    def test_worst_displacement_dominates(self, make_card):
        cards = [
            make_card(0, 4, 0, 4, 4),
            make_card(1, 8, 0, 4, 4),
            make_card(2, 12, 0, 4, 4),
            make_card(3, 0, 0, 4, 4),
        ]

        assert order_fidelity(cards, 4) == pytest.approx(0.25)

    def test_no_items(self):
        assert order_fidelity([], 0) == 1.0


class TestFreeSpaces:
    def test_empty_grid(self):
        assert find_free_spaces(OccupancyGrid(8, 4)) == [{"col": 0, "row": 0, "width": 8, "height": 4}]

    def test_full_grid(self):
        grid = OccupancyGrid(8, 4)
        grid.occupy(0, 0, 8, 4)

        assert find_free_spaces(grid) == []

    def test_regions(self):
        grid = OccupancyGrid(8, 4)
        grid.occupy(0, 0, 8, 2)
        grid.occupy(0, 2, 2, 2)

        assert find_free_spaces(grid) == [{"col": 2, "row": 2, "width": 6, "height": 2}]

    def test_stacked_regions(self):
        grid = OccupancyGrid(8, 4)
        grid.occupy(0, 0, 4, 2)

        assert find_free_spaces(grid) == [
            {"col": 4, "row": 0, "width": 4, "height": 4},
            {"col": 0, "row": 2, "width": 4, "height": 2},
        ]


class TestCoordinates:
    def test_to_pixels(self, make_card):
        placed = to_pixels(make_card(0, 4, 8, 8, 4), 200, 16)

        assert (placed.x, placed.y, placed.width, placed.height) == (216, 432, 400, 200)
        assert placed.grid is None
        assert placed.item == {"id": 0}

    def test_grid_metadata(self, make_card):
        placed = to_pixels(make_card(0, 4, 8, 8, 4), 200, 16, include_grid=True)

        assert placed.grid == {"col": 2, "row": 3, "col_span": 2, "row_span": 1}

    def test_partial_cells_round_up(self, make_card):
        assert grid_area(make_card(0, 3, 0, 5, 1)) == {"col": 1, "row": 1, "col_span": 2, "row_span": 1}
