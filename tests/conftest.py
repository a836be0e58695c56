import numpy as np
import pytest

from masonry_quilt.utils.cards import Card
from masonry_quilt.utils.formats import CardFormat
from masonry_quilt.utils.grid import GridSize
from masonry_quilt.utils.packers import Entry, LayoutContext


def card_units(card, base_size=200, gap=16):
    """Recover (col, row, width, height) in internal units from a pixel card."""
    pitch = (base_size + gap) / 4
    return (
        int(round(card.x / pitch)),
        int(round(card.y / pitch)),
        int(round(card.width * 4 / base_size)),
        int(round(card.height * 4 / base_size)),
    )


@pytest.fixture
def coverage():
    """Paint the internal-unit rectangles of pixel cards and return hit counts."""

    def paint(cards, base_size=200, gap=16):
        boxes = [card_units(card, base_size, gap) for card in cards]
        cols = max((c + w for c, _, w, _ in boxes), default=0)
        rows = max((r + h for _, r, _, h in boxes), default=0)
        hits = np.zeros((rows, cols), dtype=int)
        for col, row, width, height in boxes:
            hits[row : row + height, col : col + width] += 1
        return hits

    return paint


@pytest.fixture
def small_context():
    """Context on an 8 x 16 unit grid with a 4 unit tall viewport."""
    return LayoutContext(GridSize(2, 4, 1), 200)


@pytest.fixture
def make_entry():
    def make(index, size, fmt=None):
        return Entry({"id": index}, index, fmt or CardFormat(), size)

    return make


@pytest.fixture
def make_card():
    def make(index, col, row, width, height, fmt=None):
        return Card({"id": index}, index, fmt or CardFormat(), col, row, width, height)

    return make


@pytest.fixture
def units():
    return card_units
