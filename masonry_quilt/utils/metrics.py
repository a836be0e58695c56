"""Layout quality metrics and free space reporting."""

from typing import Dict, List, Sequence

import numpy as np

from .cards import Card
from .occupancy import OccupancyGrid


def utilization(used_area: int, cols: int, rows: int) -> float:
    """Fraction of the grid area covered by cards, between 0 and 1."""
    total = cols * rows
    if total <= 0:
        return 0.0
    return min(1.0, max(0.0, used_area / total))


def reading_order(cards: Sequence[Card]) -> List[Card]:
    """Cards sorted top to bottom, then left to right."""
    return sorted(cards, key=lambda card: (card.row, card.col))


def order_fidelity(cards: Sequence[Card], item_count: int) -> float:
    """Worst-case preservation of input order in reading order.

    Every card's position in reading order is compared with its input index;
    the largest displacement, normalized by the number of items, decides the
    score. A single badly displaced item therefore dominates.

    Args:
        cards: Placed cards.
        item_count: Number of input items.

    Returns:
        1.0 for perfect order down to 0.0.
    """
    if item_count <= 0:
        return 1.0
    if not cards:
        return 0.0
    displacement = max(
        abs(position - card.index) for position, card in enumerate(reading_order(cards))
    )
    return min(1.0, max(0.0, 1.0 - displacement / item_count))


def find_free_spaces(grid: OccupancyGrid) -> List[Dict[str, int]]:
    """Find the empty regions left in the grid.

    Scanning row-major, every unchecked free cell starts a region as wide as
    the free run to its right, extended downwards while that whole run stays
    free. Regions never overlap each other.

    Args:
        grid: The final occupancy table.

    Returns:
        Regions as dicts with 'col', 'row', 'width' and 'height' in internal
        units.
    """
    cells = grid.cells
    rows, cols = cells.shape
    checked = np.zeros_like(cells)
    spaces = []

    for row in range(rows):
        for col in range(cols):
            if cells[row, col] or checked[row, col]:
                continue

            blocked = np.flatnonzero(cells[row, col:] | checked[row, col:])
            width = int(blocked[0]) if blocked.size else cols - col

            height = 1
            while row + height < rows:
                below = slice(col, col + width)
                if cells[row + height, below].any() or checked[row + height, below].any():
                    break
                height += 1

            checked[row : row + height, col : col + width] = True
            spaces.append({"col": col, "row": row, "width": width, "height": height})

    return spaces
