"""Call-scoped state shared by the placement phases."""

from typing import Any, List, Optional

from ..cards import Card
from ..formats import CardFormat
from ..grid import GridSize
from ..occupancy import OccupancyGrid
from ..type_hints import Size


class Entry:
    """An input item waiting to be placed.

    Attributes:
        item: The caller's item.
        index: Position of the item in the input sequence.
        fmt: Parsed format of the item.
        size: Resolved size in internal units, or None if the item cannot be
            placed at its constrained size.
    """

    __slots__ = ("item", "index", "fmt", "size")

    def __init__(self, item: Any, index: int, fmt: CardFormat, size: Optional[Size]) -> None:
        self.item = item
        self.index = index
        self.fmt = fmt
        self.size = size

    @property
    def area(self) -> float:
        if self.size is None:
            return float("inf")
        return self.size[0] * self.size[1]


class LayoutContext:
    """Mutable state owned by one layout call.

    Attributes:
        grid_size: Grid dimensions computed for the container.
        base_size: Size of one cell in pixels.
        grid: Occupancy table, grown by gap filling.
        cards: Cards in placement order.
    """

    def __init__(self, grid_size: GridSize, base_size: float) -> None:
        self.grid_size = grid_size
        self.base_size = base_size
        self.grid = OccupancyGrid(grid_size.cols, grid_size.rows)
        self.cards: List[Card] = []

    @property
    def cols(self) -> int:
        return self.grid.cols

    @property
    def rows(self) -> int:
        return self.grid.rows

    def place(self, entry: Entry, col: int, row: int, size: Size) -> Card:
        """Place an entry on the grid and record its card."""
        width, height = size
        self.grid.occupy(col, row, width, height)
        card = Card(entry.item, entry.index, entry.fmt, col, row, width, height)
        self.cards.append(card)
        return card

    def bottom(self) -> int:
        """Lowest card edge in internal units."""
        return max((card.bottom for card in self.cards), default=0)

    def used_area(self) -> int:
        return sum(card.area for card in self.cards)
