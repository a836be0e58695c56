"""Layout results handed back to the caller."""

from typing import Any, Dict, List, Optional


class PlacedCard:
    """An item positioned in pixels.

    Attributes:
        item: The caller's item, unchanged.
        index: Position of the item in the input sequence.
        x: Left position in pixels.
        y: Top position in pixels.
        width: Width in pixels.
        height: Height in pixels.
        grid: 1-based 'col', 'row', 'col_span' and 'row_span' for cell-grid
            renderers, or None unless requested.
    """

    __slots__ = ("item", "index", "x", "y", "width", "height", "grid")

    def __init__(
        self,
        item: Any,
        index: int,
        x: float,
        y: float,
        width: float,
        height: float,
        grid: Optional[Dict[str, int]] = None,
    ) -> None:
        self.item = item
        self.index = index
        self.x = x
        self.y = y
        self.width = width
        self.height = height
        self.grid = grid

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PlacedCard):
            return NotImplemented
        return (
            self.index == other.index
            and self.item == other.item
            and (self.x, self.y, self.width, self.height) == (other.x, other.y, other.width, other.height)
            and self.grid == other.grid
        )

    def __str__(self) -> str:
        return "[PlacedCard(index:{}, x:{}, y:{}, w:{}, h:{})]".format(
            self.index, self.x, self.y, self.width, self.height
        )

    def __repr__(self) -> str:
        return self.__str__()


class LayoutResult:
    """Outcome of one layout call.

    Attributes:
        cards: Placed cards in reading order.
        width: Right-most card edge in pixels.
        height: Bottom-most card edge in pixels.
        utilization: Fraction of the grid covered by cards, 0 to 1.
        order_fidelity: Worst-case order preservation, 0 to 1.
        columns: Grid width in cells.
        rows: Final grid height in cells.
        spaces: Free regions in internal units, empty unless requested.
    """

    def __init__(
        self,
        cards: List[PlacedCard],
        width: float = 0,
        height: float = 0,
        utilization: float = 0.0,
        order_fidelity: float = 1.0,
        columns: int = 0,
        rows: int = 0,
        spaces: Optional[List[Dict[str, int]]] = None,
    ) -> None:
        self.cards = cards
        self.width = width
        self.height = height
        self.utilization = utilization
        self.order_fidelity = order_fidelity
        self.columns = columns
        self.rows = rows
        self.spaces = spaces if spaces is not None else []

    @classmethod
    def empty(cls, item_count: int = 0) -> "LayoutResult":
        """Result for a call that placed nothing."""
        return cls([], order_fidelity=1.0 if item_count == 0 else 0.0)

    def __repr__(self) -> str:
        return "LayoutResult(cards={}, size={}x{}, utilization={:.3f}, order_fidelity={:.3f})".format(
            len(self.cards), self.width, self.height, self.utilization, self.order_fidelity
        )
