"""Placed card records in internal units."""

from typing import Any

from .formats import CardFormat


class Card:
    """A card placed on the internal grid.

    Attributes:
        item: The caller's item, never modified.
        index: Position of the item in the input sequence.
        fmt: Parsed format of the item.
        col: Left column in internal units.
        row: Top row in internal units.
        width: Width in internal units.
        height: Height in internal units.
    """

    __slots__ = ("item", "index", "fmt", "col", "row", "width", "height")

    def __init__(
        self, item: Any, index: int, fmt: CardFormat, col: int, row: int, width: int, height: int
    ) -> None:
        self.item = item
        self.index = index
        self.fmt = fmt
        self.col = col
        self.row = row
        self.width = width
        self.height = height

    @property
    def right(self) -> int:
        return self.col + self.width

    @property
    def bottom(self) -> int:
        return self.row + self.height

    @property
    def area(self) -> int:
        return self.width * self.height

    @property
    def modifiable(self) -> bool:
        return self.fmt.modifiable

    def __str__(self) -> str:
        return "[Card(index:{}, col:{}, row:{}, w:{}, h:{})]".format(
            self.index, self.col, self.row, self.width, self.height
        )

    def __repr__(self) -> str:
        return self.__str__()
