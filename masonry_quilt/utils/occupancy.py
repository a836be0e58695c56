"""Occupancy table of the internal grid.

The table is a dense numpy boolean matrix viewed in the shape (rows, cols),
where a cell is True iff some placed card covers it. Rows are only ever
appended; storage grows by doubling so that repeated growth during gap
filling stays cheap.
"""

from typing import Optional

import numpy as np

from .type_hints import Corner


class OccupancyGrid:
    """Boolean occupancy table that can grow downwards.

    Attributes:
        cols: Grid width in internal units.
        rows: Logical grid height in internal units.
    """

    def __init__(self, cols: int, rows: int) -> None:
        """Initialize an empty grid.

        Args:
            cols: Grid width in internal units.
            rows: Grid height in internal units.
        """
        self.cols = cols
        self.rows = rows
        self._cells = np.zeros((max(rows, 1), cols), dtype=bool)

    @property
    def cells(self) -> np.ndarray:
        """Read-only view of the logical rows of the table."""
        view = self._cells[: self.rows]
        view.flags.writeable = False
        return view

    def grow(self, extra_rows: int) -> int:
        """Append empty rows to the bottom of the grid.

        Args:
            extra_rows: Number of rows to append.

        Returns:
            The first row index of the appended region.
        """
        start = self.rows
        self.resize(self.rows + extra_rows)
        return start

    def resize(self, rows: int) -> None:
        """Set the logical number of rows.

        Growing appends empty rows. Shrinking drops rows from the bottom and
        is only allowed while those rows are empty.

        Args:
            rows: New number of rows.

        Raises:
            ValueError: If an occupied row would be dropped.
        """
        if rows < self.rows:
            if self._cells[rows : self.rows].any():
                raise ValueError("cannot drop occupied rows")
        elif rows > self._cells.shape[0]:
            capacity = max(rows, self._cells.shape[0] * 2)
            cells = np.zeros((capacity, self.cols), dtype=bool)
            cells[: self.rows] = self._cells[: self.rows]
            self._cells = cells
        self.rows = rows

    def contains(self, col: int, row: int, width: int, height: int) -> bool:
        """Check whether a rectangle lies inside the grid bounds."""
        return (
            col >= 0
            and row >= 0
            and width > 0
            and height > 0
            and col + width <= self.cols
            and row + height <= self.rows
        )

    def is_free(self, col: int, row: int, width: int, height: int) -> bool:
        """Check whether a rectangle is inside the grid and fully unoccupied."""
        if not self.contains(col, row, width, height):
            return False
        return not self._cells[row : row + height, col : col + width].any()

    def occupy(self, col: int, row: int, width: int, height: int) -> None:
        """Mark a rectangle as occupied."""
        self._cells[row : row + height, col : col + width] = True

    def release(self, col: int, row: int, width: int, height: int) -> None:
        """Mark a rectangle as free."""
        self._cells[row : row + height, col : col + width] = False

    def used_area(self) -> int:
        """Number of occupied cells."""
        return int(np.count_nonzero(self._cells[: self.rows]))

    def find_first_fit(self, width: int, height: int) -> Optional[Corner]:
        """Find the first free position for a rectangle.

        Positions are scanned row-major from the top-left corner. Window sums
        over a summed-area table give the occupied count of every candidate
        position at once.

        Args:
            width: Rectangle width.
            height: Rectangle height.

        Returns:
            (col, row) of the first free position, or None if the rectangle
            fits nowhere.
        """
        if width > self.cols or height > self.rows or width < 1 or height < 1:
            return None

        table = np.zeros((self.rows + 1, self.cols + 1), dtype=np.int64)
        table[1:, 1:] = self._cells[: self.rows].cumsum(axis=0).cumsum(axis=1)

        windows = (
            table[height:, width:]
            - table[:-height, width:]
            - table[height:, :-width]
            + table[:-height, :-width]
        )
        free = windows == 0
        if not free.any():
            return None

        row, col = np.unravel_index(int(np.argmax(free)), free.shape)
        return int(col), int(row)
