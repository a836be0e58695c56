"""Masonry column placement.

Items are placed in input order on the column span whose tallest column is
the lowest, which keeps the columns growing evenly while preserving the
reading order of the input as far as possible.

Typical usage example:
    packer = MasonryPacker(context)
    deferred = packer.pack(entries)
"""

import logging
from typing import List, Tuple

import numpy as np
from numpy.lib.stride_tricks import sliding_window_view

from .context import Entry, LayoutContext

log = logging.getLogger(__name__)


class MasonryPacker:
    """Places cards on the lowest available contiguous column span.

    Attributes:
        context: Layout state of the current call.
        column_heights: Current height of every grid column in internal units.
    """

    def __init__(self, context: LayoutContext) -> None:
        self.context = context
        self.column_heights = np.zeros(context.cols, dtype=np.int64)

    def find_span(self, width: int) -> Tuple[int, int]:
        """Find the lowest contiguous column span for a card.

        Args:
            width: Card width in internal units.

        Returns:
            (col, row) where col is the leftmost column of the lowest span and
            row is the height of its tallest column.
        """
        span_heights = sliding_window_view(self.column_heights, width).max(axis=1)
        col = int(np.argmin(span_heights))
        return col, int(span_heights[col])

    def pack(self, entries: List[Entry]) -> List[Entry]:
        """Place entries in input order.

        Args:
            entries: Entries in input order.

        Returns:
            Entries that could not be placed, either because their size could
            not be resolved or because the span has no room left.
        """
        deferred = []
        for entry in entries:
            if entry.size is None:
                deferred.append(entry)
                continue

            width, height = entry.size
            col, row = self.find_span(width)
            if row + height > self.context.rows:
                deferred.append(entry)
                continue

            self.context.place(entry, col, row, entry.size)
            self.column_heights[col : col + width] = row + height

        log.debug(
            "Masonry placed %d of %d items", len(entries) - len(deferred), len(entries)
        )
        return deferred
