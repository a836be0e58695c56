"""Gap filling for items the masonry phase could not place.

Deferred items are placed smallest first into the first free rectangle of the
occupancy table. Loose items without a ratio may switch to the fallback sizes,
and when nothing fits the grid grows downwards, so every item ends up placed.
"""

import logging
from typing import List

from ... import globs
from ..formats import constrained_size, fit_to_columns
from ..type_hints import Size
from .context import Entry, LayoutContext

log = logging.getLogger(__name__)


class GapFiller:
    """First-fit placement with fallback sizes and grid growth.

    Attributes:
        context: Layout state of the current call.
        grown_rows: Total number of rows appended to the grid.
    """

    def __init__(self, context: LayoutContext) -> None:
        self.context = context
        self.grown_rows = 0

    def candidates(self, entry: Entry) -> List[Size]:
        """Sizes to try for an entry, in order.

        Args:
            entry: The deferred entry.

        Returns:
            The resolved size followed by the fallback sizes for loose
            entries without a ratio.
        """
        if entry.size is None:
            return []
        sizes = [entry.size]
        if entry.fmt.loose and entry.fmt.ratio is None:
            sizes.extend(size for size in globs.FALLBACK_SIZES if size != entry.size)
        return sizes

    def growth_size(self, entry: Entry) -> Size:
        """Size used when the grid has to grow for an entry."""
        if entry.size is not None:
            return entry.size
        size = constrained_size(
            entry.fmt, self.context.cols, self.context.rows, self.context.base_size
        )
        return fit_to_columns(size, self.context.cols)

    def fill(self, deferred: List[Entry]) -> None:
        """Place every deferred entry.

        Args:
            deferred: Entries left over by the masonry phase.
        """
        grid = self.context.grid
        for entry in sorted(deferred, key=lambda e: e.area):
            placed = False
            for size in self.candidates(entry):
                position = grid.find_first_fit(*size)
                if position is not None:
                    self.context.place(entry, position[0], position[1], size)
                    placed = True
                    break

            if placed:
                continue

            size = self.growth_size(entry)
            extra_rows = size[1] + globs.GROWTH_PADDING
            row = grid.grow(extra_rows)
            self.grown_rows += extra_rows
            self.context.place(entry, 0, row, size)
            log.debug("Grew grid by %d rows for item %d", extra_rows, entry.index)
