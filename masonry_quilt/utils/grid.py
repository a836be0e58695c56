"""Container to internal grid sizing.

The container is divided into cells of ``base_size + gap`` pixels and every
cell is quantized into ``UNITS_PER_CELL`` internal units per axis. Rows are
over-provisioned up front so that the masonry phase rarely runs out of room.
"""

import logging
import math
from typing import Optional

from .. import globs

log = logging.getLogger(__name__)


class GridSize:
    """Dimensions of the internal grid for one layout call.

    Attributes:
        cols_in_cells: Number of whole cells across the container.
        rows_in_cells: Number of provisioned cell rows.
        viewport_rows_in_cells: Number of whole cells down the container.
        cols: Grid width in internal units.
        rows: Grid height in internal units.
        viewport_rows: Container height in internal units.
    """

    def __init__(
        self, cols_in_cells: int, rows_in_cells: int, viewport_rows_in_cells: int
    ) -> None:
        self.cols_in_cells = cols_in_cells
        self.rows_in_cells = rows_in_cells
        self.viewport_rows_in_cells = viewport_rows_in_cells
        self.cols = cols_in_cells * globs.UNITS_PER_CELL
        self.rows = rows_in_cells * globs.UNITS_PER_CELL
        self.viewport_rows = viewport_rows_in_cells * globs.UNITS_PER_CELL

    def __repr__(self) -> str:
        return "GridSize(cols={}, rows={}, viewport_rows={})".format(
            self.cols, self.rows, self.viewport_rows
        )


def size_grid(
    container_width: float,
    container_height: float,
    item_count: int,
    base_size: float = globs.DEFAULT_BASE_SIZE,
    gap: float = globs.DEFAULT_GAP,
) -> Optional[GridSize]:
    """Compute the internal grid for a container.

    Args:
        container_width: Available width in pixels.
        container_height: Available height in pixels.
        item_count: Number of items that will be placed.
        base_size: Size of one cell in pixels.
        gap: Gap between cells in pixels.

    Returns:
        The grid dimensions, or None if a container side is not positive or
        the container cannot hold a single cell plus gap on either axis.
    """
    if container_width <= 0 or container_height <= 0:
        log.debug("Container %sx%s has no area", container_width, container_height)
        return None

    pitch = base_size + gap
    cols_in_cells = int(math.floor(container_width / pitch))
    viewport_rows_in_cells = int(math.floor(container_height / pitch))

    if cols_in_cells < 1:
        log.debug("Container width %s too small for one cell", container_width)
        return None

    estimated_rows = math.ceil(item_count * globs.ESTIMATED_ITEM_AREA / cols_in_cells)
    rows_in_cells = max(
        viewport_rows_in_cells * globs.VIEWPORT_ROW_MULTIPLIER,
        int(math.ceil(estimated_rows * globs.ESTIMATED_ROW_MULTIPLIER)),
    )

    if rows_in_cells < 1:
        log.debug("Container height %s too small for one cell", container_height)
        return None

    return GridSize(cols_in_cells, rows_in_cells, viewport_rows_in_cells)
