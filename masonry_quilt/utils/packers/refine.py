"""Post-placement refinement of modifiable cards.

Two passes close empty space left by the placement phases: proportional
scaling enlarges every modifiable card when the grid is sparsely used, and
horizontal expansion stretches cards over free space up to the right edge.
Cards keep their origin in both passes and never overlap another card.
"""

import logging
import math

from ... import globs
from ..units import round_half_up
from .context import LayoutContext

log = logging.getLogger(__name__)


def fit_rows(context: LayoutContext) -> int:
    """Fit the grid height to the placed cards.

    The grid keeps at least the container height and a padding of empty rows
    below the lowest card.

    Returns:
        The new number of rows.
    """
    rows = max(context.grid_size.viewport_rows, context.bottom() + globs.GROWTH_PADDING)
    context.grid.resize(rows)
    return rows


def scale_factor(utilization: float) -> float:
    """Scale factor that brings utilization towards the target.

    Returns:
        1.0 when the grid is already well used, otherwise a factor capped at
        ``MAX_SCALE_FACTOR``.
    """
    if utilization <= 0 or utilization >= globs.SCALE_THRESHOLD:
        return 1.0
    return min(math.sqrt(globs.TARGET_UTILIZATION / utilization), globs.MAX_SCALE_FACTOR)


def scale_cards(context: LayoutContext, utilization: float) -> int:
    """Enlarge modifiable cards proportionally.

    Args:
        context: Layout state of the current call.
        utilization: Utilization measured before this pass.

    Returns:
        Number of cards that were resized.
    """
    scale = scale_factor(utilization)
    if scale == 1.0:
        return 0

    grid = context.grid
    resized = 0
    for card in context.cards:
        if not card.modifiable:
            continue

        width = max(globs.MIN_SCALED_SIDE, round_half_up(card.width * scale))
        height = max(globs.MIN_SCALED_SIDE, round_half_up(card.height * scale))
        if (width, height) == (card.width, card.height):
            continue

        grid.release(card.col, card.row, card.width, card.height)
        if grid.is_free(card.col, card.row, width, height):
            card.width, card.height = width, height
            resized += 1
        grid.occupy(card.col, card.row, card.width, card.height)

    log.debug("Scaled %d cards by %.3f", resized, scale)
    return resized


def expand_cards(context: LayoutContext) -> int:
    """Stretch modifiable cards over free space up to the right grid edge.

    Returns:
        Number of cards that were widened.
    """
    grid = context.grid
    expanded = 0
    for card in context.cards:
        if not card.modifiable or card.right >= grid.cols:
            continue

        extra = grid.cols - card.right
        if grid.is_free(card.right, card.row, extra, card.height):
            grid.occupy(card.right, card.row, extra, card.height)
            card.width += extra
            expanded += 1

    log.debug("Expanded %d cards to the right edge", expanded)
    return expanded
