"""Masonry layout calculation.

This module ties the placement phases together. A call sizes the internal
grid for the container, resolves every item's card size, places the cards in
masonry columns, fills the remaining items into gaps (growing the grid when
needed), enlarges and widens modifiable cards, and finally projects the
result to pixels.

Every call is self-contained: the occupancy table and the column heights live
only for the duration of the call and caller items are never modified.

Typical usage example:
    items = [{'id': 'a'}, {'id': 'b', 'format': {'ratio': '16:9'}}]
    result = calculate_layout(items, 1920, 1080, include_grid=True)
    for card in result.cards:
        print(card.item['id'], card.x, card.y, card.width, card.height)
"""

import logging
import math
from typing import Any, Dict, Optional, Sequence, Union

from . import globs
from .options import LayoutOptions, require_number
from .results import LayoutResult
from .utils.coordinates import to_pixels
from .utils.formats import CardFormat, resolve_size
from .utils.grid import size_grid
from .utils.metrics import find_free_spaces, order_fidelity, reading_order, utilization
from .utils.packers import Entry, LayoutContext, expand_cards, pack, scale_cards

log = logging.getLogger(__name__)


def calculate_layout(
    items: Sequence[Any],
    container_width: float,
    container_height: float,
    options: Optional[Union[LayoutOptions, Dict[str, Any]]] = None,
    **overrides: Any
) -> LayoutResult:
    """Compute the masonry layout of items inside a container.

    Args:
        items: Items to place. Only an optional ``format`` key or attribute
            is read from each item.
        container_width: Available width in pixels.
        container_height: Available height in pixels.
        options: A ``LayoutOptions`` instance or a dict of option values.
        **overrides: Option values taking precedence over ``options``.

    Returns:
        The placed cards in reading order with size and quality metrics. A
        container too narrow for a single cell, or with a non-positive side,
        yields an empty result.

    Raises:
        OptionsError: If the options are invalid or a container side is not
            a finite number.
    """
    opts = LayoutOptions.build(options, **overrides)
    container_width = require_number("container_width", container_width)
    container_height = require_number("container_height", container_height)
    items = list(items)

    # Accepted for compatibility; placement does not depend on it.
    log.debug(
        "Layout of %d items, looseness %.2f allows displacement %d",
        len(items),
        opts.looseness,
        opts.max_displacement(len(items)),
    )

    if not items:
        return LayoutResult.empty()

    grid_size = size_grid(container_width, container_height, len(items), opts.base_size, opts.gap)
    if grid_size is None:
        log.debug("Container %sx%s holds no cells", container_width, container_height)
        return LayoutResult.empty(len(items))

    log.debug("Grid %r", grid_size)

    context = LayoutContext(grid_size, opts.base_size)
    entries = []
    for index, item in enumerate(items):
        fmt = CardFormat.from_item(item)
        size = resolve_size(fmt, grid_size.cols, grid_size.rows, opts.base_size)
        entries.append(Entry(item, index, fmt, size))

    pack(context, entries)

    before = utilization(context.used_area(), context.cols, context.rows)
    scale_cards(context, before)
    expand_cards(context)
    final = utilization(context.used_area(), context.cols, context.rows)
    log.debug("Utilization %.3f before refinement, %.3f after", before, final)

    cards = [
        to_pixels(card, opts.base_size, opts.gap, opts.include_grid)
        for card in reading_order(context.cards)
    ]

    return LayoutResult(
        cards,
        width=max(card.x + card.width for card in cards),
        height=max(card.y + card.height for card in cards),
        utilization=final,
        order_fidelity=order_fidelity(context.cards, len(items)),
        columns=grid_size.cols_in_cells,
        rows=int(math.ceil(context.rows / globs.UNITS_PER_CELL)),
        spaces=find_free_spaces(context.grid) if opts.include_spaces else None,
    )
