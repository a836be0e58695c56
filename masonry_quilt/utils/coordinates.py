"""Projection of internal units to pixels and cell-grid metadata."""

import math
from typing import Dict

from .. import globs
from ..results import PlacedCard
from .cards import Card


def grid_area(card: Card) -> Dict[str, int]:
    """1-based cell-grid placement of a card.

    Returns:
        Dict with 'col', 'row', 'col_span' and 'row_span', as used by CSS
        grid style renderers.
    """
    units = globs.UNITS_PER_CELL
    return {
        "col": card.col // units + 1,
        "row": card.row // units + 1,
        "col_span": int(math.ceil(card.width / units)),
        "row_span": int(math.ceil(card.height / units)),
    }


def to_pixels(card: Card, base_size: float, gap: float, include_grid: bool = False) -> PlacedCard:
    """Convert a card from internal units to pixels.

    Positions advance by a full cell pitch (cell plus gap) per cell, sizes by
    the cell size alone.

    Args:
        card: Card in internal units.
        base_size: Size of one cell in pixels.
        gap: Gap between cells in pixels.
        include_grid: Whether to attach cell-grid metadata.

    Returns:
        The card positioned in pixels.
    """
    units = globs.UNITS_PER_CELL
    pitch = (base_size + gap) / units
    return PlacedCard(
        card.item,
        card.index,
        x=card.col * pitch,
        y=card.row * pitch,
        width=card.width * base_size / units,
        height=card.height * base_size / units,
        grid=grid_area(card) if include_grid else None,
    )
