from typing import List

from .context import Entry, LayoutContext
from .gap_filler import GapFiller
from .masonry_packer import MasonryPacker
from .refine import expand_cards, fit_rows, scale_cards


def pack(context: LayoutContext, entries: List[Entry]) -> LayoutContext:
    """Run the placement phases: masonry columns, then gap filling."""
    deferred = MasonryPacker(context).pack(entries)
    if deferred:
        GapFiller(context).fill(deferred)
    fit_rows(context)
    return context
