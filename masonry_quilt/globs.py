"""Global constants and configuration for the masonry layout engine.

This module holds every tuning constant used by the placement phases so that
the packers, the size resolver and the calculator read from a single place.
All sizes are expressed in internal units unless the name says otherwise; one
cell (``base_size`` pixels) spans ``UNITS_PER_CELL`` internal units.
"""

UNITS_PER_CELL = 4

DEFAULT_BASE_SIZE = 200
DEFAULT_GAP = 16
DEFAULT_LOOSENESS = 0.2

# Named gap sizes in pixels
GAP_SIZES = {
    "s": 8,
    "m": 16,
    "l": 24,
}

# Ratio shortcuts resolve to literal "W:H" ratios and are loose by default
RATIO_SHORTCUTS = {
    "portrait": "1:2",
    "landscape": "2:1",
    "banner": "4:1",
    "tower": "1:4",
}

# Default card is 2x2 cells
DEFAULT_CARD_WIDTH = 8
DEFAULT_CARD_HEIGHT = 8

# Average area per item used to over-provision grid rows
ESTIMATED_ITEM_AREA = 9
VIEWPORT_ROW_MULTIPLIER = 3
ESTIMATED_ROW_MULTIPLIER = 1.5

RATIO_TOLERANCE = 0.1
MIN_RATIO_SIDE = 2

# Gap filling fallbacks for loose cards, tried in order
FALLBACK_SIZES = ((4, 4), (4, 2))
GROWTH_PADDING = 8

# Proportional scaling
SCALE_THRESHOLD = 0.75
TARGET_UTILIZATION = 0.8
MAX_SCALE_FACTOR = 2.0
MIN_SCALED_SIDE = 2
