"""Item format parsing and size resolution.

Items are opaque to the engine except for an optional format descriptor. The
descriptor is read once into an immutable ``CardFormat`` whose ``kind`` flags
tell which constraints are present, and ``resolve_size`` turns it into a card
size in internal units for a given grid.

Typical usage example:
    fmt = CardFormat.from_item({'format': {'ratio': '16:9'}})
    size = resolve_size(fmt, cols=36, rows=48, base_size=200)
"""

import logging
import math
from enum import Flag
from numbers import Real
from typing import Any, Mapping, Optional, Tuple

from .. import globs
from .type_hints import PixelSize, Size
from .units import px_to_units, round_half_up

log = logging.getLogger(__name__)


class FormatKind(Flag):
    """Constraint combination carried by a format.

    Any combination of the members may be set; NONE means the item is
    unconstrained.
    """

    NONE = 0
    SIZE = 1
    MIN_SIZE = 2
    MAX_SIZE = 4
    RATIO = 8


SIZE_CONSTRAINTS = FormatKind.SIZE | FormatKind.MIN_SIZE | FormatKind.MAX_SIZE


def _field(source: Any, *names: str) -> Any:
    """Read the first present field from a mapping or an object."""
    for name in names:
        if isinstance(source, Mapping):
            if source.get(name) is not None:
                return source[name]
        elif getattr(source, name, None) is not None:
            return getattr(source, name)
    return None


def _is_number(value: Any) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool) and math.isfinite(value)


def parse_pixel_size(value: PixelSize) -> Optional[Tuple[float, float]]:
    """Read a {width, height} pair in pixels.

    Args:
        value: A mapping or object with width and height, or a 2-sequence.

    Returns:
        (width, height) with both sides positive, or None if the value is
        missing or malformed.
    """
    if value is None:
        return None
    if isinstance(value, (tuple, list)):
        if len(value) != 2:
            return None
        width, height = value
    else:
        width = _field(value, "width")
        height = _field(value, "height")
    if not (_is_number(width) and _is_number(height)) or width <= 0 or height <= 0:
        log.debug("Ignoring malformed size %r", value)
        return None
    return float(width), float(height)


def parse_ratio(token: Any) -> Optional[Tuple[float, float]]:
    """Resolve a ratio token to its (width, height) parts.

    Args:
        token: A named shortcut such as "portrait" or a literal "W:H".

    Returns:
        Positive (width, height) parts, or None if the token is malformed.
    """
    if not isinstance(token, str):
        return None
    resolved = globs.RATIO_SHORTCUTS.get(token.strip().lower(), token)
    parts = resolved.split(":")
    if len(parts) != 2:
        log.debug("Ignoring malformed ratio %r", token)
        return None
    try:
        ratio_w, ratio_h = float(parts[0]), float(parts[1])
    except ValueError:
        log.debug("Ignoring malformed ratio %r", token)
        return None
    if not (math.isfinite(ratio_w) and math.isfinite(ratio_h)) or ratio_w <= 0 or ratio_h <= 0:
        log.debug("Ignoring non-positive ratio %r", token)
        return None
    return ratio_w, ratio_h


class CardFormat:
    """Normalized format constraints of one item.

    Attributes:
        size: Exact size in pixels, or None.
        min_size: Minimum size in pixels, or None.
        max_size: Maximum size in pixels, or None.
        ratio: Target (width, height) ratio parts, or None.
        shortcut: True if the ratio came from a named shortcut.
        loose_override: The caller's explicit ``loose`` value, or None.
        kind: Flags of the constraints present.
    """

    __slots__ = ("size", "min_size", "max_size", "ratio", "shortcut", "loose_override", "kind")

    def __init__(
        self,
        size: Optional[Tuple[float, float]] = None,
        min_size: Optional[Tuple[float, float]] = None,
        max_size: Optional[Tuple[float, float]] = None,
        ratio: Optional[Tuple[float, float]] = None,
        shortcut: bool = False,
        loose_override: Optional[bool] = None,
    ) -> None:
        self.size = size
        self.min_size = min_size
        self.max_size = max_size
        self.ratio = ratio
        self.shortcut = shortcut and ratio is not None
        self.loose_override = loose_override

        kind = FormatKind.NONE
        if size is not None:
            kind |= FormatKind.SIZE
        if min_size is not None:
            kind |= FormatKind.MIN_SIZE
        if max_size is not None:
            kind |= FormatKind.MAX_SIZE
        if ratio is not None:
            kind |= FormatKind.RATIO
        self.kind = kind

    @classmethod
    def parse(cls, descriptor: Any) -> "CardFormat":
        """Build a format from a descriptor mapping or object.

        Unknown fields are ignored and malformed values are dropped, so any
        descriptor yields a usable format.
        """
        if descriptor is None:
            return cls()

        ratio_token = _field(descriptor, "ratio")
        ratio = parse_ratio(ratio_token)
        shortcut = (
            ratio is not None
            and ratio_token.strip().lower() in globs.RATIO_SHORTCUTS
        )
        loose = _field(descriptor, "loose")
        if loose is not None and not isinstance(loose, bool):
            log.debug("Ignoring non-boolean loose %r", loose)
            loose = None

        return cls(
            size=parse_pixel_size(_field(descriptor, "size")),
            min_size=parse_pixel_size(_field(descriptor, "minSize", "min_size")),
            max_size=parse_pixel_size(_field(descriptor, "maxSize", "max_size")),
            ratio=ratio,
            shortcut=shortcut,
            loose_override=loose,
        )

    @classmethod
    def from_item(cls, item: Any) -> "CardFormat":
        """Build the format of an item without touching the item itself."""
        return cls.parse(_field(item, "format"))

    @property
    def ratio_loose(self) -> bool:
        """Whether the aspect ratio may be relaxed after area preservation."""
        if self.loose_override is not None:
            return self.loose_override
        return self.shortcut

    @property
    def loose(self) -> bool:
        """Whether an oversized card may be shrunk to fit the grid."""
        if self.loose_override is not None:
            return self.loose_override
        if self.kind & SIZE_CONSTRAINTS:
            return False
        return self.ratio is None or self.shortcut

    @property
    def modifiable(self) -> bool:
        """Whether the scaling and expansion phases may resize the card."""
        return self.kind == FormatKind.NONE and self.loose_override is not False

    def __repr__(self) -> str:
        return "CardFormat(kind={}, loose={})".format(self.kind, self.loose)


def _apply_ratio(fmt: CardFormat, width: int, height: int, cols: int, rows: int) -> Size:
    ratio_w, ratio_h = fmt.ratio
    target = ratio_w / ratio_h

    if abs(width / height - target) > globs.RATIO_TOLERANCE:
        area = width * height
        width = round_half_up(math.sqrt(area * target))
        height = round_half_up(width / target)

        width = max(min(globs.MIN_RATIO_SIDE, cols), width)
        height = max(min(globs.MIN_RATIO_SIDE, rows), height)

    if not fmt.ratio_loose:
        if ratio_w > ratio_h:
            width = max(1, round_half_up(height * ratio_w / ratio_h))
        else:
            height = max(1, round_half_up(width * ratio_h / ratio_w))

    return width, height


def constrained_size(fmt: CardFormat, cols: int, rows: int, base_size: float) -> Size:
    """Apply size, ratio and min/max constraints, ignoring the grid bounds.

    Args:
        fmt: Format of the item.
        cols: Grid width in internal units.
        rows: Grid height in internal units.
        base_size: Size of one cell in pixels.

    Returns:
        (width, height) in internal units, possibly larger than the grid.
    """
    width, height = globs.DEFAULT_CARD_WIDTH, globs.DEFAULT_CARD_HEIGHT

    if fmt.kind & FormatKind.SIZE:
        width = px_to_units(fmt.size[0], base_size)
        height = px_to_units(fmt.size[1], base_size)

    if fmt.kind & FormatKind.RATIO:
        width, height = _apply_ratio(fmt, width, height, cols, rows)

    if fmt.kind & FormatKind.MIN_SIZE:
        width = max(width, px_to_units(fmt.min_size[0], base_size))
        height = max(height, px_to_units(fmt.min_size[1], base_size))

    if fmt.kind & FormatKind.MAX_SIZE:
        width = min(width, px_to_units(fmt.max_size[0], base_size))
        height = min(height, px_to_units(fmt.max_size[1], base_size))

    return width, height


def resolve_size(fmt: CardFormat, cols: int, rows: int, base_size: float) -> Optional[Size]:
    """Resolve the card size of an item for a grid.

    Oversized loose cards are scaled down uniformly to fit; oversized strict
    cards cannot be placed.

    Args:
        fmt: Format of the item.
        cols: Grid width in internal units.
        rows: Grid height in internal units.
        base_size: Size of one cell in pixels.

    Returns:
        (width, height) in internal units, or None if a strict card does not
        fit the grid.
    """
    width, height = constrained_size(fmt, cols, rows, base_size)

    if width <= cols and height <= rows:
        return width, height

    if not fmt.loose:
        log.debug("Strict %r resolved to %dx%d, exceeds %dx%d grid", fmt, width, height, cols, rows)
        return None

    scale = min(cols / width, rows / height)
    width = max(1, int(math.floor(width * scale)))
    height = max(1, int(math.floor(height * scale)))
    return width, height


def fit_to_columns(size: Size, cols: int) -> Size:
    """Shrink a size uniformly until its width fits the grid columns.

    Used for strict cards that could not be resolved; the height is left to
    grid growth.
    """
    width, height = size
    if width <= cols:
        return width, height
    scale = cols / width
    return cols, max(1, int(math.floor(height * scale)))
