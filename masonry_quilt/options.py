"""Per-call layout options."""

import math
from numbers import Real
from collections.abc import Mapping
from typing import Any, Optional, Union

from . import globs
from .errors import OptionsError

# camelCase spellings accepted for callers porting from other bindings
_ALIASES = {
    "baseSize": "base_size",
    "includeGrid": "include_grid",
    "includeSpaces": "include_spaces",
}


def require_number(name: str, value: Any) -> float:
    """Return value if it is a finite real number, else raise OptionsError."""
    if not isinstance(value, Real) or isinstance(value, bool) or not math.isfinite(value):
        raise OptionsError("{} must be a finite number, got {!r}".format(name, value))
    return value


class LayoutOptions:
    """Validated options of one layout call.

    Attributes:
        base_size: Size of one cell in pixels.
        gap: Gap between cells in pixels.
        looseness: Order flexibility between 0 and 1. Accepted and validated
            but it does not change placement.
        include_grid: Whether cards carry cell-grid metadata.
        include_spaces: Whether the result lists free regions.
    """

    __slots__ = ("base_size", "gap", "looseness", "include_grid", "include_spaces")

    def __init__(
        self,
        base_size: float = globs.DEFAULT_BASE_SIZE,
        gap: Union[float, str] = globs.DEFAULT_GAP,
        looseness: float = globs.DEFAULT_LOOSENESS,
        include_grid: bool = False,
        include_spaces: bool = False,
    ) -> None:
        """Validate and store the options.

        Args:
            base_size: Size of one cell in pixels, must be positive.
            gap: Gap in pixels, or one of the tokens in ``globs.GAP_SIZES``.
            looseness: Value between 0 and 1.
            include_grid: Attach cell-grid metadata to every card.
            include_spaces: Report free regions in the result.

        Raises:
            OptionsError: If a value is out of range or of the wrong type.
        """
        self.base_size = require_number("base_size", base_size)
        if self.base_size <= 0:
            raise OptionsError("base_size must be positive, got {!r}".format(base_size))

        if isinstance(gap, str):
            if gap not in globs.GAP_SIZES:
                raise OptionsError(
                    "gap must be a number or one of {}, got {!r}".format(sorted(globs.GAP_SIZES), gap)
                )
            gap = globs.GAP_SIZES[gap]
        self.gap = require_number("gap", gap)
        if self.gap < 0:
            raise OptionsError("gap must not be negative, got {!r}".format(gap))

        self.looseness = require_number("looseness", looseness)
        if not 0 <= self.looseness <= 1:
            raise OptionsError("looseness must be between 0 and 1, got {!r}".format(looseness))

        self.include_grid = bool(include_grid)
        self.include_spaces = bool(include_spaces)

    @classmethod
    def build(cls, options: Optional[Union["LayoutOptions", Mapping]] = None, **overrides: Any) -> "LayoutOptions":
        """Merge an options object or any mapping with keyword overrides.

        Raises:
            OptionsError: On unknown option names or invalid values.
        """
        values = {}
        raw = {}
        if isinstance(options, LayoutOptions):
            values = {name: getattr(options, name) for name in cls.__slots__}
        elif isinstance(options, Mapping):
            raw = dict(options)
        elif options is not None:
            raise OptionsError("options must be a LayoutOptions or a mapping, got {!r}".format(options))

        raw.update(overrides)
        for key, value in raw.items():
            name = _ALIASES.get(key, key)
            if name not in cls.__slots__:
                raise OptionsError("unknown layout option {!r}".format(key))
            values[name] = value

        return cls(**values)

    def max_displacement(self, item_count: int) -> int:
        """Largest reordering the looseness would allow, in items."""
        return int(math.floor(self.looseness * item_count))

    def __repr__(self) -> str:
        return "LayoutOptions({})".format(
            ", ".join("{}={!r}".format(name, getattr(self, name)) for name in self.__slots__)
        )
