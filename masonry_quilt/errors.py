"""Exceptions raised by the masonry layout engine."""


class LayoutError(Exception):
    """Base class for errors raised while computing a layout."""

    pass


class OptionsError(LayoutError, ValueError):
    """Indicates that the layout options are invalid."""

    pass
