"""Exception classes for item filtering."""


class ItemFilterError(Exception):
    """Base exception for item filter errors."""

    pass


class ItemFilterConfigError(ItemFilterError):
    """Raised when the item filter config file is malformed."""

    pass
