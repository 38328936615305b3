"""Filter factories and the registry that dispatches them by value type.

Ranged (integer) filter syntax:
    10          - exactly 10
    10-20       - 10 to 20, inclusive
    10-  >=10   - at least 10
    -20  <=20   - at most 20
    >10         - more than 10
    <10         - less than 10

String filter syntax:
    sword       - contains "sword" (case-insensitive)
    "sword"     - equals "sword" (case-insensitive)
"""

import logging
import re
from collections.abc import Callable

from .types import RangedStatFilter, StatFilter, StringStatFilter, ValueType

logger = logging.getLogger(__name__)

# A filter factory parses a raw value into a filter, or returns None to decline
FilterFactory = Callable[[str], StatFilter | None]

_SINGLE_RE = re.compile(r"(\d+)")
_RANGE_RE = re.compile(r"(\d+)-(\d+)")
_OPEN_HIGH_RE = re.compile(r"(\d+)-")
_OPEN_LOW_RE = re.compile(r"-(\d+)")
_COMPARISON_RE = re.compile(r"(>=|<=|>|<)(\d+)")


def create_ranged_filter(value: str) -> RangedStatFilter | None:
    """Parse an integer range such as "10-20" or ">=5".

    Args:
        value: The raw filter value.

    Returns:
        The range filter, or None if the value is not a valid range.
    """
    if match := _SINGLE_RE.fullmatch(value):
        number = int(match.group(1))
        return RangedStatFilter(low=number, high=number)

    if match := _RANGE_RE.fullmatch(value):
        low, high = int(match.group(1)), int(match.group(2))
        if low > high:
            return None
        return RangedStatFilter(low=low, high=high)

    if match := _OPEN_HIGH_RE.fullmatch(value):
        return RangedStatFilter(low=int(match.group(1)))

    if match := _OPEN_LOW_RE.fullmatch(value):
        return RangedStatFilter(high=int(match.group(1)))

    if match := _COMPARISON_RE.fullmatch(value):
        operator, number = match.group(1), int(match.group(2))
        if operator == ">=":
            return RangedStatFilter(low=number)
        if operator == ">":
            return RangedStatFilter(low=number + 1)
        if operator == "<=":
            return RangedStatFilter(high=number)
        return RangedStatFilter(high=number - 1)

    return None


def create_string_filter(value: str) -> StringStatFilter | None:
    """Parse a string filter; a double-quoted value requires an exact match.

    Args:
        value: The raw filter value.

    Returns:
        The string filter, or None if the value is empty.
    """
    if not value:
        return None
    if len(value) >= 2 and value.startswith('"') and value.endswith('"'):
        return StringStatFilter(value=value[1:-1], exact=True)
    return StringStatFilter(value=value)


class FilterFactoryRegistry:
    """Ordered (value type, factory) bindings.

    The first factory bound to a value type is the one used for it. Register
    more specific factories before permissive ones; String acts as the
    catch-all type and is registered last.
    """

    def __init__(self) -> None:
        self._factories: list[tuple[ValueType, FilterFactory]] = []

    def register(self, value_type: ValueType, factory: FilterFactory) -> None:
        """Append a factory for a value type."""
        self._factories.append((value_type, factory))
        logger.debug(f"Registered filter factory for type {value_type.display_name}")

    def create(self, value_type: ValueType, raw_value: str) -> StatFilter | None:
        """Create a filter for a value type from a raw value.

        Args:
            value_type: The value type of the stat being filtered.
            raw_value: The raw filter value.

        Returns:
            The filter built by the first factory bound to the value type, or
            None if that factory declines or no factory is bound.
        """
        for bound_type, factory in self._factories:
            if bound_type == value_type:
                return factory(raw_value)
        return None


def create_default_filter_factories() -> FilterFactoryRegistry:
    """Create a registry with the built-in filter factories."""
    registry = FilterFactoryRegistry()
    # Order matters: the first factory bound to a type is used
    registry.register(ValueType.INTEGER, create_ranged_filter)
    # String is the fallback type, so it is registered last
    registry.register(ValueType.STRING, create_string_filter)
    return registry
