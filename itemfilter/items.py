"""Item records and the adapter that turns host objects into them."""

import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Protocol

# Minecraft-style formatting codes: section sign followed by one character
_FORMATTING_CODE_RE = re.compile("§.", re.DOTALL)


@dataclass(frozen=True, eq=True)
class Item:
    """A searchable item.

    Attributes:
        name: Display name, possibly carrying formatting codes.
        stats: Mapping of stat name to the item's values for that stat.
    """

    name: str
    stats: Mapping[str, tuple[Any, ...]] = field(default_factory=dict)

    # stats is a plain mapping, so items compare by value but are unhashable
    __hash__ = None  # type: ignore[assignment]

    def get_stat_values(self, stat_name: str) -> list[Any]:
        """Return the item's values for a stat (empty if it has none)."""
        return list(self.stats.get(stat_name, ()))


def strip_formatting(text: str) -> str:
    """Remove formatting codes from a display name."""
    return _FORMATTING_CODE_RE.sub("", text)


class ItemAdapter(Protocol):
    """Capability for turning host records into searchable items."""

    def try_adapt(self, raw_item: Any) -> Item | None:
        """Return the Item for a host record, or None if it is not an item."""
        ...

    def display_name(self, raw_item: Any) -> str:
        """Return the host record's display name."""
        ...


def _as_values(value: Any) -> tuple[Any, ...]:
    if isinstance(value, (list, tuple, set, frozenset)):
        return tuple(value)
    return (value,)


class DefaultItemAdapter:
    """Adapts Item instances and plain mappings with a "name" key.

    For mappings, every key other than "name" becomes a stat; scalar values
    are treated as single-valued stats.
    """

    def try_adapt(self, raw_item: Any) -> Item | None:
        if isinstance(raw_item, Item):
            return raw_item
        if isinstance(raw_item, Mapping) and isinstance(raw_item.get("name"), str):
            stats = {
                key: _as_values(value)
                for key, value in raw_item.items()
                if key != "name" and value is not None
            }
            return Item(name=raw_item["name"], stats=stats)
        return None

    def display_name(self, raw_item: Any) -> str:
        item = self.try_adapt(raw_item)
        if item is None:
            return ""
        return strip_formatting(item.name)
