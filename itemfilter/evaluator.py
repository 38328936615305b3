"""Evaluator for item search queries."""

from collections.abc import Iterable
from typing import Any

from .items import DefaultItemAdapter, Item, ItemAdapter
from .types import ItemSearchQuery

_DEFAULT_ADAPTER = DefaultItemAdapter()


def _filter_matches(query: ItemSearchQuery, item: Item) -> bool:
    """Check if the item passes every filter (vacuously true without filters)."""
    return all(pair.matches(item) for pair in query.filters)


def _item_name_matches(query: ItemSearchQuery, item_name: str) -> bool:
    """Check if the name contains the space-joined plain text tokens.

    Always true when the query has no plain text tokens.
    """
    if not query.plain_text_tokens:
        return True
    return " ".join(query.plain_text_tokens).casefold() in item_name.casefold()


def matches(
    query: ItemSearchQuery,
    raw_item: Any,
    adapter: ItemAdapter = _DEFAULT_ADAPTER,
) -> bool:
    """Check if an item matches a search query.

    The item must pass all filters and its name must contain the plain text
    tokens. An empty query matches everything; a record that is not an item
    matches only the empty query.

    Args:
        query: The parsed search query.
        raw_item: The host record to check.
        adapter: Turns the host record into an Item and provides its name.

    Returns:
        True if the item matches the query, False otherwise.
    """
    if query.is_empty():
        return True

    item = adapter.try_adapt(raw_item)
    if item is None:
        return False

    return _filter_matches(query, item) and _item_name_matches(
        query, adapter.display_name(raw_item)
    )


def filter_items(
    query: ItemSearchQuery,
    raw_items: Iterable[Any],
    adapter: ItemAdapter = _DEFAULT_ADAPTER,
) -> list[Any]:
    """Return the records that match the query, in their original order."""
    return [raw_item for raw_item in raw_items if matches(query, raw_item, adapter)]
