"""Item filter service: registries plus parsing and matching entry points."""

import logging
import threading
from collections.abc import Iterable
from typing import Any

from .config import ItemFilterConfig, load_item_filter_config
from .evaluator import filter_items, matches
from .filters import FilterFactoryRegistry, create_default_filter_factories
from .items import DefaultItemAdapter, ItemAdapter
from .parser import create_search_query
from .stat_providers import (
    ItemStatProvider,
    StatProviderRegistry,
    create_default_stat_providers,
)
from .types import ItemSearchQuery

logger = logging.getLogger(__name__)


class ItemFilterService:
    """Parses search queries and matches items against them.

    Both registries are built once in the constructor and never modified
    afterwards, so a service can be shared between threads.
    """

    def __init__(
        self,
        stat_providers: StatProviderRegistry | None = None,
        filter_factories: FilterFactoryRegistry | None = None,
        config: ItemFilterConfig | None = None,
        adapter: ItemAdapter | None = None,
    ) -> None:
        """Initialize the service.

        Args:
            stat_providers: Provider registry. Defaults to the built-in
                providers with the aliases from config.
            filter_factories: Filter factory registry. Defaults to the
                built-in factories.
            config: Config used for the default provider registry.
            adapter: Item adapter used when matching.
        """
        if stat_providers is None:
            config = config or ItemFilterConfig()
            stat_providers = create_default_stat_providers(config.extra_aliases)
        self._stat_providers = stat_providers
        self._filter_factories = filter_factories or create_default_filter_factories()
        self._adapter = adapter or DefaultItemAdapter()

    def get_item_stat_providers(self) -> tuple[ItemStatProvider, ...]:
        """Return the registered stat providers, in registration order."""
        return self._stat_providers.providers

    def create_search_query(self, query_string: str) -> ItemSearchQuery:
        """Parse a query string using this service's registries."""
        return create_search_query(
            query_string, self._stat_providers, self._filter_factories
        )

    def matches(self, query: ItemSearchQuery, raw_item: Any) -> bool:
        """Check if an item matches a parsed query."""
        return matches(query, raw_item, self._adapter)

    def filter_items(self, query: ItemSearchQuery, raw_items: Iterable[Any]) -> list[Any]:
        """Return the items that match a parsed query."""
        return filter_items(query, raw_items, self._adapter)


_service: ItemFilterService | None = None
_service_lock = threading.Lock()


def get_item_filter_service() -> ItemFilterService:
    """Get the process-wide service, creating it from the config on first use.

    Raises:
        ItemFilterConfigError: If the config file is malformed.
    """
    global _service
    with _service_lock:
        if _service is None:
            _service = ItemFilterService(config=load_item_filter_config())
            logger.info(
                f"Item filter service ready with "
                f"{len(_service.get_item_stat_providers())} stat providers"
            )
        return _service


def reset_item_filter_service() -> None:
    """Drop the process-wide service so the next call rebuilds it."""
    global _service
    with _service_lock:
        _service = None
