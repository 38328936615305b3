"""Query language for searching items.

A query is a space-separated list of tokens. Tokens of the form
``name:value`` filter on an item stat; all other tokens are joined with
spaces and matched (case-insensitively) against the item name.

Query Language Examples:
    cool sword                 - Name contains "cool sword"
    level:10-20                - Level between 10 and 20
    lvl:>=50                   - Level of at least 50 (alias for level)
    profession:"armouring"     - Exactly the armouring profession
    prof:wood                  - A profession containing "wood"
    cool sword level:5         - Both of the above must hold

Unknown stats and invalid values never make parsing fail. They are reported
in ItemSearchQuery.errors and their characters are listed in
ItemSearchQuery.ignored_char_indices for highlighting.
"""

from ._exceptions import ItemFilterConfigError, ItemFilterError
from .config import ItemFilterConfig, load_item_filter_config
from .evaluator import filter_items, matches
from .filters import (
    FilterFactoryRegistry,
    create_default_filter_factories,
    create_ranged_filter,
    create_string_filter,
)
from .highlighting import QUERY_CHAR_STYLES, build_query_text, classify_chars
from .items import DefaultItemAdapter, Item, ItemAdapter, strip_formatting
from .parser import create_search_query
from .service import (
    ItemFilterService,
    get_item_filter_service,
    reset_item_filter_service,
)
from .stat_providers import (
    ItemStatProvider,
    LevelStatProvider,
    ProfessionStatProvider,
    StatProviderRegistry,
    create_default_stat_providers,
)
from .types import (
    DiagnosticKind,
    ItemSearchQuery,
    RangedStatFilter,
    StatFilter,
    StatProviderAndFilterPair,
    StringStatFilter,
    ValueType,
)

__all__ = [
    # Parser
    "create_search_query",
    # Evaluator
    "matches",
    "filter_items",
    # Service
    "ItemFilterService",
    "get_item_filter_service",
    "reset_item_filter_service",
    # Registries
    "StatProviderRegistry",
    "FilterFactoryRegistry",
    "create_default_stat_providers",
    "create_default_filter_factories",
    "create_ranged_filter",
    "create_string_filter",
    # Stat providers
    "ItemStatProvider",
    "LevelStatProvider",
    "ProfessionStatProvider",
    # Types
    "DiagnosticKind",
    "ItemSearchQuery",
    "RangedStatFilter",
    "StatFilter",
    "StatProviderAndFilterPair",
    "StringStatFilter",
    "ValueType",
    # Items
    "DefaultItemAdapter",
    "Item",
    "ItemAdapter",
    "strip_formatting",
    # Highlighting
    "QUERY_CHAR_STYLES",
    "build_query_text",
    "classify_chars",
    # Config
    "ItemFilterConfig",
    "load_item_filter_config",
    # Exceptions
    "ItemFilterError",
    "ItemFilterConfigError",
]
