"""Parser for item search queries.

A query is split on spaces. Tokens of the form ``name:value`` are stat
filters; every other non-empty token is plain text matched against the item
name. Parsing never fails: unknown stats and invalid values are reported as
diagnostics and their characters are marked as ignored.
"""

import logging

from .filters import FilterFactoryRegistry
from .stat_providers import StatProviderRegistry
from .types import (
    DiagnosticKind,
    ItemSearchQuery,
    StatProviderAndFilterPair,
    format_diagnostic,
)

logger = logging.getLogger(__name__)


def create_search_query(
    query_string: str,
    stat_providers: StatProviderRegistry,
    filter_factories: FilterFactoryRegistry,
) -> ItemSearchQuery:
    """Parse a query string into an ItemSearchQuery.

    Character ranges are inclusive at both ends, so each marked range runs
    one character past the end of the name or token it covers (onto the
    following space). Highlighters rely on this.

    Args:
        query_string: The query string to parse.
        stat_providers: Registry used to resolve filter names.
        filter_factories: Registry used to parse filter values.

    Returns:
        The parsed query.

    Examples:
        >>> query = create_search_query("sword level:10-20", providers, factories)
        >>> query.plain_text_tokens
        ('sword',)
    """
    filters: list[StatProviderAndFilterPair] = []
    ignored_char_indices: set[int] = set()
    valid_filter_char_indices: set[int] = set()
    errors: list[str] = []
    plain_text_tokens: list[str] = []

    # Offset of the first char of the current token. Every step adds one for
    # the separating space, so start one before the beginning.
    token_start = -1
    last_token = ""
    for token in query_string.split(" "):
        # Empty tokens (from consecutive spaces) still advance the offset
        token_start += len(last_token) + 1
        last_token = token

        if ":" in token:
            filter_name, _, input_string = token.partition(":")

            stat_provider = stat_providers.lookup(filter_name)
            if stat_provider is None:
                ignored_char_indices.update(
                    range(token_start, token_start + len(token) + 1)
                )
                error = format_diagnostic(
                    DiagnosticKind.UNKNOWN_ATTRIBUTE, name=filter_name
                )
                logger.debug(f"{error} (at position {token_start})")
                errors.append(error)
                continue

            valid_filter_char_indices.update(
                range(token_start, token_start + len(filter_name) + 1)
            )

            # The name stays highlighted while the value is still being typed
            if not input_string:
                continue

            stat_filter = filter_factories.create(
                stat_provider.value_type, input_string
            )
            if stat_filter is None:
                ignored_char_indices.update(
                    range(
                        token_start + len(filter_name) + 1,
                        token_start + len(token) + 1,
                    )
                )
                error = format_diagnostic(
                    DiagnosticKind.INVALID_FILTER_VALUE,
                    value=input_string,
                    type_name=stat_provider.value_type.display_name,
                )
                logger.debug(f"{error} (at position {token_start})")
                errors.append(error)
                continue

            filters.append(StatProviderAndFilterPair(stat_provider, stat_filter))
        elif token:
            plain_text_tokens.append(token)

    return ItemSearchQuery(
        raw_text=query_string,
        filters=tuple(filters),
        ignored_char_indices=frozenset(ignored_char_indices),
        valid_filter_char_indices=frozenset(valid_filter_char_indices),
        errors=tuple(errors),
        plain_text_tokens=tuple(plain_text_tokens),
    )
