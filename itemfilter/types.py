"""Types for the item filter query language."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .stat_providers import ItemStatProvider


class ValueType(Enum):
    """Type tags for stat values.

    The tag selects which filter factory is used to parse a filter value.
    """

    INTEGER = "Integer"
    STRING = "String"

    @property
    def display_name(self) -> str:
        """Human-readable type name used in diagnostics."""
        return self.value


class DiagnosticKind(Enum):
    """The two kinds of recoverable query errors."""

    UNKNOWN_ATTRIBUTE = "unknown_stat"
    INVALID_FILTER_VALUE = "invalid_filter"


# Message templates for each diagnostic kind
DIAGNOSTIC_MESSAGES: dict[DiagnosticKind, str] = {
    DiagnosticKind.UNKNOWN_ATTRIBUTE: "Unknown stat: {name}",
    DiagnosticKind.INVALID_FILTER_VALUE: 'Invalid filter value "{value}" for type {type_name}',
}


def format_diagnostic(kind: DiagnosticKind, **values: Any) -> str:
    """Render the message template for a diagnostic kind."""
    return DIAGNOSTIC_MESSAGES[kind].format(**values)


@dataclass(frozen=True)
class RangedStatFilter:
    """Integer range filter.

    Attributes:
        low: Inclusive lower bound, or None for no lower bound.
        high: Inclusive upper bound, or None for no upper bound.
    """

    low: int | None = None
    high: int | None = None

    @property
    def value_type(self) -> ValueType:
        return ValueType.INTEGER

    def matches(self, values: list[Any]) -> bool:
        """Check if any of the values lies within the range."""
        for value in values:
            # bool is an int subclass but never a stat level
            if not isinstance(value, int) or isinstance(value, bool):
                continue
            if self.low is not None and value < self.low:
                continue
            if self.high is not None and value > self.high:
                continue
            return True
        return False


@dataclass(frozen=True)
class StringStatFilter:
    """Case-insensitive string filter.

    Attributes:
        value: The string to look for.
        exact: If True, a value must equal the string; otherwise it only
            has to contain it.
    """

    value: str
    exact: bool = False

    @property
    def value_type(self) -> ValueType:
        return ValueType.STRING

    def matches(self, values: list[Any]) -> bool:
        """Check if any of the values matches the string."""
        needle = self.value.casefold()
        for value in values:
            if not isinstance(value, str):
                continue
            haystack = value.casefold()
            if self.exact and haystack == needle:
                return True
            if not self.exact and needle in haystack:
                return True
        return False


# Union of all filter types
StatFilter = RangedStatFilter | StringStatFilter


@dataclass(frozen=True)
class StatProviderAndFilterPair:
    """A resolved filter token: a stat provider and a filter of the same type.

    Attributes:
        stat_provider: The provider that supplies the values to filter.
        stat_filter: The filter built from the provider's value type.
    """

    stat_provider: ItemStatProvider
    stat_filter: StatFilter

    def __post_init__(self) -> None:
        if self.stat_provider.value_type != self.stat_filter.value_type:
            raise TypeError(
                f"Filter type {self.stat_filter.value_type.display_name} does not "
                f"match stat '{self.stat_provider.name}' of type "
                f"{self.stat_provider.value_type.display_name}"
            )

    def matches(self, item: Any) -> bool:
        """Check if the item's values for this stat pass the filter."""
        return self.stat_filter.matches(self.stat_provider.get_value(item))


@dataclass(frozen=True)
class ItemSearchQuery:
    """A parsed search query.

    Attributes:
        raw_text: The query string as typed.
        filters: Resolved filters, in left-to-right token order.
        ignored_char_indices: Offsets into raw_text that belong to tokens (or
            token values) that could not be resolved.
        valid_filter_char_indices: Offsets into raw_text covering the name
            part of every filter token whose name resolved.
        errors: Human-readable diagnostics, in left-to-right order.
        plain_text_tokens: Tokens that are not filters, matched against the
            item name.
    """

    raw_text: str
    filters: tuple[StatProviderAndFilterPair, ...] = ()
    ignored_char_indices: frozenset[int] = field(default_factory=frozenset)
    valid_filter_char_indices: frozenset[int] = field(default_factory=frozenset)
    errors: tuple[str, ...] = ()
    plain_text_tokens: tuple[str, ...] = ()

    def is_empty(self) -> bool:
        """Return True if the query has neither filters nor plain text."""
        return not self.filters and not self.plain_text_tokens
