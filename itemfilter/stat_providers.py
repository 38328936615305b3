"""Stat providers and the registry used to look them up by name or alias."""

import logging
from abc import ABC, abstractmethod
from collections.abc import Iterable
from typing import Any, ClassVar

from ._exceptions import ItemFilterConfigError
from .items import Item
from .types import ValueType

logger = logging.getLogger(__name__)


class ItemStatProvider(ABC):
    """Abstract base class for stat providers.

    A stat provider exposes one queryable stat of an item. Subclasses set
    the class attributes and implement get_value().

    Attributes:
        name: Canonical stat name (lower_snake_case).
        value_type: The type of the stat's values.
        description: One-line description of the stat.
    """

    name: ClassVar[str]
    value_type: ClassVar[ValueType]
    description: ClassVar[str] = ""
    default_aliases: ClassVar[tuple[str, ...]] = ()

    def __init__(self, extra_aliases: Iterable[str] = ()) -> None:
        """Initialize the provider.

        Args:
            extra_aliases: Additional aliases, appended after the built-in ones.
        """
        aliases: list[str] = []
        for alias in (*self.default_aliases, *extra_aliases):
            if alias != self.name and alias not in aliases:
                aliases.append(alias)
        self._aliases = tuple(aliases)

    @property
    def aliases(self) -> tuple[str, ...]:
        return self._aliases

    @abstractmethod
    def get_value(self, item: Item) -> list[Any]:
        """Return the item's values for this stat.

        Single-valued stats return a singleton list; stats the item does not
        have return an empty list.
        """

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r}, aliases={self._aliases!r})"


class LevelStatProvider(ItemStatProvider):
    """The level requirement of an item."""

    name = "level"
    value_type = ValueType.INTEGER
    description = "The level of the item"
    default_aliases = ("lvl", "combat_level")

    def get_value(self, item: Item) -> list[Any]:
        return [
            value
            for value in item.get_stat_values(self.name)
            if isinstance(value, int) and not isinstance(value, bool)
        ]


class ProfessionStatProvider(ItemStatProvider):
    """The professions an item is used by (crafted items, ingredients, tools)."""

    name = "profession"
    value_type = ValueType.STRING
    description = "The professions the item is used by"
    default_aliases = ("prof",)

    def get_value(self, item: Item) -> list[Any]:
        return [
            value for value in item.get_stat_values(self.name) if isinstance(value, str)
        ]


# Built-in providers, kept alphabetical by canonical name
BUILTIN_STAT_PROVIDERS: tuple[type[ItemStatProvider], ...] = (
    LevelStatProvider,
    ProfessionStatProvider,
)


class StatProviderRegistry:
    """Ordered collection of stat providers.

    Populated once at startup and read-only afterwards.
    """

    def __init__(self) -> None:
        self._providers: list[ItemStatProvider] = []

    def register(self, provider: ItemStatProvider) -> None:
        """Append a provider to the registry."""
        self._providers.append(provider)
        logger.debug(f"Registered stat provider: {provider.name}")

    @property
    def providers(self) -> tuple[ItemStatProvider, ...]:
        return tuple(self._providers)

    def lookup(self, identifier: str) -> ItemStatProvider | None:
        """Find a provider by canonical name, falling back to aliases.

        Args:
            identifier: A canonical stat name or alias.

        Returns:
            The first provider whose name equals the identifier, else the
            first provider with a matching alias, else None.
        """
        for provider in self._providers:
            if provider.name == identifier:
                return provider
        for provider in self._providers:
            if identifier in provider.aliases:
                return provider
        return None


def _check_identifier_collisions(providers: list[ItemStatProvider]) -> None:
    """Ensure no name or alias is claimed by more than one provider.

    Raises:
        ItemFilterConfigError: If two providers share an identifier.
    """
    claimed_by: dict[str, str] = {}
    for provider in providers:
        for identifier in (provider.name, *provider.aliases):
            owner = claimed_by.setdefault(identifier, provider.name)
            if owner != provider.name:
                raise ItemFilterConfigError(
                    f"Stat identifier '{identifier}' is claimed by both "
                    f"'{owner}' and '{provider.name}'"
                )


def create_default_stat_providers(
    extra_aliases: dict[str, list[str]] | None = None,
) -> StatProviderRegistry:
    """Create a registry holding the built-in stat providers.

    Args:
        extra_aliases: Mapping of canonical stat name to additional aliases.
            Entries for unknown stats are logged and ignored.

    Returns:
        The populated registry.

    Raises:
        ItemFilterConfigError: If an extra alias is already another stat's
            name or alias.
    """
    extra_aliases = extra_aliases or {}
    known_names = {provider_class.name for provider_class in BUILTIN_STAT_PROVIDERS}
    for name in extra_aliases:
        if name not in known_names:
            logger.warning(f"Ignoring aliases for unknown stat: {name}")

    providers = [
        provider_class(extra_aliases.get(provider_class.name, ()))
        for provider_class in BUILTIN_STAT_PROVIDERS
    ]
    _check_identifier_collisions(providers)

    registry = StatProviderRegistry()
    for provider in providers:
        registry.register(provider)
    return registry
