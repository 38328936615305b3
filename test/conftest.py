"""Pytest configuration for itemfilter tests."""

import sys
from pathlib import Path
from typing import Any

import pytest

# Add parent directory to path so we can import itemfilter without installing
sys.path.insert(0, str(Path(__file__).parent.parent))

from itemfilter import Item, ItemFilterService  # noqa: E402


@pytest.fixture
def make_item() -> "type[_ItemFactory]":  # Return a callable factory class
    """Fixture that provides a factory for creating Item objects for testing."""
    return _ItemFactory


class _ItemFactory:
    """Factory class for creating Item objects in tests."""

    @staticmethod
    def create(
        name: str = "Cool Sword",
        level: int | None = 5,
        professions: list[str] | None = None,
        **extra_stats: Any,
    ) -> Item:
        """Create an Item for testing."""
        stats: dict[str, tuple[Any, ...]] = {}
        if level is not None:
            stats["level"] = (level,)
        if professions is not None:
            stats["profession"] = tuple(professions)
        for key, value in extra_stats.items():
            stats[key] = tuple(value) if isinstance(value, list) else (value,)
        return Item(name=name, stats=stats)


@pytest.fixture
def service() -> ItemFilterService:
    """Fixture that provides a service with the built-in registries."""
    return ItemFilterService()
