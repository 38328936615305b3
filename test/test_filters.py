"""Tests for filter factories and the filter factory registry."""

import pytest
from itemfilter import (
    FilterFactoryRegistry,
    RangedStatFilter,
    StringStatFilter,
    ValueType,
    create_default_filter_factories,
    create_ranged_filter,
    create_string_filter,
)


@pytest.mark.parametrize(
    "value,expected",
    [
        ("10", RangedStatFilter(low=10, high=10)),
        ("10-20", RangedStatFilter(low=10, high=20)),
        ("7-7", RangedStatFilter(low=7, high=7)),
        ("10-", RangedStatFilter(low=10)),
        ("-20", RangedStatFilter(high=20)),
        (">=5", RangedStatFilter(low=5)),
        (">5", RangedStatFilter(low=6)),
        ("<=5", RangedStatFilter(high=5)),
        ("<5", RangedStatFilter(high=4)),
    ],
)
def test_create_ranged_filter_accepts(value: str, expected: RangedStatFilter) -> None:
    """Test the accepted range forms."""
    assert create_ranged_filter(value) == expected


@pytest.mark.parametrize(
    "value",
    ["", "invalidnumber", "20-10", "1-2-3", " 5", "5 ", "=5", "5.0", "a-b", "-"],
)
def test_create_ranged_filter_declines(value: str) -> None:
    """Test that malformed ranges are declined."""
    assert create_ranged_filter(value) is None


def test_ranged_filter_matches_any_value() -> None:
    """Test that a range matches if any of the values is inside it."""
    range_filter = RangedStatFilter(low=10, high=20)
    assert range_filter.matches([10]) is True
    assert range_filter.matches([20]) is True
    assert range_filter.matches([5, 15]) is True
    assert range_filter.matches([9, 21]) is False
    assert range_filter.matches([]) is False


def test_ranged_filter_open_bounds() -> None:
    """Test unbounded ranges."""
    assert RangedStatFilter(low=10).matches([1000]) is True
    assert RangedStatFilter(low=10).matches([9]) is False
    assert RangedStatFilter(high=10).matches([-3]) is True
    assert RangedStatFilter(high=10).matches([11]) is False


def test_ranged_filter_ignores_non_integers() -> None:
    """Test that non-integer values never match a range."""
    range_filter = RangedStatFilter(low=0, high=100)
    assert range_filter.matches(["50"]) is False
    assert range_filter.matches([True]) is False


def test_create_string_filter() -> None:
    """Test string filter parsing."""
    assert create_string_filter("wood") == StringStatFilter(value="wood")
    assert create_string_filter('"wood"') == StringStatFilter(value="wood", exact=True)
    # A lone quote is not a quoted value
    assert create_string_filter('"') == StringStatFilter(value='"')
    assert create_string_filter("") is None


def test_string_filter_contains_is_case_insensitive() -> None:
    """Test substring matching for string filters."""
    string_filter = StringStatFilter(value="WOOD")
    assert string_filter.matches(["Woodworking"]) is True
    assert string_filter.matches(["Mining", "woodcutting"]) is True
    assert string_filter.matches(["Mining"]) is False


def test_string_filter_exact() -> None:
    """Test exact matching for quoted string filters."""
    string_filter = StringStatFilter(value="mining", exact=True)
    assert string_filter.matches(["Mining"]) is True
    assert string_filter.matches(["Mining Tools"]) is False


def test_registry_uses_first_factory_for_type() -> None:
    """Test that the first factory bound to a type is used."""
    registry = FilterFactoryRegistry()
    registry.register(ValueType.INTEGER, lambda value: RangedStatFilter(low=1))
    registry.register(ValueType.INTEGER, lambda value: RangedStatFilter(low=2))
    assert registry.create(ValueType.INTEGER, "x") == RangedStatFilter(low=1)


def test_registry_does_not_fall_back_when_factory_declines() -> None:
    """Test that a declining factory fails resolution for its type."""
    registry = FilterFactoryRegistry()
    registry.register(ValueType.INTEGER, create_ranged_filter)
    registry.register(ValueType.INTEGER, lambda value: RangedStatFilter(low=0))
    assert registry.create(ValueType.INTEGER, "invalidnumber") is None


def test_registry_unbound_type() -> None:
    """Test that a type without a factory produces no filter."""
    registry = FilterFactoryRegistry()
    registry.register(ValueType.INTEGER, create_ranged_filter)
    assert registry.create(ValueType.STRING, "anything") is None


def test_default_registry() -> None:
    """Test the built-in factory bindings."""
    registry = create_default_filter_factories()
    assert registry.create(ValueType.INTEGER, "1-5") == RangedStatFilter(low=1, high=5)
    assert registry.create(ValueType.INTEGER, "abc") is None
    assert registry.create(ValueType.STRING, "abc") == StringStatFilter(value="abc")
