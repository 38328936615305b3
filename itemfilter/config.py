"""Item filter configuration loading."""

import logging
import os
from dataclasses import dataclass, field
from typing import Any

import yaml  # type: ignore[import-untyped]
from jsonschema import ValidationError, validate  # type: ignore[import-untyped]

from ._exceptions import ItemFilterConfigError

logger = logging.getLogger(__name__)

_CONFIG_PATH_ENV_VAR = "ITEMFILTER_CONFIG"

_CONFIG_SCHEMA: dict[str, Any] = {
    "type": "object",
    "properties": {
        "item_filter": {
            "type": "object",
            "properties": {
                "aliases": {
                    "type": "object",
                    "additionalProperties": {
                        "type": "array",
                        "items": {"type": "string", "minLength": 1},
                    },
                },
            },
            "additionalProperties": False,
        },
    },
}


@dataclass
class ItemFilterConfig:
    """Configuration for item filtering.

    Attributes:
        extra_aliases: Mapping of canonical stat name to additional aliases.
    """

    extra_aliases: dict[str, list[str]] = field(default_factory=dict)


def _get_config_path() -> str:
    """Get the path to the item filter config file."""
    return os.environ.get(_CONFIG_PATH_ENV_VAR) or os.path.expanduser(
        "~/.config/itemfilter/itemfilter.yml"
    )


def load_item_filter_config(config_path: str | None = None) -> ItemFilterConfig:
    """Load the item filter config, returning defaults if it is missing.

    Args:
        config_path: Path to the config file. Defaults to $ITEMFILTER_CONFIG or
            ~/.config/itemfilter/itemfilter.yml.

    Returns:
        The loaded config.

    Raises:
        ItemFilterConfigError: If the file is not valid YAML or does not
            match the config schema.
    """
    if config_path is None:
        config_path = _get_config_path()

    if not os.path.exists(config_path):
        logger.debug(f"No item filter config at {config_path}, using defaults")
        return ItemFilterConfig()

    try:
        with open(config_path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ItemFilterConfigError(f"Invalid YAML in {config_path}: {e}") from e

    if data is None:
        return ItemFilterConfig()

    try:
        validate(instance=data, schema=_CONFIG_SCHEMA)
    except ValidationError as e:
        raise ItemFilterConfigError(
            f"Invalid item filter config {config_path}: {e.message}"
        ) from e

    section = data.get("item_filter") or {}
    aliases = section.get("aliases") or {}
    logger.debug(f"Loaded item filter config from {config_path}")
    return ItemFilterConfig(
        extra_aliases={name: list(values) for name, values in aliases.items()}
    )
