"""
Loading menu configuration documents.

Two formats are accepted, picked by file extension:

- YAML (``.yml`` / ``.yaml``): a top-level list of entries.
- TOML (``.toml``): an array of ``[[menu]]`` tables.

Example (YAML)::

    - name: dashboard
      path: /
    - divider: true
    - name: reports
      loyalty: staff
      items:
        - name: reports/sales
        - name: reports/stock

Keys are normalized to strings at every depth before the records are handed
to :class:`menuable.menu.Menu`.
"""

import logging
import tomllib
from pathlib import Path

import yaml

from .exceptions import MenuConfigurationError

logger = logging.getLogger(__name__)

YAML_SUFFIXES = (".yml", ".yaml")
TOML_SUFFIXES = (".toml",)


def normalize_keys(value):
    """Return *value* with every mapping key converted to ``str``, recursively."""
    if isinstance(value, dict):
        return {str(key): normalize_keys(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [normalize_keys(item) for item in value]
    return value


def normalize_records(data, source="<memory>"):
    """Validate the top level of a parsed document and normalize its keys."""
    if data is None:
        return []
    if not isinstance(data, (list, tuple)):
        raise MenuConfigurationError(
            f"Menu configuration in {source} must be a list of entries, got {type(data).__name__}"
        )
    return normalize_keys(data)


def load_menu_config(path) -> list:
    """Parse the menu document at *path* into a list of entry dicts."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Menu config file not found: {path}")

    suffix = path.suffix.lower()
    if suffix in YAML_SUFFIXES:
        with path.open("r", encoding="utf-8") as fh:
            data = yaml.safe_load(fh)
    elif suffix in TOML_SUFFIXES:
        with path.open("rb") as fh:
            data = tomllib.load(fh).get("menu", [])
    else:
        raise MenuConfigurationError(f"Unsupported menu config format: {path.name}")

    records = normalize_records(data, source=path)
    logger.info("Loaded %d menu entries from %s", len(records), path)
    return records


__all__ = [
    "load_menu_config",
    "normalize_keys",
    "normalize_records",
]
