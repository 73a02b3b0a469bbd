"""Logic for loading migration definitions and their source configuration."""

from pathlib import Path
from typing import Any

import yaml

from module_file.errors import ConfigError

DEFAULT_SOURCE_CONFIG: dict[str, Any] = {
    "plugin": "url",
    "data_fetcher_plugin": "module_file",
    "data_parser_plugin": "json",
}


def load_migration(path: str | Path) -> dict[str, Any]:
    """Load a migration definition from a YAML file."""
    p = Path(path)
    if not p.is_file():
        msg = f"Migration file {p} does not exist"
        raise ConfigError(msg, str(p))
    try:
        migration = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        msg = f"Migration file {p} is not valid YAML"
        raise ConfigError(msg, str(p)) from e
    if not isinstance(migration, dict):
        msg = f"Migration file {p} must contain a mapping"
        raise ConfigError(msg, str(p))
    return migration


def source_configuration(migration: dict[str, Any]) -> dict[str, Any]:
    """Return the migration's source section merged with the defaults."""
    source = migration.get("source") or {}
    if not isinstance(source, dict):
        msg = "Migration 'source' must be a mapping"
        raise ConfigError(msg, "source")
    return {**DEFAULT_SOURCE_CONFIG, **source}
