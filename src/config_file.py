"""Config file serialization for bup."""

from __future__ import annotations

import json
import logging
import os
from dataclasses import asdict
from pathlib import Path
from typing import Any

from model import Directory, DirectoryStore

log = logging.getLogger(__name__)

# Default config location
BUP_CONFIG_DIR = Path(os.environ.get("XDG_CONFIG_HOME", str(Path.home() / ".config"))) / "bup"
DEFAULT_CONFIG_PATH = BUP_CONFIG_DIR / "config.json"


class ConfigFileError(Exception):
    """Raised when the config file cannot be read or has the wrong shape."""


def serialize(store: DirectoryStore) -> dict[str, Any]:
    """Serialize the store to a JSON-compatible dict."""
    return {"directories": [asdict(directory) for directory in store]}


def _string_list(value: Any, what: str) -> list[str]:
    if value is None:
        return []
    if not isinstance(value, list):
        raise ConfigFileError(f"{what} must be a list")
    result = []
    for item in value:
        # Sources that were never given a folder are stored as null
        if item is None:
            result.append("")
        elif isinstance(item, str):
            result.append(item)
        else:
            raise ConfigFileError(f"{what} must contain strings, got {item!r}")
    return result


def deserialize(data: Any) -> DirectoryStore:
    """Deserialize a dict into a DirectoryStore.

    Raises:
        ConfigFileError: If the data does not have the expected shape.
    """
    if not isinstance(data, dict):
        raise ConfigFileError("Config must be a JSON object")
    entries = data.get("directories", [])
    if not isinstance(entries, list):
        raise ConfigFileError("'directories' must be a list")

    directories = []
    for i, entry in enumerate(entries):
        if not isinstance(entry, dict):
            raise ConfigFileError(f"Directory {i}: must be an object")
        name = entry.get("name", "")
        if not isinstance(name, str):
            raise ConfigFileError(f"Directory {i}: name must be a string")
        directories.append(
            Directory(
                name=name,
                sources=_string_list(entry.get("sources"), f"Directory {i}: sources"),
                excludes=_string_list(entry.get("excludes"), f"Directory {i}: excludes"),
            )
        )
    return DirectoryStore(directories)


class ConfigFile:
    """Handles loading and saving the directory list."""

    def __init__(self, path: Path = DEFAULT_CONFIG_PATH):
        self.path = path

    def load(self) -> DirectoryStore:
        """Load the store. A missing file gives an empty store.

        Raises:
            ConfigFileError: If the file is not valid JSON or has the wrong shape.
        """
        if not self.path.exists():
            log.info(f"No config at {self.path}, starting empty")
            return DirectoryStore()
        try:
            data = json.loads(self.path.read_text())
        except json.JSONDecodeError as e:
            raise ConfigFileError(f"{self.path}: invalid JSON ({e})") from e
        store = deserialize(data)
        log.info(f"Loaded {len(store)} directories from {self.path}")
        return store

    def save(self, store: DirectoryStore) -> None:
        """Save the store, creating the parent directory if needed."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(serialize(store), indent=2))
        log.info(f"Saved {len(store)} directories to {self.path}")
