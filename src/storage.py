"""JSON file storage for option values."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from constants import default_store_path
from model import LoadedValues

log = logging.getLogger(__name__)


class StoreError(Exception):
    """Raised when the store file cannot be read or written."""


class OptionStore:
    """Handles saving and loading option values.

    The file holds one JSON object: option id -> value, or group id -> a
    nested object holding the group's members.
    """

    def __init__(self, path: Path | None = None):
        self.path = path if path is not None else default_store_path()

    def load(self) -> LoadedValues:
        """Load all stored values; an absent file is an empty store.

        Raises:
            StoreError: If the file exists but is not a JSON object.
        """
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text())
        except (OSError, json.JSONDecodeError) as e:
            raise StoreError(f"Cannot read {self.path}: {e}") from e
        if not isinstance(data, dict):
            raise StoreError(f"{self.path} does not contain a JSON object")
        return data

    def save_option(self, option_id: str, value: Any) -> None:
        """Store one option value or one whole group map."""
        data = self.load()
        data[option_id] = value
        self.save_all(data)
        log.debug(f"Saved {option_id} = {value!r}")

    def save_all(self, values: LoadedValues) -> None:
        """Replace the stored values."""
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(json.dumps(values, indent=2))
        except OSError as e:
            raise StoreError(f"Cannot write {self.path}: {e}") from e

    def clear(self) -> None:
        """Remove every stored value."""
        if self.path.exists():
            self.path.unlink()
            log.info(f"Cleared option store {self.path}")
