"""Default option providers.

A default provider is a plain callable taking one id and returning the
fallback value for it, or MISSING when there is none:

    def provider(option_id: str) -> OptionValue | Mapping[str, OptionValue]: ...

It is called with exactly one id at a time. For a grouped option it is called
with the group id and must return a mapping of member id -> default, from
which the member's default is picked.

Providers must be synchronous and side-effect-free. Anything that needs to be
fetched (a file, a remote policy) is fetched before the provider is built,
see load_defaults().
"""

from __future__ import annotations

import copy
import json
import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Callable

from model import MISSING

log = logging.getLogger(__name__)

DefaultOptionProvider = Callable[[str], Any]


class ConfigurationError(Exception):
    """Raised when the sync engine is used before it is configured."""


def dict_provider(defaults: Mapping[str, Any]) -> DefaultOptionProvider:
    """Build a provider that looks ids up in a mapping.

    Values are deep-copied so a group default handed to the engine never
    aliases the defaults table.
    """

    def provider(option_id: str) -> Any:
        if option_id not in defaults:
            return MISSING
        return copy.deepcopy(defaults[option_id])

    return provider


def group_default(provider: DefaultOptionProvider, group_id: str, option_id: str) -> Any:
    """Look up one member's default through the group's default mapping."""
    group_defaults = provider(group_id)
    if not isinstance(group_defaults, Mapping):
        if group_defaults is not MISSING:
            log.debug(f"Default for group {group_id} is not a mapping: {group_defaults!r}")
        return MISSING
    return group_defaults.get(option_id, MISSING)


def load_defaults(path: Path) -> dict[str, Any]:
    """Read a JSON defaults file into a dict.

    Raises:
        ConfigurationError: If the file is missing, unreadable or not a JSON object.
    """
    try:
        data = json.loads(path.read_text())
    except (OSError, json.JSONDecodeError) as e:
        raise ConfigurationError(f"Cannot read defaults from {path}: {e}") from e
    if not isinstance(data, dict):
        raise ConfigurationError(f"Defaults file {path} must contain a JSON object")
    log.debug(f"Loaded {len(data)} defaults from {path}")
    return data
