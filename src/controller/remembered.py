"""Remembered options: per-load-cycle cache of option group values.

When one widget of an option group is saved, the whole group is written back
as one value. Only the widgets currently in the scope can be re-read, so the
rest of the group comes from here: the group map as it was loaded, updated by
every extraction since. Without it, saving a single member would drop every
stored member that has no widget on screen.

A RememberedOptions instance lives for exactly one load cycle. The engine
replaces it with a fresh one on reset instead of clearing shared state.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping

from model import GroupValues, OptionValue

log = logging.getLogger(__name__)


class RememberedOptions:
    """Group id -> last known {option id: value} for one load cycle."""

    def __init__(self) -> None:
        self._groups: dict[str, GroupValues] = {}

    def __contains__(self, group_id: object) -> bool:
        return group_id in self._groups

    def __len__(self) -> int:
        return len(self._groups)

    def __iter__(self) -> Iterator[str]:
        return iter(self._groups)

    def get(self, group_id: str) -> GroupValues | None:
        """Return a copy of the remembered group values, or None if untouched."""
        values = self._groups.get(group_id)
        return dict(values) if values is not None else None

    def remember(self, group_id: str, values: Mapping[str, OptionValue]) -> bool:
        """Snapshot a group's values on first touch.

        Returns:
            True if the snapshot was taken, False if the group was already cached.
        """
        if group_id in self._groups:
            return False
        self._groups[group_id] = dict(values)
        log.debug(f"Remembered option group {group_id}: {sorted(values)}")
        return True

    def update(self, group_id: str, values: Mapping[str, OptionValue]) -> None:
        """Record the latest values of a group, creating the entry if needed."""
        self._groups.setdefault(group_id, {}).update(values)

    def clear(self) -> None:
        self._groups.clear()
