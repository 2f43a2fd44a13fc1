"""OptionSyncEngine: bidirectional store ↔ widget synchronization."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from controller.binders import binder_for, get_option_id
from controller.defaults import ConfigurationError, DefaultOptionProvider, group_default
from controller.remembered import RememberedOptions
from model import MISSING, GroupValues, LoadedValues, OptionValue, option_group_class

if TYPE_CHECKING:
    from textual.dom import DOMNode
    from textual.widget import Widget

log = logging.getLogger(__name__)

# Distinguishes "never set" from an explicit None (defaults disabled)
_UNSET: Any = object()


class OptionSyncEngine:
    """Moves option values between a loaded value map and Textual widgets.

    1. **Store → UI** (apply_option_to_element): write one stored value, or
       its default, into a widget. Missing values without a default leave the
       widget untouched so whatever it was composed with stays in effect.

    2. **UI → Store** (get_id_and_options_from_element): read a widget back
       into an (id, value) pair. For a grouped widget the pair is
       (group id, full group map), rebuilt from the remembered group values
       plus every member widget in the scope.

    The remembered group values belong to one load cycle. Call
    reset_remembered_options() at the start of each cycle, before any apply.

    Example usage:
        engine = OptionSyncEngine(scope=app.screen)
        engine.set_default_option_provider(dict_provider(DEFAULTS))

        # Load cycle:
        engine.reset_remembered_options()
        for widget in app.query(".setting"):
            engine.apply_option_to_element(
                engine.get_option_id_from_element(widget),
                widget.option_group,
                widget,
                store.load(),
            )

        # After the user changes a widget:
        option_id, value = engine.get_id_and_options_from_element(widget)
        store.save_option(option_id, value)
    """

    def __init__(self, scope: DOMNode | None = None) -> None:
        """Create an engine.

        Args:
            scope: Node queried for the members of an option group. When None,
                the screen of the widget being extracted is used.
        """
        self.scope = scope
        self.remembered = RememberedOptions()
        self._default_provider: DefaultOptionProvider | None = _UNSET

    def reset_remembered_options(self) -> None:
        """Start a new load cycle with no remembered groups."""
        self.remembered = RememberedOptions()

    def set_default_option_provider(self, provider: DefaultOptionProvider | None) -> None:
        """Set the default provider; None disables defaults entirely."""
        self._default_provider = provider

    def is_ready(self) -> bool:
        """Return True once a default provider (or None) has been set.

        Raises:
            ConfigurationError: If set_default_option_provider() was never called.
        """
        if self._default_provider is _UNSET:
            raise ConfigurationError(
                "Default option provider is not set. "
                "Call set_default_option_provider() before loading options."
            )
        return True

    def apply_option_to_element(
        self,
        option_id: str,
        group_id: str | None,
        widget: Widget,
        loaded_values: LoadedValues | None,
    ) -> bool:
        """Write the stored (or default) value of an option into a widget.

        Returns:
            True if a value was applied, False if the widget was left untouched.
        """
        value = self._resolve_value(option_id, group_id, loaded_values or {})
        if value is MISSING:
            log.debug(f"No value or default for {option_id}, keeping widget state")
            return False
        binder_for(widget).apply(widget, value)
        return True

    def get_option_id_from_element(self, widget: Widget) -> str:
        return get_option_id(widget)

    def get_id_and_options_from_element(
        self, widget: Widget, use_group: bool = True
    ) -> tuple[str, OptionValue | GroupValues]:
        """Read a widget into the (id, value) pair that gets saved.

        Args:
            widget: The widget to read
            use_group: Set to False to read only this widget even if it is grouped

        Raises:
            SelectionError: If a radio set involved has nothing selected.
            ValueError: If a numeric widget holds text that is not a number.
        """
        group_id = getattr(widget, "option_group", None)
        if not use_group or not group_id:
            return binder_for(widget).extract(widget)

        # Start from what is remembered so members without a widget survive
        values = self.remembered.get(group_id) or {}
        for member in self.group_members(group_id, widget):
            member_id, member_value = binder_for(member).extract(member)
            values[member_id] = member_value

        self.remembered.update(group_id, values)
        return group_id, values

    def group_members(self, group_id: str, widget: Widget | None = None) -> list[Widget]:
        """Return every widget in the scope that belongs to an option group."""
        scope = self.scope
        if scope is None:
            if widget is None:
                return []
            scope = widget.screen
        members = list(scope.query(f".{option_group_class(group_id)}"))
        if widget is not None and widget not in members:
            members.append(widget)
        return members

    def _resolve_value(
        self, option_id: str, group_id: str | None, loaded_values: LoadedValues
    ) -> Any:
        in_group = group_id is not None and group_id in loaded_values
        if not in_group and option_id not in loaded_values:
            value = self._default_value(option_id, group_id)
            log.info(f"Got default value for applying option {option_id}: {value!r}")
            return value

        if not in_group:
            return loaded_values[option_id]

        group_values = loaded_values[group_id]
        if not isinstance(group_values, Mapping):
            log.warning(f"Stored value of option group {group_id} is not a mapping, using defaults")
            return self._default_value(option_id, group_id)

        self.remembered.remember(group_id, group_values)
        value = group_values.get(option_id, MISSING)
        if value is MISSING:
            value = self._default_value(option_id, group_id)
            log.info(f"Got default value for applying option {option_id}: {value!r}")
        return value

    def _default_value(self, option_id: str, group_id: str | None) -> Any:
        self.is_ready()
        provider = self._default_provider
        if provider is None:
            return MISSING
        if group_id is None:
            return provider(option_id)
        return group_default(provider, group_id, option_id)
