"""AutomaticSettings: load cycle and save action over the setting widgets."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from constants import SETTING_CLASS
from controller.binders import SelectionError
from controller.sync import OptionSyncEngine
from storage import OptionStore

if TYPE_CHECKING:
    from textual.dom import DOMNode
    from textual.widget import Widget

log = logging.getLogger(__name__)


class AutomaticSettings:
    """Loads every ``.setting`` widget from the store and saves changed ones."""

    def __init__(self, engine: OptionSyncEngine, store: OptionStore) -> None:
        self.engine = engine
        self.store = store

    def load(self, scope: DOMNode) -> int:
        """Run a load cycle over the setting widgets below scope.

        Returns:
            The number of setting widgets visited.

        Raises:
            ConfigurationError: If no default provider was set on the engine.
            StoreError: If the store cannot be read.
        """
        self.engine.is_ready()
        values = self.store.load()
        self.engine.reset_remembered_options()

        widgets = list(scope.query(f".{SETTING_CLASS}"))
        for widget in widgets:
            option_id = self.engine.get_option_id_from_element(widget)
            group_id = getattr(widget, "option_group", None)
            self.engine.apply_option_to_element(option_id, group_id, widget, values)

        log.info(f"Loaded {len(widgets)} settings from {self.store.path}")
        return len(widgets)

    def save(self, widget: Widget) -> tuple[str, Any] | None:
        """Save one widget's value, or its whole option group.

        Returns:
            The saved (id, value) pair, or None if nothing could be saved.
        """
        try:
            option_id, value = self.engine.get_id_and_options_from_element(widget)
        except SelectionError as e:
            log.warning(f"Not saving {widget.name or widget.id}: {e}")
            return None
        self.store.save_option(option_id, value)
        return option_id, value

    def reset_to_defaults(self, scope: DOMNode) -> int:
        """Drop every stored value and reload the widgets from the defaults."""
        self.store.clear()
        return self.load(scope)
