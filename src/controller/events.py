"""Setting change event handlers."""

from __future__ import annotations

from typing import Any, Callable

from textual import on
from textual.widgets import Checkbox, Input, RadioSet, Switch

from constants import SETTING_CLASS

SETTING = f".{SETTING_CLASS}"


class SettingsEventsMixin:
    """Mixin saving a setting whenever its widget changes."""

    settings: Any  # AutomaticSettings
    _set_status: Callable

    @on(Checkbox.Changed, SETTING)
    def on_setting_checkbox_changed(self, event: Checkbox.Changed) -> None:
        self._save_setting(event.control)

    @on(Switch.Changed, SETTING)
    def on_setting_switch_changed(self, event: Switch.Changed) -> None:
        self._save_setting(event.control)

    @on(RadioSet.Changed, SETTING)
    def on_setting_radio_set_changed(self, event: RadioSet.Changed) -> None:
        self._save_setting(event.control)

    @on(Input.Submitted, SETTING)
    def on_setting_input_submitted(self, event: Input.Submitted) -> None:
        self._save_setting(event.control)

    @on(Input.Blurred, SETTING)
    def on_setting_input_blurred(self, event: Input.Blurred) -> None:
        self._save_setting(event.control)

    def _save_setting(self, widget: Any) -> None:
        try:
            saved = self.settings.save(widget)
        except ValueError as e:
            self._set_status(f"Invalid value: {e}")
            return
        if saved is not None:
            self._set_status(f"Saved {saved[0]}")
