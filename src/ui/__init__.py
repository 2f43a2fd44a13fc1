"""UI module containing option widgets and the settings form."""

from ui.widgets import (
    ChoiceButton,
    OptionCheckbox,
    OptionElement,
    OptionInput,
    OptionRadioSet,
    OptionSwitch,
    setting_classes,
)
from ui.form import compose_settings_form
from ui import ids

__all__ = [
    # Widgets
    "ChoiceButton",
    "OptionCheckbox",
    "OptionElement",
    "OptionInput",
    "OptionRadioSet",
    "OptionSwitch",
    "setting_classes",
    # Form composer
    "compose_settings_form",
    "ids",
]
