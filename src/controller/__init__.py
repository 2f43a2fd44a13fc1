"""Controller layer: moves option values between the store and the widgets.

This package contains:
- sync: OptionSyncEngine for store ↔ widget synchronization
- binders: per-widget-kind read/write strategies
- remembered: per-load-cycle cache of option group values
- defaults: default option providers
- automatic: load cycle and save action over all setting widgets
- events: event handler mixin saving changed settings
"""

from controller.automatic import AutomaticSettings
from controller.binders import BINDERS, ElementBinder, SelectionError, binder_for, kind_of
from controller.defaults import ConfigurationError, dict_provider, load_defaults
from controller.events import SettingsEventsMixin
from controller.remembered import RememberedOptions
from controller.sync import OptionSyncEngine

__all__ = [
    # Sync
    "OptionSyncEngine",
    "RememberedOptions",
    "AutomaticSettings",
    # Binders
    "BINDERS",
    "ElementBinder",
    "binder_for",
    "kind_of",
    # Defaults
    "dict_provider",
    "load_defaults",
    # Errors
    "ConfigurationError",
    "SelectionError",
    # Event mixins
    "SettingsEventsMixin",
]
