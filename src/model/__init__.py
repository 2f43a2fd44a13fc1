"""Model types for autosettings."""

from model.option import (
    MISSING,
    GroupValues,
    LoadedValues,
    OptionValue,
    WidgetKind,
    option_group_class,
)

__all__ = [
    "MISSING",
    "GroupValues",
    "LoadedValues",
    "OptionValue",
    "WidgetKind",
    "option_group_class",
]
