"""Option values and the widget kinds they are bound to."""

from enum import Enum
from typing import Any, Union

from constants import OPTION_GROUP_CLASS_PREFIX


class _Missing(Enum):
    """Marker for "no value at all", distinct from a stored None."""

    MISSING = "missing"

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING = _Missing.MISSING

# None is the third state of a tri-state toggle, not "unset"
OptionValue = Union[bool, int, float, str, None]

# Group id -> {member option id: value}
GroupValues = dict[str, OptionValue]

# The map handed over by the store: option id -> value, or group id -> GroupValues
LoadedValues = dict[str, Any]


class WidgetKind(Enum):
    """Closed set of widget kinds an option can be bound to."""

    TOGGLE = "toggle"  # Checkbox/Switch, tri-state via indeterminate
    EXCLUSIVE_CHOICE = "exclusive_choice"  # RadioSet of ChoiceButtons
    NUMERIC = "numeric"  # Input holding a number
    TEXT = "text"  # Input holding plain text


def option_group_class(group_id: str) -> str:
    """CSS class carried by every widget in an option group."""
    return f"{OPTION_GROUP_CLASS_PREFIX}{group_id}"
