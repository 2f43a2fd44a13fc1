"""Element binders: how each kind of widget is written and read.

Every WidgetKind has exactly one binder. A binder writes a stored value into a
widget (apply) and reads the widget back into an (option id, value) pair
(extract). Which binder handles a widget is decided by kind_of().
"""

from __future__ import annotations

import logging
from typing import Any, Protocol

from textual.widget import Widget
from textual.widgets import Checkbox, Input, Switch

from model import OptionValue, WidgetKind

log = logging.getLogger(__name__)

NUMERIC_INPUT_TYPES = ("integer", "number")


class SelectionError(LookupError):
    """Raised when an exclusive-choice widget has no selected choice."""


class Choice(Protocol):
    """A selectable child of an exclusive-choice widget."""

    name: str | None
    choice: str
    value: bool


class ExclusiveChoice(Protocol):
    """Capabilities an exclusive-choice widget provides (see OptionRadioSet)."""

    def choices(self) -> list[Any]: ...

    def select(self, button: Any) -> None: ...

    def get_selected(self) -> Choice | None: ...


def get_option_id(widget: Widget) -> str:
    """Return the option id a widget declares: its name, else its id."""
    option_id = widget.name or widget.id
    if not option_id:
        raise ValueError(f"{type(widget).__name__} declares no option id (set name= or id=)")
    return option_id


def parse_number(text: str) -> int | float:
    """Parse an input's text into a number.

    Integral text gives an int, anything else a float. Blank text is 0.

    Raises:
        ValueError: If the text is not a number.
    """
    stripped = text.strip()
    if not stripped:
        return 0
    try:
        return int(stripped)
    except ValueError:
        return float(stripped)


def _text_of(value: OptionValue) -> str:
    return "" if value is None else str(value)


class ElementBinder:
    """Read/write strategy for one widget kind."""

    kind: WidgetKind

    def apply(self, widget: Any, value: OptionValue) -> None:
        raise NotImplementedError

    def read(self, widget: Any) -> OptionValue:
        raise NotImplementedError

    def extract(self, widget: Any) -> tuple[str, OptionValue]:
        return get_option_id(widget), self.read(widget)


class ToggleBinder(ElementBinder):
    """Tri-state toggle: True, False, or None shown as indeterminate."""

    kind = WidgetKind.TOGGLE

    def apply(self, widget: Any, value: OptionValue) -> None:
        if value is None:
            widget.indeterminate = True
            return
        widget.indeterminate = False
        widget.value = value is True

    def read(self, widget: Any) -> OptionValue:
        if getattr(widget, "indeterminate", False):
            return None
        return bool(widget.value)


class ExclusiveChoiceBinder(ElementBinder):
    """Radio set: the stored value is the choice of the pressed button."""

    kind = WidgetKind.EXCLUSIVE_CHOICE

    def apply(self, widget: ExclusiveChoice, value: OptionValue) -> None:
        for button in widget.choices():
            if button.choice == value:
                widget.select(button)
                return
        log.debug(f"No choice matches {value!r}, leaving selection as is")

    def read(self, widget: ExclusiveChoice) -> OptionValue:
        return self._selected(widget).choice

    def extract(self, widget: Any) -> tuple[str, OptionValue]:
        # The pressed button carries the option id; the set is only a wrapper
        selected = self._selected(widget)
        return selected.name or get_option_id(widget), selected.choice

    def _selected(self, widget: ExclusiveChoice) -> Choice:
        selected = widget.get_selected()
        if selected is None:
            raise SelectionError(f"No choice is selected in {get_option_id(widget)}")
        return selected


class NumericBinder(ElementBinder):
    """Input holding a number; read back as int or float."""

    kind = WidgetKind.NUMERIC

    def apply(self, widget: Any, value: OptionValue) -> None:
        widget.value = _text_of(value)

    def read(self, widget: Any) -> OptionValue:
        return parse_number(widget.value)


class TextBinder(ElementBinder):
    """Input holding plain text."""

    kind = WidgetKind.TEXT

    def apply(self, widget: Any, value: OptionValue) -> None:
        widget.value = _text_of(value)

    def read(self, widget: Any) -> OptionValue:
        return widget.value


BINDERS: dict[WidgetKind, ElementBinder] = {
    binder.kind: binder
    for binder in (ToggleBinder(), ExclusiveChoiceBinder(), NumericBinder(), TextBinder())
}


def kind_of(widget: Widget) -> WidgetKind:
    """Return the kind a widget declares, or the kind of a stock Textual widget.

    Raises:
        TypeError: If the widget cannot be bound to an option.
    """
    declared = getattr(widget, "option_kind", None)
    if isinstance(declared, WidgetKind):
        return declared
    if isinstance(widget, (Checkbox, Switch)):
        return WidgetKind.TOGGLE
    if isinstance(widget, Input):
        return WidgetKind.NUMERIC if widget.type in NUMERIC_INPUT_TYPES else WidgetKind.TEXT
    raise TypeError(f"Cannot bind an option to {type(widget).__name__}")


def binder_for(widget: Widget) -> ElementBinder:
    return BINDERS[kind_of(widget)]
