"""Option-aware Textual widgets.

Each widget here declares which option it is bound to:

- ``name`` is the option id (``id`` is used when no name is given)
- ``option_group`` is the group the option is saved with, if any
- ``option_kind`` is the WidgetKind that picks the read/write strategy

Every widget also carries the ``setting`` CSS class so a load cycle can find
it, and grouped widgets carry ``optiongroup-<group>`` so all members of a
group can be queried from any scope.
"""

from __future__ import annotations

from textual.reactive import reactive
from textual.widgets import Checkbox, Input, RadioButton, RadioSet, Switch

from constants import SETTING_CLASS
from model import WidgetKind, option_group_class


def setting_classes(classes: str | None = None, group: str | None = None) -> str:
    """Build the CSS classes for a setting widget."""
    names = [SETTING_CLASS]
    if group:
        names.append(option_group_class(group))
    if classes:
        names.append(classes)
    return " ".join(names)


class OptionElement:
    """Mixin carrying the option metadata of a widget."""

    option_kind: WidgetKind
    option_group: str | None = None


class OptionCheckbox(OptionElement, Checkbox):
    """Checkbox with a third, indeterminate state (stored as None)."""

    option_kind = WidgetKind.TOGGLE

    indeterminate: reactive[bool] = reactive(False)

    def __init__(
        self,
        label: str = "",
        value: bool = False,
        *,
        name: str | None = None,
        group: str | None = None,
        id: str | None = None,
        classes: str | None = None,
        disabled: bool = False,
    ) -> None:
        super().__init__(
            label,
            value,
            name=name,
            id=id,
            classes=setting_classes(classes, group),
            disabled=disabled,
        )
        self.option_group = group

    def watch_indeterminate(self, indeterminate: bool) -> None:
        self.set_class(indeterminate, "-indeterminate")

    def toggle(self) -> OptionCheckbox:
        # Any user toggle resolves the third state
        self.indeterminate = False
        super().toggle()
        return self


class OptionSwitch(OptionElement, Switch):
    """Switch bound to a boolean option."""

    option_kind = WidgetKind.TOGGLE

    indeterminate: reactive[bool] = reactive(False)

    def __init__(
        self,
        value: bool = False,
        *,
        name: str | None = None,
        group: str | None = None,
        id: str | None = None,
        classes: str | None = None,
        disabled: bool = False,
    ) -> None:
        super().__init__(
            value,
            name=name,
            id=id,
            classes=setting_classes(classes, group),
            disabled=disabled,
        )
        self.option_group = group

    def watch_indeterminate(self, indeterminate: bool) -> None:
        self.set_class(indeterminate, "-indeterminate")

    def toggle(self) -> OptionSwitch:
        self.indeterminate = False
        super().toggle()
        return self


class OptionInput(OptionElement, Input):
    """Input bound to a text or numeric option."""

    def __init__(
        self,
        value: str | None = None,
        *,
        name: str | None = None,
        group: str | None = None,
        numeric: bool = False,
        placeholder: str = "",
        id: str | None = None,
        classes: str | None = None,
        disabled: bool = False,
    ) -> None:
        super().__init__(
            value=value,
            placeholder=placeholder,
            type="number" if numeric else "text",
            name=name,
            id=id,
            classes=setting_classes(classes, group),
            disabled=disabled,
        )
        self.option_group = group
        self.option_kind = WidgetKind.NUMERIC if numeric else WidgetKind.TEXT


class ChoiceButton(RadioButton):
    """One choice of an OptionRadioSet; ``choice`` is the stored value."""

    def __init__(
        self,
        label: str,
        choice: str,
        value: bool = False,
        *,
        name: str | None = None,
        id: str | None = None,
    ) -> None:
        super().__init__(label, value, name=name, id=id)
        self.choice = choice


class OptionRadioSet(OptionElement, RadioSet):
    """Radio set bound to an exclusive-choice option.

    RadioSet only learns about a newly pressed button once the button's
    Changed message has been handled, so the set also keeps its own
    selection marker which select() updates immediately.
    """

    option_kind = WidgetKind.EXCLUSIVE_CHOICE

    def __init__(
        self,
        *buttons: ChoiceButton,
        name: str | None = None,
        group: str | None = None,
        id: str | None = None,
        classes: str | None = None,
        disabled: bool = False,
    ) -> None:
        super().__init__(
            *buttons,
            name=name,
            id=id,
            classes=setting_classes(classes, group),
            disabled=disabled,
        )
        self.option_group = group
        self._selected_choice: ChoiceButton | None = None

    def choices(self) -> list[ChoiceButton]:
        """All choice buttons in this set."""
        return list(self.query(ChoiceButton))

    def select(self, button: ChoiceButton) -> None:
        """Press a choice; RadioSet releases the previously pressed one."""
        self._selected_choice = button
        button.value = True

    def get_selected(self) -> ChoiceButton | None:
        """Return the selected choice, or None when nothing is pressed."""
        if self._selected_choice is not None and self._selected_choice.value:
            return self._selected_choice
        pressed = self.pressed_button
        if isinstance(pressed, ChoiceButton) and pressed.value:
            return pressed
        for button in self.choices():
            if button.value:
                return button
        return None

    def on_radio_set_changed(self, event: RadioSet.Changed) -> None:
        if event.radio_set is self and isinstance(event.pressed, ChoiceButton):
            self._selected_choice = event.pressed
