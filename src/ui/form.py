"""Settings form composition."""

from __future__ import annotations

from textual.app import ComposeResult
from textual.containers import Container, Horizontal, Vertical, VerticalScroll
from textual.widgets import Label, Static

from ui.widgets import ChoiceButton, OptionCheckbox, OptionInput, OptionRadioSet, OptionSwitch
import ui.ids as ids

EDITOR_GROUP = "editor"


def compose_settings_form() -> ComposeResult:
    """Compose the settings form.

    Widgets are composed without values; the load cycle fills them from the
    store or the defaults. Anything that has neither keeps what is composed here.

    Yields:
        Textual widgets for the settings form
    """
    with VerticalScroll(id=ids.SETTINGS_FORM):
        with Horizontal(id="options-grid"):
            with Vertical(classes="options-column"):
                with Container(classes="options-section"):
                    yield Label("General", classes="section-label")
                    yield OptionCheckbox(
                        "Show notifications", name="notifications", id=ids.OPT_NOTIFICATIONS
                    )
                    yield Static(
                        "Mixed state follows the system setting",
                        classes="option-explanation",
                    )
                    with Horizontal(classes="switch-row"):
                        yield OptionSwitch(name="autoUpdate", id=ids.OPT_AUTO_UPDATE)
                        yield Label("Check for updates")
                    yield Label("Refresh interval (seconds):")
                    yield OptionInput(
                        name="refreshInterval", numeric=True, id=ids.OPT_REFRESH_INTERVAL
                    )
                with Container(classes="options-section"):
                    yield Label("Theme", classes="section-label")
                    yield OptionRadioSet(
                        ChoiceButton("Light", "light"),
                        ChoiceButton("Dark", "dark"),
                        ChoiceButton("Follow system", "system", value=True),
                        name="theme",
                        id=ids.OPT_THEME,
                    )

            with Vertical(classes="options-column"):
                with Container(classes="options-section"):
                    yield Label("Editor", classes="section-label")
                    yield Label("Font:")
                    yield OptionInput(
                        name="font",
                        group=EDITOR_GROUP,
                        placeholder="e.g., Fira Code",
                        id=ids.OPT_EDITOR_FONT,
                    )
                    yield Label("Font size:")
                    yield OptionInput(
                        name="fontSize",
                        group=EDITOR_GROUP,
                        numeric=True,
                        id=ids.OPT_EDITOR_FONT_SIZE,
                    )
                    yield OptionCheckbox(
                        "Wrap long lines", name="wordWrap", group=EDITOR_GROUP, id=ids.OPT_EDITOR_WRAP
                    )
