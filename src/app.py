"""Settings TUI application."""

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from textual import on
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal
from textual.css.query import NoMatches
from textual.widgets import Button, Checkbox, Label, RadioSet, Static, Switch

from constants import APP_NAME, APP_VERSION, state_dir
from controller import AutomaticSettings, OptionSyncEngine, SettingsEventsMixin, dict_provider
from storage import OptionStore
from ui import compose_settings_form
from ui.ids import css
import ui.ids as ids

log = logging.getLogger(__name__)

# Load CSS from file
APP_CSS = (Path(__file__).parent / "ui" / "styles.css").read_text()

# Defaults for every option in the settings form; "editor" is an option group
DEFAULT_SETTINGS: dict[str, Any] = {
    "notifications": None,
    "autoUpdate": True,
    "theme": "system",
    "refreshInterval": 30,
    "editor": {
        "font": "monospace",
        "fontSize": 12,
        "wordWrap": False,
    },
}


LOAD_PREVENTED_MESSAGES = (Checkbox.Changed, Switch.Changed, RadioSet.Changed)


def setup_logging() -> Path:
    """Log to the XDG state directory; returns the log file path."""
    log_dir = state_dir()
    log_dir.mkdir(parents=True, exist_ok=True)
    log_path = log_dir / f"{APP_NAME}.log"
    logging.basicConfig(
        filename=str(log_path),
        level=logging.DEBUG,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )
    return log_path


class SettingsApp(SettingsEventsMixin, App):
    """TUI editing the stored settings; every change is saved immediately."""

    TITLE = "Settings"
    ENABLE_COMMAND_PALETTE = False
    CSS = APP_CSS

    BINDINGS = [
        Binding("ctrl+r", "reset", "Reset to defaults", show=True),
        Binding("escape", "quit", "Quit", show=True),
    ]

    def __init__(
        self,
        store: OptionStore,
        defaults: Mapping[str, Any] | None = DEFAULT_SETTINGS,
        version: str = APP_VERSION,
    ) -> None:
        """Create the app.

        Args:
            store: Where settings are loaded from and saved to
            defaults: Default values, or None to keep the composed widget state
            version: Version shown in the header
        """
        super().__init__()
        self.version = version
        self.status_message = ""
        self.engine = OptionSyncEngine()
        self.engine.set_default_option_provider(
            dict_provider(defaults) if defaults is not None else None
        )
        self.settings = AutomaticSettings(self.engine, store)

    def compose(self) -> ComposeResult:
        yield Horizontal(
            Label(f"{APP_NAME} {self.version}", id=ids.HEADER_TITLE),
            Button("Reset to defaults", id=ids.RESET_BTN, variant="warning"),
            id=ids.HEADER_CONTAINER,
        )
        yield from compose_settings_form()
        yield Horizontal(
            Static("", id=ids.STATUS_BAR),
            Button("Quit [Esc]", id=ids.QUIT_BTN, variant="error"),
            id=ids.FOOTER_BUTTONS,
        )

    def on_mount(self) -> None:
        count = self._load_settings()
        self._set_status(f"Loaded {count} settings")

    def _load_settings(self) -> int:
        # Applying values must not be mistaken for user edits and saved back
        with self.prevent(*LOAD_PREVENTED_MESSAGES):
            return self.settings.load(self.screen)

    def _set_status(self, message: str) -> None:
        """Set status bar message."""
        self.status_message = message
        try:
            status = self.query_one(css(ids.STATUS_BAR), Static)
            status.update(message)
        except NoMatches:
            pass

    def action_reset(self) -> None:
        with self.prevent(*LOAD_PREVENTED_MESSAGES):
            count = self.settings.reset_to_defaults(self.screen)
        log.info(f"Reset {count} settings to defaults")
        self._set_status(f"Reset {count} settings to defaults")

    @on(Button.Pressed, css(ids.RESET_BTN))
    def on_reset_pressed(self, event: Button.Pressed) -> None:
        self.action_reset()

    @on(Button.Pressed, css(ids.QUIT_BTN))
    def on_quit_pressed(self, event: Button.Pressed) -> None:
        self.exit()
