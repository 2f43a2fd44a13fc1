"""Widget ID constants for the settings app.

Using constants prevents typos and makes refactoring easier.
"""


def css(widget_id: str) -> str:
    """Return a CSS selector for a widget ID.

    Usage:
        from ui.ids import css, STATUS_BAR
        self.query_one(css(STATUS_BAR), Static)
    """
    return f"#{widget_id}"


# Container IDs
HEADER_CONTAINER = "header-container"
HEADER_TITLE = "header-title"
SETTINGS_FORM = "settings-form"
FOOTER_BUTTONS = "footer-buttons"
STATUS_BAR = "status-bar"

# Buttons
RESET_BTN = "reset-btn"
QUIT_BTN = "quit-btn"

# Option widgets
OPT_NOTIFICATIONS = "opt-notifications"
OPT_AUTO_UPDATE = "opt-auto-update"
OPT_THEME = "opt-theme"
OPT_REFRESH_INTERVAL = "opt-refresh-interval"
OPT_EDITOR_FONT = "opt-editor-font"
OPT_EDITOR_FONT_SIZE = "opt-editor-font-size"
OPT_EDITOR_WRAP = "opt-editor-wrap"
