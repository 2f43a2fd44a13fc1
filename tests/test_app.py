"""Tests for the settings app: load on mount and save on change.

These tests catch wiring problems where event decorators don't register properly.
"""

import pytest
from textual.widgets import Button

from app import DEFAULT_SETTINGS, SettingsApp
from ui import OptionCheckbox, OptionInput, OptionRadioSet, OptionSwitch
from ui.ids import css
import ui.ids as ids


class TestMount:
    """Test the load cycle run when the app mounts."""

    @pytest.mark.asyncio
    async def test_defaults_shown(self, store):
        app = SettingsApp(store)
        async with app.run_test():
            assert app.query_one(css(ids.OPT_NOTIFICATIONS), OptionCheckbox).indeterminate is True
            assert app.query_one(css(ids.OPT_AUTO_UPDATE), OptionSwitch).value is True
            assert app.query_one(css(ids.OPT_REFRESH_INTERVAL), OptionInput).value == "30"
            assert app.query_one(css(ids.OPT_EDITOR_FONT), OptionInput).value == "monospace"
            theme = app.query_one(css(ids.OPT_THEME), OptionRadioSet)
            assert theme.get_selected().choice == "system"

    @pytest.mark.asyncio
    async def test_stored_values_shown(self, store):
        store.save_all({"autoUpdate": False, "editor": {"fontSize": 16}})
        app = SettingsApp(store)
        async with app.run_test():
            assert app.query_one(css(ids.OPT_AUTO_UPDATE), OptionSwitch).value is False
            assert app.query_one(css(ids.OPT_EDITOR_FONT_SIZE), OptionInput).value == "16"
            # Member missing from the stored group falls back to its default
            assert app.query_one(css(ids.OPT_EDITOR_FONT), OptionInput).value == "monospace"

    @pytest.mark.asyncio
    async def test_loading_does_not_save(self, store):
        """Values applied by the load cycle are not written back."""
        app = SettingsApp(store)
        async with app.run_test() as pilot:
            await pilot.pause()
        assert not store.path.exists()

    @pytest.mark.asyncio
    async def test_status_reports_load(self, store):
        app = SettingsApp(store)
        async with app.run_test():
            assert app.status_message.startswith("Loaded")

    @pytest.mark.asyncio
    async def test_without_defaults_keeps_composed_state(self, store):
        app = SettingsApp(store, defaults=None)
        async with app.run_test():
            assert app.query_one(css(ids.OPT_REFRESH_INTERVAL), OptionInput).value == ""
            assert app.query_one(css(ids.OPT_NOTIFICATIONS), OptionCheckbox).indeterminate is False


class TestSaveOnChange:
    """Test that changing a setting widget saves it."""

    @pytest.mark.asyncio
    async def test_checkbox_change_saved(self, store):
        app = SettingsApp(store)
        async with app.run_test() as pilot:
            checkbox = app.query_one(css(ids.OPT_NOTIFICATIONS), OptionCheckbox)
            checkbox.toggle()
            await pilot.pause()
        assert store.load()["notifications"] is True

    @pytest.mark.asyncio
    async def test_switch_change_saved(self, store):
        app = SettingsApp(store)
        async with app.run_test() as pilot:
            app.query_one(css(ids.OPT_AUTO_UPDATE), OptionSwitch).toggle()
            await pilot.pause()
        assert store.load()["autoUpdate"] is False

    @pytest.mark.asyncio
    async def test_radio_change_saved(self, store):
        app = SettingsApp(store)
        async with app.run_test() as pilot:
            theme = app.query_one(css(ids.OPT_THEME), OptionRadioSet)
            theme.select(theme.choices()[1])
            await pilot.pause()
        assert store.load()["theme"] == "dark"

    @pytest.mark.asyncio
    async def test_grouped_input_submit_saves_group(self, store):
        app = SettingsApp(store)
        async with app.run_test() as pilot:
            font = app.query_one(css(ids.OPT_EDITOR_FONT), OptionInput)
            font.value = "Fira Code"
            await font.action_submit()
            await pilot.pause()
        assert store.load()["editor"] == {
            "font": "Fira Code",
            "fontSize": 12,
            "wordWrap": False,
        }

    @pytest.mark.asyncio
    async def test_invalid_number_reported(self, store):
        app = SettingsApp(store)
        async with app.run_test() as pilot:
            interval = app.query_one(css(ids.OPT_REFRESH_INTERVAL), OptionInput)
            interval.value = "soon"
            await interval.action_submit()
            await pilot.pause()
            assert app.status_message.startswith("Invalid value")
        assert not store.path.exists()


class TestReset:
    """Test resetting to defaults."""

    @pytest.mark.asyncio
    async def test_reset_button(self, store):
        store.save_all({"refreshInterval": 5, "theme": "dark"})
        app = SettingsApp(store)
        async with app.run_test() as pilot:
            interval = app.query_one(css(ids.OPT_REFRESH_INTERVAL), OptionInput)
            assert interval.value == "5"
            app.on_reset_pressed(Button.Pressed(app.query_one(css(ids.RESET_BTN), Button)))
            await pilot.pause()
            assert interval.value == "30"
            theme = app.query_one(css(ids.OPT_THEME), OptionRadioSet)
            assert theme.get_selected().choice == DEFAULT_SETTINGS["theme"]
        assert not store.path.exists()
