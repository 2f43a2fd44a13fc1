"""Shared fixtures for autosettings tests."""

import pytest
from textual.app import App, ComposeResult

from controller import OptionSyncEngine, dict_provider
from storage import OptionStore


class WidgetHarness(App):
    """Minimal app mounting the given widgets on its screen."""

    def __init__(self, *widgets) -> None:
        super().__init__()
        self._widgets = widgets

    def compose(self) -> ComposeResult:
        yield from self._widgets


@pytest.fixture
def harness():
    """The WidgetHarness class, for mounting widgets under test."""
    return WidgetHarness


@pytest.fixture(autouse=True)
def xdg_dirs(tmp_path, monkeypatch):
    """Keep config and state directories inside the test's tmp dir."""
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    monkeypatch.setenv("XDG_STATE_HOME", str(tmp_path / "state"))


@pytest.fixture
def defaults():
    """Defaults for a plain option, a toggle and one option group."""
    return {
        "refreshInterval": 30,
        "notifications": None,
        "theme": "system",
        "editor": {"font": "monospace", "fontSize": 12, "wordWrap": False},
    }


@pytest.fixture
def engine(defaults):
    """OptionSyncEngine with a dict provider over the default values."""
    engine = OptionSyncEngine()
    engine.set_default_option_provider(dict_provider(defaults))
    return engine


@pytest.fixture
def bare_engine():
    """OptionSyncEngine with defaults disabled."""
    engine = OptionSyncEngine()
    engine.set_default_option_provider(None)
    return engine


@pytest.fixture
def store(tmp_path):
    """OptionStore backed by a file in the tmp dir (not created yet)."""
    return OptionStore(tmp_path / "settings.json")
