"""Tests for the remembered options cache."""

from controller.remembered import RememberedOptions


class TestRememberedOptions:
    """Test RememberedOptions."""

    def test_starts_empty(self):
        remembered = RememberedOptions()
        assert len(remembered) == 0
        assert "editor" not in remembered
        assert remembered.get("editor") is None

    def test_first_touch_snapshots(self):
        remembered = RememberedOptions()
        assert remembered.remember("editor", {"font": "mono", "fontSize": 12}) is True
        assert "editor" in remembered
        assert remembered.get("editor") == {"font": "mono", "fontSize": 12}

    def test_later_touch_keeps_first_snapshot(self):
        """Only the first touch in a cycle is recorded."""
        remembered = RememberedOptions()
        remembered.remember("editor", {"font": "mono"})
        assert remembered.remember("editor", {"font": "serif"}) is False
        assert remembered.get("editor") == {"font": "mono"}

    def test_snapshot_is_a_copy(self):
        """Mutating the loaded map afterwards does not change the cache."""
        loaded = {"font": "mono"}
        remembered = RememberedOptions()
        remembered.remember("editor", loaded)
        loaded["font"] = "serif"
        assert remembered.get("editor") == {"font": "mono"}

    def test_get_returns_a_copy(self):
        remembered = RememberedOptions()
        remembered.remember("editor", {"font": "mono"})
        remembered.get("editor")["font"] = "serif"
        assert remembered.get("editor") == {"font": "mono"}

    def test_update_merges(self):
        remembered = RememberedOptions()
        remembered.remember("editor", {"font": "mono", "fontSize": 12})
        remembered.update("editor", {"fontSize": 14})
        assert remembered.get("editor") == {"font": "mono", "fontSize": 14}

    def test_update_creates_entry(self):
        remembered = RememberedOptions()
        remembered.update("editor", {"fontSize": 14})
        assert "editor" in remembered
        assert list(remembered) == ["editor"]

    def test_clear(self):
        remembered = RememberedOptions()
        remembered.remember("editor", {"font": "mono"})
        remembered.clear()
        assert "editor" not in remembered
        assert len(remembered) == 0
