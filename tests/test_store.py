"""Tests for the tweak tree and the persisted tweak store."""

import json
import logging
from pathlib import Path

import pytest

from recolor.host.base import Level
from recolor.host.memory import MemoryHost, StaticTheme
from recolor.registry import HighlightRegistry
from recolor.store.tree import TweakTree
from recolor.store.tweaks import TweakedGroup, TweakStore


def read_json(path: Path) -> dict:
    return json.loads(path.read_text(encoding="utf-8"))


class TestTweakTree:
    """Tests for the in-memory tree."""

    def test_set_and_get(self) -> None:
        tree = TweakTree()
        tree.set("demo", "Normal", "bg", "#1a1a2e")
        assert tree.get("demo", "Normal", "bg") == "#1a1a2e"
        assert tree.get("demo", "Normal", "fg") is None
        assert tree.get("other", "Normal", "bg") is None
        assert len(tree) == 1

    def test_removing_last_channel_prunes_group_and_theme(self) -> None:
        tree = TweakTree()
        tree.set("demo", "Normal", "bg", "#1a1a2e")
        assert tree.remove_channel("demo", "Normal", "bg") is True
        assert tree.has_group("demo", "Normal") is False
        assert tree.to_dict() == {}

    def test_remove_keeps_siblings(self) -> None:
        tree = TweakTree()
        tree.set("demo", "Normal", "bg", "#1a1a2e")
        tree.set("demo", "Normal", "fg", "#c0c0c0")
        tree.set("demo", "Comment", "fg", "#6a6a8a")
        tree.remove_channel("demo", "Normal", "bg")
        tree.remove_group("demo", "Comment")
        assert tree.to_dict() == {"demo": {"Normal": {"fg": "#c0c0c0"}}}

    def test_remove_missing_returns_false(self) -> None:
        tree = TweakTree()
        assert tree.remove_channel("demo", "Normal", "bg") is False
        assert tree.remove_group("demo", "Normal") is False
        assert tree.remove_theme("demo") is False

    def test_to_dict_is_a_copy(self) -> None:
        tree = TweakTree()
        tree.set("demo", "Normal", "bg", "#1a1a2e")
        data = tree.to_dict()
        data["demo"]["Normal"]["bg"] = "#000000"
        assert tree.get("demo", "Normal", "bg") == "#1a1a2e"

    def test_from_dict_drops_invalid_entries(self, caplog: pytest.LogCaptureFixture) -> None:
        data = {
            "demo": {
                "Normal": {"bg": "#1A1A2E", "xx": "#000000", "fg": "red"},
                "Comment": "#ffffff",
            },
            "broken": [],
        }
        with caplog.at_level(logging.WARNING):
            tree = TweakTree.from_dict(data)
        assert tree.to_dict() == {"demo": {"Normal": {"bg": "#1a1a2e"}}}
        assert caplog.records
        assert tree.lossy is True

    def test_from_dict_non_object(self) -> None:
        assert len(TweakTree.from_dict(None)) == 0
        assert len(TweakTree.from_dict([1, 2])) == 0
        assert TweakTree.from_dict(None).lossy is False
        assert TweakTree.from_dict([1, 2]).lossy is True


class TestTweakStorePersistence:
    """Tests for loading and saving the tweak file."""

    def test_missing_file_loads_empty(self, store: TweakStore, tweak_path: Path) -> None:
        assert len(store.load()) == 0
        assert store.get_tweaked_groups() == []
        assert not tweak_path.exists()

    def test_set_tweak_writes_file(self, store: TweakStore, tweak_path: Path) -> None:
        store.set_tweak("Normal", "bg", "#1a1a2e")
        assert read_json(tweak_path) == {"demo": {"Normal": {"bg": "#1a1a2e"}}}
        assert tweak_path.read_text(encoding="utf-8").endswith("\n")

    def test_pruned_group_absent_from_file(self, store: TweakStore, tweak_path: Path) -> None:
        store.set_tweak("Normal", "bg", "#1a1a2e")
        store.remove_tweak("Normal", "bg")
        assert store.is_group_tweaked("Normal") is False
        assert read_json(tweak_path) == {}

    def test_round_trip_through_file(self, store: TweakStore, tweak_path: Path, host: MemoryHost) -> None:
        store.set_tweak("Normal", "bg", "#1a1a2e")
        store.set_tweak("Comment", "fg", "#7c7c9c")
        fresh = TweakStore(tweak_path, themes=host)
        assert fresh.get_tweak("Normal", "bg") == "#1a1a2e"
        assert fresh.is_tweaked("Comment", "fg")

    def test_malformed_file_loads_empty_and_is_backed_up(
        self, store: TweakStore, tweak_path: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        tweak_path.parent.mkdir(parents=True)
        tweak_path.write_text("{not json", encoding="utf-8")

        with caplog.at_level(logging.WARNING):
            assert len(store.load()) == 0
        assert "not valid JSON" in caplog.text

        store.set_tweak("Normal", "bg", "#1a1a2e")
        backup = tweak_path.with_name("recolor.json.bak")
        assert backup.read_text(encoding="utf-8") == "{not json"
        assert read_json(tweak_path) == {"demo": {"Normal": {"bg": "#1a1a2e"}}}

    def test_wrong_shape_file_is_backed_up(self, store: TweakStore, tweak_path: Path) -> None:
        original = json.dumps({"demo": {"Normal": {"bg": "red"}}, "other": ["oops"]})
        tweak_path.parent.mkdir(parents=True)
        tweak_path.write_text(original, encoding="utf-8")

        assert len(store.load()) == 0
        store.set_tweak("Comment", "fg", "#7c7c9c")

        backup = tweak_path.with_name("recolor.json.bak")
        assert backup.read_text(encoding="utf-8") == original
        assert read_json(tweak_path) == {"demo": {"Comment": {"fg": "#7c7c9c"}}}

    def test_clean_file_is_not_backed_up(self, store: TweakStore, tweak_path: Path) -> None:
        tweak_path.parent.mkdir(parents=True)
        tweak_path.write_text(json.dumps({"demo": {"Normal": {"bg": "#1A1A2E"}}}), encoding="utf-8")
        store.set_tweak("Comment", "fg", "#7c7c9c")
        assert not tweak_path.with_name("recolor.json.bak").exists()

    def test_blank_file_is_not_backed_up(self, store: TweakStore, tweak_path: Path) -> None:
        tweak_path.parent.mkdir(parents=True)
        tweak_path.write_text("  \n", encoding="utf-8")
        store.set_tweak("Normal", "bg", "#1a1a2e")
        assert not tweak_path.with_name("recolor.json.bak").exists()

    def test_save_failure_notifies(self, tmp_path: Path, host: MemoryHost) -> None:
        blocker = tmp_path / "blocker"
        blocker.write_text("", encoding="utf-8")
        path = blocker / "recolor.json"
        store = TweakStore(path, themes=host, notifier=host)

        store.set_tweak("Normal", "bg", "#1a1a2e")

        assert host.messages_at(Level.ERROR) == [f"Failed to save color tweaks to {path}"]
        # the in-memory store still holds the change
        assert store.get_tweak("Normal", "bg") == "#1a1a2e"

    def test_cache_until_invalidated(self, store: TweakStore, tweak_path: Path) -> None:
        store.set_tweak("Normal", "bg", "#1a1a2e")
        tweak_path.write_text(json.dumps({"demo": {"Normal": {"bg": "#000000"}}}), encoding="utf-8")
        assert store.get_tweak("Normal", "bg") == "#1a1a2e"
        store.invalidate_cache()
        assert store.get_tweak("Normal", "bg") == "#000000"


class TestTweakStoreThemes:
    """Tests for per-theme keying."""

    def test_theme_is_read_on_every_call(self, store: TweakStore, host: MemoryHost, tweak_path: Path) -> None:
        store.set_tweak("Normal", "bg", "#1a1a2e")
        host.activate("light")
        store.set_tweak("Normal", "bg", "#ffffff")
        assert read_json(tweak_path) == {
            "demo": {"Normal": {"bg": "#1a1a2e"}},
            "light": {"Normal": {"bg": "#ffffff"}},
        }
        assert store.get_tweak("Normal", "bg") == "#ffffff"
        assert store.themes_with_tweaks() == ["demo", "light"]

    def test_clear_scheme_only_touches_current_theme(self, tweak_path: Path) -> None:
        theme = StaticTheme("demo")
        store = TweakStore(tweak_path, themes=theme)
        store.set_tweak("Normal", "bg", "#1a1a2e")
        theme.name = "light"
        store.set_tweak("Normal", "fg", "#202020")
        store.clear_scheme()
        assert store.get_tweaked_groups() == []
        assert read_json(tweak_path) == {"demo": {"Normal": {"bg": "#1a1a2e"}}}

    def test_remove_group(self, store: TweakStore) -> None:
        store.set_tweak("Normal", "bg", "#1a1a2e")
        store.set_tweak("Normal", "fg", "#c0c0c0")
        store.remove_group("Normal")
        assert store.is_group_tweaked("Normal") is False

    def test_tweaked_groups_sorted_with_display_channel(self, store: TweakStore) -> None:
        store.set_tweak("Visual", "bg", "#333355")
        store.set_tweak("Comment", "fg", "#7c7c9c")
        store.set_tweak("Normal", "bg", "#1a1a2e")
        store.set_tweak("Normal", "fg", "#c0c0c0")
        assert store.get_tweaked_groups() == [
            TweakedGroup("Comment", "fg", {"fg": "#7c7c9c"}),
            TweakedGroup("Normal", "fg", {"bg": "#1a1a2e", "fg": "#c0c0c0"}),
            TweakedGroup("Visual", "bg", {"bg": "#333355"}),
        ]


class TestApplyTweaks:
    """Tests for re-application to the registry."""

    def test_apply_tweaks(self, store: TweakStore, host: MemoryHost, registry: HighlightRegistry) -> None:
        store.set_tweak("Normal", "bg", "#222244")
        store.set_tweak("Comment", "fg", "#7c7c9c")
        host.activate("demo")
        assert registry.get_color("Normal", "bg") == "#1a1a2e"

        assert store.apply_tweaks() == 2
        assert registry.get_color("Normal", "bg") == "#222244"
        assert registry.get_color("Comment", "fg") == "#7c7c9c"

    def test_apply_without_registry(self, tweak_path: Path) -> None:
        store = TweakStore(tweak_path, themes=StaticTheme("demo"))
        with pytest.raises(RuntimeError):
            store.apply_tweaks()
