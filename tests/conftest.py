"""Pytest configuration and shared fixtures."""

from pathlib import Path

import pytest

from recolor.config import RecolorConfig
from recolor.host.base import Direct, Link
from recolor.host.memory import MemoryHost
from recolor.picker import Picker
from recolor.registry import HighlightRegistry
from recolor.session import Recolor
from recolor.store.tweaks import TweakStore


def demo_groups() -> dict:
    """A small theme with direct, multi-channel and linked groups."""
    return {
        "Normal": Direct(fg="#c0c0c0", bg="#1a1a2e"),
        "Comment": Direct(fg="#6a6a8a"),
        "Visual": Direct(bg="#333355"),
        "Search": Direct(fg="#000000", bg="#e0c060", sp="#ff0000"),
        "String": Direct(fg="#98c379"),
        "Keyword": Direct(fg="#c678dd"),
        "@comment": Link("Comment"),
        "Empty": Direct(),
    }


@pytest.fixture
def tweak_path(tmp_path: Path) -> Path:
    """Location of the tweak file (not created)."""
    return tmp_path / "config" / "recolor" / "recolor.json"


@pytest.fixture
def host() -> MemoryHost:
    """In-memory editor with a 'demo' and a 'light' theme, 'demo' active."""
    return MemoryHost(
        {
            "demo": demo_groups(),
            "light": {"Normal": Direct(fg="#202020", bg="#fafafa")},
        },
        theme="demo",
    )


@pytest.fixture
def registry(host: MemoryHost) -> HighlightRegistry:
    return HighlightRegistry(host)


@pytest.fixture
def store(tweak_path: Path, host: MemoryHost, registry: HighlightRegistry) -> TweakStore:
    return TweakStore(tweak_path, themes=host, registry=registry, notifier=host)


@pytest.fixture
def session(tweak_path: Path, host: MemoryHost) -> Recolor:
    """A set-up session writing to the temporary tweak file."""
    rc = Recolor(host, RecolorConfig(tweaks_path=tweak_path))
    rc.setup()
    return rc


@pytest.fixture
def picker(session: Recolor) -> Picker:
    return session.picker
