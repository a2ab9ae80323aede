"""Tweak store: per-theme color overrides persisted as a JSON file.

The store is loaded lazily and cached; every mutation is load, modify, save
in one synchronous step. The active theme is asked for on every call and
never cached, because the editor may switch themes between calls. After a
switch, call invalidate_cache() and then apply_tweaks().
"""

from __future__ import annotations

import json
import logging
import shutil
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from recolor.core.color import check_channel
from recolor.core.constants import BG, FG
from recolor.host.base import Level, Notifier, ThemeAccessor
from recolor.registry import HighlightRegistry
from recolor.store.tree import TweakTree

logger = logging.getLogger(__name__)


@dataclass
class TweakedGroup:
    """A group with at least one tweak in the current theme."""
    name: str
    channel: str
    tweaks: dict[str, str] = field(default_factory=dict)


class TweakStore:
    """Cached, lazily loaded, eagerly saved tweak map."""

    def __init__(
        self,
        path: Path | str,
        themes: ThemeAccessor,
        registry: Optional[HighlightRegistry] = None,
        notifier: Optional[Notifier] = None,
    ) -> None:
        self.path = Path(path)
        self.themes = themes
        self.registry = registry
        self.notifier = notifier
        self._cache: Optional[TweakTree] = None
        self._needs_backup = False

    @property
    def theme(self) -> str:
        return self.themes.current_theme()

    # -------------------------------------------------------------------------
    # Persistence
    # -------------------------------------------------------------------------

    def load(self) -> TweakTree:
        """Return the cached tree, reading the file on first use."""
        if self._cache is not None:
            return self._cache

        self._needs_backup = False
        try:
            content = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            self._cache = TweakTree()
            return self._cache
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("Could not read tweaks from %s: %s", self.path, e)
            self._needs_backup = True
            self._cache = TweakTree()
            return self._cache

        if not content.strip():
            self._cache = TweakTree()
            return self._cache

        try:
            data = json.loads(content)
        except json.JSONDecodeError as e:
            logger.warning("Tweak file %s is not valid JSON, starting empty: %s", self.path, e)
            self._needs_backup = True
            data = None

        self._cache = TweakTree.from_dict(data)
        if self._cache.lossy:
            self._needs_backup = True
        return self._cache

    def save(self) -> bool:
        """Overwrite the tweak file with the whole store. Returns success."""
        tree = self.load()
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            if self._needs_backup and self.path.exists():
                backup = self.path.with_name(self.path.name + ".bak")
                shutil.copyfile(self.path, backup)
                logger.warning("Kept previous tweak file as %s", backup)
            with open(self.path, "w", encoding="utf-8") as f:
                json.dump(tree.to_dict(), f, indent=2)
                f.write("\n")
        except OSError as e:
            logger.error("Failed to save color tweaks to %s: %s", self.path, e)
            self._notify(f"Failed to save color tweaks to {self.path}", Level.ERROR)
            return False

        self._needs_backup = False
        logger.debug("Saved %d tweak(s) to %s", len(tree), self.path)
        return True

    def invalidate_cache(self) -> None:
        """Force the next load() to re-read the file."""
        self._cache = None

    # -------------------------------------------------------------------------
    # Mutations (current theme)
    # -------------------------------------------------------------------------

    def set_tweak(self, group: str, channel: str, color: str) -> None:
        check_channel(channel)
        self.load().set(self.theme, group, channel, color)
        self.save()

    def remove_tweak(self, group: str, channel: str) -> None:
        if self.load().remove_channel(self.theme, group, channel):
            self.save()

    def remove_group(self, group: str) -> None:
        if self.load().remove_group(self.theme, group):
            self.save()

    def clear_scheme(self) -> None:
        self.load().remove_theme(self.theme)
        self.save()

    # -------------------------------------------------------------------------
    # Queries (current theme, no I/O once cached)
    # -------------------------------------------------------------------------

    def get_tweak(self, group: str, channel: str) -> Optional[str]:
        return self.load().get(self.theme, group, channel)

    def is_tweaked(self, group: str, channel: str) -> bool:
        return self.get_tweak(group, channel) is not None

    def is_group_tweaked(self, group: str) -> bool:
        return self.load().has_group(self.theme, group)

    def get_tweaked_groups(self) -> list[TweakedGroup]:
        """Tweaked groups sorted by name, each with its display channel."""
        result = []
        for name, channels in self.load().groups(self.theme).items():
            channel = BG if BG in channels and FG not in channels else FG
            result.append(TweakedGroup(name=name, channel=channel, tweaks=channels))
        result.sort(key=lambda g: g.name)
        return result

    def themes_with_tweaks(self) -> list[str]:
        return sorted(self.load().themes())

    # -------------------------------------------------------------------------
    # Re-application
    # -------------------------------------------------------------------------

    def apply_tweaks(self) -> int:
        """Push every stored color of the current theme into the registry."""
        if self.registry is None:
            raise RuntimeError("apply_tweaks() needs a HighlightRegistry")
        applied = 0
        for group, channels in self.load().groups(self.theme).items():
            for channel, color in channels.items():
                self.registry.set_color(group, channel, color)
                applied += 1
        logger.debug("Applied %d tweak(s) for theme %s", applied, self.theme)
        return applied

    def _notify(self, message: str, level: Level) -> None:
        if self.notifier is not None:
            self.notifier.notify(message, level)
