"""Nested theme -> group -> channel -> color map with explicit pruning."""

from __future__ import annotations

import logging
from typing import Any, Optional

from recolor.core.color import is_hex_color, normalize_hex
from recolor.core.constants import CHANNELS

logger = logging.getLogger(__name__)

Channels = dict[str, str]
Groups = dict[str, Channels]


class TweakTree:
    """
    Owned tree of tweaks.

    Invariant: no theme maps to an empty group map and no group maps to an
    empty channel map. Every removal calls prune_empty_ancestors to keep it.
    """

    def __init__(self) -> None:
        self._themes: dict[str, Groups] = {}
        # set by from_dict when any input entry was discarded
        self.lossy = False

    @classmethod
    def from_dict(cls, data: Any) -> TweakTree:
        """
        Build a tree from decoded JSON.

        Leaves that are not a known channel mapped to a hex color are
        dropped, as are non-object levels. ``lossy`` records whether anything
        was dropped.
        """
        tree = cls()
        if not isinstance(data, dict):
            if data is not None:
                logger.warning("Ignoring tweak data of type %s", type(data).__name__)
                tree.lossy = True
            return tree

        for theme, groups in data.items():
            if not isinstance(groups, dict):
                logger.warning("Ignoring non-object tweaks for theme %r", theme)
                tree.lossy = True
                continue
            for group, channels in groups.items():
                if not isinstance(channels, dict):
                    logger.warning("Ignoring non-object tweaks for %r in %r", group, theme)
                    tree.lossy = True
                    continue
                for channel, color in channels.items():
                    if channel in CHANNELS and isinstance(color, str) and is_hex_color(color):
                        tree.set(theme, group, channel, normalize_hex(color))
                    else:
                        logger.warning(
                            "Dropping invalid tweak %s.%s=%r in %r", group, channel, color, theme
                        )
                        tree.lossy = True
        return tree

    def to_dict(self) -> dict[str, Groups]:
        """Deep copy suitable for JSON encoding."""
        return {
            theme: {group: dict(channels) for group, channels in groups.items()}
            for theme, groups in self._themes.items()
        }

    def set(self, theme: str, group: str, channel: str, color: str) -> None:
        self._themes.setdefault(theme, {}).setdefault(group, {})[channel] = color

    def get(self, theme: str, group: str, channel: str) -> Optional[str]:
        return self._themes.get(theme, {}).get(group, {}).get(channel)

    def channels(self, theme: str, group: str) -> Channels:
        return dict(self._themes.get(theme, {}).get(group, {}))

    def groups(self, theme: str) -> Groups:
        return {
            group: dict(channels)
            for group, channels in self._themes.get(theme, {}).items()
        }

    def themes(self) -> list[str]:
        return list(self._themes)

    def has_group(self, theme: str, group: str) -> bool:
        return bool(self._themes.get(theme, {}).get(group))

    def remove_channel(self, theme: str, group: str, channel: str) -> bool:
        """Remove a single channel. Returns True if something was removed."""
        channels = self._themes.get(theme, {}).get(group)
        if not channels or channel not in channels:
            return False
        del channels[channel]
        self.prune_empty_ancestors(theme, group)
        return True

    def remove_group(self, theme: str, group: str) -> bool:
        groups = self._themes.get(theme)
        if not groups or group not in groups:
            return False
        del groups[group]
        self.prune_empty_ancestors(theme)
        return True

    def remove_theme(self, theme: str) -> bool:
        return self._themes.pop(theme, None) is not None

    def prune_empty_ancestors(self, theme: str, group: Optional[str] = None) -> None:
        """Drop the group if it has no channels, then the theme if it has no groups."""
        groups = self._themes.get(theme)
        if groups is None:
            return
        if group is not None and not groups.get(group):
            groups.pop(group, None)
        if not groups:
            del self._themes[theme]

    def __len__(self) -> int:
        """Number of stored (theme, group, channel) tweaks."""
        return sum(
            len(channels)
            for groups in self._themes.values()
            for channels in groups.values()
        )
