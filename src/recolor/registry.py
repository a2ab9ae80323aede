"""Highlight registry: channel-level view over the live highlight state."""

from __future__ import annotations

import logging
from typing import Optional

from recolor.core.color import check_channel, normalize_hex
from recolor.core.constants import BG, CHANNELS, FG, MAX_LINK_DEPTH
from recolor.host.base import Direct, HighlightBackend, HighlightDef, Link

logger = logging.getLogger(__name__)


class HighlightRegistry:
    """
    Reads and writes highlight-group colors through a HighlightBackend.

    Channel queries on linked groups follow the link chain (at most
    MAX_LINK_DEPTH hops). Writes are visible immediately to whatever renders
    the backend; nothing here persists.
    """

    def __init__(self, backend: HighlightBackend) -> None:
        self.backend = backend

    def resolve_link(self, group: str) -> str:
        """Name of the group a link chain ends at."""
        current = group
        for _ in range(MAX_LINK_DEPTH):
            definition = self.backend.get(current)
            if not isinstance(definition, Link):
                break
            current = definition.target
        return current

    def _resolved(self, group: str) -> Optional[Direct]:
        definition = self.backend.get(self.resolve_link(group))
        if isinstance(definition, Direct):
            return definition
        return None

    def get_color(self, group: str, channel: str) -> Optional[str]:
        check_channel(channel)
        resolved = self._resolved(group)
        return resolved.get(channel) if resolved else None

    def get_all_colors(self, group: str) -> dict[str, str]:
        """Set channels of a group as {"fg": ..., "bg": ..., "sp": ...}."""
        resolved = self._resolved(group)
        return resolved.colors() if resolved else {}

    def get_available_channels(self, group: str) -> list[str]:
        """Channels that currently hold a color, in fg/bg/sp order."""
        colors = self.get_all_colors(group)
        return [ch for ch in CHANNELS if ch in colors]

    def set_color(self, group: str, channel: str, color: str) -> None:
        """Set one channel; a linked group is detached into a direct definition."""
        check_channel(channel)
        current = self.backend.get(group)
        if isinstance(current, Link):
            logger.debug("Detaching %s from link to %s", group, current.target)
            base = self._resolved(group) or Direct()
        else:
            base = current or Direct()
        self.backend.set(group, base.with_color(channel, normalize_hex(color)))

    def get_definition(self, group: str) -> Optional[HighlightDef]:
        """Raw definition without following links."""
        return self.backend.get(group)

    def group_names(self) -> list[str]:
        return self.backend.names()

    def primary_channel(self, group: str) -> str:
        """Channel to show first: bg when only bg is set, otherwise fg."""
        colors = self.get_all_colors(group)
        if BG in colors and FG not in colors:
            return BG
        return FG

    def color_info(self, group: str) -> tuple[str, Optional[str]]:
        """
        Short color summary for display.

        Returns (text, kind) where kind is "fg", "bg", "both" or None.
        """
        definition = self.backend.get(group)
        if isinstance(definition, Link):
            return f"-> {definition.target}", None

        colors = definition.colors() if definition else {}
        fg = colors.get(FG)
        bg = colors.get(BG)
        if fg and bg:
            return f"{fg} / {bg}", "both"
        if fg:
            return fg, FG
        if bg:
            return bg, BG
        return "(none)", None
