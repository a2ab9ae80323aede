"""Render the picker as lines of text with truecolor swatches."""

from __future__ import annotations

from typing import Optional

from recolor.core.categories import CATEGORIES
from recolor.core.color import hex_to_rgb
from recolor.core.constants import CHANNELS
from recolor.picker.picker import Picker
from recolor.picker.state import PickerMode

SWATCH = "█"
TWEAKED = "•"
RESET = "\x1b[0m"

HELP_MOVE = " j/k:move  ,/.:hue  [/]:bright  {/}:sat"
HELP_ACTIONS = " Tab:channel  y:copy  p:paste  u:undo  #:pick  q:quit"
HELP_EDITED = " Tab:channel  y:copy  p:paste  u:undo  U:undo all  #:pick  q:quit"
HELP_BROWSE_MOVE = " C-j/k:move  ,/.:hue  [/]:bright  {/}:sat  C-c:clear"
HELP_BROWSE_ACTIONS = " Tab:channel  C-y:copy  C-p:paste  C-u:undo  #:pick  Esc:quit"


class PickerView:
    """
    Text rendering of a picker session.

    Each group line is ``<prefix><marker><name> <channels>`` where prefix is
    `` > `` for the selection, marker is ``•`` for tweaked groups and the
    active channel is bracketed: ``[fg]#aabbcc█  bg #ddeeff█``.
    """

    def __init__(self, picker: Picker, swatches: bool = True) -> None:
        self.picker = picker
        self.swatches = swatches

    def _swatch(self, color: str) -> str:
        if not self.swatches:
            return SWATCH
        r, g, b = hex_to_rgb(color)
        return f"\x1b[38;2;{r};{g};{b}m{SWATCH}{RESET}"

    def format_channels(self, group: str) -> str:
        colors = self.picker.registry.get_all_colors(group)
        active = self.picker.active_channel(group)
        parts = []
        for ch in CHANNELS:
            color = colors.get(ch)
            if not color:
                continue
            label = f"[{ch}]" if ch == active else f" {ch} "
            parts.append(f"{label}{color}{self._swatch(color)}")
        return " ".join(parts) if parts else "(none)"

    def _group_line(
        self,
        index: int,
        name: str,
        width: int,
        detail: Optional[str] = None,
    ) -> str:
        prefix = " > " if index == self.picker.selected else "   "
        marker = TWEAKED if self.picker.store.is_group_tweaked(name) else " "
        channels = detail if detail is not None else self.format_channels(name)
        return f"{prefix}{marker}{name:<{width}} {channels}"

    def render(self) -> list[str]:
        mode = self.picker.mode
        if mode is PickerMode.CATEGORIES:
            return self._render_categories()
        if mode is PickerMode.CURSOR:
            return self._render_cursor()
        if mode is PickerMode.BROWSE:
            return self._render_browse()
        if mode is PickerMode.EDITED:
            return self._render_edited()
        return []

    def _render_categories(self) -> list[str]:
        width = self.picker.config.name_width
        lines = [HELP_MOVE, HELP_ACTIONS, ""]
        index = 1
        for category in CATEGORIES:
            lines.append(f" {category.name}")
            for entry in category.groups:
                lines.append(self._group_line(index, entry.name, width))
                index += 1
            lines.append("")
        return lines

    def _render_cursor(self) -> list[str]:
        width = self.picker.config.name_width
        lines = [HELP_MOVE, HELP_ACTIONS, "", " Groups at cursor", ""]
        for index, item in enumerate(self.picker.items, start=1):
            lines.append(self._group_line(index, item.name, width))
        return lines

    def _render_browse(self) -> list[str]:
        config = self.picker.config
        query = self.picker.search_query
        lines = [
            f" Search: {query or '(type to filter)'}_",
            " " + "-" * (config.browse_width - 4),
        ]

        items = self.picker.items
        total = len(items)
        # header, separator, blank, count and two help lines
        max_display = config.height - 7
        scroll = max(0, self.picker.selected - max_display)
        start, end = scroll + 1, min(scroll + max_display, total)

        for index in range(start, end + 1):
            item = items[index - 1]
            detail = f"-> {item.link_target or '?'}" if item.is_link else None
            lines.append(self._group_line(index, item.name, config.browse_name_width, detail))

        lines.append("")
        overall = self.picker.state.total_count
        if total == overall:
            lines.append(f" {start}-{end} of {total} groups")
        else:
            lines.append(f" {start}-{end} of {total} (filtered from {overall})")
        lines.extend([HELP_BROWSE_MOVE, HELP_BROWSE_ACTIONS])
        return lines

    def _render_edited(self) -> list[str]:
        width = self.picker.config.name_width
        lines = [
            f" Edited Colors ({self.picker.store.theme})",
            "",
            HELP_MOVE,
            HELP_EDITED,
            "",
        ]
        for index, item in enumerate(self.picker.items, start=1):
            lines.append(self._group_line(index, item.name, width))
        lines.append("")
        lines.append(f" {len(self.picker.items)} tweaked groups")
        return lines
