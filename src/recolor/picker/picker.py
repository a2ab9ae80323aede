"""Picker state machine: turns user intents into color and tweak changes.

Flow for every color change: read the active channel from the registry,
compute the new color, write it back to the registry so it shows at once,
then record the absolute result in the tweak store (which saves it).
"""

from __future__ import annotations

import logging
from typing import Callable, Optional, Sequence, Union

from recolor import browse
from recolor.config import RecolorConfig
from recolor.core import color as engine
from recolor.core.categories import build_flat_list
from recolor.core.constants import DEFAULT_PROMPT_COLOR, FG
from recolor.cursor import CursorGroup
from recolor.errors import InvalidColorError
from recolor.host.base import Clipboard, Level, Notifier, Prompt, ThemeActivator
from recolor.picker.state import PickerItem, PickerMode, PickerState
from recolor.registry import HighlightRegistry
from recolor.store.tweaks import TweakStore

logger = logging.getLogger(__name__)


class Picker:
    """
    Interactive highlight-group picker.

    Exactly one mode is active at a time; opening any mode closes the
    current session first. All per-session state lives in ``state`` and is
    reset by close().
    """

    def __init__(
        self,
        registry: HighlightRegistry,
        store: TweakStore,
        notifier: Notifier,
        clipboard: Clipboard,
        prompt: Prompt,
        activator: ThemeActivator,
        config: Optional[RecolorConfig] = None,
    ) -> None:
        self.registry = registry
        self.store = store
        self.notifier = notifier
        self.clipboard = clipboard
        self.prompt = prompt
        self.activator = activator
        self.config = config or RecolorConfig()
        self.state = PickerState()

    # -------------------------------------------------------------------------
    # Session lifecycle
    # -------------------------------------------------------------------------

    @property
    def is_open(self) -> bool:
        return self.state.is_open

    @property
    def mode(self) -> Optional[PickerMode]:
        return self.state.mode

    @property
    def items(self) -> list[PickerItem]:
        return self.state.items

    @property
    def selected(self) -> int:
        return self.state.selected

    @property
    def selected_item(self) -> Optional[PickerItem]:
        return self.state.selected_item

    @property
    def search_query(self) -> str:
        return self.state.search_query

    def _start(self, mode: PickerMode, items: list) -> None:
        self.close()
        self.state.mode = mode
        self.state.items = items
        self.state.selected = 1
        logger.debug("Picker opened in %s mode with %d item(s)", mode.value, len(items))

    def open(self) -> None:
        """Open with the curated category list."""
        self._start(PickerMode.CATEGORIES, build_flat_list())

    def open_cursor(self, groups: Sequence[Union[str, CursorGroup]]) -> bool:
        """Open with the groups found at the cursor. Returns False if none."""
        if not groups:
            self._notify("No highlight groups at cursor", Level.INFO)
            return False
        items = [
            g if isinstance(g, CursorGroup)
            else CursorGroup(g, self.registry.primary_channel(g), "cursor")
            for g in groups
        ]
        self._start(PickerMode.CURSOR, items)
        return True

    def open_browse(self) -> None:
        """Open with every highlight group and an empty search."""
        all_groups = browse.get_all_groups(self.registry)
        self._start(PickerMode.BROWSE, list(all_groups))
        self.state.all_groups = all_groups
        self.state.search_query = ""

    def open_edited(self) -> bool:
        """Open with the tweaked groups of the current theme. Returns False if none."""
        tweaked = self.store.get_tweaked_groups()
        if not tweaked:
            self._notify("No tweaked colors for current scheme", Level.INFO)
            return False
        self._start(PickerMode.EDITED, tweaked)
        return True

    def close(self) -> None:
        """End the session and forget all of its state. Safe to call twice."""
        if self.state.is_open:
            logger.debug("Picker closed (%s mode)", self.state.mode.value)
        self.state.reset()

    # -------------------------------------------------------------------------
    # Selection and channels
    # -------------------------------------------------------------------------

    def move(self, delta: int) -> None:
        """Move the selection, wrapping at both ends."""
        count = len(self.state.items)
        if count == 0:
            return
        selected = self.state.selected + delta
        if selected < 1:
            selected = count
        elif selected > count:
            selected = 1
        self.state.selected = selected

    def active_channel(self, group: str) -> str:
        """Active channel of a group, defaulting to its first available one."""
        channel = self.state.group_channels.get(group)
        if channel is None:
            available = self.registry.get_available_channels(group)
            channel = available[0] if available else FG
            self.state.group_channels[group] = channel
        return channel

    def cycle_channel(self, reverse: bool = False) -> None:
        """Rotate the selected group's active channel among the set ones."""
        item = self.selected_item
        if item is None:
            return
        available = self.registry.get_available_channels(item.name)
        if len(available) <= 1:
            return

        current = self.active_channel(item.name)
        if current in available:
            idx = (available.index(current) + (-1 if reverse else 1)) % len(available)
        else:
            # remembered channel was cleared; land on the first one set
            idx = 0
        self.state.group_channels[item.name] = available[idx]
        self._notify(f"{item.name} channel: {available[idx]}", Level.INFO)

    # -------------------------------------------------------------------------
    # Color changes
    # -------------------------------------------------------------------------

    def _current_color(self) -> Optional[tuple[str, str, str]]:
        """(group, channel, color) for the selection, warning if unset."""
        item = self.selected_item
        if item is None:
            return None
        channel = self.active_channel(item.name)
        current = self.registry.get_color(item.name, channel)
        if current is None:
            self._notify(f"No {channel} color set for {item.name}", Level.WARN)
            return None
        return item.name, channel, current

    def _apply(self, group: str, channel: str, color: str) -> str:
        self.registry.set_color(group, channel, color)
        self.store.set_tweak(group, channel, color)
        self._notify(f"{group} {channel}: {color}", Level.INFO)
        return color

    def _adjust(self, fn: Callable[[str, float], str], delta: float) -> Optional[str]:
        found = self._current_color()
        if found is None:
            return None
        group, channel, current = found
        return self._apply(group, channel, fn(current, delta))

    def adjust_hue(self, delta: Optional[float] = None) -> Optional[str]:
        step = self.config.hue_step if delta is None else delta
        return self._adjust(engine.adjust_hue, step)

    def adjust_brightness(self, delta: Optional[float] = None) -> Optional[str]:
        step = self.config.brightness_step if delta is None else delta
        return self._adjust(engine.adjust_brightness, step)

    def adjust_saturation(self, delta: Optional[float] = None) -> Optional[str]:
        step = self.config.saturation_step if delta is None else delta
        return self._adjust(engine.adjust_saturation, step)

    def copy(self) -> Optional[str]:
        """Copy the active channel's color to the clipboard."""
        found = self._current_color()
        if found is None:
            return None
        color = found[2]
        self.clipboard.write(color)
        self._notify(f"Copied: {color}", Level.INFO)
        return color

    def paste(self) -> Optional[str]:
        """Set the active channel from the clipboard."""
        item = self.selected_item
        if item is None:
            return None
        text = self.clipboard.read()
        try:
            # clipboard text may carry line breaks or spacing from the copy
            color = engine.normalize_hex("".join(text.split()))
        except InvalidColorError:
            self._notify(f"Invalid hex color in clipboard: {text.strip()}", Level.ERROR)
            return None
        return self._apply(item.name, self.active_channel(item.name), color)

    def pick_direct(self, text: str) -> Optional[str]:
        """Set the active channel to a literal hex color."""
        item = self.selected_item
        if item is None:
            return None
        try:
            color = engine.normalize_hex(text)
        except InvalidColorError:
            self._notify("Invalid hex color. Use format: #RRGGBB", Level.ERROR)
            return None
        return self._apply(item.name, self.active_channel(item.name), color)

    def pick(self) -> Optional[str]:
        """Prompt for a color, defaulting to the current one."""
        item = self.selected_item
        if item is None:
            return None
        channel = self.active_channel(item.name)
        current = self.registry.get_color(item.name, channel) or DEFAULT_PROMPT_COLOR
        value = self.prompt.ask(f"{item.name} ({channel}): ", current)
        if value is None:
            return None
        return self.pick_direct(value)

    # -------------------------------------------------------------------------
    # Undo
    # -------------------------------------------------------------------------

    def _reload_theme(self) -> str:
        theme = self.store.theme
        self.activator.activate(theme)
        return theme

    def undo_group(self) -> bool:
        """Drop every tweak of the selected group and restore theme colors."""
        item = self.selected_item
        if item is None:
            return False
        name = item.name
        if not self.store.is_group_tweaked(name):
            self._notify(f"{name} is not tweaked", Level.INFO)
            return False

        self.store.remove_group(name)
        self._reload_theme()
        self.store.apply_tweaks()
        self._notify(f"Restored {name}", Level.INFO)

        if self.state.mode is PickerMode.EDITED:
            self.state.items = self.store.get_tweaked_groups()
            if not self.state.items:
                self._notify("No more tweaked colors", Level.INFO)
                self.close()
            elif self.state.selected > len(self.state.items):
                self.state.selected = len(self.state.items)
        return True

    def undo_all(self) -> None:
        """Drop every tweak of the current theme, restore it and close."""
        self.store.clear_scheme()
        theme = self._reload_theme()
        self._notify(f"Restored all colors for {theme}", Level.INFO)
        self.close()

    # -------------------------------------------------------------------------
    # Browse search
    # -------------------------------------------------------------------------

    def _update_search(self, query: str) -> None:
        if self.state.mode is not PickerMode.BROWSE:
            return
        self.state.search_query = query
        self.state.selected = 1
        if self.state.all_groups is not None:
            self.state.items = browse.filter_groups(self.state.all_groups, query)

    def search_append(self, char: str) -> None:
        self._update_search(self.state.search_query + char)

    def search_backspace(self) -> None:
        if self.state.search_query:
            self._update_search(self.state.search_query[:-1])

    def search_clear(self) -> None:
        self._update_search("")

    def _notify(self, message: str, level: Level) -> None:
        self.notifier.notify(message, level)
