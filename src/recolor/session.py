"""Recolor session: wires registry, tweak store and picker to a host."""

from __future__ import annotations

import logging
from typing import Callable, Optional, Protocol

from recolor.config import RecolorConfig
from recolor.core import color as engine
from recolor.core.constants import BG, DEFAULT_PROMPT_COLOR
from recolor.cursor import collect_cursor_groups
from recolor.errors import InvalidColorError
from recolor.host.base import (
    Clipboard,
    CursorProvider,
    HighlightBackend,
    Level,
    Notifier,
    Prompt,
    ThemeAccessor,
    ThemeActivator,
    ThemeEvents,
)
from recolor.picker.picker import Picker
from recolor.registry import HighlightRegistry
from recolor.store.tweaks import TweakStore

logger = logging.getLogger(__name__)

BACKGROUND_GROUP = "Normal"


class Host(
    ThemeAccessor,
    HighlightBackend,
    CursorProvider,
    Clipboard,
    Prompt,
    ThemeActivator,
    Notifier,
    Protocol,
):
    """Everything recolor needs from the editor."""


class Recolor:
    """
    One recolor instance bound to a host editor.

    Call setup() at startup. When the host switches themes it must call
    on_theme_activated(); setup() subscribes automatically, once, when the
    host supports ThemeEvents.
    """

    def __init__(self, host: Host, config: Optional[RecolorConfig] = None) -> None:
        self.host = host
        self.config = config or RecolorConfig()
        self.registry = HighlightRegistry(host)
        self.store = TweakStore(
            self.config.resolved_tweaks_path,
            themes=host,
            registry=self.registry,
            notifier=host,
        )
        self.picker = Picker(
            self.registry,
            self.store,
            notifier=host,
            clipboard=host,
            prompt=host,
            activator=host,
            config=self.config,
        )
        self._subscribed = False

    def setup(self) -> int:
        """Apply stored tweaks for the current theme and watch theme changes."""
        if isinstance(self.host, ThemeEvents) and not self._subscribed:
            self.host.on_theme_activated(self.on_theme_activated)
            self._subscribed = True
        logger.info("Using tweak file %s", self.store.path)
        return self.store.apply_tweaks()

    def on_theme_activated(self) -> int:
        """Re-read the tweak file and re-apply it for the new theme."""
        self.store.invalidate_cache()
        return self.store.apply_tweaks()

    # -------------------------------------------------------------------------
    # Picker entry points
    # -------------------------------------------------------------------------

    def open_picker(self) -> None:
        self.picker.open()

    def open_browse(self) -> None:
        self.picker.open_browse()

    def open_edited(self) -> bool:
        return self.picker.open_edited()

    def inspect_cursor(self) -> bool:
        """Open the picker on the groups under the cursor."""
        groups = collect_cursor_groups(self.host.inspect(), self.registry)
        return self.picker.open_cursor(groups)

    # -------------------------------------------------------------------------
    # Background shortcuts (Normal.bg, no picker needed)
    # -------------------------------------------------------------------------

    def _set_background(self, color: str) -> str:
        self.registry.set_color(BACKGROUND_GROUP, BG, color)
        self.store.set_tweak(BACKGROUND_GROUP, BG, color)
        self.host.notify(f"Background: {color}", Level.INFO)
        return color

    def _adjust_background(self, fn: Callable[[str, float], str], delta: float) -> Optional[str]:
        current = self.registry.get_color(BACKGROUND_GROUP, BG)
        if current is None:
            self.host.notify("No background color set", Level.WARN)
            return None
        return self._set_background(fn(current, delta))

    def adjust_bg_brightness(self, delta: Optional[float] = None) -> Optional[str]:
        step = self.config.brightness_step if delta is None else delta
        return self._adjust_background(engine.adjust_brightness, step)

    def adjust_bg_hue(self, delta: Optional[float] = None) -> Optional[str]:
        step = self.config.hue_step if delta is None else delta
        return self._adjust_background(engine.adjust_hue, step)

    def pick_bg_color(self) -> Optional[str]:
        current = self.registry.get_color(BACKGROUND_GROUP, BG) or DEFAULT_PROMPT_COLOR
        value = self.host.ask("Background color: ", current)
        if value is None:
            return None
        try:
            color = engine.normalize_hex(value)
        except InvalidColorError:
            self.host.notify("Invalid hex color. Use format: #RRGGBB", Level.ERROR)
            return None
        return self._set_background(color)
