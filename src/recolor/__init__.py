"""
recolor: interactive highlight-group color tweaking

Adjust the colors of an editor theme's highlight groups and keep the
adjustments per theme, so they come back after theme switches and restarts.

Quick Start:
    >>> from recolor import Recolor, MemoryHost, Direct
    >>> host = MemoryHost({"demo": {"Normal": Direct(fg="#c0c0c0", bg="#1a1a2e")}})
    >>> rc = Recolor(host)
    >>> rc.setup()
    >>> rc.open_picker()
    >>> rc.picker.adjust_hue(10)

Features:
    - Hex/RGB/HSL color engine with clamped hue, brightness, saturation steps
    - Per-theme tweak file (JSON) with immediate save and re-application
    - Picker over curated categories, cursor groups, all groups, or edits
    - Fuzzy search across every highlight group
"""

__version__ = "0.1.0"

# Color engine
from recolor.core.color import (
    adjust_brightness,
    adjust_hue,
    adjust_saturation,
    hex_to_rgb,
    hsl_to_rgb,
    normalize_hex,
    rgb_to_hex,
    rgb_to_hsl,
)

# Registry and storage
from recolor.registry import HighlightRegistry
from recolor.store import TweakedGroup, TweakStore, TweakTree

# Host adapters
from recolor.host import Direct, Level, Link, MemoryHost, StaticTheme

# Picker and session
from recolor.browse import filter_groups
from recolor.config import RecolorConfig
from recolor.errors import InvalidColorError, RecolorError, UnknownChannelError
from recolor.picker import Picker, PickerMode, PickerView
from recolor.session import Recolor

__all__ = [
    # Version
    "__version__",
    # Color engine
    "adjust_brightness",
    "adjust_hue",
    "adjust_saturation",
    "hex_to_rgb",
    "hsl_to_rgb",
    "normalize_hex",
    "rgb_to_hex",
    "rgb_to_hsl",
    # Registry and storage
    "HighlightRegistry",
    "TweakStore",
    "TweakTree",
    "TweakedGroup",
    # Host
    "Direct",
    "Level",
    "Link",
    "MemoryHost",
    "StaticTheme",
    # Picker and session
    "filter_groups",
    "RecolorConfig",
    "InvalidColorError",
    "RecolorError",
    "UnknownChannelError",
    "Picker",
    "PickerMode",
    "PickerView",
    "Recolor",
]
