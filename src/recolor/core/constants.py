"""Shared constants for color handling."""

import re

# Color channels in display/priority order
FG = "fg"
BG = "bg"
SP = "sp"
CHANNELS: tuple[str, ...] = (FG, BG, SP)

CHANNEL_NAMES = {
    FG: "foreground",
    BG: "background",
    SP: "special",
}

# "#rrggbb" with the leading '#' optional, case-insensitive
HEX_COLOR_RE = re.compile(r"^#?([0-9a-fA-F]{6})$")

# Fallback shown in prompts when a channel has no color yet
DEFAULT_PROMPT_COLOR = "#ffffff"

# Theme name used when the editor reports none
DEFAULT_THEME = "default"

# Links are followed at most this many times (guards cycles)
MAX_LINK_DEPTH = 10

# Default adjustment steps
HUE_STEP = 10             # degrees
BRIGHTNESS_STEP = 0.05    # 5% lightness
SATURATION_STEP = 0.05    # 5% saturation
