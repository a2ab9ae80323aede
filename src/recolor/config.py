"""User configuration and tweak-file location."""

from __future__ import annotations

import os
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Optional

from recolor.core.constants import BRIGHTNESS_STEP, HUE_STEP, SATURATION_STEP

TWEAKS_FILE_NAME = "recolor.json"
TWEAKS_PATH_ENV = "RECOLOR_TWEAKS_PATH"


def default_tweaks_path() -> Path:
    """Tweak file under $XDG_CONFIG_HOME (or ~/.config)."""
    xdg = os.environ.get("XDG_CONFIG_HOME")
    base = Path(xdg) if xdg else Path.home() / ".config"
    return base / "recolor" / TWEAKS_FILE_NAME


def resolve_tweaks_path(path: Optional[Path | str] = None) -> Path:
    """
    Pick the tweak file location.

    Precedence: explicit path, $RECOLOR_TWEAKS_PATH, the XDG default.
    """
    if path is not None:
        return Path(path).expanduser()
    env_path = os.environ.get(TWEAKS_PATH_ENV)
    if env_path:
        return Path(env_path).expanduser()
    return default_tweaks_path()


@dataclass(frozen=True)
class RecolorConfig:
    """Adjustment steps, picker layout and tweak-file location."""

    hue_step: float = HUE_STEP
    brightness_step: float = BRIGHTNESS_STEP
    saturation_step: float = SATURATION_STEP
    tweaks_path: Optional[Path] = None

    # Picker layout
    width: int = 75
    height: int = 25
    name_width: int = 26
    browse_width: int = 100
    browse_name_width: int = 46

    def with_overrides(self, **opts: Any) -> RecolorConfig:
        """Copy with the given fields replaced; unknown keys raise TypeError."""
        known = {f.name for f in fields(self)}
        unknown = sorted(set(opts) - known)
        if unknown:
            raise TypeError(f"Unknown config option(s): {', '.join(unknown)}")
        if opts.get("tweaks_path") is not None:
            opts["tweaks_path"] = Path(opts["tweaks_path"]).expanduser()
        return replace(self, **opts)

    @property
    def resolved_tweaks_path(self) -> Path:
        return resolve_tweaks_path(self.tweaks_path)
