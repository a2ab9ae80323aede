"""Color engine: hex/RGB/HSL conversion and bounded adjustments.

All colors are sRGB hex strings of the form ``#rrggbb``. Input is accepted
in either case, output is always lower-case. Every adjustment re-derives HSL
from the hex it is given, so the stored hex is the only source of truth.
"""

from __future__ import annotations

import math

from recolor.core.constants import CHANNELS, HEX_COLOR_RE
from recolor.errors import InvalidColorError, UnknownChannelError


def hex_to_rgb(hex_color: str) -> tuple[int, int, int]:
    """Parse ``#rrggbb`` (or ``rrggbb``) into an (r, g, b) tuple."""
    value = hex_color.lstrip("#")
    return int(value[0:2], 16), int(value[2:4], 16), int(value[4:6], 16)


def _to_byte(x: float) -> int:
    return max(0, min(255, math.floor(x + 0.5)))


def rgb_to_hex(r: float, g: float, b: float) -> str:
    """Format RGB as ``#rrggbb``, rounding and clamping each channel."""
    return f"#{_to_byte(r):02x}{_to_byte(g):02x}{_to_byte(b):02x}"


def int_to_hex(value: int) -> str:
    """Format a packed 24-bit integer (0xRRGGBB) as ``#rrggbb``."""
    return f"#{value & 0xFFFFFF:06x}"


def rgb_to_hsl(r: float, g: float, b: float) -> tuple[float, float, float]:
    """
    Convert RGB (0-255) to HSL.

    Returns hue in degrees [0, 360) and saturation/lightness in [0, 1].
    Achromatic input gives hue and saturation of exactly 0.
    """
    r, g, b = r / 255, g / 255, b / 255
    hi = max(r, g, b)
    lo = min(r, g, b)
    lightness = (hi + lo) / 2

    if hi == lo:
        return 0.0, 0.0, lightness

    d = hi - lo
    if lightness > 0.5:
        saturation = d / (2 - hi - lo)
    else:
        saturation = d / (hi + lo)

    if hi == r:
        hue = (g - b) / d + (6 if g < b else 0)
    elif hi == g:
        hue = (b - r) / d + 2
    else:
        hue = (r - g) / d + 4

    return hue * 60, saturation, lightness


def _hue_to_rgb(p: float, q: float, t: float) -> float:
    if t < 0:
        t += 1
    if t > 1:
        t -= 1
    if t < 1 / 6:
        return p + (q - p) * 6 * t
    if t < 1 / 2:
        return q
    if t < 2 / 3:
        return p + (q - p) * (2 / 3 - t) * 6
    return p


def hsl_to_rgb(h: float, s: float, l: float) -> tuple[float, float, float]:
    """Convert HSL back to unrounded RGB floats in 0-255."""
    if s == 0:
        return l * 255, l * 255, l * 255

    q = l * (1 + s) if l < 0.5 else l + s - l * s
    p = 2 * l - q
    hk = h / 360
    return (
        _hue_to_rgb(p, q, hk + 1 / 3) * 255,
        _hue_to_rgb(p, q, hk) * 255,
        _hue_to_rgb(p, q, hk - 1 / 3) * 255,
    )


def _clamp_unit(x: float) -> float:
    return max(0.0, min(1.0, x))


def adjust_hue(hex_color: str, delta: float) -> str:
    """Rotate hue by ``delta`` degrees, wrapping into [0, 360)."""
    h, s, l = rgb_to_hsl(*hex_to_rgb(hex_color))
    h = (h + delta) % 360
    return rgb_to_hex(*hsl_to_rgb(h, s, l))


def adjust_brightness(hex_color: str, delta: float) -> str:
    """Shift lightness by ``delta`` (e.g. 0.05 for +5%), clamped to [0, 1]."""
    h, s, l = rgb_to_hsl(*hex_to_rgb(hex_color))
    return rgb_to_hex(*hsl_to_rgb(h, s, _clamp_unit(l + delta)))


def adjust_saturation(hex_color: str, delta: float) -> str:
    """Shift saturation by ``delta``, clamped to [0, 1]."""
    h, s, l = rgb_to_hsl(*hex_to_rgb(hex_color))
    return rgb_to_hex(*hsl_to_rgb(h, _clamp_unit(s + delta), l))


def normalize_hex(text: str) -> str:
    """
    Validate user-supplied color text and return canonical ``#rrggbb``.

    Surrounding whitespace is stripped and a missing ``#`` is added.
    Anything that is not exactly six hex digits afterwards (including text
    with inner spaces) raises InvalidColorError.
    """
    match = HEX_COLOR_RE.match(text.strip())
    if not match:
        raise InvalidColorError(text)
    return "#" + match.group(1).lower()


def is_hex_color(text: str) -> bool:
    """Check whether text is a valid 6-digit hex color."""
    try:
        normalize_hex(text)
    except InvalidColorError:
        return False
    return True


def check_channel(channel: str) -> str:
    """Return channel unchanged if it is fg, bg or sp."""
    if channel not in CHANNELS:
        raise UnknownChannelError(channel)
    return channel
