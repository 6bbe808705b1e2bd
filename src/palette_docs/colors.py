import math
import re

from .errors import ColorFormatError

HEX_RE = re.compile(r"[0-9a-fA-F]{6}")


# ------------------------------------------------------------
# Color helpers
# ------------------------------------------------------------


def hex_to_rgb(hex_color: str) -> tuple[int, int, int]:
    """
    Parse "#rrggbb" or "rrggbb" into integer channels.
    """
    digits = hex_color[1:] if hex_color.startswith("#") else hex_color
    if not HEX_RE.fullmatch(digits):
        raise ColorFormatError(f"invalid hex color: {digits}")

    return (
        int(digits[0:2], 16),
        int(digits[2:4], 16),
        int(digits[4:6], 16),
    )


def rgb_to_hex(r: int, g: int, b: int) -> str:
    return f"#{r:02x}{g:02x}{b:02x}"


def _round_half_up(x: float) -> int:
    # Inputs are never negative, so this is round-half-away-from-zero
    return int(math.floor(x + 0.5))


def rgb_to_hsl(r: int, g: int, b: int) -> tuple[int, int, int]:
    """
    Convert 0-255 channels to (hue degrees, saturation %, lightness %).
    """
    fr, fg, fb = r / 255, g / 255, b / 255

    hi = max(fr, fg, fb)
    lo = min(fr, fg, fb)
    lum = (hi + lo) / 2

    if hi == lo:
        hue, sat = 0.0, 0.0
    else:
        d = hi - lo
        sat = d / (2 - hi - lo) if lum > 0.5 else d / (hi + lo)

        if hi == fr:
            hue = (fg - fb) / d
            if fg < fb:
                hue += 6
        elif hi == fg:
            hue = (fb - fr) / d + 2
        else:
            hue = (fr - fg) / d + 4
        hue /= 6

    h = _round_half_up(hue * 360) % 360
    s = _round_half_up(sat * 100)
    l = _round_half_up(lum * 100)
    return h, s, l
