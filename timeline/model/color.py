# timeline/model/color.py
"""
Color values.

Points carry HSL colors. Configuration speaks hex strings (#RGB, #RRGGBB);
scales interpolate in RGB and convert to HSL at the end.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple
import colorsys

from ..core.errors import ConfigError

RGB = Tuple[float, float, float]


def _clamp01(value: float) -> float:
    return max(0.0, min(value, 1.0))


def hex_to_rgb(hex_str: str) -> RGB:
    """Convert hex string to an RGB tuple in 0-1 range. Supports #RGB and #RRGGBB."""
    h = hex_str.strip().lstrip('#')
    if len(h) == 3:
        try:
            return (int(h[0], 16) / 15, int(h[1], 16) / 15, int(h[2], 16) / 15)
        except ValueError:
            pass
    elif len(h) == 6:
        try:
            return (int(h[0:2], 16) / 255, int(h[2:4], 16) / 255, int(h[4:6], 16) / 255)
        except ValueError:
            pass
    raise ConfigError(f"Invalid hex color: {hex_str!r}")


def rgb_to_hex(rgb: RGB) -> str:
    return '#' + ''.join(f"{round(_clamp01(c) * 255):02x}" for c in rgb)


def lerp_rgb(a: RGB, b: RGB, t: float) -> RGB:
    return (
        a[0] + (b[0] - a[0]) * t,
        a[1] + (b[1] - a[1]) * t,
        a[2] + (b[2] - a[2]) * t,
    )


@dataclass(frozen=True)
class HSL:
    """
    HSL color, hue in degrees [0, 360), saturation and lightness nominally in [0, 1].

    Multiplying factors may push s/l past 1; `scaled()` clamps.
    """
    h: float
    s: float
    l: float

    @staticmethod
    def from_rgb(rgb: RGB) -> HSL:
        hue, light, sat = colorsys.rgb_to_hls(*rgb)
        return HSL(hue * 360.0, sat, light)

    @staticmethod
    def from_hex(hex_str: str) -> HSL:
        return HSL.from_rgb(hex_to_rgb(hex_str))

    def scaled(self, saturation: float, lightness: float) -> HSL:
        """Multiply saturation and lightness, clamping both to [0, 1]."""
        return HSL(
            self.h,
            _clamp01(self.s * saturation),
            _clamp01(self.l * lightness),
        )

    def to_rgb(self) -> RGB:
        return colorsys.hls_to_rgb((self.h % 360.0) / 360.0, _clamp01(self.l), _clamp01(self.s))

    def to_hex(self) -> str:
        return rgb_to_hex(self.to_rgb())

    def __str__(self) -> str:
        return f"hsl({self.h:.1f}, {self.s * 100:.1f}%, {self.l * 100:.1f}%)"
