"""
Value shapes: scrobbles, plotted points, colors.
"""

from .color import HSL, hex_to_rgb, rgb_to_hex, lerp_rgb
from .entities import Track, Album, Artist, Scrobble, Point

__all__ = [
    'HSL', 'hex_to_rgb', 'rgb_to_hex', 'lerp_rgb',
    'Track', 'Album', 'Artist', 'Scrobble', 'Point',
]
