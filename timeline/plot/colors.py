# timeline/plot/colors.py
"""
ColorMapper - point colors from genre group, album popularity and highlight.

Each genre group owns a two-color range; album playcount picks a position
inside it. Artists without a known group fall back to the neutral range.
The highlight context then scales saturation and lightness.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum, auto
from typing import Dict, Optional, Tuple

from ..config import Config, ValueFactors
from ..model.color import HSL, RGB, hex_to_rgb, lerp_rgb
from .scales import clamp, inverse_lerp


class HighlightContext(Enum):
    DEFAULT = auto()
    GENRE = auto()      # point belongs to the highlighted genre
    ARTIST = auto()     # point belongs to the selected artist


@dataclass(frozen=True)
class SequentialColorScale:
    domain: Tuple[float, float]
    start: RGB
    end: RGB

    @staticmethod
    def from_hex_range(domain: Tuple[float, float], color_range: Tuple[str, str]) -> SequentialColorScale:
        return SequentialColorScale(domain, hex_to_rgb(color_range[0]), hex_to_rgb(color_range[1]))

    def __call__(self, value: float) -> HSL:
        t = clamp(inverse_lerp(self.domain[0], self.domain[1], value), 0.0, 1.0)
        return HSL.from_rgb(lerp_rgb(self.start, self.end, t))


class ColorMapper:

    def __init__(self, config: Config, max_album_playcount: int):
        domain = (1, max(1, max_album_playcount))
        factors = config.timeline.point.color_value_factors

        self._unknown_scale = SequentialColorScale.from_hex_range(
            domain, config.timeline.unknown_genre_color_range)
        self._group_scales: Dict[str, SequentialColorScale] = {
            name: SequentialColorScale.from_hex_range(domain, group.color_range)
            for name, group in config.genre_groups.items()
        }
        self._factors: Dict[HighlightContext, ValueFactors] = {
            HighlightContext.GENRE: factors.genre,
            HighlightContext.ARTIST: factors.artist,
            HighlightContext.DEFAULT: factors.other,
        }
        self.selected_color = HSL.from_hex(config.timeline.point.selected_color)

    def scale_for(self, genre_group: Optional[str]) -> SequentialColorScale:
        if genre_group is None:
            return self._unknown_scale
        return self._group_scales.get(genre_group, self._unknown_scale)

    def color_for(
        self,
        genre_group: Optional[str],
        popularity: float,
        context: HighlightContext = HighlightContext.DEFAULT,
    ) -> HSL:
        factors = self._factors[context]
        return self.scale_for(genre_group)(popularity).scaled(factors.saturation, factors.lightness)
