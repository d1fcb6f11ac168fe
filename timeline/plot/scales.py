# timeline/plot/scales.py
"""
Scales - linear mapping between data domains and pixel ranges.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple
import math

from ..config import TimelineConfig


# =============================================================================
# Utility Functions
# =============================================================================

def clamp(value: float, min_val: float, max_val: float) -> float:
    return max(min_val, min(value, max_val))

def lerp(a: float, b: float, t: float) -> float:
    return a + (b - a) * t

def inverse_lerp(a: float, b: float, value: float) -> float:
    # a degenerate domain maps everything to its middle
    if b == a:
        return 0.5
    return (value - a) / (b - a)

def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


# =============================================================================
# Linear Scale
# =============================================================================

@dataclass(frozen=True)
class LinearScale:
    domain: Tuple[float, float]
    range: Tuple[float, float]
    round: bool = False
    clamp: bool = False

    def __call__(self, value: float) -> float:
        t = inverse_lerp(self.domain[0], self.domain[1], value)
        if self.clamp:
            t = clamp(t, 0.0, 1.0)
        out = lerp(self.range[0], self.range[1], t)
        return round_half_up(out) if self.round else out

    def invert(self, value: float) -> float:
        t = inverse_lerp(self.range[0], self.range[1], value)
        if self.clamp:
            t = clamp(t, 0.0, 1.0)
        return lerp(self.domain[0], self.domain[1], t)


# =============================================================================
# Plot Scales
# =============================================================================

@dataclass(frozen=True)
class PlotScales:
    x: LinearScale      # timestamp -> px
    y: LinearScale      # artist playcount -> px
    point_margin: int


def compute_plot_scales(
    width: float,
    height: float,
    time_domain: Tuple[float, float],
    max_artist_playcount: int,
    config: TimelineConfig,
) -> PlotScales:
    """
    Fit the playcount axis so that vertically adjacent ranks keep an equal gap.

    The margin between points starts at point.max_margin and shrinks until
    every rank fits; at margin 0 the axis takes whatever height is available.
    """
    padding = config.plot.padding
    size = config.point.size

    plot_bottom = height - padding - config.time_axis.width / 2 - size
    plot_max_height = plot_bottom - padding

    margin = config.point.max_margin
    plot_height = plot_max_height
    while margin >= 0:
        plot_height_next = (max_artist_playcount - 1) * (size + margin)
        if plot_height_next > plot_max_height:
            margin -= 1
        else:
            plot_height = plot_height_next
            break

    plot_top = plot_bottom - plot_height

    return PlotScales(
        x=LinearScale(domain=time_domain, range=(padding, width - padding), round=True),
        y=LinearScale(domain=(1, max_artist_playcount), range=(plot_bottom, plot_top), round=True),
        point_margin=max(margin, 0),
    )
