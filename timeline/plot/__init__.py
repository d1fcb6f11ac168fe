"""
Plot geometry and colors.
"""

from .scales import LinearScale, PlotScales, compute_plot_scales, clamp, lerp, inverse_lerp
from .colors import ColorMapper, HighlightContext, SequentialColorScale

__all__ = [
    'LinearScale', 'PlotScales', 'compute_plot_scales', 'clamp', 'lerp', 'inverse_lerp',
    'ColorMapper', 'HighlightContext', 'SequentialColorScale',
]
