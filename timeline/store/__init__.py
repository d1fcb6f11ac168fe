"""
Indexes over scrobbles and drawn points.
"""

from .point_collection import PointCollection
from .point_buffer import PointBuffer
from .point_registry import PointRegistry, by_artist, by_genre
from .summary_registry import SummaryRegistry, Summary, Totals, MS_IN_DAY

__all__ = [
    'PointCollection', 'PointBuffer', 'PointRegistry', 'by_artist', 'by_genre',
    'SummaryRegistry', 'Summary', 'Totals', 'MS_IN_DAY',
]
