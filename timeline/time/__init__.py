"""
Time axis: zoom window over the dataset.
"""

from .zoom import ZoomViewport, TimeRange

__all__ = ['ZoomViewport', 'TimeRange']
