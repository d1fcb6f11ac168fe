# timeline/time/zoom.py
"""
ZoomViewport - visible time window over the full scrobble collection.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Optional, Tuple
import logging

from ..config import TimelineConfig
from ..core.signal import SignalBridge, SignalEmitter, SIGNAL_ZOOM_CHANGED
from ..model.entities import Scrobble
from ..plot.scales import LinearScale, clamp
from ..store.point_collection import PointCollection

logger = logging.getLogger(__name__)

TimeRange = Tuple[float, float]

# wheel deltas large enough to flip the factor's sign zoom all the way out
_MIN_ZOOM_FACTOR = 1e-6


@dataclass
class ZoomViewport(SignalEmitter):
    """
    Wheel zoom anchored at the pointer.

    The full range is fixed by the dataset. The zoomed range only ever
    changes through apply_wheel_zoom() or reset(), and each change rebuilds
    the visible collection from the full one.
    """

    collection: PointCollection[Scrobble]
    zoom_delta_factor: float = 0.002
    min_time_range: float = 24 * 60 * 60 * 1000
    plot_padding: float = 20.0
    _plot_width_px: float = 800.0

    time_range: TimeRange = field(init=False)
    zoomed_range: TimeRange = field(init=False)
    zoomed_collection: PointCollection[Scrobble] = field(init=False)
    _bridge: SignalBridge = None

    def __post_init__(self):
        self.time_range = (
            self.collection.get_first().timestamp,
            self.collection.get_last().timestamp,
        )
        self.zoomed_range = self.time_range
        self.zoomed_collection = self.collection

    @staticmethod
    def from_config(collection: PointCollection[Scrobble], config: TimelineConfig) -> ZoomViewport:
        return ZoomViewport(
            collection=collection,
            zoom_delta_factor=config.zoom_delta_factor,
            min_time_range=config.min_time_range,
            plot_padding=config.plot.padding,
        )

    @property
    def time_span(self) -> float:
        return self.zoomed_range[1] - self.zoomed_range[0]

    @property
    def is_zoomed(self) -> bool:
        return self.zoomed_range != self.time_range

    def set_plot_width(self, width: float):
        self._plot_width_px = width

    def pointer_to_timestamp(self, offset_x: float) -> float:
        """Timestamp under a pointer x offset, clamped to the zoomed range."""
        width_padded = self._plot_width_px - 2 * self.plot_padding
        time_scale = LinearScale(domain=(0, width_padded), range=self.zoomed_range, round=True)
        return time_scale(clamp(offset_x - self.plot_padding, 0, width_padded))

    def apply_wheel_zoom(self, offset_x: float, delta_y: float) -> Optional[TimeRange]:
        """
        Zoom around the pointer. Positive delta_y zooms out.

        Returns the new zoomed range, or None when the zoom would shrink the
        window below min_time_range (state is left untouched).
        """
        start, end = self.zoomed_range
        x_timestamp = self.pointer_to_timestamp(offset_x)

        zoom_factor = 1 - delta_y * self.zoom_delta_factor
        if zoom_factor <= 0:
            zoom_factor = _MIN_ZOOM_FACTOR

        left_time_range = (x_timestamp - start) / zoom_factor
        right_time_range = (end - x_timestamp) / zoom_factor

        if left_time_range + right_time_range < self.min_time_range:
            logger.debug("zoom rejected: span %.0f < %.0f",
                         left_time_range + right_time_range, self.min_time_range)
            return None

        self.zoomed_range = (
            max(x_timestamp - left_time_range, self.time_range[0]),
            min(x_timestamp + right_time_range, self.time_range[1]),
        )
        self._rebuild_zoomed_collection()

        logger.debug("zoomed to %s (%d scrobbles)", self.zoomed_range, len(self.zoomed_collection))
        self.emit(SIGNAL_ZOOM_CHANGED, self.zoomed_range)
        return self.zoomed_range

    def reset(self):
        self.zoomed_range = self.time_range
        self.zoomed_collection = self.collection
        self.emit(SIGNAL_ZOOM_CHANGED, self.zoomed_range)

    def _rebuild_zoomed_collection(self):
        self.zoomed_collection = self.collection.slice_time_range(*self.zoomed_range)

    def bind(self, bridge: SignalBridge):
        self.bind_bridge(bridge)
