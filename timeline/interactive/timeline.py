# timeline/interactive/timeline.py
"""
Timeline - owns the dataset indexes and runs the draw pass.

Every draw pass starts from a clean PointBuffer and clean registries and
fills them with exactly the points it draws.
"""

from __future__ import annotations
from typing import List, Optional, Sequence
import logging
import math

from ..config import Config, DEFAULT_CONFIG
from ..core.errors import DatasetError
from ..dataset.genre import genre_sorted_list
from ..model.color import HSL
from ..model.entities import Point, Scrobble
from ..plot.colors import ColorMapper, HighlightContext
from ..plot.scales import PlotScales, compute_plot_scales
from ..render.surface import Surface, FIRST_SCROBBLE_LABEL, LAST_SCROBBLE_LABEL
from ..store.point_buffer import PointBuffer
from ..store.point_collection import PointCollection
from ..store.point_registry import PointRegistry, by_artist, by_genre
from ..store.summary_registry import SummaryRegistry
from ..time.zoom import ZoomViewport
from ..ui.legend import Legend

logger = logging.getLogger(__name__)


class Timeline:

    def __init__(self, scrobble_list: Sequence[Scrobble], surface: Surface, config: Config = DEFAULT_CONFIG):
        if not scrobble_list:
            raise DatasetError("cannot build a timeline from an empty scrobble list")

        self.config = config
        self.surface = surface
        self.scrobble_half_size = math.ceil(config.timeline.point.size / 2)

        self.scrobble_collection: PointCollection[Scrobble] = PointCollection(scrobble_list)
        if not self.scrobble_collection.is_sorted():
            raise DatasetError("scrobble list must be sorted by timestamp")

        self.summary_registry = SummaryRegistry(scrobble_list)
        self.viewport = ZoomViewport.from_config(self.scrobble_collection, config.timeline)

        self.scrobble_buffer = PointBuffer(self.scrobble_half_size)
        self.scrobble_genre_registry: PointRegistry[str] = PointRegistry(by_genre)
        self.scrobble_artist_registry: PointRegistry[str] = PointRegistry(by_artist)

        self.color_mapper = ColorMapper(config, self.summary_registry.get_max_album_playcount())
        self.legend = Legend(genre_sorted_list(scrobble_list, config), surface)
        self.plot_scales: Optional[PlotScales] = None

    @property
    def scrobble_collection_zoomed(self) -> PointCollection[Scrobble]:
        return self.viewport.zoomed_collection

    @property
    def plot_width(self) -> int:
        return self.surface.get_dimensions()[0]

    def get_plot_scales(self) -> PlotScales:
        width, height = self.surface.get_dimensions()
        zoomed = self.scrobble_collection_zoomed
        return compute_plot_scales(
            width,
            height,
            (zoomed.get_first().timestamp, zoomed.get_last().timestamp),
            self.summary_registry.get_max_artist_playcount(),
            self.config.timeline,
        )

    def color_for(
        self,
        genre_group: Optional[str],
        album_playcount: int,
        context: HighlightContext = HighlightContext.DEFAULT,
    ) -> HSL:
        return self.color_mapper.color_for(genre_group, album_playcount, context)

    def reset_indexes(self):
        self.scrobble_buffer.reset()
        self.scrobble_genre_registry.reset()
        self.scrobble_artist_registry.reset()

    def render(self):
        """Static UI shown once: legend rows and the intro readout."""
        self.legend.render()
        self.surface.show_intro_message(self.summary_registry.get_summary())

    def draw(self) -> List[Point]:
        width, _ = self.surface.get_dimensions()
        self.viewport.set_plot_width(width)
        self.plot_scales = scales = self.get_plot_scales()

        self.surface.draw_background()
        self.reset_indexes()

        points = []
        for scrobble in self.scrobble_collection_zoomed:
            point = Point.from_scrobble(
                scrobble,
                x=scales.x(scrobble.timestamp),
                y=scales.y(scrobble.artist.playcount),
                color=self.color_for(scrobble.artist.genre_group, scrobble.album.playcount),
            )
            self.surface.draw_point(point.x, point.y, point.color)
            self.scrobble_buffer.put_point(point)
            self.scrobble_genre_registry.put_point(point)
            self.scrobble_artist_registry.put_point(point)
            points.append(point)

        self.surface.draw_time_axis(*scales.x.range)

        first = self.scrobble_collection_zoomed.get_first()
        last = self.scrobble_collection_zoomed.get_last()
        self.surface.render_time_label(FIRST_SCROBBLE_LABEL, scales.x(first.timestamp), width, first.date)
        self.surface.render_time_label(LAST_SCROBBLE_LABEL, scales.x(last.timestamp), width, last.date)

        logger.debug("drew %d points (%d artists, %d genres)",
                     len(points), len(self.scrobble_artist_registry), len(self.scrobble_genre_registry))
        return points
