# timeline/render/surface.py
"""
Surface - what the timeline needs from whatever actually draws it.

A browser canvas, a Qt widget and the headless RecordingSurface all fit
behind this protocol. Coordinates are plot pixels, top-left origin.
"""

from __future__ import annotations
from typing import Optional, Protocol, Tuple, runtime_checkable

from ..model.color import HSL
from ..model.entities import Scrobble
from ..store.summary_registry import Summary, Totals

# time label slots
FIRST_SCROBBLE_LABEL = 'first-scrobble-time-label'
LAST_SCROBBLE_LABEL = 'last-scrobble-time-label'
SELECTED_SCROBBLE_LABEL = 'selected-scrobble-time-label'


@runtime_checkable
class Surface(Protocol):

    # plot
    def get_dimensions(self) -> Tuple[int, int]: ...
    def draw_background(self) -> None: ...
    def draw_point(self, x: int, y: int, color: HSL) -> None: ...
    def draw_time_axis(self, x0: int, x1: int) -> None: ...

    # labels
    def render_time_label(self, label_id: str, x: int, container_width: int, text: str) -> None: ...
    def clear_time_label(self, label_id: str) -> None: ...
    def render_label(self, x: int, y: int, container_width: int, text: str,
                     color: HSL, is_primary: bool) -> None: ...
    def remove_all_labels(self) -> None: ...

    # legend
    def paint_legend_genre(self, genre: str, color: HSL, highlighted: bool) -> None: ...

    # info box
    def show_intro_message(self, summary: Optional[Summary] = None) -> None: ...
    def hide_intro_message(self) -> None: ...
    def render_scrobble_info(self, scrobble: Scrobble, totals: Totals) -> None: ...
