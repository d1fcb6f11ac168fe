# timeline/interactive/controller.py
"""
SelectionController - reacts to input and keeps the highlight consistent.

States:
    Idle
    GenreHighlighted(genre, genre_group)   legend click
    ScrobbleSelected(scrobble)             hover or arrow keys

Every transition clears the previous highlight (each highlighted point is
redrawn with its buffered color) before drawing the new one. The one
shortcut: moving to another scrobble of the same artist keeps the legend
highlight and artist labels, since they would be redrawn identically.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, Dict, Optional, Union
import logging

from ..core.signal import (
    SignalBridge, SignalEmitter, Subscription,
    SIGNAL_POINTER_MOVE, SIGNAL_WHEEL, SIGNAL_KEY_DOWN, SIGNAL_LEGEND_CLICK,
    SIGNAL_RESIZE, SIGNAL_SELECTION_CHANGED, SIGNAL_DRAWN,
)
from ..core.timer import Debouncer, FrameClock
from ..model.entities import Point, Scrobble
from ..plot.colors import HighlightContext
from ..render.surface import SELECTED_SCROBBLE_LABEL
from ..store.point_collection import PointCollection
from .timeline import Timeline

logger = logging.getLogger(__name__)


# =============================================================================
# Selection State
# =============================================================================

@dataclass(frozen=True)
class Idle:
    pass


@dataclass(frozen=True)
class GenreHighlighted:
    genre: str
    genre_group: Optional[str]


@dataclass(frozen=True)
class ScrobbleSelected:
    scrobble: Scrobble


SelectionState = Union[Idle, GenreHighlighted, ScrobbleSelected]
IDLE = Idle()


# =============================================================================
# Controller
# =============================================================================

class SelectionController(SignalEmitter):

    def __init__(self, timeline: Timeline, clock: FrameClock = None):
        self.timeline = timeline
        self.state: SelectionState = IDLE
        self.scrobble_collection_highlighted: PointCollection[Point] = PointCollection()

        self.clock = clock or FrameClock()
        self._resize_debouncer = Debouncer(
            self.clock,
            timeline.config.timeline.resize_delay,
            self._handle_resize_settled,
        )
        self._subscription: Optional[Subscription] = None

        self._key_handlers: Dict[str, Callable[[], None]] = {
            'Escape': self.escape,
            'ArrowDown': self.arrow_down,
            'ArrowUp': self.arrow_up,
            'ArrowLeft': self.arrow_left,
            'ArrowRight': self.arrow_right,
        }

    @property
    def selected_scrobble(self) -> Optional[Scrobble]:
        if isinstance(self.state, ScrobbleSelected):
            return self.state.scrobble
        return None

    @property
    def surface(self):
        return self.timeline.surface

    # -------------------------------------------------------------------------
    # Lifecycle
    # -------------------------------------------------------------------------

    def start(self):
        """First render: static UI, then the full draw."""
        self.timeline.render()
        self.draw()

    def subscribe(self, bridge: SignalBridge) -> Subscription:
        self.bind_bridge(bridge)
        self.timeline.viewport.bind(bridge)

        subscription = bridge.subscribe({
            SIGNAL_POINTER_MOVE: self.pointer_move,
            SIGNAL_WHEEL: self.wheel,
            SIGNAL_KEY_DOWN: self.key_down,
            SIGNAL_LEGEND_CLICK: self.legend_click,
            SIGNAL_RESIZE: self.window_resize,
        })
        subscription.add(self.clock.bind(bridge))

        self._subscription = subscription
        return subscription

    def unsubscribe(self):
        self._resize_debouncer.cancel()
        if self._subscription:
            self._subscription.cancel()
            self._subscription = None

    def draw(self):
        points = self.timeline.draw()
        self.emit(SIGNAL_DRAWN, len(points))

    def _set_state(self, state: SelectionState):
        self.state = state
        self.emit(SIGNAL_SELECTION_CHANGED, state)

    # -------------------------------------------------------------------------
    # Reset
    # -------------------------------------------------------------------------

    def reset_state(self):
        self.timeline.reset_indexes()
        self.scrobble_collection_highlighted.reset()
        self._set_state(IDLE)

    def reset_ui(self):
        self.surface.show_intro_message(self.timeline.summary_registry.get_summary())
        self.surface.clear_time_label(SELECTED_SCROBBLE_LABEL)
        self.timeline.legend.remove_genre_highlight()
        self.surface.remove_all_labels()

    # -------------------------------------------------------------------------
    # Highlighting
    # -------------------------------------------------------------------------

    def highlight_genre_scrobble_list(
        self,
        genre: str,
        genre_group: Optional[str],
        artist_name_to_skip: Optional[str] = None,
        render_artist_labels: bool = True,
    ):
        genre_point_list = self.timeline.scrobble_genre_registry.get_point_list(genre)

        # the registry only holds the zoomed range, a genre may have no points in it
        if not genre_point_list:
            return

        plot_width = self.timeline.plot_width
        artist_last_points = {}

        for point in genre_point_list:
            if point.artist.name == artist_name_to_skip:
                continue
            color = self.timeline.color_for(genre_group, point.album.playcount, HighlightContext.GENRE)
            self.scrobble_collection_highlighted.push(point)
            artist_last_points[point.artist.name] = (point.x, point.y, color)
            self.surface.draw_point(point.x, point.y, color)

        if render_artist_labels:
            for artist_name, (x, y, color) in artist_last_points.items():
                self.surface.render_label(x, y, plot_width, artist_name, color, False)

    def highlight_artist_scrobble_list(self, scrobble: Scrobble, render_artist_label: bool = True):
        artist = scrobble.artist
        artist_point_list = self.timeline.scrobble_artist_registry.get_point_list(artist.name)
        if not artist_point_list:
            return

        plot_width = self.timeline.plot_width
        same_track_points = []
        last = None

        for point in artist_point_list:
            color = self.timeline.color_for(artist.genre_group, point.album.playcount, HighlightContext.ARTIST)
            self.scrobble_collection_highlighted.push(point)
            last = (point.x, point.y, color)

            # same-track points go last so they end up on top
            if point.track.name == scrobble.track.name:
                same_track_points.append(point)
            else:
                self.surface.draw_point(point.x, point.y, color)

            if point.index == scrobble.index:
                self.surface.render_time_label(SELECTED_SCROBBLE_LABEL, point.x, plot_width, point.date)

        selected_color = self.timeline.color_mapper.selected_color
        for point in same_track_points:
            self.surface.draw_point(point.x, point.y, selected_color)

        if render_artist_label:
            x, y, color = last
            self.surface.render_label(x, y, plot_width, artist.name, color, True)

    def remove_highlight(self):
        buffer = self.timeline.scrobble_buffer
        for point in self.scrobble_collection_highlighted:
            buffered = buffer.get_point(point.x, point.y)
            if buffered is not None:
                self.surface.draw_point(point.x, point.y, buffered.color)
        self.scrobble_collection_highlighted.reset()

    # -------------------------------------------------------------------------
    # Selection
    # -------------------------------------------------------------------------

    def select_genre(self, genre: str, genre_group: Optional[str]):
        # clean old
        self.remove_highlight()
        self.reset_ui()

        # show new
        self.highlight_genre_scrobble_list(genre, genre_group)
        self.timeline.legend.highlight_genre(genre)
        self._set_state(GenreHighlighted(genre, genre_group))

    def select_scrobble(self, scrobble: Scrobble):
        artist = scrobble.artist
        selected = self.selected_scrobble
        is_new_artist = not (selected is not None and selected.artist.name == artist.name)

        # clean old
        self.remove_highlight()
        self.surface.hide_intro_message()

        if is_new_artist:
            self.timeline.legend.remove_genre_highlight()
            self.surface.remove_all_labels()

        # show new
        if artist.genre:
            self.highlight_genre_scrobble_list(artist.genre, artist.genre_group, artist.name, is_new_artist)
            if is_new_artist:
                self.timeline.legend.highlight_genre(artist.genre)

        # artist points go over genre points and genre labels
        self.highlight_artist_scrobble_list(scrobble, is_new_artist)

        self.surface.render_scrobble_info(scrobble, self.timeline.summary_registry.get_totals(scrobble))
        self._set_state(ScrobbleSelected(scrobble))

    def select_vertically_adjacent_scrobble(self, shift: int):
        scrobble = self.selected_scrobble
        if scrobble is None:
            return

        adjacent = self.timeline.scrobble_collection_zoomed.get_adjacent(scrobble, shift)
        if adjacent is not None:
            self.select_scrobble(adjacent)

    def select_horizontally_adjacent_scrobble(self, shift: int):
        scrobble = self.selected_scrobble
        if scrobble is None:
            return

        playcount = scrobble.artist.playcount
        adjacent = self.timeline.scrobble_collection_zoomed.get_adjacent(
            scrobble, shift, lambda s: s.artist.playcount == playcount)
        if adjacent is not None:
            self.select_scrobble(adjacent)

    # -------------------------------------------------------------------------
    # Input Handlers
    # -------------------------------------------------------------------------

    def pointer_move(self, x: float, y: float):
        point = self.timeline.scrobble_buffer.get_point(x, y)
        if point is not None:
            self.select_scrobble(point)

    def legend_click(self, genre: str, genre_group: Optional[str]):
        self.select_genre(genre, genre_group)

    def key_down(self, key: str):
        handler = self._key_handlers.get(key)
        if handler is not None:
            handler()

    def escape(self):
        self.remove_highlight()
        self.reset_ui()
        self._set_state(IDLE)

    def arrow_up(self):
        self.select_vertically_adjacent_scrobble(1)

    def arrow_down(self):
        self.select_vertically_adjacent_scrobble(-1)

    def arrow_left(self):
        self.select_horizontally_adjacent_scrobble(-1)

    def arrow_right(self):
        self.select_horizontally_adjacent_scrobble(1)

    def wheel(self, offset_x: float, delta_y: float) -> bool:
        if self.timeline.viewport.apply_wheel_zoom(offset_x, delta_y) is None:
            return False

        self.reset_state()
        self.draw()
        self.reset_ui()
        return True

    def window_resize(self):
        # Collapses bursts (e.g. rotation) into one redraw once the size settles
        self._resize_debouncer.trigger()

    def _handle_resize_settled(self):
        logger.debug("resize settled, redrawing at %s", self.surface.get_dimensions())
        self.reset_state()
        self.draw()
        self.reset_ui()
