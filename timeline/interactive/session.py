# timeline/interactive/session.py
"""
TimelineSession - owns the loaded data and the live controller.

Opening a timeline replaces the previous one: its input subscription is
cancelled before the new controller subscribes, so one bridge never drives
two controllers.
"""

from __future__ import annotations
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional, Sequence, Tuple
from urllib.parse import quote
import logging

from ..config import Config, DEFAULT_CONFIG
from ..core.signal import SignalBridge
from ..dataset.scrobble import Record, build_scrobble_list
from ..render.surface import Surface
from .controller import SelectionController
from .timeline import Timeline

logger = logging.getLogger(__name__)

ARTISTS_BY_GENRES_KEY = 'artists-by-genres'
LASTFM_ARTIST_URL = 'https://www.last.fm/music/'


class TimelineSession:

    def __init__(self, config: Config = DEFAULT_CONFIG, bridge: SignalBridge = None):
        self.config = config
        self.bridge = bridge or SignalBridge()
        self.controller: Optional[SelectionController] = None
        self._data_cache: Dict[str, Any] = {}

    # -------------------------------------------------------------------------
    # Data cache
    # -------------------------------------------------------------------------

    def retrieve(self, key: str, loader: Callable[[str], Any]) -> Any:
        """Cached load: the loader runs once per key for the session's lifetime."""
        if key not in self._data_cache:
            logger.debug("loading %s", key)
            self._data_cache[key] = loader(key)
        return self._data_cache[key]

    def retrieve_all(self, keys: Iterable[str], loader: Callable[[str], Any]) -> List[Any]:
        return [self.retrieve(key, loader) for key in keys]

    def clear_cache(self):
        self._data_cache.clear()

    # -------------------------------------------------------------------------
    # Opening timelines
    # -------------------------------------------------------------------------

    def open(
        self,
        records: Iterable[Record],
        artists_by_genres: Mapping[str, Sequence[str]],
        surface: Surface,
    ) -> SelectionController:
        scrobble_list = build_scrobble_list(records, artists_by_genres, self.config.genre_groups)
        timeline = Timeline(scrobble_list, surface, self.config)

        self.close()

        controller = SelectionController(timeline)
        controller.start()
        controller.subscribe(self.bridge)
        self.controller = controller

        logger.info("opened timeline with %d scrobbles", len(scrobble_list))
        if self.config.debug:
            log_missing_genre_artists(timeline)

        return controller

    def open_period(
        self,
        period: Any,
        surface: Surface,
        loader: Callable[[str], Any],
    ) -> SelectionController:
        """Open the records stored under str(period), with the shared genre map."""
        records, artists_by_genres = self.retrieve_all([str(period), ARTISTS_BY_GENRES_KEY], loader)
        return self.open(records, artists_by_genres, surface)

    def close(self):
        if self.controller is not None:
            self.controller.unsubscribe()
            self.controller = None


# =============================================================================
# Debug reports
# =============================================================================

def missing_genre_artists(timeline: Timeline) -> List[Tuple[str, int]]:
    """(artist, visible scrobble count) for artists without a genre, most played first."""
    groups = timeline.scrobble_artist_registry.filter(
        lambda points: len(points) > 1 and not points[0].artist.has_genre
    )
    return sorted(
        ((artist, len(points)) for artist, points in groups.items()),
        key=lambda item: item[1],
        reverse=True,
    )


def log_missing_genre_artists(timeline: Timeline) -> List[Tuple[str, int]]:
    missing = missing_genre_artists(timeline)
    for artist, count in missing:
        logger.info("no genre: %s (%d scrobbles) %s%s", artist, count, LASTFM_ARTIST_URL, quote(artist))
    return missing
