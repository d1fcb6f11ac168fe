# timeline/store/summary_registry.py
"""
SummaryRegistry - dataset-wide aggregates, computed once.

Artist and album playcounts on a scrobble are the entity's cumulative count
at collection time, not a per-play increment. Seeing the same entity again
replaces its previous contribution instead of adding to it.

Nothing here depends on the zoomed range: the scales built on top of these
numbers must not shift while zooming.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, Iterable, List, Tuple
import math

from ..core.errors import EmptyCollectionError
from ..model.entities import Scrobble

MS_IN_DAY = 24 * 60 * 60 * 1000

AlbumKey = Tuple[str, str]   # (artist name, album name)
TrackKey = Tuple[str, str]   # (artist name, track name)


@dataclass(frozen=True)
class Totals:
    """Info readout numbers for one scrobble."""
    artist_playcount: int
    album_playcount: int
    artist_scrobble_count: int
    album_scrobble_count: int
    track_scrobble_count: int
    artist_rank: int            # 1 = most played artist of the dataset
    artist_count: int


@dataclass(frozen=True)
class Summary:
    artist_count: int
    album_count: int
    track_count: int
    scrobble_count: int
    artist_playcount_total: int
    first_date: str
    last_date: str
    per_day_count: float


class _LatestCount:
    """Latest-seen value per entity plus the running total over entities."""

    def __init__(self):
        self.values: Dict = {}
        self.total = 0

    def put(self, key, value: int):
        self.total += value - self.values.get(key, 0)
        self.values[key] = value

    def max(self) -> int:
        return max(self.values.values(), default=0)


class SummaryRegistry:

    def __init__(self, scrobble_list: Iterable[Scrobble]):
        scrobbles: List[Scrobble] = list(scrobble_list)
        if not scrobbles:
            raise EmptyCollectionError('SummaryRegistry')

        self._artist_playcounts = _LatestCount()
        self._album_playcounts = _LatestCount()
        self._artist_scrobbles: Dict[str, int] = {}
        self._album_scrobbles: Dict[AlbumKey, int] = {}
        self._track_scrobbles: Dict[TrackKey, int] = {}

        for scrobble in scrobbles:
            artist_name = scrobble.artist.name
            album_key = (artist_name, scrobble.album.name)
            track_key = (artist_name, scrobble.track.name)

            self._artist_playcounts.put(artist_name, scrobble.artist.playcount)
            self._album_playcounts.put(album_key, scrobble.album.playcount)

            self._artist_scrobbles[artist_name] = self._artist_scrobbles.get(artist_name, 0) + 1
            self._album_scrobbles[album_key] = self._album_scrobbles.get(album_key, 0) + 1
            self._track_scrobbles[track_key] = self._track_scrobbles.get(track_key, 0) + 1

        self._scrobble_count = len(scrobbles)
        self._first = min(scrobbles, key=lambda s: s.timestamp)
        self._last = max(scrobbles, key=lambda s: s.timestamp)

        self._max_artist_playcount = self._artist_playcounts.max()
        self._max_album_playcount = self._album_playcounts.max()

        # dense rank, ties share a rank
        distinct = sorted(set(self._artist_playcounts.values.values()), reverse=True)
        rank_by_playcount = {playcount: rank for rank, playcount in enumerate(distinct, start=1)}
        self._artist_ranks = {
            name: rank_by_playcount[playcount]
            for name, playcount in self._artist_playcounts.values.items()
        }

    # -------------------------------------------------------------------------
    # Scale domains
    # -------------------------------------------------------------------------

    def get_max_playcounts(self) -> Tuple[int, int]:
        return (self._max_artist_playcount, self._max_album_playcount)

    def get_max_artist_playcount(self) -> int:
        return self._max_artist_playcount

    def get_max_album_playcount(self) -> int:
        return self._max_album_playcount

    # -------------------------------------------------------------------------
    # Info readout
    # -------------------------------------------------------------------------

    def get_totals(self, scrobble: Scrobble) -> Totals:
        artist_name = scrobble.artist.name
        album_key = (artist_name, scrobble.album.name)
        track_key = (artist_name, scrobble.track.name)

        return Totals(
            artist_playcount=self._artist_playcounts.values.get(artist_name, scrobble.artist.playcount),
            album_playcount=self._album_playcounts.values.get(album_key, scrobble.album.playcount),
            artist_scrobble_count=self._artist_scrobbles.get(artist_name, 0),
            album_scrobble_count=self._album_scrobbles.get(album_key, 0),
            track_scrobble_count=self._track_scrobbles.get(track_key, 0),
            artist_rank=self._artist_ranks.get(artist_name, 0),
            artist_count=len(self._artist_scrobbles),
        )

    def get_per_day_count(self) -> float:
        day_count = max(1, math.ceil((self._last.timestamp - self._first.timestamp) / MS_IN_DAY))
        return round(10 * self._scrobble_count / day_count) / 10

    def get_summary(self) -> Summary:
        return Summary(
            artist_count=len(self._artist_scrobbles),
            album_count=len(self._album_scrobbles),
            track_count=len(self._track_scrobbles),
            scrobble_count=self._scrobble_count,
            artist_playcount_total=self._artist_playcounts.total,
            first_date=self._first.date,
            last_date=self._last.date,
            per_day_count=self.get_per_day_count(),
        )
