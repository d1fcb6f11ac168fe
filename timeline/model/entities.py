# timeline/model/entities.py
"""
Scrobble and Point value shapes.

A Scrobble is one recorded play. It is created once when the dataset is
loaded and never changes. A Point is a Scrobble placed on the plot by one
draw pass; the next draw pass replaces it.
"""

from __future__ import annotations
from dataclasses import dataclass, replace
from typing import Optional, Any, Dict

from .color import HSL


@dataclass(frozen=True)
class Track:
    name: str


@dataclass(frozen=True)
class Album:
    name: str
    playcount: int


@dataclass(frozen=True)
class Artist:
    name: str
    playcount: int
    genre: Optional[str] = None         # e.g. 'Classic Rock'
    genre_group: Optional[str] = None   # e.g. 'Rock'

    @property
    def has_genre(self) -> bool:
        return self.genre is not None


@dataclass(frozen=True)
class Scrobble:
    """One play event, positioned at `index` in the time-ascending dataset."""
    index: int
    timestamp: int      # epoch milliseconds
    date: str           # "YYYY-MM-DD HH:MM"
    track: Track
    album: Album
    artist: Artist

    def with_genre(self, genre: Optional[str], genre_group: Optional[str]) -> Scrobble:
        if genre is None:
            return self
        return replace(self, artist=replace(self.artist, genre=genre, genre_group=genre_group))

    def to_dict(self) -> Dict[str, Any]:
        artist: Dict[str, Any] = {
            'name': self.artist.name,
            'playcount': self.artist.playcount,
        }
        if self.artist.genre is not None:
            artist['genre'] = self.artist.genre
            artist['genreGroup'] = self.artist.genre_group

        return {
            'index': self.index,
            'timestamp': self.timestamp,
            'date': self.date,
            'track': {'name': self.track.name},
            'album': {'name': self.album.name, 'playcount': self.album.playcount},
            'artist': artist,
        }

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> Scrobble:
        artist = data['artist']
        album = data['album']
        return Scrobble(
            index=int(data['index']),
            timestamp=int(data['timestamp']),
            date=data.get('date', ''),
            track=Track(name=data['track']['name']),
            album=Album(name=album['name'], playcount=int(album['playcount'])),
            artist=Artist(
                name=artist['name'],
                playcount=int(artist['playcount']),
                genre=artist.get('genre'),
                genre_group=artist.get('genreGroup', artist.get('genre_group')),
            ),
        )


@dataclass(frozen=True)
class Point(Scrobble):
    """A Scrobble plus its pixel position and color for the current draw pass."""
    x: int
    y: int
    color: HSL

    @staticmethod
    def from_scrobble(scrobble: Scrobble, x: int, y: int, color: HSL) -> Point:
        return Point(
            index=scrobble.index,
            timestamp=scrobble.timestamp,
            date=scrobble.date,
            track=scrobble.track,
            album=scrobble.album,
            artist=scrobble.artist,
            x=x,
            y=y,
            color=color,
        )

    def to_scrobble(self) -> Scrobble:
        return Scrobble(
            index=self.index,
            timestamp=self.timestamp,
            date=self.date,
            track=self.track,
            album=self.album,
            artist=self.artist,
        )
