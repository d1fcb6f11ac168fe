# timeline/dataset/scrobble.py
"""
Record -> Scrobble transform.

Fetching and decompressing the raw period files is the host's job. This
module takes the plain records it produces:

    {"date": "2019-03-01 14:05",
     "track": {"name": "..."},
     "album": {"name": "...", "playcount": 12},
     "artist": {"name": "...", "playcount": 140}}

sorts them by time, numbers them and attaches genres.
"""

from __future__ import annotations
from dataclasses import replace
from typing import Any, Iterable, List, Mapping, Sequence, Union

from ..config import GenreGroup
from ..core.errors import DatasetError
from ..model.entities import Album, Artist, Scrobble, Track
from .dates import datetime_string_to_timestamp
from .genre import insert_genres

Record = Union[Mapping[str, Any], Scrobble]


def record_to_scrobble(record: Record, index: int = 0) -> Scrobble:
    if isinstance(record, Scrobble):
        return replace(record, index=index)

    try:
        date = record['date']
        timestamp = record.get('timestamp')
        if timestamp is None:
            timestamp = datetime_string_to_timestamp(date)
        track = record['track']
        album = record['album']
        artist = record['artist']
        return Scrobble(
            index=index,
            timestamp=int(timestamp),
            date=date,
            track=Track(name=track['name']),
            album=Album(name=album['name'], playcount=int(album['playcount'])),
            artist=Artist(name=artist['name'], playcount=int(artist['playcount'])),
        )
    except DatasetError:
        raise
    except (KeyError, TypeError, ValueError) as e:
        raise DatasetError(f"malformed scrobble record at {index}: {e!r}") from e


def build_scrobble_list(
    records: Iterable[Record],
    artists_by_genres: Mapping[str, Sequence[str]],
    genre_groups: Mapping[str, GenreGroup],
) -> List[Scrobble]:
    """Time-ascending scrobbles with index == position and genres attached."""
    scrobbles = [record_to_scrobble(record, i) for i, record in enumerate(records)]
    scrobbles.sort(key=lambda s: s.timestamp)
    scrobbles = [replace(s, index=i) for i, s in enumerate(scrobbles)]
    return insert_genres(scrobbles, artists_by_genres, genre_groups)
