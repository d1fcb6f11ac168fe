# timeline/dataset/genre.py
"""
Genre assignment and the legend's genre list.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, Iterable, List, Mapping, Optional, Sequence
import logging

from ..config import Config, GenreGroup
from ..model.color import HSL
from ..model.entities import Scrobble

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GenreEntry:
    """One legend row."""
    name: str
    group: str
    artist_count: int
    playcount: int
    color: HSL
    highlighted_color: HSL


def genre_groups_by_genre(genre_groups: Mapping[str, GenreGroup]) -> Dict[str, str]:
    return {
        genre: group_name
        for group_name, group in genre_groups.items()
        for genre in group.genres
    }


def genres_by_artist(artists_by_genres: Mapping[str, Sequence[str]]) -> Dict[str, str]:
    return {
        artist_name: genre
        for genre, artist_names in artists_by_genres.items()
        for artist_name in artist_names
    }


def insert_genres(
    scrobble_list: Iterable[Scrobble],
    artists_by_genres: Mapping[str, Sequence[str]],
    genre_groups: Mapping[str, GenreGroup],
) -> List[Scrobble]:
    """Attach genre and genre group to every scrobble whose artist has a genre."""
    group_of = genre_groups_by_genre(genre_groups)
    genre_of = genres_by_artist(artists_by_genres)

    result = []
    for scrobble in scrobble_list:
        genre: Optional[str] = genre_of.get(scrobble.artist.name)
        result.append(scrobble.with_genre(genre, group_of.get(genre)))
    return result


def genre_sorted_list(scrobble_list: Iterable[Scrobble], config: Config) -> List[GenreEntry]:
    """Legend entries, most played genre first."""
    factors = config.timeline.point.color_value_factors
    records: Dict[str, dict] = {}
    artist_playcounts: Dict[str, int] = {}

    for scrobble in scrobble_list:
        artist = scrobble.artist
        if not artist.genre:
            continue

        record = records.get(artist.genre)
        if record is None:
            record = {'group': artist.genre_group, 'artist_count': 0, 'playcount': 0}
            records[artist.genre] = record

        previous = artist_playcounts.get(artist.name)
        if previous is not None:
            record['playcount'] += artist.playcount - previous
        else:
            record['artist_count'] += 1
            record['playcount'] += artist.playcount

        artist_playcounts[artist.name] = artist.playcount

    entries = []
    for genre, record in records.items():
        group = config.genre_groups.get(record['group']) if record['group'] else None
        if group is None:
            logger.warning("genre not found in the config: %s", genre)
            continue

        base = HSL.from_hex(group.color_range[0])
        entries.append(GenreEntry(
            name=genre,
            group=record['group'],
            artist_count=record['artist_count'],
            playcount=record['playcount'],
            color=base.scaled(factors.other.saturation, factors.other.lightness),
            highlighted_color=base.scaled(factors.genre.saturation, factors.genre.lightness),
        ))

    return sorted(entries, key=lambda e: e.playcount, reverse=True)
