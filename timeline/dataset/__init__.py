"""
Dataset preparation: records to scrobbles, genres, dates.
"""

from .dates import (
    datetime_string_to_timestamp,
    datetime_string_to_date_string,
    timestamp_to_datetime_string,
)
from .genre import GenreEntry, insert_genres, genre_sorted_list
from .scrobble import record_to_scrobble, build_scrobble_list

__all__ = [
    'datetime_string_to_timestamp', 'datetime_string_to_date_string',
    'timestamp_to_datetime_string',
    'GenreEntry', 'insert_genres', 'genre_sorted_list',
    'record_to_scrobble', 'build_scrobble_list',
]
