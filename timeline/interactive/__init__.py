"""
Interactive layer: draw pass, selection state machine, session.
"""

from .timeline import Timeline
from .controller import (
    SelectionController,
    SelectionState,
    Idle,
    GenreHighlighted,
    ScrobbleSelected,
    IDLE,
)
from .session import (
    TimelineSession,
    ARTISTS_BY_GENRES_KEY,
    missing_genre_artists,
    log_missing_genre_artists,
)

__all__ = [
    'Timeline',
    'SelectionController', 'SelectionState', 'Idle', 'GenreHighlighted',
    'ScrobbleSelected', 'IDLE',
    'TimelineSession', 'ARTISTS_BY_GENRES_KEY',
    'missing_genre_artists', 'log_missing_genre_artists',
]
