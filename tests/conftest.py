import pytest

from timeline.dataset.dates import timestamp_to_datetime_string
from timeline.interactive.controller import SelectionController
from timeline.interactive.timeline import Timeline
from timeline.model.entities import Album, Artist, Scrobble, Track
from timeline.render.commands import RecordingSurface

HOUR_MS = 60 * 60 * 1000
DAY_MS = 24 * HOUR_MS
T0 = 1546300800000      # 2019-01-01 00:00 UTC

# artist -> (artist playcount, genre, genre group)
ARTISTS = {
    'Led Zeppelin': (10, 'Rock', 'Rock'),
    'Nirvana': (7, 'Grunge', 'Rock'),
    'Daft Punk': (6, 'House', 'Electronic'),
    'Garage Band': (2, None, None),
}

# one play per day: (artist, album, album playcount, track)
PLAYS = [
    ('Led Zeppelin', 'IV', 8, 'Black Dog'),             # 0
    ('Nirvana', 'Nevermind', 5, 'Lithium'),             # 1
    ('Daft Punk', 'Discovery', 4, 'One More Time'),     # 2
    ('Led Zeppelin', 'IV', 8, 'Stairway to Heaven'),    # 3
    ('Garage Band', 'Demo', 1, 'Noise'),                # 4
    ('Nirvana', 'Nevermind', 5, 'Lithium'),             # 5
    ('Led Zeppelin', 'II', 2, 'Ramble On'),             # 6
    ('Daft Punk', 'Discovery', 4, 'Aerodynamic'),       # 7
    ('Led Zeppelin', 'IV', 8, 'Black Dog'),             # 8
    ('Garage Band', 'Demo', 1, 'Noise'),                # 9
]

ARTISTS_BY_GENRES = {
    'Rock': ['Led Zeppelin'],
    'Grunge': ['Nirvana'],
    'House': ['Daft Punk'],
}


def make_scrobble(
    index,
    timestamp=None,
    artist='Artist',
    artist_playcount=1,
    album='Album',
    album_playcount=1,
    track='Track',
    genre=None,
    genre_group=None,
):
    if timestamp is None:
        timestamp = T0 + index * HOUR_MS
    return Scrobble(
        index=index,
        timestamp=timestamp,
        date=timestamp_to_datetime_string(timestamp),
        track=Track(track),
        album=Album(album, album_playcount),
        artist=Artist(artist, artist_playcount, genre, genre_group),
    )


def point_xy(timeline, scrobble):
    """Pixel position of a scrobble in the timeline's last draw pass."""
    scales = timeline.plot_scales
    return scales.x(scrobble.timestamp), scales.y(scrobble.artist.playcount)


@pytest.fixture
def scrobble_factory():
    return make_scrobble


@pytest.fixture
def scrobbles():
    result = []
    for i, (artist, album, album_playcount, track) in enumerate(PLAYS):
        playcount, genre, group = ARTISTS[artist]
        result.append(make_scrobble(
            i,
            timestamp=T0 + i * DAY_MS,
            artist=artist,
            artist_playcount=playcount,
            album=album,
            album_playcount=album_playcount,
            track=track,
            genre=genre,
            genre_group=group,
        ))
    return result


@pytest.fixture
def surface():
    return RecordingSurface(1200, 600)


@pytest.fixture
def timeline(scrobbles, surface):
    return Timeline(scrobbles, surface)


@pytest.fixture
def controller(timeline):
    controller = SelectionController(timeline)
    controller.start()
    return controller
