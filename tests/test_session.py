import logging

import pytest

from timeline.config import DEFAULT_CONFIG
from timeline.core.signal import SignalBridge, SIGNAL_LEGEND_CLICK
from timeline.interactive.controller import IDLE, GenreHighlighted
from timeline.interactive.session import (
    ARTISTS_BY_GENRES_KEY,
    TimelineSession,
    missing_genre_artists,
)
from timeline.render.commands import CmdClear, RecordingSurface

from conftest import ARTISTS_BY_GENRES, DAY_MS, T0, make_scrobble


@pytest.fixture
def records(scrobbles):
    result = [s.to_dict() for s in scrobbles]
    # a one-off play by an artist with no genre
    result.append(make_scrobble(10, timestamp=T0 + 10 * DAY_MS, artist='Solo Act').to_dict())
    return result


@pytest.fixture
def loader(records):
    calls = []

    def load(key):
        calls.append(key)
        if key == ARTISTS_BY_GENRES_KEY:
            return ARTISTS_BY_GENRES
        return records

    load.calls = calls
    return load


def test_retrieve_caches_by_key(loader):
    session = TimelineSession()

    first = session.retrieve('2019', loader)
    second = session.retrieve('2019', loader)
    session.retrieve_all(['2019', ARTISTS_BY_GENRES_KEY], loader)

    assert first is second
    assert loader.calls == ['2019', ARTISTS_BY_GENRES_KEY]

    session.clear_cache()
    session.retrieve('2019', loader)
    assert loader.calls[-1] == '2019'


def test_open_period(loader):
    session = TimelineSession()
    surface = RecordingSurface()

    controller = session.open_period(2019, surface, loader)

    assert session.controller is controller
    assert len(controller.timeline.scrobble_collection) == 11
    assert surface.commands.of_type(CmdClear)
    # genres came from the shared map, not from the records
    assert controller.timeline.scrobble_collection[0].artist.genre == 'Rock'


def test_open_replaces_previous_controller(records):
    bridge = SignalBridge()
    session = TimelineSession(bridge=bridge)

    first = session.open(records, ARTISTS_BY_GENRES, RecordingSurface())
    second = session.open(records, ARTISTS_BY_GENRES, RecordingSurface())

    bridge.emit(SIGNAL_LEGEND_CLICK, 'Rock', 'Rock')

    assert first.state == IDLE
    assert second.state == GenreHighlighted('Rock', 'Rock')


def test_close(records):
    bridge = SignalBridge()
    session = TimelineSession(bridge=bridge)
    session.open(records, ARTISTS_BY_GENRES, RecordingSurface())

    session.close()

    assert session.controller is None
    assert not bridge.is_connected(SIGNAL_LEGEND_CLICK)


def test_missing_genre_artists(records):
    session = TimelineSession()
    controller = session.open(records, ARTISTS_BY_GENRES, RecordingSurface())

    # Solo Act has a single scrobble and is left out
    assert missing_genre_artists(controller.timeline) == [('Garage Band', 2)]


def test_debug_open_logs_missing_genres(records, caplog):
    session = TimelineSession(config=DEFAULT_CONFIG.with_overrides(debug=True))

    with caplog.at_level(logging.INFO, logger='timeline.interactive.session'):
        session.open(records, ARTISTS_BY_GENRES, RecordingSurface())

    assert "no genre: Garage Band (2 scrobbles) https://www.last.fm/music/Garage%20Band" in caplog.text
    assert "Solo Act" not in caplog.text
