import pytest

from timeline.core.errors import EmptyCollectionError
from timeline.store.summary_registry import SummaryRegistry, MS_IN_DAY


@pytest.fixture
def small(scrobble_factory):
    return [
        scrobble_factory(0, timestamp=100, artist='A', artist_playcount=5, album='X', album_playcount=2),
        scrobble_factory(1, timestamp=200, artist='B', artist_playcount=3, album='Y', album_playcount=3),
        scrobble_factory(2, timestamp=300, artist='A', artist_playcount=5, album='X', album_playcount=2),
    ]


def test_empty_dataset_rejected():
    with pytest.raises(EmptyCollectionError):
        SummaryRegistry([])


def test_max_artist_playcount(small):
    registry = SummaryRegistry(small)
    assert registry.get_max_artist_playcount() == 5
    assert registry.get_max_playcounts() == (5, 3)


def test_max_playcounts_match_brute_force(scrobbles):
    registry = SummaryRegistry(scrobbles)

    artists = {s.artist.name: s.artist.playcount for s in scrobbles}
    albums = {(s.artist.name, s.album.name): s.album.playcount for s in scrobbles}

    assert registry.get_max_playcounts() == (max(artists.values()), max(albums.values()))


def test_playcounts_are_replaced_not_added(small):
    summary = SummaryRegistry(small).get_summary()

    # A counted once at 5, B at 3
    assert summary.artist_playcount_total == 8
    assert summary.scrobble_count == 3


def test_latest_playcount_wins(scrobble_factory):
    registry = SummaryRegistry([
        scrobble_factory(0, artist='A', artist_playcount=5),
        scrobble_factory(1, artist='A', artist_playcount=6),
    ])

    assert registry.get_max_artist_playcount() == 6
    assert registry.get_summary().artist_playcount_total == 6


def test_totals(scrobbles):
    registry = SummaryRegistry(scrobbles)
    totals = registry.get_totals(scrobbles[3])

    assert totals.artist_playcount == 10
    assert totals.album_playcount == 8
    assert totals.artist_scrobble_count == 4
    assert totals.album_scrobble_count == 3         # IV
    assert totals.track_scrobble_count == 1         # Stairway to Heaven
    assert totals.artist_rank == 1
    assert totals.artist_count == 4


def test_dense_rank_ties(scrobble_factory):
    registry = SummaryRegistry([
        scrobble_factory(0, artist='A', artist_playcount=9),
        scrobble_factory(1, artist='B', artist_playcount=9),
        scrobble_factory(2, artist='C', artist_playcount=4),
    ])

    b = scrobble_factory(1, artist='B', artist_playcount=9)
    c = scrobble_factory(2, artist='C', artist_playcount=4)
    assert registry.get_totals(b).artist_rank == 1
    assert registry.get_totals(c).artist_rank == 2


def test_summary(scrobbles):
    summary = SummaryRegistry(scrobbles).get_summary()

    assert summary.artist_count == 4
    assert summary.album_count == 5         # IV, II, Nevermind, Discovery, Demo
    assert summary.track_count == 7
    assert summary.scrobble_count == 10
    assert summary.artist_playcount_total == 10 + 7 + 6 + 2
    assert summary.first_date == scrobbles[0].date
    assert summary.last_date == scrobbles[-1].date


def test_per_day_count(scrobbles, scrobble_factory):
    # 10 scrobbles over 9 days
    assert SummaryRegistry(scrobbles).get_per_day_count() == 1.1

    # less than a day still counts as one
    short = [scrobble_factory(i, timestamp=i * 1000) for i in range(3)]
    assert SummaryRegistry(short).get_per_day_count() == 3.0

    assert MS_IN_DAY == 86400000
