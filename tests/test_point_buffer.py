import pytest

from timeline.model.color import HSL
from timeline.model.entities import Point
from timeline.store.point_buffer import PointBuffer

RED = HSL(0.0, 1.0, 0.5)


def make_point(scrobble, x, y):
    return Point.from_scrobble(scrobble, x, y, RED)


def test_half_size_must_be_positive():
    with pytest.raises(ValueError):
        PointBuffer(0)


def test_exact_hit_after_put(scrobble_factory):
    buffer = PointBuffer(2)
    point = make_point(scrobble_factory(0), 10, 10)
    buffer.put_point(point)

    assert buffer.get_point(10, 10) is point
    assert len(buffer) == 1


def test_nothing_after_reset(scrobble_factory):
    buffer = PointBuffer(2)
    buffer.put_point(make_point(scrobble_factory(0), 10, 10))
    buffer.reset()

    assert buffer.get_point(10, 10) is None
    assert len(buffer) == 0


def test_footprint_edges(scrobble_factory):
    buffer = PointBuffer(2)
    point = make_point(scrobble_factory(0), 10, 10)
    buffer.put_point(point)

    # inside the square footprint, across cell boundaries
    assert buffer.get_point(12, 12) is point
    assert buffer.get_point(8, 8) is point
    assert buffer.get_point(8, 12) is point

    # one pixel outside
    assert buffer.get_point(13, 10) is None
    assert buffer.get_point(10, 7) is None


def test_negative_coordinates(scrobble_factory):
    buffer = PointBuffer(2)
    point = make_point(scrobble_factory(0), 0, 0)
    buffer.put_point(point)

    assert buffer.get_point(-1, -1) is point
    assert buffer.get_point(-3, 0) is None


def test_last_drawn_wins(scrobble_factory):
    buffer = PointBuffer(2)
    first = make_point(scrobble_factory(0), 10, 10)
    second = make_point(scrobble_factory(1), 11, 10)
    buffer.put_point(first)
    buffer.put_point(second)

    # both cover (10, 10), the later one is on top
    assert buffer.get_point(10, 10) is second
    # only the first covers (8, 10)
    assert buffer.get_point(8, 10) is first


def test_same_pixel_replaced(scrobble_factory):
    buffer = PointBuffer(1)
    first = make_point(scrobble_factory(0), 5, 5)
    second = make_point(scrobble_factory(1), 6, 5)
    third = make_point(scrobble_factory(2), 5, 5)
    for p in (first, second, third):
        buffer.put_point(p)

    assert buffer.get_point(5, 5) is third
