# timeline/store/point_registry.py
"""
PointRegistry - points of the current draw pass grouped by a key.

The grouping is a plain function of the point (artist name, genre, ...).
A key with no points in the visible range is simply absent.
"""

from __future__ import annotations
from typing import Callable, Dict, Generic, Hashable, List, Optional, TypeVar

from ..model.entities import Point

K = TypeVar('K', bound=Hashable)


class PointRegistry(Generic[K]):

    def __init__(self, key: Callable[[Point], Optional[K]]):
        self._key = key
        self._groups: Dict[K, List[Point]] = {}

    def __len__(self) -> int:
        return len(self._groups)

    def __contains__(self, key: K) -> bool:
        return key in self._groups

    def put_point(self, point: Point):
        key = self._key(point)
        if key is None:
            return
        self._groups.setdefault(key, []).append(point)

    def get_point_list(self, key: K) -> Optional[List[Point]]:
        return self._groups.get(key)

    def keys(self) -> List[K]:
        return list(self._groups)

    def filter(self, predicate: Callable[[List[Point]], bool]) -> Dict[K, List[Point]]:
        return {k: points for k, points in self._groups.items() if predicate(points)}

    def reset(self):
        self._groups = {}


def by_artist(point: Point) -> str:
    return point.artist.name


def by_genre(point: Point) -> Optional[str]:
    return point.artist.genre
