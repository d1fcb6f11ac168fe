# timeline/store/point_collection.py
"""
PointCollection - ordered sequence of scrobbles/points with time search.

Items are kept in the order given (ascending timestamp for every collection
that gets searched). Timestamps are mirrored into a numpy array so that
previous/next lookups are a binary search, not a scan: they run on every
zoom step and every hover.
"""

from __future__ import annotations
from typing import Callable, Dict, Generic, Iterable, Iterator, List, Optional, TypeVar
import numpy as np

from ..core.errors import EmptyCollectionError
from ..model.entities import Scrobble

T = TypeVar('T', bound=Scrobble)


class PointCollection(Generic[T]):

    def __init__(self, items: Iterable[T] = ()):
        self._items: List[T] = list(items)
        self._timestamps: Optional[np.ndarray] = None
        self._positions: Optional[Dict[int, int]] = None

    # -------------------------------------------------------------------------
    # Sequence protocol
    # -------------------------------------------------------------------------

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __getitem__(self, position: int) -> T:
        return self._items[position]

    def __bool__(self) -> bool:
        return bool(self._items)

    def __repr__(self) -> str:
        return f"PointCollection(len={len(self._items)})"

    def get_all(self) -> List[T]:
        return self._items

    # -------------------------------------------------------------------------
    # Boundaries
    # -------------------------------------------------------------------------

    def get_first(self) -> T:
        if not self._items:
            raise EmptyCollectionError('get_first')
        return self._items[0]

    def get_last(self) -> T:
        if not self._items:
            raise EmptyCollectionError('get_last')
        return self._items[-1]

    # -------------------------------------------------------------------------
    # Time search
    # -------------------------------------------------------------------------

    @property
    def timestamps(self) -> np.ndarray:
        if self._timestamps is None:
            self._timestamps = np.fromiter(
                (item.timestamp for item in self._items),
                dtype=np.int64,
                count=len(self._items),
            )
        return self._timestamps

    def is_sorted(self) -> bool:
        ts = self.timestamps
        return bool(np.all(ts[1:] >= ts[:-1])) if len(ts) > 1 else True

    def get_previous(self, timestamp: float) -> T:
        """Last item with item.timestamp <= timestamp, clamped to the first item."""
        if not self._items:
            raise EmptyCollectionError('get_previous')
        position = int(np.searchsorted(self.timestamps, timestamp, side='right')) - 1
        return self._items[max(position, 0)]

    def get_next(self, timestamp: float) -> T:
        """First item with item.timestamp >= timestamp, clamped to the last item."""
        if not self._items:
            raise EmptyCollectionError('get_next')
        position = int(np.searchsorted(self.timestamps, timestamp, side='left'))
        return self._items[min(position, len(self._items) - 1)]

    # -------------------------------------------------------------------------
    # Adjacency
    # -------------------------------------------------------------------------

    def position_of(self, item: Scrobble) -> Optional[int]:
        """Position of the item with the same global index, or None."""
        if not self._items:
            return None

        # Contiguous slices of the full dataset resolve without the map
        guess = item.index - self._items[0].index
        if 0 <= guess < len(self._items) and self._items[guess].index == item.index:
            return guess

        if self._positions is None:
            self._positions = {it.index: pos for pos, it in enumerate(self._items)}
        return self._positions.get(item.index)

    def get_adjacent(
        self,
        item: Scrobble,
        shift: int,
        filter: Optional[Callable[[T], bool]] = None,
    ) -> Optional[T]:
        """
        Walk from item by shift (+1 or -1) and return the first item passing
        filter, or None once the walk runs off either end.
        """
        if shift == 0:
            raise ValueError("shift must be non-zero")

        position = self.position_of(item)
        if position is None:
            return None

        position += shift
        while 0 <= position < len(self._items):
            candidate = self._items[position]
            if filter is None or filter(candidate):
                return candidate
            position += shift

        return None

    def slice_between(self, start_item: Scrobble, end_item: Scrobble) -> PointCollection[T]:
        """New collection from start_item to end_item, both inclusive."""
        start = self.position_of(start_item)
        end = self.position_of(end_item)
        if start is None or end is None or end < start:
            return PointCollection()
        return PointCollection(self._items[start:end + 1])

    def slice_time_range(self, start: float, end: float) -> PointCollection[T]:
        """
        Items with start <= timestamp <= end plus one neighbour on each side.

        Every item sharing a boundary timestamp is kept, which slicing between
        get_previous(start) and get_next(end) does not guarantee.
        """
        if not self._items:
            return PointCollection()
        ts = self.timestamps
        first = max(int(np.searchsorted(ts, start, side='left')) - 1, 0)
        last = min(int(np.searchsorted(ts, end, side='right')), len(self._items) - 1)
        return PointCollection(self._items[first:last + 1])

    # -------------------------------------------------------------------------
    # Growable use (highlighted points)
    # -------------------------------------------------------------------------

    def push(self, item: T):
        self._items.append(item)
        self._timestamps = None
        self._positions = None

    def reset(self):
        self._items = []
        self._timestamps = None
        self._positions = None
