# timeline/store/point_buffer.py
"""
PointBuffer - pixel hit-testing against the last draw pass.

The plot is cut into square cells as wide as one point. A point's footprint
overlaps at most four cells and is registered in each of them, so a lookup
only inspects the cell under the pointer.
"""

from __future__ import annotations
from typing import Dict, Optional, Tuple
import math

from ..model.entities import Point

Cell = Tuple[int, int]
Pixel = Tuple[int, int]


class PointBuffer:

    def __init__(self, half_size: int):
        if half_size < 1:
            raise ValueError(f"half_size must be >= 1, got {half_size}")
        self.half_size = half_size
        self.cell_size = 2 * half_size
        # cell -> {pixel: point}, insertion order == draw order
        self._cells: Dict[Cell, Dict[Pixel, Point]] = {}
        self._count = 0

    def __len__(self) -> int:
        return self._count

    def _cell(self, x: float, y: float) -> Cell:
        return (math.floor(x / self.cell_size), math.floor(y / self.cell_size))

    def put_point(self, point: Point):
        pixel = (round(point.x), round(point.y))
        h = self.half_size
        x0, y0 = self._cell(pixel[0] - h, pixel[1] - h)
        x1, y1 = self._cell(pixel[0] + h, pixel[1] + h)

        for cx in range(x0, x1 + 1):
            for cy in range(y0, y1 + 1):
                cell = self._cells.setdefault((cx, cy), {})
                # re-insert so the newest point is last in draw order
                cell.pop(pixel, None)
                cell[pixel] = point

        self._count += 1

    def get_point(self, x: float, y: float) -> Optional[Point]:
        """Topmost (last drawn) point whose footprint contains (x, y), or None."""
        cell = self._cells.get(self._cell(x, y))
        if not cell:
            return None

        h = self.half_size
        for (px, py), point in reversed(cell.items()):
            if abs(px - x) <= h and abs(py - y) <= h:
                return point
        return None

    def reset(self):
        self._cells = {}
        self._count = 0
