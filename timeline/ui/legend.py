# timeline/ui/legend.py
"""
Legend - genre list with at most one highlighted entry.
"""

from __future__ import annotations
from typing import List, Optional

from ..dataset.genre import GenreEntry
from ..render.surface import Surface


class Legend:

    def __init__(self, genre_list: List[GenreEntry], surface: Surface):
        self.genre_list = genre_list
        self.surface = surface
        self.highlighted_genre_index: Optional[int] = None

    def find(self, genre: str) -> Optional[int]:
        for i, entry in enumerate(self.genre_list):
            if entry.name == genre:
                return i
        return None

    @property
    def highlighted_genre(self) -> Optional[str]:
        if self.highlighted_genre_index is None:
            return None
        return self.genre_list[self.highlighted_genre_index].name

    def render(self):
        for entry in self.genre_list:
            self.surface.paint_legend_genre(entry.name, entry.color, False)

    def highlight_genre(self, genre: str):
        index = self.find(genre)
        # genres missing from the taxonomy have no legend row
        if index is None:
            return

        self.remove_genre_highlight()
        entry = self.genre_list[index]
        self.surface.paint_legend_genre(entry.name, entry.highlighted_color, True)
        self.highlighted_genre_index = index

    def remove_genre_highlight(self):
        if self.highlighted_genre_index is not None:
            entry = self.genre_list[self.highlighted_genre_index]
            self.surface.paint_legend_genre(entry.name, entry.color, False)
            self.highlighted_genre_index = None
