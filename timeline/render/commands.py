# timeline/render/commands.py
"""
Command List System

Pure-data record of surface calls. RecordingSurface implements the Surface
protocol by appending one frozen command per call, so a draw pass can be
inspected, diffed or replayed onto a real surface later.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Tuple, Type, TypeVar, Union

from ..model.color import HSL
from ..model.entities import Scrobble
from ..store.summary_registry import Summary, Totals


# =============================================================================
# Plot Commands
# =============================================================================

@dataclass(frozen=True)
class CmdClear:
    """Background fill, starts a full redraw."""


@dataclass(frozen=True)
class CmdDrawPoint:
    x: int
    y: int
    color: HSL


@dataclass(frozen=True)
class CmdDrawTimeAxis:
    x0: int
    x1: int


# =============================================================================
# Label Commands
# =============================================================================

@dataclass(frozen=True)
class CmdTimeLabel:
    label_id: str
    x: int
    container_width: int
    text: str


@dataclass(frozen=True)
class CmdClearTimeLabel:
    label_id: str


@dataclass(frozen=True)
class CmdLabel:
    """Artist name next to a point."""
    x: int
    y: int
    container_width: int
    text: str
    color: HSL
    is_primary: bool


@dataclass(frozen=True)
class CmdRemoveLabels:
    pass


# =============================================================================
# Legend / Info Commands
# =============================================================================

@dataclass(frozen=True)
class CmdLegendGenre:
    genre: str
    color: HSL
    highlighted: bool


@dataclass(frozen=True)
class CmdIntro:
    visible: bool
    summary: Optional[Summary] = None


@dataclass(frozen=True)
class CmdScrobbleInfo:
    scrobble: Scrobble
    totals: Totals


Command = Union[
    CmdClear, CmdDrawPoint, CmdDrawTimeAxis,
    CmdTimeLabel, CmdClearTimeLabel, CmdLabel, CmdRemoveLabels,
    CmdLegendGenre, CmdIntro, CmdScrobbleInfo,
]

C = TypeVar('C')


# =============================================================================
# Command List
# =============================================================================

@dataclass
class CommandList:
    commands: List[Command] = field(default_factory=list)

    def add(self, cmd: Command):
        self.commands.append(cmd)

    def clear(self):
        self.commands.clear()

    def of_type(self, cmd_type: Type[C]) -> List[C]:
        return [c for c in self.commands if isinstance(c, cmd_type)]

    def since_last(self, cmd_type: type) -> List[Command]:
        """Commands after the most recent command of cmd_type (all if none)."""
        for i in range(len(self.commands) - 1, -1, -1):
            if isinstance(self.commands[i], cmd_type):
                return self.commands[i + 1:]
        return list(self.commands)

    def __len__(self) -> int:
        return len(self.commands)

    def __iter__(self) -> Iterator[Command]:
        return iter(self.commands)


# =============================================================================
# Recording Surface
# =============================================================================

class RecordingSurface:
    """Headless Surface that records every call into a CommandList."""

    def __init__(self, width: int = 1200, height: int = 600):
        self.width = width
        self.height = height
        self.commands = CommandList()

    def resize(self, width: int, height: int):
        self.width = width
        self.height = height

    def get_dimensions(self) -> Tuple[int, int]:
        return (self.width, self.height)

    def draw_background(self):
        self.commands.add(CmdClear())

    def draw_point(self, x: int, y: int, color: HSL):
        self.commands.add(CmdDrawPoint(x, y, color))

    def draw_time_axis(self, x0: int, x1: int):
        self.commands.add(CmdDrawTimeAxis(x0, x1))

    def render_time_label(self, label_id: str, x: int, container_width: int, text: str):
        self.commands.add(CmdTimeLabel(label_id, x, container_width, text))

    def clear_time_label(self, label_id: str):
        self.commands.add(CmdClearTimeLabel(label_id))

    def render_label(self, x: int, y: int, container_width: int, text: str,
                     color: HSL, is_primary: bool):
        self.commands.add(CmdLabel(x, y, container_width, text, color, is_primary))

    def remove_all_labels(self):
        self.commands.add(CmdRemoveLabels())

    def paint_legend_genre(self, genre: str, color: HSL, highlighted: bool):
        self.commands.add(CmdLegendGenre(genre, color, highlighted))

    def show_intro_message(self, summary: Optional[Summary] = None):
        self.commands.add(CmdIntro(True, summary))

    def hide_intro_message(self):
        self.commands.add(CmdIntro(False))

    def render_scrobble_info(self, scrobble: Scrobble, totals: Totals):
        self.commands.add(CmdScrobbleInfo(scrobble, totals))

    # -------------------------------------------------------------------------
    # Inspection
    # -------------------------------------------------------------------------

    def pixels(self) -> dict:
        """Final color per (x, y) after replaying point draws since the last clear."""
        canvas = {}
        for cmd in self.commands.since_last(CmdClear):
            if isinstance(cmd, CmdDrawPoint):
                canvas[(cmd.x, cmd.y)] = cmd.color
        return canvas

    def labels(self) -> List[CmdLabel]:
        """Artist labels currently on screen."""
        shown: List[CmdLabel] = []
        for cmd in self.commands:
            if isinstance(cmd, CmdRemoveLabels):
                shown = []
            elif isinstance(cmd, CmdLabel):
                shown.append(cmd)
        return shown
