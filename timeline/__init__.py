# timeline/__init__.py
"""
Scrobble Timeline - listening history as an interactive scatter plot.

Core components:
- Timeline: Draw pass over the visible scrobbles, owns the indexes
- SelectionController: Hover/arrow/legend/wheel/resize state machine
- TimelineSession: Data cache and the live controller
- ZoomViewport: Pointer-anchored wheel zoom over the time axis
- PointCollection / PointBuffer / PointRegistry / SummaryRegistry: Indexes
- SignalBridge: Event routing between the host and the core
"""

from .config import (
    Config,
    DEFAULT_CONFIG,
    TimelineConfig,
    PointConfig,
    PlotConfig,
    TimeAxisConfig,
    ValueFactors,
    ColorValueFactors,
    GenreGroup,
)

from .core import (
    # Errors
    TimelineError,
    EmptyCollectionError,
    ConfigError,
    DatasetError,

    # Signals
    SignalBridge,
    SignalEmitter,
    Subscription,

    # Timers
    FrameClock,
    Debouncer,
)

from .model import Scrobble, Point, Track, Album, Artist, HSL

from .store import PointCollection, PointBuffer, PointRegistry, SummaryRegistry

from .time import ZoomViewport

from .render import Surface, RecordingSurface

from .dataset import build_scrobble_list

from .interactive import (
    Timeline,
    SelectionController,
    TimelineSession,
)

__version__ = '0.1.0'

__all__ = [
    # Config
    'Config', 'DEFAULT_CONFIG', 'TimelineConfig', 'PointConfig', 'PlotConfig',
    'TimeAxisConfig', 'ValueFactors', 'ColorValueFactors', 'GenreGroup',

    # Core
    'TimelineError', 'EmptyCollectionError', 'ConfigError', 'DatasetError',
    'SignalBridge', 'SignalEmitter', 'Subscription', 'FrameClock', 'Debouncer',

    # Model
    'Scrobble', 'Point', 'Track', 'Album', 'Artist', 'HSL',

    # Indexes
    'PointCollection', 'PointBuffer', 'PointRegistry', 'SummaryRegistry',

    # Interaction
    'ZoomViewport', 'Surface', 'RecordingSurface', 'build_scrobble_list',
    'Timeline', 'SelectionController', 'TimelineSession',
]
