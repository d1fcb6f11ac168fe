"""
Core plumbing: signals, cooperative timers, errors.
"""

from .errors import TimelineError, EmptyCollectionError, ConfigError, DatasetError
from .signal import (
    SignalBridge,
    SignalEmitter,
    Connection,
    Subscription,
    SIGNAL_DT,
    SIGNAL_POINTER_MOVE,
    SIGNAL_WHEEL,
    SIGNAL_KEY_DOWN,
    SIGNAL_LEGEND_CLICK,
    SIGNAL_RESIZE,
    SIGNAL_ZOOM_CHANGED,
    SIGNAL_SELECTION_CHANGED,
    SIGNAL_DRAWN,
)
from .timer import FrameClock, TimerHandle, Debouncer

__all__ = [
    'TimelineError', 'EmptyCollectionError', 'ConfigError', 'DatasetError',
    'SignalBridge', 'SignalEmitter', 'Connection', 'Subscription',
    'SIGNAL_DT', 'SIGNAL_POINTER_MOVE', 'SIGNAL_WHEEL', 'SIGNAL_KEY_DOWN',
    'SIGNAL_LEGEND_CLICK', 'SIGNAL_RESIZE', 'SIGNAL_ZOOM_CHANGED',
    'SIGNAL_SELECTION_CHANGED', 'SIGNAL_DRAWN',
    'FrameClock', 'TimerHandle', 'Debouncer',
]
