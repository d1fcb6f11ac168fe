# timeline/core/signal.py
"""
SignalBridge - Observer hub routing input events to the timeline components.

Components never talk to a windowing toolkit directly. A host (browser shim,
Qt widget, test) emits input signals on the bridge; the controller holds plain
callback registrations and gives them back through Subscription.cancel().
"""

from __future__ import annotations
from typing import Callable, Dict, List, Optional
from dataclasses import dataclass, field
import logging

logger = logging.getLogger(__name__)

# =============================================================================
# Signal Types
# =============================================================================

# Input (host -> core)
SIGNAL_DT = 'dt'                        # (seconds,)
SIGNAL_POINTER_MOVE = 'pointer_move'    # (x, y)
SIGNAL_WHEEL = 'wheel'                  # (offset_x, delta_y)
SIGNAL_KEY_DOWN = 'key_down'            # (key,)
SIGNAL_LEGEND_CLICK = 'legend_click'    # (genre, genre_group)
SIGNAL_RESIZE = 'resize'                # ()

# Output (core -> host)
SIGNAL_ZOOM_CHANGED = 'zoom_changed'            # ((start, end),)
SIGNAL_SELECTION_CHANGED = 'selection_changed'  # (SelectionState,)
SIGNAL_DRAWN = 'drawn'                          # (visible point count,)


# =============================================================================
# Connection / Subscription Handles
# =============================================================================

@dataclass
class Connection:
    """Handle to a single signal connection."""
    signal: str
    callback_id: int
    bridge: Optional[SignalBridge] = None

    @property
    def active(self) -> bool:
        return self.bridge is not None

    def cancel(self):
        if self.bridge:
            self.bridge._remove_connection(self.signal, self.callback_id)
            self.bridge = None


@dataclass
class Subscription:
    """A group of connections made together and cancelled together."""
    connections: List[Connection] = field(default_factory=list)

    @property
    def active(self) -> bool:
        return any(conn.active for conn in self.connections)

    def add(self, connection: Connection) -> Connection:
        self.connections.append(connection)
        return connection

    def cancel(self):
        for conn in self.connections:
            conn.cancel()
        self.connections.clear()


# =============================================================================
# Signal Bridge
# =============================================================================

class SignalBridge:
    """Central hub for signal routing."""

    def __init__(self):
        self._connections: Dict[str, Dict[int, Callable]] = {}
        self._next_id: int = 0
        self._blocked: set = set()
        self._emit_depth: int = 0
        self._pending_removes: List[tuple] = []

    def connect(self, signal: str, handler: Callable) -> Connection:
        handlers = self._connections.setdefault(signal, {})

        callback_id = self._next_id
        self._next_id += 1
        handlers[callback_id] = handler

        return Connection(signal=signal, callback_id=callback_id, bridge=self)

    def subscribe(self, handlers: Dict[str, Callable]) -> Subscription:
        """Connect several handlers at once, keyed by signal name."""
        subscription = Subscription()
        for signal, handler in handlers.items():
            subscription.add(self.connect(signal, handler))
        return subscription

    def emit(self, signal: str, *args, **kwargs):
        if signal in self._blocked:
            return

        handlers = self._connections.get(signal)
        if not handlers:
            return

        self._emit_depth += 1
        try:
            for handler in list(handlers.values()):
                try:
                    handler(*args, **kwargs)
                except Exception:
                    logger.exception("Signal handler error [%s]", signal)
        finally:
            self._emit_depth -= 1

            if self._emit_depth == 0 and self._pending_removes:
                for sig, cid in self._pending_removes:
                    self._do_remove(sig, cid)
                self._pending_removes.clear()

    def block(self, signal: str):
        self._blocked.add(signal)

    def unblock(self, signal: str):
        self._blocked.discard(signal)

    def is_connected(self, signal: str) -> bool:
        return bool(self._connections.get(signal))

    def _remove_connection(self, signal: str, callback_id: int):
        # Removing while emitting would mutate the dict being iterated
        if self._emit_depth > 0:
            self._pending_removes.append((signal, callback_id))
        else:
            self._do_remove(signal, callback_id)

    def _do_remove(self, signal: str, callback_id: int):
        handlers = self._connections.get(signal)
        if handlers is not None:
            handlers.pop(callback_id, None)


# =============================================================================
# Convenience
# =============================================================================

class SignalEmitter:
    """Mixin class for objects that emit signals."""

    _bridge: Optional[SignalBridge] = None

    def bind_bridge(self, bridge: SignalBridge):
        self._bridge = bridge

    def emit(self, signal: str, *args, **kwargs):
        if self._bridge:
            self._bridge.emit(signal, *args, **kwargs)
