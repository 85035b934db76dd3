# src/eventemitter/emitter.py
from __future__ import annotations

import logging
from contextvars import ContextVar
from typing import Any, Callable, Dict, Hashable, List, Optional, Tuple

from eventemitter.errors import EmitterDisposedError

__all__ = ["EventEmitter", "Listener", "current_emitter"]

_LOG = logging.getLogger(__name__)

Listener = Callable[[Any], None]

# Emitter whose listeners are running right now (None outside of a dispatch)
_current: ContextVar[Optional["EventEmitter"]] = ContextVar("eventemitter_current", default=None)


def current_emitter() -> Optional["EventEmitter"]:
    """Return the emitter dispatching to the calling listener, or None."""
    return _current.get()


def _remove_last(listeners: List[Listener], callback: Listener) -> bool:
    # Scan back-to-front: with duplicates, the most recent registration goes.
    for i in range(len(listeners) - 1, -1, -1):
        if listeners[i] is callback:
            del listeners[i]
            return True
    return False


class EventEmitter:
    """
    Synchronous pub/sub registry:
        emitter.on("count", handler)
        emitter.pipe(log_everything)      # sees every event type
        emitter.trigger_event(Event("count"))

    Listeners are called with the event as their only argument, type listeners
    first and pipe listeners after, each group in insertion order. Inside a
    listener, ``current_emitter()`` returns the emitter doing the dispatch.
    Exceptions raised by a listener propagate and end that dispatch.
    """

    def __init__(self) -> None:
        self._listeners: Optional[Dict[Hashable, List[Listener]]] = {}
        self._pipes: Optional[List[Listener]] = []

    # ------------------------------------------------------------------ #
    # Type-keyed listeners
    # ------------------------------------------------------------------ #
    def add_listener(self, type: Hashable, callback: Listener) -> None:
        registry = self._registry()
        slot = registry.get(type)
        if slot is None:
            registry[type] = [callback]
        else:
            slot.append(callback)
        _LOG.debug("Added listener %r for %r", callback, type)

    on = add_listener

    def remove_listener(self, type: Hashable, callback: Listener) -> None:
        registry = self._registry()
        slot = registry.get(type)
        if slot is None:
            return
        if _remove_last(slot, callback):
            if not slot:
                del registry[type]
            _LOG.debug("Removed listener %r for %r", callback, type)

    def remove_all_listeners(self, type: Hashable) -> None:
        if self._registry().pop(type, None) is not None:
            _LOG.debug("Removed all listeners for %r", type)

    def get_listener_count(self, type: Hashable) -> int:
        slot = self._registry().get(type)
        return len(slot) if slot else 0

    def has_listeners(self, type: Hashable) -> bool:
        return self.get_listener_count(type) > 0

    def event_types(self) -> Tuple[Hashable, ...]:
        """Types with at least one listener, in first-registration order."""
        return tuple(self._registry())

    # ------------------------------------------------------------------ #
    # Pipe channel (receives every event)
    # ------------------------------------------------------------------ #
    def pipe(self, callback: Listener) -> None:
        self._pipe_channel().append(callback)
        _LOG.debug("Piped listener %r", callback)

    def unpipe(self, callback: Listener) -> None:
        if _remove_last(self._pipe_channel(), callback):
            _LOG.debug("Unpiped listener %r", callback)

    def unpipe_all(self) -> None:
        self._pipe_channel().clear()

    def get_piped_listener_count(self) -> int:
        return len(self._pipe_channel())

    # ------------------------------------------------------------------ #
    # Dispatch
    # ------------------------------------------------------------------ #
    def trigger_event(self, event: Any) -> None:
        slot = self._registry().get(event.type)
        # Snapshots: mutations made by listeners apply from the next trigger
        listeners = tuple(slot) if slot else ()
        pipes = tuple(self._pipe_channel())
        if not listeners and not pipes:
            return

        token = _current.set(self)
        try:
            for listener in listeners:
                listener(event)
            for listener in pipes:
                listener(event)
        finally:
            _current.reset(token)

    emit = trigger_event

    # ------------------------------------------------------------------ #
    # Pooling hooks
    # ------------------------------------------------------------------ #
    def init(self) -> None:
        """Reset to an empty emitter; also revives a disposed one."""
        self._listeners = {}
        self._pipes = []
        _LOG.debug("Initialised %r", self)

    def dispose(self) -> None:
        """Drop all listeners and mark the emitter inactive until init()."""
        if self._listeners is None:
            return
        self._listeners = None
        self._pipes = None
        _LOG.debug("Disposed %r", self)

    @property
    def disposed(self) -> bool:
        return self._listeners is None

    # ---- internals ---------------------------------------------------------

    def _registry(self) -> Dict[Hashable, List[Listener]]:
        if self._listeners is None:
            raise EmitterDisposedError(f"{self!r} used after dispose(); call init() first")
        return self._listeners

    def _pipe_channel(self) -> List[Listener]:
        if self._pipes is None:
            raise EmitterDisposedError(f"{self!r} used after dispose(); call init() first")
        return self._pipes

    def __repr__(self) -> str:
        if self._listeners is None:
            return f"<{type(self).__name__} disposed>"
        return f"<{type(self).__name__} types={len(self._listeners)} pipes={len(self._pipes or ())}>"
