# --- FILE: src/eventemitter/__init__.py
"""
Synchronous event emitter with type-keyed listeners and an all-events pipe.

The pygame bridge lives in ``eventemitter.pygame_bridge`` and is imported on demand.
"""
from eventemitter.emitter import EventEmitter, Listener, current_emitter
from eventemitter.errors import EmitterDisposedError, EmitterError, PoolExhaustedError
from eventemitter.event import Event
from eventemitter.pool import ObjectPool

__all__ = [
    "EventEmitter",
    "Event",
    "Listener",
    "ObjectPool",
    "current_emitter",
    "EmitterError",
    "EmitterDisposedError",
    "PoolExhaustedError",
]
