# src/eventemitter/pygame_bridge.py
from __future__ import annotations

from typing import Any, Callable, Optional

import pygame

from eventemitter.emitter import EventEmitter
from eventemitter.event import Event
from eventemitter.pool import ObjectPool

__all__ = ["PygameEventPump"]


class PygameEventPump:
    """
    Feeds the pygame event queue into an emitter, once per frame:

        pump = PygameEventPump(emitter)
        emitter.on(pygame.KEYDOWN, on_key)
        while running:
            pump.pump()

    Each pygame event becomes an ``Event`` whose ``type`` is the pygame event id,
    ``target`` the pump and ``payload`` the pygame event's attribute dict.
    Event objects are pooled and released once dispatch returns, so listeners
    must copy anything they want to keep. A listener exception ends the pump;
    events not yet dispatched remain on the pygame queue for the next call.
    """

    def __init__(self, emitter: EventEmitter, event_factory: Optional[Callable[[], Event]] = None) -> None:
        self.emitter = emitter
        self._events: ObjectPool[Event] = ObjectPool(event_factory or Event)

    def pump(self) -> int:
        """Dispatch every queued pygame event; return how many were sent."""
        count = 0
        while True:
            raw = pygame.event.poll()
            if raw.type == pygame.NOEVENT:
                break
            ev = self._events.acquire(raw.type)
            try:
                ev.target = self
                ev.payload = dict(raw.dict)
                self.emitter.trigger_event(ev)
            finally:
                self._events.release(ev)
            count += 1
        return count

    @staticmethod
    def post(type: int, **attrs: Any) -> None:
        """Queue a pygame event for the next pump()."""
        pygame.event.post(pygame.event.Event(type, attrs))
