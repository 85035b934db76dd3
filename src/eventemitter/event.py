# src/eventemitter/event.py
from __future__ import annotations

from typing import Any, Hashable, Optional


class Event:
    """
    Plain carrier handed to listeners by ``EventEmitter.trigger_event``.

        pause = Event("pause")
        not_found = Event(404, payload={"path": "/x"})

    Subclass it to add custom fields; the emitter only ever reads ``type``.
    """

    def __init__(self, type: Optional[Hashable] = None, target: Any = None, payload: Any = None) -> None:
        self.type = type
        self.target = target
        self.payload = payload

    # ---- pooling hooks -----------------------------------------------------

    def init(self, type: Hashable) -> None:
        self.type = type

    def release(self) -> None:
        self.type = None
        self.target = None
        self.payload = None

    def __repr__(self) -> str:
        return f"{type(self).__name__}(type={self.type!r}, target={self.target!r}, payload={self.payload!r})"
