# src/eventemitter/pool.py
from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Generic, List, Optional, TypeVar

from eventemitter import settings
from eventemitter.errors import PoolExhaustedError

__all__ = ["ObjectPool"]

_LOG = logging.getLogger(__name__)

T = TypeVar("T")


def _release_hook(obj: Any) -> Callable[[], None]:
    # Events expose release(), emitters expose dispose()
    hook = getattr(obj, "release", None) or getattr(obj, "dispose", None)
    if hook is None:
        raise TypeError(f"{type(obj).__name__} has no release() or dispose() hook")
    return hook


class ObjectPool(Generic[T]):
    """
    Recycles objects that follow the init/release pooling hooks:

        events = ObjectPool(Event)
        ev = events.acquire("tick")      # Event.init("tick")
        emitter.trigger_event(ev)
        events.release(ev)               # Event.release()

    - ``size`` instances are built up front
    - ``max_size`` caps live (acquired, not yet released) instances
    """

    def __init__(
        self,
        factory: Callable[[], T],
        size: Optional[int] = None,
        *,
        max_size: Optional[int] = None,
    ) -> None:
        self._factory = factory
        self._max = max_size
        self._free: List[T] = []
        self._live: Dict[int, T] = {}
        for _ in range(settings.DEFAULT_POOL_SIZE if size is None else max(0, int(size))):
            self._free.append(factory())

    @property
    def free_count(self) -> int:
        return len(self._free)

    @property
    def live_count(self) -> int:
        return len(self._live)

    def acquire(self, *args: Any) -> T:
        if self._max is not None and len(self._live) >= self._max:
            raise PoolExhaustedError(f"pool limit of {self._max} live objects reached")
        obj = self._free.pop() if self._free else self._factory()
        try:
            obj.init(*args)  # type: ignore[attr-defined]
        except Exception:
            self._free.append(obj)
            raise
        self._live[id(obj)] = obj
        return obj

    def release(self, obj: T) -> None:
        if self._live.get(id(obj)) is not obj:
            raise ValueError(f"{obj!r} was not acquired from this pool")
        hook = _release_hook(obj)
        del self._live[id(obj)]
        hook()
        self._free.append(obj)

    def clear(self) -> None:
        """Forget every free instance; live ones are still accepted back."""
        dropped = len(self._free)
        self._free.clear()
        if dropped:
            _LOG.debug("Dropped %d pooled objects", dropped)
