# tests/test_event_and_pool.py
from __future__ import annotations

import pytest

from eventemitter import Event, EventEmitter, ObjectPool, PoolExhaustedError
from eventemitter import settings


def test_event_defaults_and_fields():
    ev = Event("pause")
    assert ev.type == "pause"
    assert ev.target is None
    assert ev.payload is None

    err = Event(404, target="loader", payload={"path": "/x"})
    assert (err.type, err.target, err.payload) == (404, "loader", {"path": "/x"})
    assert "404" in repr(err)


def test_event_init_and_release():
    ev = Event("a", target=object(), payload=[1])
    ev.release()
    assert (ev.type, ev.target, ev.payload) == (None, None, None)
    ev.init("b")
    assert ev.type == "b"


def test_pool_prebuilds_default_size():
    pool = ObjectPool(Event)
    assert pool.free_count == settings.DEFAULT_POOL_SIZE
    assert pool.live_count == 0


def test_pool_recycles_events():
    pool = ObjectPool(Event, size=1)
    first = pool.acquire("tick")
    assert first.type == "tick"
    assert pool.free_count == 0 and pool.live_count == 1

    first.payload = {"dt": 0.016}
    pool.release(first)
    assert first.type is None and first.payload is None
    assert pool.free_count == 1

    again = pool.acquire("tock")
    assert again is first
    assert again.type == "tock"


def test_pool_grows_past_prebuilt_size():
    pool = ObjectPool(Event, size=0)
    a = pool.acquire("a")
    b = pool.acquire("b")
    assert a is not b
    assert pool.live_count == 2


def test_pool_max_size():
    pool = ObjectPool(Event, size=0, max_size=1)
    ev = pool.acquire("a")
    with pytest.raises(PoolExhaustedError):
        pool.acquire("b")
    pool.release(ev)
    assert pool.acquire("c") is ev


def test_pool_rejects_foreign_objects():
    pool = ObjectPool(Event, size=0)
    with pytest.raises(ValueError):
        pool.release(Event("stranger"))
    ev = pool.acquire("a")
    pool.release(ev)
    with pytest.raises(ValueError):
        pool.release(ev)


def test_pool_recycles_emitters_through_dispose():
    pool = ObjectPool(EventEmitter, size=1)
    ee = pool.acquire()
    ee.on("a", lambda e: None)
    pool.release(ee)
    assert ee.disposed

    again = pool.acquire()
    assert again is ee
    assert not again.disposed
    assert again.get_listener_count("a") == 0


def test_pool_clear_drops_free_instances():
    pool = ObjectPool(Event, size=3)
    live = pool.acquire("a")
    pool.clear()
    assert pool.free_count == 0
    pool.release(live)
    assert pool.free_count == 1


def test_pool_needs_release_hook():
    class Bare:
        def init(self):
            pass

    pool = ObjectPool(Bare, size=0)
    obj = pool.acquire()
    with pytest.raises(TypeError):
        pool.release(obj)


def test_pool_keeps_instance_when_init_fails():
    class Picky(Event):
        def init(self, type):
            if type is None:
                raise ValueError("type required")
            super().init(type)

    pool = ObjectPool(Picky, size=1)
    with pytest.raises(ValueError):
        pool.acquire(None)
    assert pool.free_count == 1
    assert pool.live_count == 0
    assert pool.acquire("ok").type == "ok"
