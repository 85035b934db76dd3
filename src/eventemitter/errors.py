# src/eventemitter/errors.py
"""Exceptions raised by the emitter and its pool."""


class EmitterError(RuntimeError):
    """Base error for everything this package raises."""


class EmitterDisposedError(EmitterError):
    """Raised when an emitter is used after dispose() and before init()."""


class PoolExhaustedError(EmitterError):
    """Raised when a bounded pool has no instance left to hand out."""
