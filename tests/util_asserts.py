# tests/util_asserts.py
"""
Small listener helpers for tests.
"""
from __future__ import annotations

from typing import Any, List, Optional, Tuple

from eventemitter import current_emitter


class Recorder:
    """
    Listener that appends (label, event, dispatching emitter) to a shared log,
    so ordering across several recorders can be asserted.
    """

    def __init__(self, label: str, log: Optional[List[Tuple[str, Any, Any]]] = None) -> None:
        self.label = label
        self.log = log if log is not None else []

    def __call__(self, event: Any) -> None:
        self.log.append((self.label, event, current_emitter()))

    @property
    def calls(self) -> int:
        return sum(1 for label, _, _ in self.log if label == self.label)


def labels(log: List[Tuple[str, Any, Any]]) -> List[str]:
    return [label for label, _, _ in log]
