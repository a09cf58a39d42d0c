from __future__ import annotations

import threading

from .repository import CounterRepository


class InMemoryCounterRepository(CounterRepository):
    def __init__(self) -> None:
        self._values: dict[str, int] = {}
        self._lock = threading.Lock()

    def next_value(self, name: str) -> int:
        with self._lock:
            value = self._values.get(name, 0) + 1
            self._values[name] = value
            return value

    def current_value(self, name: str) -> int:
        with self._lock:
            return self._values.get(name, 0)
