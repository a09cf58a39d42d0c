from __future__ import annotations

from typing import Protocol


class CounterRepository(Protocol):
    """Named, monotonically increasing counters.

    `next_value` must be atomic: two concurrent callers never receive the same value.
    """

    def next_value(self, name: str) -> int:
        raise NotImplementedError

    def current_value(self, name: str) -> int:
        raise NotImplementedError
