"""ConditionRegistry — holds the single batch-wide gate, if any."""

import threading

from logeye.registry.domain.item import ConditionFunction


class ConditionRegistry:
    """At most one global condition; setting a new one replaces the old."""

    def __init__(self) -> None:
        self._condition: ConditionFunction | None = None
        self._lock = threading.Lock()

    def set(self, condition: ConditionFunction) -> None:
        with self._lock:
            self._condition = condition

    def get(self) -> ConditionFunction | None:
        with self._lock:
            return self._condition

    def has(self) -> bool:
        return self.get() is not None

    def clear(self) -> None:
        with self._lock:
            self._condition = None
