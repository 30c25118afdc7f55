"""ScopedRegistry — ordered, name-keyed, scope-filterable store of registered checks."""

import threading
from collections.abc import Callable, Hashable

from logeye.context.domain.context import EvalContext
from logeye.registry.domain.item import (
    ScopedItem,
    applies_to_session,
    applies_to_subagent,
)
from logeye.registry.infrastructure.errors import RegistrationError


def _by_name(item: ScopedItem) -> Hashable:
    return item.name


class ScopedRegistry[T: ScopedItem]:
    """Holds registered items in registration order.

    Registering an item whose partition key already exists replaces the old
    entry at its original position; new keys are appended. The partition key
    is the item name unless a subclass widens it.

    Reads return fresh list snapshots, so callers may mutate what they get
    back without touching the registry. A lock guards every access, which
    makes registering while a batch is running safe.
    """

    def __init__(
        self,
        key: str,
        partition_key: Callable[[T], Hashable] = _by_name,
    ) -> None:
        self._key = key
        self._partition_key = partition_key
        self._items: list[T] = []
        self._lock = threading.Lock()

    @property
    def key(self) -> str:
        return self._key

    def register(self, item: T) -> None:
        """Insert item, or replace the entry sharing its partition key in place.

        Raises:
            RegistrationError: if the item name is empty.
        """
        if not item.name:
            raise RegistrationError(registry=self._key, reason="name must be non-empty")

        partition = self._partition_key(item)
        with self._lock:
            for index, existing in enumerate(self._items):
                if self._partition_key(existing) == partition:
                    self._items[index] = item
                    return
            self._items.append(item)

    def get_all(self) -> list[T]:
        with self._lock:
            return list(self._items)

    def get_session_scoped(self) -> list[T]:
        return [item for item in self.get_all() if applies_to_session(item.scope)]

    def get_subagent_scoped(self, subagent_type: str | None = None) -> list[T]:
        """Return items applicable to sub-agents.

        The subagent_type discriminator matches permissively: an item is only
        excluded when both it and the caller name a type and the two differ.
        """
        selected: list[T] = []
        for item in self.get_all():
            if not applies_to_subagent(item.scope):
                continue
            if (
                item.subagent_type
                and subagent_type
                and item.subagent_type != subagent_type
            ):
                continue
            selected.append(item)
        return selected

    def has_subagent_scoped(self) -> bool:
        return any(applies_to_subagent(item.scope) for item in self.get_all())

    def has(self) -> bool:
        with self._lock:
            return bool(self._items)

    def names(self) -> list[str]:
        return [item.name for item in self.get_all()]

    def clear(self) -> None:
        with self._lock:
            self._items = []

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)


def select_for_context[T: ScopedItem](
    registry: ScopedRegistry[T],
    context: EvalContext,
) -> list[T]:
    """Pick the registry items that apply to the scope of context."""
    if context.is_subagent:
        return registry.get_subagent_scoped(subagent_type=context.subagent_type)
    return registry.get_session_scoped()
