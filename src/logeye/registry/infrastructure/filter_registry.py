"""FilterRegistry — a ScopedRegistry partitioned by (view, name)."""

from collections.abc import Hashable

from logeye.registry.domain.item import DEFAULT_VIEW, ViewScopedItem
from logeye.registry.infrastructure.scoped_registry import ScopedRegistry


def _by_view_and_name(item: ViewScopedItem) -> Hashable:
    return (item.view, item.name)


class FilterRegistry[T: ViewScopedItem](ScopedRegistry[T]):
    """Dashboard filters: the same name in two views gives two unrelated entries.

    get_all() keeps global registration order across views.
    """

    def __init__(self, key: str) -> None:
        super().__init__(key=key, partition_key=_by_view_and_name)

    def get_for_view(self, view: str = DEFAULT_VIEW) -> list[T]:
        return [item for item in self.get_all() if item.view == view]

    def views(self) -> list[str]:
        """View names that hold at least one filter, in first-registration order."""
        seen: dict[str, None] = {}
        for item in self.get_all():
            seen.setdefault(item.view, None)
        return list(seen)
