"""ViewRegistry — named dashboard views in registration order."""

import threading

from logeye.registry.domain.item import NamedItem
from logeye.registry.infrastructure.errors import RegistrationError


class ViewRegistry[T: NamedItem]:
    """Upsert-by-name store for dashboard view descriptors."""

    def __init__(self, key: str) -> None:
        self._key = key
        self._views: list[T] = []
        self._lock = threading.Lock()

    def register(self, view: T) -> None:
        if not view.name:
            raise RegistrationError(registry=self._key, reason="name must be non-empty")
        with self._lock:
            for index, existing in enumerate(self._views):
                if existing.name == view.name:
                    self._views[index] = view
                    return
            self._views.append(view)

    def get(self, name: str) -> T | None:
        with self._lock:
            return next((v for v in self._views if v.name == name), None)

    def get_all(self) -> list[T]:
        with self._lock:
            return list(self._views)

    def has(self) -> bool:
        with self._lock:
            return bool(self._views)

    def clear(self) -> None:
        with self._lock:
            self._views = []
