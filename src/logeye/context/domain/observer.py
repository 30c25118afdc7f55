"""Observer port for the context domain — defines events in domain language."""

from typing import Protocol


class ContextObserver(Protocol):
    def context_loading_started(self, path: str) -> None: ...

    def context_loading_completed(
        self,
        path: str,
        session_id: str,
        total_entries: int,
    ) -> None: ...

    def context_loading_failed(self, path: str, reason: str) -> None: ...
