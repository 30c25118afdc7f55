"""Observer port for the execution engine — defines events in domain language."""

from typing import Protocol


class EngineObserver(Protocol):
    """Observer port emitting structured events while a batch runs.

    Implementations may log to structlog or record for tests.
    """

    def batch_started(self, domain: str, session_id: str, total_items: int) -> None: ...

    def batch_skipped(self, domain: str, session_id: str, reason: str) -> None: ...

    def item_failed(
        self,
        domain: str,
        session_id: str,
        name: str,
        reason: str,
        duration_ms: int,
    ) -> None: ...

    def item_unexpected_fault(
        self,
        domain: str,
        session_id: str,
        name: str,
        reason: str,
    ) -> None: ...

    def batch_completed(
        self,
        domain: str,
        session_id: str,
        total_items: int,
        total_duration_ms: int,
    ) -> None: ...
