"""StructlogEngineObserver — production observer that delegates to structlog."""

import structlog


class StructlogEngineObserver:
    """Logs engine events to structlog.

    Does NOT inherit from EngineObserver (structural typing via Protocol).
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def batch_started(self, domain: str, session_id: str, total_items: int) -> None:
        self._log.debug(
            "engine.batch.started",
            domain=domain,
            session_id=session_id,
            total_items=total_items,
        )

    def batch_skipped(self, domain: str, session_id: str, reason: str) -> None:
        self._log.info(
            "engine.batch.skipped",
            domain=domain,
            session_id=session_id,
            reason=reason,
        )

    def item_failed(
        self,
        domain: str,
        session_id: str,
        name: str,
        reason: str,
        duration_ms: int,
    ) -> None:
        self._log.warning(
            "engine.item.failed",
            domain=domain,
            session_id=session_id,
            name=name,
            reason=reason,
            duration_ms=duration_ms,
        )

    def item_unexpected_fault(
        self,
        domain: str,
        session_id: str,
        name: str,
        reason: str,
    ) -> None:
        self._log.error(
            "engine.item.unexpected_fault",
            domain=domain,
            session_id=session_id,
            name=name,
            reason=reason,
        )

    def batch_completed(
        self,
        domain: str,
        session_id: str,
        total_items: int,
        total_duration_ms: int,
    ) -> None:
        self._log.info(
            "engine.batch.completed",
            domain=domain,
            session_id=session_id,
            total_items=total_items,
            total_duration_ms=total_duration_ms,
        )
