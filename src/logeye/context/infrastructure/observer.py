"""Structlog implementation of the ContextObserver port."""

import structlog


class StructlogContextObserver:
    """Delegates context domain events to structlog.

    Satisfies the ContextObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def context_loading_started(self, path: str) -> None:
        self._log.info("context.loading.started", path=path)

    def context_loading_completed(
        self,
        path: str,
        session_id: str,
        total_entries: int,
    ) -> None:
        self._log.info(
            "context.loading.completed",
            path=path,
            session_id=session_id,
            total_entries=total_entries,
        )

    def context_loading_failed(self, path: str, reason: str) -> None:
        self._log.error("context.loading.failed", path=path, reason=reason)
