"""Structlog implementation of the LoaderObserver port."""

import structlog


class StructlogLoaderObserver:
    """Delegates loader domain events to structlog.

    Satisfies the LoaderObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def checks_loading_started(self, path: str) -> None:
        self._log.info("loader.checks.started", path=path)

    def checks_loading_completed(
        self,
        path: str,
        module_sha256: str,
        total_evals: int,
        total_enrichers: int,
        total_filters: int,
    ) -> None:
        self._log.info(
            "loader.checks.completed",
            path=path,
            module_sha256=module_sha256[:12],
            total_evals=total_evals,
            total_enrichers=total_enrichers,
            total_filters=total_filters,
        )

    def checks_loading_failed(self, path: str, reason: str) -> None:
        self._log.error("loader.checks.failed", path=path, reason=reason)
