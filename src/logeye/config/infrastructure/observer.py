"""Structlog implementation of the ConfigObserver port."""

import structlog


class StructlogConfigObserver:
    """Delegates config domain events to structlog.

    Satisfies the ConfigObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def config_loaded(self, path: str) -> None:
        self._log.info("config.loaded", path=path)

    def config_defaults_used(self) -> None:
        self._log.info("config.defaults_used")

    def config_cache_disabled(self) -> None:
        self._log.info(
            "config.cache_disabled",
            message="Summaries will be recomputed on every request",
        )
