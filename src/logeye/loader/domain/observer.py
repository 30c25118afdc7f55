"""Observer port for the loader domain — defines events in domain language."""

from typing import Protocol


class LoaderObserver(Protocol):
    def checks_loading_started(self, path: str) -> None: ...

    def checks_loading_completed(
        self,
        path: str,
        module_sha256: str,
        total_evals: int,
        total_enrichers: int,
        total_filters: int,
    ) -> None: ...

    def checks_loading_failed(self, path: str, reason: str) -> None: ...
