"""ResultAdapter — shared skip/success/error shaping for RunResult-based domains."""

from abc import ABC, abstractmethod
from collections.abc import Sequence

from logeye.engine.domain.outcome import (
    UNEXPECTED_MESSAGE,
    UNEXPECTED_NAME,
    Failed,
    RunResult,
    Skipped,
    Succeeded,
)
from logeye.registry.domain.item import NamedItem


class ResultAdapter[TItem: NamedItem, V, TSummary](ABC):
    """Builds RunResult[V] values; subclasses supply coerce() and build_summary().

    Satisfies the RunAdapter protocol structurally.
    """

    domain: str = "batch"

    def skip_result(self, item: TItem) -> RunResult[V]:
        return RunResult(name=item.name, outcome=Skipped())

    def success_result(
        self,
        item: TItem,
        value: object,
        duration_ms: int,
    ) -> RunResult[V]:
        return RunResult(
            name=item.name,
            outcome=Succeeded(value=self.coerce(item=item, value=value)),
            duration_ms=duration_ms,
        )

    def error_result(
        self,
        item: TItem,
        message: str,
        duration_ms: int,
    ) -> RunResult[V]:
        return RunResult(
            name=item.name,
            outcome=Failed(message=message),
            duration_ms=duration_ms,
        )

    def unexpected_result(self) -> RunResult[V]:
        return RunResult(name=UNEXPECTED_NAME, outcome=Failed(message=UNEXPECTED_MESSAGE))

    @abstractmethod
    def coerce(self, item: TItem, value: object) -> V:
        """Validate a raw return value; raise ResultShapeError if it does not fit."""

    @abstractmethod
    def build_summary(
        self,
        results: Sequence[RunResult[V]],
        total_duration_ms: int,
    ) -> TSummary: ...
