"""RunAdapter port — how one domain shapes results and folds them into a summary."""

from collections.abc import Sequence
from typing import Protocol


class RunAdapter[TItem, TResult, TSummary](Protocol):
    """Strategy the engine calls back into; one implementation per domain.

    domain is a short label ("evaluation", "enrichment", "filter") used in
    logs only.
    """

    @property
    def domain(self) -> str: ...

    def skip_result(self, item: TItem) -> TResult: ...

    def success_result(self, item: TItem, value: object, duration_ms: int) -> TResult:
        """Shape a function's raw return value.

        May raise ResultShapeError when value does not fit the domain; the
        engine then records an error result for the item.
        """
        ...

    def error_result(self, item: TItem, message: str, duration_ms: int) -> TResult: ...

    def unexpected_result(self) -> TResult: ...

    def build_summary(
        self,
        results: Sequence[TResult],
        total_duration_ms: int,
    ) -> TSummary: ...
