"""Dashboard filter adapter and runner — computes filter values for one session."""

from collections.abc import Sequence
from typing import Annotated

from pydantic import Strict, TypeAdapter, ValidationError

from logeye.context.domain.context import EvalContext
from logeye.dashboard.domain.item import FilterValue, RegisteredFilter
from logeye.dashboard.domain.summary import FilterComputeSummary
from logeye.engine.application.adapters import ResultAdapter
from logeye.engine.application.errors import ResultShapeError
from logeye.engine.application.runner import BatchRunner
from logeye.engine.domain.outcome import RunResult
from logeye.engine.domain.summary import count_outcomes

_FILTER_VALUE = TypeAdapter(Annotated[bool | int | float | str, Strict()])


class FilterAdapter(ResultAdapter[RegisteredFilter, FilterValue, FilterComputeSummary]):
    """Carries raw filter values through; aggregates only error/skip counts."""

    domain = "filter"

    def coerce(self, item: RegisteredFilter, value: object) -> FilterValue:
        try:
            return _FILTER_VALUE.validate_python(value)
        except ValidationError as exc:
            raise ResultShapeError(
                domain=self.domain,
                name=item.name,
                reason=f"expected bool, int, float or str, got {type(value).__name__}",
            ) from exc

    def build_summary(
        self,
        results: Sequence[RunResult[FilterValue]],
        total_duration_ms: int,
    ) -> FilterComputeSummary:
        error_count, skipped_count = count_outcomes(results)
        return FilterComputeSummary(
            results=tuple(results),
            total_duration_ms=total_duration_ms,
            error_count=error_count,
            skipped_count=skipped_count,
        )


async def run_filters(
    runner: BatchRunner,
    filters: Sequence[RegisteredFilter],
    context: EvalContext,
) -> FilterComputeSummary:
    return await runner.run_all(items=filters, context=context, adapter=FilterAdapter())
