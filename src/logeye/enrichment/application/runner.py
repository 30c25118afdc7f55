"""Enrichment adapter and runner — collects key-value metadata for a session."""

from collections.abc import Sequence
from typing import Annotated

from pydantic import Strict, TypeAdapter, ValidationError

from logeye.context.domain.context import EvalContext
from logeye.engine.application.adapters import ResultAdapter
from logeye.engine.application.errors import ResultShapeError
from logeye.engine.application.runner import BatchRunner
from logeye.engine.domain.outcome import RunResult
from logeye.engine.domain.summary import count_outcomes
from logeye.enrichment.domain.item import EnrichmentData, RegisteredEnricher
from logeye.enrichment.domain.summary import EnrichRunSummary

_ENRICHMENT_DATA = TypeAdapter(
    dict[str, Annotated[bool | int | float | str, Strict()]]
)


class EnrichmentAdapter(
    ResultAdapter[RegisteredEnricher, EnrichmentData, EnrichRunSummary]
):
    """Validates enricher maps and merges them into one."""

    domain = "enrichment"

    def coerce(self, item: RegisteredEnricher, value: object) -> EnrichmentData:
        try:
            return _ENRICHMENT_DATA.validate_python(value)
        except ValidationError as exc:
            raise ResultShapeError(
                domain=self.domain,
                name=item.name,
                reason="expected a mapping of str to str, int, float or bool",
            ) from exc

    def build_summary(
        self,
        results: Sequence[RunResult[EnrichmentData]],
        total_duration_ms: int,
    ) -> EnrichRunSummary:
        error_count, skipped_count = count_outcomes(results)
        merged: EnrichmentData = {}
        for result in results:
            if result.value is not None:
                merged.update(result.value)
        return EnrichRunSummary(
            results=tuple(results),
            total_duration_ms=total_duration_ms,
            error_count=error_count,
            skipped_count=skipped_count,
            data=merged,
        )


async def run_enrichments(
    runner: BatchRunner,
    enrichers: Sequence[RegisteredEnricher],
    context: EvalContext,
) -> EnrichRunSummary:
    return await runner.run_all(
        items=enrichers, context=context, adapter=EnrichmentAdapter()
    )
