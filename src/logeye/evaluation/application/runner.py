"""Evaluation adapter and runner — grades a session with registered evals."""

import statistics
from collections.abc import Sequence

from pydantic import ValidationError

from logeye.context.domain.context import EvalContext
from logeye.engine.application.adapters import ResultAdapter
from logeye.engine.application.errors import ResultShapeError
from logeye.engine.application.runner import BatchRunner
from logeye.engine.domain.outcome import RunResult
from logeye.engine.domain.summary import count_outcomes
from logeye.evaluation.domain.item import RegisteredEval
from logeye.evaluation.domain.result import EvalResult
from logeye.evaluation.domain.summary import EvalRunSummary


class EvaluationAdapter(ResultAdapter[RegisteredEval, EvalResult, EvalRunSummary]):
    """Validates eval verdicts and derives pass/fail/score aggregates."""

    domain = "evaluation"

    def coerce(self, item: RegisteredEval, value: object) -> EvalResult:
        if isinstance(value, EvalResult):
            return value
        if isinstance(value, bool):
            return EvalResult(passed=value)
        try:
            return EvalResult.model_validate(value)
        except ValidationError as exc:
            raise ResultShapeError(
                domain=self.domain,
                name=item.name,
                reason=f"{exc.error_count()} validation error(s)",
            ) from exc

    def build_summary(
        self,
        results: Sequence[RunResult[EvalResult]],
        total_duration_ms: int,
    ) -> EvalRunSummary:
        error_count, skipped_count = count_outcomes(results)
        verdicts = [r.value for r in results if r.value is not None]
        pass_count = sum(1 for v in verdicts if v.passed)
        return EvalRunSummary(
            results=tuple(results),
            total_duration_ms=total_duration_ms,
            error_count=error_count,
            skipped_count=skipped_count,
            pass_count=pass_count,
            fail_count=len(verdicts) - pass_count,
            mean_score=statistics.mean(v.score for v in verdicts) if verdicts else None,
        )


async def run_evaluations(
    runner: BatchRunner,
    evals: Sequence[RegisteredEval],
    context: EvalContext,
) -> EvalRunSummary:
    return await runner.run_all(items=evals, context=context, adapter=EvaluationAdapter())
