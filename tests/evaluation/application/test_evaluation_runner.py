"""Tests for the evaluation adapter and run_evaluations."""

import pytest

from logeye.context.domain.context import EvalContext
from logeye.engine.application.runner import BatchRunner
from logeye.evaluation.application.runner import run_evaluations
from logeye.evaluation.domain.item import RegisteredEval
from logeye.evaluation.domain.result import EvalResult
from logeye.registry.infrastructure.condition_registry import ConditionRegistry
from tests.context.fake_context import make_context
from tests.engine.fake_observer import FakeEngineObserver


def _runner() -> BatchRunner:
    return BatchRunner(conditions=ConditionRegistry(), observer=FakeEngineObserver())


class TestEvaluationSummary:
    """Pass/fail/score aggregates are derived from successful verdicts only."""

    async def test_counts_and_mean_score(self) -> None:
        async def async_pass(ctx: EvalContext) -> EvalResult:
            return EvalResult(passed=True, score=0.9)

        def raises(ctx: EvalContext) -> EvalResult:
            raise RuntimeError("no turns")

        evals = [
            RegisteredEval(name="async-pass", fn=async_pass),
            RegisteredEval(name="dict-fail", fn=lambda ctx: {"pass": False, "score": 0.3}),
            RegisteredEval(name="bool-pass", fn=lambda ctx: True),
            RegisteredEval(name="skipped", fn=lambda ctx: True, condition=lambda ctx: False),
            RegisteredEval(name="raises", fn=raises),
        ]

        summary = await run_evaluations(runner=_runner(), evals=evals, context=make_context())

        assert summary.pass_count == 2
        assert summary.fail_count == 1
        assert summary.error_count == 1
        assert summary.skipped_count == 1
        assert summary.mean_score == pytest.approx((0.9 + 0.3 + 1.0) / 3)
        assert [r.name for r in summary.results] == [
            "async-pass",
            "dict-fail",
            "bool-pass",
            "skipped",
            "raises",
        ]

    async def test_mean_score_is_none_when_nothing_ran(self) -> None:
        evals = [RegisteredEval(name="skipped", fn=lambda ctx: True, condition=lambda ctx: False)]

        summary = await run_evaluations(runner=_runner(), evals=evals, context=make_context())

        assert summary.mean_score is None
        assert summary.pass_count == 0

    async def test_malformed_verdict_becomes_error(self) -> None:
        evals = [RegisteredEval(name="bad", fn=lambda ctx: {"score": 2})]

        summary = await run_evaluations(runner=_runner(), evals=evals, context=make_context())

        error = summary.results[0].error
        assert error is not None
        assert error.startswith("Invalid evaluation result from 'bad'")
        assert summary.error_count == 1

    async def test_eval_reads_context_stats(self) -> None:
        evals = [
            RegisteredEval(
                name="short-session",
                fn=lambda ctx: {"pass": ctx.stats.turn_count < 10},
            )
        ]

        summary = await run_evaluations(
            runner=_runner(), evals=evals, context=make_context(turn_count=42)
        )

        verdict = summary.results[0].value
        assert verdict is not None
        assert verdict.passed is False
