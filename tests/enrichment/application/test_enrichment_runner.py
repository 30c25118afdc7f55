"""Tests for the enrichment adapter and run_enrichments."""

from logeye.context.domain.context import EvalContext
from logeye.engine.application.runner import BatchRunner
from logeye.enrichment.application.runner import run_enrichments
from logeye.enrichment.domain.item import RegisteredEnricher
from logeye.registry.infrastructure.condition_registry import ConditionRegistry
from tests.context.fake_context import make_context
from tests.engine.fake_observer import FakeEngineObserver


def _runner() -> BatchRunner:
    return BatchRunner(conditions=ConditionRegistry(), observer=FakeEngineObserver())


class TestEnrichmentMerge:
    """Successful maps merge in input order; later keys win."""

    async def test_maps_are_merged(self) -> None:
        async def models(ctx: EvalContext) -> dict[str, str]:
            return {"primary_model": ctx.stats.models[0]}

        enrichers = [
            RegisteredEnricher(name="turns", fn=lambda ctx: {"turns": ctx.stats.turn_count}),
            RegisteredEnricher(name="models", fn=models),
        ]

        summary = await run_enrichments(
            runner=_runner(), enrichers=enrichers, context=make_context()
        )

        assert summary.data == {"turns": 3, "primary_model": "claude-sonnet"}
        assert summary.error_count == 0

    async def test_later_enricher_wins_on_key_collision(self) -> None:
        enrichers = [
            RegisteredEnricher(name="first", fn=lambda ctx: {"cost": 1.0, "a": True}),
            RegisteredEnricher(name="second", fn=lambda ctx: {"cost": 2.5}),
        ]

        summary = await run_enrichments(
            runner=_runner(), enrichers=enrichers, context=make_context()
        )

        assert summary.data == {"cost": 2.5, "a": True}

    async def test_failed_and_skipped_enrichers_contribute_nothing(self) -> None:
        def raises(ctx: EvalContext) -> dict[str, str]:
            raise RuntimeError("parse failure")

        enrichers = [
            RegisteredEnricher(name="ok", fn=lambda ctx: {"ok": "yes"}),
            RegisteredEnricher(name="raises", fn=raises),
            RegisteredEnricher(
                name="gated", fn=lambda ctx: {"gated": 1}, condition=lambda ctx: False
            ),
        ]

        summary = await run_enrichments(
            runner=_runner(), enrichers=enrichers, context=make_context()
        )

        assert summary.data == {"ok": "yes"}
        assert summary.error_count == 1
        assert summary.skipped_count == 1

    async def test_non_mapping_return_becomes_error(self) -> None:
        enrichers = [
            RegisteredEnricher(name="list", fn=lambda ctx: ["not", "a", "map"]),
            RegisteredEnricher(name="nested", fn=lambda ctx: {"bad": {"nested": 1}}),
        ]

        summary = await run_enrichments(
            runner=_runner(), enrichers=enrichers, context=make_context()
        )

        assert summary.error_count == 2
        assert summary.data == {}
