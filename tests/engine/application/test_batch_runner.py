"""Tests for BatchRunner.run_all — gating, isolation, ordering and timing."""

import asyncio
from collections.abc import Callable, Sequence
from dataclasses import dataclass

from logeye.config.domain.config import ExecutionConfig
from logeye.context.domain.context import EvalContext
from logeye.engine.application.adapters import ResultAdapter
from logeye.engine.application.errors import ResultShapeError
from logeye.engine.application.runner import BatchRunner
from logeye.engine.domain.outcome import (
    UNEXPECTED_MESSAGE,
    UNEXPECTED_NAME,
    Failed,
    RunResult,
    Skipped,
    Succeeded,
)
from logeye.engine.domain.summary import RunSummary, count_outcomes
from logeye.registry.domain.item import ConditionFunction
from logeye.registry.infrastructure.condition_registry import ConditionRegistry
from tests.context.fake_context import make_context
from tests.engine.fake_observer import FakeEngineObserver


@dataclass(frozen=True)
class _Item:
    name: str
    fn: Callable[[EvalContext], object]
    condition: ConditionFunction | None = None


class _PassThroughAdapter(ResultAdapter[_Item, object, RunSummary[object]]):
    domain = "test"

    def coerce(self, item: _Item, value: object) -> object:
        if value == "reject":
            raise ResultShapeError(domain=self.domain, name=item.name, reason="rejected")
        return value

    def build_summary(
        self,
        results: Sequence[RunResult[object]],
        total_duration_ms: int,
    ) -> RunSummary[object]:
        error_count, skipped_count = count_outcomes(results)
        return RunSummary(
            results=tuple(results),
            total_duration_ms=total_duration_ms,
            error_count=error_count,
            skipped_count=skipped_count,
        )


class _BrokenAdapter(_PassThroughAdapter):
    """Fails outside the item's own contract to exercise the unexpected-fault path."""

    def success_result(self, item: _Item, value: object, duration_ms: int) -> RunResult[object]:
        if item.name == "explodes":
            raise RuntimeError("adapter bug")
        return super().success_result(item, value, duration_ms)


def _boom(ctx: EvalContext) -> object:
    raise ValueError("boom")


class _Ambiguous:
    """A condition result with no truth value, like a multi-element array."""

    def __bool__(self) -> bool:
        raise ValueError("truth value is ambiguous")


def _make_runner(
    global_condition: ConditionFunction | None = None,
    observer: FakeEngineObserver | None = None,
    config: ExecutionConfig | None = None,
) -> BatchRunner:
    conditions = ConditionRegistry()
    if global_condition is not None:
        conditions.set(global_condition)
    return BatchRunner(
        conditions=conditions,
        observer=observer or FakeEngineObserver(),
        config=config,
    )


class TestMixedOutcomes:
    """One batch with a success, a gated skip and a failure."""

    async def test_success_skip_and_error_in_input_order(self) -> None:
        items = [
            _Item(name="a", fn=lambda ctx: 1),
            _Item(name="b", fn=lambda ctx: 2, condition=lambda ctx: False),
            _Item(name="c", fn=_boom),
        ]

        summary = await _make_runner().run_all(items, make_context(), _PassThroughAdapter())

        assert [r.name for r in summary.results] == ["a", "b", "c"]
        assert summary.results[0].outcome == Succeeded(value=1)
        assert summary.results[1].outcome == Skipped()
        assert summary.results[2].outcome == Failed(message="boom")
        assert summary.skipped_count == 1
        assert summary.error_count == 1

    async def test_skipped_by_item_condition_has_zero_duration(self) -> None:
        items = [_Item(name="b", fn=lambda ctx: 2, condition=lambda ctx: False)]

        summary = await _make_runner().run_all(items, make_context(), _PassThroughAdapter())

        assert summary.results[0].duration_ms == 0

    async def test_failure_does_not_contaminate_siblings(self) -> None:
        items = [
            _Item(name="before", fn=lambda ctx: "ok-1"),
            _Item(name="fails", fn=_boom),
            _Item(name="after", fn=lambda ctx: "ok-2"),
        ]

        summary = await _make_runner().run_all(items, make_context(), _PassThroughAdapter())

        assert summary.results[0].value == "ok-1"
        assert summary.results[2].value == "ok-2"
        assert summary.error_count == 1

    async def test_failure_is_reported_to_observer(self) -> None:
        observer = FakeEngineObserver()
        items = [_Item(name="fails", fn=_boom)]

        await _make_runner(observer=observer).run_all(
            items, make_context(), _PassThroughAdapter()
        )

        assert [(e.name, e.reason) for e in observer.failed] == [("fails", "boom")]

    async def test_exception_without_message_uses_class_name(self) -> None:
        def raises_bare(ctx: EvalContext) -> object:
            raise KeyError

        summary = await _make_runner().run_all(
            [_Item(name="bare", fn=raises_bare)], make_context(), _PassThroughAdapter()
        )

        assert summary.results[0].error == "KeyError"


class TestGlobalCondition:
    """A closed global gate skips every item without running anything."""

    async def test_false_global_condition_skips_all_items(self) -> None:
        calls: list[str] = []

        def fn(ctx: EvalContext) -> object:
            calls.append("fn")
            return 1

        def item_condition(ctx: EvalContext) -> bool:
            calls.append("condition")
            return True

        items = [
            _Item(name="x", fn=fn),
            _Item(name="y", fn=fn, condition=item_condition),
            _Item(name="z", fn=_boom),
        ]

        summary = await _make_runner(global_condition=lambda ctx: False).run_all(
            items, make_context(), _PassThroughAdapter()
        )

        assert all(r.skipped for r in summary.results)
        assert all(r.duration_ms == 0 for r in summary.results)
        assert summary.skipped_count == 3
        assert summary.error_count == 0
        assert summary.total_duration_ms >= 0
        assert summary.fully_skipped is True
        assert calls == []

    async def test_raising_global_condition_fails_closed(self) -> None:
        observer = FakeEngineObserver()

        def broken(ctx: EvalContext) -> bool:
            raise RuntimeError("gate exploded")

        summary = await _make_runner(global_condition=broken, observer=observer).run_all(
            [_Item(name="x", fn=lambda ctx: 1)], make_context(), _PassThroughAdapter()
        )

        assert summary.results[0].skipped
        assert summary.error_count == 0
        assert "gate exploded" in observer.skipped[0].reason

    async def test_global_condition_without_truth_value_fails_closed(self) -> None:
        observer = FakeEngineObserver()

        def gate(ctx: EvalContext) -> _Ambiguous:
            return _Ambiguous()

        summary = await _make_runner(
            global_condition=gate,  # type: ignore[arg-type]
            observer=observer,
        ).run_all(
            [_Item(name="x", fn=lambda ctx: 1), _Item(name="y", fn=lambda ctx: 2)],
            make_context(),
            _PassThroughAdapter(),
        )

        assert [r.skipped for r in summary.results] == [True, True]
        assert summary.error_count == 0
        assert "truth value is ambiguous" in observer.skipped[0].reason

    async def test_async_global_condition_true_lets_items_run(self) -> None:
        async def gate(ctx: EvalContext) -> bool:
            await asyncio.sleep(0)
            return ctx.stats.turn_count > 0

        summary = await _make_runner(global_condition=gate).run_all(
            [_Item(name="x", fn=lambda ctx: 1)], make_context(), _PassThroughAdapter()
        )

        assert summary.results[0].value == 1


class TestItemCondition:
    """Per-item conditions gate one item without affecting siblings."""

    async def test_raising_condition_is_an_error_not_a_skip(self) -> None:
        def broken(ctx: EvalContext) -> bool:
            raise RuntimeError("bad gate")

        summary = await _make_runner().run_all(
            [_Item(name="x", fn=lambda ctx: 1, condition=broken)],
            make_context(),
            _PassThroughAdapter(),
        )

        result = summary.results[0]
        assert result.skipped is False
        assert result.error == "Condition error: bad gate"
        assert summary.error_count == 1

    async def test_condition_without_truth_value_is_a_named_error(self) -> None:
        def gate(ctx: EvalContext) -> _Ambiguous:
            return _Ambiguous()

        summary = await _make_runner().run_all(
            [
                _Item(name="x", fn=lambda ctx: 1, condition=gate),  # type: ignore[arg-type]
                _Item(name="y", fn=lambda ctx: 2),
            ],
            make_context(),
            _PassThroughAdapter(),
        )

        first, second = summary.results
        assert first.name == "x"
        assert first.error == "Condition error: truth value is ambiguous"
        assert second.value == 2

    async def test_async_condition_false_skips_item(self) -> None:
        async def never(ctx: EvalContext) -> bool:
            return False

        summary = await _make_runner().run_all(
            [_Item(name="x", fn=lambda ctx: 1, condition=never)],
            make_context(),
            _PassThroughAdapter(),
        )

        assert summary.results[0].skipped


class TestConcurrency:
    """Items run concurrently; results still follow input order."""

    async def test_results_follow_input_order_not_completion_order(self) -> None:
        def sleeper(name: str, delay: float) -> Callable[[EvalContext], object]:
            async def fn(ctx: EvalContext) -> object:
                await asyncio.sleep(delay)
                return name

            return fn

        items = [
            _Item(name="slow", fn=sleeper("slow", 0.05)),
            _Item(name="fast", fn=sleeper("fast", 0.0)),
            _Item(name="medium", fn=sleeper("medium", 0.02)),
        ]

        summary = await _make_runner().run_all(items, make_context(), _PassThroughAdapter())

        assert [r.value for r in summary.results] == ["slow", "fast", "medium"]

    async def test_items_do_not_wait_for_each_other(self) -> None:
        # "waiter" can only finish once "setter" has run; sequential execution would hang.
        ready = asyncio.Event()

        async def waiter(ctx: EvalContext) -> object:
            await ready.wait()
            return "waited"

        async def setter(ctx: EvalContext) -> object:
            ready.set()
            return "set"

        items = [_Item(name="waiter", fn=waiter), _Item(name="setter", fn=setter)]

        summary = await asyncio.wait_for(
            _make_runner().run_all(items, make_context(), _PassThroughAdapter()),
            timeout=1.0,
        )

        assert [r.value for r in summary.results] == ["waited", "set"]

    async def test_every_item_sees_the_same_context(self) -> None:
        seen: list[EvalContext] = []

        async def capture(ctx: EvalContext) -> object:
            seen.append(ctx)
            return None

        context = make_context()
        await _make_runner().run_all(
            [_Item(name="a", fn=capture), _Item(name="b", fn=capture)],
            context,
            _PassThroughAdapter(),
        )

        assert all(c is context for c in seen)

    async def test_entries_cannot_be_mutated_by_a_sibling(self) -> None:
        async def writer(ctx: EvalContext) -> object:
            ctx.entries[0]["type"] = "tampered"  # type: ignore[index]
            return "wrote"

        async def reader(ctx: EvalContext) -> object:
            await asyncio.sleep(0)
            return ctx.entries[0]["type"]

        summary = await _make_runner().run_all(
            [_Item(name="writer", fn=writer), _Item(name="reader", fn=reader)],
            make_context(),
            _PassThroughAdapter(),
        )

        writer_result, reader_result = summary.results
        assert writer_result.error is not None
        assert "does not support item assignment" in writer_result.error
        assert reader_result.value == "user"


class TestTimeout:
    """The soft per-item timeout turns a hung coroutine into an error."""

    async def test_hung_item_times_out_and_sibling_succeeds(self) -> None:
        async def hangs(ctx: EvalContext) -> object:
            await asyncio.sleep(10)
            return "never"

        runner = _make_runner(config=ExecutionConfig(item_timeout_seconds=0.05))
        summary = await runner.run_all(
            [_Item(name="hangs", fn=hangs), _Item(name="quick", fn=lambda ctx: "ok")],
            make_context(),
            _PassThroughAdapter(),
        )

        assert summary.results[0].error == "Timed out after 0.05s"
        assert summary.results[1].value == "ok"


class TestResultShaping:
    async def test_rejected_value_becomes_error_result(self) -> None:
        summary = await _make_runner().run_all(
            [_Item(name="odd", fn=lambda ctx: "reject")],
            make_context(),
            _PassThroughAdapter(),
        )

        assert summary.results[0].error == "Invalid test result from 'odd': rejected"

    async def test_unexpected_fault_uses_placeholder_result(self) -> None:
        observer = FakeEngineObserver()
        items = [
            _Item(name="fine", fn=lambda ctx: 1),
            _Item(name="explodes", fn=lambda ctx: 2),
        ]

        summary = await _make_runner(observer=observer).run_all(
            items, make_context(), _BrokenAdapter()
        )

        assert summary.results[0].value == 1
        assert summary.results[1].name == UNEXPECTED_NAME
        assert summary.results[1].error == UNEXPECTED_MESSAGE
        assert [(e.name, e.reason) for e in observer.faults] == [("explodes", "adapter bug")]


class TestEmptyBatch:
    async def test_empty_items_yield_empty_zero_duration_summary(self) -> None:
        calls: list[str] = []

        def gate(ctx: EvalContext) -> bool:
            calls.append("gate")
            return True

        observer = FakeEngineObserver()
        summary = await _make_runner(global_condition=gate, observer=observer).run_all(
            [], make_context(), _PassThroughAdapter()
        )

        assert summary.results == ()
        assert summary.total_duration_ms == 0
        assert summary.fully_skipped is False
        assert calls == []
        assert observer.started == []


class TestObserverEvents:
    async def test_started_and_completed_emitted_once_per_batch(self) -> None:
        observer = FakeEngineObserver()

        await _make_runner(observer=observer).run_all(
            [_Item(name="a", fn=lambda ctx: 1)], make_context(), _PassThroughAdapter()
        )

        assert len(observer.started) == 1
        assert observer.started[0].total_items == 1
        assert observer.started[0].domain == "test"
        assert len(observer.completed) == 1
        assert observer.completed[0].session_id == "session-1"
