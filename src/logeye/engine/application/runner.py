"""BatchRunner — runs a batch of checks concurrently against one EvalContext."""

import asyncio
import inspect
import time
from collections.abc import Sequence

from logeye.config.domain.config import ExecutionConfig
from logeye.context.domain.context import EvalContext
from logeye.engine.application.errors import ResultShapeError
from logeye.engine.domain.adapter import RunAdapter
from logeye.engine.domain.observer import EngineObserver
from logeye.registry.domain.item import RunnableItem
from logeye.registry.infrastructure.condition_registry import ConditionRegistry

CONDITION_ERROR_PREFIX = "Condition error: "


async def _resolve(value: object) -> object:
    """Await value if the check handed back an awaitable, else pass it through."""
    if inspect.isawaitable(value):
        return await value
    return value


def _describe(exc: BaseException) -> str:
    return str(exc) or type(exc).__name__


def _elapsed_ms(started_at: float) -> int:
    return round((time.monotonic() - started_at) * 1000)


class BatchRunner:
    """Generic driver behind evaluations, enrichers and dashboard filters.

    For every batch it checks the global condition once, then runs each
    item's own condition and function concurrently. Item failures become
    error results; nothing an item does can abort the batch or change a
    sibling's result. Results come back in input order.
    """

    def __init__(
        self,
        conditions: ConditionRegistry,
        observer: EngineObserver,
        config: ExecutionConfig | None = None,
    ) -> None:
        self._conditions = conditions
        self._observer = observer
        self._config = config or ExecutionConfig()

    async def run_all[TItem: RunnableItem, TResult, TSummary](
        self,
        items: Sequence[TItem],
        context: EvalContext,
        adapter: RunAdapter[TItem, TResult, TSummary],
    ) -> TSummary:
        """Run items against context and fold the results with adapter.

        An empty batch yields an empty, zero-duration summary without
        consulting the global condition.
        """
        if not items:
            return adapter.build_summary([], 0)

        self._observer.batch_started(
            domain=adapter.domain,
            session_id=context.session_id,
            total_items=len(items),
        )
        started_at = time.monotonic()

        results: list[TResult]
        skip_reason = await self._global_skip_reason(context=context)
        if skip_reason is not None:
            self._observer.batch_skipped(
                domain=adapter.domain,
                session_id=context.session_id,
                reason=skip_reason,
            )
            results = [adapter.skip_result(item) for item in items]
        else:
            settled = await asyncio.gather(
                *(
                    self._run_item(item=item, context=context, adapter=adapter)
                    for item in items
                ),
                return_exceptions=True,
            )
            results = []
            for item, outcome in zip(items, settled):
                if isinstance(outcome, BaseException):
                    self._observer.item_unexpected_fault(
                        domain=adapter.domain,
                        session_id=context.session_id,
                        name=item.name,
                        reason=_describe(outcome),
                    )
                    results.append(adapter.unexpected_result())
                else:
                    results.append(outcome)

        total_duration_ms = _elapsed_ms(started_at)
        self._observer.batch_completed(
            domain=adapter.domain,
            session_id=context.session_id,
            total_items=len(items),
            total_duration_ms=total_duration_ms,
        )
        return adapter.build_summary(results, total_duration_ms)

    async def _global_skip_reason(self, context: EvalContext) -> str | None:
        """Return why the whole batch is skipped, or None if it may run.

        A global condition that raises closes the gate like one returning False.
        """
        condition = self._conditions.get()
        if condition is None:
            return None
        try:
            passed = bool(await _resolve(condition(context)))
        except Exception as exc:
            return f"global condition raised: {_describe(exc)}"
        if not passed:
            return "global condition returned false"
        return None

    async def _run_item[TItem: RunnableItem, TResult, TSummary](
        self,
        item: TItem,
        context: EvalContext,
        adapter: RunAdapter[TItem, TResult, TSummary],
    ) -> TResult:
        started_at = time.monotonic()
        timeout = self._config.item_timeout_seconds
        try:
            async with asyncio.timeout(timeout):
                return await self._gate_and_execute(
                    item=item,
                    context=context,
                    adapter=adapter,
                    started_at=started_at,
                )
        except TimeoutError:
            return self._failed(
                item=item,
                context=context,
                adapter=adapter,
                message=f"Timed out after {timeout}s",
                duration_ms=_elapsed_ms(started_at),
            )

    async def _gate_and_execute[TItem: RunnableItem, TResult, TSummary](
        self,
        item: TItem,
        context: EvalContext,
        adapter: RunAdapter[TItem, TResult, TSummary],
        started_at: float,
    ) -> TResult:
        if item.condition is not None:
            try:
                should_run = bool(await _resolve(item.condition(context)))
            except Exception as exc:
                return self._failed(
                    item=item,
                    context=context,
                    adapter=adapter,
                    message=f"{CONDITION_ERROR_PREFIX}{_describe(exc)}",
                    duration_ms=_elapsed_ms(started_at),
                )
            if not should_run:
                return adapter.skip_result(item)

        try:
            value = await _resolve(item.fn(context))
        except Exception as exc:
            return self._failed(
                item=item,
                context=context,
                adapter=adapter,
                message=_describe(exc),
                duration_ms=_elapsed_ms(started_at),
            )

        duration_ms = _elapsed_ms(started_at)
        try:
            return adapter.success_result(item, value, duration_ms)
        except ResultShapeError as exc:
            return self._failed(
                item=item,
                context=context,
                adapter=adapter,
                message=str(exc),
                duration_ms=duration_ms,
            )

    def _failed[TItem: RunnableItem, TResult, TSummary](
        self,
        item: TItem,
        context: EvalContext,
        adapter: RunAdapter[TItem, TResult, TSummary],
        message: str,
        duration_ms: int,
    ) -> TResult:
        self._observer.item_failed(
            domain=adapter.domain,
            session_id=context.session_id,
            name=item.name,
            reason=message,
            duration_ms=duration_ms,
        )
        return adapter.error_result(item, message, duration_ms)
