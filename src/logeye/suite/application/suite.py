"""CheckSuite — the explicit handle owning every registry a process runs checks from.

User check modules create one suite at import time and register into it with
decorators::

    app = CheckSuite()

    @app.condition
    def touches_bash(ctx): ...

    @app.eval("under-budget", scope="both")
    def under_budget(ctx): ...

    @app.dashboard.view("performance", label="Performance").filter("turns")
    def turns(ctx): ...
"""

from collections.abc import Callable

from logeye.config.domain.config import ExecutionConfig
from logeye.context.domain.context import EvalContext
from logeye.dashboard.application.runner import run_filters
from logeye.dashboard.domain.item import (
    DashboardView,
    FilterFunction,
    RegisteredFilter,
)
from logeye.dashboard.domain.summary import FilterComputeSummary
from logeye.engine.application.runner import BatchRunner
from logeye.engine.domain.observer import EngineObserver
from logeye.enrichment.application.runner import run_enrichments
from logeye.enrichment.domain.item import EnrichFunction, RegisteredEnricher
from logeye.enrichment.domain.summary import EnrichRunSummary
from logeye.evaluation.application.runner import run_evaluations
from logeye.evaluation.domain.item import EvalFunction, RegisteredEval
from logeye.evaluation.domain.summary import EvalRunSummary
from logeye.registry.domain.item import (
    DEFAULT_SCOPE,
    DEFAULT_VIEW,
    CheckScope,
    ConditionFunction,
)
from logeye.registry.infrastructure.condition_registry import ConditionRegistry
from logeye.registry.infrastructure.filter_registry import FilterRegistry
from logeye.registry.infrastructure.scoped_registry import (
    ScopedRegistry,
    select_for_context,
)
from logeye.registry.infrastructure.view_registry import ViewRegistry


class ViewBuilder:
    """Registers filters into one named dashboard view."""

    def __init__(self, filters: FilterRegistry[RegisteredFilter], view: str) -> None:
        self._filters = filters
        self._view = view

    @property
    def name(self) -> str:
        return self._view

    def filter(
        self,
        name: str,
        *,
        label: str = "",
        condition: ConditionFunction | None = None,
    ) -> Callable[[FilterFunction], FilterFunction]:
        def decorator(fn: FilterFunction) -> FilterFunction:
            self._filters.register(
                RegisteredFilter(
                    name=name,
                    fn=fn,
                    label=label,
                    condition=condition,
                    view=self._view,
                )
            )
            return fn

        return decorator


class DashboardBuilder(ViewBuilder):
    """Filters registered directly on the dashboard land in the default view."""

    def __init__(
        self,
        filters: FilterRegistry[RegisteredFilter],
        views: ViewRegistry[DashboardView],
    ) -> None:
        super().__init__(filters=filters, view=DEFAULT_VIEW)
        self._views = views

    def view(self, name: str, *, label: str = "") -> ViewBuilder:
        self._views.register(DashboardView(name=name, label=label))
        return ViewBuilder(filters=self._filters, view=name)


class CheckSuite:
    """Owns the evaluation, enricher, filter, view and global-condition registries.

    Suites are independent: clearing or registering into one never touches
    another, so tests can build a fresh suite instead of resetting globals.
    """

    def __init__(self) -> None:
        self.evals: ScopedRegistry[RegisteredEval] = ScopedRegistry(key="evals")
        self.enrichers: ScopedRegistry[RegisteredEnricher] = ScopedRegistry(
            key="enrichers"
        )
        self.filters: FilterRegistry[RegisteredFilter] = FilterRegistry(
            key="dashboard-filters"
        )
        self.views: ViewRegistry[DashboardView] = ViewRegistry(key="dashboard-views")
        self.conditions = ConditionRegistry()
        self.dashboard = DashboardBuilder(filters=self.filters, views=self.views)

    def eval(
        self,
        name: str,
        *,
        condition: ConditionFunction | None = None,
        scope: CheckScope = DEFAULT_SCOPE,
        subagent_type: str | None = None,
    ) -> Callable[[EvalFunction], EvalFunction]:
        def decorator(fn: EvalFunction) -> EvalFunction:
            self.evals.register(
                RegisteredEval(
                    name=name,
                    fn=fn,
                    condition=condition,
                    scope=scope,
                    subagent_type=subagent_type,
                )
            )
            return fn

        return decorator

    def enrich(
        self,
        name: str,
        *,
        condition: ConditionFunction | None = None,
        scope: CheckScope = DEFAULT_SCOPE,
        subagent_type: str | None = None,
    ) -> Callable[[EnrichFunction], EnrichFunction]:
        def decorator(fn: EnrichFunction) -> EnrichFunction:
            self.enrichers.register(
                RegisteredEnricher(
                    name=name,
                    fn=fn,
                    condition=condition,
                    scope=scope,
                    subagent_type=subagent_type,
                )
            )
            return fn

        return decorator

    def condition(self, fn: ConditionFunction) -> ConditionFunction:
        """Set fn as the global condition gating every batch."""
        self.conditions.set(fn)
        return fn

    def clear(self) -> None:
        self.evals.clear()
        self.enrichers.clear()
        self.filters.clear()
        self.views.clear()
        self.conditions.clear()

    def runner(
        self,
        observer: EngineObserver,
        config: ExecutionConfig | None = None,
    ) -> BatchRunner:
        return BatchRunner(conditions=self.conditions, observer=observer, config=config)

    async def run_evals(self, runner: BatchRunner, context: EvalContext) -> EvalRunSummary:
        return await run_evaluations(
            runner=runner,
            evals=select_for_context(self.evals, context),
            context=context,
        )

    async def run_enrichers(
        self,
        runner: BatchRunner,
        context: EvalContext,
    ) -> EnrichRunSummary:
        return await run_enrichments(
            runner=runner,
            enrichers=select_for_context(self.enrichers, context),
            context=context,
        )

    async def run_filters(
        self,
        runner: BatchRunner,
        context: EvalContext,
        view: str | None = None,
    ) -> FilterComputeSummary:
        """Run one view's filters, or every filter when view is None."""
        filters = (
            self.filters.get_all() if view is None else self.filters.get_for_view(view)
        )
        return await run_filters(runner=runner, filters=filters, context=context)
