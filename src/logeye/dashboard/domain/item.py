"""RegisteredFilter and DashboardView — dashboard filter functions and the views grouping them."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field

from logeye.context.domain.context import EvalContext
from logeye.registry.domain.item import (
    DEFAULT_SCOPE,
    DEFAULT_VIEW,
    CheckScope,
    ConditionFunction,
)

type FilterValue = bool | int | float | str
type FilterFunction = Callable[[EvalContext], FilterValue | Awaitable[FilterValue]]


@dataclass(frozen=True)
class RegisteredFilter:
    """A filter computes one value per session; the dashboard filters on it client-side.

    label defaults to name. Filters always run at session scope, so scope and
    subagent_type are fixed and exist only to satisfy ScopedItem.
    """

    name: str
    fn: FilterFunction
    label: str = ""
    condition: ConditionFunction | None = None
    view: str = DEFAULT_VIEW
    scope: CheckScope = field(default=DEFAULT_SCOPE, init=False)
    subagent_type: str | None = field(default=None, init=False)

    def __post_init__(self) -> None:
        if not self.label:
            object.__setattr__(self, "label", self.name)


@dataclass(frozen=True)
class DashboardView:
    name: str
    label: str = field(default="")

    def __post_init__(self) -> None:
        if not self.label:
            object.__setattr__(self, "label", self.name)
