"""Structural item shapes shared by every registry and by the execution engine."""

from collections.abc import Awaitable, Callable
from typing import Literal, Protocol

from logeye.context.domain.context import EvalContext

type CheckScope = Literal["session", "subagent", "both"]
type ConditionFunction = Callable[[EvalContext], bool | Awaitable[bool]]

DEFAULT_SCOPE: CheckScope = "session"
DEFAULT_VIEW = "default"


class ScopedItem(Protocol):
    """Anything a ScopedRegistry can hold: a name plus an execution scope."""

    @property
    def name(self) -> str: ...

    @property
    def scope(self) -> CheckScope: ...

    @property
    def subagent_type(self) -> str | None: ...


class RunnableItem(Protocol):
    """Anything the engine can run: a named function with an optional gate."""

    @property
    def name(self) -> str: ...

    @property
    def fn(self) -> Callable[[EvalContext], object]: ...

    @property
    def condition(self) -> ConditionFunction | None: ...


def applies_to_session(scope: CheckScope) -> bool:
    return scope in ("session", "both")


def applies_to_subagent(scope: CheckScope) -> bool:
    return scope in ("subagent", "both")


class ViewScopedItem(ScopedItem, Protocol):
    """A scoped item that additionally belongs to a named dashboard view."""

    @property
    def view(self) -> str: ...


class NamedItem(Protocol):
    @property
    def name(self) -> str: ...
