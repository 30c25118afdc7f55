"""RegisteredEval — an evaluation function as stored in its registry."""

from collections.abc import Awaitable, Callable, Mapping
from dataclasses import dataclass
from typing import Any

from logeye.context.domain.context import EvalContext
from logeye.evaluation.domain.result import EvalResult
from logeye.registry.domain.item import DEFAULT_SCOPE, CheckScope, ConditionFunction

type EvalReturn = EvalResult | Mapping[str, Any] | bool
type EvalFunction = Callable[[EvalContext], EvalReturn | Awaitable[EvalReturn]]


@dataclass(frozen=True)
class RegisteredEval:
    name: str
    fn: EvalFunction
    condition: ConditionFunction | None = None
    scope: CheckScope = DEFAULT_SCOPE
    subagent_type: str | None = None
