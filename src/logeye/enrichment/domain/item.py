"""RegisteredEnricher — an enrichment function as stored in its registry.

Enrichers extract key-value metadata from a session (token counts, model
names, costs) where evaluations grade it.
"""

from collections.abc import Awaitable, Callable, Mapping
from dataclasses import dataclass

from logeye.context.domain.context import EvalContext
from logeye.registry.domain.item import DEFAULT_SCOPE, CheckScope, ConditionFunction

type EnrichmentValue = str | int | float | bool
type EnrichmentData = dict[str, EnrichmentValue]
type EnrichFunction = Callable[
    [EvalContext],
    Mapping[str, EnrichmentValue] | Awaitable[Mapping[str, EnrichmentValue]],
]


@dataclass(frozen=True)
class RegisteredEnricher:
    name: str
    fn: EnrichFunction
    condition: ConditionFunction | None = None
    scope: CheckScope = DEFAULT_SCOPE
    subagent_type: str | None = None
