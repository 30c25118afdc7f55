"""EvalContext and LogStats — the immutable session snapshot handed to every check."""

from collections.abc import Mapping
from types import MappingProxyType
from typing import Annotated, Any, Literal

from pydantic import AfterValidator, BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

type ContextScope = Literal["session", "subagent"]


def _freeze(value: Any) -> Any:
    """Return a read-only copy: mappings become mappingproxies, lists become tuples."""
    if isinstance(value, Mapping):
        return MappingProxyType({key: _freeze(item) for key, item in value.items()})
    if isinstance(value, list | tuple):
        return tuple(_freeze(item) for item in value)
    return value


# Frozen recursively; every check in a batch reads the same entries.
LogEntry = Annotated[Mapping[str, Any], AfterValidator(_freeze)]


class LogStats(BaseModel):
    """Precomputed statistics derived from a session's log entries.

    Produced by the log parsing collaborator; checks only read it.
    """

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    turn_count: int = Field(default=0, ge=0)
    user_count: int = Field(default=0, ge=0)
    assistant_count: int = Field(default=0, ge=0)
    tool_call_count: int = Field(default=0, ge=0)
    subagent_count: int = Field(default=0, ge=0)
    models: tuple[str, ...] = ()
    duration_ms: int = Field(default=0, ge=0)
    duration_formatted: str = ""


class EvalContext(BaseModel):
    """Immutable bundle of session data passed to every check function.

    Every check running concurrently in one batch observes this same instance.
    Accepts camelCase keys (``projectName``, ``sessionId``) so a collaborator's
    JSON can be validated as-is.
    """

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    entries: tuple[LogEntry, ...] = ()
    stats: LogStats = Field(default_factory=LogStats)
    project_name: str = Field(min_length=1)
    session_id: str = Field(min_length=1)
    scope: ContextScope = "session"
    subagent_type: str | None = None
    agent_id: str | None = None
    parent_session_id: str | None = None

    @property
    def is_subagent(self) -> bool:
        return self.scope == "subagent"
