"""Per-item outcome variant and the RunResult that carries it."""

from dataclasses import dataclass
from typing import Literal

UNEXPECTED_NAME = "?"
UNEXPECTED_MESSAGE = "Unexpected rejection"


@dataclass(frozen=True)
class Skipped:
    kind: Literal["skipped"] = "skipped"


@dataclass(frozen=True)
class Succeeded[V]:
    value: V
    kind: Literal["success"] = "success"


@dataclass(frozen=True)
class Failed:
    message: str
    kind: Literal["error"] = "error"


type Outcome[V] = Skipped | Succeeded[V] | Failed


@dataclass(frozen=True)
class RunResult[V]:
    """Result of one item in a batch: exactly one outcome plus its wall-clock cost."""

    name: str
    outcome: Outcome[V]
    duration_ms: int = 0

    @property
    def skipped(self) -> bool:
        return isinstance(self.outcome, Skipped)

    @property
    def succeeded(self) -> bool:
        return isinstance(self.outcome, Succeeded)

    @property
    def error(self) -> str | None:
        if isinstance(self.outcome, Failed):
            return self.outcome.message
        return None

    @property
    def value(self) -> V | None:
        if isinstance(self.outcome, Succeeded):
            return self.outcome.value
        return None
