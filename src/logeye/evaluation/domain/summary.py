"""EvalRunSummary — aggregate of one evaluation batch."""

from dataclasses import dataclass

from logeye.engine.domain.outcome import RunResult
from logeye.engine.domain.summary import RunSummary
from logeye.evaluation.domain.result import EvalResult

type EvalRunResult = RunResult[EvalResult]


@dataclass(frozen=True, kw_only=True)
class EvalRunSummary(RunSummary[EvalResult]):
    pass_count: int
    fail_count: int
    # Mean over evaluations that ran to completion; None when none did.
    mean_score: float | None
