"""RunSummary — fields every domain summary shares."""

from collections.abc import Sequence
from dataclasses import dataclass

from logeye.engine.domain.outcome import RunResult


@dataclass(frozen=True, kw_only=True)
class RunSummary[V]:
    """Ordered per-item results of one batch plus aggregate counts.

    results follow the input item order, never completion order.
    total_duration_ms measures the whole batch, not the sum of items.
    """

    results: tuple[RunResult[V], ...]
    total_duration_ms: int
    error_count: int
    skipped_count: int

    @property
    def fully_skipped(self) -> bool:
        """True for a non-empty batch in which nothing ran (e.g. global gate closed)."""
        return bool(self.results) and self.skipped_count == len(self.results)


def count_outcomes[V](results: Sequence[RunResult[V]]) -> tuple[int, int]:
    """Return (error_count, skipped_count) for results."""
    errors = sum(1 for r in results if r.error is not None)
    skipped = sum(1 for r in results if r.skipped)
    return errors, skipped
