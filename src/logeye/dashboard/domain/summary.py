"""FilterComputeSummary — aggregate of one dashboard filter batch."""

from dataclasses import dataclass

from logeye.dashboard.domain.item import FilterValue
from logeye.engine.domain.summary import RunSummary

# Value a skipped or failed filter reads as on the dashboard.
MISSING_FILTER_VALUE: FilterValue = False


@dataclass(frozen=True, kw_only=True)
class FilterComputeSummary(RunSummary[FilterValue]):
    @property
    def values(self) -> dict[str, FilterValue]:
        """Name-to-value map for client-side predicates, in input order."""
        return {
            r.name: r.value if r.value is not None else MISSING_FILTER_VALUE
            for r in self.results
        }
