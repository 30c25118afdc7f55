"""EnrichRunSummary — aggregate of one enrichment batch."""

from dataclasses import dataclass

from logeye.engine.domain.summary import RunSummary
from logeye.enrichment.domain.item import EnrichmentData


@dataclass(frozen=True, kw_only=True)
class EnrichRunSummary(RunSummary[EnrichmentData]):
    # Every successful enricher's map merged in input order; later keys win.
    data: EnrichmentData
