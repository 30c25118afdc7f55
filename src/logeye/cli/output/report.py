"""Report builders — turn batch summaries into JSON documents and rich tables."""

from typing import Any

from pydantic import BaseModel
from rich.console import Console
from rich.table import Table

from logeye.context.domain.context import EvalContext
from logeye.dashboard.domain.summary import FilterComputeSummary
from logeye.engine.domain.outcome import Failed, RunResult, Succeeded
from logeye.engine.domain.summary import RunSummary
from logeye.enrichment.domain.summary import EnrichRunSummary
from logeye.evaluation.domain.summary import EvalRunSummary

type JsonRecord = dict[str, Any]

_STATUS_STYLES = {"success": "green", "skipped": "dim", "error": "red"}


def _plain(value: object) -> object:
    if isinstance(value, BaseModel):
        return value.model_dump(by_alias=True)
    return value


def result_record(result: RunResult[Any]) -> JsonRecord:
    """One per-item record; value and error appear only for their outcome."""
    record: JsonRecord = {
        "name": result.name,
        "status": result.outcome.kind,
        "duration_ms": result.duration_ms,
    }
    match result.outcome:
        case Succeeded(value=value):
            record["value"] = _plain(value)
        case Failed(message=message):
            record["error"] = message
    return record


def _summary_record(summary: RunSummary[Any]) -> JsonRecord:
    return {
        "results": [result_record(r) for r in summary.results],
        "total_duration_ms": summary.total_duration_ms,
        "error_count": summary.error_count,
        "skipped_count": summary.skipped_count,
        "fully_skipped": summary.fully_skipped,
    }


def build_report(
    context: EvalContext,
    module_sha256: str,
    evals: EvalRunSummary,
    enrichments: EnrichRunSummary,
    filters: FilterComputeSummary,
) -> JsonRecord:
    """Assemble the JSON document printed by ``logeye run --format json``."""
    return {
        "project_name": context.project_name,
        "session_id": context.session_id,
        "scope": context.scope,
        "module_sha256": module_sha256,
        "evaluations": {
            **_summary_record(evals),
            "pass_count": evals.pass_count,
            "fail_count": evals.fail_count,
            "mean_score": evals.mean_score,
        },
        "enrichments": {**_summary_record(enrichments), "data": enrichments.data},
        "filters": {**_summary_record(filters), "values": filters.values},
    }


def _detail(result: RunResult[Any]) -> str:
    match result.outcome:
        case Succeeded(value=value):
            return str(_plain(value))
        case Failed(message=message):
            return message
    return ""


def render_summary(console: Console, title: str, summary: RunSummary[Any]) -> None:
    """Print one batch as a table; an all-skipped batch is called out explicitly."""
    if not summary.results:
        console.print(f"[dim]{title}: nothing registered[/dim]")
        return

    table = Table(title=title, title_justify="left")
    table.add_column("Name")
    table.add_column("Status")
    table.add_column("ms", justify="right")
    table.add_column("Detail", overflow="fold")
    for result in summary.results:
        style = _STATUS_STYLES[result.outcome.kind]
        table.add_row(
            result.name,
            f"[{style}]{result.outcome.kind}[/{style}]",
            str(result.duration_ms),
            _detail(result),
        )
    console.print(table)

    footer = (
        f"{len(summary.results)} item(s), {summary.error_count} error(s), "
        f"{summary.skipped_count} skipped, {summary.total_duration_ms} ms"
    )
    if summary.fully_skipped:
        footer += " [yellow](batch skipped by global condition)[/yellow]"
    console.print(footer)
