"""CLI entrypoint for logeye — typer app with `run` and `list` commands."""

import asyncio
import json
import sys
from pathlib import Path

import structlog
import typer
from rich.console import Console

from logeye.cli.output.report import build_report, render_summary
from logeye.config.domain.config import LogeyeConfig
from logeye.config.infrastructure.observer import StructlogConfigObserver
from logeye.config.infrastructure.yaml_loader import YamlConfigLoader
from logeye.context.domain.context import EvalContext
from logeye.context.infrastructure.json_loader import JsonContextLoader
from logeye.context.infrastructure.observer import StructlogContextObserver
from logeye.core.errors import LogeyeError
from logeye.dashboard.domain.summary import FilterComputeSummary
from logeye.engine.infrastructure.observer import StructlogEngineObserver
from logeye.enrichment.domain.summary import EnrichRunSummary
from logeye.evaluation.domain.summary import EvalRunSummary
from logeye.loader.domain.loaded import LoadedChecks
from logeye.loader.infrastructure.module_loader import ChecksModuleLoader
from logeye.loader.infrastructure.observer import StructlogLoaderObserver

app = typer.Typer(add_completion=False)


def _configure_structlog(log_format: str) -> None:
    """Configure structlog based on the requested format. Logs go to stderr."""
    if log_format == "console":
        renderer: structlog.types.Processor = structlog.dev.ConsoleRenderer()
    elif log_format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        typer.echo(
            f"Invalid log format: {log_format!r}. Must be 'console' or 'json'.",
            err=True,
        )
        raise typer.Exit(code=1)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(0),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
    )


def _load_config(config_path: Path | None) -> LogeyeConfig:
    return YamlConfigLoader(observer=StructlogConfigObserver()).load(path=config_path)


def _load_checks(checks_path: Path) -> LoadedChecks:
    return ChecksModuleLoader(observer=StructlogLoaderObserver()).load(path=checks_path)


async def _run_batches(
    loaded: LoadedChecks,
    context: EvalContext,
    config: LogeyeConfig,
    view: str | None,
) -> tuple[EvalRunSummary, EnrichRunSummary, FilterComputeSummary]:
    suite = loaded.suite
    runner = suite.runner(observer=StructlogEngineObserver(), config=config.execution)
    return await asyncio.gather(
        suite.run_evals(runner=runner, context=context),
        suite.run_enrichers(runner=runner, context=context),
        suite.run_filters(runner=runner, context=context, view=view),
    )


@app.command()
def run(
    checks: Path = typer.Argument(..., help="Python file defining `app = CheckSuite()`."),
    context_path: Path = typer.Argument(
        ..., metavar="CONTEXT", help="JSON session context document."
    ),
    config_path: Path | None = typer.Option(None, "--config", help="YAML config file."),
    view: str | None = typer.Option(
        None, "--view", help="Dashboard view whose filters to run (default: all)."
    ),
    output_format: str = typer.Option("table", "--format", help="'table' or 'json'."),
    output_path: Path | None = typer.Option(
        None, "--output", help="Also write the JSON report to this file."
    ),
    log_format: str | None = typer.Option(
        None, "--log-format", help="'console' or 'json'; overrides the config file."
    ),
) -> None:
    """Run every registered evaluation, enricher and filter against one session."""
    _configure_structlog(log_format or "console")
    if output_format not in ("table", "json"):
        typer.echo(
            f"Invalid output format: {output_format!r}. Must be 'table' or 'json'.",
            err=True,
        )
        raise typer.Exit(code=1)
    try:
        config = _load_config(config_path)
        if log_format is None:
            _configure_structlog(config.logging.format)
        loaded = _load_checks(checks)
        context = JsonContextLoader(observer=StructlogContextObserver()).load(
            path=context_path
        )
    except LogeyeError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=1)

    evals, enrichments, filters = asyncio.run(
        _run_batches(loaded=loaded, context=context, config=config, view=view)
    )

    report = build_report(
        context=context,
        module_sha256=loaded.module_sha256,
        evals=evals,
        enrichments=enrichments,
        filters=filters,
    )
    if output_path is not None:
        output_path.write_text(json.dumps(report, indent=2, default=str), encoding="utf-8")

    if output_format == "json":
        typer.echo(json.dumps(report, indent=2, default=str))
        return

    console = Console()
    render_summary(console, "Evaluations", evals)
    render_summary(console, "Enrichments", enrichments)
    render_summary(console, f"Filters ({view or 'all views'})", filters)


@app.command(name="list")
def list_checks(
    checks: Path = typer.Argument(..., help="Python file defining `app = CheckSuite()`."),
) -> None:
    """Show what a checks module registers."""
    _configure_structlog("console")
    try:
        loaded = _load_checks(checks)
    except LogeyeError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=1)

    suite = loaded.suite
    typer.echo(f"module sha256: {loaded.module_sha256}")
    typer.echo(f"global condition: {'yes' if suite.conditions.has() else 'no'}")
    for item in suite.evals.get_all():
        typer.echo(f"eval     {item.name} [{item.scope}]")
    for item in suite.enrichers.get_all():
        typer.echo(f"enricher {item.name} [{item.scope}]")
    for view_name in suite.filters.views():
        descriptor = suite.views.get(view_name)
        label = descriptor.label if descriptor else view_name
        for item in suite.filters.get_for_view(view_name):
            typer.echo(f"filter   {label} / {item.name} ({item.label})")


if __name__ == "__main__":
    app()
