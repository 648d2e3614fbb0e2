"""Command-line interface for the incident-trends pipeline."""

from pathlib import Path
from typing import TYPE_CHECKING, Annotated

import typer
from rich.console import Console
from rich.markup import escape

if TYPE_CHECKING:
    from incidenttrends.config.settings import PipelineConfig

app = typer.Typer(
    name="incident-trends",
    help="Yearly and per-borough trends of public incident data.",
    no_args_is_help=True,
)

console = Console()

ConfigOption = Annotated[
    Path | None,
    typer.Option(
        "--config",
        "-c",
        help="Path to configuration YAML file. Built-in defaults if omitted.",
        exists=True,
        dir_okay=False,
    ),
]
SourceOption = Annotated[
    str | None,
    typer.Option(
        "--source",
        "-s",
        help="Override the source URL or local CSV path.",
    ),
]


def _resolve_config(
    config: Path | None,
    source: str | None = None,
    output: Path | None = None,
    top_n: int | None = None,
    charts: bool | None = None,
) -> "PipelineConfig":
    """Load config and apply command-line overrides."""
    from incidenttrends.config.loader import default_config, load_config

    pipeline_config = load_config(config) if config is not None else default_config()

    if source is not None:
        pipeline_config = pipeline_config.model_copy(
            update={"source": pipeline_config.source.model_copy(update={"url": source})}
        )
    if output is not None:
        pipeline_config = pipeline_config.model_copy(
            update={
                "output": pipeline_config.output.model_copy(
                    update={"output_root": output}
                )
            }
        )
    report_updates = {}
    if top_n is not None:
        report_updates["top_n"] = top_n
    if charts is not None:
        report_updates["charts"] = charts
    if report_updates:
        pipeline_config = pipeline_config.model_copy(
            update={"report": pipeline_config.report.model_copy(update=report_updates)}
        )

    return pipeline_config


@app.callback()
def main(
    log_level: Annotated[
        str,
        typer.Option("--log-level", help="Log level (DEBUG, INFO, WARNING, ERROR)."),
    ] = "INFO",
    json_logs: Annotated[
        bool,
        typer.Option("--json-logs", help="Emit logs as JSON lines."),
    ] = False,
) -> None:
    """Configure logging for all commands."""
    from incidenttrends.utils.logging import configure_logging

    try:
        configure_logging(level=log_level, json_output=json_logs)
    except ValueError as e:
        raise typer.BadParameter(str(e), param_hint="--log-level") from e


@app.command()
def run(
    config: ConfigOption = None,
    source: SourceOption = None,
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Output root directory for tables and charts.",
        ),
    ] = None,
    top_n: Annotated[
        int | None,
        typer.Option(
            "--top-n",
            "-n",
            min=1,
            help="Number of years in the top/bottom rankings.",
        ),
    ] = None,
    no_charts: Annotated[
        bool,
        typer.Option("--no-charts", help="Skip chart rendering."),
    ] = False,
) -> None:
    """Fetch, clean and aggregate incidents, then write tables and charts."""
    from incidenttrends.errors import IncidentPipelineError
    from incidenttrends.pipeline import run_pipeline
    from incidenttrends.reporting.tables import (
        print_missing_report,
        print_region_totals,
        print_year_ranking,
        print_yearly_totals,
    )

    pipeline_config = _resolve_config(
        config, source, output, top_n, False if no_charts else None
    )

    console.print(f"[blue]Running pipeline for {pipeline_config.project}[/blue]")
    console.print(f"[dim]Source: {pipeline_config.source.url}[/dim]")

    try:
        result = run_pipeline(pipeline_config)
    except IncidentPipelineError as e:
        console.print(f"[red]Pipeline failed: {escape(str(e))}[/red]")
        raise typer.Exit(code=1) from e

    console.print()
    print_missing_report(result.report, console)
    print_yearly_totals(result.aggregates, console)
    print_region_totals(result.aggregates, console)
    print_year_ranking(result.aggregates, pipeline_config.report.top_n, console)

    console.print("\n[blue]Written files:[/blue]")
    for name, path in {**result.tables, **result.charts}.items():
        console.print(f"  {name}: {path}")

    console.print(
        f"\n[green]Aggregated {len(result.incidents):,} incidents "
        f"over {len(result.aggregates.yearly_totals)} years[/green]"
    )


@app.command()
def check(
    config: ConfigOption = None,
    source: SourceOption = None,
) -> None:
    """Load the source and report missing values and cleaning problems."""
    from incidenttrends.cleaning.columns import INCIDENT_COLUMNS, project_columns
    from incidenttrends.cleaning.core import clean_incidents, source_mapping
    from incidenttrends.cleaning.quality import check_missing
    from incidenttrends.errors import IncidentPipelineError
    from incidenttrends.ingestion.incidents import load_incidents
    from incidenttrends.reporting.tables import print_missing_report

    pipeline_config = _resolve_config(config, source)

    console.print(f"[blue]Checking {pipeline_config.source.url}[/blue]")

    try:
        raw = load_incidents(pipeline_config.source)
        projected = project_columns(raw, source_mapping(pipeline_config.source))
        print_missing_report(check_missing(projected, INCIDENT_COLUMNS), console)
        cleaned = clean_incidents(raw, pipeline_config.source)
    except IncidentPipelineError as e:
        console.print(f"[red]Check failed: {escape(str(e))}[/red]")
        raise typer.Exit(code=1) from e

    console.print(
        f"[green]OK: {len(cleaned.incidents):,} of {len(raw):,} records clean[/green]"
    )


@app.command()
def version() -> None:
    """Show version information."""
    from incidenttrends import __version__

    console.print(f"incident-trends version {__version__}")


if __name__ == "__main__":
    app()
