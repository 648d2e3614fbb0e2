"""
Pipeline orchestration.

Runs load, clean and aggregate in sequence, then hands the aggregates to
the reporting sink. Each stage returns a new table; nothing is shared
between runs.
"""

from dataclasses import dataclass, field
from pathlib import Path

import pandas as pd

from incidenttrends.aggregation.core import IncidentAggregates, aggregate_incidents
from incidenttrends.cleaning.core import clean_incidents
from incidenttrends.cleaning.quality import MissingValueReport
from incidenttrends.config.settings import PipelineConfig
from incidenttrends.ingestion.incidents import load_incidents
from incidenttrends.reporting.charts import render_charts
from incidenttrends.reporting.export import save_aggregate_tables
from incidenttrends.utils.logging import get_logger, log_context

log = get_logger(__name__)


@dataclass
class PipelineResult:
    """
    Result of a pipeline run.

    Attributes:
        n_raw: Number of raw records loaded.
        incidents: Cleaned incident table.
        report: Advisory missing-value report.
        aggregates: Yearly, regional and year x region counts.
        tables: Exported CSV tables (name -> path), if written.
        charts: Rendered charts (name -> path), if written.
    """

    n_raw: int
    incidents: pd.DataFrame
    report: MissingValueReport
    aggregates: IncidentAggregates
    tables: dict[str, Path] = field(default_factory=dict)
    charts: dict[str, Path] = field(default_factory=dict)


class IncidentPipeline:
    """Loads, cleans and aggregates the incident table."""

    def __init__(self, config: PipelineConfig) -> None:
        """
        Initialize pipeline.

        Args:
            config: Pipeline configuration.
        """
        self.config = config

    def analyze(self) -> PipelineResult:
        """
        Run load, clean and aggregate without writing anything.

        Raises:
            FetchError: If the source cannot be fetched.
            ParseError: If the source table is malformed.
            DateParseError: If any date does not match the source format.
        """
        raw = load_incidents(self.config.source)
        cleaned = clean_incidents(raw, self.config.source)
        aggregates = aggregate_incidents(cleaned.incidents)

        return PipelineResult(
            n_raw=len(raw),
            incidents=cleaned.incidents,
            report=cleaned.report,
            aggregates=aggregates,
        )

    def run(self, *, write_outputs: bool = True) -> PipelineResult:
        """
        Run the full pipeline.

        Args:
            write_outputs: Write CSV tables and (if enabled) charts.

        Returns:
            PipelineResult with aggregates and written paths.
        """
        with log_context(project=self.config.project):
            log.info("Starting pipeline", source=self.config.source.url)

            result = self.analyze()

            if write_outputs:
                result.tables = save_aggregate_tables(
                    result.aggregates, self.config.tables_dir
                )
                if self.config.report.charts:
                    result.charts = render_charts(
                        result.incidents,
                        result.aggregates,
                        self.config.plots_dir,
                        bins=self.config.report.histogram_bins,
                    )

            log.info(
                "Pipeline finished",
                raw_rows=result.n_raw,
                incidents=len(result.incidents),
                years=len(result.aggregates.yearly_totals),
            )

        return result


def run_pipeline(
    config: PipelineConfig,
    *,
    write_outputs: bool = True,
) -> PipelineResult:
    """
    Convenience function to run the pipeline.

    Args:
        config: Pipeline configuration.
        write_outputs: Write CSV tables and charts.

    Returns:
        PipelineResult.
    """
    pipeline = IncidentPipeline(config)
    return pipeline.run(write_outputs=write_outputs)
