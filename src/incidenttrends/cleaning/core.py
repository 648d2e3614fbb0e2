"""
Cleaning stage: raw records to incident records.

Projects the raw table to date and region, reports missing values, parses
dates, and validates the result against IncidentSchema.
"""

from dataclasses import dataclass

import pandas as pd
import pandera.errors

from incidenttrends.cleaning.columns import (
    DATE_COLUMN,
    INCIDENT_COLUMNS,
    REGION_COLUMN,
    project_columns,
)
from incidenttrends.cleaning.quality import MissingValueReport, check_missing
from incidenttrends.cleaning.temporal import parse_dates
from incidenttrends.config.settings import SourceConfig
from incidenttrends.errors import ParseError
from incidenttrends.schemas.registry import SchemaRegistry
from incidenttrends.utils.logging import get_logger

log = get_logger(__name__)


@dataclass(frozen=True)
class CleaningResult:
    """
    Output of the cleaning stage.

    Attributes:
        incidents: Cleaned table with occur_date and region.
        report: Advisory missing-value report of the projected columns.
    """

    incidents: pd.DataFrame
    report: MissingValueReport


def source_mapping(source: SourceConfig) -> dict[str, str]:
    """Raw -> canonical column mapping for a source."""
    return {
        source.date_column: DATE_COLUMN,
        source.region_column: REGION_COLUMN,
    }


def clean_incidents(
    raw: pd.DataFrame,
    source: SourceConfig | None = None,
) -> CleaningResult:
    """
    Clean a raw incident table.

    The input is never modified. Cleaning an already cleaned table
    returns an equal table.

    Args:
        raw: Raw records (all values as text) or cleaned incidents.
        source: Raw column names and date format (defaults to SourceConfig()).

    Returns:
        CleaningResult with the incident table and the missing-value report.

    Raises:
        ParseError: If required columns are absent or a region is invalid.
        DateParseError: If any date does not match the source format.
    """
    source = source or SourceConfig()

    projected = project_columns(raw, source_mapping(source))
    report = check_missing(projected, INCIDENT_COLUMNS)

    incidents = projected.assign(
        **{DATE_COLUMN: parse_dates(projected[DATE_COLUMN], source.date_format)}
    ).reset_index(drop=True)

    try:
        incidents = SchemaRegistry.validate(incidents, "incident")
    except (pandera.errors.SchemaError, pandera.errors.SchemaErrors) as e:
        msg = f"Cleaned incidents violate IncidentSchema: {e}"
        raise ParseError(msg) from e

    log.info(
        "Cleaned incidents",
        rows=len(incidents),
        dropped_columns=len(raw.columns) - len(incidents.columns),
    )

    return CleaningResult(incidents=incidents, report=report)
