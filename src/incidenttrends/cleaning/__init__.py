"""
Cleaning layer: column projection, missing-value check, date parsing.
"""

from incidenttrends.cleaning.columns import (
    COLUMN_MAPPING,
    DATE_COLUMN,
    INCIDENT_COLUMNS,
    REGION_COLUMN,
    project_columns,
)
from incidenttrends.cleaning.core import CleaningResult, clean_incidents
from incidenttrends.cleaning.quality import MissingValueReport, check_missing
from incidenttrends.cleaning.temporal import format_dates, parse_dates

__all__ = [
    "COLUMN_MAPPING",
    "DATE_COLUMN",
    "INCIDENT_COLUMNS",
    "REGION_COLUMN",
    "CleaningResult",
    "MissingValueReport",
    "check_missing",
    "clean_incidents",
    "format_dates",
    "parse_dates",
    "project_columns",
]
