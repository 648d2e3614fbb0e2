"""
Schema definitions using Pandera for data validation.

All data contracts are defined here to ensure explicit,
validated data structures throughout the pipeline.
"""

from incidenttrends.schemas.incident import (
    REGIONS,
    IncidentSchema,
    YearlyRegionSummarySchema,
)
from incidenttrends.schemas.raw import RAW_COLUMNS
from incidenttrends.schemas.registry import DataRole, SchemaRegistry

__all__ = [
    "RAW_COLUMNS",
    "REGIONS",
    "DataRole",
    "IncidentSchema",
    "SchemaRegistry",
    "YearlyRegionSummarySchema",
]
