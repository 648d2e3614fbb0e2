"""
Pandera schemas for cleaned incidents and their yearly summaries.
"""

import pandera.pandas as pa
from pandera.typing import Series

# Administrative regions (boroughs) an incident can be attributed to
REGIONS: list[str] = [
    "BRONX",
    "BROOKLYN",
    "MANHATTAN",
    "QUEENS",
    "STATEN ISLAND",
]


class IncidentSchema(pa.DataFrameModel):
    """
    Schema for cleaned incident records.

    One row per incident, projected down to date and region.
    """

    occur_date: Series[pa.DateTime] = pa.Field(
        nullable=False,
        description="Date the incident occurred",
    )
    region: Series[str] = pa.Field(
        isin=REGIONS,
        nullable=False,
        description="Borough the incident occurred in",
    )

    class Config:
        """Schema configuration."""

        name = "IncidentSchema"
        strict = True  # Projection keeps exactly these columns
        coerce = True


class YearlyRegionSummarySchema(pa.DataFrameModel):
    """
    Schema for incident counts per (year, region).

    Handed to the reporting sink and exported as CSV.
    """

    year: Series[int] = pa.Field(
        ge=1,
        description="Calendar year",
    )
    region: Series[str] = pa.Field(
        isin=REGIONS,
        description="Borough",
    )
    count: Series[int] = pa.Field(
        ge=0,
        description="Number of incidents",
    )

    class Config:
        """Schema configuration."""

        name = "YearlyRegionSummarySchema"
        strict = False
        coerce = True
