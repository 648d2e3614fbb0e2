"""
Aggregation layer: yearly, regional and year x region incident counts.
"""

from incidenttrends.aggregation.core import (
    IncidentAggregates,
    aggregate_incidents,
    rank_counts,
    region_totals,
    year_region_counts,
    yearly_totals,
)

__all__ = [
    "IncidentAggregates",
    "aggregate_incidents",
    "rank_counts",
    "region_totals",
    "year_region_counts",
    "yearly_totals",
]
