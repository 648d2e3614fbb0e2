"""
Reporting sink: charts, CSV tables and console tables.

Consumes finished aggregates; nothing here feeds back into the pipeline.
"""

from incidenttrends.reporting.charts import render_charts
from incidenttrends.reporting.export import save_aggregate_tables
from incidenttrends.reporting.tables import (
    print_missing_report,
    print_region_totals,
    print_year_ranking,
    print_yearly_totals,
)

__all__ = [
    "print_missing_report",
    "print_region_totals",
    "print_year_ranking",
    "print_yearly_totals",
    "render_charts",
    "save_aggregate_tables",
]
