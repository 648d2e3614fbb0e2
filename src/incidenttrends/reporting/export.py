"""
CSV export of incident aggregates.
"""

from pathlib import Path

import pandas as pd

from incidenttrends.aggregation.core import COUNT_COLUMN, YEAR_COLUMN, IncidentAggregates
from incidenttrends.cleaning.columns import REGION_COLUMN
from incidenttrends.utils.logging import get_logger

log = get_logger(__name__)


def save_aggregate_tables(
    aggregates: IncidentAggregates,
    output_dir: Path,
) -> dict[str, Path]:
    """
    Save yearly, regional and year x region counts as CSV.

    Args:
        aggregates: Aggregates to export.
        output_dir: Directory to write to (created if missing).

    Returns:
        Table name -> written path.
    """
    yearly = pd.DataFrame(
        sorted(aggregates.yearly_totals.items()),
        columns=[YEAR_COLUMN, COUNT_COLUMN],
    )
    regional = pd.DataFrame(
        sorted(aggregates.region_totals.items(), key=lambda item: item[1], reverse=True),
        columns=[REGION_COLUMN, COUNT_COLUMN],
    )
    # Validated before anything touches the disk
    summary = aggregates.summary_frame()

    output_dir.mkdir(parents=True, exist_ok=True)

    tables = {
        "yearly_totals": (yearly, output_dir / "yearly_totals.csv"),
        "region_totals": (regional, output_dir / "region_totals.csv"),
        "yearly_region_summary": (
            summary,
            output_dir / "yearly_region_summary.csv",
        ),
    }

    paths: dict[str, Path] = {}
    for name, (df, path) in tables.items():
        df.to_csv(path, index=False)
        paths[name] = path

    log.info("Saved aggregate tables", output_dir=str(output_dir), tables=list(paths))
    return paths
