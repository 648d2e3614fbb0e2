"""
Aggregation stage: incident counts by year and region.

All counts come from one group-by pass over the cleaned table and are
recomputed from scratch on every run. Group keys keep the order in which
they first appear in the input, which makes rankings stable.
"""

from dataclasses import dataclass, field
from typing import TypeVar

import pandas as pd
import pandera.errors

from incidenttrends.cleaning.columns import DATE_COLUMN, REGION_COLUMN
from incidenttrends.errors import ParseError
from incidenttrends.schemas.registry import SchemaRegistry
from incidenttrends.utils.logging import get_logger

log = get_logger(__name__)

YEAR_COLUMN = "year"
COUNT_COLUMN = "count"

K = TypeVar("K")


def rank_counts(
    counts: dict[K, int],
    n: int,
    *,
    ascending: bool = False,
) -> list[tuple[K, int]]:
    """
    Rank keys by count.

    Python's sort is stable, so ties keep the order of ``counts``.

    Args:
        counts: Key -> count, in input order.
        n: Number of entries to return.
        ascending: Lowest counts first if True.

    Returns:
        Up to n (key, count) pairs.
    """
    if n < 0:
        msg = f"n must be non-negative, got {n}"
        raise ValueError(msg)
    ranked = sorted(counts.items(), key=lambda item: item[1], reverse=not ascending)
    return ranked[:n]


@dataclass(frozen=True)
class IncidentAggregates:
    """
    Incident counts derived from one cleaned table.

    Attributes:
        yearly_totals: Year -> incidents in that year. Only years present.
        region_totals: Region -> incidents over the whole table.
        year_region_counts: (year, region) -> incidents.
    """

    yearly_totals: dict[int, int] = field(default_factory=dict)
    region_totals: dict[str, int] = field(default_factory=dict)
    year_region_counts: dict[tuple[int, str], int] = field(default_factory=dict)

    @property
    def total(self) -> int:
        """Number of incidents aggregated."""
        return sum(self.yearly_totals.values())

    @property
    def years(self) -> list[int]:
        """Years present, ascending."""
        return sorted(self.yearly_totals)

    @property
    def regions(self) -> list[str]:
        """Regions present, by descending total."""
        ranked = rank_counts(self.region_totals, len(self.region_totals))
        return [region for region, _ in ranked]

    def top_years(self, n: int) -> list[tuple[int, int]]:
        """The n years with the most incidents."""
        return rank_counts(self.yearly_totals, n)

    def bottom_years(self, n: int) -> list[tuple[int, int]]:
        """The n years with the fewest incidents."""
        return rank_counts(self.yearly_totals, n, ascending=True)

    def region_series(self, region: str) -> dict[int, int]:
        """Year -> count for one region, ascending years, zero where absent."""
        return {
            year: self.year_region_counts.get((year, region), 0) for year in self.years
        }

    def summary_frame(self) -> pd.DataFrame:
        """
        Year x region counts as a validated long table.

        Returns:
            DataFrame with year, region, count; sorted by year then region.
        """
        rows = [
            {YEAR_COLUMN: year, REGION_COLUMN: region, COUNT_COLUMN: count}
            for (year, region), count in self.year_region_counts.items()
        ]
        df = pd.DataFrame(rows, columns=[YEAR_COLUMN, REGION_COLUMN, COUNT_COLUMN])
        df = df.sort_values([YEAR_COLUMN, REGION_COLUMN], kind="stable").reset_index(
            drop=True
        )
        try:
            return SchemaRegistry.validate(df, "yearly_region_summary")
        except (pandera.errors.SchemaError, pandera.errors.SchemaErrors) as e:
            msg = f"Summary violates YearlyRegionSummarySchema: {e}"
            raise ParseError(msg) from e


def year_region_counts(incidents: pd.DataFrame) -> dict[tuple[int, str], int]:
    """
    Count incidents per (year, region) in one group-by pass.

    Args:
        incidents: Cleaned incident table.

    Returns:
        (year, region) -> count, keys in order of first appearance.
    """
    if incidents.empty:
        return {}
    years = incidents[DATE_COLUMN].dt.year.rename(YEAR_COLUMN)
    grouped = incidents.groupby([years, incidents[REGION_COLUMN]], sort=False).size()
    return {
        (int(year), str(region)): int(count) for (year, region), count in grouped.items()
    }


def yearly_totals(cells: dict[tuple[int, str], int]) -> dict[int, int]:
    """Collapse (year, region) counts to year -> count."""
    totals: dict[int, int] = {}
    for (year, _), count in cells.items():
        totals[year] = totals.get(year, 0) + count
    return totals


def region_totals(cells: dict[tuple[int, str], int]) -> dict[str, int]:
    """Collapse (year, region) counts to region -> count."""
    totals: dict[str, int] = {}
    for (_, region), count in cells.items():
        totals[region] = totals.get(region, 0) + count
    return totals


def aggregate_incidents(incidents: pd.DataFrame) -> IncidentAggregates:
    """
    Aggregate a cleaned incident table.

    Yearly and regional totals are marginals of the year x region counts,
    so per-year region counts always add up to the yearly total.

    Args:
        incidents: Table validated by IncidentSchema. Not modified.

    Returns:
        IncidentAggregates. Empty mappings for an empty table.
    """
    if incidents.empty:
        log.info("No incidents to aggregate")
        return IncidentAggregates()

    cells = year_region_counts(incidents)
    aggregates = IncidentAggregates(
        yearly_totals=yearly_totals(cells),
        region_totals=region_totals(cells),
        year_region_counts=cells,
    )

    log.info(
        "Aggregated incidents",
        incidents=aggregates.total,
        years=len(aggregates.yearly_totals),
        regions=len(aggregates.region_totals),
        cells=len(aggregates.year_region_counts),
    )

    return aggregates
