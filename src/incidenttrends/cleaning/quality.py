"""
Missing-value diagnostics.

The check is advisory: it describes the table and is returned next to
the cleaned data, but never changes the data or stops a run.
"""

from dataclasses import dataclass, field

import pandas as pd

from incidenttrends.utils.logging import get_logger

log = get_logger(__name__)


@dataclass(frozen=True)
class MissingValueReport:
    """
    Null counts of the retained columns.

    Attributes:
        total_rows: Number of rows checked.
        missing_counts: Column name -> number of null values.
    """

    total_rows: int
    missing_counts: dict[str, int] = field(default_factory=dict)

    @property
    def has_missing(self) -> bool:
        """Whether any checked column contains a null."""
        return any(count > 0 for count in self.missing_counts.values())

    @property
    def total_missing(self) -> int:
        """Total number of null values over all checked columns."""
        return sum(self.missing_counts.values())

    def missing_ratio(self, column: str) -> float:
        """Share of null values in a column."""
        if self.total_rows == 0:
            return 0.0
        return self.missing_counts[column] / self.total_rows


def check_missing(
    df: pd.DataFrame,
    columns: list[str] | None = None,
) -> MissingValueReport:
    """
    Count null values per column.

    Args:
        df: Table to check. Not modified.
        columns: Columns to check (defaults to all columns).

    Returns:
        MissingValueReport for the checked columns.
    """
    columns = list(df.columns) if columns is None else columns
    counts = {col: int(df[col].isna().sum()) for col in columns}

    report = MissingValueReport(total_rows=len(df), missing_counts=counts)

    if report.has_missing:
        log.warning(
            "Missing values found",
            rows=report.total_rows,
            missing={col: n for col, n in counts.items() if n > 0},
        )
    else:
        log.info("No missing values", rows=report.total_rows, columns=columns)

    return report
