"""
Date normalization for incident records.

Dates are parsed under one fixed format. A value that does not match
fails the whole run; nothing is skipped.
"""

import pandas as pd

from incidenttrends.errors import DateParseError
from incidenttrends.utils.logging import get_logger

log = get_logger(__name__)


def parse_dates(values: pd.Series, date_format: str) -> pd.Series:
    """
    Parse a column of date strings.

    Already parsed (datetime64) columns are returned unchanged. A value is
    accepted only if formatting its parsed date reproduces it exactly, so
    ``6/1/2005`` is rejected under ``%m/%d/%Y``.

    Args:
        values: Raw date strings.
        date_format: strptime format, e.g. ``%m/%d/%Y``.

    Returns:
        datetime64 Series with the same index.

    Raises:
        DateParseError: If any value is missing or does not match the format.
            Names the first offending row.
    """
    if pd.api.types.is_datetime64_any_dtype(values):
        invalid = values.isna()
        parsed = values
    else:
        parsed = pd.to_datetime(values, format=date_format, errors="coerce")
        canonical = format_dates(parsed, date_format)
        invalid = parsed.isna() | (canonical != values.astype(str))

    if invalid.any():
        # Positional lookup; index labels may repeat
        pos = int(invalid.to_numpy().argmax())
        row = values.index[pos]
        if hasattr(row, "item"):  # numpy scalar label
            row = row.item()
        value = values.iloc[pos]
        value = None if pd.isna(value) else str(value)
        n_invalid = int(invalid.sum())
        log.error(
            "Unparseable date",
            row=row,
            value=value,
            n_invalid=n_invalid,
            date_format=date_format,
        )
        raise DateParseError(
            row=row,
            value=value,
            n_invalid=n_invalid,
        )

    return parsed


def format_dates(dates: pd.Series, date_format: str) -> pd.Series:
    """
    Format parsed dates back to source text.

    Inverse of parse_dates: every accepted value formats back to itself.

    Args:
        dates: datetime64 Series.
        date_format: strftime format.

    Returns:
        Series of strings.
    """
    return dates.dt.strftime(date_format)
