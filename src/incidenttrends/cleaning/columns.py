"""
Column name normalization and projection.

Maps raw source columns to the canonical names used after cleaning and
drops everything the analysis does not use.
"""

import pandas as pd

from incidenttrends.errors import ParseError
from incidenttrends.utils.logging import get_logger

log = get_logger(__name__)

# Canonical column names of a cleaned incident table
DATE_COLUMN = "occur_date"
REGION_COLUMN = "region"
INCIDENT_COLUMNS: list[str] = [DATE_COLUMN, REGION_COLUMN]

# Raw source name -> canonical name
COLUMN_MAPPING: dict[str, str] = {
    "OCCUR_DATE": DATE_COLUMN,
    "BORO": REGION_COLUMN,
}


def project_columns(
    df: pd.DataFrame,
    mapping: dict[str, str] | None = None,
) -> pd.DataFrame:
    """
    Keep only the mapped columns, renamed to their canonical names.

    A column already carrying its canonical name is kept as is, so
    projecting a projected table is a no-op.

    Args:
        df: Raw or already projected table.
        mapping: Source -> canonical mapping (defaults to COLUMN_MAPPING).

    Returns:
        New DataFrame with exactly the canonical columns, in mapping order.

    Raises:
        ParseError: If a mapped column is present under neither name.
    """
    mapping = mapping or COLUMN_MAPPING

    selected: dict[str, str] = {}
    missing = []
    for source_name, canonical in mapping.items():
        if source_name in df.columns:
            selected[source_name] = canonical
        elif canonical in df.columns:
            selected[canonical] = canonical
        else:
            missing.append(source_name)

    if missing:
        msg = f"Missing required columns: {missing}"
        raise ParseError(msg)

    dropped = [col for col in df.columns if col not in selected]
    if dropped:
        log.debug("Dropping columns", dropped=dropped)

    return df.loc[:, list(selected)].rename(columns=selected)
