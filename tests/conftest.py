"""Pytest configuration and shared fixtures."""

from collections.abc import Callable
from pathlib import Path

import matplotlib

matplotlib.use("Agg")

import pandas as pd  # noqa: E402
import pytest  # noqa: E402

from incidenttrends.config import OutputConfig, PipelineConfig, SourceConfig  # noqa: E402
from incidenttrends.schemas import RAW_COLUMNS  # noqa: E402

SCENARIO_RECORDS = [
    ("06/01/2005", "BROOKLYN"),
    ("07/01/2005", "BRONX"),
    ("01/01/2006", "BROOKLYN"),
]


def make_raw(records: list[tuple[str | None, str | None]]) -> pd.DataFrame:
    """Build a raw table with all documented columns, values as text."""
    rows = []
    for i, (occur_date, boro) in enumerate(records):
        row = {col: f"{col.lower()}-{i}" for col in RAW_COLUMNS}
        row["INCIDENT_KEY"] = str(100000 + i)
        row["OCCUR_DATE"] = occur_date
        row["OCCUR_TIME"] = "21:30:00"
        row["BORO"] = boro
        row["PRECINCT"] = "75"
        row["Latitude"] = "40.6782"
        row["Longitude"] = "-73.9442"
        rows.append(row)
    return pd.DataFrame(rows, columns=RAW_COLUMNS, dtype=object)


@pytest.fixture
def raw_factory() -> Callable[[list[tuple[str | None, str | None]]], pd.DataFrame]:
    """Factory for raw tables."""
    return make_raw


@pytest.fixture
def scenario_raw() -> pd.DataFrame:
    """Three raw records over two years and two boroughs."""
    return make_raw(SCENARIO_RECORDS)


@pytest.fixture
def scenario_incidents() -> pd.DataFrame:
    """Cleaned form of scenario_raw."""
    return pd.DataFrame(
        {
            "occur_date": pd.to_datetime(["2005-06-01", "2005-07-01", "2006-01-01"]),
            "region": ["BROOKLYN", "BRONX", "BROOKLYN"],
        }
    )


@pytest.fixture
def write_csv(tmp_path: Path) -> Callable[[pd.DataFrame, str], Path]:
    """Write a raw table to a CSV file under tmp_path."""

    def _write(df: pd.DataFrame, name: str = "incidents.csv") -> Path:
        path = tmp_path / name
        df.to_csv(path, index=False)
        return path

    return _write


@pytest.fixture
def scenario_csv(
    scenario_raw: pd.DataFrame, write_csv: Callable[[pd.DataFrame, str], Path]
) -> Path:
    """Scenario records as a local CSV file."""
    return write_csv(scenario_raw, "incidents.csv")


@pytest.fixture
def local_config(scenario_csv: Path, tmp_path: Path) -> PipelineConfig:
    """Pipeline config reading scenario_csv and writing under tmp_path/output."""
    return PipelineConfig(
        project="test-project",
        source=SourceConfig(url=str(scenario_csv)),
        output=OutputConfig(output_root=tmp_path / "output"),
    )
