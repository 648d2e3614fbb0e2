"""
Chart rendering for incident aggregates.

Pure sink: every function takes finished data, writes one PNG, and
returns its path.
"""

from pathlib import Path

import matplotlib.dates as mdates
import matplotlib.pyplot as plt
import pandas as pd
from matplotlib.figure import Figure

from incidenttrends.aggregation.core import IncidentAggregates
from incidenttrends.cleaning.columns import DATE_COLUMN
from incidenttrends.utils.logging import get_logger

log = get_logger(__name__)


def _save_figure(fig: Figure, path: Path) -> Path:
    """Write figure as PNG and release it."""
    path.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(path, format="png", dpi=150, bbox_inches="tight")
    plt.close(fig)
    log.debug("Saved chart", path=str(path))
    return path


def plot_incident_histogram(dates: pd.Series, path: Path, bins: int = 30) -> Path:
    """
    Histogram of incident dates.

    Args:
        dates: datetime64 Series, one value per incident.
        path: Output PNG path.
        bins: Number of equal-width time bins.

    Returns:
        Path of the written chart.
    """
    fig, ax = plt.subplots(figsize=(10, 5))

    ax.hist(
        mdates.date2num(dates.to_numpy()),
        bins=bins,
        color="steelblue",
        edgecolor="white",
    )
    ax.xaxis.set_major_locator(mdates.AutoDateLocator())
    ax.xaxis.set_major_formatter(mdates.DateFormatter("%Y"))
    ax.set_xlabel("Date", fontsize=11)
    ax.set_ylabel("Incidents", fontsize=11)
    ax.set_title("Incident Frequency over Time", fontsize=12)
    ax.grid(axis="y", alpha=0.3)

    return _save_figure(fig, path)


def plot_yearly_totals(yearly_totals: dict[int, int], path: Path) -> Path:
    """Line/point plot of incidents per year."""
    years = sorted(yearly_totals)
    counts = [yearly_totals[year] for year in years]

    fig, ax = plt.subplots(figsize=(10, 5))
    ax.plot(years, counts, marker="o", color="steelblue", linewidth=2)
    ax.set_xticks(years)
    ax.tick_params(axis="x", rotation=45)
    ax.set_xlabel("Year", fontsize=11)
    ax.set_ylabel("Incidents", fontsize=11)
    ax.set_title("Incidents per Year", fontsize=12)
    ax.grid(True, alpha=0.3)

    return _save_figure(fig, path)


def plot_region_totals(region_totals: dict[str, int], path: Path) -> Path:
    """Bar chart of incidents per region, largest first."""
    ranked = sorted(region_totals.items(), key=lambda item: item[1], reverse=True)
    regions = [region for region, _ in ranked]
    counts = [count for _, count in ranked]

    fig, ax = plt.subplots(figsize=(8, 5))
    bars = ax.bar(regions, counts, color="steelblue", edgecolor="none")

    for bar, count in zip(bars, counts):
        ax.text(
            bar.get_x() + bar.get_width() / 2,
            bar.get_height(),
            f"{count:,}",
            ha="center",
            va="bottom",
            fontsize=9,
        )

    ax.set_xlabel("Borough", fontsize=11)
    ax.set_ylabel("Incidents", fontsize=11)
    ax.set_title("Incidents per Borough", fontsize=12)
    ax.grid(axis="y", alpha=0.3)

    return _save_figure(fig, path)


def plot_yearly_trend_by_region(aggregates: IncidentAggregates, path: Path) -> Path:
    """One line per region over the years present."""
    years = aggregates.years

    fig, ax = plt.subplots(figsize=(10, 6))
    for region in aggregates.regions:
        series = aggregates.region_series(region)
        ax.plot(years, [series[year] for year in years], marker="o", label=region)

    ax.set_xticks(years)
    ax.tick_params(axis="x", rotation=45)
    ax.set_xlabel("Year", fontsize=11)
    ax.set_ylabel("Incidents", fontsize=11)
    ax.set_title("Yearly Incidents by Borough", fontsize=12)
    ax.legend(loc="upper right")
    ax.grid(True, alpha=0.3)

    return _save_figure(fig, path)


def render_charts(
    incidents: pd.DataFrame,
    aggregates: IncidentAggregates,
    output_dir: Path,
    *,
    bins: int = 30,
) -> dict[str, Path]:
    """
    Render all four charts.

    Args:
        incidents: Cleaned incident table (for the date histogram).
        aggregates: Aggregates of the same table.
        output_dir: Directory for the PNG files.
        bins: Histogram bins.

    Returns:
        Chart name -> written path. Empty if there are no incidents.
    """
    if incidents.empty:
        log.warning("No incidents, skipping charts")
        return {}

    charts = {
        "incident_histogram": plot_incident_histogram(
            incidents[DATE_COLUMN], output_dir / "incident_histogram.png", bins=bins
        ),
        "yearly_totals": plot_yearly_totals(
            aggregates.yearly_totals, output_dir / "yearly_totals.png"
        ),
        "region_totals": plot_region_totals(
            aggregates.region_totals, output_dir / "region_totals.png"
        ),
        "yearly_trend_by_region": plot_yearly_trend_by_region(
            aggregates, output_dir / "yearly_trend_by_region.png"
        ),
    }

    log.info("Rendered charts", n=len(charts), output_dir=str(output_dir))
    return charts
