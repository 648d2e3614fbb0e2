"""
Console tables for cleaning diagnostics and aggregates.

Formats results using Rich for clear, colored output.
"""

from rich.console import Console
from rich.table import Table

from incidenttrends.aggregation.core import IncidentAggregates
from incidenttrends.cleaning.quality import MissingValueReport


def print_missing_report(report: MissingValueReport, console: Console) -> None:
    """
    Print null counts of the retained columns.

    Args:
        report: Missing-value report from the cleaning stage.
        console: Rich console for output.
    """
    table = Table(title=f"Missing Values ({report.total_rows:,} rows)")
    table.add_column("Column", style="cyan", no_wrap=True)
    table.add_column("Missing", justify="right")
    table.add_column("% Rows", justify="right")

    for column, count in report.missing_counts.items():
        style = "red" if count else "green"
        table.add_row(
            column,
            f"[{style}]{count:,}[/{style}]",
            f"{report.missing_ratio(column) * 100:.2f}%",
        )

    console.print(table)


def print_yearly_totals(aggregates: IncidentAggregates, console: Console) -> None:
    """Print incidents per year, ascending years."""
    table = Table(title="Incidents per Year")
    table.add_column("Year", style="cyan")
    table.add_column("Incidents", style="green", justify="right")

    for year in aggregates.years:
        table.add_row(str(year), f"{aggregates.yearly_totals[year]:,}")

    console.print(table)


def print_region_totals(aggregates: IncidentAggregates, console: Console) -> None:
    """Print incidents per region, largest first, with share of total."""
    total = aggregates.total

    table = Table(title="Incidents per Borough")
    table.add_column("Borough", style="cyan")
    table.add_column("Incidents", style="green", justify="right")
    table.add_column("% Total", style="yellow", justify="right")

    for region in aggregates.regions:
        count = aggregates.region_totals[region]
        pct = (count / total * 100) if total > 0 else 0
        table.add_row(region, f"{count:,}", f"{pct:.1f}%")

    console.print(table)


def print_year_ranking(
    aggregates: IncidentAggregates,
    n: int,
    console: Console,
) -> None:
    """
    Print the top and bottom n years side by side.

    Args:
        aggregates: Aggregates to rank.
        n: Number of years per ranking.
        console: Rich console for output.
    """
    top = aggregates.top_years(n)
    bottom = aggregates.bottom_years(n)

    table = Table(title=f"Top / Bottom {n} Years")
    table.add_column("Rank", style="dim", width=4)
    table.add_column("Most Incidents", style="red")
    table.add_column("Least Incidents", style="green")

    for rank in range(max(len(top), len(bottom))):
        most = f"{top[rank][0]} ({top[rank][1]:,})" if rank < len(top) else ""
        least = f"{bottom[rank][0]} ({bottom[rank][1]:,})" if rank < len(bottom) else ""
        table.add_row(str(rank + 1), most, least)

    console.print(table)
