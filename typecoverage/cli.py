"""ABOUTME: CLI entry point for typecoverage commands.
ABOUTME: Provides types, matrix, buckets, histogram, and export commands via Typer."""

from pathlib import Path

import polars as pl
import typer
from rich.console import Console
from rich.table import Table

from typecoverage.config import load_type_chart
from typecoverage.coverage.engine import (
    effectiveness_histogram,
    format_multiplier,
    resisted_buckets,
)
from typecoverage.coverage.export import commit_selection, export_book
from typecoverage.coverage.frames import bucket_frame, coverage_matrix_frame, histogram_frame
from typecoverage.coverage.rows import Mode, RowBook
from typecoverage.logs import init_logging
from typecoverage.settings import settings
from typecoverage.utils.type_chart import TypeChart

app = typer.Typer(
    name="typecoverage",
    help="Pokemon attacking type coverage calculator.",
    no_args_is_help=True,
)

console = Console()

CHART_OPTION = typer.Option(None, "--chart", "-c", help="Type chart YAML (defaults to configs/type_chart.yml)")
TYPES_ARGUMENT = typer.Argument(None, help="Attacking types, e.g. Fire Water")


@app.callback()
def main() -> None:
    """Initialize logging from configs/logging.yml when present."""
    if settings.logging_config_path.exists():
        init_logging(settings.logging_config_path)


def _load_chart(chart_path: Path | None) -> TypeChart:
    """Load the type chart or exit with an error message."""
    try:
        return load_type_chart(chart_path)
    except (FileNotFoundError, ValueError) as e:
        console.print(f"[red]Error loading type chart:[/] {e}")
        raise typer.Exit(1) from None


def _resolve_types(chart: TypeChart, names: list[str] | None) -> list[str]:
    """Match user-entered type names to the catalog, ignoring case."""
    by_folded = {type_name.casefold(): type_name for type_name in chart.types}
    resolved: list[str] = []
    for name in names or []:
        type_name = by_folded.get(name.strip().casefold())
        if type_name is None:
            console.print(f"[red]Error:[/] Unknown type '{name}'. Run 'typecoverage types' to list them.")
            raise typer.Exit(1)
        resolved.append(type_name)
    return resolved


def _frame_to_table(df: pl.DataFrame, title: str | None = None) -> Table:
    """Convert a DataFrame to a rich Table."""
    table = Table(title=title)
    for column in df.columns:
        table.add_column(column, justify="center")
    for row in df.iter_rows():
        table.add_row(*("" if value is None else str(value) for value in row))
    return table


@app.command()
def types(chart: Path | None = CHART_OPTION) -> None:
    """List the types in the catalog."""
    type_chart = _load_chart(chart)
    console.print(", ".join(type_chart.types))


@app.command()
def matrix(
    attacking: list[str] | None = TYPES_ARGUMENT,
    chart: Path | None = CHART_OPTION,
) -> None:
    """Show the max multiplier against every one- and two-type defender."""
    type_chart = _load_chart(chart)
    selected = _resolve_types(type_chart, attacking)
    df = coverage_matrix_frame(type_chart, selected)
    console.print(_frame_to_table(df, title=f"Coverage: {', '.join(selected) or '-'}"))


@app.command()
def histogram(
    attacking: list[str] | None = TYPES_ARGUMENT,
    chart: Path | None = CHART_OPTION,
) -> None:
    """Count defenders per max multiplier."""
    type_chart = _load_chart(chart)
    selected = _resolve_types(type_chart, attacking)
    df = histogram_frame(effectiveness_histogram(type_chart, selected))
    console.print(_frame_to_table(df, title="Defenders per multiplier"))


@app.command()
def buckets(
    attacking: list[str] | None = TYPES_ARGUMENT,
    chart: Path | None = CHART_OPTION,
) -> None:
    """List defenders that take at most 0.25x, 0.5x or 1x, with their weaknesses."""
    type_chart = _load_chart(chart)
    selected = _resolve_types(type_chart, attacking)
    reports = resisted_buckets(type_chart, selected)
    if not reports:
        console.print("[yellow]No defenders resist or take neutral damage from this selection.[/]")
        return

    console.print(_frame_to_table(bucket_frame(type_chart, selected), title="Resisted defenders"))

    for report in reports:
        console.print(f"\n[bold]▍{format_multiplier(report.multiplier)}x defenders ({len(report.combos)})[/]")
        for multiplier, counts in report.summary.items():
            if not counts:
                continue
            summary = ", ".join(f"{atk_type} x{count}" for atk_type, count in counts)
            console.print(f"  [cyan]{format_multiplier(multiplier)}x attackers:[/] {summary}")


@app.command()
def export(
    attacking: list[str] | None = TYPES_ARGUMENT,
    row: list[str] | None = typer.Option(None, "--row", "-r", help="Committed selection, e.g. 'Fire,Water'"),
    mode: Mode = typer.Option(Mode.COMPARE, "--mode", "-m", help="compare rows separately or total them"),
    chart: Path | None = CHART_OPTION,
) -> None:
    """Print export lines: one per --row, then the current selection."""
    type_chart = _load_chart(chart)
    book = RowBook()
    for entry in row or []:
        book.selected = _resolve_types(type_chart, [name for name in entry.split(",") if name.strip()])
        commit_selection(type_chart, book, mode)

    book.selected = _resolve_types(type_chart, attacking)
    typer.echo(export_book(type_chart, book, mode))


if __name__ == "__main__":
    app()
