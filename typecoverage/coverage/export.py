# ABOUTME: Text export of type selections and their multiplier histograms.
# ABOUTME: Formats one comma-separated line per row plus the in-progress selection.

from collections.abc import Mapping, Sequence

from typecoverage.coverage.engine import effectiveness_histogram
from typecoverage.coverage.rows import Mode, Row, RowBook, effective_attacking_set
from typecoverage.utils.type_chart import MULTIPLIERS, TypeChart

ZERO_LINE = ",".join("0" for _ in MULTIPLIERS)


def format_line(types_to_show: Sequence[str], histogram: Mapping[float, int]) -> str:
    """Format types and histogram counts as one export line.

    Args:
        types_to_show: Attacking types, written first. Omitted entirely when empty.
        histogram: Counts keyed by multiplier; missing buckets count as 0.

    Returns:
        "T1,...,Tk,c4,c2,c1,c0.5,c0.25,c0".
    """
    counts = [str(histogram.get(multiplier, 0)) for multiplier in MULTIPLIERS]
    return ",".join([*types_to_show, *counts])


def _types_for_line(book: RowBook, mode: Mode) -> list[str]:
    """Types an export line should describe for the current selection."""
    return effective_attacking_set(book.selected, book.rows, mode, book.state)


def summary_line_for(chart: TypeChart, book: RowBook, mode: Mode) -> str:
    """Export line for the current selection, as it would be committed.

    In TOTAL mode the line covers the selection merged with every other row;
    the row being edited is replaced by the selection.
    """
    types_to_show = _types_for_line(book, mode)
    return format_line(types_to_show, effectiveness_histogram(chart, types_to_show))


def current_line(chart: TypeChart, book: RowBook, mode: Mode) -> str | None:
    """Export line for the in-progress selection, or None when nothing is selected."""
    if not book.selected:
        return None
    return summary_line_for(chart, book, mode)


def commit_selection(chart: TypeChart, book: RowBook, mode: Mode) -> Row:
    """Compute the summary line for the selection and commit it to the book."""
    line = summary_line_for(chart, book, mode)
    return book.commit(line)


def export_text(rows: Sequence[Row], current: str | None = None) -> str:
    """Join committed rows and the in-progress line into the export text.

    Args:
        rows: Committed rows, exported with their stored summary lines.
        current: Line for the in-progress selection, if any.

    Returns:
        Newline-joined lines, or ZERO_LINE when there is nothing to export.
    """
    lines = [row.summary_line for row in rows]
    if current:
        lines.append(current)
    if not lines:
        return ZERO_LINE
    return "\n".join(lines)


def export_book(chart: TypeChart, book: RowBook, mode: Mode) -> str:
    """Export every committed row plus the current selection of a book.

    While a row is being edited, it is exported as stored and the selection
    that will replace it is appended as the current line.
    """
    return export_text(book.rows, current_line(chart, book, mode))
