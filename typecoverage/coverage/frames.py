# ABOUTME: Polars DataFrame views of coverage engine results.
# ABOUTME: Builds the coverage matrix, histogram, and resisted-bucket tables for reporting.

from collections.abc import Mapping, Sequence
from typing import Any

import polars as pl

from typecoverage.coverage.engine import (
    coverage_matrix,
    format_multiplier,
    resisted_buckets,
    weakness_score,
)
from typecoverage.utils.type_chart import (
    MULTIPLIERS,
    SUPER_EFFECTIVE_4X_VALUE,
    SUPER_EFFECTIVE_VALUE,
    TypeChart,
)

_BUCKET_SCHEMA = {
    "multiplier": pl.String,
    "type1": pl.String,
    "type2": pl.String,
    "weakness_score": pl.Int64,
    "hits_4x": pl.String,
    "hits_2x": pl.String,
}


def coverage_matrix_frame(chart: TypeChart, attacking_types: Sequence[str]) -> pl.DataFrame:
    """Coverage matrix as a defender x defender table of formatted multipliers.

    Args:
        chart: The type chart.
        attacking_types: The selected attacking types.

    Returns:
        DataFrame with a `defender` column plus one String column per type.
        Cells below the diagonal are empty strings.
    """
    matrix = coverage_matrix(chart, attacking_types)
    records: list[dict[str, Any]] = []
    for def_type1 in chart.types:
        record: dict[str, Any] = {"defender": def_type1}
        for def_type2 in chart.types:
            value = matrix.get((def_type1, def_type2))
            record[def_type2] = "" if value is None else format_multiplier(value)
        records.append(record)

    schema = {"defender": pl.String, **dict.fromkeys(chart.types, pl.String)}
    return pl.DataFrame(records, schema=schema)


def histogram_frame(histogram: Mapping[float, int]) -> pl.DataFrame:
    """Histogram as a two-column table in export order (4x first, 0x last)."""
    return pl.DataFrame(
        {
            "multiplier": [format_multiplier(multiplier) for multiplier in MULTIPLIERS],
            "count": [histogram.get(multiplier, 0) for multiplier in MULTIPLIERS],
        },
        schema={"multiplier": pl.String, "count": pl.Int64},
    )


def bucket_frame(chart: TypeChart, attacking_types: Sequence[str]) -> pl.DataFrame:
    """One row per defending typing in the 0.25x, 0.5x and 1x buckets.

    Returns:
        DataFrame with columns: multiplier, type1, type2, weakness_score,
        hits_4x, hits_2x. Rows keep bucket order, then weakness order.
    """
    results: list[dict[str, Any]] = []
    for report in resisted_buckets(chart, attacking_types):
        for combo in report.combos:
            breakdown = report.breakdowns[combo]
            results.append(
                {
                    "multiplier": format_multiplier(report.multiplier),
                    "type1": combo[0],
                    "type2": combo[1],
                    "weakness_score": weakness_score(chart, *combo),
                    "hits_4x": ", ".join(breakdown[SUPER_EFFECTIVE_4X_VALUE]),
                    "hits_2x": ", ".join(breakdown[SUPER_EFFECTIVE_VALUE]),
                }
            )

    if not results:
        return pl.DataFrame(schema=_BUCKET_SCHEMA)
    return pl.DataFrame(results, schema=_BUCKET_SCHEMA)
