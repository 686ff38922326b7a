# ABOUTME: Coverage package for attacking type set analysis.
# ABOUTME: Contains the effectiveness engine, row aggregation, export formatting, and table views.

from typecoverage.coverage.engine import (
    NOT_APPLICABLE,
    BucketReport,
    NotApplicable,
    attacker_breakdown,
    bucket_attacker_summary,
    bucket_by_multiplier,
    coverage_matrix,
    dedupe_types,
    effectiveness_histogram,
    format_multiplier,
    max_effectiveness,
    resisted_buckets,
    sort_by_weakness,
    weakness_score,
)
from typecoverage.coverage.export import (
    ZERO_LINE,
    commit_selection,
    current_line,
    export_book,
    export_text,
    format_line,
    summary_line_for,
)
from typecoverage.coverage.rows import (
    Editing,
    EditState,
    Idle,
    Mode,
    Row,
    RowBook,
    effective_attacking_set,
)

__all__ = [
    "NOT_APPLICABLE",
    "ZERO_LINE",
    "BucketReport",
    "EditState",
    "Editing",
    "Idle",
    "Mode",
    "NotApplicable",
    "Row",
    "RowBook",
    "attacker_breakdown",
    "bucket_attacker_summary",
    "bucket_by_multiplier",
    "commit_selection",
    "coverage_matrix",
    "current_line",
    "dedupe_types",
    "effective_attacking_set",
    "effectiveness_histogram",
    "export_book",
    "export_text",
    "format_line",
    "format_multiplier",
    "max_effectiveness",
    "resisted_buckets",
    "sort_by_weakness",
    "summary_line_for",
    "weakness_score",
]
