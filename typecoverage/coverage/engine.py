# ABOUTME: Type coverage engine for sets of attacking types.
# ABOUTME: Computes max multipliers per defending typing, resisted buckets, weakness breakdowns, and histograms.

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from enum import Enum

from typecoverage.utils.type_chart import (
    MULTIPLIERS,
    RESISTED_BUCKETS,
    SUPER_EFFECTIVE_4X_VALUE,
    SUPER_EFFECTIVE_VALUE,
    WEAKNESS_MULTIPLIERS,
    DefenderCombo,
    TypeChart,
)

# Weakness score weights
WEIGHT_4X = 2
WEIGHT_2X = 1


class NotApplicable(Enum):
    """Marker for a matchup that has no value because nothing is attacking."""

    NOT_APPLICABLE = "-"

    def __str__(self) -> str:
        return self.value


NOT_APPLICABLE = NotApplicable.NOT_APPLICABLE

Multiplier = float | NotApplicable


@dataclass(frozen=True)
class BucketReport:
    """Defending typings that take a given max multiplier from the attacking set.

    Attributes:
        multiplier: The bucket's combined multiplier (0.25, 0.5 or 1).
        combos: Defending typings, hardest-hit first.
        breakdowns: Per-combo attacking types (full catalog) hitting at 4x / 2x.
        summary: Per-attacker hit counts across the bucket, for 4x and 2x.
    """

    multiplier: float
    combos: list[DefenderCombo]
    breakdowns: dict[DefenderCombo, dict[float, list[str]]] = field(default_factory=dict)
    summary: dict[float, list[tuple[str, int]]] = field(default_factory=dict)


def dedupe_types(types: Iterable[str]) -> list[str]:
    """Drop repeated types, keeping the first occurrence order."""
    return list(dict.fromkeys(types))


def format_multiplier(value: Multiplier) -> str:
    """Render a multiplier as shown in the coverage table ("4", "0.5", "0.25", "-")."""
    if isinstance(value, NotApplicable):
        return str(value)
    if value.is_integer():
        return str(int(value))
    return f"{value:.2f}".rstrip("0").rstrip(".")


def max_effectiveness(
    chart: TypeChart, def_type1: str, def_type2: str | None, attacking_types: Sequence[str]
) -> Multiplier:
    """Best multiplier any attacking type achieves against a defending typing.

    Args:
        chart: The type chart.
        def_type1: The defender's primary type.
        def_type2: The defender's secondary type. None or equal to def_type1 for monotypes.
        attacking_types: The selected attacking types.

    Returns:
        The maximum multiplier, or NOT_APPLICABLE when no attacking type is selected.
    """
    if not attacking_types:
        return NOT_APPLICABLE
    return max(chart.pair_effectiveness(atk_type, def_type1, def_type2) for atk_type in attacking_types)


def coverage_matrix(chart: TypeChart, attacking_types: Sequence[str]) -> dict[tuple[str, str], Multiplier]:
    """Max multiplier for every canonical defending pair.

    Keys are (type1, type2) with type1 at or before type2 in catalog order;
    monotypes appear as (type, type). The mirrored half is omitted since
    the combined multiplier is symmetric.
    """
    attacking = dedupe_types(attacking_types)
    matrix: dict[tuple[str, str], Multiplier] = {}
    for def_type1, def_type2 in chart.canonical_pairs():
        second = def_type1 if def_type2 is None else def_type2
        matrix[(def_type1, second)] = max_effectiveness(chart, def_type1, def_type2, attacking)
    return matrix


def attacker_breakdown(chart: TypeChart, def_type1: str, def_type2: str | None = None) -> dict[float, list[str]]:
    """Attacking types from the whole catalog that hit a typing at exactly 4x or 2x.

    Args:
        chart: The type chart.
        def_type1: The defender's primary type.
        def_type2: The defender's secondary type, or None for monotype.

    Returns:
        {4.0: [...], 2.0: [...]} with types in catalog order.
    """
    breakdown: dict[float, list[str]] = {multiplier: [] for multiplier in WEAKNESS_MULTIPLIERS}
    for atk_type in chart.types:
        eff = chart.pair_effectiveness(atk_type, def_type1, def_type2)
        if eff in breakdown:
            breakdown[eff].append(atk_type)
    return breakdown


def weakness_score(chart: TypeChart, def_type1: str, def_type2: str | None = None) -> int:
    """Score how exposed a typing is: 4x attackers * 2 + 2x attackers * 1."""
    breakdown = attacker_breakdown(chart, def_type1, def_type2)
    return (
        len(breakdown[SUPER_EFFECTIVE_4X_VALUE]) * WEIGHT_4X + len(breakdown[SUPER_EFFECTIVE_VALUE]) * WEIGHT_2X
    )


def sort_by_weakness(chart: TypeChart, combos: Sequence[DefenderCombo]) -> list[DefenderCombo]:
    """Sort typings by weakness score, highest first.

    The sort is stable, so equal scores keep their incoming (canonical) order.
    """
    return sorted(combos, key=lambda combo: weakness_score(chart, *combo), reverse=True)


def bucket_by_multiplier(chart: TypeChart, attacking_types: Sequence[str]) -> dict[float, list[DefenderCombo]]:
    """Group defending typings into the 0.25x, 0.5x and 1x buckets.

    Args:
        chart: The type chart.
        attacking_types: The selected attacking types.

    Returns:
        {0.25: [...], 0.5: [...], 1.0: [...]}, each list sorted by weakness score.
        All lists are empty when no attacking type is selected.
    """
    buckets: dict[float, list[DefenderCombo]] = {multiplier: [] for multiplier in RESISTED_BUCKETS}
    attacking = dedupe_types(attacking_types)
    if not attacking:
        return buckets

    for def_type1, def_type2 in chart.canonical_pairs():
        eff = max_effectiveness(chart, def_type1, def_type2, attacking)
        if eff in buckets:
            buckets[eff].append((def_type1, def_type2))

    return {multiplier: sort_by_weakness(chart, combos) for multiplier, combos in buckets.items()}


def bucket_attacker_summary(chart: TypeChart, combos: Iterable[DefenderCombo]) -> dict[float, list[tuple[str, int]]]:
    """Count how many typings in a bucket each attacking type hits at 4x and 2x.

    Returns:
        {4.0: [(type, count), ...], 2.0: [...]}, sorted by count descending.
        Ties keep the order in which attackers first appear while walking
        `combos`. Types that hit nothing are left out.
    """
    counts: dict[float, dict[str, int]] = {multiplier: {} for multiplier in WEAKNESS_MULTIPLIERS}
    for def_type1, def_type2 in combos:
        breakdown = attacker_breakdown(chart, def_type1, def_type2)
        for multiplier, atk_types in breakdown.items():
            for atk_type in atk_types:
                counts[multiplier][atk_type] = counts[multiplier].get(atk_type, 0) + 1

    return {
        multiplier: sorted(per_type.items(), key=lambda item: -item[1])
        for multiplier, per_type in counts.items()
    }


def resisted_buckets(chart: TypeChart, attacking_types: Sequence[str]) -> list[BucketReport]:
    """Full report for the 0.25x, 0.5x and 1x buckets, skipping empty ones.

    Returns:
        One BucketReport per non-empty bucket, in 0.25, 0.5, 1 order.
        Empty list when no attacking type is selected.
    """
    reports: list[BucketReport] = []
    for multiplier, combos in bucket_by_multiplier(chart, attacking_types).items():
        if not combos:
            continue
        reports.append(
            BucketReport(
                multiplier=multiplier,
                combos=combos,
                breakdowns={combo: attacker_breakdown(chart, *combo) for combo in combos},
                summary=bucket_attacker_summary(chart, combos),
            )
        )
    return reports


def effectiveness_histogram(chart: TypeChart, attacking_types: Sequence[str]) -> dict[float, int]:
    """Count canonical defending typings per max multiplier.

    Returns:
        {4.0: n, 2.0: n, 1.0: n, 0.5: n, 0.25: n, 0.0: n}. All zeros when no
        attacking type is selected; otherwise the counts sum to n + C(n, 2).
    """
    histogram: dict[float, int] = dict.fromkeys(MULTIPLIERS, 0)
    attacking = dedupe_types(attacking_types)
    if not attacking:
        return histogram

    for def_type1, def_type2 in chart.canonical_pairs():
        eff = max_effectiveness(chart, def_type1, def_type2, attacking)
        histogram[eff] += 1  # type: ignore[index]
    return histogram
