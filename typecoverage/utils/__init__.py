# ABOUTME: Utils package for typecoverage utility functions.
# ABOUTME: Contains the dense type chart and multiplier constants.

from typecoverage.utils.type_chart import (
    MULTIPLIERS,
    RESISTED_BUCKETS,
    WEAKNESS_MULTIPLIERS,
    DefenderCombo,
    TypeChart,
)

__all__ = [
    "MULTIPLIERS",
    "RESISTED_BUCKETS",
    "WEAKNESS_MULTIPLIERS",
    "DefenderCombo",
    "TypeChart",
]
