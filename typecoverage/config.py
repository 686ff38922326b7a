"""ABOUTME: Configuration loaders for the type effectiveness table.
ABOUTME: Handles loading and validating type_chart.yml into a TypeChart."""

import logging
from pathlib import Path

import yaml
from pydantic import BaseModel, model_validator

from typecoverage.settings import settings
from typecoverage.utils.type_chart import TypeChart

logger = logging.getLogger(__name__)


class TypeChartConfig(BaseModel):
    """Configuration for a type catalog and its effectiveness table.

    `effectiveness` maps each attacking type to a row of multipliers whose
    columns follow the order of `types`.
    """

    name: str = "custom"
    types: list[str]
    effectiveness: dict[str, list[float]]

    @model_validator(mode="after")
    def _check_table_is_total(self) -> "TypeChartConfig":
        """Reject tables that do not cover every attacking/defending pair."""
        missing = [t for t in self.types if t not in self.effectiveness]
        if missing:
            raise ValueError(f"Missing effectiveness rows for: {', '.join(missing)}")

        unknown = [t for t in self.effectiveness if t not in self.types]
        if unknown:
            raise ValueError(f"Effectiveness rows for unknown types: {', '.join(unknown)}")

        for atk_type, row in self.effectiveness.items():
            if len(row) != len(self.types):
                raise ValueError(f"Row for '{atk_type}' has {len(row)} entries, expected {len(self.types)}")
        return self

    def to_chart(self) -> TypeChart:
        """Build the dense TypeChart for this configuration.

        Raises:
            ValueError: If the catalog has duplicates or a multiplier is invalid.
        """
        return TypeChart(self.types, [self.effectiveness[t] for t in self.types])


def load_type_chart_config(config_path: Path | None = None) -> TypeChartConfig:
    """Load type chart configuration from YAML file.

    Args:
        config_path: Path to the config file. Defaults to settings.type_chart_path.

    Returns:
        Parsed TypeChartConfig object.

    Raises:
        FileNotFoundError: If config file doesn't exist.
        ValueError: If config file is invalid.
    """
    if config_path is None:
        config_path = settings.type_chart_path

    if not config_path.exists():
        raise FileNotFoundError(f"Type chart config not found: {config_path}")

    with config_path.open(encoding="utf-8") as f:
        raw_config = yaml.safe_load(f)

    return TypeChartConfig.model_validate(raw_config)


def load_type_chart(config_path: Path | None = None) -> TypeChart:
    """Load and build the TypeChart described by a YAML config.

    Args:
        config_path: Path to the config file. Defaults to settings.type_chart_path.

    Returns:
        The validated TypeChart.
    """
    config = load_type_chart_config(config_path)
    chart = config.to_chart()
    logger.info("Loaded type chart '%s' with %d types", config.name, chart.size)
    return chart
