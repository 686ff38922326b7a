"""Contains configurations for the test run."""

from pathlib import Path

import pytest

from typecoverage.config import load_type_chart
from typecoverage.utils.type_chart import TypeChart


@pytest.fixture(scope="session")
def configs_folder() -> Path:
    """Returns the path to the project configs folder."""
    return Path(__file__).parents[2] / "configs"


@pytest.fixture(scope="session")
def chart(configs_folder: Path) -> TypeChart:
    """The standard 18-type chart from configs/type_chart.yml."""
    return load_type_chart(configs_folder / "type_chart.yml")


@pytest.fixture(scope="session")
def tiny_chart() -> TypeChart:
    """Fire/Water/Grass triangle: each beats the next at 2x, everything else 1x."""
    types = ["Fire", "Water", "Grass"]
    effectiveness = {
        "Fire": {"Fire": 1.0, "Water": 1.0, "Grass": 2.0},
        "Water": {"Fire": 2.0, "Water": 1.0, "Grass": 1.0},
        "Grass": {"Fire": 1.0, "Water": 2.0, "Grass": 1.0},
    }
    return TypeChart.from_mapping(types, effectiveness)
