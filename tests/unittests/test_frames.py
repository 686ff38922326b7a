# ABOUTME: Unit tests for the polars table views of coverage results.
# ABOUTME: Tests coverage matrix, histogram, and bucket DataFrame shapes and contents.

import polars as pl

from typecoverage.coverage.engine import effectiveness_histogram
from typecoverage.coverage.frames import bucket_frame, coverage_matrix_frame, histogram_frame
from typecoverage.utils.type_chart import TypeChart


class TestCoverageMatrixFrame:
    """Tests for coverage_matrix_frame function."""

    def test_shape(self, chart: TypeChart) -> None:
        """One row per defending type, a defender column plus one per type."""
        df = coverage_matrix_frame(chart, ["Rock"])
        assert df.shape == (18, 19)
        assert df.columns[0] == "defender"
        assert df.columns[1:] == list(chart.types)

    def test_upper_triangle_only(self, chart: TypeChart) -> None:
        """Canonical cells hold values, mirrored cells stay empty."""
        df = coverage_matrix_frame(chart, ["Rock"])

        fire_row = df.filter(pl.col("defender") == "Fire")
        flying_row = df.filter(pl.col("defender") == "Flying")

        assert fire_row["Flying"][0] == "4"
        assert fire_row["Fire"][0] == "2"
        assert flying_row["Fire"][0] == ""

    def test_empty_selection(self, tiny_chart: TypeChart) -> None:
        """Without attacking types canonical cells show '-'."""
        df = coverage_matrix_frame(tiny_chart, [])
        assert df.filter(pl.col("defender") == "Fire").row(0) == ("Fire", "-", "-", "-")
        assert df.filter(pl.col("defender") == "Grass").row(0) == ("Grass", "", "", "-")


class TestHistogramFrame:
    """Tests for histogram_frame function."""

    def test_export_order(self, chart: TypeChart) -> None:
        """Rows run from 4x down to 0x."""
        df = histogram_frame(effectiveness_histogram(chart, ["Normal"]))
        assert df["multiplier"].to_list() == ["4", "2", "1", "0.5", "0.25", "0"]
        assert df["count"].to_list() == [0, 0, 120, 32, 1, 18]


class TestBucketFrame:
    """Tests for bucket_frame function."""

    def test_empty_selection_keeps_schema(self, chart: TypeChart) -> None:
        """No attacking types gives an empty, typed frame."""
        df = bucket_frame(chart, [])
        assert df.is_empty()
        assert df.schema["weakness_score"] == pl.Int64
        assert df.columns == ["multiplier", "type1", "type2", "weakness_score", "hits_4x", "hits_2x"]

    def test_rows(self, chart: TypeChart) -> None:
        """Buckets come in 0.25, 0.5, 1 order with weakness details."""
        df = bucket_frame(chart, ["Normal"])

        assert df.height == 1 + 32 + 120
        first = df.row(0, named=True)
        assert first == {
            "multiplier": "0.25",
            "type1": "Rock",
            "type2": "Steel",
            "weakness_score": 5,
            "hits_4x": "Fighting, Ground",
            "hits_2x": "Water",
        }

    def test_monotype_has_null_second_type(self, chart: TypeChart) -> None:
        """Monotypes leave type2 empty."""
        df = bucket_frame(chart, ["Normal"])
        rock = df.filter((pl.col("type1") == "Rock") & pl.col("type2").is_null())
        assert rock.height == 1
        assert rock["multiplier"][0] == "0.5"
