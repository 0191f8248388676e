"""Tests for built-in sample data and CSV dataset overrides."""

import pandas as pd
import pytest

from chart_gallery.core.constants import ChartVariant
from chart_gallery.core.sample_data import REQUIRED_COLUMNS, SampleDataLoader, generate_sample_data
from chart_gallery.gallery import ChartGallery


class TestGenerateSampleData:
    @pytest.mark.parametrize("variant", list(ChartVariant))
    def test_columns_and_rows(self, variant):
        df = generate_sample_data(variant)
        assert list(df.columns) == REQUIRED_COLUMNS[variant]
        assert len(df) > 0

    def test_same_seed_same_frame(self):
        pd.testing.assert_frame_equal(
            generate_sample_data(ChartVariant.CANDLE_STICK, seed=3),
            generate_sample_data(ChartVariant.CANDLE_STICK, seed=3),
        )

    def test_seed_changes_data(self):
        first = generate_sample_data(ChartVariant.SINGLE_LINE, seed=1)
        second = generate_sample_data(ChartVariant.SINGLE_LINE, seed=2)
        assert not first["sales"].equals(second["sales"])

    def test_variants_sharing_a_shape_get_their_own_stream(self):
        line = generate_sample_data(ChartVariant.SINGLE_LINE)
        bar = generate_sample_data(ChartVariant.SINGLE_BAR)
        assert list(line.columns) == list(bar.columns)
        assert not line["sales"].equals(bar["sales"])

    def test_accepts_string_id(self):
        df = generate_sample_data("gitContributions")
        assert len(df) == 26 * 7
        assert set(df["weekday"]) == set(range(7))

    def test_daily_data_starts_in_may(self):
        df = generate_sample_data(ChartVariant.SINGLE_LINE)
        assert len(df) == 30
        assert df["day"].iloc[0] == pd.Timestamp("2022-05-01")

    def test_candles_are_consistent(self):
        df = generate_sample_data(ChartVariant.CANDLE_STICK)
        assert (df["high"] >= df[["open", "close"]].max(axis=1)).all()
        assert (df["low"] <= df[["open", "close"]].min(axis=1)).all()


class TestSampleDataLoader:
    def test_seed_from_config(self, tmp_path):
        loader = SampleDataLoader(output_directory=str(tmp_path), config_override={"sample_data": {"seed": 7}})
        pd.testing.assert_frame_equal(
            loader.load(ChartVariant.SINGLE_LINE),
            generate_sample_data(ChartVariant.SINGLE_LINE, seed=7),
        )

    def test_load_returns_a_copy(self, tmp_path):
        loader = SampleDataLoader(output_directory=str(tmp_path))
        first = loader.load(ChartVariant.SINGLE_BAR)
        first["sales"] = 0
        assert (loader(ChartVariant.SINGLE_BAR)["sales"] > 0).all()

    def test_csv_override(self, tmp_path):
        pd.DataFrame({
            "day": pd.date_range("2023-01-01", periods=5, freq="D"),
            "sales": [1, 2, 3, 4, 5],
        }).to_csv(tmp_path / "sales.csv", index=False)
        loader = SampleDataLoader(
            data_directory=str(tmp_path),
            output_directory=str(tmp_path / "out"),
            config_override={"datasets": {"singleLine": {"filename": "sales.csv",
                                                         "loading_params": {"parse_dates": ["day"]}}}},
        )
        df = loader.load("singleLine")
        assert df["sales"].tolist() == [1, 2, 3, 4, 5]
        assert df["day"].iloc[0] == pd.Timestamp("2023-01-01")
        assert loader.get_dataset_summary() == {
            "singleLine": {"total_records": 5, "columns": ["day", "sales"]},
        }

    def test_csv_encoding_fallback(self, tmp_path):
        (tmp_path / "storage.csv").write_bytes("category,size_gb\nVidéos,12.5\nApps,3.0\n".encode("latin-1"))
        loader = SampleDataLoader(
            data_directory=str(tmp_path),
            output_directory=str(tmp_path / "out"),
            config_override={"datasets": {"oneDimensionalBar": {"filename": "storage.csv"}}},
        )
        df = loader.load(ChartVariant.ONE_DIMENSIONAL_BAR)
        assert df["category"].tolist() == ["Vidéos", "Apps"]

    def test_missing_columns_fall_back_to_sample_data(self, tmp_path):
        pd.DataFrame({"day": ["2023-01-01"], "revenue": [10]}).to_csv(tmp_path / "bad.csv", index=False)
        loader = SampleDataLoader(
            data_directory=str(tmp_path),
            output_directory=str(tmp_path / "out"),
            config_override={"datasets": {"singleLine": {"filename": "bad.csv"}}},
        )
        pd.testing.assert_frame_equal(
            loader.load(ChartVariant.SINGLE_LINE),
            generate_sample_data(ChartVariant.SINGLE_LINE),
        )

    def test_header_only_csv_falls_back_to_sample_data(self, tmp_path):
        (tmp_path / "empty.csv").write_text("day,sales\n", encoding="utf-8")
        loader = SampleDataLoader(
            data_directory=str(tmp_path),
            output_directory=str(tmp_path / "out"),
            config_override={"datasets": {"singleLineLollipop": {"filename": "empty.csv"}}},
        )
        pd.testing.assert_frame_equal(
            loader.load(ChartVariant.SINGLE_LINE_LOLLIPOP),
            generate_sample_data(ChartVariant.SINGLE_LINE_LOLLIPOP),
        )

    def test_header_only_csv_still_renders_and_describes(self, tmp_path):
        (tmp_path / "empty.csv").write_text("day,sales\n", encoding="utf-8")
        gallery = ChartGallery(
            data_directory=str(tmp_path),
            output_directory=str(tmp_path / "out"),
            config_override={"datasets": {"singleLineLollipop": {"filename": "empty.csv"}}},
        )
        descriptor = gallery.registry.accessibility_descriptor(ChartVariant.SINGLE_LINE_LOLLIPOP)
        assert descriptor.point_count == 30

        summary = gallery.generate_gallery("line", include_detail=False)
        assert "singleLineLollipop" in summary["charts"]
        assert summary["missing_descriptors"] == []

    @pytest.mark.parametrize("override", [
        {"datasets": None},
        {"sample_data": None},
        {"sample_data": {"seed": None, "encoding_fallbacks": None}},
        {"datasets": {"singleLine": {"filename": "nowhere.csv", "loading_params": None}}},
    ])
    def test_empty_config_sections_use_defaults(self, tmp_path, override):
        loader = SampleDataLoader(output_directory=str(tmp_path), config_override=override)
        assert loader.seed == 42
        assert loader.encoding_fallbacks == ["utf-8", "latin-1", "cp1252"]
        pd.testing.assert_frame_equal(
            loader.load(ChartVariant.SINGLE_LINE),
            generate_sample_data(ChartVariant.SINGLE_LINE),
        )

    def test_empty_datasets_section_in_yaml(self, tmp_path):
        config_file = tmp_path / "gallery.yaml"
        config_file.write_text("gallery_name: Empty\ndatasets:\nsample_data:\n", encoding="utf-8")
        loader = SampleDataLoader(config_file=str(config_file), output_directory=str(tmp_path / "out"))
        assert len(loader.load(ChartVariant.SCATTER)) == 75

    def test_missing_file_falls_back_to_sample_data(self, tmp_path):
        loader = SampleDataLoader(
            data_directory=str(tmp_path),
            output_directory=str(tmp_path / "out"),
            config_override={"datasets": {"scatter": {"filename": "nowhere.csv"}}},
        )
        assert len(loader.load(ChartVariant.SCATTER)) == 75
