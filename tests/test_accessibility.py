"""Tests for accessibility descriptors and their text rendering."""

import json

import pytest

from chart_gallery.core.accessibility import (
    CategoricalAxisDescriptor,
    ChartDescriptor,
    NumericAxisDescriptor,
    categorical_axis,
    numeric_axis,
    series_from_columns,
)
from chart_gallery.core.constants import ChartCategory, ChartVariant
from chart_gallery.core.examples import ChartExample
from chart_gallery.core.exceptions import UnimplementedDescriptorError
from chart_gallery.core.sample_data import generate_sample_data


class TestAxisHelpers:
    def test_numeric_axis_spans_values(self):
        axis = numeric_axis("Sales", [3, 9, 1, 5], unit="EUR")
        assert axis.range == (1.0, 9.0)
        assert axis.gridline_positions[0] == 1.0
        assert axis.gridline_positions[-1] == 9.0
        assert len(axis.gridline_positions) == 5

    def test_numeric_axis_empty(self):
        axis = numeric_axis("Empty", [])
        assert axis.range == (0.0, 0.0)

    def test_numeric_value_formatting(self):
        axis = NumericAxisDescriptor(title="Price", range=(0.0, 1.0), unit="USD")
        assert axis.describe_value(1500) == "1,500 USD"
        assert axis.describe_value(2.5) == "2.5 USD"
        assert axis.describe_value(3.0) == "3 USD"

    def test_categorical_axis_keeps_first_seen_order(self):
        axis = categorical_axis("Weekday", ["Tue", "Mon", "Tue", "Wed", "Mon"])
        assert axis.category_order == ("Tue", "Mon", "Wed")

    def test_series_from_columns(self):
        series = series_from_columns("Sales", ["a", "b"], [1, 2], is_continuous=False, labels=[None, "peak"])
        assert not series.is_continuous
        assert [p.y for p in series.data_points] == [1, 2]
        assert series.data_points[1].label == "peak"


class TestDescribe:
    @pytest.fixture
    def descriptor(self):
        return ChartDescriptor(
            title="Sales",
            summary="Three days of sales.",
            x_axis=categorical_axis("Day", ["Mon", "Tue", "Wed"]),
            y_axis=numeric_axis("Sales", [10, 30]),
            series=(series_from_columns("Daily", ["Mon", "Tue", "Wed"], [10, 20, 30], labels=[None, None, "best"]),),
        )

    def test_text_lists_axes_and_points(self, descriptor):
        text = descriptor.describe()
        lines = text.splitlines()
        assert lines[0] == "Sales"
        assert lines[1] == "Three days of sales."
        assert "X axis: Day, 3 categories: Mon, Tue, Wed" in lines
        assert "Y axis: Sales, 10 to 30" in lines
        assert "Series 'Daily' (continuous, 3 points):" in lines
        assert "  Wed: 30 - best" in lines

    def test_max_points_truncates(self, descriptor):
        text = descriptor.describe(max_points=1)
        assert "  Mon: 10" in text
        assert "  Tue: 20" not in text
        assert "  ... 2 more points" in text

    def test_point_count(self, descriptor):
        assert descriptor.point_count == 3


class TestChartDescriptors:
    @pytest.mark.parametrize("variant", list(ChartVariant))
    def test_every_variant_describes_its_data(self, registry, variant):
        descriptor = registry.accessibility_descriptor(variant)
        assert isinstance(descriptor, ChartDescriptor)
        assert descriptor.title == registry.title_of(variant)
        assert descriptor.summary
        assert descriptor.point_count > 0
        # Serializable for the gallery index
        json.dumps(descriptor.to_dict())

    def test_single_line_has_one_point_per_day(self, registry):
        descriptor = registry.accessibility_descriptor(ChartVariant.SINGLE_LINE)
        data = generate_sample_data(ChartVariant.SINGLE_LINE)
        assert len(descriptor.series) == 1
        assert len(descriptor.series[0].data_points) == len(data)
        assert isinstance(descriptor.x_axis, CategoricalAxisDescriptor)
        assert descriptor.x_axis.category_order[0] == "2022-05-01"

    def test_candle_stick_points_carry_ohlc(self, registry):
        descriptor = registry.accessibility_descriptor(ChartVariant.CANDLE_STICK)
        data = generate_sample_data(ChartVariant.CANDLE_STICK)
        first = descriptor.series[0].data_points[0]
        assert first.y == pytest.approx(data["close"].iloc[0])
        assert first.additional_values == pytest.approx(
            (data["open"].iloc[0], data["high"].iloc[0], data["low"].iloc[0])
        )
        assert first.label.startswith("open ")
        assert not descriptor.series[0].is_continuous

    def test_git_contributions_covers_every_day(self, registry):
        descriptor = registry.accessibility_descriptor(ChartVariant.GIT_CONTRIBUTIONS)
        assert descriptor.point_count == 26 * 7
        assert descriptor.additional_axes[0].title == "Weekday"
        assert descriptor.additional_axes[0].category_order[0] == "Sun"
        # 2022-01-02 is a Sunday
        assert descriptor.series[0].data_points[0].label == "Sun"

    def test_line_point_differs_from_gradient_line(self, registry):
        line_point = registry.accessibility_descriptor(ChartVariant.LINE_POINT)
        gradient = registry.accessibility_descriptor(ChartVariant.GRADIENT_LINE)
        assert line_point != gradient
        assert line_point.title == "Line Point"
        assert line_point.summary != gradient.summary
        assert line_point.point_count == 12
        assert gradient.point_count == 90

    def test_lollipop_marks_selected_day(self, registry):
        descriptor = registry.accessibility_descriptor(ChartVariant.SINGLE_LINE_LOLLIPOP)
        labels = [p.label for p in descriptor.series[0].data_points]
        assert labels.count("selected") == 1
        best = max(descriptor.series[0].data_points, key=lambda p: p.y)
        assert best.label == "selected"

    def test_scatter_groups_become_series(self, registry):
        descriptor = registry.accessibility_descriptor(ChartVariant.SCATTER)
        assert [s.name for s in descriptor.series] == ["A", "B", "C"]
        assert descriptor.additional_axes[0].title == "Size"

    def test_descriptor_is_deterministic(self, registry):
        first = registry.accessibility_descriptor(ChartVariant.HEART_BEAT)
        second = registry.accessibility_descriptor(ChartVariant.HEART_BEAT)
        assert first == second


class TestMissingDescriptor:
    def test_example_without_descriptor_raises(self):
        class Undescribed(ChartExample):
            variant = ChartVariant.SINGLE_LINE
            title = "Undescribed"
            category = ChartCategory.LINE

            def draw(self, ax):
                ax.plot([0, 1], [0, 1])

        example = Undescribed(generate_sample_data(ChartVariant.SINGLE_LINE))
        with pytest.raises(UnimplementedDescriptorError) as excinfo:
            example.make_chart_descriptor()
        assert excinfo.value.variant is ChartVariant.SINGLE_LINE
        assert isinstance(excinfo.value, NotImplementedError)
