"""Tests for chart example rendering in overview and detail mode."""

import pytest

from chart_gallery.core.chart_registry import ChartRegistry
from chart_gallery.core.constants import ChartVariant
from chart_gallery.core.examples import SingleLine
from chart_gallery.core.sample_data import generate_sample_data


PNG_SIGNATURE = b"\x89PNG\r\n\x1a\n"


class TestOverviewStyling:
    @pytest.mark.parametrize("variant", [
        ChartVariant.SINGLE_LINE,
        ChartVariant.PYRAMID,
        ChartVariant.MULTI_LINE,
        ChartVariant.CUSTOMIZEABLE_HEAT_MAP,
    ])
    def test_thumbnail_has_no_text(self, registry, variant):
        view = registry.overview_view(variant)
        ax = view.figure.axes[0]
        assert len(ax.get_xticks()) == 0
        assert len(ax.get_yticks()) == 0
        assert ax.get_xlabel() == ""
        assert ax.get_ylabel() == ""
        assert ax.get_legend() is None
        view.close()

    def test_detail_has_labels_and_legend(self, registry):
        view = registry.detail_view(ChartVariant.MULTI_LINE)
        ax = view.figure.axes[0]
        assert ax.get_xlabel() == "Day"
        assert ax.get_ylabel() == "Sales"
        legend = ax.get_legend()
        assert legend is not None
        assert [t.get_text() for t in legend.get_texts()] == ["Berlin", "Lisbon", "Oslo"]
        view.close()

    @pytest.mark.parametrize("variant", [
        ChartVariant.GRADIENT_LINE,
        ChartVariant.CUSTOMIZEABLE_HEAT_MAP,
        ChartVariant.VECTOR_FIELD,
    ])
    def test_colorbar_only_in_detail(self, registry, variant):
        overview = registry.overview_view(variant)
        detail = registry.detail_view(variant)
        assert len(overview.figure.axes) == 1
        assert len(detail.figure.axes) == 2
        overview.close()
        detail.close()


class TestChartOptions:
    def test_animating_line_phase(self, registry):
        example = registry.example_for(ChartVariant.ANIMATING_LINE, phase=1.5)
        assert example.make_chart_descriptor().summary == "Sine wave at phase 1.5."

    def test_animating_line_trail_in_detail(self, registry):
        overview = registry.overview_view(ChartVariant.ANIMATING_LINE)
        detail = registry.detail_view(ChartVariant.ANIMATING_LINE)
        assert len(overview.figure.axes[0].get_lines()) == 1
        assert len(detail.figure.axes[0].get_lines()) == 5
        overview.close()
        detail.close()

    def test_threshold_defaults_to_rounded_mean(self, registry):
        example = registry.example_for(ChartVariant.SINGLE_BAR_THRESHOLD)
        data = generate_sample_data(ChartVariant.SINGLE_BAR_THRESHOLD)
        assert example.threshold == float(round(data["sales"].mean()))

    def test_threshold_option_changes_labels(self, registry):
        example = registry.example_for(ChartVariant.SINGLE_BAR_THRESHOLD, threshold=0)
        labels = {p.label for p in example.make_chart_descriptor().series[0].data_points}
        assert labels == {"above threshold"}

    def test_heat_map_colormap(self, registry):
        view = registry.detail_view(ChartVariant.CUSTOMIZEABLE_HEAT_MAP, colormap="magma")
        assert view.figure.axes[0].images[0].get_cmap().name == "magma"
        view.close()

    def test_unknown_option_is_rejected(self, registry):
        with pytest.raises(TypeError):
            registry.overview_view(ChartVariant.SINGLE_LINE, phase=1.0)


class TestChartView:
    def test_png_bytes(self, registry):
        view = registry.overview_view(ChartVariant.SINGLE_BAR)
        assert view.to_png_bytes().startswith(PNG_SIGNATURE)
        view.close()

    def test_save_creates_parent_directories(self, registry, tmp_path):
        view = registry.detail_view(ChartVariant.CANDLE_STICK)
        path = view.save(tmp_path / "nested" / "candle.png")
        assert path.exists()
        assert path.read_bytes().startswith(PNG_SIGNATURE)
        assert view.mode == "detail"
        view.close()

    def test_close_clears_figure(self, registry):
        view = registry.overview_view(ChartVariant.SCATTER)
        view.close()
        assert view.figure.axes == []


class TestPalette:
    def test_custom_palette_is_used(self):
        registry = ChartRegistry(palette=["#000000", "#ffffff"])
        example = registry.example_for(ChartVariant.SINGLE_LINE)
        assert example.color(0) == "#000000"
        assert example.color(3) == "#ffffff"

    def test_default_palette_cycles(self):
        example = SingleLine(generate_sample_data(ChartVariant.SINGLE_LINE))
        assert example.color(0) == example.color(len(example.palette))
