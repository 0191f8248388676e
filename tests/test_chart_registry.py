"""Tests for the chart registry: metadata, dispatch and coverage checks."""

import pytest

from chart_gallery.core import chart_registry
from chart_gallery.core.chart_registry import ChartRegistry, resolve_variant
from chart_gallery.core.constants import ChartCategory, ChartVariant
from chart_gallery.core.examples import BUILTIN_EXAMPLES, ChartExample, ChartView
from chart_gallery.core.examples.line_charts import SingleLine
from chart_gallery.core.exceptions import RegistryError, UnknownVariantError


class TestMetadata:
    def test_single_line(self, registry):
        assert registry.title_of(ChartVariant.SINGLE_LINE) == "Line Chart"
        assert registry.category_of(ChartVariant.SINGLE_LINE) is ChartCategory.LINE

    def test_candle_stick(self, registry):
        assert registry.title_of(ChartVariant.CANDLE_STICK) == "Candle Stick Chart"
        assert registry.category_of(ChartVariant.CANDLE_STICK) is ChartCategory.RANGE

    def test_git_contributions(self, registry):
        assert registry.title_of(ChartVariant.GIT_CONTRIBUTIONS) == "GitHub Contributions Graph"
        assert registry.category_of(ChartVariant.GIT_CONTRIBUTIONS) is ChartCategory.HEAT_MAP

    @pytest.mark.parametrize("variant", list(ChartVariant))
    def test_category_is_concrete(self, registry, variant):
        category = registry.category_of(variant)
        assert isinstance(category, ChartCategory)
        assert category is not ChartCategory.ALL

    @pytest.mark.parametrize("variant", list(ChartVariant))
    def test_title_is_stable_and_non_empty(self, registry, variant):
        title = registry.title_of(variant)
        assert title
        assert registry.title_of(variant) == title

    def test_ids_are_unique_and_match_values(self):
        ids = [variant.id for variant in ChartVariant]
        assert len(ids) == len(set(ids)) == 23
        assert ChartVariant.SINGLE_LINE.id == "singleLine"
        assert ChartVariant.CUSTOMIZEABLE_HEAT_MAP.id == "customizeableHeatMap"

    def test_category_icons(self):
        assert ChartCategory.ALL.icon_name == ""
        assert ChartCategory.LINE.icon_name == "chart.xyaxis.line"
        assert ChartCategory.HEAT_MAP.icon_name == "checkerboard.rectangle"
        assert ChartCategory.HEAT_MAP.id == "heatMap"


class TestEnumeration:
    def test_variants_keep_declaration_order(self, registry):
        assert registry.variants() == list(ChartVariant)
        assert list(registry) == list(ChartVariant)

    def test_filter_by_category(self, registry):
        assert registry.variants(ChartCategory.AREA) == [ChartVariant.AREA_SIMPLE, ChartVariant.STACKED_AREA]
        assert registry.variants("heatMap") == [
            ChartVariant.CUSTOMIZEABLE_HEAT_MAP,
            ChartVariant.GIT_CONTRIBUTIONS,
        ]

    def test_all_means_no_filter(self, registry):
        assert registry.variants(ChartCategory.ALL) == list(ChartVariant)

    def test_unknown_category(self, registry):
        with pytest.raises(ValueError):
            registry.variants("pie")

    def test_grouping_is_a_partition(self, registry):
        groups = registry.grouped_by_category()
        assert ChartCategory.ALL not in groups
        flattened = [variant for members in groups.values() for variant in members]
        assert sorted(flattened) == sorted(ChartVariant)
        assert len(flattened) == len(set(flattened))

    def test_group_sizes(self, registry):
        sizes = {category: len(members) for category, members in registry.grouped_by_category().items()}
        assert sizes == {
            ChartCategory.LINE: 7,
            ChartCategory.BAR: 7,
            ChartCategory.AREA: 2,
            ChartCategory.RANGE: 3,
            ChartCategory.HEAT_MAP: 2,
            ChartCategory.POINT: 2,
        }


class TestLookup:
    def test_string_ids_resolve(self, registry):
        assert registry.title_of("candleStick") == "Candle Stick Chart"
        assert resolve_variant("scatter") is ChartVariant.SCATTER

    def test_unknown_string_id(self, registry):
        with pytest.raises(UnknownVariantError) as excinfo:
            registry.title_of("pieChart")
        assert "pieChart" in str(excinfo.value)

    def test_unknown_variant_is_a_key_error(self, registry):
        with pytest.raises(KeyError):
            registry.category_of(42)

    def test_contains(self, registry):
        assert "singleLine" in registry
        assert ChartVariant.VECTOR_FIELD in registry
        assert "pieChart" not in registry


class TestViews:
    @pytest.mark.parametrize("variant", list(ChartVariant))
    def test_overview_and_detail_are_producible(self, registry, variant):
        overview = registry.overview_view(variant)
        detail = registry.detail_view(variant)

        assert isinstance(overview, ChartView)
        assert isinstance(detail, ChartView)
        assert overview.is_overview and not detail.is_overview
        assert overview.variant is variant and detail.variant is variant
        assert overview.figure is not detail.figure

        # Detail carries the title; thumbnails carry no text
        assert overview.figure.axes[0].get_title() == ""
        assert detail.figure.axes[0].get_title() == registry.title_of(variant)
        assert overview.figure.get_size_inches()[0] < detail.figure.get_size_inches()[0]
        overview.close()
        detail.close()

    def test_module_level_accessors_use_default_registry(self):
        assert chart_registry.title_of(ChartVariant.SINGLE_LINE) == "Line Chart"
        assert chart_registry.category_of("candleStick") is ChartCategory.RANGE
        assert chart_registry.default_registry() is chart_registry.default_registry()
        view = chart_registry.overview_view(ChartVariant.SCATTER)
        assert view.is_overview
        view.close()


class TestCoverage:
    def test_builtin_examples_cover_every_variant(self):
        assert {example.variant for example in BUILTIN_EXAMPLES} == set(ChartVariant)

    def test_missing_variant_fails_at_construction(self):
        examples = [e for e in BUILTIN_EXAMPLES if e.variant is not ChartVariant.LINE_POINT]
        with pytest.raises(RegistryError, match="linePoint"):
            ChartRegistry(examples=examples)

    def test_duplicate_registration_is_rejected(self):
        class AnotherSingleLine(SingleLine):
            pass

        with pytest.raises(ValueError, match="already registered"):
            ChartRegistry(examples=list(BUILTIN_EXAMPLES) + [AnotherSingleLine])

    def test_all_category_is_rejected(self):
        class FilterOnly(SingleLine):
            category = ChartCategory.ALL

        examples = [e for e in BUILTIN_EXAMPLES if e is not SingleLine] + [FilterOnly]
        with pytest.raises(RegistryError, match="concrete category"):
            ChartRegistry(examples=examples)

    def test_examples_mapping_is_read_only(self, registry):
        with pytest.raises(TypeError):
            registry.examples[ChartVariant.SINGLE_LINE] = ChartExample
