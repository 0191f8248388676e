"""Shared pytest fixtures for the chart gallery."""

import matplotlib

matplotlib.use("Agg")

import pytest

from chart_gallery.core.chart_registry import ChartRegistry
from chart_gallery.core.constants import ChartVariant
from chart_gallery.gallery import ChartGallery


@pytest.fixture(scope="session")
def registry():
    return ChartRegistry()


@pytest.fixture
def output_dir(tmp_path):
    return tmp_path / "out"


@pytest.fixture
def gallery(output_dir):
    return ChartGallery(output_directory=str(output_dir))


@pytest.fixture
def small_variants():
    return [ChartVariant.SINGLE_LINE, ChartVariant.CANDLE_STICK, ChartVariant.GIT_CONTRIBUTIONS]
