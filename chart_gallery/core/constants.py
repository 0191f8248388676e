"""
Core constants and identifiers used across the chart gallery.

Centralizing these values avoids hardcoded strings scattered throughout
the codebase and keeps the closed set of chart variants in one place.
"""

from enum import Enum

# Configuration keys
CONFIG_KEY_DATASETS = "datasets"
CONFIG_KEY_VISUALIZATION = "visualization_defaults"
CONFIG_KEY_SAMPLE_DATA = "sample_data"

# Default gallery naming
DEFAULT_GALLERY_NAME = "Chart Gallery"
DEFAULT_SEED = 42

# Auxiliary config filenames (without extension)
REPORT_TEMPLATE_STEM = "report_template"

# Output locations
OVERVIEW_DIR = "overview"
DETAIL_DIR = "detail"
GALLERY_INDEX_FILE = "gallery_index.json"
ACCESSIBILITY_REPORT_FILE = "accessibility_report.txt"

# Rendering defaults (inches / dots per inch)
OVERVIEW_FIGSIZE = (4.0, 3.0)
DETAIL_FIGSIZE = (10.0, 6.0)
DEFAULT_DPI = 100
DEFAULT_GRID_COLUMNS = 4

DEFAULT_PALETTE = [
    '#1f77b4',  # blue
    '#ff7f0e',  # orange
    '#2ca02c',  # green
    '#d62728',  # red
    '#9467bd',  # purple
    '#8c564b',  # brown
    '#e377c2',  # pink
    '#7f7f7f',  # gray
    '#bcbd22',  # olive
    '#17becf',  # cyan
]


class ChartCategory(str, Enum):
    """Gallery filter tags. ALL is a filter value only, never a variant's category."""
    ALL = "all"
    LINE = "line"
    BAR = "bar"
    AREA = "area"
    RANGE = "range"
    HEAT_MAP = "heatMap"
    POINT = "point"

    def __str__(self) -> str:
        return self.value

    @property
    def id(self) -> str:
        return self.value

    @property
    def icon_name(self) -> str:
        """Icon reference shown next to the category in the gallery."""
        return _CATEGORY_ICONS[self]


_CATEGORY_ICONS = {
    ChartCategory.ALL: "",
    ChartCategory.LINE: "chart.xyaxis.line",
    ChartCategory.BAR: "chart.bar.fill",
    ChartCategory.AREA: "triangle.fill",
    ChartCategory.RANGE: "trapezoid.and.line.horizontal.fill",
    ChartCategory.HEAT_MAP: "checkerboard.rectangle",
    ChartCategory.POINT: "point.3.connected.trianglepath.dotted",
}


class ChartVariant(str, Enum):
    """Chart example identifiers, in gallery order."""
    # Line charts
    SINGLE_LINE = "singleLine"
    SINGLE_LINE_LOLLIPOP = "singleLineLollipop"
    HEART_BEAT = "heartBeat"
    ANIMATING_LINE = "animatingLine"
    GRADIENT_LINE = "gradientLine"
    MULTI_LINE = "multiLine"
    LINE_POINT = "linePoint"

    # Bar charts
    SINGLE_BAR = "singleBar"
    SINGLE_BAR_THRESHOLD = "singleBarThreshold"
    TWO_BARS = "twoBars"
    PYRAMID = "pyramid"
    ONE_DIMENSIONAL_BAR = "oneDimensionalBar"
    TIME_SHEET_BAR = "timeSheetBar"
    SOUND_BAR = "soundBar"

    # Area charts
    AREA_SIMPLE = "areaSimple"
    STACKED_AREA = "stackedArea"

    # Range charts
    RANGE_SIMPLE = "rangeSimple"
    RANGE_HEART_RATE = "rangeHeartRate"
    CANDLE_STICK = "candleStick"

    # Heat map charts
    CUSTOMIZEABLE_HEAT_MAP = "customizeableHeatMap"
    GIT_CONTRIBUTIONS = "gitContributions"

    # Point charts
    SCATTER = "scatter"
    VECTOR_FIELD = "vectorField"

    def __str__(self) -> str:
        return self.value

    @property
    def id(self) -> str:
        return self.value
