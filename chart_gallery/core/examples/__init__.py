"""
Chart examples, one class per chart variant.
"""

from .base import ChartExample, ChartView
from .line_charts import (
    AnimatingLine,
    GradientLine,
    HeartBeat,
    LinePoint,
    MultiLine,
    SingleLine,
    SingleLineLollipop,
)
from .bar_charts import (
    OneDimensionalBar,
    PyramidChart,
    SingleBar,
    SingleBarThreshold,
    SoundBars,
    TimeSheetBar,
    TwoBars,
)
from .area_charts import AreaSimple, StackedArea
from .range_charts import CandleStickChart, HeartRateRangeChart, RangeSimple
from .heat_map_charts import GitHubContributionsGraph, HeatMap
from .point_charts import ScatterChart, VectorField

BUILTIN_EXAMPLES = (
    SingleLine,
    SingleLineLollipop,
    HeartBeat,
    AnimatingLine,
    GradientLine,
    MultiLine,
    LinePoint,
    SingleBar,
    SingleBarThreshold,
    TwoBars,
    PyramidChart,
    OneDimensionalBar,
    TimeSheetBar,
    SoundBars,
    AreaSimple,
    StackedArea,
    RangeSimple,
    HeartRateRangeChart,
    CandleStickChart,
    HeatMap,
    GitHubContributionsGraph,
    ScatterChart,
    VectorField,
)

__all__ = [
    'ChartExample',
    'ChartView',
    'BUILTIN_EXAMPLES',
] + [example.__name__ for example in BUILTIN_EXAMPLES]
