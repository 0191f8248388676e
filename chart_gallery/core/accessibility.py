"""
Accessibility descriptors for chart examples.

A descriptor is a structured summary of what a chart shows (axes, series and
their data points) so assistive technology can present the data without the
rendered image. Every chart example builds its own descriptor from the same
data it plots.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence, Tuple, Union

import numpy as np


@dataclass(frozen=True)
class NumericAxisDescriptor:
    """Continuous axis with a value range."""
    title: str
    range: Tuple[float, float]
    gridline_positions: Tuple[float, ...] = ()
    unit: str = ""

    def describe_value(self, value: Any) -> str:
        if isinstance(value, (int, np.integer)):
            text = f"{int(value):,}"
        else:
            text = f"{float(value):,.2f}".rstrip("0").rstrip(".")
        return f"{text} {self.unit}".strip()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "kind": "numeric",
            "title": self.title,
            "range": [float(self.range[0]), float(self.range[1])],
            "gridline_positions": [float(v) for v in self.gridline_positions],
            "unit": self.unit,
        }


@dataclass(frozen=True)
class CategoricalAxisDescriptor:
    """Discrete axis with an ordered set of categories."""
    title: str
    category_order: Tuple[str, ...]

    def describe_value(self, value: Any) -> str:
        return str(value)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "kind": "categorical",
            "title": self.title,
            "category_order": list(self.category_order),
        }


AxisDescriptor = Union[NumericAxisDescriptor, CategoricalAxisDescriptor]


@dataclass(frozen=True)
class DataPoint:
    """Single observation in a series."""
    x: Any
    y: Any
    label: Optional[str] = None
    additional_values: Tuple[Any, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "x": _plain(self.x),
            "y": _plain(self.y),
            "label": self.label,
            "additional_values": [_plain(v) for v in self.additional_values],
        }


@dataclass(frozen=True)
class SeriesDescriptor:
    name: str
    is_continuous: bool
    data_points: Tuple[DataPoint, ...]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "is_continuous": self.is_continuous,
            "data_points": [point.to_dict() for point in self.data_points],
        }


@dataclass(frozen=True)
class ChartDescriptor:
    """Structured summary of a chart for assistive technology."""
    title: str
    summary: str
    x_axis: AxisDescriptor
    y_axis: AxisDescriptor
    series: Tuple[SeriesDescriptor, ...]
    additional_axes: Tuple[AxisDescriptor, ...] = field(default_factory=tuple)

    @property
    def point_count(self) -> int:
        return sum(len(s.data_points) for s in self.series)

    def describe(self, max_points: Optional[int] = None) -> str:
        """
        Render the descriptor as plain text, one line per data point.

        Args:
            max_points: Limit the number of points listed per series; the
                remainder is summarized as a count.
        """
        lines = [self.title, self.summary]
        lines.append(f"X axis: {_describe_axis(self.x_axis)}")
        lines.append(f"Y axis: {_describe_axis(self.y_axis)}")
        for axis in self.additional_axes:
            lines.append(f"Additional axis: {_describe_axis(axis)}")

        for series in self.series:
            kind = "continuous" if series.is_continuous else "discrete"
            lines.append(f"Series '{series.name}' ({kind}, {len(series.data_points)} points):")
            points = series.data_points if max_points is None else series.data_points[:max_points]
            for point in points:
                x_text = self.x_axis.describe_value(point.x)
                y_text = self.y_axis.describe_value(point.y)
                line = f"  {x_text}: {y_text}"
                if point.additional_values:
                    extra = ", ".join(str(_plain(v)) for v in point.additional_values)
                    line += f" ({extra})"
                if point.label:
                    line += f" - {point.label}"
                lines.append(line)
            hidden = len(series.data_points) - len(points)
            if hidden > 0:
                lines.append(f"  ... {hidden} more points")

        return "\n".join(lines)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "title": self.title,
            "summary": self.summary,
            "x_axis": self.x_axis.to_dict(),
            "y_axis": self.y_axis.to_dict(),
            "additional_axes": [axis.to_dict() for axis in self.additional_axes],
            "series": [s.to_dict() for s in self.series],
        }


def numeric_axis(title: str, values: Sequence[float], unit: str = "", gridlines: int = 5) -> NumericAxisDescriptor:
    """Build a numeric axis spanning the given values."""
    array = np.asarray(values, dtype=float)
    if array.size == 0:
        low, high = 0.0, 0.0
    else:
        low, high = float(np.nanmin(array)), float(np.nanmax(array))
    positions = tuple(float(v) for v in np.linspace(low, high, gridlines)) if gridlines > 1 else ()
    return NumericAxisDescriptor(title=title, range=(low, high), gridline_positions=positions, unit=unit)


def categorical_axis(title: str, categories: Sequence[Any]) -> CategoricalAxisDescriptor:
    """Build a categorical axis keeping first-seen order of categories."""
    order: List[str] = []
    for category in categories:
        text = str(category)
        if text not in order:
            order.append(text)
    return CategoricalAxisDescriptor(title=title, category_order=tuple(order))


def series_from_columns(name: str, xs: Sequence[Any], ys: Sequence[Any], is_continuous: bool = True,
                        labels: Optional[Sequence[Optional[str]]] = None) -> SeriesDescriptor:
    """Zip x/y columns into a series descriptor."""
    labels = list(labels) if labels is not None else [None] * len(xs)
    points = tuple(
        DataPoint(x=_plain(x), y=_plain(y), label=label)
        for x, y, label in zip(xs, ys, labels)
    )
    return SeriesDescriptor(name=name, is_continuous=is_continuous, data_points=points)


def _describe_axis(axis: AxisDescriptor) -> str:
    if isinstance(axis, NumericAxisDescriptor):
        low, high = axis.range
        return f"{axis.title}, {axis.describe_value(low)} to {axis.describe_value(high)}"
    return f"{axis.title}, {len(axis.category_order)} categories: {', '.join(axis.category_order)}"


def _plain(value: Any) -> Any:
    """Convert numpy/pandas scalars into plain Python values."""
    if hasattr(value, "isoformat"):
        return value.isoformat()
    if isinstance(value, np.generic):
        return value.item()
    return value
