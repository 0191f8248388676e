"""
Point chart examples.
"""

import numpy as np

from ..accessibility import ChartDescriptor, DataPoint, SeriesDescriptor, numeric_axis
from ..constants import ChartCategory, ChartVariant
from .base import ChartExample


class ScatterChart(ChartExample):
    """Point cloud, one color per group, marker size from the data."""
    variant = ChartVariant.SCATTER
    title = "Scatter Chart"
    category = ChartCategory.POINT
    x_label = "x"
    y_label = "y"

    def _groups(self):
        return list(dict.fromkeys(self.data["group"]))

    def draw(self, ax):
        for i, group in enumerate(self._groups()):
            points = self.data[self.data["group"] == group]
            ax.scatter(points["x"], points["y"], s=points["size"], label=str(group),
                       color=self.color(i), alpha=0.7, edgecolor="white", linewidth=0.5)

    def annotate(self, ax):
        for i, group in enumerate(self._groups()):
            points = self.data[self.data["group"] == group]
            ax.scatter([points["x"].mean()], [points["y"].mean()], marker="x", s=80, color=self.color(i))

    def make_chart_descriptor(self) -> ChartDescriptor:
        series = []
        for group in self._groups():
            points = self.data[self.data["group"] == group]
            series.append(SeriesDescriptor(
                name=str(group),
                is_continuous=False,
                data_points=tuple(
                    DataPoint(x=float(x), y=float(y), additional_values=(float(size),))
                    for x, y, size in zip(points["x"], points["y"], points["size"])
                ),
            ))
        return ChartDescriptor(
            title=self.title,
            summary=f"{len(self.data)} points in {len(series)} groups; marker size is the third value.",
            x_axis=numeric_axis("x", self.data["x"].tolist()),
            y_axis=numeric_axis("y", self.data["y"].tolist()),
            series=tuple(series),
            additional_axes=(numeric_axis("Size", self.data["size"].tolist()),),
        )


class VectorField(ChartExample):
    """Arrows on a grid showing direction and magnitude."""
    variant = ChartVariant.VECTOR_FIELD
    title = "Vector Field"
    category = ChartCategory.POINT
    x_label = "x"
    y_label = "y"

    def _magnitude(self) -> np.ndarray:
        return np.hypot(self.data["u"].to_numpy(dtype=float), self.data["v"].to_numpy(dtype=float))

    def draw(self, ax):
        self._arrows = ax.quiver(self.data["x"], self.data["y"], self.data["u"], self.data["v"],
                                 self._magnitude(), cmap="plasma", pivot="mid")
        ax.set_aspect("equal")

    def annotate(self, ax):
        ax.figure.colorbar(self._arrows, ax=ax, label="Magnitude")

    def make_chart_descriptor(self) -> ChartDescriptor:
        magnitude = self._magnitude()
        points = tuple(
            DataPoint(
                x=float(x), y=float(y),
                label=f"direction {np.degrees(np.arctan2(v, u)) % 360:.0f} degrees",
                additional_values=(float(u), float(v), round(float(m), 3)),
            )
            for x, y, u, v, m in zip(self.data["x"], self.data["y"], self.data["u"], self.data["v"], magnitude)
        )
        return ChartDescriptor(
            title=self.title,
            summary=f"{len(points)} vectors on a grid, magnitude up to {magnitude.max():.2f}.",
            x_axis=numeric_axis("x", self.data["x"].tolist()),
            y_axis=numeric_axis("y", self.data["y"].tolist()),
            series=(SeriesDescriptor(name="Vectors", is_continuous=False, data_points=points),),
            additional_axes=(numeric_axis("Magnitude", magnitude.tolist()),),
        )
