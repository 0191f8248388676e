"""
Heat map chart examples.
"""

import numpy as np
from matplotlib.colors import ListedColormap

from ..accessibility import ChartDescriptor, DataPoint, SeriesDescriptor, categorical_axis, numeric_axis
from ..constants import ChartCategory, ChartVariant
from .base import ChartExample

WEEKDAY_NAMES = ["Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"]
CONTRIBUTION_COLORS = ["#ebedf0", "#9be9a8", "#40c463", "#30a14e", "#216e39"]


class HeatMap(ChartExample):
    """Grid of values; the color map can be swapped per instance."""
    variant = ChartVariant.CUSTOMIZEABLE_HEAT_MAP
    title = "Customizable Heat Map"
    category = ChartCategory.HEAT_MAP
    x_label = "Column"
    y_label = "Row"

    def __init__(self, data, is_overview=True, palette=None, figsize=None, colormap: str = "viridis"):
        super().__init__(data, is_overview=is_overview, palette=palette, figsize=figsize)
        self.colormap = colormap

    def _grid(self):
        return self.data.pivot_table(index="row", columns="column", values="value")

    def draw(self, ax):
        grid = self._grid()
        self._image = ax.imshow(grid.to_numpy(), cmap=self.colormap, aspect="auto", origin="upper")

    def annotate(self, ax):
        grid = self._grid()
        ax.grid(False)
        ax.set_xticks(range(len(grid.columns)))
        ax.set_xticklabels(grid.columns)
        ax.set_yticks(range(len(grid.index)))
        ax.set_yticklabels(grid.index)
        ax.figure.colorbar(self._image, ax=ax, label="Value")

    def make_chart_descriptor(self) -> ChartDescriptor:
        grid = self._grid()
        columns = [str(c) for c in grid.columns]
        series = tuple(
            SeriesDescriptor(
                name=f"Row {row}",
                is_continuous=False,
                data_points=tuple(
                    DataPoint(x=str(column), y=round(float(value), 3))
                    for column, value in grid.loc[row].items()
                ),
            )
            for row in grid.index
        )
        return ChartDescriptor(
            title=self.title,
            summary=f"{len(grid.index)} by {len(grid.columns)} grid of values.",
            x_axis=categorical_axis("Column", columns),
            y_axis=numeric_axis("Value", self.data["value"].tolist()),
            series=series,
        )


class GitHubContributionsGraph(ChartExample):
    """Contribution counts laid out as weeks by weekdays."""
    variant = ChartVariant.GIT_CONTRIBUTIONS
    title = "GitHub Contributions Graph"
    category = ChartCategory.HEAT_MAP
    x_label = "Week"

    # Upper bounds of the count buckets for colors 1..4; 0 has its own color
    levels = (2, 4, 6)

    def _level(self, count: int) -> int:
        if count <= 0:
            return 0
        for i, bound in enumerate(self.levels, start=1):
            if count <= bound:
                return i
        return len(self.levels) + 1

    def _grid(self) -> np.ndarray:
        weeks = int(self.data["week"].max()) + 1
        grid = np.zeros((7, weeks), dtype=int)
        for week, weekday, count in zip(self.data["week"], self.data["weekday"], self.data["count"]):
            grid[int(weekday), int(week)] = self._level(int(count))
        return grid

    def draw(self, ax):
        cmap = ListedColormap(CONTRIBUTION_COLORS)
        grid = self._grid()
        ax.pcolormesh(grid, cmap=cmap, vmin=0, vmax=len(CONTRIBUTION_COLORS) - 1,
                      edgecolors="white", linewidth=1.5)
        ax.set_aspect("equal")
        ax.invert_yaxis()

    def annotate(self, ax):
        ax.grid(False)
        ax.set_yticks(np.arange(7) + 0.5)
        ax.set_yticklabels(WEEKDAY_NAMES, fontsize=8)
        total = int(self.data["count"].sum())
        ax.set_xlabel(f"{total:,} contributions in {int(self.data['week'].max()) + 1} weeks", fontsize=10)

    def make_chart_descriptor(self) -> ChartDescriptor:
        dates = self._date_labels(self.data["date"])
        points = tuple(
            DataPoint(x=date, y=int(count), label=WEEKDAY_NAMES[int(weekday)])
            for date, count, weekday in zip(dates, self.data["count"], self.data["weekday"])
        )
        active_days = int((self.data["count"] > 0).sum())
        return ChartDescriptor(
            title=self.title,
            summary=f"{int(self.data['count'].sum()):,} contributions on {active_days} of {len(dates)} days.",
            x_axis=categorical_axis("Date", dates),
            y_axis=numeric_axis("Contributions", self.data["count"].tolist()),
            series=(SeriesDescriptor(name="Contributions", is_continuous=False, data_points=points),),
            additional_axes=(categorical_axis("Weekday", WEEKDAY_NAMES),),
        )
