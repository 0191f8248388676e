"""
Line chart examples.
"""

import matplotlib.dates as mdates
import numpy as np
from matplotlib.collections import LineCollection
from matplotlib.ticker import MultipleLocator

from ..accessibility import ChartDescriptor, categorical_axis, numeric_axis, series_from_columns
from ..constants import ChartCategory, ChartVariant
from .base import ChartExample


class SingleLine(ChartExample):
    variant = ChartVariant.SINGLE_LINE
    title = "Line Chart"
    category = ChartCategory.LINE
    x_label = "Day"
    y_label = "Sales"

    def draw(self, ax):
        ax.plot(self._dates(self.data["day"]), self.data["sales"], color=self.color(0), linewidth=2)

    def annotate(self, ax):
        best = int(self.data["sales"].to_numpy().argmax())
        day = self._dates(self.data["day"]).iloc[best]
        value = self.data["sales"].iloc[best]
        ax.scatter([day], [value], color=self.color(3), zorder=3)
        ax.annotate(f"Best day: {value:,}", (day, value), textcoords="offset points",
                    xytext=(0, 8), ha="center", fontsize=9)
        ax.xaxis.set_major_formatter(mdates.DateFormatter("%b %d"))

    def make_chart_descriptor(self) -> ChartDescriptor:
        total = int(self.data["sales"].sum())
        return self._daily_descriptor("sales", "Daily sales", f"Daily sales over {len(self.data)} days, {total:,} in total.")


class SingleLineLollipop(ChartExample):
    """Line chart with a lollipop marking the selected (best) day."""
    variant = ChartVariant.SINGLE_LINE_LOLLIPOP
    title = "Line Chart with Lollipop"
    category = ChartCategory.LINE
    x_label = "Day"
    y_label = "Sales"

    @property
    def selected_index(self) -> int:
        return int(self.data["sales"].to_numpy().argmax())

    def draw(self, ax):
        days = self._dates(self.data["day"])
        sales = self.data["sales"]
        ax.plot(days, sales, color=self.color(0), linewidth=2)
        day = days.iloc[self.selected_index]
        value = sales.iloc[self.selected_index]
        ax.vlines(day, sales.min(), value, colors=self.color(7), linewidth=1.5)
        ax.scatter([day], [value], s=60, color=self.color(0), edgecolor="white", zorder=3)

    def annotate(self, ax):
        day = self._dates(self.data["day"]).iloc[self.selected_index]
        value = self.data["sales"].iloc[self.selected_index]
        ax.annotate(f"{day:%b %d}\n{value:,} sales", (day, value), textcoords="offset points",
                    xytext=(10, 10), fontsize=9,
                    bbox=dict(boxstyle='round,pad=0.4', facecolor='white', alpha=0.9))
        ax.xaxis.set_major_formatter(mdates.DateFormatter("%b %d"))

    def make_chart_descriptor(self) -> ChartDescriptor:
        labels = [None] * len(self.data)
        labels[self.selected_index] = "selected"
        return self._daily_descriptor("sales", "Daily sales", "Daily sales with the best day selected.", labels=labels)


class HeartBeat(ChartExample):
    """ECG trace drawn on millimetre-style paper in detail mode."""
    variant = ChartVariant.HEART_BEAT
    title = "Heart Beat / ECG Chart"
    category = ChartCategory.LINE
    x_label = "Time (s)"
    y_label = "Voltage (mV)"

    def draw(self, ax):
        ax.plot(self.data["time"], self.data["voltage"], color=self.color(3), linewidth=1.2)
        ax.set_xlim(self.data["time"].min(), self.data["time"].max())

    def annotate(self, ax):
        ax.xaxis.set_major_locator(MultipleLocator(0.2))
        ax.xaxis.set_minor_locator(MultipleLocator(0.04))
        ax.yaxis.set_major_locator(MultipleLocator(0.5))
        ax.yaxis.set_minor_locator(MultipleLocator(0.1))
        ax.grid(True, which="major", color="#e8a0a0", alpha=0.8)
        ax.grid(True, which="minor", color="#f6d5d5", alpha=0.6)

    def make_chart_descriptor(self) -> ChartDescriptor:
        times = self.data["time"].tolist()
        voltage = self.data["voltage"].round(3).tolist()
        duration = self.data["time"].max() - self.data["time"].min()
        return ChartDescriptor(
            title=self.title,
            summary=f"Electrocardiogram trace over {duration:.1f} seconds.",
            x_axis=numeric_axis("Time", times, unit="s"),
            y_axis=numeric_axis("Voltage", voltage, unit="mV"),
            series=(series_from_columns("ECG", times, voltage, is_continuous=True),),
        )


class AnimatingLine(ChartExample):
    """Sine wave frame at a given phase; detail mode shows the trailing frames."""
    variant = ChartVariant.ANIMATING_LINE
    title = "Animating Line"
    category = ChartCategory.LINE
    x_label = "x"
    y_label = "sin(x)"
    trail = 4
    step = 0.4

    def __init__(self, data, is_overview=True, palette=None, figsize=None, phase: float = 0.0):
        super().__init__(data, is_overview=is_overview, palette=palette, figsize=figsize)
        self.phase = phase

    def frame(self, phase: float):
        x = self.data["x"].to_numpy()
        return x, np.sin(x + phase)

    def draw(self, ax):
        x, y = self.frame(self.phase)
        ax.plot(x, y, color=self.color(0), linewidth=2)
        ax.set_ylim(-1.2, 1.2)

    def annotate(self, ax):
        for k in range(1, self.trail + 1):
            x, y = self.frame(self.phase - k * self.step)
            ax.plot(x, y, color=self.color(0), linewidth=1.5, alpha=0.5 / k)

    def make_chart_descriptor(self) -> ChartDescriptor:
        x, y = self.frame(self.phase)
        x = np.round(x, 3).tolist()
        y = np.round(y, 3).tolist()
        return ChartDescriptor(
            title=self.title,
            summary=f"Sine wave at phase {self.phase:g}.",
            x_axis=numeric_axis("x", x),
            y_axis=numeric_axis("sin(x)", y),
            series=(series_from_columns("Wave", x, y, is_continuous=True),),
        )


class GradientLine(ChartExample):
    """Temperature line whose color follows its value."""
    variant = ChartVariant.GRADIENT_LINE
    title = "Line with changing gradient"
    category = ChartCategory.LINE
    x_label = "Day"
    y_label = "Temperature (°C)"
    colormap = "coolwarm"

    def draw(self, ax):
        x = mdates.date2num(self._dates(self.data["day"]).to_numpy())
        y = self.data["temperature"].to_numpy(dtype=float)
        points = np.column_stack([x, y]).reshape(-1, 1, 2)
        segments = np.concatenate([points[:-1], points[1:]], axis=1)
        lines = LineCollection(segments, cmap=self.colormap, linewidth=2.5)
        lines.set_array((y[:-1] + y[1:]) / 2)
        ax.add_collection(lines)
        ax.set_xlim(x.min(), x.max())
        ax.set_ylim(y.min() - 1, y.max() + 1)
        ax.xaxis_date()
        self._lines = lines

    def annotate(self, ax):
        ax.figure.colorbar(self._lines, ax=ax, label="Temperature (°C)")
        ax.xaxis.set_major_formatter(mdates.DateFormatter("%b %d"))

    def make_chart_descriptor(self) -> ChartDescriptor:
        low = self.data["temperature"].min()
        high = self.data["temperature"].max()
        return self._daily_descriptor(
            "temperature", "Temperature",
            f"Daily temperature ranging from {low:.1f} to {high:.1f} degrees Celsius.",
            unit="°C",
        )


class MultiLine(ChartExample):
    """One sales line per city."""
    variant = ChartVariant.MULTI_LINE
    title = "Line Charts"
    category = ChartCategory.LINE
    x_label = "Day"
    y_label = "Sales"

    def _pivot(self):
        frame = self.data.copy()
        frame["day"] = self._dates(frame["day"])
        return frame.pivot_table(index="day", columns="city", values="sales", sort=False)

    def draw(self, ax):
        table = self._pivot()
        for i, city in enumerate(table.columns):
            ax.plot(table.index, table[city], label=city, color=self.color(i), linewidth=2)

    def annotate(self, ax):
        ax.xaxis.set_major_formatter(mdates.DateFormatter("%b %d"))

    def make_chart_descriptor(self) -> ChartDescriptor:
        table = self._pivot()
        days = self._date_labels(table.index)
        series = tuple(
            series_from_columns(str(city), days, table[city].tolist(), is_continuous=True)
            for city in table.columns
        )
        return ChartDescriptor(
            title=self.title,
            summary=f"Daily sales for {len(table.columns)} cities.",
            x_axis=categorical_axis("Day", days),
            y_axis=numeric_axis("Sales", self.data["sales"].tolist()),
            series=series,
        )


class LinePoint(ChartExample):
    """Line with a marker and, in detail mode, a value label per point."""
    variant = ChartVariant.LINE_POINT
    title = "Line Point"
    category = ChartCategory.LINE
    x_label = "Day"
    y_label = "Sales"

    def draw(self, ax):
        ax.plot(self._dates(self.data["day"]), self.data["sales"], color=self.color(2),
                linewidth=2, marker="o", markersize=6, markerfacecolor="white")

    def annotate(self, ax):
        for day, value in zip(self._dates(self.data["day"]), self.data["sales"]):
            ax.annotate(f"{value:,}", (day, value), textcoords="offset points", xytext=(0, 8),
                        ha="center", fontsize=8)
        ax.xaxis.set_major_formatter(mdates.DateFormatter("%b %d"))

    def make_chart_descriptor(self) -> ChartDescriptor:
        labels = [f"{d:%A}" for d in self._dates(self.data["day"])]
        return self._daily_descriptor(
            "sales", "Sales",
            f"Sales for {len(self.data)} consecutive days, one point per day.",
            labels=labels,
        )
