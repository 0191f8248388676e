"""
Bar chart examples.
"""

from typing import Optional

import matplotlib.dates as mdates
import numpy as np

from ..accessibility import ChartDescriptor, DataPoint, SeriesDescriptor, categorical_axis, numeric_axis, series_from_columns
from ..constants import ChartCategory, ChartVariant
from .base import ChartExample


def _clock(hours: float) -> str:
    minutes = int(round(hours * 60))
    return f"{minutes // 60:02d}:{minutes % 60:02d}"


class SingleBar(ChartExample):
    variant = ChartVariant.SINGLE_BAR
    title = "Single Bar"
    category = ChartCategory.BAR
    x_label = "Day"
    y_label = "Sales"

    def draw(self, ax):
        ax.bar(self._dates(self.data["day"]), self.data["sales"], width=0.8, color=self.color(0))

    def annotate(self, ax):
        average = self.data["sales"].mean()
        ax.axhline(average, color=self.color(7), linestyle="--", linewidth=1, label=f"Average: {average:.1f}")
        ax.legend(fontsize=9)
        ax.xaxis.set_major_formatter(mdates.DateFormatter("%b %d"))

    def make_chart_descriptor(self) -> ChartDescriptor:
        return self._daily_descriptor("sales", "Daily sales", f"Sales per day for {len(self.data)} days.",
                                      is_continuous=False)


class SingleBarThreshold(ChartExample):
    """Bars colored by whether they clear a threshold rule."""
    variant = ChartVariant.SINGLE_BAR_THRESHOLD
    title = "Single Bar with Threshold Rule Mark"
    category = ChartCategory.BAR
    x_label = "Day"
    y_label = "Sales"

    def __init__(self, data, is_overview=True, palette=None, figsize=None, threshold: Optional[float] = None):
        super().__init__(data, is_overview=is_overview, palette=palette, figsize=figsize)
        self.threshold = float(threshold) if threshold is not None else float(round(data["sales"].mean()))

    def _above(self) -> np.ndarray:
        return self.data["sales"].to_numpy() > self.threshold

    def draw(self, ax):
        colors = [self.color(0) if above else self.color(7) for above in self._above()]
        ax.bar(self._dates(self.data["day"]), self.data["sales"], width=0.8, color=colors)
        ax.axhline(self.threshold, color=self.color(3), linewidth=2)

    def annotate(self, ax):
        ax.annotate(f"Threshold: {self.threshold:g}", xy=(1.0, self.threshold), xycoords=("axes fraction", "data"),
                    xytext=(-4, 4), textcoords="offset points", ha="right", fontsize=9, color=self.color(3))
        ax.xaxis.set_major_formatter(mdates.DateFormatter("%b %d"))

    def make_chart_descriptor(self) -> ChartDescriptor:
        labels = ["above threshold" if above else "below threshold" for above in self._above()]
        return self._daily_descriptor(
            "sales", "Daily sales",
            f"Daily sales against a threshold of {self.threshold:g}; "
            f"{int(self._above().sum())} of {len(self.data)} days are above it.",
            labels=labels,
            is_continuous=False,
        )


class TwoBars(ChartExample):
    """Grouped bars comparing two products per weekday."""
    variant = ChartVariant.TWO_BARS
    title = "Two Bars"
    category = ChartCategory.BAR
    x_label = "Weekday"
    y_label = "Sales"

    def _pivot(self):
        return self.data.pivot_table(index="weekday", columns="product", values="sales", sort=False)

    def draw(self, ax):
        table = self._pivot()
        x = np.arange(len(table.index))
        width = 0.8 / max(len(table.columns), 1)
        for i, product in enumerate(table.columns):
            offsets = x + (i - (len(table.columns) - 1) / 2) * width
            ax.bar(offsets, table[product].to_numpy(), width, label=str(product), color=self.color(i))
        ax.set_xticks(x)
        ax.set_xticklabels(table.index)

    def make_chart_descriptor(self) -> ChartDescriptor:
        table = self._pivot()
        weekdays = [str(d) for d in table.index]
        return ChartDescriptor(
            title=self.title,
            summary=f"Sales of {' and '.join(map(str, table.columns))} for each weekday.",
            x_axis=categorical_axis("Weekday", weekdays),
            y_axis=numeric_axis("Sales", self.data["sales"].tolist()),
            series=tuple(
                series_from_columns(str(product), weekdays, table[product].tolist(), is_continuous=False)
                for product in table.columns
            ),
        )


class PyramidChart(ChartExample):
    """Population pyramid: mirrored horizontal bars per age group."""
    variant = ChartVariant.PYRAMID
    title = "Pyramid"
    category = ChartCategory.BAR
    x_label = "Population (%)"
    y_label = "Age group"

    def _pivot(self):
        return self.data.pivot_table(index="age_group", columns="sex", values="population", sort=False)

    def draw(self, ax):
        table = self._pivot()
        y = np.arange(len(table.index))
        for i, sex in enumerate(table.columns):
            # first column extends left, the rest right
            sign = -1 if i == 0 else 1
            ax.barh(y, sign * table[sex].to_numpy(), height=0.9, label=str(sex), color=self.color(i))
        ax.set_yticks(y)
        ax.set_yticklabels(table.index)
        ax.axvline(0, color="black", linewidth=0.8)

    def annotate(self, ax):
        # Population is positive on both sides of the axis
        ax.xaxis.set_major_formatter(lambda value, _pos: f"{abs(value):g}")

    def make_chart_descriptor(self) -> ChartDescriptor:
        table = self._pivot()
        groups = [str(g) for g in table.index]
        return ChartDescriptor(
            title=self.title,
            summary=f"Population share per age group for {', '.join(map(str, table.columns))}.",
            x_axis=categorical_axis("Age group", groups),
            y_axis=numeric_axis("Population", self.data["population"].tolist(), unit="%"),
            series=tuple(
                series_from_columns(str(sex), groups, table[sex].tolist(), is_continuous=False)
                for sex in table.columns
            ),
        )


class OneDimensionalBar(ChartExample):
    """Single stacked bar splitting a total (storage) into categories."""
    variant = ChartVariant.ONE_DIMENSIONAL_BAR
    title = "One Dimensional Bar"
    category = ChartCategory.BAR
    x_label = "Storage (GB)"

    def draw(self, ax):
        left = 0.0
        for i, (name, size) in enumerate(zip(self.data["category"], self.data["size_gb"])):
            ax.barh([0], [size], left=left, height=0.6, label=str(name), color=self.color(i))
            left += size
        ax.set_yticks([])
        ax.set_ylim(-1, 1)

    def annotate(self, ax):
        left = 0.0
        for name, size in zip(self.data["category"], self.data["size_gb"]):
            ax.text(left + size / 2, 0, f"{name}\n{size:g} GB", ha="center", va="center", fontsize=8)
            left += size
        ax.legend(fontsize=9, ncol=len(self.data), loc="upper center", bbox_to_anchor=(0.5, -0.15))

    def make_chart_descriptor(self) -> ChartDescriptor:
        names = [str(n) for n in self.data["category"]]
        sizes = self.data["size_gb"].tolist()
        total = sum(sizes)
        labels = [f"{size / total:.0%} of used storage" for size in sizes] if total else None
        return ChartDescriptor(
            title=self.title,
            summary=f"Storage usage of {total:g} GB split into {len(names)} categories.",
            x_axis=categorical_axis("Category", names),
            y_axis=numeric_axis("Size", sizes, unit="GB"),
            series=(series_from_columns("Storage", names, sizes, is_continuous=False, labels=labels),),
        )


class TimeSheetBar(ChartExample):
    """Activities laid out along the hours of a working day."""
    variant = ChartVariant.TIME_SHEET_BAR
    title = "Time Sheet Bar"
    category = ChartCategory.BAR
    x_label = "Time of day"
    y_label = "Activity"

    def _rows(self):
        activities = []
        for activity in self.data["activity"]:
            if activity not in activities:
                activities.append(activity)
        return activities

    def draw(self, ax):
        rows = self._rows()
        for i, activity in enumerate(rows):
            blocks = self.data[self.data["activity"] == activity]
            spans = [(start, end - start) for start, end in zip(blocks["start"], blocks["end"])]
            ax.broken_barh(spans, (i - 0.4, 0.8), facecolors=self.color(i))
        ax.set_yticks(range(len(rows)))
        ax.set_yticklabels(rows)
        ax.invert_yaxis()

    def annotate(self, ax):
        ax.xaxis.set_major_formatter(lambda value, _pos: _clock(value))

    def make_chart_descriptor(self) -> ChartDescriptor:
        points = tuple(
            DataPoint(x=str(activity), y=round(float(end - start), 2),
                      label=f"{_clock(start)} to {_clock(end)}")
            for activity, start, end in zip(self.data["activity"], self.data["start"], self.data["end"])
        )
        durations = (self.data["end"] - self.data["start"]).tolist()
        return ChartDescriptor(
            title=self.title,
            summary=f"{len(points)} time blocks from {_clock(self.data['start'].min())} "
                    f"to {_clock(self.data['end'].max())}.",
            x_axis=categorical_axis("Activity", self._rows()),
            y_axis=numeric_axis("Duration", durations, unit="h"),
            series=(SeriesDescriptor(name="Time blocks", is_continuous=False, data_points=points),),
        )


class SoundBars(ChartExample):
    """Audio level meter: bars mirrored around zero."""
    variant = ChartVariant.SOUND_BAR
    title = "Sound Bar"
    category = ChartCategory.BAR
    x_label = "Sample"
    y_label = "Amplitude"

    def draw(self, ax):
        amplitude = self.data["amplitude"].to_numpy(dtype=float)
        ax.bar(self.data["sample"], 2 * amplitude, bottom=-amplitude, width=0.6, color=self.color(4))
        ax.set_ylim(-1.05, 1.05)

    def make_chart_descriptor(self) -> ChartDescriptor:
        samples = self.data["sample"].tolist()
        amplitude = self.data["amplitude"].tolist()
        peak = int(self.data["amplitude"].to_numpy().argmax())
        return ChartDescriptor(
            title=self.title,
            summary=f"Sound levels for {len(samples)} samples, peaking at sample {samples[peak]}.",
            x_axis=numeric_axis("Sample", samples),
            y_axis=numeric_axis("Amplitude", [0.0, 1.0]),
            series=(series_from_columns("Amplitude", samples, amplitude, is_continuous=False),),
        )
