"""
Range chart examples: each mark spans a low and a high value.
"""

import matplotlib.dates as mdates
import numpy as np

from ..accessibility import ChartDescriptor, DataPoint, SeriesDescriptor, categorical_axis, numeric_axis
from ..constants import ChartCategory, ChartVariant
from .base import ChartExample


def _range_series(name, xs, lows, highs):
    points = tuple(
        DataPoint(x=x, y=float(high), label=f"{low:g} to {high:g}", additional_values=(float(low),))
        for x, low, high in zip(xs, lows, highs)
    )
    return SeriesDescriptor(name=name, is_continuous=False, data_points=points)


class RangeSimple(ChartExample):
    """Monthly temperature range as floating bars."""
    variant = ChartVariant.RANGE_SIMPLE
    title = "Range Chart"
    category = ChartCategory.RANGE
    x_label = "Month"
    y_label = "Temperature (°C)"

    def draw(self, ax):
        low = self.data["low"].to_numpy(dtype=float)
        high = self.data["high"].to_numpy(dtype=float)
        x = np.arange(len(self.data))
        ax.bar(x, high - low, bottom=low, width=0.6, color=self.color(0), alpha=0.85)
        ax.set_xticks(x)
        ax.set_xticklabels(self.data["month"])

    def annotate(self, ax):
        mean = (self.data["low"] + self.data["high"]) / 2
        ax.plot(np.arange(len(self.data)), mean, color=self.color(1), marker="o", linewidth=1.5, label="Average")
        ax.legend(fontsize=9)

    def make_chart_descriptor(self) -> ChartDescriptor:
        months = [str(m) for m in self.data["month"]]
        values = self.data["low"].tolist() + self.data["high"].tolist()
        return ChartDescriptor(
            title=self.title,
            summary="Lowest and highest temperature per month.",
            x_axis=categorical_axis("Month", months),
            y_axis=numeric_axis("Temperature", values, unit="°C"),
            series=(_range_series("Temperature range", months, self.data["low"], self.data["high"]),),
        )


class HeartRateRangeChart(ChartExample):
    """Daily minimum and maximum heart rate."""
    variant = ChartVariant.RANGE_HEART_RATE
    title = "Heart Rate Range Chart"
    category = ChartCategory.RANGE
    x_label = "Day"
    y_label = "Heart rate (BPM)"

    def draw(self, ax):
        days = self._dates(self.data["day"])
        low = self.data["min_bpm"].to_numpy(dtype=float)
        high = self.data["max_bpm"].to_numpy(dtype=float)
        ax.bar(days, high - low, bottom=low, width=0.6, color=self.color(3))

    def annotate(self, ax):
        ax.axhline(self.data["min_bpm"].min(), color=self.color(7), linestyle=":", linewidth=1,
                   label=f"Lowest: {self.data['min_bpm'].min()} BPM")
        ax.axhline(self.data["max_bpm"].max(), color=self.color(7), linestyle="--", linewidth=1,
                   label=f"Highest: {self.data['max_bpm'].max()} BPM")
        ax.legend(fontsize=9)
        ax.xaxis.set_major_formatter(mdates.DateFormatter("%b %d"))

    def make_chart_descriptor(self) -> ChartDescriptor:
        days = self._date_labels(self.data["day"])
        values = self.data["min_bpm"].tolist() + self.data["max_bpm"].tolist()
        return ChartDescriptor(
            title=self.title,
            summary=f"Heart rate range for {len(days)} days, "
                    f"between {self.data['min_bpm'].min()} and {self.data['max_bpm'].max()} BPM.",
            x_axis=categorical_axis("Day", days),
            y_axis=numeric_axis("Heart rate", values, unit="BPM"),
            series=(_range_series("Heart rate", days, self.data["min_bpm"], self.data["max_bpm"]),),
        )


class CandleStickChart(ChartExample):
    """Open/high/low/close candles colored by direction."""
    variant = ChartVariant.CANDLE_STICK
    title = "Candle Stick Chart"
    category = ChartCategory.RANGE
    x_label = "Day"
    y_label = "Price (USD)"

    def _direction_colors(self):
        rising = self.data["close"].to_numpy() >= self.data["open"].to_numpy()
        return [self.color(2) if up else self.color(3) for up in rising]

    def draw(self, ax):
        x = np.arange(len(self.data))
        colors = self._direction_colors()
        ax.vlines(x, self.data["low"], self.data["high"], colors=colors, linewidth=1)
        body_low = np.minimum(self.data["open"], self.data["close"])
        body = np.abs(self.data["close"] - self.data["open"]).clip(lower=0.05)
        ax.bar(x, body, bottom=body_low, width=0.6, color=colors)

    def annotate(self, ax):
        labels = self._date_labels(self.data["day"])
        step = max(len(labels) // 6, 1)
        ax.set_xticks(np.arange(len(labels))[::step])
        ax.set_xticklabels(labels[::step], rotation=30, ha="right", fontsize=8)

    def make_chart_descriptor(self) -> ChartDescriptor:
        days = self._date_labels(self.data["day"])
        points = tuple(
            DataPoint(
                x=day,
                y=float(close),
                label=f"open {open_:g}, high {high:g}, low {low:g}, close {close:g}",
                additional_values=(float(open_), float(high), float(low)),
            )
            for day, open_, high, low, close in zip(
                days, self.data["open"], self.data["high"], self.data["low"], self.data["close"]
            )
        )
        change = self.data["close"].iloc[-1] - self.data["open"].iloc[0]
        direction = "up" if change >= 0 else "down"
        return ChartDescriptor(
            title=self.title,
            summary=f"Daily prices over {len(days)} trading days, {direction} {abs(change):.2f} overall.",
            x_axis=categorical_axis("Day", days),
            y_axis=numeric_axis("Price", self.data["low"].tolist() + self.data["high"].tolist(), unit="USD"),
            series=(SeriesDescriptor(name="Price", is_continuous=False, data_points=points),),
        )
