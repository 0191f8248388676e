"""
Area chart examples.
"""

import matplotlib.dates as mdates

from ..accessibility import ChartDescriptor, categorical_axis, numeric_axis, series_from_columns
from ..constants import ChartCategory, ChartVariant
from .base import ChartExample


class AreaSimple(ChartExample):
    variant = ChartVariant.AREA_SIMPLE
    title = "Area Chart"
    category = ChartCategory.AREA
    x_label = "Day"
    y_label = "Sales"

    def draw(self, ax):
        days = self._dates(self.data["day"])
        ax.fill_between(days, self.data["sales"], color=self.color(0), alpha=0.35)
        ax.plot(days, self.data["sales"], color=self.color(0), linewidth=1.5)
        ax.set_ylim(bottom=0)

    def annotate(self, ax):
        ax.xaxis.set_major_formatter(mdates.DateFormatter("%b %d"))

    def make_chart_descriptor(self) -> ChartDescriptor:
        total = int(self.data["sales"].sum())
        return self._daily_descriptor("sales", "Daily sales", f"Area under daily sales, {total:,} sales in total.")


class StackedArea(ChartExample):
    """Product sales stacked on top of each other per day."""
    variant = ChartVariant.STACKED_AREA
    title = "Stacked Area Chart"
    category = ChartCategory.AREA
    x_label = "Day"
    y_label = "Sales"

    def _pivot(self):
        frame = self.data.copy()
        frame["day"] = self._dates(frame["day"])
        return frame.pivot_table(index="day", columns="product", values="sales", sort=False).fillna(0)

    def draw(self, ax):
        table = self._pivot()
        ax.stackplot(
            table.index,
            [table[product].to_numpy() for product in table.columns],
            labels=[str(product) for product in table.columns],
            colors=[self.color(i) for i in range(len(table.columns))],
            alpha=0.85,
        )
        ax.set_ylim(bottom=0)

    def annotate(self, ax):
        ax.legend(loc="upper left", fontsize=9)
        ax.xaxis.set_major_formatter(mdates.DateFormatter("%b %d"))

    def make_chart_descriptor(self) -> ChartDescriptor:
        table = self._pivot()
        days = self._date_labels(table.index)
        totals = table.sum(axis=1)
        return ChartDescriptor(
            title=self.title,
            summary=f"Daily sales of {len(table.columns)} products stacked; "
                    f"the busiest day totals {int(totals.max()):,}.",
            x_axis=categorical_axis("Day", days),
            y_axis=numeric_axis("Sales", [0.0, float(totals.max())]),
            series=tuple(
                series_from_columns(str(product), days, table[product].tolist(), is_continuous=True)
                for product in table.columns
            ),
        )
