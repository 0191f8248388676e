"""
Base classes for chart examples.

Every chart example is one class implementing the same small interface:
class-level ``variant``, ``title`` and ``category``, a ``draw`` method that
paints its data on a matplotlib Axes, and ``make_chart_descriptor`` returning
an accessibility descriptor built from the same data.
"""

import io
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional, Sequence, Tuple

import pandas as pd
from matplotlib.axes import Axes
from matplotlib.figure import Figure

from ..accessibility import ChartDescriptor, categorical_axis, numeric_axis, series_from_columns
from ..constants import (
    ChartCategory,
    ChartVariant,
    DEFAULT_DPI,
    DEFAULT_PALETTE,
    DETAIL_FIGSIZE,
    OVERVIEW_FIGSIZE,
)
from ..exceptions import UnimplementedDescriptorError


@dataclass
class ChartView:
    """A rendered chart: the figure plus what it shows and in which mode."""
    variant: ChartVariant
    title: str
    is_overview: bool
    figure: Figure

    @property
    def mode(self) -> str:
        return "overview" if self.is_overview else "detail"

    def save(self, path, dpi: Optional[int] = None) -> Path:
        """Write the figure as an image; the format follows the file suffix."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        self.figure.savefig(path, dpi=dpi or DEFAULT_DPI, facecolor='white')
        return path

    def to_png_bytes(self, dpi: Optional[int] = None) -> bytes:
        buffer = io.BytesIO()
        self.figure.savefig(buffer, format='png', dpi=dpi or DEFAULT_DPI, facecolor='white')
        return buffer.getvalue()

    def close(self) -> None:
        self.figure.clear()


class ChartExample:
    """Base chart example; subclasses draw one chart variant."""

    variant: ChartVariant = None
    title: str = ""
    category: ChartCategory = None
    x_label: str = ""
    y_label: str = ""

    def __init__(
        self,
        data: pd.DataFrame,
        is_overview: bool = True,
        palette: Optional[Sequence[str]] = None,
        figsize: Optional[Tuple[float, float]] = None,
    ):
        self.data = data
        self.is_overview = is_overview
        self.palette = list(palette) if palette else list(DEFAULT_PALETTE)
        self.figsize = tuple(figsize) if figsize else (OVERVIEW_FIGSIZE if is_overview else DETAIL_FIGSIZE)

    def color(self, index: int) -> str:
        """Palette color, cycling when the palette is exhausted."""
        return self.palette[index % len(self.palette)]

    def render(self) -> ChartView:
        """Build the figure in overview or detail mode."""
        figure = Figure(figsize=self.figsize, layout='constrained')
        ax = figure.add_subplot()
        self.draw(ax)
        if self.is_overview:
            self._style_overview(ax)
        else:
            self._style_detail(ax)
            self.annotate(ax)
        return ChartView(variant=self.variant, title=self.title, is_overview=self.is_overview, figure=figure)

    def draw(self, ax: Axes) -> None:
        raise NotImplementedError(f"{self.__class__.__name__} does not implement draw()")

    def annotate(self, ax: Axes) -> None:
        """Detail-only annotations; no-op unless a chart adds some."""

    def make_chart_descriptor(self) -> ChartDescriptor:
        raise UnimplementedDescriptorError(self.variant)

    def _style_overview(self, ax: Axes) -> None:
        # Thumbnails carry no text; the gallery shows the title beside them
        ax.set_xticks([])
        ax.set_yticks([])
        ax.set_xlabel("")
        ax.set_ylabel("")
        ax.set_title("")
        legend = ax.get_legend()
        if legend is not None:
            legend.remove()
        for side in ("top", "right"):
            ax.spines[side].set_visible(False)

    def _style_detail(self, ax: Axes) -> None:
        ax.set_title(self.title, fontsize=12, fontweight='normal')
        if self.x_label:
            ax.set_xlabel(self.x_label, fontsize=10)
        if self.y_label:
            ax.set_ylabel(self.y_label, fontsize=10)
        handles, labels = ax.get_legend_handles_labels()
        if labels and ax.get_legend() is None:
            ax.legend(fontsize=9)
        ax.grid(True, alpha=0.3)

    @staticmethod
    def _dates(values: Any) -> pd.Series:
        return pd.to_datetime(pd.Series(values))

    @staticmethod
    def _date_labels(values: Any) -> list:
        return [d.strftime("%Y-%m-%d") for d in pd.to_datetime(pd.Series(values))]

    def _daily_descriptor(self, value_column: str, series_name: str, summary: str,
                          unit: str = "", labels: Optional[Sequence[Optional[str]]] = None,
                          is_continuous: bool = True) -> ChartDescriptor:
        """Descriptor for a single value-per-day series."""
        days = self._date_labels(self.data["day"])
        values = self.data[value_column].tolist()
        return ChartDescriptor(
            title=self.title,
            summary=summary,
            x_axis=categorical_axis("Day", days),
            y_axis=numeric_axis(self.y_label or series_name, values, unit=unit),
            series=(series_from_columns(series_name, days, values, is_continuous=is_continuous, labels=labels),),
        )
