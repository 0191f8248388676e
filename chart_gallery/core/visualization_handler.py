#!/usr/bin/env python3
"""
Visualization Handler - Renders chart views and gallery thumbnails to disk
"""

import io
import math
from pathlib import Path
from typing import Optional, Union

import matplotlib.pyplot as plt
import matplotlib.image as mpimg
from matplotlib.figure import Figure

from .base_component import BaseGalleryComponent
from .chart_registry import ChartRegistry, resolve_category
from .constants import (
    ChartCategory,
    ChartVariant,
    DEFAULT_DPI,
    DEFAULT_GRID_COLUMNS,
    DEFAULT_PALETTE,
    DETAIL_DIR,
    OVERVIEW_DIR,
)
from .examples import ChartView
from .sample_data import SampleDataLoader


class VisualizationHandler(BaseGalleryComponent):
    """Handles all rendering and image output for the gallery."""

    def __init__(
        self,
        config_file: Optional[str] = None,
        data_directory: Optional[str] = None,
        output_directory: Optional[str] = None,
        context=None,
        config_override=None,
        sample_data: Optional[SampleDataLoader] = None,
    ):
        super().__init__(config_file, data_directory, output_directory, context=context, config_override=config_override)
        self._setup_plotting()
        self._setup_color_scheme()
        self.sample_data = sample_data or SampleDataLoader(context=self.context)
        self.chart_registry = ChartRegistry(
            data_source=self.sample_data.load,
            palette=self.color_palette,
            overview_figsize=self.visualization_defaults.get('overview_figsize'),
            detail_figsize=self.visualization_defaults.get('detail_figsize'),
        )

    def _setup_plotting(self):
        """Setup matplotlib defaults for gallery images."""
        viz_defaults = self.visualization_defaults

        plt.style.use('default')
        self.dpi = viz_defaults.get('dpi', DEFAULT_DPI)
        plt.rcParams['figure.dpi'] = self.dpi
        plt.rcParams['savefig.dpi'] = self.dpi
        plt.rcParams['font.family'] = viz_defaults.get('font_family', 'sans-serif')
        plt.rcParams['font.size'] = viz_defaults.get('font_size', 10)
        plt.rcParams['axes.grid'] = False
        plt.rcParams['grid.alpha'] = 0.3

    def _setup_color_scheme(self):
        """Setup consistent color scheme for all charts."""
        self.color_palette = list(self.visualization_defaults.get('palette') or DEFAULT_PALETTE)

    def render_chart(self, variant: Union[ChartVariant, str], detail: bool = False, **options) -> ChartView:
        """Render a chart view via the registry."""
        if detail:
            return self.chart_registry.detail_view(variant, **options)
        return self.chart_registry.overview_view(variant, **options)

    def save_overview(self, variant: Union[ChartVariant, str]) -> Path:
        """Render and save the overview thumbnail of a variant."""
        return self._save_view(self.render_chart(variant, detail=False), OVERVIEW_DIR)

    def save_detail(self, variant: Union[ChartVariant, str]) -> Path:
        """Render and save the detail image of a variant."""
        return self._save_view(self.render_chart(variant, detail=True), DETAIL_DIR)

    def _save_view(self, view: ChartView, subdirectory: str) -> Path:
        output_file = self.output_dir / subdirectory / f"{view.variant.value}.png"
        view.save(output_file, dpi=self.dpi)
        view.close()
        self.logger.info(f"Saved {view.mode} view of {view.variant}: {output_file}")
        return output_file

    def create_gallery_grid(self, category: Union[ChartCategory, str] = ChartCategory.ALL) -> Optional[Path]:
        """Compose the overview thumbnails of a category into one grid image."""
        category = resolve_category(category)
        variants = self.chart_registry.variants(category)
        if not variants:
            self.logger.warning(f"No charts to show for category {category}")
            return None

        grid_columns = self.visualization_defaults.get('grid_columns') or DEFAULT_GRID_COLUMNS
        n_cols = max(1, min(int(grid_columns), len(variants)))
        n_rows = math.ceil(len(variants) / n_cols)
        fig = Figure(figsize=(3.2 * n_cols, 2.8 * n_rows), layout='constrained')
        axes = fig.subplots(n_rows, n_cols, squeeze=False).ravel()

        for ax, variant in zip(axes, variants):
            view = self.render_chart(variant, detail=False)
            # Rasterize the thumbnail so each cell is an independent image
            image = mpimg.imread(io.BytesIO(view.to_png_bytes(dpi=self.dpi)), format='png')
            view.close()
            ax.imshow(image)
            ax.set_title(self.chart_registry.title_of(variant), fontsize=9)
            ax.axis('off')

        # Hide any unused cells
        for ax in axes[len(variants):]:
            ax.set_visible(False)

        fig.suptitle(f"{self.gallery_name}: {self._category_label(category)}", fontsize=12)
        output_file = self.output_dir / f"gallery_{category.value}.png"
        fig.savefig(output_file, dpi=self.dpi, facecolor='white')
        fig.clear()

        self.logger.info(f"Gallery grid for {category} ({len(variants)} charts) saved: {output_file}")
        return output_file

    @staticmethod
    def _category_label(category: ChartCategory) -> str:
        if category is ChartCategory.ALL:
            return "All charts"
        return f"{category.value[0].upper()}{category.value[1:]} charts"
