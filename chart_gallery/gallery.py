#!/usr/bin/env python3
"""
Chart Gallery - Orchestrates rendering, indexing and accessibility reporting
"""

import argparse
import sys
from pathlib import Path
from typing import Dict, Any, List, Optional, Union

from .core.base_component import GalleryContext
from .core.chart_registry import ChartRegistry, default_registry, resolve_category, resolve_variant
from .core.constants import ChartCategory, ChartVariant
from .core.exceptions import UnknownVariantError
from .core.report_generator import ReportGenerator
from .core.sample_data import SampleDataLoader
from .core.visualization_handler import VisualizationHandler


class ChartGallery:
    """
    Main gallery class that orchestrates all components.

    The sample data loader builds the shared context (config, logging,
    paths) once; the visualization handler and report generator reuse it.
    """

    def __init__(
        self,
        config_file: Optional[str] = None,
        data_directory: Optional[str] = None,
        output_directory: Optional[str] = None,
        config_override: Optional[Dict[str, Any]] = None,
    ):
        """
        Initialize the chart gallery.

        Args:
            config_file: Path to the gallery configuration (YAML or JSON), optional
            data_directory: Directory holding CSV datasets that override sample data
            output_directory: Path for output files (default: ./gallery_output)
            config_override: Values deep-merged over the loaded configuration
        """
        self.sample_data = SampleDataLoader(config_file, data_directory, output_directory, config_override=config_override)
        shared_ctx: GalleryContext = self.sample_data.context

        self.visualization_handler = VisualizationHandler(context=shared_ctx, sample_data=self.sample_data)
        self.report_generator = ReportGenerator(context=shared_ctx)
        self.registry = self.visualization_handler.chart_registry

        self.config = shared_ctx.config
        self.logger = shared_ctx.logger
        self.output_dir = shared_ctx.output_dir

        self.logger.info(f"Gallery initialized with {len(self.registry)} charts")

    def render_variant(self, variant: Union[ChartVariant, str], include_detail: bool = True) -> Dict[str, Path]:
        """Save the overview (and detail) image of a single variant."""
        variant = resolve_variant(variant)
        written = {'overview': self.visualization_handler.save_overview(variant)}
        if include_detail:
            written['detail'] = self.visualization_handler.save_detail(variant)
        return written

    def generate_gallery(
        self,
        category: Union[ChartCategory, str] = ChartCategory.ALL,
        include_detail: bool = True,
    ) -> Dict[str, Any]:
        """
        Render every chart in a category and write the index and accessibility report.

        Returns:
            Summary with the written files per variant plus grid, index and report paths.
        """
        category = resolve_category(category)
        selected = self.registry.variants(category)
        self.logger.info(f"Generating gallery for {category}: {len(selected)} charts")

        charts: Dict[str, Dict[str, Path]] = {}
        for variant in selected:
            charts[variant.value] = self.render_variant(variant, include_detail=include_detail)

        grid_file = self.visualization_handler.create_gallery_grid(category)

        descriptors, missing = self.report_generator.collect_descriptors(self.registry, selected)
        index = self.report_generator.build_gallery_index(self.registry, selected, descriptors)
        index_file = self.report_generator.save_gallery_index(index)
        report_file = self.report_generator.generate_accessibility_report(self.registry, selected, descriptors)

        if missing:
            self.logger.warning(f"{len(missing)} charts have no accessibility descriptor: "
                                f"{', '.join(v.value for v in missing)}")
        self.logger.info(f"Gallery completed: {len(charts)} charts written to {self.output_dir}")

        return {
            'category': category.value,
            'charts': charts,
            'grid': grid_file,
            'index': index_file,
            'accessibility_report': report_file,
            'missing_descriptors': [v.value for v in missing],
        }

    def list_variants(self, category: Union[ChartCategory, str] = ChartCategory.ALL) -> List[str]:
        """One 'id<TAB>category<TAB>title' line per variant."""
        return variant_lines(self.registry, category)


def variant_lines(registry: ChartRegistry, category: Union[ChartCategory, str] = ChartCategory.ALL) -> List[str]:
    """One 'id<TAB>category<TAB>title' line per variant of the category."""
    return [
        f"{variant.value}\t{registry.category_of(variant).value}\t{registry.title_of(variant)}"
        for variant in registry.variants(category)
    ]


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="chart-gallery",
        description="Render the chart gallery: thumbnails, detail views and accessibility descriptors.",
    )
    parser.add_argument("--config", help="Gallery configuration file (YAML or JSON)")
    parser.add_argument("--data-dir", help="Directory with CSV datasets referenced by the config")
    parser.add_argument("--output", help="Output directory (default: ./gallery_output)")
    parser.add_argument("--category", default=ChartCategory.ALL.value,
                        help="Only include charts of this category: "
                             + ", ".join(c.value for c in ChartCategory))
    parser.add_argument("--variant", help="Render a single chart variant by id")
    parser.add_argument("--detail", action="store_true",
                        help="Also render the detail view; requires --variant (full galleries always include it)")
    parser.add_argument("--list", action="store_true",
                        help="List chart variants and exit without writing any files")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main function for running the chart gallery."""
    args = _build_parser().parse_args(argv)

    if args.detail and not args.variant:
        print("Error: --detail requires --variant", file=sys.stderr)
        return 2

    try:
        category = resolve_category(args.category)
        variant = resolve_variant(args.variant) if args.variant else None
    except (ValueError, UnknownVariantError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    # Listing writes no files
    if args.list:
        for line in variant_lines(default_registry(), category):
            print(line)
        return 0

    gallery = ChartGallery(args.config, args.data_dir, args.output)

    if variant is not None:
        written = gallery.render_variant(variant, include_detail=args.detail)
        for mode, path in written.items():
            print(f"{mode}: {path}")
        return 0

    summary = gallery.generate_gallery(category)
    print(f"Rendered {len(summary['charts'])} charts to {gallery.output_dir}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
