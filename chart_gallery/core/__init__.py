#!/usr/bin/env python3
"""
Core module for the chart gallery.
Contains the chart registry, chart examples, sample data, rendering and reporting components.
"""

from .base_component import BaseGalleryComponent, GalleryContext
from .sample_data import SampleDataLoader, generate_sample_data
from .visualization_handler import VisualizationHandler
from .report_generator import ReportGenerator
from .chart_registry import (
    ChartRegistry,
    accessibility_descriptor,
    category_of,
    default_registry,
    detail_view,
    grouped_by_category,
    overview_view,
    title_of,
    variants,
)
from .accessibility import ChartDescriptor
from .constants import ChartCategory, ChartVariant
from .examples import ChartExample, ChartView
from .exceptions import (
    ChartGalleryError,
    RegistryError,
    UnimplementedDescriptorError,
    UnknownVariantError,
)

__all__ = [
    'BaseGalleryComponent',
    'GalleryContext',
    'SampleDataLoader',
    'generate_sample_data',
    'VisualizationHandler',
    'ReportGenerator',
    'ChartRegistry',
    'default_registry',
    'title_of',
    'category_of',
    'overview_view',
    'detail_view',
    'accessibility_descriptor',
    'variants',
    'grouped_by_category',
    'ChartDescriptor',
    'ChartCategory',
    'ChartVariant',
    'ChartExample',
    'ChartView',
    'ChartGalleryError',
    'RegistryError',
    'UnimplementedDescriptorError',
    'UnknownVariantError',
]
