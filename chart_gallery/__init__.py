"""
Chart Gallery
Catalog of chart examples with overview/detail rendering and accessibility descriptors.
"""

__version__ = "1.0.0"

# Import main classes for easy access
from .gallery import ChartGallery
from .core.chart_registry import (
    ChartRegistry,
    accessibility_descriptor,
    category_of,
    detail_view,
    overview_view,
    title_of,
)
from .core.constants import ChartCategory, ChartVariant
from .core.visualization_handler import VisualizationHandler
from .core.report_generator import ReportGenerator

__all__ = [
    'ChartGallery',
    'ChartRegistry',
    'ChartCategory',
    'ChartVariant',
    'title_of',
    'category_of',
    'overview_view',
    'detail_view',
    'accessibility_descriptor',
    'VisualizationHandler',
    'ReportGenerator',
]
