#!/usr/bin/env python3
"""
Report Generator - Writes the gallery index and the accessibility report
"""

import json
from datetime import datetime
from pathlib import Path
from typing import Dict, List, Any, Iterable, Optional, Tuple

from .accessibility import ChartDescriptor
from .base_component import BaseGalleryComponent
from .chart_registry import ChartRegistry
from .constants import ACCESSIBILITY_REPORT_FILE, GALLERY_INDEX_FILE, ChartCategory, ChartVariant
from .exceptions import UnimplementedDescriptorError


class ReportGenerator(BaseGalleryComponent):
    """Handles gallery index and accessibility report generation using the template system."""

    def __init__(
        self,
        config_file: Optional[str] = None,
        data_directory: Optional[str] = None,
        output_directory: Optional[str] = None,
        context=None,
        config_override=None,
    ):
        super().__init__(config_file, data_directory, output_directory, context=context, config_override=config_override)

    def collect_descriptors(
        self,
        registry: ChartRegistry,
        variants: Optional[Iterable[ChartVariant]] = None,
    ) -> Tuple[Dict[ChartVariant, Optional[ChartDescriptor]], List[ChartVariant]]:
        """Build descriptors for the given variants; charts without one are reported, not substituted."""
        descriptors: Dict[ChartVariant, Optional[ChartDescriptor]] = {}
        missing: List[ChartVariant] = []
        for variant in (variants if variants is not None else registry.variants()):
            try:
                descriptors[variant] = registry.accessibility_descriptor(variant)
            except UnimplementedDescriptorError as e:
                self.logger.warning(str(e))
                descriptors[variant] = None
                missing.append(variant)
        return descriptors, missing

    def build_gallery_index(
        self,
        registry: ChartRegistry,
        variants: Optional[Iterable[ChartVariant]] = None,
        descriptors: Optional[Dict[ChartVariant, Optional[ChartDescriptor]]] = None,
    ) -> Dict[str, Any]:
        """Describe the gallery: categories with their charts, and each chart's metadata."""
        selected = list(variants) if variants is not None else registry.variants()
        groups = registry.grouped_by_category()

        categories = [{
            'id': ChartCategory.ALL.value,
            'icon_name': ChartCategory.ALL.icon_name,
            'variants': [v.value for v in selected],
        }]
        for category, members in groups.items():
            categories.append({
                'id': category.value,
                'icon_name': category.icon_name,
                'variants': [v.value for v in members if v in selected],
            })

        charts = []
        for variant in selected:
            entry = {
                'id': variant.value,
                'title': registry.title_of(variant),
                'category': registry.category_of(variant).value,
            }
            if descriptors is not None:
                descriptor = descriptors.get(variant)
                entry['accessibility_summary'] = descriptor.summary if descriptor else None
            charts.append(entry)

        return {
            'gallery_name': self.get_gallery_name(),
            'generated_at': datetime.now().isoformat(),
            'categories': categories,
            'charts': charts,
        }

    def save_gallery_index(self, index: Dict[str, Any]) -> Optional[Path]:
        """Save the gallery index to JSON."""
        index_file = self.output_dir / GALLERY_INDEX_FILE
        try:
            with open(index_file, 'w', encoding='utf-8') as f:
                json.dump(index, f, indent=2)
            self.logger.info(f"Gallery index saved to: {index_file}")
            return index_file
        except OSError as e:
            self.logger.error(f"Failed to save gallery index: {e}")
            return None

    def generate_accessibility_report(
        self,
        registry: ChartRegistry,
        variants: Optional[Iterable[ChartVariant]] = None,
        descriptors: Optional[Dict[ChartVariant, Optional[ChartDescriptor]]] = None,
    ) -> Optional[Path]:
        """Generate a text report of every chart's accessibility descriptor using the template system."""
        selected = list(variants) if variants is not None else registry.variants()
        if descriptors is None:
            descriptors, _ = self.collect_descriptors(registry, selected)

        report_context = self._prepare_report_context(registry, selected, descriptors)

        report_lines = []

        # Add header
        header_template = self.report_template.get('header', {}).get('template', [])
        for line in header_template:
            report_lines.append(self._format_line(line, report_context))

        # Process sections
        sections = self.report_template.get('sections', {})
        for section_name, section_config in sections.items():
            section_lines = self._generate_report_section(section_name, section_config, report_context)
            if section_lines:
                report_lines.extend(section_lines)

        report_content = "\n".join(report_lines) + "\n"
        report_file = self.output_dir / ACCESSIBILITY_REPORT_FILE

        try:
            with open(report_file, 'w', encoding='utf-8') as f:
                f.write(report_content)
            self.logger.info(f"Accessibility report saved to: {report_file}")
        except OSError as e:
            self.logger.error(f"Failed to save accessibility report: {e}")
            return None

        return report_file

    def _prepare_report_context(
        self,
        registry: ChartRegistry,
        variants: List[ChartVariant],
        descriptors: Dict[ChartVariant, Optional[ChartDescriptor]],
    ) -> Dict[str, Any]:
        """Prepare the data context for report template rendering."""
        groups = registry.grouped_by_category()
        categories = [
            {
                'category': category.value,
                'icon_name': category.icon_name,
                'variant_count': sum(1 for v in members if v in variants),
            }
            for category, members in groups.items()
        ]
        charts = [
            {
                'variant': variant.value,
                'title': registry.title_of(variant),
                'category': registry.category_of(variant).value,
                'descriptor': descriptors.get(variant),
            }
            for variant in variants
        ]
        missing = [chart['variant'] for chart in charts if chart['descriptor'] is None]

        return {
            'gallery_name': self.get_gallery_name(),
            'generated_at': datetime.now().strftime("%Y-%m-%d %H:%M:%S"),
            'variant_count': len(variants),
            'category_count': sum(1 for c in categories if c['variant_count']),
            'categories': categories,
            'charts': charts,
            'missing_descriptors': missing,
            'missing_count': len(missing),
        }

    def _format_line(self, line: str, context: Dict[str, Any]) -> str:
        try:
            return line.format(**context)
        except (KeyError, ValueError, IndexError):
            return line  # Use line as-is if formatting fails

    def _generate_report_section(self, section_name: str, section_config: Dict[str, Any], context: Dict[str, Any]) -> List[str]:
        """Generate a single report section based on template configuration."""
        section_lines = []

        # Check if section should be included
        if not self._should_include_section(section_config, context):
            return []

        # Add section title
        title = section_config.get('title', '')
        if title:
            section_lines.append("")
            section_lines.append(self._format_line(title, context))

        # Add separator if specified
        separator = section_config.get('separator')
        if separator:
            section_lines.append(separator)

        # Handle different section types
        if section_name == 'category_overview':
            section_lines.extend(self._generate_category_section(section_config, context))
        elif section_name == 'chart_descriptors':
            section_lines.extend(self._generate_descriptor_section(section_config, context))
        elif section_name == 'missing_descriptors':
            section_lines.extend(self._generate_missing_section(section_config, context))
        else:
            for line_template in section_config.get('template', []):
                section_lines.append(self._format_line(line_template, context))

        return section_lines

    def _should_include_section(self, section_config: Dict[str, Any], context: Dict[str, Any]) -> bool:
        """Check if a section should be included based on conditions."""
        # Always include required sections
        if section_config.get('required', False):
            return True

        # Check condition if specified
        condition = section_config.get('condition')
        if condition:
            return self._evaluate_condition(condition, context)

        return True

    def _evaluate_condition(self, condition: str, context: Dict[str, Any]) -> bool:
        """Evaluate a condition string against the context."""
        try:
            # Simple condition evaluation for common cases
            if condition in context:
                value = context[condition]
                return bool(value) and (not isinstance(value, (dict, list)) or len(value) > 0)

            # Handle comparisons such as "missing_count > 0"
            if ' > ' in condition:
                key, threshold = condition.split(' > ')
                return context.get(key.strip(), 0) > int(threshold.strip())

            return False
        except (TypeError, ValueError):
            return False

    def _generate_category_section(self, section_config: Dict[str, Any], context: Dict[str, Any]) -> List[str]:
        """Generate one line group per category that has charts."""
        lines = []
        template = section_config.get('template', [])

        for category_context in context.get('categories', []):
            if not category_context['variant_count']:
                continue
            for line_template in template:
                lines.append(self._format_line(line_template, category_context))

        return lines

    def _generate_descriptor_section(self, section_config: Dict[str, Any], context: Dict[str, Any]) -> List[str]:
        """Generate the per-chart descriptor text."""
        lines = []
        template = section_config.get('template', [])
        max_points = section_config.get('max_points')
        missing_text = section_config.get('missing_template', "  Accessibility descriptor not implemented.")

        for chart in context.get('charts', []):
            descriptor = chart['descriptor']
            if descriptor is None:
                descriptor_text = missing_text
            else:
                descriptor_text = "\n".join(
                    f"  {line}" for line in descriptor.describe(max_points=max_points).splitlines()
                )
            chart_context = dict(chart, descriptor_text=descriptor_text)
            for line_template in template:
                lines.append(self._format_line(line_template, chart_context))

        return lines

    def _generate_missing_section(self, section_config: Dict[str, Any], context: Dict[str, Any]) -> List[str]:
        """List charts whose descriptor is not implemented."""
        lines = []
        template = section_config.get('template', [])

        for variant in context.get('missing_descriptors', []):
            for line_template in template:
                lines.append(self._format_line(line_template, {'variant': variant}))

        return lines
