#!/usr/bin/env python3
"""
Base Gallery Component - Core functionality and configuration management
"""

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from datetime import datetime
from typing import Dict, Any, Optional

import yaml

from .constants import (
    CONFIG_KEY_VISUALIZATION,
    DEFAULT_GALLERY_NAME,
    REPORT_TEMPLATE_STEM,
)


@dataclass
class GalleryContext:
    """Shared context for gallery components to avoid repeated config/loading work."""
    config_file: Optional[Path]
    data_dir: Path
    output_dir: Path
    gallery_name: str
    config: Dict[str, Any]
    visualization_defaults: Dict[str, Any]
    report_template: Dict[str, Any]
    logger: logging.Logger


class BaseGalleryComponent:
    """Base class for gallery components with configuration management."""

    def __init__(
        self,
        config_file: Optional[str] = None,
        data_directory: Optional[str] = None,
        output_directory: Optional[str] = None,
        context: Optional[GalleryContext] = None,
        config_override: Optional[Dict[str, Any]] = None,
    ):
        """Initialize the component with configuration and directories."""
        # Minimal logger for early setup; replaced once context is ready
        self.logger = logging.getLogger(self.__class__.__name__)

        # Reuse existing context when orchestrating multiple components
        if context:
            self._apply_context(context)
            return

        self.config_file = Path(config_file) if config_file else None

        # Load configuration (supports YAML/JSON); no file means built-in defaults
        self.config = self._load_configuration()
        if config_override:
            self._merge_config(self.config, config_override)

        self.gallery_name = self.config.get('gallery_name', DEFAULT_GALLERY_NAME)

        # Resolve data/output directories with sensible defaults
        self.data_dir, self.output_dir = self._resolve_directories(data_directory, output_directory)
        self.output_dir.mkdir(parents=True, exist_ok=True)

        # Initialize logging once directories are available
        self.logger = self._setup_logging()

        self.visualization_defaults = self.config.get(CONFIG_KEY_VISUALIZATION, {})
        self.report_template = self._load_report_template()

        # Persist context for reuse by other components
        self.context = GalleryContext(
            config_file=self.config_file,
            data_dir=self.data_dir,
            output_dir=self.output_dir,
            gallery_name=self.gallery_name,
            config=self.config,
            visualization_defaults=self.visualization_defaults,
            report_template=self.report_template,
            logger=self.logger,
        )

        self.logger.info(f"Initialized {self.gallery_name} (output: {self.output_dir})")

    def _apply_context(self, context: GalleryContext):
        """Attach an existing gallery context (used by the orchestrator to share state)."""
        self.context = context
        self.config_file = context.config_file
        self.data_dir = context.data_dir
        self.output_dir = context.output_dir
        self.gallery_name = context.gallery_name
        self.config = context.config
        self.visualization_defaults = context.visualization_defaults
        self.report_template = context.report_template
        self.logger = context.logger

    def _setup_logging(self) -> logging.Logger:
        """Setup logging configuration."""
        log_dir = self.output_dir / "logs"
        log_dir.mkdir(exist_ok=True)

        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        log_file = log_dir / f"gallery_{timestamp}.log"

        logging.basicConfig(
            level=logging.INFO,
            format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            handlers=[
                logging.FileHandler(log_file),
                logging.StreamHandler()
            ]
        )

        return logging.getLogger(self.__class__.__name__)

    def _load_any_config(self, path: Path) -> Dict[str, Any]:
        """Load a YAML or JSON config file."""
        if not path.exists():
            raise FileNotFoundError(f"Configuration file not found: {path}")

        suffix = path.suffix.lower()
        try:
            if suffix in ['.yaml', '.yml']:
                with open(path, 'r', encoding='utf-8') as f:
                    return yaml.safe_load(f) or {}
            # Default to JSON
            with open(path, 'r', encoding='utf-8') as f:
                return json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in configuration file {path}: {e}")
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in configuration file {path}: {e}")

    def _load_configuration(self) -> Dict[str, Any]:
        """Load gallery configuration from YAML or JSON file."""
        if self.config_file is None:
            return {}
        config = self._load_any_config(self.config_file)
        if not isinstance(config, dict):
            raise ValueError(f"Configuration file {self.config_file} must contain a mapping")
        self.logger.info(f"Loaded configuration from {self.config_file}")
        return config

    def _merge_config(self, base: Dict[str, Any], override: Dict[str, Any]):
        """Deep-merge override dict into base config."""
        for key, value in (override or {}).items():
            if isinstance(value, dict) and isinstance(base.get(key), dict):
                self._merge_config(base[key], value)
            else:
                base[key] = value

    def _resolve_directories(self, data_directory: Optional[str], output_directory: Optional[str]):
        """Determine data/output directories; explicit arguments win over config."""
        config_data_dir = self.config.get('data_directory') or self.config.get('data_dir')
        data_dir = Path(data_directory or config_data_dir or ".").expanduser().resolve()

        config_output_dir = self.config.get('output_directory')
        if output_directory:
            output_dir = Path(output_directory).expanduser()
        elif config_output_dir:
            output_dir = Path(config_output_dir).expanduser()
        else:
            output_dir = Path.cwd() / "gallery_output"
        return data_dir, output_dir

    def _load_auxiliary_config(self, stem: str) -> Optional[Dict[str, Any]]:
        """Load auxiliary config (report template) from YAML or JSON beside the main config."""
        if self.config_file is None:
            return None
        for ext in ['.yaml', '.yml', '.json']:
            candidate = self.config_file.parent / f"{stem}{ext}"
            if candidate.exists():
                return self._load_any_config(candidate)
        return None

    def _load_report_template(self) -> Dict[str, Any]:
        """Load report template configuration."""
        try:
            template = self._load_auxiliary_config(REPORT_TEMPLATE_STEM)
            if template is None:
                return self._get_default_report_template()
            return template.get(REPORT_TEMPLATE_STEM, template)
        except Exception as e:
            self.logger.warning(f"Could not load report template: {e}")
            return self._get_default_report_template()

    def _get_default_report_template(self) -> Dict[str, Any]:
        """Provide a minimal default report template as fallback."""
        return {
            "header": {
                "template": [
                    "{gallery_name} - Accessibility Report",
                    "=============================================================",
                    "Generated: {generated_at}",
                    "Charts: {variant_count}",
                    ""
                ]
            },
            "sections": {
                "category_overview": {
                    "title": "CATEGORIES:",
                    "required": True,
                    "template": [
                        "  {category} ({icon_name}): {variant_count} charts"
                    ]
                },
                "chart_descriptors": {
                    "title": "CHART DESCRIPTORS:",
                    "required": True,
                    "template": [
                        "",
                        "[{category}] {title} ({variant})",
                        "{descriptor_text}"
                    ],
                    "max_points": 12,
                    "missing_template": "  Accessibility descriptor not implemented for this chart."
                },
                "missing_descriptors": {
                    "title": "CHARTS WITHOUT DESCRIPTORS:",
                    "condition": "missing_descriptors",
                    "template": [
                        "  {variant}"
                    ]
                }
            }
        }

    def get_gallery_name(self) -> str:
        """Get the gallery name from config."""
        return self.gallery_name
