"""
Configuration Module
Loads converter settings from YAML, with environment variable overrides.
"""

import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from loguru import logger


DEFAULT_CONFIG_PATH = "config/config.yaml"

DEFAULT_SETTINGS = {
    'log_level': 'INFO',
    'log_file': None,
    'log_rotation': '10 MB',
    'encoding': None,
    'mapping_config': None,
    'output_suffix': '_shopify_import',
    'error_report': True,
    'validate': True,
    'progress': True,
}


def load_config(config_path: str = DEFAULT_CONFIG_PATH) -> dict:
    """Load configuration from YAML file."""
    try:
        with open(config_path, 'r') as f:
            return yaml.safe_load(f) or {}
    except FileNotFoundError:
        logger.warning(f"Config file not found: {config_path}")
        return {}


def resolve_settings(config: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """
    Flatten a loaded config into converter settings.

    Precedence: environment variables, then the YAML config, then defaults.
    """
    config = config or {}
    logging_cfg = config.get('logging', {}) or {}
    files_cfg = config.get('files', {}) or {}
    output_cfg = config.get('output', {}) or {}

    settings = dict(DEFAULT_SETTINGS)
    settings.update({
        'log_level': (
            os.getenv('WOO_SHOPIFY_LOG_LEVEL') or
            logging_cfg.get('level') or
            DEFAULT_SETTINGS['log_level']
        ),
        'log_file': logging_cfg.get('file') or None,
        'log_rotation': logging_cfg.get('rotation') or DEFAULT_SETTINGS['log_rotation'],
        'encoding': (
            os.getenv('WOO_SHOPIFY_ENCODING') or
            files_cfg.get('encoding') or
            None
        ),
        'mapping_config': (
            os.getenv('WOO_SHOPIFY_MAPPING_CONFIG') or
            files_cfg.get('mapping_config') or
            None
        ),
        'output_suffix': output_cfg.get('suffix') or DEFAULT_SETTINGS['output_suffix'],
        'error_report': bool(output_cfg.get('error_report', DEFAULT_SETTINGS['error_report'])),
        'validate': bool(output_cfg.get('validate', DEFAULT_SETTINGS['validate'])),
        'progress': bool(config.get('progress', DEFAULT_SETTINGS['progress'])),
    })

    if settings['mapping_config'] and not Path(settings['mapping_config']).exists():
        logger.warning(f"Mapping config not found: {settings['mapping_config']}")

    return settings
