"""
Configuration loader for the window alignment pipeline.
Author: Rowel Facunla
"""

import copy
import logging
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path(__file__).parent / "default_config.yaml"


def load_config(config_path: Optional[str] = None) -> Dict[str, Any]:
    """Load configuration from YAML file. Fails if file does not exist."""
    if config_path is None:
        config_path = DEFAULT_CONFIG_PATH
    else:
        config_path = Path(config_path)

    with open(config_path, 'r') as f:
        config = yaml.safe_load(f)

    if not isinstance(config, dict):
        raise ValueError(f"Invalid YAML format in {config_path}")

    config['_source'] = str(Path(config_path).resolve())
    return config


def apply_overrides(config: Dict[str, Any], overrides: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    """Merge overrides section by section; None values are ignored."""
    if not overrides:
        return config
    for key, value in overrides.items():
        if isinstance(value, dict) and isinstance(config.get(key), dict):
            config[key].update({k: v for k, v in value.items() if v is not None})
        elif value is not None:
            config[key] = value
    return config


class ConfigLoader:
    """Loads and manages configuration from YAML files."""

    def __init__(self, config_path: Optional[str] = None):
        self.config_path = config_path
        self.config = {}
        self.load_config()

    def load_config(self):
        """Load configuration from YAML file, falling back to defaults."""
        try:
            self.config = load_config(self.config_path)
        except FileNotFoundError:
            logger.warning(f"Config file {self.config_path} not found. Using defaults.")
            self.config = self._get_default_config()
        except (yaml.YAMLError, ValueError) as e:
            logger.error(f"Error loading config file: {e}")
            self.config = self._get_default_config()

    def _get_default_config(self) -> Dict[str, Any]:
        """Return default configuration if YAML file is not found."""
        return copy.deepcopy({
            'batch': {
                'num_workers': 8,
                'drain_every': 'auto',
                'queue_size': None,
                'sort_rows': False,
                'use_multiprocessing': True,
            },
            'io': {
                'source_file': 'a_sequence.csv',
                'query_file': 'b_sequence.csv',
                'output_file': 'result.csv',
                'source_column': 'a_sequence',
                'query_column': 'b_sequence',
                'logs_dir': None,
            },
            'debug': {
                'log_level': 'INFO',
                'verbose': False,
                'progress': True,
            },
        })

    def get_batch_params(self) -> Dict[str, Any]:
        """Get batch evaluation parameters."""
        return self.config.get('batch', {})

    def get_io_params(self) -> Dict[str, Any]:
        """Get input/output parameters."""
        return self.config.get('io', {})

    def get_debug_params(self) -> Dict[str, Any]:
        return self.config.get('debug', {})
