from .config_loader import (
    DEFAULT_CONFIG_PATH,
    ConfigLoader,
    load_config,
    apply_overrides
)

__all__ = [
    'DEFAULT_CONFIG_PATH',
    'ConfigLoader',
    'load_config',
    'apply_overrides',
]
