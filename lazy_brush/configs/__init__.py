"""Brush configuration loading, validation and saving."""

from lazy_brush.configs.loader import (
    DEFAULT_CONFIG_PATH,
    BrushConfig,
    ConfigError,
    LoggingConfig,
    StrokeConfig,
    config_to_dict,
    load_config,
    save_config,
)

__all__ = [
    "DEFAULT_CONFIG_PATH",
    "BrushConfig",
    "ConfigError",
    "LoggingConfig",
    "StrokeConfig",
    "config_to_dict",
    "load_config",
    "save_config",
]
