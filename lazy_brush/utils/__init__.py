"""Cross-cutting utilities.

This package provides shared helpers for:
    - YAML I/O (fs)
    - Config schema validation (validators)
    - Unified logging (logging_config)
    - Stroke replay through a brush (strokes)

Only strokes depends on lazy_brush.core; the rest import nothing from
the package.

Convenience imports:
    from lazy_brush.utils import fs, validators
    from lazy_brush.utils.logging_config import setup_logging, get_logger
"""

from . import fs
from . import logging_config
from . import strokes
from . import validators

from .logging_config import get_logger, push_context, setup_logging

__all__ = [
    # Modules
    'fs',
    'logging_config',
    'strokes',
    'validators',
    # Direct exports
    'setup_logging',
    'get_logger',
    'push_context',
]
