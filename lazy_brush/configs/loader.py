"""Configuration loader for the lazy brush.

Loads ``brush.yaml``, validates it against the ``lazy_brush.v1`` schema
(see ``lazy_brush.utils.validators``) and returns typed, frozen
dataclasses.  The ``brush`` section maps directly onto
``LazyBrushOptions`` so a host can do::

    from lazy_brush import LazyBrush
    from lazy_brush.configs.loader import load_config

    cfg = load_config()                      # shipped defaults
    cfg = load_config("~/.sketchpad/brush.yaml")
    brush = LazyBrush.from_options(cfg.brush)

Validation is about types only.  Values the controller accepts (zero or
negative radius, friction outside ``(0, 1)``) are accepted here too;
suspicious ones are logged.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from lazy_brush.core.brush import LazyBrushOptions
from lazy_brush.core.point import Point
from lazy_brush.utils.fs import atomic_yaml_dump, load_yaml
from lazy_brush.utils.validators import SCHEMA_VERSION, validate_config

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path(__file__).parent / "brush.yaml"


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


class ConfigError(Exception):
    """Raised when configuration validation fails."""

    pass


# ---------------------------------------------------------------------------
# Dataclasses -- mirror the YAML structure
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class StrokeConfig:
    """Defaults for ``lazy_brush.utils.strokes.replay_stroke``."""

    friction: float | None = None
    sync_first: bool = True


@dataclass(frozen=True)
class LoggingConfig:
    """Logging section, consumed by ``logging_config.setup_from_config``."""

    level: str = "INFO"
    file: str | None = None
    format: str = "human"


@dataclass(frozen=True)
class BrushConfig:
    """Top-level configuration."""

    brush: LazyBrushOptions
    stroke: StrokeConfig = field(default_factory=StrokeConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


# ---------------------------------------------------------------------------
# Loading
# ---------------------------------------------------------------------------


def load_config(path: str | Path | None = None) -> BrushConfig:
    """Load and validate brush configuration from YAML.

    Parameters
    ----------
    path : str | Path | None
        Path to a config file.  ``None`` loads the default shipped
        alongside this module.  ``~`` is expanded.

    Returns
    -------
    BrushConfig
        Validated, frozen configuration.

    Raises
    ------
    ConfigError
        If the file is empty or fails schema validation.
    FileNotFoundError
        If *path* does not exist.
    yaml.YAMLError
        If the file is not valid YAML.
    """
    path = DEFAULT_CONFIG_PATH if path is None else Path(path).expanduser()

    if not path.exists():
        raise FileNotFoundError(f"Configuration file not found: {path}")

    logger.info("Loading brush configuration from %s", path)

    data: dict[str, Any] = load_yaml(path)
    if data is None:
        raise ConfigError(f"Empty configuration file: {path}")

    try:
        model = validate_config(data)
    except ValidationError as exc:
        raise ConfigError(f"Invalid configuration in {path}:\n{exc}") from exc

    bs = model.brush
    brush = LazyBrushOptions(
        radius=bs.radius,
        enabled=bs.enabled,
        initial_point=Point(bs.initial_point.x, bs.initial_point.y),
    )
    stroke = StrokeConfig(
        friction=model.stroke.friction,
        sync_first=model.stroke.sync_first,
    )
    log_cfg = LoggingConfig(
        level=model.logging.level,
        file=model.logging.file,
        format=model.logging.format,
    )

    _warn_suspicious(brush, stroke)

    logger.debug(
        "Brush config: radius=%s enabled=%s friction=%s",
        brush.radius, brush.enabled, stroke.friction,
    )
    return BrushConfig(brush=brush, stroke=stroke, logging=log_cfg)


def _warn_suspicious(brush: LazyBrushOptions, stroke: StrokeConfig) -> None:
    """Log values the controller accepts but that are probably mistakes."""
    if brush.radius is not None:
        if not math.isfinite(brush.radius):
            logger.warning("Non-finite radius %s; brush positions will not be finite", brush.radius)
        elif brush.radius == 0:
            logger.warning("Radius 0 falls back to the default radius")
        elif brush.radius < 0:
            logger.warning("Radius %s < 0 disables the lazy zone", brush.radius)

    if stroke.friction is not None and not 0 < stroke.friction < 1:
        logger.warning(
            "Friction %s outside (0, 1); values < 1 are clamped, >= 1 means no damping",
            stroke.friction,
        )


# ---------------------------------------------------------------------------
# Saving
# ---------------------------------------------------------------------------


def config_to_dict(cfg: BrushConfig) -> dict[str, Any]:
    """Convert a ``BrushConfig`` back into its YAML mapping."""
    return {
        "schema": SCHEMA_VERSION,
        "brush": {
            "radius": cfg.brush.radius,
            "enabled": cfg.brush.enabled,
            "initial_point": {
                "x": cfg.brush.initial_point.x,
                "y": cfg.brush.initial_point.y,
            },
        },
        "stroke": {
            "friction": cfg.stroke.friction,
            "sync_first": cfg.stroke.sync_first,
        },
        "logging": {
            "level": cfg.logging.level,
            "file": cfg.logging.file,
            "format": cfg.logging.format,
        },
    }


def save_config(cfg: BrushConfig, path: str | Path) -> Path:
    """Write ``cfg`` to *path* atomically, in the format ``load_config`` reads.

    Returns
    -------
    Path
        The written file.
    """
    path = Path(path).expanduser()
    atomic_yaml_dump(config_to_dict(cfg), path)
    logger.info("Saved brush configuration to %s", path)
    return path
