"""YAML schema validation for brush configuration.

Centralizes the ``lazy_brush.v1`` config schema using pydantic so that bad
files fail fast with the offending key and reason, before any brush is
built.

Schema (lazy_brush.v1)::

    schema: lazy_brush.v1
    brush:
      radius: 30            # any float; null → default
      enabled: false
      initial_point: {x: 0.0, y: 0.0}
    stroke:
      friction: null        # default friction for stroke replay
      sync_first: true
    logging:
      level: INFO
      file: null
      format: human         # or json

Only types are checked for ``brush``: the controller itself accepts
zero, negative and non-finite radii, and the schema does not narrow that.

Usage:
    from lazy_brush.utils import validators
    cfg = validators.validate_config(yaml_dict)
"""

from typing import Any, Dict, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

SCHEMA_VERSION = "lazy_brush.v1"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class PointSchema(BaseModel):
    """2D coordinate in input units."""
    model_config = ConfigDict(extra="forbid")

    x: float = Field(0.0, description="X coordinate")
    y: float = Field(0.0, description="Y coordinate")


class BrushSection(BaseModel):
    """Lazy brush construction options."""
    model_config = ConfigDict(extra="forbid")

    radius: Optional[float] = Field(None, description="Lazy-zone radius; null uses the default")
    enabled: bool = Field(False, description="Start in lazy mode")
    initial_point: PointSchema = Field(default_factory=PointSchema)


class StrokeSection(BaseModel):
    """Defaults for replaying recorded strokes."""
    model_config = ConfigDict(extra="forbid")

    friction: Optional[float] = Field(None, description="Damping in (0, 1); null for none")
    sync_first: bool = Field(True, description="Snap brush to the first sample")


class LoggingSection(BaseModel):
    """Logging setup forwarded to logging_config.setup_logging."""
    model_config = ConfigDict(extra="forbid")

    level: str = Field("INFO", description="Root log level")
    file: Optional[str] = Field(None, description="Log file path; null for none")
    format: Literal["human", "json"] = Field("human", description="Line format")

    @field_validator('level')
    @classmethod
    def validate_level(cls, v: str) -> str:
        level = v.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Log level must be one of {LOG_LEVELS}, got: {v}")
        return level


class BrushConfigFileV1(BaseModel):
    """Complete configuration file (lazy_brush.v1)."""
    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    schema_version: str = Field(SCHEMA_VERSION, alias="schema", description="Schema version")
    brush: BrushSection
    stroke: StrokeSection = Field(default_factory=StrokeSection)
    logging: LoggingSection = Field(default_factory=LoggingSection)

    @field_validator('schema_version')
    @classmethod
    def validate_schema(cls, v: str) -> str:
        if v != SCHEMA_VERSION:
            raise ValueError(f"Expected schema '{SCHEMA_VERSION}', got '{v}'")
        return v


def validate_config(data: Dict[str, Any]) -> BrushConfigFileV1:
    """Validate a parsed YAML mapping against the lazy_brush.v1 schema.

    Parameters
    ----------
    data : Dict[str, Any]
        Parsed YAML content

    Returns
    -------
    BrushConfigFileV1
        Validated model

    Raises
    ------
    pydantic.ValidationError
        On wrong types, unknown keys, or schema mismatch
    """
    return BrushConfigFileV1.model_validate(data)
