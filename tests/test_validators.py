"""Test the lazy_brush.v1 config schema.

Tests for lazy_brush.utils.validators:
    - Defaults for optional sections
    - "schema" alias and field-name population
    - Permissive brush values (negative / non-finite radius)
    - Rejections: unknown keys, bad log level, bad format

Run:
    pytest tests/test_validators.py -v
"""

import math

import pytest
from pydantic import ValidationError

from lazy_brush.utils import validators


def test_defaults():
    cfg = validators.validate_config({"brush": {}})
    assert cfg.schema_version == validators.SCHEMA_VERSION
    assert cfg.brush.radius is None
    assert cfg.brush.enabled is False
    assert (cfg.brush.initial_point.x, cfg.brush.initial_point.y) == (0.0, 0.0)
    assert cfg.stroke.friction is None
    assert cfg.logging.level == "INFO"
    assert cfg.logging.format == "human"


def test_schema_alias_and_field_name():
    by_alias = validators.validate_config({"schema": "lazy_brush.v1", "brush": {}})
    by_name = validators.validate_config({"schema_version": "lazy_brush.v1", "brush": {}})
    assert by_alias.schema_version == by_name.schema_version == "lazy_brush.v1"


def test_brush_values_not_range_checked():
    cfg = validators.validate_config({"brush": {"radius": -30}})
    assert cfg.brush.radius == -30.0
    cfg = validators.validate_config({"brush": {"radius": float("inf")}})
    assert math.isinf(cfg.brush.radius)


def test_log_level_normalized():
    cfg = validators.validate_config({"brush": {}, "logging": {"level": "warning"}})
    assert cfg.logging.level == "WARNING"


@pytest.mark.parametrize(
    "data",
    [
        {"brush": {"radius": 10, "speed": 2}},
        {"brush": {}, "logging": {"format": "xml"}},
        {"brush": {"initial_point": {"x": 1, "y": 2, "z": 3}}},
        {"brush": {"enabled": "sometimes"}},
        {"schema": "lazy_brush.v2", "brush": {}},
        {},
    ],
)
def test_rejects_invalid(data):
    with pytest.raises(ValidationError):
        validators.validate_config(data)
