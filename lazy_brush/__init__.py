"""Lazy Brush: pointer smoothing for freehand drawing surfaces.

A rendered *brush* trails the raw *pointer* inside a tolerance radius and
only moves once the pointer strays farther away, optionally damped by a
friction factor.  This removes jitter from strokes while keeping them
responsive.

Architecture layers (strict one-way dependency):
    configs/ → core/ → utils/{fs,validators,logging_config}
    utils/strokes → core/

Subpackages:
    core: Point primitive and the lazy-follow controller
    configs: YAML configuration loading
    utils: logging, YAML I/O, schema validation, stroke replay

Key invariants:
    - Disabled mode: brush == pointer after every update
    - Enabled mode: brush moves only when the pointer leaves the radius
    - Core never raises; validation happens at the config boundary only
"""

from lazy_brush.core.brush import LazyBrush, LazyBrushOptions
from lazy_brush.core.point import LazyPoint, Point, PointView

__version__ = "1.0.0"

__all__ = [
    "LazyBrush",
    "LazyBrushOptions",
    "LazyPoint",
    "Point",
    "PointView",
]
