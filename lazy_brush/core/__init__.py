"""Point primitive and lazy-follow controller."""

from lazy_brush.core.brush import (
    BOUNDARY_PRECISION,
    MIN_FRICTION,
    RADIUS_DEFAULT,
    LazyBrush,
    LazyBrushOptions,
)
from lazy_brush.core.point import LazyPoint, Point, PointLike, PointView

__all__ = [
    "BOUNDARY_PRECISION",
    "MIN_FRICTION",
    "RADIUS_DEFAULT",
    "LazyBrush",
    "LazyBrushOptions",
    "LazyPoint",
    "Point",
    "PointLike",
    "PointView",
]
