"""2D point primitive for the lazy-follow controller.

Three flavours share the same ``x``/``y`` shape:

``Point``
    Immutable, slotted snapshot.  What callers get back when they ask
    for coordinates.
``LazyPoint``
    Mutable coordinate pair owned by a ``LazyBrush``.  Updated in place
    on every pointer sample.
``PointView``
    Read-only window onto a live ``LazyPoint``.  Tracks the owner's
    current values but exposes no mutators.

Any object with numeric ``x`` and ``y`` attributes is accepted wherever a
point is expected, so the three types mix freely.

Angles are radians in the usual ``atan2`` convention (+x axis is 0,
counter-clockwise positive in a +Y-up frame; clockwise on screens where
+Y points down).
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Protocol


class PointLike(Protocol):
    """Anything exposing ``x`` and ``y`` coordinates."""

    @property
    def x(self) -> float: ...

    @property
    def y(self) -> float: ...


# ---------------------------------------------------------------------------
# Snapshot
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class Point:
    """Immutable 2D coordinate.

    Parameters
    ----------
    x, y : float
        Coordinates in the caller's units (usually pixels).
    """

    x: float
    y: float


# ---------------------------------------------------------------------------
# Mutable point
# ---------------------------------------------------------------------------


class LazyPoint:
    """Mutable 2D point with the vector operations the brush needs."""

    __slots__ = ("x", "y")

    def __init__(self, x: float, y: float) -> None:
        self.x = x
        self.y = y

    def __repr__(self) -> str:
        return f"LazyPoint(x={self.x!r}, y={self.y!r})"

    def update(self, point: PointLike) -> None:
        """Overwrite this point's coordinates with ``point``'s."""
        self.x = point.x
        self.y = point.y

    def add(self, point: PointLike) -> None:
        """Translate in place by ``point`` treated as a vector."""
        self.x += point.x
        self.y += point.y

    def subtract(self, point: PointLike) -> None:
        """Translate in place by the negation of ``point``."""
        self.x -= point.x
        self.y -= point.y

    def move_by_angle(
        self,
        angle: float,
        distance: float,
        friction: float | None = None,
    ) -> None:
        """Displace this point along ``angle``.

        Parameters
        ----------
        angle : float
            Direction of travel in radians.
        distance : float
            Length of the full displacement.
        friction : float | None
            Fraction of ``distance`` actually applied, expected in
            ``(0, 1]``.  ``None`` (or 0) applies the full distance.

        Notes
        -----
        Repeated calls with the same target and a friction below 1 ease
        the point toward the target instead of snapping to it.
        """
        if friction:
            distance = distance * friction
        self.x = self.x + math.cos(angle) * distance
        self.y = self.y + math.sin(angle) * distance

    def equals_to(self, point: PointLike) -> bool:
        return _equals(self, point)

    def difference_to(self, point: PointLike) -> Point:
        return _difference(self, point)

    def distance_to(self, point: PointLike) -> float:
        return _distance(self, point)

    def angle_to(self, point: PointLike) -> float:
        return _angle(self, point)

    def to_object(self) -> Point:
        """Return an independent snapshot of the current coordinates."""
        return Point(self.x, self.y)


# ---------------------------------------------------------------------------
# Read-only view
# ---------------------------------------------------------------------------


class PointView:
    """Read-only view of a ``LazyPoint`` owned by someone else.

    Values are read through to the underlying point on every access, so
    a view obtained once keeps reflecting later updates.
    """

    __slots__ = ("_point",)

    def __init__(self, point: LazyPoint) -> None:
        self._point = point

    def __repr__(self) -> str:
        return f"PointView(x={self.x!r}, y={self.y!r})"

    @property
    def x(self) -> float:
        return self._point.x

    @property
    def y(self) -> float:
        return self._point.y

    def equals_to(self, point: PointLike) -> bool:
        return _equals(self._point, point)

    def difference_to(self, point: PointLike) -> Point:
        return _difference(self._point, point)

    def distance_to(self, point: PointLike) -> float:
        return _distance(self._point, point)

    def angle_to(self, point: PointLike) -> float:
        return _angle(self._point, point)

    def to_object(self) -> Point:
        return self._point.to_object()


# ---------------------------------------------------------------------------
# Shared vector math
# ---------------------------------------------------------------------------


def _equals(a: PointLike, b: PointLike) -> bool:
    # Exact, no tolerance.
    return a.x == b.x and a.y == b.y


def _difference(a: PointLike, b: PointLike) -> Point:
    return Point(a.x - b.x, a.y - b.y)


def _distance(a: PointLike, b: PointLike) -> float:
    diff = _difference(a, b)
    return math.sqrt(diff.x * diff.x + diff.y * diff.y)


def _angle(a: PointLike, b: PointLike) -> float:
    """Direction of the vector pointing from ``b`` toward ``a``."""
    diff = _difference(a, b)
    return math.atan2(diff.y, diff.x)
