"""Lazy-follow controller.

``LazyBrush`` keeps two points: the *pointer* (raw input) and the
*brush* (rendered position).  Each ``update()`` moves the pointer to the
new sample and then decides whether the brush follows:

- ``both=True``: brush snaps to the pointer, lazy logic bypassed.
- lazy mode enabled: brush is pulled toward the pointer only once the
  pointer is farther than ``radius``, ending exactly on the radius
  boundary (or part of the way there when ``friction`` is set).
- lazy mode disabled: brush tracks the pointer exactly.

Usage::

    from lazy_brush import LazyBrush, Point

    brush = LazyBrush(radius=30, enabled=True)
    for sample in samples:
        if brush.update(sample, friction=0.4):
            draw_to(brush.get_brush_coordinates())

The controller is synchronous and holds no locks; one owner calls
``update()`` serially, typically once per pointer event or frame.
Inputs are never validated: a negative radius simply makes every
non-zero distance "outside", and non-finite coordinates propagate.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field

from lazy_brush.core.point import LazyPoint, Point, PointLike, PointView

logger = logging.getLogger(__name__)

RADIUS_DEFAULT = 30.0
"""Lazy-zone radius used when none is configured."""

MIN_FRICTION = 0.01
"""Lower clamp applied to friction values below 1."""

BOUNDARY_PRECISION = 10
"""Scale of the rounding guard on the radius test (10 -> one decimal)."""


# ---------------------------------------------------------------------------
# Options
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class LazyBrushOptions:
    """Construction options for ``LazyBrush``.

    Parameters
    ----------
    radius : float | None
        Lazy-zone radius.  ``None`` or 0 uses ``RADIUS_DEFAULT``.
    enabled : bool
        Start in lazy mode.
    initial_point : Point
        Where pointer and brush start.
    """

    radius: float | None = None
    enabled: bool = False
    initial_point: Point = field(default_factory=lambda: Point(0.0, 0.0))


# ---------------------------------------------------------------------------
# Controller
# ---------------------------------------------------------------------------


class LazyBrush:
    """Brush position that lazily follows a pointer.

    Parameters
    ----------
    radius : float | None
        Lazy-zone radius; ``None`` or 0 uses ``RADIUS_DEFAULT``.  Not
        validated otherwise (``set_radius(0)`` keeps 0).
    enabled : bool
        Whether lazy mode is active from the start.
    initial_point : PointLike | None
        Starting position of both pointer and brush; origin if ``None``.
        Must expose ``.x``/``.y`` (``Point``, ``LazyPoint``, ``PointView``);
        plain ``(x, y)`` pairs are not accepted.
    """

    def __init__(
        self,
        radius: float | None = None,
        enabled: bool = False,
        initial_point: PointLike | None = None,
    ) -> None:
        if initial_point is None:
            initial_point = Point(0.0, 0.0)
        self.radius = radius or RADIUS_DEFAULT
        self._is_enabled = bool(enabled)

        self._pointer = LazyPoint(initial_point.x, initial_point.y)
        self._brush = LazyPoint(initial_point.x, initial_point.y)

        self.angle = 0.0
        self.distance = 0.0
        self._has_moved = False

        logger.debug(
            "LazyBrush created: radius=%s enabled=%s at (%s, %s)",
            self.radius, self._is_enabled, initial_point.x, initial_point.y,
        )

    @classmethod
    def from_options(cls, options: LazyBrushOptions) -> LazyBrush:
        """Build a brush from a ``LazyBrushOptions`` (e.g. loaded config)."""
        return cls(
            radius=options.radius,
            enabled=options.enabled,
            initial_point=options.initial_point,
        )

    def __repr__(self) -> str:
        return (
            f"LazyBrush(radius={self.radius!r}, enabled={self._is_enabled!r}, "
            f"pointer={self._pointer!r}, brush={self._brush!r})"
        )

    # -- lazy mode ----------------------------------------------------------

    def enable(self) -> None:
        """Turn lazy mode on."""
        self._is_enabled = True
        logger.debug("Lazy mode enabled")

    def disable(self) -> None:
        """Turn lazy mode off; the brush tracks the pointer exactly."""
        self._is_enabled = False
        logger.debug("Lazy mode disabled")

    def is_enabled(self) -> bool:
        return self._is_enabled

    # -- radius -------------------------------------------------------------

    def set_radius(self, radius: float) -> None:
        """Replace the lazy-zone radius.  Any value is accepted."""
        logger.debug("Radius changed: %s -> %s", self.radius, radius)
        self.radius = radius

    def get_radius(self) -> float:
        return self.radius

    # -- accessors ----------------------------------------------------------

    def get_brush_coordinates(self) -> Point:
        """Snapshot of the brush position."""
        return self._brush.to_object()

    def get_pointer_coordinates(self) -> Point:
        """Snapshot of the pointer position."""
        return self._pointer.to_object()

    def get_brush(self) -> PointView:
        """Live read-only view of the brush.

        The view follows later updates but cannot move the brush, so
        callers cannot bypass the radius logic.
        """
        return PointView(self._brush)

    def get_pointer(self) -> PointView:
        """Live read-only view of the pointer."""
        return PointView(self._pointer)

    def get_angle(self) -> float:
        """Direction from brush toward pointer at the last lazy update (rad)."""
        return self.angle

    def get_distance(self) -> float:
        """Pointer-brush distance at the last lazy update."""
        return self.distance

    def brush_has_moved(self) -> bool:
        """Whether the previous ``update()`` moved the brush."""
        return self._has_moved

    # -- state transition ---------------------------------------------------

    def update(
        self,
        new_pointer_point: PointLike,
        *,
        both: bool = False,
        friction: float | None = None,
    ) -> bool:
        """Move the pointer to a new sample and let the brush follow.

        Parameters
        ----------
        new_pointer_point : PointLike
            Latest pointer sample.
        both : bool
            Snap the brush onto the pointer, ignoring radius and friction.
        friction : float | None
            Damping in ``(0, 1)``.  Values below ``MIN_FRICTION`` are
            raised to it; values ``>= 1``, 0, NaN or ``None`` apply the full
            catch-up.

        Returns
        -------
        bool
            ``False`` only when the call was a no-op (same pointer, no
            ``both`` and no ``friction``); ``True`` otherwise.

        Notes
        -----
        ``angle`` and ``distance`` are recomputed only in lazy mode and
        reset to 0 in disabled mode; a forced sync leaves them untouched.
        """
        self._has_moved = False
        if (
            self._pointer.equals_to(new_pointer_point)
            and not both
            and not _friction_set(friction)
        ):
            return False

        self._pointer.update(new_pointer_point)

        if both:
            self._has_moved = True
            self._brush.update(new_pointer_point)
            return True

        if self._is_enabled:
            self.distance = self._pointer.distance_to(self._brush)
            self.angle = self._pointer.angle_to(self._brush)

            is_outside = _round_to_precision(self.distance - self.radius) > 0
            friction = _clamp_friction(friction)

            if is_outside:
                self._brush.move_by_angle(
                    self.angle,
                    self.distance - self.radius,
                    friction,
                )
                self._has_moved = True
        else:
            self.distance = 0.0
            self.angle = 0.0
            self._brush.update(new_pointer_point)
            self._has_moved = True

        return True


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _round_to_precision(value: float) -> float:
    """Round half-up to ``1 / BOUNDARY_PRECISION``.

    Non-finite values pass through unchanged: NaN never counts as
    outside the radius, +inf always does.
    """
    if not math.isfinite(value):
        return value
    return math.floor(value * BOUNDARY_PRECISION + 0.5) / BOUNDARY_PRECISION


def _friction_set(friction: float | None) -> bool:
    """Whether ``friction`` was given: None, 0 and NaN count as unset."""
    return bool(friction) and not math.isnan(friction)


def _clamp_friction(friction: float | None) -> float | None:
    """Normalize ``friction``; ``None`` means undamped."""
    if _friction_set(friction) and friction < 1:
        return min(max(friction, MIN_FRICTION), 1.0)
    return None
