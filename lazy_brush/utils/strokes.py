"""Replay recorded pointer strokes through a lazy brush.

Provides:
    - replay_stroke(): feed pointer samples to a ``LazyBrush`` and collect
      the smoothed brush path as an (N, 2) array
    - polyline_length(): total arc length, handy for comparing raw and
      smoothed paths
    - as_points(): normalize samples given as points or (x, y) pairs

Used by:
    - Hosts that smooth a finished stroke offline (import, export)
    - Tests: checking the controller over whole strokes

The brush passed in is updated in place; each call continues from the
brush's current state.
"""

from typing import Iterable, List, Optional, Sequence, Union

import numpy as np

from lazy_brush.core.brush import LazyBrush
from lazy_brush.core.point import Point, PointLike

Sample = Union[PointLike, Sequence[float]]


def as_points(samples: Iterable[Sample]) -> List[Point]:
    """Convert samples to ``Point`` objects.

    Parameters
    ----------
    samples : Iterable[Sample]
        Objects with ``x``/``y`` attributes or ``(x, y)`` pairs (tuples,
        lists, numpy rows)

    Returns
    -------
    List[Point]
        One point per sample, in order
    """
    points = []
    for s in samples:
        if hasattr(s, "x") and hasattr(s, "y"):
            points.append(Point(s.x, s.y))
        else:
            x, y = s
            points.append(Point(float(x), float(y)))
    return points


def replay_stroke(
    samples: Iterable[Sample],
    brush: LazyBrush,
    *,
    friction: Optional[float] = None,
    sync_first: bool = True
) -> np.ndarray:
    """Run a stroke through ``brush`` and record the brush path.

    Parameters
    ----------
    samples : Iterable[Sample]
        Pointer samples in input order
    brush : LazyBrush
        Controller to drive (mutated)
    friction : float, optional
        Damping passed to every ``update()`` call
    sync_first : bool
        Apply the first sample with ``both=True`` so the brush starts
        where the pointer landed instead of trailing from its old position

    Returns
    -------
    np.ndarray
        Brush positions after each sample, shape (N, 2), float64.
        Shape (0, 2) for an empty stroke.

    Examples
    --------
    >>> brush = LazyBrush(radius=10, enabled=True)
    >>> path = replay_stroke([(0, 0), (25, 0)], brush)
    >>> path.tolist()
    [[0.0, 0.0], [15.0, 0.0]]
    """
    points = as_points(samples)
    path = np.empty((len(points), 2), dtype=np.float64)

    for i, p in enumerate(points):
        brush.update(p, both=(sync_first and i == 0), friction=friction)
        b = brush.get_brush_coordinates()
        path[i] = (b.x, b.y)

    return path


def polyline_length(points: np.ndarray) -> float:
    """Total arc length of a polyline.

    Parameters
    ----------
    points : np.ndarray
        Vertices, shape (N, 2)

    Returns
    -------
    float
        Sum of segment lengths; 0.0 for fewer than 2 vertices
    """
    points = np.asarray(points, dtype=np.float64)
    if len(points) < 2:
        return 0.0
    segments = np.diff(points, axis=0)
    return float(np.sum(np.linalg.norm(segments, axis=1)))
