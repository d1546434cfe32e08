"""
Pixel → gradient parameter.

Each gradient type maps a pixel position to a scalar ``t``:

- linear types: scalar projection onto the start→end axis, 0 at ``start``
  and 1 at ``end``, extrapolating past either end
- radial: distance to the center over the distance from the center to the
  edge reference point
- conic: ``atan2`` angle around the center as a fraction of a full turn

A zero-length axis has no defined ``t``; scalar functions return ``None``
and the array functions report it through a ``degenerate`` flag. Bounding
(clamp or wrap) is applied afterwards by :func:`bound_parameter`.
"""

from __future__ import annotations
import math
from typing import Optional, Tuple

import numpy as np
from numpy import ndarray as NDArray
from boundednumbers import BoundType, bound_type_to_np_function

from ..types.gradient_types import GradientType, Point

TWO_PI = 2.0 * math.pi


def axis_length(start: Point, end: Point) -> float:
    dx = end.x - start.x
    dy = end.y - start.y
    return math.sqrt(dx * dx + dy * dy)


def is_degenerate(gradient_type: GradientType, start: Point, end: Point) -> bool:
    """True when the axis (or radius) collapses to a point. Conic gradients never do."""
    if gradient_type is GradientType.CONIC:
        return False
    return axis_length(start, end) == 0.0


def project(x: float, y: float, start: Point, end: Point, gradient_type: GradientType) -> Optional[float]:
    """Unbounded ``t`` for one pixel, ``None`` on a degenerate axis."""
    if gradient_type is GradientType.CONIC:
        return (math.atan2(y - start.y, x - start.x) + math.pi) / TWO_PI

    dist = axis_length(start, end)
    if dist == 0.0:
        return None

    if not gradient_type.is_linear:
        px = x - start.x
        py = y - start.y
        return math.sqrt(px * px + py * py) / dist

    dx = end.x - start.x
    dy = end.y - start.y
    dot = (x - start.x) * dx + (y - start.y) * dy
    return dot / dist / dist


def np_project(
    xs: NDArray,
    ys: NDArray,
    start: Point,
    end: Point,
    gradient_type: GradientType,
) -> Tuple[NDArray, bool]:
    """
    Vectorized :func:`project`.

    Returns:
        ``(t, degenerate)``; when ``degenerate`` is True ``t`` is all zeros
    """
    xs = np.asarray(xs, dtype=np.float64)
    ys = np.asarray(ys, dtype=np.float64)

    if gradient_type is GradientType.CONIC:
        return (np.arctan2(ys - start.y, xs - start.x) + math.pi) / TWO_PI, False

    dist = axis_length(start, end)
    if dist == 0.0:
        return np.zeros(np.broadcast(xs, ys).shape), True

    if not gradient_type.is_linear:
        px = xs - start.x
        py = ys - start.y
        return np.sqrt(px * px + py * py) / dist, False

    dx = end.x - start.x
    dy = end.y - start.y
    dot = (xs - start.x) * dx + (ys - start.y) * dy
    return dot / dist / dist, False


def _bound_unit(u: NDArray, bound_type: BoundType) -> NDArray:
    fn = bound_type_to_np_function[bound_type]
    return fn(u, 0.0, 1.0)


def np_bound_parameter(t: NDArray, gradient_type: GradientType, first: float, span: float) -> NDArray:
    """
    Clamp ``t`` to [0, 1], or for repeating gradients wrap it over ``[first, first + span]``.

    Wrapping is a true modulo, so negative ``t`` lands inside the period as
    well. A repeating gradient whose stops all share one position has no
    period and is clamped instead.
    """
    t = np.asarray(t, dtype=np.float64)
    if gradient_type is not GradientType.REPEATING_LINEAR or span <= 0.0:
        return _bound_unit(t, BoundType.CLAMP)

    u = _bound_unit((t - first) / span, BoundType.CYCLIC)
    return first + u * span


def bound_parameter(t: float, gradient_type: GradientType, first: float, span: float) -> float:
    return float(np_bound_parameter(np.asarray(t, dtype=np.float64), gradient_type, first, span))
