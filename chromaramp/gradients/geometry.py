from __future__ import annotations
import math
import numbers
from typing import Callable, Dict, Optional, Tuple

from ..types.gradient_types import Direction, Point, Side

Segment = Tuple[Point, Point]

# start → end for each named side; ``t`` runs from 0 at start to 1 at end,
# so "to top" paints the first stop along the bottom edge.
SIDE_SEGMENTS: Dict[Side, Callable[[float, float], Segment]] = {
    Side.TOP:          lambda w, h: (Point(w / 2.0, h), Point(w / 2.0, 0.0)),
    Side.RIGHT:        lambda w, h: (Point(0.0, h / 2.0), Point(w, h / 2.0)),
    Side.BOTTOM:       lambda w, h: (Point(w / 2.0, 0.0), Point(w / 2.0, h)),
    Side.LEFT:         lambda w, h: (Point(w, h / 2.0), Point(0.0, h / 2.0)),
    Side.TOP_LEFT:     lambda w, h: (Point(w, h), Point(0.0, 0.0)),
    Side.TOP_RIGHT:    lambda w, h: (Point(0.0, h), Point(w, 0.0)),
    Side.BOTTOM_LEFT:  lambda w, h: (Point(w, 0.0), Point(0.0, h)),
    Side.BOTTOM_RIGHT: lambda w, h: (Point(0.0, 0.0), Point(w, h)),
}

# Angles whose centered axis coincides with a side segment (y grows downward).
AXIS_SIDE_ANGLES: Dict[Side, float] = {
    Side.RIGHT: 0.0,
    Side.BOTTOM: 90.0,
    Side.LEFT: 180.0,
    Side.TOP: 270.0,
}


def validate_size(width: float, height: float) -> Tuple[float, float]:
    width, height = float(width), float(height)
    if not (math.isfinite(width) and math.isfinite(height)):
        raise ValueError(f"Canvas size must be finite, got {width}x{height}")
    if width < 0 or height < 0:
        raise ValueError(f"Canvas size must be non-negative, got {width}x{height}")
    return width, height


def angle_segment(angle: float, width: float, height: float) -> Segment:
    """
    Axis through the canvas center at ``angle`` degrees.

    0° runs left → right and angles grow clockwise on screen, so 90° runs
    top → bottom. The segment spans ``width * cos`` by ``height * sin``.
    """
    angle = float(angle)
    if not math.isfinite(angle):
        raise ValueError(f"Gradient angle must be finite, got {angle}")
    rad = math.radians(angle)
    dx = math.cos(rad)
    dy = math.sin(rad)
    start = Point(width * (1.0 - dx) / 2.0, height * (1.0 - dy) / 2.0)
    end = Point(width * (1.0 + dx) / 2.0, height * (1.0 + dy) / 2.0)
    return start, end


def resolve_direction(direction: Direction, width: float, height: float) -> Segment:
    """
    Resolve an angle in degrees or a :class:`Side` into canvas-space start/end points.

    Args:
        direction: Angle in degrees, a ``Side``, or a side name such as ``"to top"``
        width: Canvas width in pixels
        height: Canvas height in pixels

    Returns:
        ``(start, end)`` points
    """
    width, height = validate_size(width, height)
    if isinstance(direction, Side):
        return SIDE_SEGMENTS[direction](width, height)
    if isinstance(direction, str):
        return SIDE_SEGMENTS[Side.parse(direction)](width, height)
    if isinstance(direction, numbers.Real) and not isinstance(direction, bool):
        return angle_segment(direction, width, height)
    raise TypeError(f"Direction must be an angle or a Side, got {direction!r}")


def resolve_center(
    width: float,
    height: float,
    center: Optional[Tuple[float, float]] = None,
    relative_center: Optional[Tuple[float, float]] = None,
) -> Point:
    """Resolve the center from absolute or relative inputs, defaulting to the canvas middle."""
    width, height = validate_size(width, height)
    if center is not None:
        return Point(float(center[0]), float(center[1]))
    if relative_center is not None:
        return Point(relative_center[0] * width, relative_center[1] * height)
    return Point(width / 2.0, height / 2.0)


def farthest_corner(center: Point, width: float, height: float) -> Point:
    """The canvas corner farthest from ``center``; the radial edge reference by default."""
    corners = (Point(0.0, 0.0), Point(width, 0.0), Point(0.0, height), Point(width, height))
    return max(corners, key=lambda c: math.hypot(c.x - center.x, c.y - center.y))
