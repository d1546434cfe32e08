"""
Gradient Engine
===============

A :class:`Gradient` owns resolved color stops, a :class:`GradientType` and
two points in canvas-pixel space. For linear types the points are the
start and end of the gradient axis; for radial and conic types ``start``
is the center and ``end`` is the edge reference point (radial) or unused
(conic).

Features
--------
- Per-pixel queries through :meth:`Gradient.color_at`
- Whole-canvas rendering through :meth:`Gradient.render`, vectorized with
  numpy and identical to the per-pixel path
- Band rendering (:meth:`Gradient.render_rows`) so a canvas can be split
  across independent workers
- RGBA or BGRA byte order

Geometry is fixed at construction. Rendering a different size reuses the
same points; re-resolve (or use :class:`GradientBuilder`) when the canvas
changes.
"""

from __future__ import annotations
import logging
import operator
import warnings
from typing import Iterable, Optional, Tuple

import numpy as np
from numpy import ndarray as NDArray

from ..colors.hsla import Hsla
from ..conversions import np_hsl_to_unit_rgb, np_unit_to_byte
from ..types.format_type import ChannelOrder, NUM_CHANNELS, channel_indices
from ..types.gradient_types import Direction, GradientType, Point
from .geometry import farthest_corner, resolve_center, resolve_direction, validate_size
from .projection import bound_parameter, is_degenerate, np_bound_parameter, np_project, project
from .stops import (
    ResolvedStops,
    StopInput,
    find_bracket,
    local_parameter,
    np_find_bracket,
    np_local_parameter,
    resolve_stops,
)

log = logging.getLogger(__name__)


class Gradient:
    __slots__ = ('_stops', '_gradient_type', '_start', '_end')

    def __init__(
        self,
        gradient_type: GradientType | str,
        stops: Iterable[StopInput],
        start: Tuple[float, float],
        end: Tuple[float, float],
    ) -> None:
        """
        Args:
            gradient_type: How pixels are mapped to the gradient parameter
            stops: At least two color stops, in non-decreasing position order
            start: Axis start (linear) or center (radial/conic)
            end: Axis end (linear) or edge reference point (radial)

        Raises:
            InsufficientStopsError: If fewer than two stops are given
        """
        self._gradient_type = GradientType(gradient_type)
        self._stops = resolve_stops(stops)
        self._start = Point(float(start[0]), float(start[1]))
        self._end = Point(float(end[0]), float(end[1]))

        if is_degenerate(self._gradient_type, self._start, self._end):
            warnings.warn(
                f"{self._gradient_type.value} gradient axis collapses to a point at "
                f"({self._start.x}, {self._start.y}); every pixel takes the first stop color",
                RuntimeWarning,
                stacklevel=3,
            )

    # ------------------ CONSTRUCTORS ------------------
    @classmethod
    def linear(cls, direction: Direction, stops: Iterable[StopInput], width: float, height: float) -> Gradient:
        start, end = resolve_direction(direction, width, height)
        return cls(GradientType.LINEAR, stops, start, end)

    @classmethod
    def repeating_linear(cls, direction: Direction, stops: Iterable[StopInput], width: float, height: float) -> Gradient:
        start, end = resolve_direction(direction, width, height)
        return cls(GradientType.REPEATING_LINEAR, stops, start, end)

    @classmethod
    def radial(
        cls,
        stops: Iterable[StopInput],
        width: float,
        height: float,
        center: Optional[Tuple[float, float]] = None,
        relative_center: Optional[Tuple[float, float]] = None,
        edge: Optional[Tuple[float, float]] = None,
    ) -> Gradient:
        """Radial gradient reaching ``t = 1`` at ``edge`` (the farthest canvas corner by default)."""
        width, height = validate_size(width, height)
        center_point = resolve_center(width, height, center, relative_center)
        edge_point = Point(*edge) if edge is not None else farthest_corner(center_point, width, height)
        return cls(GradientType.RADIAL, stops, center_point, edge_point)

    @classmethod
    def conic(
        cls,
        stops: Iterable[StopInput],
        width: float,
        height: float,
        center: Optional[Tuple[float, float]] = None,
        relative_center: Optional[Tuple[float, float]] = None,
    ) -> Gradient:
        """Conic sweep starting at the left of the center (``atan2 = -π``) and turning clockwise."""
        center_point = resolve_center(width, height, center, relative_center)
        return cls(GradientType.CONIC, stops, center_point, center_point)

    def with_geometry(self, start: Tuple[float, float], end: Tuple[float, float]) -> Gradient:
        return Gradient(self._gradient_type, self._stops.stops, start, end)

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def gradient_type(self) -> GradientType:
        return self._gradient_type

    @property
    def stops(self) -> ResolvedStops:
        return self._stops

    @property
    def start(self) -> Point:
        return self._start

    @property
    def end(self) -> Point:
        return self._end

    def __repr__(self) -> str:
        return (
            f"Gradient({self._gradient_type.value}, stops={len(self._stops)}, "
            f"start={tuple(self._start)}, end={tuple(self._end)})"
        )

    # ------------------ PER-PIXEL ------------------
    def parameter_at(self, x: float, y: float) -> Optional[float]:
        """Bounded ``t`` for one pixel, ``None`` on a degenerate axis."""
        t = project(x, y, self._start, self._end, self._gradient_type)
        if t is None:
            return None
        return bound_parameter(t, self._gradient_type, self._stops.first, self._stops.span)

    def color_at(self, x: float, y: float) -> Hsla:
        stops = self._stops.stops
        t = self.parameter_at(x, y)
        if t is None:
            return stops[0].color

        positions = self._stops.positions
        i = find_bracket(positions, t)
        u = local_parameter(float(positions[i]), float(positions[i + 1]), t)
        if u is None:
            return stops[i + 1].color
        return stops[i].color.interpolate(stops[i + 1].color, u)

    # ------------------ VECTORIZED ------------------
    def np_colors_at(self, xs: NDArray, ys: NDArray) -> NDArray:
        """
        HSLA colors for arrays of pixel coordinates.

        Returns:
            Float array of shape ``broadcast(xs, ys).shape + (4,)``
        """
        positions = self._stops.positions
        colors = self._stops.colors

        t, degenerate = np_project(xs, ys, self._start, self._end, self._gradient_type)
        if degenerate:
            return np.broadcast_to(colors[0], t.shape + (NUM_CHANNELS,)).copy()

        t = np_bound_parameter(t, self._gradient_type, self._stops.first, self._stops.span)
        idx = np_find_bracket(positions, t)
        u = np_local_parameter(positions[idx], positions[idx + 1], t)[..., None]

        c0 = colors[idx]
        c1 = colors[idx + 1]
        mixed = np.where(c0 == c1, c0, c0 * (1.0 - u) + c1 * u)
        return np.clip(mixed, 0.0, 1.0)

    def render_rows(
        self,
        width: int,
        height: int,
        row_start: int,
        row_stop: int,
        channel_order: ChannelOrder | str = ChannelOrder.RGBA,
    ) -> NDArray:
        """
        Render the horizontal band ``row_start <= y < row_stop`` of a ``width x height`` canvas.

        Returns:
            ``uint8`` array of shape ``(row_stop - row_start, width, 4)``
        """
        width, height = _pixel_size(width, height)
        row_start, row_stop = operator.index(row_start), operator.index(row_stop)
        if not 0 <= row_start <= row_stop <= height:
            raise ValueError(f"Row range [{row_start}, {row_stop}) is outside a canvas of height {height}")
        order = ChannelOrder(channel_order)

        indices = np.indices((row_stop - row_start, width), dtype=np.float64)
        ys = indices[0] + row_start
        xs = indices[1]

        hsla = self.np_colors_at(xs, ys)
        rgb = np_hsl_to_unit_rgb(hsla[..., 0], hsla[..., 1], hsla[..., 2])
        rgba = np.concatenate([rgb, hsla[..., 3:4]], axis=-1)
        return np_unit_to_byte(rgba)[..., list(channel_indices[order])]

    def render(self, width: int, height: int, channel_order: ChannelOrder | str = ChannelOrder.RGBA) -> NDArray:
        """
        Render the full canvas, row-major.

        Returns:
            ``uint8`` array of shape ``(height, width, 4)``
        """
        width, height = _pixel_size(width, height)
        log.debug("Rendering %s gradient at %dx%d", self._gradient_type.value, width, height)
        return self.render_rows(width, height, 0, height, channel_order)

    def render_bytes(self, width: int, height: int, channel_order: ChannelOrder | str = ChannelOrder.RGBA) -> bytes:
        """Flat ``width * height * 4`` byte buffer."""
        return self.render(width, height, channel_order).tobytes()


def _pixel_size(width: int, height: int) -> Tuple[int, int]:
    width, height = operator.index(width), operator.index(height)
    if width < 0 or height < 0:
        raise ValueError(f"Canvas size must be non-negative, got {width}x{height}")
    return width, height
