"""
Chromaramp - HSLA Gradient Rasterizer
=====================================

Compute and rasterize linear, repeating-linear, radial and conic color
gradients from positioned HSLA color stops into raw RGBA/BGRA buffers.

Key Features
------------
- Immutable HSLA colors clamped to [0, 1]
- Angles or named sides/corners for linear direction
- Automatic stop positions resolved once per gradient
- Vectorized numpy rendering that matches the per-pixel query exactly
- Builder with a size-keyed render cache

Quick Start
-----------
>>> from chromaramp import Gradient, Side, color_stop, hsla
>>>
>>> stops = [color_stop(hsla(0.0, 1.0, 0.5), 0.0), color_stop(hsla(240 / 360, 1.0, 0.5), 1.0)]
>>> gradient = Gradient.linear(Side.RIGHT, stops, 800, 600)
>>> pixels = gradient.render(800, 600)   # uint8, shape (600, 800, 4)
>>> gradient.color_at(400, 300)

Modules
-------
- colors: the HSLA color model
- conversions: HSL → RGB and byte truncation
- gradients: stops, geometry, projection, Gradient and GradientBuilder
- types: GradientType, Side, ChannelOrder, Point
- samples: canned stop lists
"""

from .colors import Hsla, hsla, interpolate, to_rgb
from .conversions import hsl_to_unit_rgb, np_hsl_to_unit_rgb, unit_to_byte
from .types import ChannelOrder, GradientType, Point, Side
from .gradients import (
    AUTO,
    ColorStop,
    Fixed,
    Gradient,
    GradientBuilder,
    InsufficientStopsError,
    color_stop,
    resolve_direction,
)

__all__ = [
    # colors
    "Hsla",
    "hsla",
    "interpolate",
    "to_rgb",
    # conversions
    "hsl_to_unit_rgb",
    "np_hsl_to_unit_rgb",
    "unit_to_byte",
    # types
    "ChannelOrder",
    "GradientType",
    "Point",
    "Side",
    # gradients
    "AUTO",
    "ColorStop",
    "Fixed",
    "Gradient",
    "GradientBuilder",
    "InsufficientStopsError",
    "color_stop",
    "resolve_direction",
]
