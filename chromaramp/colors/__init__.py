"""
Chromaramp Color Model
======================

Immutable HSLA colors with every channel in [0, 1].

>>> from chromaramp.colors import hsla
>>> red = hsla(0.0, 1.0, 0.5)
>>> red.to_rgba8()
(255, 0, 0, 255)
>>> orange = red.interpolate(hsla(60 / 360, 1.0, 0.5), 0.5)

Notes
-----
- Channels are clamped at construction, never rejected
- Interpolation is a per-channel lerp in HSLA space, without hue wrapping
- Byte conversion truncates (``floor``) instead of rounding
"""

from .hsla import Hsla, hsla, interpolate, to_rgb

__all__ = ['Hsla', 'hsla', 'interpolate', 'to_rgb']
