"""
HSL → RGB conversion on the unit cube.

Hue, saturation and lightness are all fractions in [0, 1] (hue is a
fraction of a full turn, not degrees). Scalar functions work on plain
floats, the ``np_`` variants on arrays of any matching shape.
"""

from __future__ import annotations
import math
from typing import Tuple

import numpy as np
from numpy import ndarray as NDArray

from ..types.format_type import BYTE_MAX

ONE_THIRD = 1.0 / 3.0
ONE_SIXTH = 1.0 / 6.0
TWO_THIRDS = 2.0 / 3.0


def hue_to_channel(p: float, q: float, t: float) -> float:
    """Evaluate one RGB channel at hue offset ``t`` (wrapped once into [0, 1])."""
    if t < 0.0:
        t += 1.0
    if t > 1.0:
        t -= 1.0
    if t < ONE_SIXTH:
        return p + (q - p) * 6.0 * t
    if t < 0.5:
        return q
    if t < TWO_THIRDS:
        return p + (q - p) * (TWO_THIRDS - t) * 6.0
    return p


def hsl_to_unit_rgb(h: float, s: float, l: float) -> Tuple[float, float, float]:
    """
    Convert a unit HSL triple to unit RGB.

    Args:
        h: Hue as a fraction of a full turn [0, 1]
        s: Saturation [0, 1]
        l: Lightness [0, 1]

    Returns:
        Tuple (r, g, b) with each channel in [0, 1]
    """
    if s == 0.0:
        return l, l, l

    q = l * (1.0 + s) if l < 0.5 else l + s - l * s
    p = 2.0 * l - q
    return (
        hue_to_channel(p, q, h + ONE_THIRD),
        hue_to_channel(p, q, h),
        hue_to_channel(p, q, h - ONE_THIRD),
    )


def np_hue_to_channel(p: NDArray, q: NDArray, t: NDArray) -> NDArray:
    t = np.where(t < 0.0, t + 1.0, t)
    t = np.where(t > 1.0, t - 1.0, t)
    return np.select(
        [t < ONE_SIXTH, t < 0.5, t < TWO_THIRDS],
        [p + (q - p) * 6.0 * t, q, p + (q - p) * (TWO_THIRDS - t) * 6.0],
        default=p,
    )


def np_hsl_to_unit_rgb(h: NDArray, s: NDArray, l: NDArray) -> NDArray:
    """
    Vectorized :func:`hsl_to_unit_rgb`.

    Args:
        h, s, l: Arrays of identical shape with unit HSL components

    Returns:
        Array of shape ``h.shape + (3,)`` with unit RGB values
    """
    h = np.asarray(h, dtype=np.float64)
    s = np.asarray(s, dtype=np.float64)
    l = np.asarray(l, dtype=np.float64)

    q = np.where(l < 0.5, l * (1.0 + s), l + s - l * s)
    p = 2.0 * l - q

    r = np_hue_to_channel(p, q, h + ONE_THIRD)
    g = np_hue_to_channel(p, q, h)
    b = np_hue_to_channel(p, q, h - ONE_THIRD)

    grey = s == 0.0
    rgb = np.stack([
        np.where(grey, l, r),
        np.where(grey, l, g),
        np.where(grey, l, b),
    ], axis=-1)
    return rgb


def unit_to_byte(value: float) -> int:
    """Scale a unit channel to 0..255 by truncation (``floor``), not rounding."""
    return int(math.floor(min(max(value, 0.0), 1.0) * BYTE_MAX))


def np_unit_to_byte(values: NDArray) -> NDArray:
    """Vectorized :func:`unit_to_byte`, returns ``uint8``."""
    clipped = np.clip(np.asarray(values, dtype=np.float64), 0.0, 1.0)
    return np.floor(clipped * BYTE_MAX).astype(np.uint8)
