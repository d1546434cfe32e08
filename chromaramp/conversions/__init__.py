"""
Color space conversions used by the renderer.

HSL → RGB:
    hsl_to_unit_rgb(h, s, l)
        Scalar conversion, all components in [0, 1]
    np_hsl_to_unit_rgb(h, s, l)
        Vectorized conversion, returns ``(..., 3)``

Unit → byte:
    unit_to_byte(x), np_unit_to_byte(arr)
        ``floor(x * 255)``; truncation keeps output bit-compatible
        with the reference renders.
"""

from .to_rgb import (
    hue_to_channel,
    hsl_to_unit_rgb,
    np_hsl_to_unit_rgb,
    unit_to_byte,
    np_unit_to_byte,
)

__all__ = [
    'hue_to_channel',
    'hsl_to_unit_rgb',
    'np_hsl_to_unit_rgb',
    'unit_to_byte',
    'np_unit_to_byte',
]
