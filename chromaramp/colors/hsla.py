from __future__ import annotations
import math
from typing import Any, Tuple

from ..conversions import hsl_to_unit_rgb, unit_to_byte
from ..types.color_types import HslaTuple, RgbTuple, Rgba8Tuple, Scalar


def _clamp_unit(value: Scalar) -> float:
    value = float(value)
    if math.isnan(value):
        return 0.0
    return max(0.0, min(value, 1.0))


class Hsla:
    """
    An HSLA color with every channel normalized to [0, 1].

    Hue is a fraction of a full turn (``120 / 360`` is green). Channels are
    clamped independently at construction; out-of-range input is never an
    error. Instances are immutable and compare by value.
    """
    __slots__ = ('_value', '_is_frozen')

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(self, h: Scalar, s: Scalar, l: Scalar, a: Scalar = 1.0) -> None:
        self._value = (_clamp_unit(h), _clamp_unit(s), _clamp_unit(l), _clamp_unit(a))
        super().__setattr__('_is_frozen', True)

    @classmethod
    def from_value(cls, value: Any) -> Hsla:
        """Build from an ``Hsla`` (returned as-is) or a 3/4-element sequence."""
        if isinstance(value, Hsla):
            return value
        if isinstance(value, (tuple, list)):
            if len(value) in (3, 4):
                return cls(*value)
            raise ValueError(f"HSLA color expects 3 or 4 components, got {len(value)}")
        raise TypeError(f"Unsupported color input type: {type(value).__name__}")

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def value(self) -> HslaTuple:
        return self._value

    @property
    def h(self) -> float:
        return self._value[0]

    @property
    def s(self) -> float:
        return self._value[1]

    @property
    def l(self) -> float:
        return self._value[2]

    @property
    def a(self) -> float:
        return self._value[3]

    def __iter__(self):
        return iter(self._value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Hsla):
            return NotImplemented
        return self._value == other._value

    def __hash__(self) -> int:
        return hash(self._value)

    def __repr__(self) -> str:
        h, s, l, a = self._value
        return f"Hsla(h={h:.4g}, s={s:.4g}, l={l:.4g}, a={a:.4g})"

    # ------------------ OPERATIONS ------------------
    def interpolate(self, other: Hsla, t: float) -> Hsla:
        """
        Blend every channel linearly: ``self * (1 - t) + other * t``.

        ``t`` is not clamped here; the result is clamped like any other
        construction. Hue is blended as a plain number, so 0.95 → 0.05
        passes through 0.5 rather than wrapping across red.
        """
        return Hsla(*(
            mine if mine == theirs else mine * (1.0 - t) + theirs * t
            for mine, theirs in zip(self._value, other._value)
        ))

    def to_rgb(self) -> RgbTuple:
        """Unit RGB, alpha dropped."""
        h, s, l, _ = self._value
        return hsl_to_unit_rgb(h, s, l)

    def to_rgba8(self) -> Rgba8Tuple:
        """RGBA bytes, each channel truncated with ``floor(x * 255)``."""
        r, g, b = self.to_rgb()
        return unit_to_byte(r), unit_to_byte(g), unit_to_byte(b), unit_to_byte(self.a)


def hsla(h: Scalar, s: Scalar, l: Scalar, a: Scalar = 1.0) -> Hsla:
    """Construct a clamped :class:`Hsla`."""
    return Hsla(h, s, l, a)


def interpolate(a: Hsla, b: Hsla, t: float) -> Hsla:
    return a.interpolate(b, t)


def to_rgb(color: Hsla) -> Tuple[float, float, float]:
    return color.to_rgb()
