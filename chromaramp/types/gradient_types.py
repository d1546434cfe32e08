from __future__ import annotations
from enum import Enum
from typing import NamedTuple, Union


class GradientType(str, Enum):
    """
    How a pixel position is turned into the gradient parameter ``t``.

    LINEAR:           projection onto the start→end axis, clamped
    REPEATING_LINEAR: projection onto the axis, wrapped over the stop span
    RADIAL:           distance from the center over the edge distance
    CONIC:            angle around the center as a fraction of a full turn
    """
    LINEAR = "linear"
    REPEATING_LINEAR = "repeating_linear"
    RADIAL = "radial"
    CONIC = "conic"

    @property
    def is_linear(self) -> bool:
        return self in (GradientType.LINEAR, GradientType.REPEATING_LINEAR)


class Side(str, Enum):
    TOP = "top"
    RIGHT = "right"
    BOTTOM = "bottom"
    LEFT = "left"
    TOP_LEFT = "top_left"
    TOP_RIGHT = "top_right"
    BOTTOM_LEFT = "bottom_left"
    BOTTOM_RIGHT = "bottom_right"

    @classmethod
    def parse(cls, name: str) -> "Side":
        """Accept ``"top"``, ``"to top"``, ``"top-left"``, ``"TOP_LEFT"`` and ``"to top left"``."""
        key = name.strip().lower()
        if key.startswith("to "):
            key = key[3:]
        key = key.replace("-", "_").replace(" ", "_")
        try:
            return cls(key)
        except ValueError:
            raise ValueError(f"Unknown gradient side: {name!r}") from None


class Point(NamedTuple):
    x: float
    y: float


Direction = Union[float, int, Side, str]
