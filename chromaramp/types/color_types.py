from __future__ import annotations
from typing import Tuple, Union

Scalar = Union[int, float]
HslaTuple = Tuple[float, float, float, float]
RgbTuple = Tuple[float, float, float]
Rgba8Tuple = Tuple[int, int, int, int]
