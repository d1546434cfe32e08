from __future__ import annotations
import logging
import threading
from typing import List, Optional, Tuple

from numpy import ndarray as NDArray

from ..colors.hsla import Hsla
from ..types.format_type import ChannelOrder
from ..types.gradient_types import Direction, GradientType, Side
from .gradient import Gradient
from .stops import ColorStop, color_stop

log = logging.getLogger(__name__)

CacheKey = Tuple[int, int, ChannelOrder]


class GradientBuilder:
    """
    Chainable gradient description that resolves geometry per canvas size.

    >>> from chromaramp import GradientBuilder, hsla
    >>> builder = GradientBuilder.linear().angle(45).color(hsla(0, 1, .5)).color(hsla(.6, 1, .5))
    >>> pixels = builder.render_image(320, 200)

    ``render_image`` keeps the last rendered buffer and hands it back while
    the size and the description stay the same. The cached array is
    read-only; writes to the cache are serialized with a lock.
    """

    def __init__(self, gradient_type: GradientType | str = GradientType.LINEAR) -> None:
        self._gradient_type = GradientType(gradient_type)
        self._direction: Direction = 0.0
        self._stops: List[ColorStop] = []
        self._center: Optional[Tuple[float, float]] = None
        self._relative_center: Optional[Tuple[float, float]] = None
        self._cache_key: Optional[CacheKey] = None
        self._cache: Optional[NDArray] = None
        self._lock = threading.Lock()

    @classmethod
    def linear(cls) -> GradientBuilder:
        return cls(GradientType.LINEAR)

    @classmethod
    def repeating_linear(cls) -> GradientBuilder:
        return cls(GradientType.REPEATING_LINEAR)

    @classmethod
    def radial(cls) -> GradientBuilder:
        return cls(GradientType.RADIAL)

    @classmethod
    def conic(cls) -> GradientBuilder:
        return cls(GradientType.CONIC)

    # ------------------ CONFIGURATION ------------------
    def angle(self, angle: float) -> GradientBuilder:
        self._direction = float(angle)
        return self._changed()

    def side(self, side: Side | str) -> GradientBuilder:
        self._direction = side if isinstance(side, Side) else Side.parse(side)
        return self._changed()

    def color(self, color: Hsla) -> GradientBuilder:
        self._stops.append(color_stop(color))
        return self._changed()

    def color_with_percentage(self, color: Hsla, percentage: float) -> GradientBuilder:
        self._stops.append(color_stop(color, percentage))
        return self._changed()

    def center(self, x: float, y: float) -> GradientBuilder:
        self._center = (float(x), float(y))
        self._relative_center = None
        return self._changed()

    def relative_center(self, fx: float, fy: float) -> GradientBuilder:
        self._relative_center = (float(fx), float(fy))
        self._center = None
        return self._changed()

    @property
    def gradient_type(self) -> GradientType:
        return self._gradient_type

    @property
    def direction(self) -> Direction:
        return self._direction

    @property
    def stops(self) -> Tuple[ColorStop, ...]:
        return tuple(self._stops)

    def _changed(self) -> GradientBuilder:
        self.clear_cache()
        return self

    # ------------------ RESOLUTION ------------------
    def build(self, width: float, height: float) -> Gradient:
        """Resolve the description against a canvas size."""
        if self._gradient_type is GradientType.LINEAR:
            return Gradient.linear(self._direction, self._stops, width, height)
        if self._gradient_type is GradientType.REPEATING_LINEAR:
            return Gradient.repeating_linear(self._direction, self._stops, width, height)
        if self._gradient_type is GradientType.RADIAL:
            return Gradient.radial(self._stops, width, height, self._center, self._relative_center)
        return Gradient.conic(self._stops, width, height, self._center, self._relative_center)

    def render_image(
        self,
        width: int,
        height: int,
        channel_order: ChannelOrder | str = ChannelOrder.RGBA,
    ) -> NDArray:
        key: CacheKey = (int(width), int(height), ChannelOrder(channel_order))
        with self._lock:
            if self._cache is not None and self._cache_key == key:
                log.debug("Gradient cache hit for %dx%d", key[0], key[1])
                return self._cache

            log.debug("Gradient cache miss for %dx%d, re-rendering", key[0], key[1])
            image = self.build(key[0], key[1]).render(key[0], key[1], key[2])
            image.flags.writeable = False
            self._cache_key = key
            self._cache = image
            return image

    def clear_cache(self) -> None:
        with self._lock:
            self._cache_key = None
            self._cache = None
