"""
Color stops and stop-bracket lookup.

A stop position is either ``Fixed`` (a float clamped to [0, 1]) or
``AUTO``. Automatic positions are resolved once per gradient into concrete
floats by :func:`resolve_stops`, so the per-pixel lookup only ever deals
with numbers:

- a leading ``AUTO`` becomes 0.0 and a trailing one 1.0
- a run of interior ``AUTO`` stops is spread evenly between the nearest
  fixed neighbours

Stops are never sorted. The lookup scans forward, so callers are expected
to pass positions in non-decreasing order.
"""

from __future__ import annotations
import math
from dataclasses import dataclass
from typing import Iterable, List, NamedTuple, Optional, Sequence, Tuple, Union

import numpy as np
from numpy import ndarray as NDArray

from ..colors.hsla import Hsla


class InsufficientStopsError(ValueError):
    """Raised when a gradient is given fewer than two color stops."""


class _Auto:
    __slots__ = ()

    def __repr__(self) -> str:
        return "AUTO"


AUTO = _Auto()


@dataclass(frozen=True)
class Fixed:
    value: float

    def __post_init__(self) -> None:
        value = float(self.value)
        value = 0.0 if math.isnan(value) else max(0.0, min(value, 1.0))
        object.__setattr__(self, 'value', value)


StopPosition = Union[Fixed, _Auto]


@dataclass(frozen=True)
class ColorStop:
    color: Hsla
    position: StopPosition = AUTO

    @property
    def percentage(self) -> Optional[float]:
        """The fixed position, or ``None`` when automatic."""
        return self.position.value if isinstance(self.position, Fixed) else None


def color_stop(color: Hsla, percentage: Optional[float] = None) -> ColorStop:
    """Pin ``color`` at ``percentage`` along the axis, or leave it automatic with ``None``."""
    position = AUTO if percentage is None else Fixed(percentage)
    return ColorStop(Hsla.from_value(color), position)


StopInput = Union[ColorStop, Hsla, Tuple[Hsla, Optional[float]]]


def normalize_stop_input(stop: StopInput) -> ColorStop:
    if isinstance(stop, ColorStop):
        return stop
    if isinstance(stop, Hsla):
        return ColorStop(stop)
    if isinstance(stop, tuple) and len(stop) == 2 and isinstance(stop[0], Hsla):
        return color_stop(stop[0], stop[1])
    raise TypeError(f"Unsupported color stop input: {stop!r}")


class ResolvedStops(NamedTuple):
    """Stop positions as floats (shape ``(n,)``) and colors as HSLA rows (shape ``(n, 4)``)."""
    positions: NDArray
    colors: NDArray
    stops: Tuple[ColorStop, ...]

    @property
    def first(self) -> float:
        return float(self.positions[0])

    @property
    def last(self) -> float:
        return float(self.positions[-1])

    @property
    def span(self) -> float:
        return self.last - self.first

    def __len__(self) -> int:
        return len(self.stops)


def resolve_positions(positions: Sequence[StopPosition]) -> List[float]:
    """Turn a sequence of ``Fixed``/``AUTO`` positions into floats."""
    n = len(positions)
    resolved: List[Optional[float]] = [
        p.value if isinstance(p, Fixed) else None for p in positions
    ]
    if resolved[0] is None:
        resolved[0] = 0.0
    if resolved[-1] is None:
        resolved[-1] = 1.0

    i = 1
    while i < n - 1:
        if resolved[i] is not None:
            i += 1
            continue
        run_start = i
        while resolved[i] is None:
            i += 1
        before = resolved[run_start - 1]
        after = resolved[i]
        gaps = i - run_start + 1
        for k in range(run_start, i):
            resolved[k] = before + (after - before) * (k - run_start + 1) / gaps

    return [float(p) for p in resolved]


def resolve_stops(stops: Iterable[StopInput]) -> ResolvedStops:
    """
    Validate the stop list and resolve automatic positions.

    Raises:
        InsufficientStopsError: If fewer than two stops are given
    """
    normalized = tuple(normalize_stop_input(s) for s in stops)
    if len(normalized) < 2:
        raise InsufficientStopsError(
            f"A gradient needs at least 2 color stops, got {len(normalized)}"
        )
    positions = resolve_positions([s.position for s in normalized])
    return ResolvedStops(
        positions=np.array(positions, dtype=np.float64),
        colors=np.array([s.color.value for s in normalized], dtype=np.float64),
        stops=normalized,
    )


def find_bracket(positions: Sequence[float], t: float) -> int:
    """
    Return ``i`` such that stops ``i`` and ``i + 1`` bracket ``t``.

    Advances while ``t`` lies past the upper stop, never beyond the last pair.
    """
    i = 0
    last_pair = len(positions) - 2
    while i < last_pair and t > positions[i + 1]:
        i += 1
    return i


def np_find_bracket(positions: NDArray, t: NDArray) -> NDArray:
    """Vectorized :func:`find_bracket`; the forward scan stops at the first stop ``t`` does not pass."""
    index = np.zeros(np.shape(t), dtype=np.intp)
    advancing = np.ones(np.shape(t), dtype=bool)
    for j in range(1, len(positions) - 1):
        advancing &= t > positions[j]
        index += advancing
    return index


def local_parameter(start: float, end: float, t: float) -> Optional[float]:
    """
    Position of ``t`` inside ``[start, end]`` clamped to [0, 1].

    Returns ``None`` when both ends coincide; callers take the later stop.
    """
    width = end - start
    if width == 0.0:
        return None
    return max(0.0, min((t - start) / width, 1.0))


def np_local_parameter(start: NDArray, end: NDArray, t: NDArray) -> NDArray:
    """Vectorized :func:`local_parameter`; zero-width brackets yield 1.0 (the later stop)."""
    width = end - start
    safe = np.where(width == 0.0, 1.0, width)
    u = np.clip((t - start) / safe, 0.0, 1.0)
    return np.where(width == 0.0, 1.0, u)
