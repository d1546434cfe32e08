from .stops import (
    AUTO,
    ColorStop,
    Fixed,
    InsufficientStopsError,
    ResolvedStops,
    color_stop,
    find_bracket,
    resolve_stops,
)
from .geometry import resolve_direction, resolve_center
from .projection import project, bound_parameter
from .gradient import Gradient
from .builder import GradientBuilder

__all__ = [
    "AUTO",
    "ColorStop",
    "Fixed",
    "InsufficientStopsError",
    "ResolvedStops",
    "color_stop",
    "find_bracket",
    "resolve_stops",
    "resolve_direction",
    "resolve_center",
    "project",
    "bound_parameter",
    "Gradient",
    "GradientBuilder",
]
