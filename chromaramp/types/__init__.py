from .format_type import ChannelOrder, channel_indices
from .gradient_types import GradientType, Side, Point, Direction

__all__ = [
    "ChannelOrder",
    "channel_indices",
    "GradientType",
    "Side",
    "Point",
    "Direction",
]
