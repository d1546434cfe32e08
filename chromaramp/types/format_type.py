# No dependencies
from enum import Enum


class ChannelOrder(str, Enum):
    RGBA = "rgba"
    BGRA = "bgra"


channel_indices = {
    ChannelOrder.RGBA: (0, 1, 2, 3),
    ChannelOrder.BGRA: (2, 1, 0, 3),
}

BYTE_MAX = 255
NUM_CHANNELS = 4
