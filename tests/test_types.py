from typing import Union

from chromaramp.types import ChannelOrder, GradientType
from chromaramp.types.color_types import HslaTuple, Scalar


def test_scalar_alias_is_a_typing_union():
    assert Scalar == Union[int, float]
    assert HslaTuple.__args__ == (float, float, float, float)


def test_enums_accept_their_string_values():
    assert GradientType("repeating_linear") is GradientType.REPEATING_LINEAR
    assert ChannelOrder("bgra") is ChannelOrder.BGRA
