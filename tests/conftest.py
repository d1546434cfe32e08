import pytest

from chromaramp.colors import hsla
from chromaramp.gradients import color_stop


@pytest.fixture
def red_to_blue():
    return [
        color_stop(hsla(0.0, 1.0, 0.5, 1.0), 0.0),
        color_stop(hsla(240.0 / 360.0, 1.0, 0.5, 1.0), 1.0),
    ]


@pytest.fixture
def half_period_stops():
    return [
        color_stop(hsla(0.0, 1.0, 0.5, 1.0), 0.0),
        color_stop(hsla(0.5, 0.2, 0.8, 0.4), 0.5),
    ]
