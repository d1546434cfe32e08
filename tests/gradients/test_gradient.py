import warnings

import numpy as np
import pytest

from chromaramp.colors import hsla
from chromaramp.gradients import Gradient, InsufficientStopsError, color_stop
from chromaramp.samples import BLUE, RAINBOW_STOPS, RED, RED_GLOW_STOPS, WHITE
from chromaramp.types import ChannelOrder, GradientType, Side


def rgba8_grid(gradient, width, height):
    return np.array([
        [gradient.color_at(x, y).to_rgba8() for x in range(width)]
        for y in range(height)
    ], dtype=np.int64).reshape(height, width, 4)


class TestLinearToRight:
    width, height = 800, 600

    def test_first_pixel_is_first_stop(self, red_to_blue):
        gradient = Gradient.linear(Side.RIGHT, red_to_blue, self.width, self.height)
        assert gradient.color_at(0, 0) == red_to_blue[0].color
        assert gradient.color_at(0, 599) == red_to_blue[0].color

    def test_last_pixel_is_close_to_last_stop(self, red_to_blue):
        gradient = Gradient.linear(Side.RIGHT, red_to_blue, self.width, self.height)
        assert gradient.parameter_at(799, 300) == pytest.approx(1.0, abs=2e-3)
        assert np.allclose(gradient.color_at(799, 300).value, red_to_blue[1].color.value, atol=2e-3)

    def test_midpoint_is_half_blend(self, red_to_blue):
        gradient = Gradient.linear(Side.RIGHT, red_to_blue, self.width, self.height)
        assert gradient.parameter_at(400, 123) == 0.5
        expected = red_to_blue[0].color.interpolate(red_to_blue[1].color, 0.5)
        assert gradient.color_at(400, 123) == expected

    def test_outside_axis_clamps(self, red_to_blue):
        gradient = Gradient.linear(Side.RIGHT, red_to_blue, self.width, self.height)
        assert gradient.color_at(-50, 10) == red_to_blue[0].color
        assert gradient.color_at(900, 10) == red_to_blue[1].color


def test_to_top_paints_first_stop_at_bottom(red_to_blue):
    gradient = Gradient.linear(Side.TOP, red_to_blue, 100, 100)
    assert gradient.color_at(50, 100) == red_to_blue[0].color
    assert gradient.color_at(50, 0) == red_to_blue[1].color


def test_rainbow_bracket_interpolation():
    gradient = Gradient.linear(Side.RIGHT, RAINBOW_STOPS, 100, 10)
    # x = 20 -> t = 0.2, between orange (0.14) and yellow (0.28)
    local = (0.2 - 0.14) / (0.28 - 0.14)
    expected = RAINBOW_STOPS[1].color.interpolate(RAINBOW_STOPS[2].color, local)
    assert np.allclose(gradient.color_at(20, 5).value, expected.value, atol=1e-12)


class TestRepeatingLinear:
    def test_repeats_every_stop_span(self, half_period_stops):
        gradient = Gradient.repeating_linear(Side.RIGHT, half_period_stops, 100, 10)
        assert gradient.parameter_at(10, 5) == pytest.approx(0.1)
        assert gradient.parameter_at(60, 5) == pytest.approx(0.1)
        assert np.allclose(gradient.color_at(10, 5).value, gradient.color_at(60, 5).value, atol=1e-12)

    def test_negative_projection_wraps_forward(self, red_to_blue):
        gradient = Gradient.repeating_linear(Side.RIGHT, red_to_blue, 100, 10)
        assert gradient.parameter_at(-10, 5) == pytest.approx(0.9)

    def test_unit_span_matches_modulo_one(self, red_to_blue):
        gradient = Gradient.repeating_linear(Side.RIGHT, red_to_blue, 100, 10)
        assert gradient.parameter_at(125, 5) == pytest.approx(0.25)


class TestRadial:
    def test_center_and_half_radius(self):
        gradient = Gradient.radial(RED_GLOW_STOPS, 800, 600)
        assert gradient.start == (400.0, 300.0)
        assert gradient.end == (0.0, 0.0)
        assert gradient.color_at(400, 300) == RED_GLOW_STOPS[0].color
        # farthest corner is 500px away, so 250px out is the 0.5 stop
        assert gradient.color_at(650, 300) == RED_GLOW_STOPS[1].color
        assert gradient.color_at(0, 0).a == 0.0

    def test_explicit_edge(self, red_to_blue):
        gradient = Gradient.radial(red_to_blue, 100, 100, center=(0, 0), edge=(100, 0))
        assert gradient.parameter_at(50, 0) == pytest.approx(0.5)
        assert gradient.parameter_at(100, 100) == 1.0


class TestConic:
    def test_sweep(self, red_to_blue):
        gradient = Gradient.conic(red_to_blue, 100, 100)
        assert gradient.parameter_at(100, 50) == pytest.approx(0.5)
        assert gradient.parameter_at(50, 0) == pytest.approx(0.25)

    def test_relative_center(self, red_to_blue):
        gradient = Gradient.conic(red_to_blue, 200, 100, relative_center=(0.25, 0.5))
        assert gradient.start == (50.0, 50.0)


class TestErrors:
    def test_insufficient_stops(self):
        with pytest.raises(InsufficientStopsError):
            Gradient.linear(Side.RIGHT, [color_stop(RED, 0.0)], 10, 10)

    def test_equal_adjacent_stops_take_later_stop(self):
        stops = [
            color_stop(RED, 0.0),
            color_stop(WHITE, 0.5),
            color_stop(BLUE, 0.5),
        ]
        gradient = Gradient.linear(Side.RIGHT, stops, 100, 10)
        assert gradient.color_at(70, 5) == BLUE
        assert gradient.color_at(50, 5) == WHITE
        pixels = gradient.render(100, 10)
        assert tuple(pixels[5, 70]) == BLUE.to_rgba8()

    def test_zero_size_canvas_uses_first_stop(self, red_to_blue):
        with pytest.warns(RuntimeWarning):
            gradient = Gradient.linear(Side.RIGHT, red_to_blue, 0, 10)
        assert gradient.parameter_at(3, 3) is None
        assert gradient.color_at(3, 3) == red_to_blue[0].color
        pixels = gradient.render(4, 4)
        assert (pixels == np.array(red_to_blue[0].color.to_rgba8(), dtype=np.uint8)).all()

    def test_zero_area_render(self, red_to_blue):
        gradient = Gradient.linear(Side.RIGHT, red_to_blue, 10, 10)
        assert gradient.render(0, 5).shape == (5, 0, 4)
        assert gradient.render_bytes(0, 0) == b""

    def test_negative_render_size(self, red_to_blue):
        gradient = Gradient.linear(Side.RIGHT, red_to_blue, 10, 10)
        with pytest.raises(ValueError):
            gradient.render(-1, 5)

    def test_row_range_checked(self, red_to_blue):
        gradient = Gradient.linear(Side.RIGHT, red_to_blue, 10, 10)
        with pytest.raises(ValueError):
            gradient.render_rows(10, 10, 5, 11)
        with pytest.raises(ValueError):
            gradient.render_rows(10, 10, 6, 5)

    def test_non_degenerate_gradient_does_not_warn(self, red_to_blue):
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            Gradient.linear(45.0, red_to_blue, 10, 10)


class TestRender:
    @pytest.mark.parametrize("direction", [Side.RIGHT, Side.TOP_LEFT, 30.0, 200.0])
    def test_linear_render_matches_per_pixel(self, direction):
        gradient = Gradient.linear(direction, RAINBOW_STOPS, 24, 16)
        assert np.array_equal(gradient.render(24, 16).astype(np.int64), rgba8_grid(gradient, 24, 16))

    def test_repeating_render_matches_per_pixel(self, half_period_stops):
        gradient = Gradient.repeating_linear(75.0, half_period_stops, 20, 14)
        assert np.array_equal(gradient.render(20, 14).astype(np.int64), rgba8_grid(gradient, 20, 14))

    @pytest.mark.parametrize("factory", [Gradient.radial, Gradient.conic])
    def test_polar_render_matches_per_pixel(self, factory):
        gradient = factory(RAINBOW_STOPS, 21, 17)
        assert np.array_equal(gradient.render(21, 17).astype(np.int64), rgba8_grid(gradient, 21, 17))

    def test_shape_and_dtype(self, red_to_blue):
        pixels = Gradient.linear(Side.BOTTOM, red_to_blue, 32, 8).render(32, 8)
        assert pixels.shape == (8, 32, 4)
        assert pixels.dtype == np.uint8

    def test_bytes_length(self, red_to_blue):
        data = Gradient.linear(Side.BOTTOM, red_to_blue, 32, 8).render_bytes(32, 8)
        assert len(data) == 32 * 8 * 4

    def test_bgra_swaps_red_and_blue(self, red_to_blue):
        gradient = Gradient.linear(Side.RIGHT, red_to_blue, 16, 4)
        rgba = gradient.render(16, 4)
        bgra = gradient.render(16, 4, ChannelOrder.BGRA)
        assert np.array_equal(bgra, rgba[..., [2, 1, 0, 3]])
        assert np.array_equal(gradient.render(16, 4, "bgra"), bgra)

    def test_alpha_carries_through(self):
        stops = [color_stop(hsla(0, 1, 0.5, 1.0), 0.0), color_stop(hsla(0, 1, 0.5, 0.0), 1.0)]
        pixels = Gradient.linear(Side.RIGHT, stops, 10, 1).render(10, 1)
        assert pixels[0, 0, 3] == 255
        assert pixels[0, 5, 3] == 127

    def test_bands_stack_to_full_render(self):
        gradient = Gradient.conic(RAINBOW_STOPS, 30, 20)
        bands = [gradient.render_rows(30, 20, r, min(r + 7, 20)) for r in range(0, 20, 7)]
        assert np.array_equal(np.concatenate(bands, axis=0), gradient.render(30, 20))


def test_with_geometry_keeps_stops(red_to_blue):
    gradient = Gradient.linear(Side.RIGHT, red_to_blue, 100, 100)
    moved = gradient.with_geometry((0, 0), (0, 100))
    assert moved.gradient_type is GradientType.LINEAR
    assert moved.stops.positions.tolist() == gradient.stops.positions.tolist()
    assert moved.color_at(0, 100) == red_to_blue[1].color
