"""
Tests for CIELUV interpolation and gradients.
"""

import logging

import numpy as np
import pytest

from luvrgbw import (
    CIELUV,
    RGB,
    RGBW,
    gradient,
    gradient_array,
    gradient_rgbw,
    interpolate,
    interpolate_array,
    to_cieluv,
)


def components(ramp):
    """Stack a list of colors into a (channels, steps) array."""
    return np.stack([c.to_array() for c in ramp], axis=1)


class TestInterpolate:
    """Tests for interpolate()."""

    def test_matches_method(self):
        a = to_cieluv(RGB.RED)
        b = to_cieluv(RGB.BLUE)

        for t in (0.0, 0.25, 0.5, 1.0):
            assert interpolate(a, b, t) == a.interpolate(b, t)

    def test_extrapolation(self):
        """t outside [0, 1] extrapolates linearly."""
        a = CIELUV(10.0, 0.0, 0.0)
        b = CIELUV(20.0, 10.0, -10.0)
        result = interpolate(a, b, 2.0)

        assert result.l == pytest.approx(30.0)
        assert result.u == pytest.approx(20.0)
        assert result.v == pytest.approx(-20.0)


class TestGradient:
    """Tests for gradient()."""

    def test_length_and_endpoints(self):
        """steps + 1 colors, first and last exactly the endpoints."""
        ramp = gradient(RGB.RED, RGB.GREEN, 100)

        assert len(ramp) == 101
        assert all(isinstance(c, CIELUV) for c in ramp)
        assert ramp[0] == to_cieluv(RGB.RED)
        assert ramp[-1] == to_cieluv(RGB.GREEN)

    def test_single_step(self):
        ramp = gradient(CIELUV(0.0, 0.0, 0.0), CIELUV(100.0, 0.0, 0.0), 1)
        assert ramp == [CIELUV(0.0, 0.0, 0.0), CIELUV(100.0, 0.0, 0.0)]

    def test_even_spacing(self):
        """Each step lies at t = i / steps."""
        ramp = gradient(CIELUV(0.0, -40.0, 40.0), CIELUV(80.0, 40.0, -40.0), 8)
        np.testing.assert_allclose(
            [c.l for c in ramp], np.arange(9) * 10.0, atol=1e-4
        )
        assert ramp[4].u == pytest.approx(0.0, abs=1e-5)

    @pytest.mark.parametrize("start,end", [
        (RGB.RED, RGB.GREEN),
        (RGB.GREEN, RGB.BLUE),
        (RGB.BLUE, RGB.RED),
        (RGB.BLACK, RGB.WHITE),
    ])
    def test_monotonic_components(self, start, end):
        """l, u and v each move in one direction along the ramp."""
        ramp = components(gradient(start, end, 100))
        direction = np.sign(ramp[:, -1] - ramp[:, 0])[:, np.newaxis]

        assert np.all(np.diff(ramp, axis=1) * direction >= 0.0)

    def test_equal_components_constant(self):
        """Components with equal endpoints hold exactly still along the ramp."""
        rng = np.random.default_rng(12)
        for u in rng.uniform(-150.0, 150.0, size=50):
            ramp = gradient(CIELUV(10.0, u, 5.0), CIELUV(90.0, u, 5.0), 100)

            assert {c.u for c in ramp} == {ramp[0].u}
            assert {c.v for c in ramp} == {5.0}

    @pytest.mark.parametrize("start,end", [
        (RGB.RED, RGB.GREEN),
        (RGB.GREEN, RGB.BLUE),
        (RGB.BLUE, RGB.RED),
        (RGB.BLACK, RGB.WHITE),
    ])
    def test_hue_range(self, start, end):
        """Hue stays within [0, 360) at every step."""
        for color in gradient(start, end, 100):
            assert 0.0 <= color.hue() < 360.0

    @pytest.mark.parametrize("steps", [0, -1, 2.5])
    def test_invalid_steps(self, steps):
        with pytest.raises(ValueError, match="steps"):
            gradient(RGB.RED, RGB.GREEN, steps)

    def test_logs_gradient(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="luvrgbw.color.gradient"):
            gradient(RGB.RED, RGB.BLUE, 10)

        assert "Building 10 step gradient" in caplog.text


class TestGradientRGBW:
    """Tests for RGBW ramps."""

    def test_black_to_white(self):
        """A grey ramp only uses the white channel."""
        ramp = gradient_rgbw(RGB.BLACK, RGB.WHITE, 100)
        rgbw = components(ramp)

        assert len(ramp) == 101
        assert all(isinstance(c, RGBW) for c in ramp)
        assert ramp[0] == RGBW(0.0, 0.0, 0.0, 0.0)
        assert np.all(np.diff(rgbw[3]) >= -1e-6)
        assert rgbw[3, -1] > 0.99
        assert rgbw[:3].max() < 0.01

    def test_complementary_midpoint(self):
        """Green to magenta passes near grey: low saturation, white on."""
        start = to_cieluv(RGB.GREEN)
        end = to_cieluv(RGB.MAGENTA)
        ramp = gradient(RGB.GREEN, RGB.MAGENTA, 100)
        mid = ramp[50]

        assert 0.0 < mid.saturation() < min(start.saturation(), end.saturation())

        rgbw = gradient_rgbw(RGB.GREEN, RGB.MAGENTA, 100)[50]
        assert rgbw.r > 0.0
        assert rgbw.g > 0.0
        assert rgbw.b > 0.0
        assert rgbw.w > 0.0

    def test_channels_in_range(self):
        for start, end in [(RGB.RED, RGB.CYAN), (RGB.YELLOW, RGB.BLUE)]:
            for color in gradient_rgbw(start, end, 50):
                assert all(0.0 <= c <= 1.0 for c in color.channels)


class TestArrayGradient:
    """Tests for the vectorised ramp."""

    def test_interpolate_array(self):
        start = np.array([0.0, -20.0, 10.0])
        end = np.array([100.0, 20.0, -10.0])
        ramp = interpolate_array(start, end, np.linspace(0.0, 1.0, 5))

        assert ramp.shape == (3, 5)
        assert ramp.dtype == np.float32
        np.testing.assert_array_equal(ramp[:, 0], start.astype(np.float32))
        np.testing.assert_array_equal(ramp[:, -1], end.astype(np.float32))
        np.testing.assert_allclose(ramp[:, 2], [50.0, 0.0, 0.0], atol=1e-5)

    def test_interpolate_array_rejects_2d_t(self):
        with pytest.raises(ValueError, match="1-D"):
            interpolate_array(np.zeros(3), np.ones(3), np.zeros((2, 2)))

    def test_matches_scalar_gradient(self):
        """gradient_array agrees with gradient_rgbw step for step."""
        batch = gradient_array(RGB.RED, RGB.GREEN, 100)
        scalar = components(gradient_rgbw(RGB.RED, RGB.GREEN, 100))

        assert batch.shape == (4, 101)
        np.testing.assert_allclose(batch, scalar, atol=1e-4)

    def test_invalid_steps(self):
        with pytest.raises(ValueError):
            gradient_array(RGB.RED, RGB.GREEN, 0)
