"""
Gradients through the CIELUV color space.

Linear interpolation in CIELUV approximates perceptual linearity far
better than interpolating gamma encoded RGB, so every ramp is built here
and only converted to RGB/RGBW at the end.
"""

from __future__ import annotations

import logging

import numpy as np
from numpy.typing import ArrayLike, NDArray

from luvrgbw.color import rgbw
from luvrgbw.color.conversions import _channels
from luvrgbw.color.convert import to_cieluv, to_rgbw
from luvrgbw.color.transfer import lerp
from luvrgbw.core.config import RGBWConfig
from luvrgbw.core.data_types import CIELUV, RGBW, Color

logger = logging.getLogger(__name__)


def interpolate(start: CIELUV, end: CIELUV, t: float) -> CIELUV:
    """
    Interpolate between two CIELUV colors.

    t = 0.0 returns start, t = 1.0 returns end, anything else is linear
    in l, u and v. t is not clamped.
    """
    return start.interpolate(end, t)


def _steps(steps: int) -> int:
    if isinstance(steps, bool) or int(steps) != steps:
        raise ValueError(f"steps must be an integer, got {steps!r}")
    if steps < 1:
        raise ValueError(f"steps must be >= 1, got {steps}")
    return int(steps)


def gradient(start: Color, end: Color, steps: int) -> list[CIELUV]:
    """
    Build an evenly spaced CIELUV ramp.

    Args:
        start: First color, any space convertible to CIELUV
        end: Last color, any space convertible to CIELUV
        steps: Number of intervals; the ramp holds steps + 1 colors

    Returns:
        Colors at t = i / steps for i in 0..steps
    """
    steps = _steps(steps)
    a = to_cieluv(start)
    b = to_cieluv(end)
    logger.debug("Building %d step gradient from %s to %s", steps, a, b)

    return [a.interpolate(b, i / steps) for i in range(steps + 1)]


def gradient_rgbw(
    start: Color,
    end: Color,
    steps: int,
    config: RGBWConfig | None = None,
) -> list[RGBW]:
    """
    Build an evenly spaced ramp in CIELUV and convert every step to RGBW.

    Args:
        start: First color
        end: Last color
        steps: Number of intervals; the ramp holds steps + 1 colors
        config: RGBW settings

    Returns:
        RGBW colors, each channel in [0, 1]
    """
    return [to_rgbw(color, config) for color in gradient(start, end, steps)]


def interpolate_array(
    start: ArrayLike,
    end: ArrayLike,
    t: ArrayLike,
) -> NDArray[np.float32]:
    """
    Vectorised CIELUV interpolation.

    Args:
        start: CIELUV start color, shape (3,)
        end: CIELUV end color, shape (3,)
        t: Interpolation parameters, shape (N,)

    Returns:
        CIELUV ramp, shape (3, N)
    """
    start = _channels(start)
    end = _channels(end)
    t = np.atleast_1d(np.asarray(t, dtype=np.float32))
    if t.ndim != 1:
        raise ValueError(f"t must be 1-D, got shape {t.shape}")

    return lerp(start[:, np.newaxis], end[:, np.newaxis], t[np.newaxis, :])


def gradient_array(
    start: Color,
    end: Color,
    steps: int,
    config: RGBWConfig | None = None,
) -> NDArray[np.float32]:
    """
    Batch equivalent of gradient_rgbw.

    Returns:
        RGBW ramp as a float32 array of shape (4, steps + 1)
    """
    steps = _steps(steps)
    t = np.arange(steps + 1, dtype=np.float32) / np.float32(steps)
    ramp = interpolate_array(
        to_cieluv(start).to_array(), to_cieluv(end).to_array(), t
    )
    return rgbw.luv_to_rgbw(ramp, config)
