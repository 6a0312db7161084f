"""
Scalar transfer functions: sRGB companding and linear interpolation.

All functions are vectorised. They accept Python floats or numpy arrays of
any shape and return float32 results.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike, NDArray

from luvrgbw.color.constants import (
    CORR_RATIO,
    GAMMA,
    LINEAR_THRESHOLD,
    SRGB_THRESHOLD,
)


def srgb_to_linear(c: ArrayLike) -> NDArray[np.float32]:
    """
    Convert gamma encoded sRGB to linear RGB (inverse companding).

    Verified against brucelindbloom.com Eqn_RGB_to_XYZ.
    """
    c = np.asarray(c, dtype=np.float32)
    with np.errstate(invalid="ignore"):
        linear = np.where(
            c <= SRGB_THRESHOLD, c / 12.92, np.power((c + 0.055) / 1.055, GAMMA)
        )
    return linear.astype(np.float32, copy=False)


def linear_to_srgb(c: ArrayLike) -> NDArray[np.float32]:
    """
    Convert linear RGB to gamma encoded sRGB.

    The result is not clamped; callers clamp after encoding.
    """
    c = np.asarray(c, dtype=np.float32)
    with np.errstate(invalid="ignore"):
        encoded = np.where(
            c <= LINEAR_THRESHOLD, 12.92 * c, 1.055 * np.power(c, CORR_RATIO) - 0.055
        )
    return encoded.astype(np.float32, copy=False)


def lerp(start: ArrayLike, end: ArrayLike, t: ArrayLike) -> NDArray[np.float32]:
    """
    Linear interpolation between start and end.

    start + t * (end - start), monotonic in t, so a channel with equal
    endpoints stays constant. t=0 and t=1 return the endpoints bit for bit.
    t is not clamped.
    """
    start = np.asarray(start, dtype=np.float32)
    end = np.asarray(end, dtype=np.float32)
    t = np.asarray(t, dtype=np.float32)
    # start + (end - start) can round away from end
    return np.where(t == 1.0, end, start + t * (end - start)).astype(
        np.float32, copy=False
    )
