"""
RGBW derivation.

Splits the achromatic part of a color into a dedicated white channel for
LED hardware with a true white emitter (SK6812 RGBW and similar).

Two policies exist and are never blended:

* SATURATION: the CIELUV saturation decides the split. The chromatic
  channels are scaled by saturation and the white channel is
  Y * (1 - saturation). Fully saturated colors pass through as pure RGB,
  near-greys route their luminance into white instead of an RGB mixture.
* WHITE_FACTOR: white is a fixed share of luminance and a weighted amount
  of it is subtracted from each RGB channel. Ignores saturation.
"""

from __future__ import annotations

import logging

import numpy as np
from numpy.typing import ArrayLike, NDArray

from luvrgbw.color.constants import Y_REF
from luvrgbw.color.conversions import (
    COLORSPACE_ALIASES,
    _channels,
    _clip,
    hcl_to_luv,
    luv_saturation,
    luv_to_xyz,
    xyz_to_linear_rgb,
    xyz_to_rgb,
)
from luvrgbw.color.transfer import linear_to_srgb
from luvrgbw.core.config import DEFAULT_RGBW_CONFIG, RGBWConfig, RGBWPolicy

logger = logging.getLogger(__name__)


def _encode(linear: NDArray) -> NDArray[np.float32]:
    """Gamma encode then clamp each channel independently."""
    return _clip(linear_to_srgb(linear))


def rgb_to_rgbw(rgb: ArrayLike) -> NDArray[np.float32]:
    """Plain RGB to RGBW: channels pass through, no white."""
    rgb = _channels(rgb)
    w = np.zeros_like(rgb[0])
    return np.concatenate([rgb, w[np.newaxis]], axis=0).astype(np.float32)


def xyz_to_rgbw(xyz: ArrayLike) -> NDArray[np.float32]:
    """
    XYZ to RGBW through RGB.

    No white is derived without a CIELUV saturation; use luv_to_rgbw for
    a white split.
    """
    return rgb_to_rgbw(xyz_to_rgb(xyz))


def luv_to_rgbw_saturation(luv: ArrayLike) -> NDArray[np.float32]:
    """CIELUV to RGBW with the saturation-weighted white split."""
    luv = _channels(luv)

    # Color saturation, ~0..1 for in-gamut colors, larger for deep primaries
    saturation = luv_saturation(luv)
    whiteness = 1.0 - saturation

    xyz = luv_to_xyz(luv)
    rgb = xyz_to_linear_rgb(xyz) * saturation
    w = xyz[1] / np.float32(Y_REF) * whiteness

    return _encode(np.concatenate([rgb, w[np.newaxis]], axis=0))


def luv_to_rgbw_white_factor(
    luv: ArrayLike,
    white_factor: float,
    white_scaling: float,
) -> NDArray[np.float32]:
    """CIELUV to RGBW with a fixed share of luminance routed to white."""
    xyz = luv_to_xyz(luv)
    w = xyz[1] / np.float32(Y_REF) * np.float32(white_factor)
    rgb = xyz_to_linear_rgb(xyz) - w * np.float32(white_scaling)

    return _encode(np.concatenate([rgb, w[np.newaxis]], axis=0))


def luv_to_rgbw(
    luv: ArrayLike,
    config: RGBWConfig | None = None,
) -> NDArray[np.float32]:
    """
    Convert CIELUV to RGBW using the configured policy.

    Args:
        luv: CIELUV data with 3 channels on the first axis
        config: RGBW settings, DEFAULT_RGBW_CONFIG when omitted

    Returns:
        RGBW data with 4 channels on the first axis, each in [0, 1]
    """
    config = config or DEFAULT_RGBW_CONFIG

    if config.policy is RGBWPolicy.SATURATION:
        return luv_to_rgbw_saturation(luv)
    if config.policy is RGBWPolicy.WHITE_FACTOR:
        return luv_to_rgbw_white_factor(
            luv, config.white_factor, config.white_scaling
        )
    raise ValueError(f"Unknown RGBW policy: {config.policy}")


def hcl_to_rgbw(
    hcl: ArrayLike,
    config: RGBWConfig | None = None,
) -> NDArray[np.float32]:
    """HCL to RGBW through CIELUV."""
    return luv_to_rgbw(hcl_to_luv(hcl), config)


def convert_to_rgbw(
    data: ArrayLike,
    from_space: str,
    config: RGBWConfig | None = None,
) -> NDArray[np.float32]:
    """
    Convert channel-first color data to RGBW.

    Args:
        data: Color data with 3 channels on the first axis
        from_space: Source color space name (RGB, XYZ, CIELUV/LUV, HCL)
        config: RGBW settings for CIELUV and HCL sources

    Returns:
        RGBW data, float32
    """
    space = from_space.upper()
    space = COLORSPACE_ALIASES.get(space, space)
    logger.debug("Converting %s data of shape %s to RGBW", space, np.shape(data))
    if space == "RGB":
        return rgb_to_rgbw(data)
    if space == "XYZ":
        return xyz_to_rgbw(data)
    if space == "CIELUV":
        return luv_to_rgbw(data, config)
    if space == "HCL":
        return hcl_to_rgbw(data, config)
    raise ValueError(f"Unknown source colorspace: {from_space}")
