"""Color space transforms operating on channel-first numpy arrays."""

from luvrgbw.color.transfer import lerp, linear_to_srgb, srgb_to_linear
from luvrgbw.color.conversions import (
    convert_colorspace,
    hcl_to_luv,
    list_colorspaces,
    luv_chroma,
    luv_hue,
    luv_saturation,
    luv_to_hcl,
    luv_to_xyz,
    rgb_to_xyz,
    xyz_to_luv,
    xyz_to_rgb,
)

__all__ = [
    "srgb_to_linear",
    "linear_to_srgb",
    "lerp",
    "rgb_to_xyz",
    "xyz_to_rgb",
    "xyz_to_luv",
    "luv_to_xyz",
    "luv_to_hcl",
    "hcl_to_luv",
    "luv_chroma",
    "luv_saturation",
    "luv_hue",
    "convert_colorspace",
    "list_colorspaces",
]
