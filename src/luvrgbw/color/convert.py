"""
Pairwise conversions between color values.

Every edge of the conversion graph is registered here. Composite edges
route through XYZ (the hub space) and CIELUV (the perceptual space), and
never through more than the spaces needed to reach the target.
"""

from __future__ import annotations

from typing import Any

from luvrgbw.color import conversions, rgbw
from luvrgbw.core.config import RGBWConfig
from luvrgbw.core.data_types import (
    CIELUV,
    HCL,
    RGB,
    RGBW,
    XYZ,
    Color,
    ColorSpace,
)
from luvrgbw.core.registry import ConversionRegistry, register_conversion


# =============================================================================
# RGB <-> XYZ
# =============================================================================

@register_conversion(ColorSpace.RGB, ColorSpace.XYZ)
def rgb_to_xyz(rgb: RGB, config: RGBWConfig | None = None) -> XYZ:
    """Decompand and apply the sRGB working space matrix."""
    return XYZ.from_array(conversions.rgb_to_xyz(rgb.to_array()))


@register_conversion(ColorSpace.XYZ, ColorSpace.RGB)
def xyz_to_rgb(xyz: XYZ, config: RGBWConfig | None = None) -> RGB:
    """Apply the sYCC inverse matrix, gamma encode and clamp."""
    return RGB.from_array(conversions.xyz_to_rgb(xyz.to_array()))


# =============================================================================
# XYZ <-> CIELUV
# =============================================================================

@register_conversion(ColorSpace.XYZ, ColorSpace.CIELUV)
def xyz_to_cieluv(xyz: XYZ, config: RGBWConfig | None = None) -> CIELUV:
    """CIE 1976 L*u*v* from XYZ; black maps to exactly zero."""
    return CIELUV.from_array(conversions.xyz_to_luv(xyz.to_array()))


@register_conversion(ColorSpace.CIELUV, ColorSpace.XYZ)
def cieluv_to_xyz(cieluv: CIELUV, config: RGBWConfig | None = None) -> XYZ:
    """Inverse CIELUV; l == 0 maps to exactly zero."""
    return XYZ.from_array(conversions.luv_to_xyz(cieluv.to_array()))


@register_conversion(ColorSpace.RGB, ColorSpace.CIELUV)
def rgb_to_cieluv(rgb: RGB, config: RGBWConfig | None = None) -> CIELUV:
    """Through XYZ."""
    return xyz_to_cieluv(rgb_to_xyz(rgb))


@register_conversion(ColorSpace.CIELUV, ColorSpace.RGB)
def cieluv_to_rgb(cieluv: CIELUV, config: RGBWConfig | None = None) -> RGB:
    """Through XYZ."""
    return xyz_to_rgb(cieluv_to_xyz(cieluv))


# =============================================================================
# CIELUV <-> HCL
# =============================================================================

@register_conversion(ColorSpace.HCL, ColorSpace.CIELUV)
def hcl_to_cieluv(hcl: HCL, config: RGBWConfig | None = None) -> CIELUV:
    """Polar to rectangular u, v; lightness passes through."""
    return CIELUV.from_array(conversions.hcl_to_luv(hcl.to_array()))


@register_conversion(ColorSpace.CIELUV, ColorSpace.HCL)
def cieluv_to_hcl(cieluv: CIELUV, config: RGBWConfig | None = None) -> HCL:
    """Hue angle in degrees and chroma from u, v."""
    return HCL.from_array(conversions.luv_to_hcl(cieluv.to_array()))


@register_conversion(ColorSpace.HCL, ColorSpace.XYZ)
def hcl_to_xyz(hcl: HCL, config: RGBWConfig | None = None) -> XYZ:
    """Through CIELUV."""
    return cieluv_to_xyz(hcl_to_cieluv(hcl))


@register_conversion(ColorSpace.XYZ, ColorSpace.HCL)
def xyz_to_hcl(xyz: XYZ, config: RGBWConfig | None = None) -> HCL:
    """Through CIELUV."""
    return cieluv_to_hcl(xyz_to_cieluv(xyz))


@register_conversion(ColorSpace.HCL, ColorSpace.RGB)
def hcl_to_rgb(hcl: HCL, config: RGBWConfig | None = None) -> RGB:
    """Through CIELUV, then XYZ."""
    return cieluv_to_rgb(hcl_to_cieluv(hcl))


@register_conversion(ColorSpace.RGB, ColorSpace.HCL)
def rgb_to_hcl(rgb: RGB, config: RGBWConfig | None = None) -> HCL:
    """Through XYZ, then CIELUV."""
    return cieluv_to_hcl(rgb_to_cieluv(rgb))


# =============================================================================
# -> RGBW
# =============================================================================

@register_conversion(ColorSpace.RGB, ColorSpace.RGBW)
def rgb_to_rgbw(rgb: RGB, config: RGBWConfig | None = None) -> RGBW:
    """Pure RGB values convert directly, without adding any white."""
    return RGBW(rgb.r, rgb.g, rgb.b, 0.0)


@register_conversion(ColorSpace.XYZ, ColorSpace.RGBW)
def xyz_to_rgbw(xyz: XYZ, config: RGBWConfig | None = None) -> RGBW:
    """
    Through RGB; the white channel stays 0.

    Convert to CIELUV first when a white split is wanted.
    """
    return rgb_to_rgbw(xyz_to_rgb(xyz))


@register_conversion(ColorSpace.CIELUV, ColorSpace.RGBW)
def cieluv_to_rgbw(cieluv: CIELUV, config: RGBWConfig | None = None) -> RGBW:
    """
    Derive RGB and white from a CIELUV color.

    With the default saturation policy, the RGB components are the
    CIELUV -> XYZ -> linear RGB result scaled by saturation and the white
    amount is Y * (1 - saturation). This gives good saturation for deep
    reds on SK6812 LEDs while avoiding whites mixed from the RGB emitters.
    """
    return RGBW.from_array(rgbw.luv_to_rgbw(cieluv.to_array(), config))


@register_conversion(ColorSpace.HCL, ColorSpace.RGBW)
def hcl_to_rgbw(hcl: HCL, config: RGBWConfig | None = None) -> RGBW:
    """Through CIELUV, then the configured RGBW policy."""
    return cieluv_to_rgbw(hcl_to_cieluv(hcl), config)


# =============================================================================
# Dispatch
# =============================================================================

def convert(
    color: Color,
    target: ColorSpace | str | type[Color],
    config: RGBWConfig | None = None,
) -> Color:
    """
    Convert a color value to another color space.

    Args:
        color: Any color value (RGB, XYZ, CIELUV, HCL; RGBW only as identity)
        target: Target color space, its name, or a value type class
        config: RGBW settings, used when the target is RGBW

    Returns:
        A new value in the target space (the input itself if already there)

    Raises:
        TypeError: If color is not a color value
        ValueError: If target is unknown or no conversion exists for the pair
    """
    if not isinstance(color, Color):
        raise TypeError(f"Unsupported type: {type(color).__name__}")

    source = color.space
    target = ColorSpace.parse(target)

    if source is target:
        return color

    func = ConversionRegistry.get(source, target)
    if func is None:
        raise ValueError(
            f"No conversion from {source.value} to {target.value}"
        )
    return func(color, config=config)


def to_cieluv(color: Any) -> CIELUV:
    """Convert any supported color value to CIELUV."""
    return convert(color, ColorSpace.CIELUV)  # type: ignore[return-value]


def to_rgbw(color: Any, config: RGBWConfig | None = None) -> RGBW:
    """Convert any supported color value to RGBW."""
    return convert(color, ColorSpace.RGBW, config)  # type: ignore[return-value]
