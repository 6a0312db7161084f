"""Core value types, settings and conversion registry."""

from luvrgbw.core.data_types import (
    CIELUV,
    COLOR_TYPES,
    HCL,
    RGB,
    RGBW,
    XYZ,
    Color,
    ColorSpace,
)
from luvrgbw.core.config import DEFAULT_RGBW_CONFIG, RGBWConfig, RGBWPolicy
from luvrgbw.core.registry import ConversionRegistry, register_conversion

__all__ = [
    "Color",
    "ColorSpace",
    "COLOR_TYPES",
    "RGB",
    "RGBW",
    "XYZ",
    "CIELUV",
    "HCL",
    "RGBWConfig",
    "RGBWPolicy",
    "DEFAULT_RGBW_CONFIG",
    "ConversionRegistry",
    "register_conversion",
]
