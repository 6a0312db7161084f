"""
luvrgbw - color conversion and CIELUV gradients for RGBW LEDs.

Converts between sRGB, CIE 1931 XYZ, CIELUV and HCL, interpolates in
CIELUV and derives a four-channel RGB+White output.
"""

__version__ = "0.1.0"

from luvrgbw.core import (
    CIELUV,
    DEFAULT_RGBW_CONFIG,
    HCL,
    RGB,
    RGBW,
    XYZ,
    Color,
    ColorSpace,
    ConversionRegistry,
    RGBWConfig,
    RGBWPolicy,
)
from luvrgbw.color.convert import convert, to_cieluv, to_rgbw
from luvrgbw.color.gradient import (
    gradient,
    gradient_array,
    gradient_rgbw,
    interpolate,
    interpolate_array,
)
from luvrgbw.color.transfer import lerp, linear_to_srgb, srgb_to_linear

__all__ = [
    "__version__",
    "Color",
    "ColorSpace",
    "RGB",
    "RGBW",
    "XYZ",
    "CIELUV",
    "HCL",
    "RGBWConfig",
    "RGBWPolicy",
    "DEFAULT_RGBW_CONFIG",
    "ConversionRegistry",
    "convert",
    "to_cieluv",
    "to_rgbw",
    "interpolate",
    "interpolate_array",
    "gradient",
    "gradient_rgbw",
    "gradient_array",
    "srgb_to_linear",
    "linear_to_srgb",
    "lerp",
]
