"""
Core data types for luvrgbw.

Provides the ColorSpace enum and one immutable value type per color
space: RGB, RGBW, XYZ, CIELUV and HCL. Channels are stored as Python
floats rounded to single precision.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from enum import Enum
from typing import Any, ClassVar

import numpy as np
from numpy.typing import ArrayLike, NDArray

from luvrgbw.color.conversions import (
    COLORSPACE_ALIASES,
    luv_chroma,
    luv_hue,
    luv_saturation,
)
from luvrgbw.color.transfer import lerp


class ColorSpace(str, Enum):
    """Supported color spaces."""

    RGB = "RGB"
    RGBW = "RGBW"
    XYZ = "XYZ"
    CIELUV = "CIELUV"
    HCL = "HCL"

    @classmethod
    def parse(cls, value: Any) -> ColorSpace:
        """
        Resolve a color space from an enum member, a name or a value type.

        Names are case-insensitive and accept the aliases LUV, CIEXYZ, LCH
        and SRGB.

        Raises:
            ValueError: If the name is not a known color space
            TypeError: If value is none of the accepted kinds
        """
        if isinstance(value, ColorSpace):
            return value
        if isinstance(value, type) and issubclass(value, Color):
            # the abstract Color base has no space
            if isinstance(getattr(value, "space", None), ColorSpace):
                return value.space
            raise TypeError(f"{value.__name__} is not bound to a colorspace")
        if isinstance(value, str):
            name = value.strip().upper()
            name = COLORSPACE_ALIASES.get(name, name)
            try:
                return cls(name)
            except ValueError:
                raise ValueError(f"Unknown colorspace: {value}") from None
        raise TypeError(f"Cannot interpret {type(value).__name__} as a colorspace")


@dataclass(frozen=True)
class Color:
    """
    Base class for color values.

    Subclasses declare their channels as float fields. Instances are
    immutable; conversions always return new values.
    """

    space: ClassVar[ColorSpace]
    title: ClassVar[str]
    labels: ClassVar[tuple[str, ...]]

    def __post_init__(self) -> None:
        """Round every channel to single precision."""
        for f in fields(self):
            object.__setattr__(self, f.name, float(np.float32(getattr(self, f.name))))

    def __str__(self) -> str:
        channels = ", ".join(
            f"{label}={value:1.2f}" for label, value in zip(self.labels, self.channels)
        )
        return f"{self.title} {channels}"

    @property
    def channels(self) -> tuple[float, ...]:
        """Channel values in declaration order."""
        return tuple(getattr(self, f.name) for f in fields(self))

    def to_array(self) -> NDArray[np.float32]:
        """Channels as a 1-D float32 array."""
        return np.array(self.channels, dtype=np.float32)

    @classmethod
    def from_array(cls, data: ArrayLike) -> Color:
        """
        Build a value from a 1-D array of channels.

        Raises:
            ValueError: If the array does not hold exactly one value per channel
        """
        arr = np.asarray(data, dtype=np.float32)
        expected = (len(fields(cls)),)
        if arr.shape != expected:
            raise ValueError(
                f"{cls.__name__} expects an array of shape {expected}, got {arr.shape}"
            )
        return cls(*(float(v) for v in arr))


@dataclass(frozen=True)
class RGB(Color):
    """
    A color in the sRGB color space, gamma encoded.

    Attributes:
        r: Red, nominally 0..1
        g: Green, nominally 0..1
        b: Blue, nominally 0..1
    """

    r: float = 0.0
    g: float = 0.0
    b: float = 0.0

    space: ClassVar[ColorSpace] = ColorSpace.RGB
    title: ClassVar[str] = "RGB"
    labels: ClassVar[tuple[str, ...]] = ("R", "G", "B")

    BLACK: ClassVar[RGB]
    WHITE: ClassVar[RGB]
    RED: ClassVar[RGB]
    GREEN: ClassVar[RGB]
    BLUE: ClassVar[RGB]
    YELLOW: ClassVar[RGB]
    MAGENTA: ClassVar[RGB]
    CYAN: ClassVar[RGB]


RGB.BLACK = RGB(0.0, 0.0, 0.0)
RGB.WHITE = RGB(1.0, 1.0, 1.0)
RGB.RED = RGB(1.0, 0.0, 0.0)
RGB.GREEN = RGB(0.0, 1.0, 0.0)
RGB.BLUE = RGB(0.0, 0.0, 1.0)
RGB.YELLOW = RGB(1.0, 1.0, 0.0)
RGB.MAGENTA = RGB(1.0, 0.0, 1.0)
RGB.CYAN = RGB(0.0, 1.0, 1.0)


@dataclass(frozen=True)
class RGBW(Color):
    """
    RGB plus a white channel, for LEDs with a dedicated white emitter.

    Every conversion producing RGBW clamps all four channels to [0, 1].
    """

    r: float = 0.0
    g: float = 0.0
    b: float = 0.0
    w: float = 0.0

    space: ClassVar[ColorSpace] = ColorSpace.RGBW
    title: ClassVar[str] = "RGBW"
    labels: ClassVar[tuple[str, ...]] = ("R", "G", "B", "W")


@dataclass(frozen=True)
class XYZ(Color):
    """
    CIE 1931 XYZ, D65 white point, linear light.

    Attributes:
        x: Mix of the three RGB curves, 0..~95
        y: Luminance, 0..100
        z: Quasi-equal to blue, 0..~109
    """

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    space: ClassVar[ColorSpace] = ColorSpace.XYZ
    title: ClassVar[str] = "CIEXYZ"
    labels: ClassVar[tuple[str, ...]] = ("X", "Y", "Z")


@dataclass(frozen=True)
class CIELUV(Color):
    """
    CIE 1976 L*, u*, v*.

    Attributes:
        l: Lightness, 0..100
        u: Green/red axis, roughly -134..224
        v: Blue/yellow axis, roughly -140..122

    Linear interpolation in this space is close to perceptually uniform,
    which is why gradients are built here.
    """

    l: float = 0.0  # noqa: E741
    u: float = 0.0
    v: float = 0.0

    space: ClassVar[ColorSpace] = ColorSpace.CIELUV
    title: ClassVar[str] = "CIELUV"
    labels: ClassVar[tuple[str, ...]] = ("L*", "u*", "v*")

    def chroma(self) -> float:
        """Magnitude of the (u, v) vector."""
        return float(luv_chroma(self.to_array()))

    def saturation(self) -> float:
        """Chroma normalised by lightness; 0 when l <= 0."""
        return float(luv_saturation(self.to_array()))

    def hue(self) -> float:
        """Hue angle in degrees, in [0, 360)."""
        return float(luv_hue(self.to_array()))

    def interpolate(self, end: CIELUV, t: float) -> CIELUV:
        """
        Interpolate towards end.

        t = 0.0 returns this color and t = 1.0 returns end. Values in
        between are linear in CIELUV; t outside [0, 1] extrapolates.
        """
        return CIELUV.from_array(lerp(self.to_array(), end.to_array(), t))


@dataclass(frozen=True)
class HCL(Color):
    """
    Cylindrical CIELUV (CIELCh(uv)).

    Attributes:
        h: Hue angle in degrees, 0..360
        c: Chroma, the (u, v) magnitude
        l: Lightness, as CIELUV l
    """

    h: float = 0.0
    c: float = 0.0
    l: float = 0.0  # noqa: E741

    space: ClassVar[ColorSpace] = ColorSpace.HCL
    title: ClassVar[str] = "HCL"
    labels: ClassVar[tuple[str, ...]] = ("H", "C", "L")


COLOR_TYPES: dict[ColorSpace, type[Color]] = {
    ColorSpace.RGB: RGB,
    ColorSpace.RGBW: RGBW,
    ColorSpace.XYZ: XYZ,
    ColorSpace.CIELUV: CIELUV,
    ColorSpace.HCL: HCL,
}
