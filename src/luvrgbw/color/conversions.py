"""
Color space conversion functions.

Channel-first array implementations of the RGB, XYZ, CIELUV and HCL
transforms. Every function takes an array whose first axis holds the
channels (shape (3,) for a single color, (3, N) or (3, H, W) for batches)
and returns float32 in the same layout.

RGB is gamma encoded sRGB in [0, 1]. XYZ is D65 with Y on the 0..100
scale. CIELUV lightness runs 0..100. HCL hue is in degrees.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike, NDArray

from luvrgbw.color.constants import (
    E,
    K,
    K_INVERSE,
    L_THRESHOLD,
    ONE_116,
    RGB_TO_XYZ,
    U_PRIME_REF,
    V_PRIME_REF,
    XYZ_TO_RGB,
    Y_REF,
)
from luvrgbw.color.transfer import linear_to_srgb, srgb_to_linear


def _channels(data: ArrayLike, count: int = 3) -> NDArray[np.float32]:
    """Coerce to float32 and check the channel axis."""
    arr = np.asarray(data, dtype=np.float32)
    if arr.ndim == 0 or arr.shape[0] != count:
        raise ValueError(
            f"Expected {count} channels on the first axis, got shape {arr.shape}"
        )
    return arr


def _clip(arr: NDArray) -> NDArray[np.float32]:
    """Clip array to [0, 1] range."""
    return np.clip(arr, 0.0, 1.0).astype(np.float32, copy=False)


def _apply_matrix(
    m: tuple[tuple[float, float, float], ...],
    a: NDArray,
    b: NDArray,
    c: NDArray,
) -> NDArray[np.float32]:
    """Multiply a 3x3 matrix by per-channel planes."""
    return np.stack(
        [row[0] * a + row[1] * b + row[2] * c for row in m], axis=0
    ).astype(np.float32, copy=False)


# =============================================================================
# RGB <-> XYZ (CIE 1931, D65 illuminant)
# =============================================================================

def rgb_to_xyz(rgb: ArrayLike) -> NDArray[np.float32]:
    """Convert sRGB to XYZ (0..100 scale)."""
    rgb = _channels(rgb)
    r = srgb_to_linear(rgb[0])
    g = srgb_to_linear(rgb[1])
    b = srgb_to_linear(rgb[2])

    # Based on sRGB Working Space Matrix
    # http://www.brucelindbloom.com/Eqn_RGB_XYZ_Matrix.html
    return _apply_matrix(RGB_TO_XYZ, r, g, b) * np.float32(Y_REF)


def xyz_to_linear_rgb(xyz: ArrayLike) -> NDArray[np.float32]:
    """
    Convert XYZ to linear RGB.

    Neither gamma encoded nor clamped; values may fall outside [0, 1] for
    out of gamut colors.
    """
    xyz = _channels(xyz) / np.float32(Y_REF)
    return _apply_matrix(XYZ_TO_RGB, xyz[0], xyz[1], xyz[2])


def xyz_to_rgb(xyz: ArrayLike) -> NDArray[np.float32]:
    """Convert XYZ to sRGB, clamped to [0, 1]."""
    return _clip(linear_to_srgb(xyz_to_linear_rgb(xyz)))


# =============================================================================
# XYZ <-> LUV (CIE 1976 L*u*v*)
# =============================================================================

def xyz_to_luv(xyz: ArrayLike) -> NDArray[np.float32]:
    """
    Convert XYZ to CIELUV.

    Verified against brucelindbloom.com Eqn_XYZ_to_Luv, with the K and E
    constants from LContinuity. Where x + 15y + 3z is zero (black) the
    chromaticity is undefined and u, v are returned as exactly zero.
    """
    xyz = _channels(xyz)
    x, y, z = xyz[0], xyz[1], xyz[2]

    denom = x + 15.0 * y + 3.0 * z
    degenerate = denom == 0.0
    safe = np.where(degenerate, np.float32(1.0), denom)

    u_prime = 4.0 * x / safe
    v_prime = 9.0 * y / safe
    y_ref = y / np.float32(Y_REF)

    L = np.where(y_ref > E, 116.0 * np.cbrt(y_ref) - 16.0, K * y_ref)

    u = np.where(degenerate, 0.0, 13.0 * L * (u_prime - U_PRIME_REF))
    v = np.where(degenerate, 0.0, 13.0 * L * (v_prime - V_PRIME_REF))

    return np.stack([L, u, v], axis=0).astype(np.float32)


def luv_to_xyz(luv: ArrayLike) -> NDArray[np.float32]:
    """
    Convert CIELUV to XYZ.

    L* == 0 maps to XYZ(0, 0, 0) exactly, as does any input whose
    recovered v' is zero.
    """
    luv = _channels(luv)
    L, u, v = luv[0], luv[1], luv[2]

    zero_l = L == 0.0
    l13 = 13.0 * np.where(zero_l, np.float32(1.0), L)

    u_prime = u / l13 + U_PRIME_REF
    v_prime = v / l13 + V_PRIME_REF

    y = np.where(
        L > L_THRESHOLD,
        Y_REF * np.power((L + 16.0) * ONE_116, 3),
        Y_REF * L / K_INVERSE,
    )

    degenerate = zero_l | (v_prime == 0.0)
    v4 = 4.0 * np.where(degenerate, np.float32(1.0), v_prime)

    x = y * 9.0 * u_prime / v4
    z = y * (12.0 - 3.0 * u_prime - 20.0 * v_prime) / v4

    xyz = np.stack([x, y, z], axis=0)
    return np.where(degenerate, 0.0, xyz).astype(np.float32)


# =============================================================================
# LUV metrics
# =============================================================================

def luv_chroma(luv: ArrayLike) -> NDArray[np.float32]:
    """Chroma: magnitude of the (u, v) vector."""
    luv = _channels(luv)
    return np.hypot(luv[1], luv[2]).astype(np.float32)


def luv_saturation(luv: ArrayLike) -> NDArray[np.float32]:
    """Saturation: chroma / L* where L* > 0, else 0."""
    luv = _channels(luv)
    chroma = luv_chroma(luv)
    lit = luv[0] > 0.0
    return np.divide(
        chroma, luv[0], out=np.zeros_like(chroma), where=lit
    ).astype(np.float32, copy=False)


def luv_hue(luv: ArrayLike) -> NDArray[np.float32]:
    """Hue angle in degrees, normalised to [0, 360)."""
    luv = _channels(luv)
    hue = np.mod(np.degrees(np.arctan2(luv[2], luv[1])), 360.0)
    # mod can round up to exactly 360 for tiny negative angles
    return np.where(hue >= 360.0, 0.0, hue).astype(np.float32)


# =============================================================================
# LUV <-> HCL (cylindrical CIELUV, a.k.a. CIELCh(uv))
# =============================================================================

def luv_to_hcl(luv: ArrayLike) -> NDArray[np.float32]:
    """Convert CIELUV to HCL (hue degrees, chroma, lightness)."""
    luv = _channels(luv)
    return np.stack([luv_hue(luv), luv_chroma(luv), luv[0]], axis=0).astype(np.float32)


def hcl_to_luv(hcl: ArrayLike) -> NDArray[np.float32]:
    """Convert HCL to CIELUV."""
    hcl = _channels(hcl)
    h_rad = np.radians(hcl[0])
    u = hcl[1] * np.cos(h_rad)
    v = hcl[1] * np.sin(h_rad)
    return np.stack([hcl[2], u, v], axis=0).astype(np.float32)


# =============================================================================
# Composite conversions
# =============================================================================

def rgb_to_luv(rgb: ArrayLike) -> NDArray[np.float32]:
    """Convert sRGB to CIELUV through XYZ."""
    return xyz_to_luv(rgb_to_xyz(rgb))


def luv_to_rgb(luv: ArrayLike) -> NDArray[np.float32]:
    """Convert CIELUV to sRGB through XYZ."""
    return xyz_to_rgb(luv_to_xyz(luv))


def rgb_to_hcl(rgb: ArrayLike) -> NDArray[np.float32]:
    """Convert sRGB to HCL through XYZ and CIELUV."""
    return luv_to_hcl(rgb_to_luv(rgb))


def hcl_to_rgb(hcl: ArrayLike) -> NDArray[np.float32]:
    """Convert HCL to sRGB through CIELUV and XYZ."""
    return luv_to_rgb(hcl_to_luv(hcl))


def xyz_to_hcl(xyz: ArrayLike) -> NDArray[np.float32]:
    """Convert XYZ to HCL through CIELUV."""
    return luv_to_hcl(xyz_to_luv(xyz))


def hcl_to_xyz(hcl: ArrayLike) -> NDArray[np.float32]:
    """Convert HCL to XYZ through CIELUV."""
    return luv_to_xyz(hcl_to_luv(hcl))


# =============================================================================
# Conversion dispatch
# =============================================================================

def _identity(data: ArrayLike) -> NDArray[np.float32]:
    return _channels(data).copy()


# All conversion functions, XYZ is the hub: (to_xyz, from_xyz)
COLORSPACE_CONVERTERS = {
    "RGB": (rgb_to_xyz, xyz_to_rgb),
    "XYZ": (_identity, _identity),
    "CIELUV": (luv_to_xyz, xyz_to_luv),
    "HCL": (hcl_to_xyz, xyz_to_hcl),
}

# Also used by ColorSpace.parse and convert_to_rgbw
COLORSPACE_ALIASES = {
    "LUV": "CIELUV",
    "CIEXYZ": "XYZ",
    "LCH": "HCL",
    "SRGB": "RGB",
}


def convert_colorspace(
    data: ArrayLike,
    from_space: str,
    to_space: str,
) -> NDArray[np.float32]:
    """
    Convert channel-first color data between color spaces.

    Args:
        data: Color data with 3 channels on the first axis
        from_space: Source color space name
        to_space: Target color space name

    Returns:
        Converted color data, float32
    """
    from_space = from_space.upper()
    to_space = to_space.upper()
    from_space = COLORSPACE_ALIASES.get(from_space, from_space)
    to_space = COLORSPACE_ALIASES.get(to_space, to_space)

    if from_space not in COLORSPACE_CONVERTERS:
        raise ValueError(f"Unknown source colorspace: {from_space}")
    if to_space not in COLORSPACE_CONVERTERS:
        raise ValueError(f"Unknown target colorspace: {to_space}")

    if from_space == to_space:
        return _identity(data)

    to_xyz_func, _ = COLORSPACE_CONVERTERS[from_space]
    _, from_xyz_func = COLORSPACE_CONVERTERS[to_space]

    # Convert via XYZ
    return from_xyz_func(to_xyz_func(data))


def list_colorspaces() -> list[str]:
    """Get list of supported color spaces."""
    return sorted(COLORSPACE_CONVERTERS)
