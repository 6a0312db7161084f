"""
Reference white and CIELUV constants.

There is exactly one illuminant (D65). Every conversion in the package
reads these values; nothing reassigns them.
"""

from __future__ import annotations

# D65 reference white, Y normalised to 100
X_REF = 95.047
Y_REF = 100.0
Z_REF = 108.883

# CIE constants (see brucelindbloom.com LContinuity)
K = 24389.0 / 27.0
E = 216.0 / 24389.0

U_PRIME_REF = 4.0 * X_REF / (X_REF + 15.0 * Y_REF + 3.0 * Z_REF)
V_PRIME_REF = 9.0 * Y_REF / (X_REF + 15.0 * Y_REF + 3.0 * Z_REF)

# Inverse lightness: linear branch below L* = 8
L_THRESHOLD = 8.0
K_INVERSE = 903.3

# sRGB companding
GAMMA = 2.4
CORR_RATIO = 1.0 / GAMMA
SRGB_THRESHOLD = 0.04045
LINEAR_THRESHOLD = 0.0031308

ONE_116 = 1.0 / 116.0

# Linear sRGB -> XYZ (sRGB working space matrix, D65)
RGB_TO_XYZ = (
    (0.4124564, 0.3575761, 0.1804375),
    (0.2126729, 0.7151522, 0.0721750),
    (0.0193339, 0.1191920, 0.9503041),
)

# XYZ -> linear sRGB.
# sYCC: Amendment 1 to IEC 61966-2-1:1999, seven decimals.
# Not the exact inverse of RGB_TO_XYZ: an RGB round trip leaves residuals
# of up to ~1e-4 in linear RGB (~1.4e-3 once gamma encoded).
XYZ_TO_RGB = (
    (3.2406255, -1.5372080, -0.4986286),
    (-0.9689307, 1.8758561, 0.0415175),
    (0.0557101, -0.2040211, 1.0570959),
)

# Defaults for the fixed-factor RGBW policy
WHITE_FACTOR = 0.5
WHITE_SCALING = 1.0
