"""
RGBW derivation settings.

The reference white is fixed (see luvrgbw.color.constants). The only
runtime choice is how the white channel of an RGBW output is derived.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum

from luvrgbw.color.constants import WHITE_FACTOR, WHITE_SCALING


class RGBWPolicy(str, Enum):
    """Supported white channel derivations."""

    # w = Y * (1 - saturation), RGB scaled by saturation
    SATURATION = "saturation"
    # w = Y * white_factor, subtracted from each RGB channel
    WHITE_FACTOR = "white_factor"


@dataclass(frozen=True)
class RGBWConfig:
    """
    Immutable settings for RGBW output.

    Attributes:
        policy: How the white channel is derived
        white_factor: Share of luminance routed to white (WHITE_FACTOR only)
        white_scaling: Weight of the white channel subtracted from each
            RGB channel (WHITE_FACTOR only)
    """

    policy: RGBWPolicy | str = RGBWPolicy.SATURATION
    white_factor: float = WHITE_FACTOR
    white_scaling: float = WHITE_SCALING

    def __post_init__(self) -> None:
        """Validate and normalize the config after creation."""
        if isinstance(self.policy, str) and not isinstance(self.policy, RGBWPolicy):
            try:
                object.__setattr__(self, "policy", RGBWPolicy(self.policy.lower()))
            except ValueError:
                valid = ", ".join(p.value for p in RGBWPolicy)
                raise ValueError(
                    f"Unknown RGBW policy: {self.policy!r} (expected one of {valid})"
                ) from None

        for name in ("white_factor", "white_scaling"):
            value = float(getattr(self, name))
            if not math.isfinite(value) or value < 0.0:
                raise ValueError(f"{name} must be a finite value >= 0, got {value}")
            object.__setattr__(self, name, value)


DEFAULT_RGBW_CONFIG = RGBWConfig()
