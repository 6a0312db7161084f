"""
Conversion registration system.

Provides a global registry of pairwise color conversions, forming a
directed graph between color spaces, plus a decorator for easy
registration.
"""

from __future__ import annotations

import logging
from typing import Callable

from luvrgbw.core.data_types import Color, ColorSpace

logger = logging.getLogger(__name__)

ConversionFunc = Callable[..., Color]


class ConversionRegistry:
    """
    Global registry of conversion functions.

    Each edge maps a (source, target) pair of color spaces to a function
    taking a value of the source type (and an optional config keyword)
    and returning a value of the target type.

    Usage:
        # Register with the decorator
        @register_conversion(ColorSpace.RGB, ColorSpace.XYZ)
        def rgb_to_xyz(rgb, config=None):
            ...

        # Look up a conversion
        func = ConversionRegistry.get(ColorSpace.RGB, ColorSpace.XYZ)
    """

    _registry: dict[tuple[ColorSpace, ColorSpace], ConversionFunc] = {}

    @classmethod
    def register(
        cls,
        source: ColorSpace | str,
        target: ColorSpace | str,
        func: ConversionFunc,
    ) -> ConversionFunc:
        """
        Register a conversion function.

        Args:
            source: Color space the function accepts
            target: Color space the function produces
            func: The conversion function

        Returns:
            The registered function (for decorator use)
        """
        key = (ColorSpace.parse(source), ColorSpace.parse(target))
        if key[0] == key[1]:
            raise ValueError(f"Cannot register identity conversion for {key[0].value}")

        if key in cls._registry:
            logger.debug("Replacing conversion %s -> %s", key[0].value, key[1].value)

        cls._registry[key] = func
        return func

    @classmethod
    def unregister(cls, source: ColorSpace | str, target: ColorSpace | str) -> bool:
        """
        Unregister a conversion.

        Returns:
            True if unregistered, False if not found
        """
        key = (ColorSpace.parse(source), ColorSpace.parse(target))
        return cls._registry.pop(key, None) is not None

    @classmethod
    def get(
        cls, source: ColorSpace | str, target: ColorSpace | str
    ) -> ConversionFunc | None:
        """
        Get the conversion function for a pair of spaces.

        Returns:
            Conversion function or None if the pair is not registered
        """
        return cls._registry.get((ColorSpace.parse(source), ColorSpace.parse(target)))

    @classmethod
    def targets(cls, source: ColorSpace | str) -> list[ColorSpace]:
        """
        List the spaces reachable from source in one registered step.

        Returns:
            Target color spaces, in registration order
        """
        source = ColorSpace.parse(source)
        return [dst for (src, dst) in cls._registry if src is source]

    @classmethod
    def edges(cls) -> list[tuple[ColorSpace, ColorSpace]]:
        """
        List all registered (source, target) pairs.

        Returns:
            List of pairs
        """
        return list(cls._registry.keys())


def register_conversion(
    source: ColorSpace | str, target: ColorSpace | str
) -> Callable[[ConversionFunc], ConversionFunc]:
    """
    Decorator to register a conversion function.

    Usage:
        @register_conversion(ColorSpace.XYZ, ColorSpace.CIELUV)
        def xyz_to_cieluv(xyz, config=None):
            ...
    """

    def decorator(func: ConversionFunc) -> ConversionFunc:
        return ConversionRegistry.register(source, target, func)

    return decorator
