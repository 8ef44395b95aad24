"""
Color models: functions that take any color value and return the equivalent
value of one particular type.

Every model goes through :meth:`ColorBase.rgba`, so any value type can be
converted to any other. A value that already has the target type is returned
unchanged.
"""
from __future__ import annotations
from typing import Callable, Dict, Tuple

from ..conversions.fixed_point import round_shift, truncate_channel
from ..conversions.to_ycbcr import LUMA_COEFFS, rgb_to_ycbcr
from ..conversions.to_cmyk import rgb_to_cmyk
from ..types.color_types import ColorModelName
from ..types.depth import OPAQUE_16, TRUNCATE_16_TO_8
from .color_base import ColorBase
from .rgb import RGBA, NRGBA, RGBA64, Gray, rgb_mode_to_class
from .ycbcr import YCbCr, NYCbCrA, ycbcr_mode_to_class
from .cmyk import CMYK, cmyk_mode_to_class

unified_mode_to_class: Dict[str, type[ColorBase]] = {
    **rgb_mode_to_class,
    **ycbcr_mode_to_class,
    **cmyk_mode_to_class,
}


def _truncated_rgb(color: ColorBase) -> Tuple[int, int, int]:
    r, g, b, _ = color.rgba()
    return truncate_channel(r), truncate_channel(g), truncate_channel(b)


def _unpremultiplied(color: ColorBase) -> Tuple[int, int, int, int]:
    """16-bit (r, g, b, a) with the alpha divided back out."""
    r, g, b, a = color.rgba()
    if a == OPAQUE_16:
        return r, g, b, a
    if a == 0:
        return 0, 0, 0, 0
    return r * OPAQUE_16 // a, g * OPAQUE_16 // a, b * OPAQUE_16 // a, a


def rgba_model(color: ColorBase) -> RGBA:
    if isinstance(color, RGBA):
        return color
    return RGBA(tuple(truncate_channel(v) for v in color.rgba()))


def rgba64_model(color: ColorBase) -> RGBA64:
    if isinstance(color, RGBA64):
        return color
    return RGBA64(color.rgba())


def nrgba_model(color: ColorBase) -> NRGBA:
    if isinstance(color, NRGBA):
        return color
    return NRGBA(tuple(truncate_channel(v) for v in _unpremultiplied(color)))


def gray_model(color: ColorBase) -> Gray:
    if isinstance(color, Gray):
        return color
    r, g, b, _ = color.rgba()
    kr, kg, kb = LUMA_COEFFS
    # Luma of the 16-bit channels, then the low byte dropped.
    y16 = round_shift(kr * r + kg * g + kb * b)
    return Gray(y16 >> TRUNCATE_16_TO_8)


def ycbcr_model(color: ColorBase) -> YCbCr:
    if isinstance(color, YCbCr):
        return color
    return YCbCr(rgb_to_ycbcr(*_truncated_rgb(color)))


def nycbcra_model(color: ColorBase) -> NYCbCrA:
    if isinstance(color, NYCbCrA):
        return color
    if isinstance(color, YCbCr):
        return NYCbCrA(color.value + (0xff,))
    r, g, b, a = (truncate_channel(v) for v in _unpremultiplied(color))
    return NYCbCrA(rgb_to_ycbcr(r, g, b) + (a,))


def cmyk_model(color: ColorBase) -> CMYK:
    if isinstance(color, CMYK):
        return color
    return CMYK(rgb_to_cmyk(*_truncated_rgb(color)))


model_registry: Dict[str, Callable[[ColorBase], ColorBase]] = {
    "rgba": rgba_model,
    "rgba64": rgba64_model,
    "nrgba": nrgba_model,
    "gray": gray_model,
    "ycbcr": ycbcr_model,
    "nycbcra": nycbcra_model,
    "cmyk": cmyk_model,
}


def get_model(mode: str) -> Callable[[ColorBase], ColorBase]:
    model = model_registry.get(mode.lower())
    if model is None:
        raise ValueError(f"Unsupported color model: {mode}")
    return model


def color_convert(self: ColorBase, to_space: ColorModelName) -> ColorBase:
    """
    Convert this color to another color model.

    Args:
        to_space: Target model name (e.g. "rgba", "ycbcr", "cmyk")

    Returns:
        New ColorBase instance of the target model's type
    """
    return get_model(to_space)(self)


ColorBase.convert = color_convert


def get_color_class(mode: str) -> type[ColorBase]:
    color_class = unified_mode_to_class.get(mode.lower())
    if color_class is None:
        raise ValueError(f"Unsupported color model: {mode}")
    return color_class
