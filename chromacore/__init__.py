"""Chromacore: integer pixel color-model conversions."""

from .colors.color_base import ColorBase, WithAlpha
from .colors.rgb import RGBA, NRGBA, RGBA64, Gray
from .colors.ycbcr import YCbCr, NYCbCrA
from .colors.cmyk import CMYK
from .colors.model import (
    color_convert,
    get_color_class,
    rgba_model,
    rgba64_model,
    nrgba_model,
    gray_model,
    ycbcr_model,
    nycbcra_model,
    cmyk_model,
)
from .conversions import (
    rgb_to_ycbcr,
    ycbcr_to_rgb,
    rgb_to_cmyk,
    cmyk_to_rgb,
    rgb_to_gray,
    gray_to_rgb,
    np_rgb_to_ycbcr,
    np_ycbcr_to_rgb,
    np_rgb_to_cmyk,
    np_cmyk_to_rgb,
    np_rgb_to_gray,
    np_gray_to_rgb,
    convert,
    np_convert,
)
from .types.depth import BitDepth

__version__ = "1.0.0"

__all__ = [
    # color values
    "ColorBase",
    "WithAlpha",
    "RGBA",
    "NRGBA",
    "RGBA64",
    "Gray",
    "YCbCr",
    "NYCbCrA",
    "CMYK",
    "BitDepth",
    # models
    "color_convert",
    "get_color_class",
    "rgba_model",
    "rgba64_model",
    "nrgba_model",
    "gray_model",
    "ycbcr_model",
    "nycbcra_model",
    "cmyk_model",
    # conversions
    "rgb_to_ycbcr",
    "ycbcr_to_rgb",
    "rgb_to_cmyk",
    "cmyk_to_rgb",
    "rgb_to_gray",
    "gray_to_rgb",
    "np_rgb_to_ycbcr",
    "np_ycbcr_to_rgb",
    "np_rgb_to_cmyk",
    "np_cmyk_to_rgb",
    "np_rgb_to_gray",
    "np_gray_to_rgb",
    "convert",
    "np_convert",
]
