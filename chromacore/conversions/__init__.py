"""
Chromacore Color Model Conversions
==================================

Integer conversions between 8-bit RGB and the YCbCr, CMYK and gray encodings,
with scalar and vectorized (numpy) implementations.

Features
--------
- Bidirectional conversions: RGB <-> YCbCr, RGB <-> CMYK, RGB <-> gray
- Fixed-point BT.601 coefficients scaled by 2**16, round-half-up everywhere
- Saturating output: out-of-gamut results clamp to [0, 255], never wrap
- Scalar and numpy paths share the same integer arithmetic and agree bit for bit

Conversion Functions
-------------------

RGB -> YCbCr:
    rgb_to_ycbcr(r, g, b)
    np_rgb_to_ycbcr(r, g, b)

YCbCr -> RGB:
    ycbcr_to_rgb(y, cb, cr)
    np_ycbcr_to_rgb(y, cb, cr)

RGB -> CMYK:
    rgb_to_cmyk(r, g, b)
    np_rgb_to_cmyk(r, g, b)

CMYK -> RGB:
    cmyk_to_rgb(c, m, y, k)
    np_cmyk_to_rgb(c, m, y, k)

RGB <-> gray:
    rgb_to_gray(r, g, b), gray_to_rgb(y)
    np_rgb_to_gray(r, g, b), np_gray_to_rgb(y)

High-Level API
-------------
    convert(color, from_space, to_space)
    np_convert(color, from_space, to_space)

Examples
--------
>>> from chromacore.conversions import rgb_to_ycbcr, ycbcr_to_rgb, rgb_to_cmyk
>>> rgb_to_ycbcr(255, 0, 0)
(76, 85, 255)
>>> ycbcr_to_rgb(76, 85, 255)
(254, 0, 0)
>>> rgb_to_cmyk(0, 0, 0)
(0, 0, 0, 255)
"""

from .to_ycbcr import rgb_to_ycbcr, rgb_to_gray, np_rgb_to_ycbcr, np_rgb_to_gray
from .to_cmyk import rgb_to_cmyk, np_rgb_to_cmyk
from .to_rgb import (
    ycbcr_to_rgb,
    cmyk_to_rgb,
    gray_to_rgb,
    np_ycbcr_to_rgb,
    np_cmyk_to_rgb,
    np_gray_to_rgb,
)
from .wrapper import convert, np_convert

from ..types.color_types import ColorSpace

__all__ = [
    # RGB -> YCbCr
    'rgb_to_ycbcr',
    'np_rgb_to_ycbcr',

    # YCbCr -> RGB
    'ycbcr_to_rgb',
    'np_ycbcr_to_rgb',

    # RGB -> CMYK
    'rgb_to_cmyk',
    'np_rgb_to_cmyk',

    # CMYK -> RGB
    'cmyk_to_rgb',
    'np_cmyk_to_rgb',

    # RGB <-> gray
    'rgb_to_gray',
    'gray_to_rgb',
    'np_rgb_to_gray',
    'np_gray_to_rgb',

    # High-level API
    'convert',
    'np_convert',
    'ColorSpace',
]
