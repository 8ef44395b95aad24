"""
Chromacore Color Classes
========================

Immutable color values for the RGB, gray, YCbCr and CMYK color models.

Features
--------
- Immutable instances (frozen after initialization, no ``__dict__``)
- Channels coerced to int and clamped to the model's range
- ``rgba()`` expansion to 16-bit-per-channel, alpha-premultiplied RGBA
- Conversion between models through ``convert()``

Usage
-----
>>> from chromacore.colors import YCbCr, CMYK
>>> YCbCr(76, 85, 255).rgba()
(65278, 0, 0, 65535)
>>> CMYK(0, 0, 0, 255).rgba()
(0, 0, 0, 65535)
>>> YCbCr(76, 85, 255).convert("cmyk")
CMYK(c=0, m=255, y=255, k=1)

Color Classes
-------------
- RGBA: 8-bit alpha-premultiplied RGBA
- NRGBA: 8-bit non-premultiplied RGBA
- RGBA64: 16-bit alpha-premultiplied RGBA
- Gray: 8-bit gray
- YCbCr: 8-bit Y'CbCr
- NYCbCrA: 8-bit Y'CbCr with non-premultiplied alpha
- CMYK: 8-bit cyan, magenta, yellow, key
"""

from .color_base import ColorBase, WithAlpha
from .rgb import RGBA, NRGBA, RGBA64, Gray
from .ycbcr import YCbCr, NYCbCrA
from .cmyk import CMYK
from .model import (
    color_convert,
    get_color_class,
    get_model,
    model_registry,
    rgba_model,
    rgba64_model,
    nrgba_model,
    gray_model,
    ycbcr_model,
    nycbcra_model,
    cmyk_model,
)

__all__ = [
    'ColorBase',
    'WithAlpha',
    'RGBA',
    'NRGBA',
    'RGBA64',
    'Gray',
    'YCbCr',
    'NYCbCrA',
    'CMYK',
    'color_convert',
    'get_color_class',
    'get_model',
    'model_registry',
    'rgba_model',
    'rgba64_model',
    'nrgba_model',
    'gray_model',
    'ycbcr_model',
    'nycbcra_model',
    'cmyk_model',
]
