import numpy as np

from .fixed_point import (
    CHROMA_OFFSET,
    to_uint8,
    np_to_uint8,
    as_channel_array,
)
from ..types.color_types import Uint8Triple

# BT.601 rows scaled by 2**16. Each chroma row sums to zero so gray stays at 128.
LUMA_COEFFS = (19595, 38470, 7471)
CB_COEFFS = (-11056, -21712, 32768)
CR_COEFFS = (32768, -27440, -5328)


def _dot(coeffs, r, g, b):
    kr, kg, kb = coeffs
    return kr * r + kg * g + kb * b


def rgb_to_ycbcr(r: int, g: int, b: int) -> Uint8Triple:
    """
    Convert an 8-bit RGB triple to YCbCr.

    Args:
        r, g, b: Channels in [0, 255]

    Returns:
        (y, cb, cr), each in [0, 255]. Saturated blue and red land on the
        chroma limits and are clamped rather than wrapped.
    """
    y = to_uint8(_dot(LUMA_COEFFS, r, g, b))
    cb = to_uint8(_dot(CB_COEFFS, r, g, b) + CHROMA_OFFSET)
    cr = to_uint8(_dot(CR_COEFFS, r, g, b) + CHROMA_OFFSET)
    return y, cb, cr


def rgb_to_gray(r: int, g: int, b: int) -> int:
    """Luma of an 8-bit RGB triple, identical to the Y of :func:`rgb_to_ycbcr`."""
    return to_uint8(_dot(LUMA_COEFFS, r, g, b))


def np_rgb_to_ycbcr(r: np.ndarray, g: np.ndarray, b: np.ndarray) -> np.ndarray:
    """
    Vectorized :func:`rgb_to_ycbcr`.

    Returns:
        uint8 array shaped like the broadcast inputs plus a trailing axis of 3.
    """
    r = as_channel_array(r, "r")
    g = as_channel_array(g, "g")
    b = as_channel_array(b, "b")
    y = np_to_uint8(_dot(LUMA_COEFFS, r, g, b))
    cb = np_to_uint8(_dot(CB_COEFFS, r, g, b) + CHROMA_OFFSET)
    cr = np_to_uint8(_dot(CR_COEFFS, r, g, b) + CHROMA_OFFSET)
    return np.stack([y, cb, cr], axis=-1)


def np_rgb_to_gray(r: np.ndarray, g: np.ndarray, b: np.ndarray) -> np.ndarray:
    r = as_channel_array(r, "r")
    g = as_channel_array(g, "g")
    b = as_channel_array(b, "b")
    return np_to_uint8(_dot(LUMA_COEFFS, r, g, b))
