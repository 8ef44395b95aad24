import numpy as np

from .fixed_point import (
    SCALE_BITS,
    CHROMA_CENTER,
    UINT8_MAX,
    to_uint8,
    round_div,
    np_to_uint8,
    np_round_div,
    as_channel_array,
)
from ..types.color_types import Uint8Triple

# Inverse BT.601 matrix scaled by 2**16.
CR_TO_R = 91881
CB_TO_G = -22554
CR_TO_G = -46802
CB_TO_B = 116130


def ycbcr_to_rgb(y: int, cb: int, cr: int) -> Uint8Triple:
    """
    Convert an 8-bit YCbCr triple to RGB.

    Every triple is a legal input. Combinations outside the RGB gamut
    saturate at 0 or 255 per channel.
    """
    yy = y << SCALE_BITS
    cb1 = cb - CHROMA_CENTER
    cr1 = cr - CHROMA_CENTER
    r = to_uint8(yy + CR_TO_R * cr1)
    g = to_uint8(yy + CB_TO_G * cb1 + CR_TO_G * cr1)
    b = to_uint8(yy + CB_TO_B * cb1)
    return r, g, b


def cmyk_to_rgb(c: int, m: int, y: int, k: int) -> Uint8Triple:
    """
    Convert an 8-bit CMYK quadruple to RGB.

    Each channel is the product of the ink's and the key's complements,
    scaled back to [0, 255] and rounded half-up.
    """
    w = UINT8_MAX - k
    r = round_div((UINT8_MAX - c) * w, UINT8_MAX)
    g = round_div((UINT8_MAX - m) * w, UINT8_MAX)
    b = round_div((UINT8_MAX - y) * w, UINT8_MAX)
    return r, g, b


def gray_to_rgb(y: int) -> Uint8Triple:
    return y, y, y


def np_ycbcr_to_rgb(y: np.ndarray, cb: np.ndarray, cr: np.ndarray) -> np.ndarray:
    """Vectorized :func:`ycbcr_to_rgb`; channel axis last, dtype uint8."""
    yy = as_channel_array(y, "y") << SCALE_BITS
    cb1 = as_channel_array(cb, "cb") - CHROMA_CENTER
    cr1 = as_channel_array(cr, "cr") - CHROMA_CENTER
    r = np_to_uint8(yy + CR_TO_R * cr1)
    g = np_to_uint8(yy + CB_TO_G * cb1 + CR_TO_G * cr1)
    b = np_to_uint8(yy + CB_TO_B * cb1)
    return np.stack(np.broadcast_arrays(r, g, b), axis=-1)


def np_cmyk_to_rgb(c: np.ndarray, m: np.ndarray, y: np.ndarray, k: np.ndarray) -> np.ndarray:
    """Vectorized :func:`cmyk_to_rgb`; channel axis last, dtype uint8."""
    w = UINT8_MAX - as_channel_array(k, "k")
    channels = [
        np_round_div((UINT8_MAX - as_channel_array(ink, name)) * w, UINT8_MAX)
        for ink, name in ((c, "c"), (m, "m"), (y, "y"))
    ]
    return np.stack(np.broadcast_arrays(*channels), axis=-1).astype(np.uint8)


def np_gray_to_rgb(y: np.ndarray) -> np.ndarray:
    y = as_channel_array(y, "y").astype(np.uint8)
    return np.stack([y, y, y], axis=-1)
