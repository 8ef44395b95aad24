import numpy as np

from .fixed_point import UINT8_MAX, round_div, np_round_div, as_channel_array
from ..types.color_types import Uint8Quad


def rgb_to_cmyk(r: int, g: int, b: int) -> Uint8Quad:
    """
    Convert an 8-bit RGB triple to CMYK.

    The key is ``255 - max(r, g, b)``. Each ink is the channel's distance from
    the brightest channel, rescaled to [0, 255] and rounded half-up. Pure black
    has no brightest channel to divide by and maps to (0, 0, 0, 255).
    """
    w = max(r, g, b)
    if w == 0:
        return 0, 0, 0, UINT8_MAX
    c = round_div((w - r) * UINT8_MAX, w)
    m = round_div((w - g) * UINT8_MAX, w)
    y = round_div((w - b) * UINT8_MAX, w)
    return c, m, y, UINT8_MAX - w


def np_rgb_to_cmyk(r: np.ndarray, g: np.ndarray, b: np.ndarray) -> np.ndarray:
    r = as_channel_array(r, "r")
    g = as_channel_array(g, "g")
    b = as_channel_array(b, "b")
    w = np.maximum(np.maximum(r, g), b)
    black = w == 0
    # Any non-zero divisor works for black pixels, their inks are overwritten below.
    safe_w = np.where(black, 1, w)

    inks = []
    for channel in np.broadcast_arrays(r, g, b):
        ink = np_round_div((w - channel) * UINT8_MAX, safe_w)
        inks.append(np.where(black, 0, ink))
    k = UINT8_MAX - w
    return np.stack([*inks, np.broadcast_to(k, inks[0].shape)], axis=-1).astype(np.uint8)
