"""
Fixed-point helpers shared by every conversion in the package.

Coefficients are integers pre-scaled by ``2**SCALE_BITS``. An accumulator is
turned back into an 8-bit channel by adding half of the scale factor,
shifting right and clamping into ``[0, 255]`` (round-half-up, saturating).
Ratios that are not powers of two go through :func:`round_div`, which uses
the same round-half-up rule.

The scalar functions and their ``np_`` twins perform identical integer
arithmetic, so a value computed through either path is bit-identical.
"""
from __future__ import annotations
import warnings

import numpy as np
from numpy import ndarray
from boundednumbers import clamp
from boundednumbers.np_functions import clamp as np_clamp

from ..types.depth import REPLICATE_8_TO_16, TRUNCATE_16_TO_8

SCALE_BITS = 16
ROUND_HALF = 1 << (SCALE_BITS - 1)

# Chroma channels are centered on 128.
CHROMA_CENTER = 128
CHROMA_OFFSET = CHROMA_CENTER << SCALE_BITS

UINT8_MIN = 0
UINT8_MAX = 0xff


def round_shift(acc: int) -> int:
    """Round a ``2**SCALE_BITS``-scaled accumulator half-up back to integer scale."""
    return (acc + ROUND_HALF) >> SCALE_BITS


def to_uint8(acc: int) -> int:
    """Round, shift and saturate a scaled accumulator into an 8-bit channel."""
    return clamp(round_shift(acc), UINT8_MIN, UINT8_MAX)


def round_div(numerator: int, denominator: int) -> int:
    """Divide two non-negative integers, rounding half-up."""
    return (2 * numerator + denominator) // (2 * denominator)


def expand_channel(value: int) -> int:
    """Replicate an 8-bit channel into a 16-bit one (``v * 0x101``)."""
    return value * REPLICATE_8_TO_16


def truncate_channel(value: int) -> int:
    """Drop the low byte of a 16-bit channel."""
    return value >> TRUNCATE_16_TO_8


# ---------------------------------------------------------------------------
# numpy twins
# ---------------------------------------------------------------------------

def as_channel_array(channel, name: str = "channel") -> ndarray:
    """
    Validate an 8-bit channel array and widen it to int64.

    Integer-valued input only; anything else raises ``TypeError``. Values
    outside ``[0, 255]`` are clipped with a warning.
    """
    arr = np.asarray(channel)
    if arr.dtype == np.bool_ or not np.issubdtype(arr.dtype, np.integer):
        raise TypeError(f"{name} expects an integer array, got dtype {arr.dtype}")
    arr = arr.astype(np.int64)
    if arr.size and (arr.min() < UINT8_MIN or arr.max() > UINT8_MAX):
        warnings.warn(f"{name} has values outside [0, 255]; clipping")
        arr = np_clamp(arr, UINT8_MIN, UINT8_MAX)
    return arr


def np_round_shift(acc: ndarray) -> ndarray:
    return (acc + ROUND_HALF) >> SCALE_BITS


def np_to_uint8(acc: ndarray) -> ndarray:
    return np_clamp(np_round_shift(acc), UINT8_MIN, UINT8_MAX).astype(np.uint8)


def np_round_div(numerator: ndarray, denominator: ndarray) -> ndarray:
    return (2 * numerator + denominator) // (2 * denominator)
