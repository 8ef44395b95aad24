from __future__ import annotations
from typing import Literal, Tuple, Union
import numpy as np
from numpy import ndarray

Uint8Triple = Tuple[int, int, int]
Uint8Quad = Tuple[int, int, int, int]
Uint16Quad = Tuple[int, int, int, int]
IntVector = Tuple[int, ...]
ColorElement = Union[int, IntVector]
ColorValue = Union[ColorElement, ndarray]
ColorSpace = Literal["rgb", "ycbcr", "cmyk", "gray"]
ColorModelName = Literal["rgba", "rgba64", "nrgba", "gray", "ycbcr", "nycbcra", "cmyk"]

CHANNEL_COUNTS = {
    "rgb": 3,
    "ycbcr": 3,
    "cmyk": 4,
    "gray": 1,
}


def element_to_array(element: ColorValue) -> np.ndarray:
    """
    Convert a color element to an int64 numpy array.

    Args:
        element: Scalar, tuple, or already an ndarray

    Returns:
        numpy array representation
    """
    if isinstance(element, ndarray):
        return element.astype(np.int64, copy=False)
    if isinstance(element, int):
        return np.array([element], dtype=np.int64)
    return np.array(element, dtype=np.int64)


def is_known_space(color_space: str) -> bool:
    return color_space.lower() in CHANNEL_COUNTS
