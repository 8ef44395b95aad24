import numpy as np
from typing import Callable, Dict, cast

from .to_rgb import (
    ycbcr_to_rgb, cmyk_to_rgb, gray_to_rgb,
    np_ycbcr_to_rgb, np_cmyk_to_rgb, np_gray_to_rgb,
)
from .to_ycbcr import rgb_to_ycbcr, rgb_to_gray, np_rgb_to_ycbcr, np_rgb_to_gray
from .to_cmyk import rgb_to_cmyk, np_rgb_to_cmyk
from .fixed_point import as_channel_array

from ..types.color_types import CHANNEL_COUNTS, ColorElement, ColorSpace, element_to_array, is_known_space, Uint8Triple

# Every space converts through 8-bit RGB.
CONVERT_TO_RGB: Dict[str, Callable[..., Uint8Triple]] = {
    "ycbcr": ycbcr_to_rgb,
    "cmyk": cmyk_to_rgb,
    "gray": gray_to_rgb,
}

CONVERT_FROM_RGB: Dict[str, Callable[[int, int, int], ColorElement]] = {
    "ycbcr": rgb_to_ycbcr,
    "cmyk": rgb_to_cmyk,
    "gray": rgb_to_gray,
}

CONVERT_NUMPY_TO_RGB: Dict[str, Callable[..., np.ndarray]] = {
    "ycbcr": np_ycbcr_to_rgb,
    "cmyk": np_cmyk_to_rgb,
    "gray": np_gray_to_rgb,
}

CONVERT_NUMPY_FROM_RGB: Dict[str, Callable[[np.ndarray, np.ndarray, np.ndarray], np.ndarray]] = {
    "ycbcr": np_rgb_to_ycbcr,
    "cmyk": np_rgb_to_cmyk,
    "gray": np_rgb_to_gray,
}


def _check_space(space: str) -> str:
    if not is_known_space(space):
        raise ValueError(f"Unknown space: {space}")
    return space.lower()


def _check_channels(actual: int, shape, space: str) -> None:
    expected = CHANNEL_COUNTS[space]
    if actual != expected:
        raise ValueError(f"{space} expects {expected} channels, got shape {shape}")


def convert(
    color: ColorElement,
    from_space: ColorSpace,
    to_space: ColorSpace,
) -> ColorElement:
    """
    Convert one 8-bit color between spaces.

    Args:
        color: Tuple of channels (or a bare int for gray)
        from_space: Source space name
        to_space: Target space name

    Returns:
        Tuple of channels, or an int for gray
    """
    fs, ts = _check_space(from_space), _check_space(to_space)
    values = as_channel_array(element_to_array(color), fs)
    _check_channels(values.size, values.shape, fs)
    channels = tuple(int(v) for v in values.flat)
    if fs == ts:
        return channels[0] if fs == "gray" else channels

    rgb = channels if fs == "rgb" else CONVERT_TO_RGB[fs](*channels)
    if ts == "rgb":
        return tuple(rgb)
    return CONVERT_FROM_RGB[ts](*rgb)


def np_convert(
    color: np.ndarray,
    from_space: ColorSpace,
    to_space: ColorSpace,
) -> np.ndarray:
    """
    Vectorized :func:`convert` for arrays with the channel axis last.

    Gray arrays carry no channel axis. Results are uint8, with a trailing
    channel axis except for gray.
    """
    fs, ts = _check_space(from_space), _check_space(to_space)
    color = np.asarray(color)
    if fs != "gray":
        _check_channels(color.shape[-1] if color.ndim else 0, color.shape, fs)
    if fs == ts:
        return as_channel_array(color, fs).astype(np.uint8)

    if fs == "rgb":
        rgb = color
    elif fs == "gray":
        rgb = CONVERT_NUMPY_TO_RGB[fs](color)
    else:
        rgb = CONVERT_NUMPY_TO_RGB[fs](*np.moveaxis(color, -1, 0))

    if ts == "rgb":
        return as_channel_array(rgb, "rgb").astype(np.uint8)
    r, g, b = np.moveaxis(np.asarray(rgb), -1, 0)
    return cast(np.ndarray, CONVERT_NUMPY_FROM_RGB[ts](r, g, b))
