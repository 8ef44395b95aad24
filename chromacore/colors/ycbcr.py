from typing import ClassVar, Tuple

from ..types.color_types import ColorModelName, Uint16Quad
from ..types.depth import OPAQUE_16
from ..conversions.to_rgb import ycbcr_to_rgb
from ..conversions.fixed_point import expand_channel
from .color_base import ColorBase, WithAlpha, premultiply, build_registry


def _expanded_rgb(y: int, cb: int, cr: int) -> Tuple[int, int, int]:
    # Same 8-bit kernel as ycbcr_to_rgb, so truncating the result with >> 8
    # reproduces ycbcr_to_rgb exactly.
    r, g, b = ycbcr_to_rgb(y, cb, cr)
    return expand_channel(r), expand_channel(g), expand_channel(b)


class YCbCr(ColorBase):
    """
    Opaque Y'CbCr color, 8 bits per channel.

    Uses the JFIF flavor of BT.601: all three channels span the full
    [0, 255] range and the chroma channels are centered on 128.
    """
    __slots__ = ()
    channels: ClassVar[Tuple[str, ...]] = ('y', 'cb', 'cr')
    mode: ClassVar[ColorModelName] = "ycbcr"
    maxima: ClassVar[Tuple[int, int, int]] = (255, 255, 255)

    y = property(lambda self: self.value[0])
    cb = property(lambda self: self.value[1])
    cr = property(lambda self: self.value[2])

    def rgba(self) -> Uint16Quad:
        r, g, b = _expanded_rgb(*self.value)
        return r, g, b, OPAQUE_16


class NYCbCrA(ColorBase, WithAlpha):
    """YCbCr with a non-alpha-premultiplied 8-bit alpha channel."""
    __slots__ = ()
    channels: ClassVar[Tuple[str, ...]] = ('y', 'cb', 'cr', 'a')
    mode: ClassVar[ColorModelName] = "nycbcra"
    maxima: ClassVar[Tuple[int, int, int, int]] = (255, 255, 255, 255)

    y = property(lambda self: self.value[0])
    cb = property(lambda self: self.value[1])
    cr = property(lambda self: self.value[2])

    @property
    def ycbcr(self) -> YCbCr:
        """The color without its alpha channel."""
        return YCbCr(self.value[:3])

    def rgba(self) -> Uint16Quad:
        a = expand_channel(self.alpha)
        r, g, b = (premultiply(v, a) for v in _expanded_rgb(*self.value[:3]))
        return r, g, b, a


ycbcr_mode_to_class = build_registry(YCbCr, NYCbCrA)
