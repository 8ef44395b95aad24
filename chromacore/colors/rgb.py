from typing import ClassVar, Tuple

from ..types.color_types import ColorModelName, Uint16Quad
from ..types.depth import OPAQUE_16
from ..conversions.fixed_point import expand_channel
from .color_base import ColorBase, WithAlpha, premultiply, build_registry


class RGBA(ColorBase, WithAlpha):
    """8-bit alpha-premultiplied RGBA."""
    __slots__ = ()
    channels: ClassVar[Tuple[str, ...]] = ('r', 'g', 'b', 'a')
    mode: ClassVar[ColorModelName] = "rgba"
    maxima: ClassVar[Tuple[int, int, int, int]] = (255, 255, 255, 255)

    r = property(lambda self: self.value[0])
    g = property(lambda self: self.value[1])
    b = property(lambda self: self.value[2])

    def rgba(self) -> Uint16Quad:
        r, g, b, a = (expand_channel(v) for v in self.value)
        return r, g, b, a


class NRGBA(ColorBase, WithAlpha):
    """8-bit non-alpha-premultiplied RGBA."""
    __slots__ = ()
    channels: ClassVar[Tuple[str, ...]] = ('r', 'g', 'b', 'a')
    mode: ClassVar[ColorModelName] = "nrgba"
    maxima: ClassVar[Tuple[int, int, int, int]] = (255, 255, 255, 255)

    r = property(lambda self: self.value[0])
    g = property(lambda self: self.value[1])
    b = property(lambda self: self.value[2])

    def rgba(self) -> Uint16Quad:
        a = expand_channel(self.alpha)
        r, g, b = (premultiply(expand_channel(v), a) for v in self.value[:3])
        return r, g, b, a


class RGBA64(ColorBase, WithAlpha):
    """16-bit alpha-premultiplied RGBA."""
    __slots__ = ()
    channels: ClassVar[Tuple[str, ...]] = ('r', 'g', 'b', 'a')
    mode: ClassVar[ColorModelName] = "rgba64"
    maxima: ClassVar[Tuple[int, int, int, int]] = (OPAQUE_16, OPAQUE_16, OPAQUE_16, OPAQUE_16)

    r = property(lambda self: self.value[0])
    g = property(lambda self: self.value[1])
    b = property(lambda self: self.value[2])

    def rgba(self) -> Uint16Quad:
        r, g, b, a = self.value
        return r, g, b, a


class Gray(ColorBase):
    """8-bit opaque gray."""
    __slots__ = ()
    channels: ClassVar[Tuple[str, ...]] = ('y',)
    mode: ClassVar[ColorModelName] = "gray"
    maxima: ClassVar[Tuple[int]] = (255,)

    y = property(lambda self: self.value[0])

    def rgba(self) -> Uint16Quad:
        y = expand_channel(self.y)
        return y, y, y, OPAQUE_16


rgb_mode_to_class = build_registry(RGBA, NRGBA, RGBA64, Gray)
