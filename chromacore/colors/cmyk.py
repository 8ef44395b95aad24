from typing import ClassVar, Tuple

from ..types.color_types import ColorModelName, Uint16Quad
from ..types.depth import OPAQUE_16
from ..conversions.to_rgb import cmyk_to_rgb
from ..conversions.fixed_point import expand_channel
from .color_base import ColorBase, build_registry


class CMYK(ColorBase):
    """
    Opaque cyan, magenta, yellow and key (black) inks, 8 bits per channel.

    Not associated with any particular color profile.
    """
    __slots__ = ()
    channels: ClassVar[Tuple[str, ...]] = ('c', 'm', 'y', 'k')
    mode: ClassVar[ColorModelName] = "cmyk"
    maxima: ClassVar[Tuple[int, int, int, int]] = (255, 255, 255, 255)

    c = property(lambda self: self.value[0])
    m = property(lambda self: self.value[1])
    y = property(lambda self: self.value[2])
    k = property(lambda self: self.value[3])

    def rgba(self) -> Uint16Quad:
        r, g, b = (expand_channel(v) for v in cmyk_to_rgb(*self.value))
        return r, g, b, OPAQUE_16


cmyk_mode_to_class = build_registry(CMYK)
