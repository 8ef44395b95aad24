"""Basic Chromacore usage examples.

Run directly with:
    python examples/basic_usage.py
"""
import numpy as np

from chromacore import (
    CMYK,
    YCbCr,
    NYCbCrA,
    rgb_to_ycbcr,
    ycbcr_to_rgb,
    rgb_to_cmyk,
    cmyk_to_rgb,
    np_convert,
)


def demonstrate_functions() -> None:
    # Direct 8-bit conversions.
    accent = (255, 128, 64)
    ycbcr = rgb_to_ycbcr(*accent)
    print("RGB -> YCbCr:", ycbcr)
    print("YCbCr -> RGB:", ycbcr_to_rgb(*ycbcr))

    cmyk = rgb_to_cmyk(*accent)
    print("RGB -> CMYK:", cmyk)
    print("CMYK -> RGB:", cmyk_to_rgb(*cmyk))
    print("Black -> CMYK:", rgb_to_cmyk(0, 0, 0))


def demonstrate_values() -> None:
    # Value types expand to 16-bit premultiplied RGBA and convert between models.
    color = YCbCr(rgb_to_ycbcr(255, 128, 64))
    print(color, "->", color.rgba())
    print("as CMYK:", color.convert("cmyk"))

    translucent = NYCbCrA(color.value + (128,))
    print(translucent, "->", translucent.rgba())
    print("CMYK white:", CMYK(0, 0, 0, 0).rgba())


def demonstrate_arrays() -> None:
    image = np.random.default_rng(7).integers(0, 256, size=(2, 3, 3), dtype=np.uint8)
    ycbcr = np_convert(image, "rgb", "ycbcr")
    back = np_convert(ycbcr, "ycbcr", "rgb")
    print("max round-trip error:", int(np.abs(back.astype(int) - image).max()))


if __name__ == "__main__":
    demonstrate_functions()
    demonstrate_values()
    demonstrate_arrays()
