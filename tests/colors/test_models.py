import pytest

from chromacore.colors import (
    RGBA, NRGBA, RGBA64, Gray, YCbCr, NYCbCrA, CMYK,
    rgba_model, rgba64_model, nrgba_model, gray_model,
    ycbcr_model, nycbcra_model, cmyk_model,
    get_color_class, get_model, model_registry,
)
from chromacore.conversions import rgb_to_ycbcr, rgb_to_cmyk, ycbcr_to_rgb, rgb_to_gray

all_colors = [
    RGBA(200, 100, 50, 255),
    NRGBA(255, 128, 0, 128),
    RGBA64(0x1234, 0x5678, 0x9abc, 0xffff),
    Gray(77),
    YCbCr(81, 90, 240),
    NYCbCrA(81, 90, 240, 200),
    CMYK(128, 64, 32, 16),
]


def test_models_return_same_instance_for_own_type():
    for color in all_colors:
        model = get_model(color.mode)
        assert model(color) is color


def test_every_model_accepts_every_color():
    for color in all_colors:
        for mode, model in model_registry.items():
            converted = model(color)
            assert isinstance(converted, get_color_class(mode))


def test_rgba64_model_preserves_expansion():
    for color in all_colors:
        assert rgba64_model(color).rgba() == color.rgba()


def test_ycbcr_model_from_rgba():
    assert ycbcr_model(RGBA(200, 100, 50, 255)) == YCbCr(rgb_to_ycbcr(200, 100, 50))


def test_cmyk_model_from_ycbcr():
    rgb = ycbcr_to_rgb(81, 90, 240)
    assert cmyk_model(YCbCr(81, 90, 240)) == CMYK(rgb_to_cmyk(*rgb))


def test_rgba_model_truncates():
    assert rgba_model(RGBA64(0x12ff, 0x3400, 0x56aa, 0xffff)) == RGBA(0x12, 0x34, 0x56, 0xff)
    assert rgba_model(CMYK(0, 0, 0, 0)) == RGBA(255, 255, 255, 255)


def test_nrgba_model_unpremultiplies():
    original = NRGBA(255, 128, 0, 128)
    assert nrgba_model(rgba64_model(original)) == original
    assert nrgba_model(RGBA(10, 20, 30, 0)) == NRGBA(0, 0, 0, 0)
    assert nrgba_model(Gray(9)) == NRGBA(9, 9, 9, 255)


def test_nycbcra_model():
    assert nycbcra_model(YCbCr(1, 2, 3)) == NYCbCrA(1, 2, 3, 255)
    assert nycbcra_model(RGBA(255, 0, 0, 255)) == NYCbCrA(76, 85, 255, 255)
    assert nycbcra_model(NRGBA(255, 0, 0, 0)) == NYCbCrA(0, 128, 128, 0)


def test_gray_model_uses_luma():
    assert gray_model(YCbCr(128, 128, 128)) == Gray(128)
    for rgb in ((255, 0, 0), (0, 255, 0), (0, 0, 255), (12, 200, 99)):
        assert gray_model(RGBA(*rgb, 255)) == Gray(rgb_to_gray(*rgb))


def test_convert_method():
    assert YCbCr(76, 85, 255).convert("cmyk") == CMYK(0, 255, 255, 1)
    assert CMYK(0, 0, 0, 255).convert("GRAY") == Gray(0)
    with pytest.raises(ValueError):
        YCbCr(1, 2, 3).convert("hsv")


def test_get_color_class():
    assert get_color_class("ycbcr") is YCbCr
    assert get_color_class("CMYK") is CMYK
    with pytest.raises(ValueError):
        get_color_class("palette")
