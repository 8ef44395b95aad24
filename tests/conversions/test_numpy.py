import numpy as np
import pytest

from chromacore.conversions import (
    rgb_to_ycbcr, ycbcr_to_rgb, rgb_to_cmyk, cmyk_to_rgb, rgb_to_gray,
    np_rgb_to_ycbcr, np_ycbcr_to_rgb, np_rgb_to_cmyk, np_cmyk_to_rgb,
    np_rgb_to_gray, np_gray_to_rgb,
)


def _grid(step_a, step_b, step_c):
    a, b, c = np.meshgrid(
        np.arange(0, 256, step_a),
        np.arange(0, 256, step_b),
        np.arange(0, 256, step_c),
        indexing="ij",
    )
    return a.ravel(), b.ravel(), c.ravel()


def test_np_rgb_to_ycbcr_matches_scalar():
    r, g, b = _grid(7, 5, 3)
    out = np_rgb_to_ycbcr(r, g, b)
    assert out.shape == (r.size, 3)
    assert out.dtype == np.uint8
    expected = [rgb_to_ycbcr(int(x), int(y), int(z)) for x, y, z in zip(r, g, b)]
    assert [tuple(row) for row in out.tolist()] == expected


def test_np_ycbcr_to_rgb_matches_scalar():
    y, cb, cr = _grid(7, 5, 3)
    out = np_ycbcr_to_rgb(y, cb, cr)
    expected = [ycbcr_to_rgb(int(a), int(b), int(c)) for a, b, c in zip(y, cb, cr)]
    assert [tuple(row) for row in out.tolist()] == expected


def test_np_rgb_to_cmyk_matches_scalar():
    r, g, b = _grid(7, 5, 3)
    out = np_rgb_to_cmyk(r, g, b)
    assert out.shape == (r.size, 4)
    assert out.dtype == np.uint8
    expected = [rgb_to_cmyk(int(x), int(y), int(z)) for x, y, z in zip(r, g, b)]
    assert [tuple(row) for row in out.tolist()] == expected


def test_np_rgb_to_cmyk_pure_black_pixels():
    out = np_rgb_to_cmyk(np.array([0, 255]), np.array([0, 255]), np.array([0, 255]))
    assert out.tolist() == [[0, 0, 0, 255], [0, 0, 0, 0]]


def test_np_cmyk_to_rgb_matches_scalar():
    c, m, y = _grid(17, 15, 51)
    for k in (0, 16, 128, 255):
        out = np_cmyk_to_rgb(c, m, y, np.full_like(c, k))
        expected = [cmyk_to_rgb(int(a), int(b), int(d), k) for a, b, d in zip(c, m, y)]
        assert [tuple(row) for row in out.tolist()] == expected


def test_np_cmyk_to_rgb_broadcasts_scalar_key():
    out = np_cmyk_to_rgb(np.array([0, 255]), np.array([0, 0]), np.array([0, 0]), 0)
    assert out.tolist() == [[255, 255, 255], [0, 255, 255]]


def test_np_gray_round_trip():
    r, g, b = _grid(15, 17, 51)
    gray = np_rgb_to_gray(r, g, b)
    assert gray.tolist() == [rgb_to_gray(int(x), int(y), int(z)) for x, y, z in zip(r, g, b)]
    assert np_gray_to_rgb(gray).shape == gray.shape + (3,)


def test_np_functions_keep_image_shape():
    image = np.random.default_rng(0).integers(0, 256, size=(4, 5, 3))
    ycbcr = np_rgb_to_ycbcr(image[..., 0], image[..., 1], image[..., 2])
    assert ycbcr.shape == (4, 5, 3)
    back = np_ycbcr_to_rgb(ycbcr[..., 0], ycbcr[..., 1], ycbcr[..., 2])
    assert np.abs(back.astype(int) - image).max() <= 1


def test_np_functions_reject_float_input():
    with pytest.raises(TypeError):
        np_rgb_to_ycbcr(np.array([0.5]), np.array([0.5]), np.array([0.5]))
