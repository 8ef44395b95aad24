from chromacore.conversions import rgb_to_ycbcr, ycbcr_to_rgb, rgb_to_cmyk, cmyk_to_rgb
from tests.samples import delta, rgb_grid


def test_round_trip_rgb_ycbcr():
    """RGB -> YCbCr -> RGB stays within one unit per channel."""
    for r0, g0, b0 in rgb_grid():
        r1, g1, b1 = ycbcr_to_rgb(*rgb_to_ycbcr(r0, g0, b0))
        assert delta(r0, r1) <= 1, (r0, g0, b0, r1, g1, b1)
        assert delta(g0, g1) <= 1, (r0, g0, b0, r1, g1, b1)
        assert delta(b0, b1) <= 1, (r0, g0, b0, r1, g1, b1)


def test_round_trip_rgb_cmyk():
    """RGB -> CMYK -> RGB stays within one unit per channel."""
    for r0, g0, b0 in rgb_grid():
        r1, g1, b1 = cmyk_to_rgb(*rgb_to_cmyk(r0, g0, b0))
        assert delta(r0, r1) <= 1, (r0, g0, b0, r1, g1, b1)
        assert delta(g0, g1) <= 1, (r0, g0, b0, r1, g1, b1)
        assert delta(b0, b1) <= 1, (r0, g0, b0, r1, g1, b1)


def test_round_trip_gray_axis_is_exact():
    for v in range(256):
        assert ycbcr_to_rgb(*rgb_to_ycbcr(v, v, v)) == (v, v, v)
        assert cmyk_to_rgb(*rgb_to_cmyk(v, v, v)) == (v, v, v)


def test_second_ycbcr_round_trip_does_not_drift():
    """
    A second forward conversion of a round-tripped color lands on the first
    YCbCr triple, or at most one unit away for the rare points that are not
    fixed points of the transform pair.
    """
    total = 0
    exact = 0
    for rgb in rgb_grid():
        first = rgb_to_ycbcr(*rgb)
        second = rgb_to_ycbcr(*ycbcr_to_rgb(*first))
        assert all(delta(a, b) <= 1 for a, b in zip(first, second)), (rgb, first, second)
        total += 1
        exact += first == second
    assert exact / total > 0.99


def test_second_cmyk_round_trip_is_stable():
    for rgb in rgb_grid():
        first = rgb_to_cmyk(*rgb)
        assert rgb_to_cmyk(*cmyk_to_rgb(*first)) == first
