"""Tests for contrast_checker.core.luminance: WCAG relative luminance and contrast ratio."""

import pytest
from contrast_checker.core.luminance import contrast_ratio, relative_luminance, scaled_channel
from contrast_checker.core.types import RGBColour

WHITE = RGBColour(255, 255, 255)
BLACK = RGBColour(0, 0, 0)


class TestScaledChannel:
    def test_zero(self):
        assert scaled_channel(0) == 0

    def test_full(self):
        assert scaled_channel(255) == pytest.approx(1.0)

    def test_linear_segment(self):
        # 10/255 ≈ 0.0392 sits below the 0.03928 knee
        assert scaled_channel(10) == pytest.approx((10 / 255) / 12.92)

    def test_gamma_segment(self):
        assert scaled_channel(128) == pytest.approx(((128 / 255 + 0.055) / 1.055) ** 2.4)

    def test_monotonic(self):
        values = [scaled_channel(c) for c in range(256)]
        assert values == sorted(values)


class TestRelativeLuminance:
    def test_white(self):
        assert relative_luminance(WHITE) == pytest.approx(1.0)

    def test_black(self):
        assert relative_luminance(BLACK) == 0

    def test_green_weighs_most(self):
        red = relative_luminance(RGBColour(255, 0, 0))
        green = relative_luminance(RGBColour(0, 255, 0))
        blue = relative_luminance(RGBColour(0, 0, 255))
        assert red == pytest.approx(0.2126)
        assert green == pytest.approx(0.7152)
        assert blue == pytest.approx(0.0722)


class TestContrastRatio:
    def test_white_black_is_maximum(self):
        assert contrast_ratio(WHITE, BLACK) == pytest.approx(21.0)

    def test_symmetric(self):
        a = RGBColour(37, 99, 235)
        b = RGBColour(248, 250, 252)
        assert contrast_ratio(a, b) == contrast_ratio(b, a)

    @pytest.mark.parametrize('rgb', [(0, 0, 0), (255, 255, 255), (119, 119, 119), (37, 99, 235)])
    def test_same_colour_is_one(self, rgb):
        c = RGBColour(*rgb)
        assert contrast_ratio(c, c) == 1.0

    def test_never_below_one(self):
        pairs = [(BLACK, WHITE), (WHITE, BLACK), (RGBColour(119, 119, 119), RGBColour(136, 136, 136))]
        for bg, fg in pairs:
            assert contrast_ratio(bg, fg) >= 1.0

    def test_known_grey(self):
        # #767676 on white is the classic just-passing AA grey
        assert contrast_ratio(WHITE, RGBColour(0x76, 0x76, 0x76)) == pytest.approx(4.54, abs=0.01)

    def test_close_greys_low(self):
        assert contrast_ratio(RGBColour(0x77, 0x77, 0x77), RGBColour(0x88, 0x88, 0x88)) < 1.5
