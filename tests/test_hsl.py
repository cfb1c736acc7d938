"""Tests for contrast_checker.notations.hsl: hue units, wrapping and the HSL→RGB formula."""

import pytest
from contrast_checker.core.types import MalformedColourString, MissingComponent, RGBColour
from contrast_checker.notations.hsl import hsl_components_to_rgb, parse_hsl, parse_hue


class TestReferenceVectors:
    """CSS Color 3 named-colour equivalents."""

    def test_red(self):
        assert parse_hsl('hsl(0, 100%, 50%)') == RGBColour(255, 0, 0)

    def test_lime(self):
        assert parse_hsl('hsl(120, 100%, 50%)') == RGBColour(0, 255, 0)

    def test_green(self):
        assert parse_hsl('hsl(120, 100%, 25%)') == RGBColour(0, 128, 0)

    def test_blue(self):
        assert parse_hsl('hsl(240, 100%, 50%)') == RGBColour(0, 0, 255)

    def test_yellow(self):
        assert parse_hsl('hsl(60, 100%, 50%)') == RGBColour(255, 255, 0)

    def test_cyan(self):
        assert parse_hsl('hsl(180, 100%, 50%)') == RGBColour(0, 255, 255)

    def test_magenta(self):
        assert parse_hsl('hsl(300, 100%, 50%)') == RGBColour(255, 0, 255)

    def test_white(self):
        assert parse_hsl('hsl(0, 0%, 100%)') == RGBColour(255, 255, 255)

    def test_black(self):
        assert parse_hsl('hsl(0, 0%, 0%)') == RGBColour(0, 0, 0)

    def test_grey_rounds_half_up(self):
        assert parse_hsl('hsl(0, 0%, 50%)') == RGBColour(128, 128, 128)


class TestHueUnits:
    def test_bare_degrees(self):
        assert parse_hue('90') == 90

    def test_deg_suffix(self):
        assert parse_hue('90deg') == 90

    def test_turn(self):
        assert parse_hue('0.5turn') == 180

    def test_turn_rounds_to_degree(self):
        assert parse_hue('0.3333turn') == 120

    def test_rad(self):
        assert parse_hue('3.14159rad') == 180

    def test_rad_rounds_to_degree(self):
        assert parse_hue('1rad') == 57

    def test_unit_case_insensitive(self):
        assert parse_hue('0.25TURN') == 90

    def test_wraps_at_360(self):
        assert parse_hue('360') == 0

    def test_wraps_above_360(self):
        assert parse_hue('450') == 90

    def test_full_turn_wraps(self):
        assert parse_hue('1turn') == 0

    def test_negative_wraps(self):
        assert parse_hue('-90') == 270

    def test_fractional_degrees_kept(self):
        assert parse_hue('12.5') == pytest.approx(12.5)

    def test_turn_colour(self):
        assert parse_hsl('hsl(0.5turn, 100%, 50%)') == RGBColour(0, 255, 255)

    def test_rad_colour(self):
        assert parse_hsl('hsl(3.14159rad, 100%, 50%)') == RGBColour(0, 255, 255)

    def test_unknown_unit(self):
        with pytest.raises(MalformedColourString):
            parse_hue('90grad')


class TestSextants:
    @pytest.mark.parametrize(
        'hue, expected',
        [
            (30, (255, 128, 0)),
            (90, (128, 255, 0)),
            (150, (0, 255, 128)),
            (210, (0, 128, 255)),
            (270, (128, 0, 255)),
            (330, (255, 0, 128)),
        ],
    )
    def test_midpoints(self, hue, expected):
        assert hsl_components_to_rgb(hue, 1.0, 0.5).as_tuple() == expected


class TestPercentages:
    def test_percent_sign_optional(self):
        assert parse_hsl('hsl(0, 100, 50)') == RGBColour(255, 0, 0)

    def test_bare_body(self):
        assert parse_hsl('0, 100%, 50%') == RGBColour(255, 0, 0)

    def test_decimal_percent(self):
        assert parse_hsl('hsl(0, 100%, 50.0%)') == RGBColour(255, 0, 0)

    def test_saturation_above_100(self):
        with pytest.raises(MalformedColourString):
            parse_hsl('hsl(0, 101%, 50%)')

    def test_negative_lightness(self):
        with pytest.raises(MalformedColourString):
            parse_hsl('hsl(0, 100%, -5%)')


class TestHslErrors:
    def test_missing_lightness(self):
        with pytest.raises(MissingComponent):
            parse_hsl('hsl(120, 100%)')

    def test_extra_component(self):
        with pytest.raises(MalformedColourString):
            parse_hsl('hsl(120, 100%, 50%, 1)')

    def test_non_numeric_hue(self):
        with pytest.raises(MalformedColourString):
            parse_hsl('hsl(red, 100%, 50%)')

    def test_error_notation(self):
        with pytest.raises(MalformedColourString) as excinfo:
            parse_hsl('hsl(x, 1%, 1%)')
        assert excinfo.value.notation == 'hsl'
        assert excinfo.value.value == 'hsl(x, 1%, 1%)'

    @pytest.mark.parametrize('unit', ['', 'deg', 'rad', 'turn'])
    def test_overflowing_hue(self, unit):
        with pytest.raises(MalformedColourString):
            parse_hsl(f'hsl({"9" * 400}{unit}, 100%, 50%)')

    def test_hue_overflowing_after_unit_conversion(self):
        # finite as a number, infinite once multiplied by 360
        with pytest.raises(MalformedColourString):
            parse_hue('1' + '0' * 307 + 'turn')

    def test_overflowing_saturation(self):
        with pytest.raises(MalformedColourString):
            parse_hsl(f'hsl(0, {"9" * 400}%, 50%)')
