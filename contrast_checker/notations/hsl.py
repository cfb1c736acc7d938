"""Functional HSL colours: hsl(h, s%, l%).

Selected with -l/--hsl. The hue may carry a unit:

    hsl(180, 100%, 50%)        bare number, degrees
    hsl(180deg, 100%, 50%)     degrees
    hsl(3.1416rad, 100%, 50%)  radians, rounded to the nearest degree
    hsl(0.5turn, 100%, 50%)    turns, rounded to the nearest degree

Hue wraps into [0, 360), so 450 reads as 90 and -90 as 270. Saturation
and lightness are percentages in [0, 100]; the % sign is optional. They
are scaled to fractions before conversion, so hsl(0, 100%, 50%) is pure
red (255, 0, 0) as in CSS.

Example:
    uv run contrast-tool --hsl -b 'hsl(0, 0%, 100%)' -f 'hsl(0.5turn, 100%, 25%)'
"""

import math
import re

from contrast_checker.core.tokens import split_components
from contrast_checker.core.types import MalformedColourString, Notation, RGBColour

notation = Notation(
    name='hsl',
    help='Functional hsl(h, s%, l%). Hue in deg (default), rad or turn. Pass as a quoted string.',
)

_HUE = re.compile(r'(?P<value>[+-]?(?:\d+\.?\d*|\.\d+))(?P<unit>deg|rad|turn)?', re.IGNORECASE)
_PERCENT = re.compile(r'(?P<value>\d+\.?\d*|\.\d+)%?')


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def _malformed(message: str, text: str) -> MalformedColourString:
    return MalformedColourString(f'{message} in {text!r}', value=text, notation='hsl')


def parse_hue(token: str, text: str = '') -> float:
    """Hue token to degrees in [0, 360)."""
    m = _HUE.fullmatch(token)
    if not m:
        raise _malformed(f'hsl hue is not a number: {token!r}', text or token)

    unit = (m.group('unit') or 'deg').lower()
    scale = {'rad': 180 / math.pi, 'turn': 360.0}.get(unit, 1.0)
    value = float(m.group('value')) * scale
    # Huge tokens overflow to inf
    if not math.isfinite(value):
        raise _malformed(f'hsl hue out of range: {token[:20]!r}', text or token)
    degrees: float = value if unit == 'deg' else _round_half_up(value)
    return degrees % 360


def _parse_percent(token: str, name: str, text: str) -> float:
    m = _PERCENT.fullmatch(token)
    if not m:
        raise _malformed(f'hsl {name} is not a percentage: {token!r}', text)
    value = float(m.group('value'))
    if value > 100:
        raise _malformed(f'hsl {name} out of range [0%, 100%]: {token!r}', text)
    return value / 100


def hsl_components_to_rgb(h: float, s: float, l: float) -> RGBColour:  # noqa: E741
    """Convert hue in degrees [0, 360) and fractional saturation/lightness to 8-bit RGB."""
    c = (1 - abs(2 * l - 1)) * s
    x = c * (1 - abs((h / 60) % 2 - 1))
    m = l - c / 2

    if h < 60:
        r, g, b = c, x, 0.0
    elif h < 120:
        r, g, b = x, c, 0.0
    elif h < 180:
        r, g, b = 0.0, c, x
    elif h < 240:
        r, g, b = 0.0, x, c
    elif h < 300:
        r, g, b = x, 0.0, c
    else:
        r, g, b = c, 0.0, x

    channels = (min(255, max(0, _round_half_up((v + m) * 255))) for v in (r, g, b))
    return RGBColour(*channels)


@notation.parser
def parse_hsl(text: str) -> RGBColour:
    hue_token, sat_token, light_token = split_components(text, 'hsl')
    h = parse_hue(hue_token, text)
    s = _parse_percent(sat_token, 'saturation', text)
    l = _parse_percent(light_token, 'lightness', text)  # noqa: E741
    return hsl_components_to_rgb(h, s, l)
