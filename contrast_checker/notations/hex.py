"""Hexadecimal colours: #rgb or #rrggbb (the default notation).

The leading # is optional and digits are case-insensitive. Three-digit
shorthand doubles each digit, so `abc` reads as `aabbcc`. Any other
length or a non-hex character is rejected.

Example:
    uv run contrast-tool -b '#fafafa' -f 333
"""

import re

from contrast_checker.core.types import MalformedColourString, Notation, RGBColour

notation = Notation(
    name='hex',
    help='Hexadecimal #rgb or #rrggbb (default). The # is optional.',
)

_HEX_DIGITS = re.compile(r'[0-9a-fA-F]{3}|[0-9a-fA-F]{6}')


def _trim_hash(text: str) -> str:
    h = text.strip()
    if h.startswith('#'):
        h = h[1:]
    return h.strip()


@notation.parser
def hex_to_rgb(text: str) -> RGBColour:
    """Parse a 3- or 6-digit hex colour, with or without the leading #."""
    h = _trim_hash(text)
    if not _HEX_DIGITS.fullmatch(h):
        raise MalformedColourString(f'Malformed hex colour: {text!r}', value=text, notation='hex')

    if len(h) == 3:
        h = ''.join(ch * 2 for ch in h)
    return RGBColour(int(h[0:2], 16), int(h[2:4], 16), int(h[4:6], 16))


def rgb_to_hex(colour: RGBColour) -> str:
    """Canonical lowercase #rrggbb."""
    return colour.hex
