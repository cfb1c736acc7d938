"""Functional RGB colours: rgb(r, g, b).

Selected with -r/--rgb. Quote the value on the command line so the
shell leaves the parentheses alone. Exactly three integer channels in
[0, 255] are required, separated by commas and/or whitespace. The
`rgb(...)` wrapper may be omitted.

Example:
    uv run contrast-tool --rgb -b 'rgb(255, 255, 255)' -f 'rgb(51, 51, 51)'
"""

import re

from contrast_checker.core.tokens import split_components
from contrast_checker.core.types import MalformedColourString, Notation, RGBColour

notation = Notation(
    name='rgb',
    help='Functional rgb(r, g, b) with integer channels 0-255. Pass as a quoted string.',
)


@notation.parser
def parse_rgb(text: str) -> RGBColour:
    channels = []
    for token in split_components(text, 'rgb'):
        if not re.fullmatch(r'[0-9]+', token):
            raise MalformedColourString(
                f'rgb channel is not an integer: {token!r} in {text!r}',
                value=text,
                notation='rgb',
            )
        value = int(token)
        if value > 255:
            raise MalformedColourString(
                f'rgb channel out of range [0, 255]: {value} in {text!r}',
                value=text,
                notation='rgb',
            )
        channels.append(value)
    return RGBColour(*channels)
