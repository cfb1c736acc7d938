"""Tokenizer for CSS functional colour notation: `name(a, b, c)`.

Strips an optional `name(...)` wrapper and splits the body on commas
and/or whitespace. Component text is returned verbatim; each notation
validates its own tokens.
"""

import re

from contrast_checker.core.types import MalformedColourString, MissingComponent

_SEPARATOR = re.compile(r'\s*,\s*|\s+')


def split_components(text: str, name: str, count: int = 3) -> list[str]:
    """Return exactly `count` component tokens from `name(...)` or a bare body.

    Raises MissingComponent when there are too few tokens and
    MalformedColourString for an unbalanced wrapper, empty tokens or extras.
    """
    body = text.strip()
    m = re.fullmatch(rf'{name}\s*\((.*)\)', body, re.IGNORECASE | re.DOTALL)
    if m:
        body = m.group(1).strip()
    elif '(' in body or ')' in body:
        raise MalformedColourString(f'Malformed {name} colour: {text!r}', value=text, notation=name)

    tokens = _SEPARATOR.split(body) if body else []
    if any(tok == '' for tok in tokens):
        # Doubled or trailing separators, e.g. "1,,2"
        raise MalformedColourString(f'Empty component in {name} colour: {text!r}', value=text, notation=name)
    if len(tokens) < count:
        raise MissingComponent(
            f'{name} colour needs {count} components, got {len(tokens)}: {text!r}',
            value=text,
            notation=name,
        )
    if len(tokens) > count:
        raise MalformedColourString(
            f'{name} colour takes {count} components, got {len(tokens)}: {text!r}',
            value=text,
            notation=name,
        )
    return tokens
