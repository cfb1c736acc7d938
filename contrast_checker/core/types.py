"""Shared types for contrast-tool: RGBColour, ComplianceReport, ContrastConfig, Notation, parse errors."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

MODES = ('hex', 'rgb', 'hsl')


class ColourParseError(ValueError):
    """A colour string could not be parsed in the selected notation."""

    def __init__(self, message: str, value: str = '', notation: str = ''):
        super().__init__(message)
        self.value = value
        self.notation = notation


class MalformedColourString(ColourParseError):
    """Wrong length, bad characters, extra components or out-of-range values."""


class MissingComponent(ColourParseError):
    """Fewer numeric components than the notation requires."""


@dataclass(frozen=True)
class RGBColour:
    """An 8-bit-per-channel sRGB colour."""

    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        for name in ('r', 'g', 'b'):
            value = getattr(self, name)
            # bool is an int subclass but never a channel
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f'channel {name} must be an int, got {value!r}')
            if not 0 <= value <= 255:
                raise ValueError(f'channel {name} out of range [0, 255]: {value}')

    @property
    def hex(self) -> str:
        return f'#{self.r:02x}{self.g:02x}{self.b:02x}'

    def as_tuple(self) -> tuple[int, int, int]:
        return (self.r, self.g, self.b)


@dataclass(frozen=True)
class ComplianceReport:
    """Contrast ratio plus a pass/fail verdict per WCAG level, in level order."""

    ratio: float
    verdicts: dict[str, bool] = field(default_factory=dict)
    background: RGBColour | None = None
    foreground: RGBColour | None = None

    def passes(self, level: str) -> bool:
        if level not in self.verdicts:
            raise KeyError(f'Unknown level: {level}. Available: {", ".join(self.verdicts)}')
        return self.verdicts[level]

    def to_dict(self) -> dict[str, Any]:
        """Wire document: ratio first, then each level as 'pass' or 'fail'."""
        obj: dict[str, Any] = {'ratio': self.ratio}
        for level, passed in self.verdicts.items():
            obj[level] = 'pass' if passed else 'fail'
        return obj


@dataclass
class ContrastConfig:
    """Inputs to a single contrast check."""

    mode: str = 'hex'
    background: str = 'ffffff'
    foreground: str = '000000'

    def __post_init__(self) -> None:
        if self.mode not in MODES:
            raise ValueError(f'Unknown mode: {self.mode!r}. Expected one of: {", ".join(MODES)}')


class Notation:
    """A self-registering colour notation.

    Usage in a notation module:

        notation = Notation(name='hex', help='Hexadecimal #rgb / #rrggbb')

        @notation.parser
        def hex_to_rgb(text):
            ...
    """

    def __init__(self, name: str, help: str = ''):
        self.name = name
        self.help = help
        self._parse_fn: Callable[[str], RGBColour] | None = None

    def parser(self, fn: Callable[[str], RGBColour]) -> Callable[[str], RGBColour]:
        """Decorator to register the parse function."""
        self._parse_fn = fn
        return fn

    def parse(self, text: str) -> RGBColour:
        if self._parse_fn is None:
            raise RuntimeError(f'Notation {self.name} has no parse function')
        return self._parse_fn(text)
