"""Single contrast check: resolve the config, parse both colours, build the report."""

from collections.abc import Mapping

from contrast_checker import registry
from contrast_checker.core.env import colour_defaults
from contrast_checker.core.luminance import contrast_ratio
from contrast_checker.core.report import build_report
from contrast_checker.core.types import ComplianceReport, ContrastConfig

DEFAULT_BACKGROUND = 'ffffff'
DEFAULT_FOREGROUND = '000000'


def select_mode(rgb: bool = False, hsl: bool = False, hex: bool = False, fallback: str | None = None) -> str:
    """Mode flags in order rgb, hsl, hex; with none set use fallback, else hex."""
    if rgb:
        return 'rgb'
    if hsl:
        return 'hsl'
    if hex:
        return 'hex'
    return fallback or 'hex'


def resolve_config(
    background: str | None = None,
    foreground: str | None = None,
    rgb: bool = False,
    hsl: bool = False,
    hex: bool = False,
    environ: Mapping[str, str] | None = None,
) -> ContrastConfig:
    """Build a ContrastConfig: explicit values, then CONTRAST_* variables, then defaults.

    Raises ValueError if CONTRAST_MODE names an unknown notation.
    """
    defaults = colour_defaults(environ)
    return ContrastConfig(
        mode=select_mode(rgb, hsl, hex, defaults['mode']),
        background=background or defaults['background'] or DEFAULT_BACKGROUND,
        foreground=foreground or defaults['foreground'] or DEFAULT_FOREGROUND,
    )


def run(config: ContrastConfig) -> ComplianceReport:
    """Parse both colours in the configured notation and report their contrast.

    Raises ColourParseError (MalformedColourString or MissingComponent)
    for input the notation cannot read.
    """
    notation = registry.get(config.mode)
    bg = notation.parse(config.background)
    fg = notation.parse(config.foreground)
    return build_report(contrast_ratio(bg, fg), background=bg, foreground=fg)
