"""WCAG 2.0 relative luminance and contrast ratio.

See https://www.w3.org/TR/2008/REC-WCAG20-20081211/#relativeluminancedef
and https://www.w3.org/TR/2008/REC-WCAG20-20081211/#contrast-ratiodef
"""

from contrast_checker.core.types import RGBColour

# Rec. 709 channel weights
WEIGHTS = (0.2126, 0.7152, 0.0722)

# Added to both luminances so pure black does not divide by zero
FLARE = 0.05


def scaled_channel(c: int) -> float:
    """Linearise an 8-bit sRGB channel value."""
    unscaled = c / 255
    if unscaled <= 0.03928:
        return unscaled / 12.92
    return ((unscaled + 0.055) / 1.055) ** 2.4


def relative_luminance(colour: RGBColour) -> float:
    wr, wg, wb = WEIGHTS
    return wr * scaled_channel(colour.r) + wg * scaled_channel(colour.g) + wb * scaled_channel(colour.b)


def contrast_ratio(background: RGBColour, foreground: RGBColour) -> float:
    """Lighter over darker luminance, each offset by FLARE. Always >= 1."""
    l_bg = relative_luminance(background) + FLARE
    l_fg = relative_luminance(foreground) + FLARE
    return max(l_bg, l_fg) / min(l_bg, l_fg)
