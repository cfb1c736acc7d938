"""PNG preview of a foreground colour on a background colour.

Draws sample text and a solid foreground bar on a background-filled
canvas, captioned with the contrast ratio.
"""

import os

from PIL import Image, ImageDraw, ImageFont

from contrast_checker.core.types import ComplianceReport, RGBColour

SWATCH_SIZE = (360, 140)

# Solid foreground stripe along the bottom edge: (x1, y1, x2, y2)
BAR_BOUNDS = (20, 110, 340, 124)


def render_swatch(background: RGBColour, foreground: RGBColour, report: ComplianceReport | None = None) -> Image.Image:
    image = Image.new('RGB', SWATCH_SIZE, background.as_tuple())
    draw = ImageDraw.Draw(image)
    font = ImageFont.load_default()

    draw.text((20, 20), 'Aa  The quick brown fox', fill=foreground.as_tuple(), font=font)
    caption = f'{foreground.hex} on {background.hex}'
    if report is not None:
        caption += f'  {report.ratio:.2f}:1'
    draw.text((20, 60), caption, fill=foreground.as_tuple(), font=font)
    draw.rectangle(BAR_BOUNDS, fill=foreground.as_tuple())
    return image


def save_swatch(
    path: str,
    background: RGBColour,
    foreground: RGBColour,
    report: ComplianceReport | None = None,
) -> str:
    """Render the swatch and save it as PNG. Returns the path written."""
    parent = os.path.dirname(path)
    if parent:
        os.makedirs(parent, exist_ok=True)
    render_swatch(background, foreground, report).save(path, format='PNG')
    return path
