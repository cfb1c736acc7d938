"""Report builder: WCAG verdicts plus text and JSON output."""

import json

from contrast_checker.core.types import ComplianceReport, RGBColour

# (level, minimum ratio) in output order. A level passes only when the
# ratio is strictly greater than its minimum.
LEVELS: tuple[tuple[str, float], ...] = (
    ('AA', 4.5),
    ('AALarge', 3.0),
    ('AAA', 7.0),
    ('AAALarge', 4.5),
)

LEVEL_NAMES = tuple(name for name, _ in LEVELS)

_LABELS = {
    'AA': 'AA',
    'AALarge': 'AA (large text)',
    'AAA': 'AAA',
    'AAALarge': 'AAA (large text)',
}


def build_report(
    ratio: float,
    background: RGBColour | None = None,
    foreground: RGBColour | None = None,
) -> ComplianceReport:
    """Map a contrast ratio to a pass/fail verdict per level."""
    verdicts = {name: ratio > minimum for name, minimum in LEVELS}
    return ComplianceReport(ratio=ratio, verdicts=verdicts, background=background, foreground=foreground)


def format_json(report: ComplianceReport) -> str:
    """Format report as tab-indented JSON."""
    return json.dumps(report.to_dict(), indent='\t')


def format_text(report: ComplianceReport) -> str:
    """Format report as human-readable text."""
    lines = [f'contrast-tool: {report.ratio:.2f}:1']
    if report.background is not None and report.foreground is not None:
        lines.append(f'  background {report.background.hex}  foreground {report.foreground.hex}')
    lines.append('')

    minimums = dict(LEVELS)
    for level, passed in report.verdicts.items():
        mark = '\u2713' if passed else '\u2717'
        label = _LABELS.get(level, level)
        lines.append(f'  {label:<17} > {minimums.get(level, 0):g}:1  {"pass" if passed else "fail"}  {mark}')

    total = len(report.verdicts)
    passed_count = sum(1 for passed in report.verdicts.values() if passed)
    lines.append('')
    lines.append(f'PASS {passed_count}/{total} levels  FAIL {total - passed_count}/{total} levels')
    return '\n'.join(lines)
