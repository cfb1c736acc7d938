"""contrast-tool: WCAG 2.0 colour contrast checker.

Usage: uv run contrast-tool [-b <background>] [-f <foreground>] [-r | -l | -x] [options]

Computes the contrast ratio between a background and a foreground colour
and reports pass/fail against WCAG AA, AA (large text), AAA and AAA
(large text). Colours are hex by default; -r reads rgb(r, g, b) strings
and -l reads hsl(h, s%, l%) strings. Run `contrast-tool --notations` to
list the notations.

Environment variables / .env loading:
  OS environment variables are always used first.
  If a variable is not set, contrast-tool looks for a .env file starting
  from the current directory and walking up, stopping at the nearest .git
  boundary. Use --env-file to override the .env location explicitly.
  CONTRAST_BACKGROUND, CONTRAST_FOREGROUND and CONTRAST_MODE supply
  defaults for -b, -f and the notation.
"""

import argparse
import sys

from contrast_checker import __version__, registry
from contrast_checker.core.env import load_env
from contrast_checker.core.report import LEVEL_NAMES, format_json, format_text
from contrast_checker.core.swatch import save_swatch
from contrast_checker.core.types import ColourParseError, ComplianceReport
from contrast_checker.runner import resolve_config, run


def _build_parser() -> argparse.ArgumentParser:
    epilog = (
        'Examples:\n'
        '  contrast-tool -b ffffff -f 767676\n'
        "  contrast-tool -b '#fff' -f '#333' --text\n"
        "  contrast-tool --rgb -b 'rgb(255, 255, 255)' -f 'rgb(0, 0, 0)'\n"
        "  contrast-tool --hsl -b 'hsl(0, 0%, 100%)' -f 'hsl(0.5turn, 100%, 25%)'\n"
        '  contrast-tool -b 1e293b -f 94a3b8 --require AA\n'
        '  contrast-tool -b 1e293b -f 94a3b8 --swatch ./tmp/pair.png\n'
        '  contrast-tool --notations\n'
    )
    parser = argparse.ArgumentParser(
        prog='contrast-tool',
        description='A utility to check for WCAG compliant color contrast.',
        epilog=epilog,
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument('-v', '--version', action='version', version=f'%(prog)s {__version__}')
    parser.add_argument('-b', '--background', default=None, help='Background colour (default: ffffff)')
    parser.add_argument('-f', '--foreground', default=None, help='Foreground colour (default: 000000)')
    parser.add_argument(
        '-r',
        '--rgb',
        action='store_true',
        help="Colours are rgb strings, passed quoted: 'rgb(r,g,b)'",
    )
    parser.add_argument(
        '-l',
        '--hsl',
        action='store_true',
        help="Colours are hsl strings, passed quoted: 'hsl(h,s%%,l%%)'",
    )
    parser.add_argument(
        '-x',
        '--hex',
        action='store_true',
        help='Colours are hexadecimal. Optional: this is the default unless CONTRAST_MODE says otherwise',
    )
    parser.add_argument(
        '--env-file',
        metavar='PATH',
        default=None,
        help='Path to .env file (default: walk up from cwd to .git boundary)',
    )
    parser.add_argument('-t', '--text', action='store_true', help='Output text instead of JSON')
    parser.add_argument(
        '-q',
        '--require',
        choices=LEVEL_NAMES,
        default=None,
        metavar='LEVEL',
        help=f'Exit 1 if LEVEL fails (CI gating). One of: {", ".join(LEVEL_NAMES)}',
    )
    parser.add_argument('-s', '--swatch', metavar='PATH', default=None, help='Write a PNG preview of the pair')
    parser.add_argument('--notations', action='store_true', help='List supported colour notations and exit')
    parser.add_argument('--verbose', action='store_true', help='Echo the notation and parsed colours to stderr')
    return parser


def _print_notations() -> None:
    """Print the first docstring line of every notation module."""
    notations = registry.all_notations()
    print('Available notations:\n')
    for name, notation in sorted(notations.items()):
        mod = sys.modules.get(f'contrast_checker.notations.{name}')
        doc = (getattr(mod, '__doc__', None) or '').strip()
        short = doc.splitlines()[0] if doc else notation.help
        print(f'  {name:<6} {short}')
    print('\nRun: contrast-tool -h for flags.')


def _check_required(report: ComplianceReport, level: str) -> bool:
    """Return True if the required level fails."""
    if report.passes(level):
        return False
    print(f'contrast-tool: FAIL {level} requires more contrast than {report.ratio:.2f}:1', file=sys.stderr)
    return True


def main(argv: list[str] | None = None) -> None:
    parser = _build_parser()
    args = parser.parse_args(argv)

    # Load .env before resolving defaults; OS env vars always win
    env_path = load_env(env_file=args.env_file)
    if env_path:
        print(f'contrast-tool: loaded {env_path}', file=sys.stderr)

    if args.notations:
        _print_notations()
        return

    try:
        config = resolve_config(
            args.background,
            args.foreground,
            rgb=args.rgb,
            hsl=args.hsl,
            hex=args.hex,
        )
    except ValueError as exc:
        parser.error(str(exc))

    if args.verbose:
        print(f'contrast-tool: {config.mode} set', file=sys.stderr)

    try:
        report = run(config)
    except ColourParseError as exc:
        parser.error(str(exc))

    if args.verbose and report.background is not None and report.foreground is not None:
        print(
            f'contrast-tool: background {report.background.as_tuple()}  foreground {report.foreground.as_tuple()}',
            file=sys.stderr,
        )

    if args.text:
        print(format_text(report))
    else:
        print(format_json(report))

    if args.swatch and report.background is not None and report.foreground is not None:
        path = save_swatch(args.swatch, report.background, report.foreground, report)
        print(f'contrast-tool: wrote {path}', file=sys.stderr)

    # CI gate: after output so the report is visible even on failure
    if args.require and _check_required(report, args.require):
        sys.exit(1)


if __name__ == '__main__':
    main()
