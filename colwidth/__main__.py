"""colwidth — Column width math for page-layout column blocks.

Usage: colwidth <command> <columns.json> [options]

Commands are auto-discovered from colwidth/commands/.
Each command module's docstring is its documentation.
Run `colwidth help <command>` for full module docs.

Environment variables / .env loading:
  OS environment variables are always used first.
  If a variable is not set, colwidth looks for a .env file starting from
  the current directory and walking up, stopping at the nearest .git boundary.
  Use --env-file to override the .env location explicitly.
"""

import argparse
import importlib
import os
import sys

from colwidth import registry
from colwidth.core.columns_io import load_columns_file
from colwidth.core.env import Settings, load_env
from colwidth.core.report import format_json, format_text
from colwidth.core.types import Report
from colwidth.core.units import css_units
from colwidth.core.widths import format_width_with_unit


def _load_command_module(name: str) -> object:
    """Load the raw module for a command (for docstring access)."""
    return importlib.import_module(f'colwidth.commands.{name}')


def _short_help(name: str, fallback: str) -> str:
    doc = (_load_command_module(name).__doc__ or '').strip()
    return doc.splitlines()[0] if doc else fallback


def _build_parser() -> argparse.ArgumentParser:
    commands = registry.all_commands()

    epilog = (
        'Examples:\n'
        '  colwidth widths columns.json\n'
        '  colwidth redistribute columns.json --available 100\n'
        '  colwidth apply columns.json --available 100 --json\n'
        '  colwidth all columns.json --available 100 --fail-on-overflow\n'
        '  colwidth preview columns.json ./tmp\n'
        '  colwidth format 150 %\n'
        '  colwidth units\n'
        '  colwidth help redistribute\n'
        '\n'
        'Settings (set in .env or environment):\n'
        '  COLWIDTH_PLATFORM=web|native   unit labels\n'
        '  COLWIDTH_UNIT=%                default unit for `format`\n'
        '  COLWIDTH_PREVIEW_WIDTH=800     preview image size\n'
        '  COLWIDTH_PREVIEW_HEIGHT=120\n'
    )
    parser = argparse.ArgumentParser(
        prog='colwidth',
        description='Column width math for page-layout column blocks.',
        epilog=epilog,
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        '--env-file',
        metavar='PATH',
        default=None,
        help='Path to .env file (default: walk up from cwd to .git boundary)',
    )
    sub = parser.add_subparsers(dest='command', help='Command to run')

    for name, cmd in sorted(commands.items()):
        p = sub.add_parser(name, help=_short_help(name, cmd.help))
        p.add_argument('columns', help='Path to columns JSON file')
        if name == 'preview':
            p.add_argument('out_dir', help='Directory for the rendered PNG')
        p.add_argument('-n', '--total-count', type=int, default=None, metavar='N', help='Count unset columns as 100/N')
        p.add_argument('-a', '--available', type=float, default=None, metavar='W', help='Available width to fit into')
        p.add_argument('-j', '--json', action='store_true', help='Output JSON instead of text')
        p.add_argument('-r', '--raw', action='store_true', help='extract: keep widths as declared')
        p.add_argument(
            '--fail-on-overflow',
            action='store_true',
            help='Exit 1 if the total width exceeds --available (CI gating)',
        )

    help_parser = sub.add_parser('help', help='Print full docs for a command')
    help_parser.add_argument('topic', nargs='?', help='Command name')

    sub.add_parser('units', help='List the supported CSS length units')

    format_parser = sub.add_parser('format', help='Format a width with a unit (negatives -> 0, %% capped at 100)')
    format_parser.add_argument('width', help='Width value, e.g. 45 or -5')
    format_parser.add_argument('unit', nargs='?', default=None, help='Unit (default: COLWIDTH_UNIT or %%)')

    return parser


def _print_help(topic: str | None) -> None:
    """Print full module docstring for a command."""
    commands = registry.all_commands()

    if topic is None:
        print('Available commands:\n')
        for name, cmd in sorted(commands.items()):
            print(f'  {name:<14} {_short_help(name, cmd.help)}')
        print('\nRun: colwidth help <command> for full docs.')
        return

    if topic not in commands:
        print(f'Unknown command: {topic}', file=sys.stderr)
        print(f'Available: {", ".join(sorted(commands))}', file=sys.stderr)
        sys.exit(1)

    doc = (_load_command_module(topic).__doc__ or '').strip()
    print(doc if doc else f'(No module docs for {topic!r})')


def _print_units(settings: Settings) -> None:
    for unit in css_units(settings.platform):
        print(f'  {unit.value:<5} {unit.label}')


def _print_format(args: argparse.Namespace, settings: Settings) -> None:
    width = args.width
    try:
        width = float(width)
    except ValueError:
        pass  # unit strings such as '45%' are passed through as text
    print(format_width_with_unit(width, args.unit or settings.unit))


def main() -> None:
    parser = _build_parser()
    args = parser.parse_args()

    # Load .env before anything else; OS env vars always win
    env_path = load_env(env_file=getattr(args, 'env_file', None))
    if env_path:
        print(f'colwidth: loaded {env_path}', file=sys.stderr)
    settings = Settings.from_environ()

    if not args.command:
        parser.print_help()
        sys.exit(1)

    if args.command == 'help':
        _print_help(args.topic)
        return
    if args.command == 'units':
        _print_units(settings)
        return
    if args.command == 'format':
        _print_format(args, settings)
        return

    if not os.path.isfile(args.columns):
        print(f'Error: columns file not found: {args.columns}', file=sys.stderr)
        sys.exit(1)

    try:
        columns = load_columns_file(args.columns)
    except ValueError as e:
        print(f'Error: {e}', file=sys.stderr)
        sys.exit(1)

    cmd = registry.get(args.command)
    if cmd.needs_available and args.available is None:
        print(f'Error: {args.command} requires --available', file=sys.stderr)
        sys.exit(1)

    args.settings = settings
    report = Report(
        source_path=args.columns,
        columns=columns,
        total_count=args.total_count,
        available=args.available,
    )
    cmd.execute(columns, report, args)

    # Overflow is judged on the declared layout, even when `total` was not run
    if args.fail_on_overflow and args.available is not None and 'total' not in report.results:
        registry.get('total').execute(columns, report, args)

    if args.json:
        print(format_json(report))
    else:
        print(format_text(report))

    # CI gate runs after output so the report is visible even on failure
    if args.fail_on_overflow and report.overflow:
        sys.exit(1)


if __name__ == '__main__':
    main()
