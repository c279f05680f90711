"""Run every read-only command, combine into a single report.

Runs: widths, total, explicit, extract.
Runs redistribute too if --available is provided.
Skips: apply and preview (they produce new columns or files; run them explicitly).

Example:
    colwidth all columns.json
    colwidth all columns.json --available 100 --json
"""

from colwidth.core.types import Column, Command, Report

command = Command(
    name='all',
    help='Run every read-only command. Combine into a single report.',
)

# Commands never run automatically
SKIP = {'all', 'apply', 'preview'}


@command.run
def run(columns: list[Column], report: Report, args) -> None:
    from colwidth.registry import all_commands

    has_available = getattr(args, 'available', None) is not None
    for name, cmd in sorted(all_commands().items()):
        if name in SKIP:
            continue
        if cmd.needs_available and not has_available:
            continue
        cmd.execute(columns, report, args)
