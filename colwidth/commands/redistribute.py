"""Fit the columns into --available by shifting every column equally.

The gap between the total width and the available width is split evenly
across the columns and added to (or taken from) each one. Columns keep
their differences from each other; they are not scaled.

--total-count changes the share given to columns without a width, e.g.
to preview widths before a column is inserted.

Example:
    colwidth redistribute columns.json --available 100
    colwidth redistribute columns.json --available 100 --total-count 4
"""

from colwidth.core.types import Column, Command, Report
from colwidth.core.widths import redistribute

command = Command(
    name='redistribute',
    help='Shift every column by the same amount so they fill --available.',
    needs_available=True,
)


@command.run
def run(columns: list[Column], report: Report, args) -> None:
    widths = redistribute(columns, args.available, getattr(args, 'total_count', None))
    report.add('redistribute', {'widths': widths, 'available': args.available})
