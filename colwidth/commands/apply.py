"""Redistribute to --available and print the updated columns.

Same widths as `redistribute`, written back onto copies of the columns.
With --json the columns come out in the input file format, ready to save.

Example:
    colwidth apply columns.json --available 100 --json
"""

from colwidth.core.columns_io import column_to_dict
from colwidth.core.types import Column, Command, Report
from colwidth.core.widths import apply_width_map, redistribute

command = Command(
    name='apply',
    help='Redistribute to --available and write the widths onto the columns.',
    needs_available=True,
)


@command.run
def run(columns: list[Column], report: Report, args) -> None:
    widths = redistribute(columns, args.available, getattr(args, 'total_count', None))
    updated = apply_width_map(columns, widths)
    report.add('apply', {'columns': [column_to_dict(c) for c in updated]})
