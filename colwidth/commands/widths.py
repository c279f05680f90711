"""Effective width of every column.

A declared width is used as-is (rounded to two decimals). Columns without
one get an equal share: 100 / N, where N is the number of columns or
--total-count when given. Widths that are not numbers show as '-'.

Example:
    colwidth widths columns.json
    colwidth widths columns.json --total-count 4
"""

from colwidth.core.types import Column, Command, Report
from colwidth.core.widths import width_map

command = Command(
    name='widths',
    help='Effective width per column (declared, or an equal share of 100).',
)


@command.run
def run(columns: list[Column], report: Report, args) -> None:
    report.add('widths', {'widths': width_map(columns, getattr(args, 'total_count', None))})
