"""List the column widths in order.

Empty widths (missing, 0 or '') become 100 / N. By default every width is
parsed to a number ('45%' -> 45); --raw keeps the declared text.

Example:
    colwidth extract columns.json
    colwidth extract columns.json --raw
"""

from colwidth.core.types import Column, Command, Report
from colwidth.core.widths import extract_widths

command = Command(
    name='extract',
    help='Declared widths in column order (parsed, or as declared with --raw).',
)


@command.run
def run(columns: list[Column], report: Report, args) -> None:
    parse = not getattr(args, 'raw', False)
    report.add('extract', {'widths': extract_widths(columns, parse=parse), 'parsed': parse})
