"""Check whether every column declares a percentage width.

Numbers and '%' strings count. A missing width, or any other string
(e.g. '120px'), does not.

Example:
    colwidth explicit columns.json
"""

from colwidth.core.types import Column, Command, Report
from colwidth.core.widths import has_explicit_percent_widths

command = Command(
    name='explicit',
    help='Yes if every column declares a numeric or percent width.',
)


@command.run
def run(columns: list[Column], report: Report, args) -> None:
    report.add('explicit', {'explicit': has_explicit_percent_widths(columns)})
