"""Total width occupied by the columns.

Sums the effective widths (see `colwidth help widths`). With --available,
also reports whether the columns overflow it; combine with
--fail-on-overflow to gate CI.

Example:
    colwidth total columns.json
    colwidth total columns.json --available 100 --fail-on-overflow
"""

from colwidth.core.types import Column, Command, Report
from colwidth.core.widths import round_width, total_width

command = Command(
    name='total',
    help='Total width occupied by the columns. Flags overflow against --available.',
)


@command.run
def run(columns: list[Column], report: Report, args) -> None:
    total = round_width(total_width(columns, getattr(args, 'total_count', None)))
    available = getattr(args, 'available', None)
    data: dict = {'total': total, 'available': available}
    if available is not None:
        overflow = total is not None and total > available
        data['overflow'] = overflow
        report.overflow = report.overflow or overflow
    report.add('total', data)
