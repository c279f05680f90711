"""Report builder — text and JSON output for colwidth results."""

import json
import os
from typing import Any

from colwidth.core.columns_io import column_to_dict
from colwidth.core.types import Report


def _fmt(width: Any) -> str:
    if width is None:
        return '-'
    if isinstance(width, float):
        return f'{width:g}'
    return str(width)


def format_text(report: Report) -> str:
    """Format report as human-readable text."""
    lines = []
    header = f'colwidth: {len(report.columns)} columns'
    if report.source_path:
        header += f' — {os.path.basename(report.source_path)}'
    if report.total_count is not None:
        header += f' (counted as {report.total_count})'
    lines.append(header)
    lines.append('')

    declared = {c.id: c.width.raw() for c in report.columns}

    for name, data in report.results.items():
        lines.append(f'── {name}')
        if name in ('widths', 'redistribute') and 'widths' in data:
            for column_id, width in data['widths'].items():
                lines.append(f'  {column_id:<16} {_fmt(declared.get(column_id)):>8} → {_fmt(width)}')
        elif name == 'total':
            line = f'  total: {_fmt(data["total"])}'
            if data.get('available') is not None:
                mark = '✗' if data.get('overflow') else '✓'
                line += f'  available: {_fmt(data["available"])}  {mark}'
            lines.append(line)
        elif name == 'explicit':
            lines.append(f'  explicit percent widths: {"yes" if data["explicit"] else "no"}')
        elif name == 'extract':
            lines.append(f'  widths: {", ".join(_fmt(w) for w in data["widths"])}')
        elif name == 'apply':
            for column in data['columns']:
                lines.append(f'  {column["id"]:<16} {_fmt(column["width"])}')
        else:
            for k, v in data.items():
                lines.append(f'  {name}.{k}: {v}')
        lines.append('')

    if report.overflow:
        lines.append(f'OVERFLOW: columns exceed available width {_fmt(report.available)}')
    return '\n'.join(lines)


def format_json(report: Report) -> str:
    """Format report as JSON."""
    obj: dict[str, Any] = {}
    if report.source_path:
        obj['source'] = report.source_path
    obj['columns'] = [column_to_dict(c) for c in report.columns]
    if report.total_count is not None:
        obj['total_count'] = report.total_count
    if report.available is not None:
        obj['available'] = report.available
    obj['results'] = report.results
    obj['overflow'] = report.overflow
    return json.dumps(obj, indent=2)
