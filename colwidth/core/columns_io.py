"""Load and dump column sets as JSON.

Accepts a bare list or {"columns": [...]}. Each item is either
{"id": ..., "width": ...} or the block shape
{"clientId": ..., "attributes": {"width": ...}}.
"""

import json
from collections.abc import Sequence
from typing import Any

from colwidth.core.types import Column, as_width


def load_columns_file(path: str) -> list[Column]:
    """Parse a columns JSON file from disk."""
    with open(path, encoding='utf-8') as f:
        text = f.read()
    return load_columns_string(text)


def load_columns_string(text: str) -> list[Column]:
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ValueError(f'Invalid columns JSON: {e}') from e

    if isinstance(data, dict):
        data = data.get('columns')
    if not isinstance(data, list):
        raise ValueError('Columns JSON must be a list or an object with a "columns" list')

    return [_column_from_item(item, i) for i, item in enumerate(data)]


def _column_from_item(item: Any, index: int) -> Column:
    if not isinstance(item, dict):
        raise ValueError(f'Column {index} is not an object: {item!r}')

    if 'attributes' in item:
        attributes = dict(item.get('attributes') or {})
        column_id = item.get('clientId', item.get('id'))
    else:
        attributes = {k: v for k, v in item.items() if k not in ('id', 'clientId')}
        column_id = item.get('id', item.get('clientId'))

    width = attributes.pop('width', None)
    return Column(
        id=str(column_id) if column_id is not None else f'col-{index}',
        width=as_width(width),
        attributes=attributes,
    )


def column_to_dict(column: Column) -> dict[str, Any]:
    obj: dict[str, Any] = {'id': column.id, 'width': column.width.raw()}
    obj.update(column.attributes)
    return obj


def dump_columns(columns: Sequence[Column]) -> str:
    return json.dumps([column_to_dict(c) for c in columns], indent=2)
