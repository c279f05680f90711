"""Column width math: effective widths, totals and redistribution.

All functions are pure. Widths are percentages unless the caller says
otherwise; every computed width goes through round_width() so results carry
at most two decimal places. A width that is not a finite number comes back
as None instead of raising.
"""

import math
from collections.abc import Sequence
from dataclasses import replace
from decimal import ROUND_HALF_UP, Decimal
from typing import Any

from colwidth.core.types import (
    NUMBER_PATTERN,
    Column,
    Numeric,
    UnitString,
    WidthMap,
    WidthValue,
    as_width,
    parse_float,
)

_PRECISION = Decimal('0.01')


def round_width(value: Any) -> float | None:
    """Round a width to two decimals, or None if it is not a finite number.

    Rounds the exact binary value with ties away from zero, which is what
    fixed-point formatting does (0.125 -> 0.13, 1.005 -> 1.0).
    """
    unitless = parse_float(value)
    if not math.isfinite(unitless):
        return None
    if abs(unitless) >= 1e21:
        # fixed-point formatting leaves numbers this large untouched
        return unitless
    return float(Decimal(unitless).quantize(_PRECISION, rounding=ROUND_HALF_UP))


def effective_width(column: Column, total_count: int) -> float | None:
    """Declared width if set, otherwise an equal share of 100.

    total_count must be >= 1. With 0 an unset column has no finite share
    and gets None.
    """
    if column.width.is_set():
        return round_width(column.width)
    if total_count == 0:
        return None
    return round_width(100 / total_count)


def total_width(columns: Sequence[Column], total_count: int | None = None) -> float:
    """Sum of effective widths. Columns without a finite width are skipped."""
    if total_count is None:
        total_count = len(columns)
    widths = (effective_width(c, total_count) for c in columns)
    return sum(w for w in widths if w is not None)


def width_map(columns: Sequence[Column], total_count: int | None = None) -> WidthMap:
    """Map column id -> effective width. A repeated id keeps the last value."""
    if total_count is None:
        total_count = len(columns)
    return {c.id: effective_width(c, total_count) for c in columns}


def redistribute(
    columns: Sequence[Column],
    available_width: float,
    total_count: int | None = None,
) -> WidthMap:
    """Shrink or grow every column by the same amount so they fill available_width.

    total_count overrides the denominator for unset columns (used when a
    column is about to be added or removed). The per-column adjustment is
    always divided by len(columns).
    """
    if not columns:
        return {}
    if total_count is None:
        total_count = len(columns)
    difference = available_width - total_width(columns, total_count)
    adjustment = difference / len(columns)
    return {
        column_id: None if width is None else round_width(width + adjustment)
        for column_id, width in width_map(columns, total_count).items()
    }


def has_explicit_percent_widths(columns: Sequence[Column]) -> bool:
    """True if every column declares a number or a '%' width."""
    for column in columns:
        width = column.width
        if isinstance(width, Numeric):
            value = width.to_float()
        elif isinstance(width, UnitString) and width.text.endswith('%'):
            value = parse_float(width.text)
        else:
            return False
        if not math.isfinite(value):
            return False
    return True


def apply_width_map(columns: Sequence[Column], widths: WidthMap) -> list[Column]:
    """Copies of columns with width taken from the map (Unset when missing)."""
    return [replace(c, width=as_width(widths.get(c.id))) for c in columns]


def extract_widths(columns: Sequence[Column], parse: bool = True) -> list[float | str]:
    """Declared widths, with 100 / len(columns) standing in for empty ones.

    A declared 0, NaN or '' counts as empty.
    """
    result: list[float | str] = []
    for column in columns:
        declared = column.width.raw()
        if not declared or (isinstance(declared, float) and math.isnan(declared)):
            declared = 100 / len(columns)
        result.append(parse_float(declared) if parse else declared)
    return result


def _number_text(value: float) -> str:
    if math.isnan(value):
        return 'NaN'
    if math.isinf(value):
        return 'Infinity' if value > 0 else '-Infinity'
    if value == int(value) and abs(value) < 1e21:
        return str(int(value))
    text = repr(value)
    if 'e' not in text:
        return text
    if abs(value) >= 1e-6:
        # plain decimals down to 1e-6, e.g. 0.00001
        return format(Decimal(text), 'f')
    mantissa, exponent = text.split('e')
    return f'{mantissa}e{int(exponent):+d}'


def format_width_with_unit(width: Any, unit: str) -> str:
    """Width text with its unit suffix, e.g. '45%' or '12px'.

    Negative widths become '0'. Percentages are capped at 100.
    """
    if isinstance(width, WidthValue):
        width = width.raw()

    if parse_float(width) < 0:
        width = '0'

    if unit == '%':
        width = min(_to_number(width), 100)

    if isinstance(width, str):
        return f'{width}{unit}'
    return f'{_number_text(_to_number(width))}{unit}'


def _to_number(value: Any) -> float:
    """Strict numeric coercion: the whole string must be a number ('' is 0).

    Unlike parse_float, '45%' is NaN here.
    """
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return 0.0
        m = NUMBER_PATTERN.fullmatch(text)
        return parse_float(text) if m else math.nan
    return parse_float(value)
