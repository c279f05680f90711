"""CSS length units offered for column widths.

The table is immutable. Web unit pickers show the bare unit; native pickers
get a descriptive label.
"""

import re

from colwidth.core.types import CssUnit, parse_float

WEB = 'web'
NATIVE = 'native'

# machine value -> descriptive label
_UNIT_LABELS: tuple[tuple[str, str], ...] = (
    ('%', 'Percentage (%)'),
    ('px', 'Pixels (px)'),
    ('em', 'Relative to parent font size (em)'),
    ('rem', 'Relative to root font size (rem)'),
    ('vw', 'Viewport width (vw)'),
)

CSS_UNITS: tuple[CssUnit, ...] = tuple(CssUnit(value=v, label=v) for v, _ in _UNIT_LABELS)
NATIVE_CSS_UNITS: tuple[CssUnit, ...] = tuple(CssUnit(value=v, label=label) for v, label in _UNIT_LABELS)

_UNIT_SUFFIX = re.compile(r'(%|px|rem|em|vw)\s*$')


def css_units(platform: str = WEB) -> tuple[CssUnit, ...]:
    """Unit table for a platform ('web' or 'native')."""
    if platform == NATIVE:
        return NATIVE_CSS_UNITS
    return CSS_UNITS


def get_unit(value: str, platform: str = WEB) -> CssUnit:
    for unit in css_units(platform):
        if unit.value == value:
            return unit
    raise KeyError(f'Unknown unit: {value}. Available: {", ".join(u.value for u in CSS_UNITS)}')


def split_unit(text: str) -> tuple[float, str | None]:
    """Split '45%' into (45.0, '%'). Unit is None when there is no known suffix."""
    m = _UNIT_SUFFIX.search(text)
    unit = m.group(1) if m else None
    return parse_float(text), unit
