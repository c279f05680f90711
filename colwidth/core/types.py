"""Shared types for colwidth: width values, Column, CssUnit, Command, Report."""

from __future__ import annotations

import math
import re
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

# Leading decimal number, the same prefix a browser's parseFloat accepts
NUMBER_PATTERN = re.compile(r'[+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)')


def parse_float(value: Any) -> float:
    """Parse the leading number out of value. NaN when there is none.

    '45%' -> 45.0, ' 12.5px' -> 12.5, 'abc' -> nan, None -> nan.
    """
    if isinstance(value, WidthValue):
        return value.to_float()
    if isinstance(value, bool) or value is None:
        return math.nan
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        m = NUMBER_PATTERN.match(value.strip())
        if not m:
            return math.nan
        return float(m.group(0).replace('Infinity', 'inf'))
    return math.nan


class WidthValue:
    """A declared column width: Unset, Numeric or UnitString."""

    def is_set(self) -> bool:
        return True

    def to_float(self) -> float:
        raise NotImplementedError

    def raw(self) -> float | str | None:
        raise NotImplementedError


@dataclass(frozen=True)
class Unset(WidthValue):
    def is_set(self) -> bool:
        return False

    def to_float(self) -> float:
        return math.nan

    def raw(self) -> None:
        return None


@dataclass(frozen=True)
class Numeric(WidthValue):
    value: float

    def to_float(self) -> float:
        return float(self.value)

    def raw(self) -> float:
        return self.value


@dataclass(frozen=True)
class UnitString(WidthValue):
    text: str  # as declared, e.g. '45%' or '120px'

    def to_float(self) -> float:
        return parse_float(self.text)

    def raw(self) -> str:
        return self.text


UNSET = Unset()


def as_width(value: Any) -> WidthValue:
    """Convert a loosely typed width (None, number, string) to a WidthValue."""
    if isinstance(value, WidthValue):
        return value
    if value is None:
        return UNSET
    if isinstance(value, bool):
        # JSON true/false is never a width
        return UnitString(str(value).lower())
    if isinstance(value, (int, float)):
        return Numeric(value)
    return UnitString(str(value))


@dataclass(frozen=True)
class Column:
    """A column block: identifier plus optional declared width."""

    id: str
    width: WidthValue = UNSET
    attributes: dict[str, Any] = field(default_factory=dict, compare=False)  # other block attributes, passed through


WidthMap = dict[str, float | None]


@dataclass(frozen=True)
class CssUnit:
    """One selectable length unit."""

    value: str  # machine value, e.g. '%'
    label: str  # shown in unit pickers
    default: str = ''


class Command:
    """A self-registering colwidth command.

    Usage in a command module:

        command = Command(name='widths', help='Effective width per column')

        @command.run
        def run(columns, report, args):
            ...
    """

    def __init__(self, name: str, help: str = '', needs_available: bool = False):
        self.name = name
        self.help = help
        self.needs_available = needs_available
        self._run_fn: Callable | None = None

    def run(self, fn: Callable) -> Callable:
        """Decorator to register the run function."""
        self._run_fn = fn
        return fn

    def execute(self, columns: list[Column], report: Report, args: Any) -> None:
        if self._run_fn is None:
            raise RuntimeError(f'Command {self.name} has no run function')
        self._run_fn(columns, report, args)


@dataclass
class Report:
    """Accumulates command results for text/JSON output."""

    source_path: str = ''
    columns: list[Column] = field(default_factory=list)
    total_count: int | None = None
    available: float | None = None
    results: dict[str, dict[str, Any]] = field(default_factory=dict)
    overflow: bool = False

    def add(self, command_name: str, data: dict[str, Any]) -> None:
        """Add (or extend) the results for a command."""
        self.results.setdefault(command_name, {}).update(data)
