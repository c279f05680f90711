"""Tests for colwidth.core.report — text and JSON output."""

import json

from colwidth.core.report import format_json, format_text
from colwidth.core.types import Column, Numeric, Report


def _report() -> Report:
    report = Report(
        source_path='layouts/columns.json',
        columns=[Column(id='intro', width=Numeric(50)), Column(id='extra')],
        available=100.0,
    )
    report.add('widths', {'widths': {'intro': 50.0, 'extra': 50.0}})
    report.add('total', {'total': 100.0, 'available': 100.0, 'overflow': False})
    report.add('explicit', {'explicit': False})
    return report


class TestFormatText:
    def test_header(self):
        text = format_text(_report())
        assert text.splitlines()[0] == 'colwidth: 2 columns — columns.json'

    def test_sections(self):
        text = format_text(_report())
        assert '── widths' in text
        assert '── total' in text
        assert 'explicit percent widths: no' in text

    def test_width_rows(self):
        lines = format_text(_report()).splitlines()
        extra = next(line for line in lines if line.strip().startswith('extra'))
        assert extra.split() == ['extra', '-', '→', '50']

    def test_total_within_available(self):
        assert 'total: 100  available: 100  ✓' in format_text(_report())

    def test_overflow_footer(self):
        report = _report()
        report.overflow = True
        assert format_text(report).splitlines()[-1] == 'OVERFLOW: columns exceed available width 100'

    def test_generic_fallback(self):
        report = Report()
        report.add('preview', {'file': 'tmp/columns.png'})
        assert '  preview.file: tmp/columns.png' in format_text(report)


class TestFormatJson:
    def test_structure(self):
        obj = json.loads(format_json(_report()))
        assert obj['source'] == 'layouts/columns.json'
        assert obj['columns'] == [{'id': 'intro', 'width': 50}, {'id': 'extra', 'width': None}]
        assert obj['available'] == 100.0
        assert obj['results']['widths']['widths'] == {'intro': 50.0, 'extra': 50.0}
        assert obj['overflow'] is False
        assert 'total_count' not in obj
