"""Tests for colwidth.core.columns_io — columns JSON loading."""

import json
from pathlib import Path

import pytest
from colwidth.core.columns_io import dump_columns, load_columns_file, load_columns_string
from colwidth.core.types import UNSET, Column, Numeric, UnitString

FIXTURES_DIR = Path(__file__).parent / 'fixtures'


class TestLoadColumnsFile:
    def test_block_shape(self):
        columns = load_columns_file(str(FIXTURES_DIR / 'columns.json'))
        assert [c.id for c in columns] == ['intro', 'aside', 'extra']
        assert [c.width for c in columns] == [Numeric(50), UnitString('30%'), UNSET]

    def test_other_attributes_kept(self):
        columns = load_columns_file(str(FIXTURES_DIR / 'columns.json'))
        assert columns[0].attributes == {'verticalAlignment': 'top'}

    def test_flat_list(self):
        columns = load_columns_file(str(FIXTURES_DIR / 'unset.json'))
        assert columns == [Column(id='a'), Column(id='b'), Column(id='c')]


class TestLoadColumnsString:
    def test_missing_id(self):
        (column,) = load_columns_string('[{"width": 40}]')
        assert column.id == 'col-0'

    def test_null_width(self):
        (column,) = load_columns_string('[{"id": "a", "width": null}]')
        assert column.width is UNSET

    def test_numeric_id(self):
        (column,) = load_columns_string('[{"id": 7}]')
        assert column.id == '7'

    def test_invalid_json(self):
        with pytest.raises(ValueError, match='Invalid columns JSON'):
            load_columns_string('[{')

    def test_wrong_shape(self):
        with pytest.raises(ValueError, match='list'):
            load_columns_string('{"rows": []}')

    def test_item_not_object(self):
        with pytest.raises(ValueError, match='Column 1'):
            load_columns_string('[{"id": "a"}, 40]')


class TestDumpColumns:
    def test_flat_shape(self):
        columns = [Column(id='a', width=Numeric(45.5), attributes={'tag': 'x'}), Column(id='b')]
        assert json.loads(dump_columns(columns)) == [
            {'id': 'a', 'width': 45.5, 'tag': 'x'},
            {'id': 'b', 'width': None},
        ]
