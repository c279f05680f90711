"""End-to-end tests for the colwidth command line."""

import json
import sys
from pathlib import Path

import pytest
from colwidth.__main__ import main

FIXTURES_DIR = Path(__file__).parent / 'fixtures'


@pytest.fixture(autouse=True)
def isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run from an empty repo root so no stray .env is picked up."""
    (tmp_path / '.git').mkdir()
    monkeypatch.chdir(tmp_path)
    for name in ('COLWIDTH_PLATFORM', 'COLWIDTH_UNIT', 'COLWIDTH_PREVIEW_WIDTH', 'COLWIDTH_PREVIEW_HEIGHT'):
        # setenv first so values a test loads from .env are removed on teardown
        monkeypatch.setenv(name, '')
        monkeypatch.delenv(name)
    return tmp_path


def _main(monkeypatch: pytest.MonkeyPatch, *argv: str) -> None:
    monkeypatch.setattr(sys, 'argv', ['colwidth', *argv])
    main()


class TestColumnCommands:
    def test_widths_text(self, monkeypatch, capsys):
        _main(monkeypatch, 'widths', str(FIXTURES_DIR / 'unset.json'))
        out = capsys.readouterr().out
        assert out.startswith('colwidth: 3 columns — unset.json')
        assert '── widths' in out
        assert out.count('33.33') == 3

    def test_redistribute_json(self, monkeypatch, capsys):
        _main(monkeypatch, 'redistribute', str(FIXTURES_DIR / 'unset.json'), '--available', '90', '--json')
        obj = json.loads(capsys.readouterr().out)
        assert obj['results']['redistribute']['widths'] == {'a': 30.0, 'b': 30.0, 'c': 30.0}

    def test_redistribute_requires_available(self, monkeypatch, capsys):
        with pytest.raises(SystemExit) as exc:
            _main(monkeypatch, 'redistribute', str(FIXTURES_DIR / 'unset.json'))
        assert exc.value.code == 1
        assert 'requires --available' in capsys.readouterr().err

    def test_missing_file(self, monkeypatch, capsys):
        with pytest.raises(SystemExit) as exc:
            _main(monkeypatch, 'widths', 'nope.json')
        assert exc.value.code == 1
        assert 'columns file not found' in capsys.readouterr().err

    def test_bad_json(self, tmp_path, monkeypatch, capsys):
        bad = tmp_path / 'bad.json'
        bad.write_text('{"rows": []}')
        with pytest.raises(SystemExit) as exc:
            _main(monkeypatch, 'widths', str(bad))
        assert exc.value.code == 1
        assert capsys.readouterr().err.startswith('Error: ')

    def test_fail_on_overflow(self, monkeypatch, capsys):
        with pytest.raises(SystemExit) as exc:
            _main(monkeypatch, 'widths', str(FIXTURES_DIR / 'overflow.json'), '-a', '100', '--fail-on-overflow')
        assert exc.value.code == 1
        assert 'OVERFLOW' in capsys.readouterr().out

    def test_no_overflow_passes(self, monkeypatch, capsys):
        _main(monkeypatch, 'total', str(FIXTURES_DIR / 'unset.json'), '-a', '100', '--fail-on-overflow')
        assert '✓' in capsys.readouterr().out

    def test_env_file_loaded(self, tmp_path, monkeypatch, capsys):
        (tmp_path / '.env').write_text('COLWIDTH_PREVIEW_WIDTH=320\n')
        out_dir = tmp_path / 'out'
        _main(monkeypatch, 'preview', str(FIXTURES_DIR / 'unset.json'), str(out_dir), '--json')
        captured = capsys.readouterr()
        assert 'colwidth: loaded' in captured.err
        assert json.loads(captured.out)['results']['preview']['width'] == 320
        assert (out_dir / 'columns.png').is_file()

    def test_huge_width_in_file(self, tmp_path, monkeypatch, capsys):
        huge = tmp_path / 'huge.json'
        huge.write_text('[{"id": "a", "width": 1e30}, {"id": "b"}]')
        _main(monkeypatch, 'widths', str(huge), '--json')
        widths = json.loads(capsys.readouterr().out)['results']['widths']['widths']
        assert widths == {'a': 1e30, 'b': 50.0}


class TestBuiltins:
    def test_format(self, monkeypatch, capsys):
        _main(monkeypatch, 'format', '150', '%')
        assert capsys.readouterr().out.strip() == '100%'

    def test_format_negative(self, monkeypatch, capsys):
        _main(monkeypatch, 'format', '-5', 'px')
        assert capsys.readouterr().out.strip() == '0px'

    def test_format_default_unit_from_env(self, monkeypatch, capsys):
        monkeypatch.setenv('COLWIDTH_UNIT', 'em')
        _main(monkeypatch, 'format', '40')
        assert capsys.readouterr().out.strip() == '40em'

    def test_units_native_labels(self, monkeypatch, capsys):
        monkeypatch.setenv('COLWIDTH_PLATFORM', 'native')
        _main(monkeypatch, 'units')
        assert 'Pixels (px)' in capsys.readouterr().out

    def test_help_lists_commands(self, monkeypatch, capsys):
        _main(monkeypatch, 'help')
        out = capsys.readouterr().out
        assert 'redistribute' in out
        assert 'preview' in out

    def test_help_for_command(self, monkeypatch, capsys):
        _main(monkeypatch, 'help', 'redistribute')
        assert 'Example:' in capsys.readouterr().out

    def test_help_unknown(self, monkeypatch):
        with pytest.raises(SystemExit) as exc:
            _main(monkeypatch, 'help', 'resize')
        assert exc.value.code == 1

    def test_no_command(self, monkeypatch):
        with pytest.raises(SystemExit) as exc:
            _main(monkeypatch)
        assert exc.value.code == 1
