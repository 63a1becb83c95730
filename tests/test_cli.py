import re

import pytest

from webmercator_dist.cli import main


USAGE = 'Usage: webmercator-dist <increment>'
OUT_OF_RANGE = 'Increment should be in (0.0, 90.0].'


def _sample_lines(text):
    return [x for x in text.splitlines() if x.startswith('[')]


def test_main_thirty_degrees(capsys):
    main(['30'])
    lines = _sample_lines(capsys.readouterr().out)
    assert [x[:9] for x in lines] == ['[00.00°] ', '[30.00°] ', '[60.00°] ', '[90.00°] ']

    offsets = re.findall(r'(-?\d+\.\d{3}) km', lines[0])
    assert [abs(float(x)) for x in offsets] == [0., 0.]


def test_main_ten_degrees(capsys):
    main(['10'])
    lines = _sample_lines(capsys.readouterr().out)
    assert len(lines) == 10

    for line in lines:
        values = re.findall(r'(-?\d+\.\d{3}) km', line)
        assert len(values) == 2
        assert all(isinstance(float(x), float) for x in values)


def test_main_ignores_extra_arguments(capsys):
    main(['45', 'extra'])
    assert len(_sample_lines(capsys.readouterr().out)) == 3


@pytest.mark.parametrize('increment', ['0', '-5', '95', 'nan', 'inf', '-5e1', '-inf', '-1e-3', '-0.0'])
def test_main_out_of_range(capsys, increment):
    main([increment])
    out = capsys.readouterr().out
    assert out.strip() == OUT_OF_RANGE
    assert not _sample_lines(out)


@pytest.mark.parametrize('argv', [[], ['abc'], ['10deg'], ['--foo', '10']])
def test_main_usage(capsys, argv):
    main(argv)
    out = capsys.readouterr().out
    assert out.strip() == USAGE
    assert not _sample_lines(out)


def test_main_help(capsys):
    main(['--help'])
    out = capsys.readouterr().out
    assert out.startswith('usage: webmercator-dist <increment>')
    assert 'Latitude step in degrees' in out
    assert not _sample_lines(out)


def test_main_reads_sys_argv(capsys, monkeypatch):
    monkeypatch.setattr('sys.argv', ['webmercator-dist', '-5e1'])
    main()
    assert capsys.readouterr().out.strip() == OUT_OF_RANGE
