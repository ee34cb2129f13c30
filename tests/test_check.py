import io
import pytest
import ircnames
from ircnames.utils import check


def test_check_valid(capsys):
    assert check.main([ 'TestName', 'WiZ' ]) == 0
    out = capsys.readouterr().out
    assert out == 'TestName: valid\nWiZ: valid\n'


def test_check_invalid(capsys):
    assert check.main([ 'TestName', '3TestName' ]) == 1
    out = capsys.readouterr().out
    assert "3TestName: invalid (illegal leading character '3')" in out


def test_check_quiet(capsys):
    assert check.main([ '-q', 'TestName', '' ]) == 1
    assert capsys.readouterr().out == ': invalid (empty)\n'


def test_check_kind(capsys):
    assert check.main([ '--kind', 'channel', 'pydle' ]) == 0
    assert capsys.readouterr().out == '#pydle: valid\n'


def test_check_stdin(capsys, monkeypatch):
    monkeypatch.setattr('sys.stdin', io.StringIO('TestName\nTest Name\n'))
    assert check.main([ '-k', 'nickname' ]) == 1
    out = capsys.readouterr().out
    assert out.splitlines() == [ 'TestName: valid', "Test Name: invalid (illegal character ' ' at position 4)" ]


def test_check_function():
    out = io.StringIO()
    assert check.check([ 'a', 'b c', '~x' ], 'username', out=out) == 1
    assert out.getvalue().splitlines() == [ 'a: valid', "b c: invalid (illegal character ' ' at position 1)", '~x: valid' ]


def test_check_unknown_kind():
    with pytest.raises(SystemExit):
        check.main([ '--kind', 'server', 'irc.example.org' ])


def test_check_version(capsys):
    with pytest.raises(SystemExit):
        check.main([ '--version' ])
    assert ircnames.__version__ in capsys.readouterr().out
