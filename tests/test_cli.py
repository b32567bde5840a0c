import io

import pytest

from querytree.cli import main
from querytree.parser import parse


@pytest.mark.parametrize("query", ['(dogs AND cats birds) NOT "good pets"', "a OR b", "word"])
def test_prints_evaluated_tree(query, monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO(query + "\n"))
    assert main([]) == 0
    assert capsys.readouterr().out == parse(query).eval() + "\n"


def test_reports_syntax_error(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("a OR\n"))
    assert main([]) == 0
    assert capsys.readouterr().out == "Syntax error\n"


def test_empty_input_is_syntax_error(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    main([])
    assert capsys.readouterr().out == "Syntax error\n"


def test_reads_only_first_line(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("first\nOR OR\n"))
    main([])
    assert capsys.readouterr().out == parse("first").eval() + "\n"


def test_rejects_unknown_arguments(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("a\n"))
    with pytest.raises(SystemExit) as info:
        main(["--bogus"])
    assert info.value.code == 2