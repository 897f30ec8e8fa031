import io

from tinylibc.envprompt import main


def test_prints_value_of_variable(monkeypatch, capsys):
    monkeypatch.setenv("TINYLIBC_NAME", "value1")
    monkeypatch.setattr("sys.stdin", io.StringIO("TINYLIBC_NAME\n"))
    assert main([]) == 0
    assert capsys.readouterr().out == "Variable name: Value: value1\n"


def test_unset_variable_prints_null(monkeypatch, capsys):
    monkeypatch.delenv("TINYLIBC_UNSET", raising=False)
    monkeypatch.setattr("sys.stdin", io.StringIO("TINYLIBC_UNSET\n"))
    assert main() == 0
    assert capsys.readouterr().out == "Variable name: Value: (null)\n"