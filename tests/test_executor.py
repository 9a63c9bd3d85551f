import io
import os

from minishell.executor import builtin_pwd, execute_ast, execute_node
from minishell.lexer import tokenize
from minishell.parser import Node, NodeType, parse_tokens


def test_builtin_pwd(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    stream = io.StringIO()
    builtin_pwd(stream)
    assert stream.getvalue() == os.getcwd() + "\n"


def test_builtin_pwd_defaults_to_stdout(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    builtin_pwd()
    assert capsys.readouterr().out == os.getcwd() + "\n"


def test_builtin_pwd_reports_error(monkeypatch, capsys):
    def fail():
        raise OSError(2, "No such file or directory")

    monkeypatch.setattr(os, "getcwd", fail)
    stream = io.StringIO()
    builtin_pwd(stream)
    assert stream.getvalue() == ""
    assert capsys.readouterr().err.startswith("pwd:")


def test_execute_pwd_command(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    stream = io.StringIO()
    execute_ast(parse_tokens(tokenize("pwd")), stream)
    assert stream.getvalue() == os.getcwd() + "\n"


def test_other_command_prints_nothing():
    stream = io.StringIO()
    execute_node(Node(NodeType.COMMAND, ["ls"]), stream)
    assert stream.getvalue() == ""


def test_pipe_runs_children_first(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    stream = io.StringIO()
    execute_ast(parse_tokens(tokenize("pwd | ls")), stream)
    assert stream.getvalue() == os.getcwd() + "\nExecuting pipe\n"


def test_redirection_node():
    stream = io.StringIO()
    execute_ast(parse_tokens(tokenize("ls > out")), stream)
    assert stream.getvalue() == "Executing redir \n"


def test_none_does_nothing():
    stream = io.StringIO()
    execute_ast(None, stream)
    assert stream.getvalue() == ""