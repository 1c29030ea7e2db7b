import argparse
import logging

import pytest

from tinyinterp import Environment, interpret, parse_expression
from tinyinterp.cli import main, parse_binding


def test_rpn(capsys):
    assert main(["rpn", "x y + 3 *", "--var", "x=10", "--var", "y=5"]) == 0
    assert capsys.readouterr().out == "45\n"


def test_rpn_show_tree(capsys):
    assert main(["rpn", "a b -", "--var", "a=5", "--var", "b=8", "--show-tree"]) == 0
    assert capsys.readouterr().out.splitlines() == ["(a - b)", "-3"]


def test_rpn_parse_error(capsys):
    assert main(["rpn", "1 2"]) == 1
    assert capsys.readouterr().err.startswith("ERROR:")


def test_rpn_division_by_zero(capsys):
    assert main(["rpn", "10 0 /"]) == 2
    assert "divide by zero" in capsys.readouterr().err


def test_run_script_file(tmp_path, capsys):
    script = tmp_path / "sum.txt"
    script.write_text("// sum\nx = 10\ny = 20\nresult = x + y\nprint result\nprint \"done\"\n", encoding="utf-8")
    assert main(["run", str(script)]) == 0
    assert capsys.readouterr().out == "30\ndone\n"


def test_run_syntax_error(tmp_path, capsys):
    script = tmp_path / "bad.txt"
    script.write_text("x = 1\nnonsense here\n", encoding="utf-8")
    assert main(["run", str(script)]) == 1
    assert "line 2" in capsys.readouterr().err


def test_run_missing_file(tmp_path, capsys):
    assert main(["run", str(tmp_path / "nope.txt")]) == 1
    assert capsys.readouterr().err.startswith("ERROR:")


def test_demo(capsys):
    assert main(["demo"]) == 0
    out = capsys.readouterr().out
    assert "((x + y) * 3) = 45" in out
    assert "Access granted: True" in out
    assert "Carol" in out
    assert "30\nHello\n" in out


@pytest.mark.parametrize("text, expected", [
    ("x=10", ("x", 10.0)),
    ("flag=true", ("flag", True)),
    ("name = Bob", ("name", "Bob")),
])
def test_parse_binding(text, expected):
    assert parse_binding(text) == expected


def test_parse_binding_rejects_missing_equals():
    with pytest.raises(argparse.ArgumentTypeError):
        parse_binding("x")


def test_evaluation_trace_is_logged(caplog):
    env = Environment()
    env.set_variable("x", 10)
    env.set_variable("y", 5)
    with caplog.at_level(logging.DEBUG, logger="tinyinterp"):
        interpret(parse_expression("x y +"), env)
    assert "Interpreting variable: x" in caplog.text
    assert "Adding 10 + 5 = 15" in caplog.text


def test_verbose_traces_evaluation_on_stderr(capsys):
    assert main(["-v", "rpn", "x y +", "--var", "x=10", "--var", "y=5"]) == 0
    captured = capsys.readouterr()
    assert captured.out == "15\n"
    assert "Interpreting variable: x" in captured.err
    assert "Adding 10 + 5 = 15" in captured.err


def test_trace_is_off_without_verbose(capsys):
    assert main(["rpn", "1 2 +"]) == 0
    assert capsys.readouterr().err == ""


def test_rpn_long_chain(capsys):
    assert main(["rpn", "1 " + "1 + " * 1500]) == 0
    assert capsys.readouterr().out == "1501\n"
