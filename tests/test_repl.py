import io

import pytest

from treecalc.parser import Parser
from treecalc.repl import main, run_expression


def test_run_expression_prints_tree_and_answer() -> None:
    out = io.StringIO()
    assert run_expression(Parser(), "2 * 3", out=out)
    assert out.getvalue() == "\n".join(
        [
            "",
            "BinaryOperation {",
            "    left: IntLiteral {",
            "        value: 2",
            "    }",
            "    right: IntLiteral {",
            "        value: 3",
            "    }",
            "    operator: MULT",
            "}",
            "",
            "answer = 6.0",
            "",
            "",
        ]
    )


def test_run_expression_reports_failure() -> None:
    out = io.StringIO()
    assert not run_expression(Parser(), "(1 + 2", out=out)
    assert out.getvalue().startswith("Failed to parse: [Parser error] Expected RPAREN, got EOF at position 6\n")


def test_run_expression_tokens_without_tree() -> None:
    out = io.StringIO()
    assert run_expression(Parser(), "-1.5", show_tree=False, show_tokens=True, out=out)
    assert out.getvalue() == "tokens: <SUB> <FLOAT_LITERAL>1.5 <EOF>\nanswer = -1.5\n\n"


def test_main_with_expressions(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["--no-tree", "1 + 2", "1 / 0"]) == 0
    assert capsys.readouterr().out == "answer = 3.0\n\nanswer = inf\n\n"


def test_main_exit_status_on_error(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["--no-tree", "1 & 2", "4"]) == 1
    out = capsys.readouterr().out
    assert "Failed to parse: [Tokenizer error] Unrecognised character '&' at position 2" in out
    assert "answer = 4.0" in out


def test_main_interactive(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    lines = iter(["8 - 3 - 2", "", "3.", "--3"])

    def fake_input(prompt: str) -> str:
        try:
            return next(lines)
        except StopIteration:
            raise EOFError

    monkeypatch.setattr("builtins.input", fake_input)
    assert main(["--no-tree"]) == 0
    out = capsys.readouterr().out
    assert "answer = 3.0\n" in out
    assert "Failed to parse: [Tokenizer error] Unfinished float literal '3.' at position 2" in out
    assert out.count("answer = 3.0") == 2


def test_run_expression_long_chain() -> None:
    out = io.StringIO()
    assert run_expression(Parser(), " + ".join(["1"] * 1500), show_tree=False, out=out)
    assert out.getvalue() == "answer = 1500.0\n\n"


def test_run_expression_nesting_too_deep_then_next() -> None:
    parser = Parser()
    out = io.StringIO()
    assert not run_expression(parser, "(" * 5000 + "1" + ")" * 5000, out=out)
    assert out.getvalue().startswith("Failed to parse: [Parser error] Expression nested too deeply at position ")
    assert run_expression(parser, "1 2", show_tree=False, out=out)
    assert out.getvalue().endswith("answer = 1.0\n\n")
