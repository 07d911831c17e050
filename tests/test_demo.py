"""Command line demonstration"""

import logging

from arith_expr import Expression, Constant, Variable, Multiply, LogLevel, configure_logging
from arith_expr.__main__ import main, run_expression_demo


EXPECTED_LINES = [
    "Env: {a=3, b=111, c=78, baf=666}",
    "17 = 17 = 17",
    "(3 + a) = (3 + 3) = 6",
    "((b * 9) + a) = ((111 * 9) + 3) = 1002",
]


def test_default_demo(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out.splitlines() == EXPECTED_LINES


def test_simplify_and_merge_flags(capsys):
    assert main(["--simplify", "--merge", "--log-level", "silent"]) == 0
    lines = capsys.readouterr().out.splitlines()

    assert lines[:4] == EXPECTED_LINES
    assert "  (1 * b) => b" in lines
    assert "  (5 - 5) => 0" in lines
    assert "  ((0 * x) + 0) => 0" in lines
    assert "  ((x + 0) * (4 - 0)) => (x * 4)" in lines
    assert lines[-1] == "Merged: [1, 2, 3, 4, 5, 6, 7, 8, 9, 10]"


def test_log_file(tmp_path, capsys):
    log_path = tmp_path / "demo.log"
    assert main(["--log-level", "moderate", "--log-file", str(log_path)]) == 0
    capsys.readouterr()
    logging.getLogger('arith_expr').handlers[-1].flush()
    assert "MILESTONE: Evaluating sample expressions" in log_path.read_text()


def test_unbound_expression_is_skipped(capsys, caplog):
    configure_logging(LogLevel.MINIMAL)
    caplog.set_level(logging.WARNING, logger='arith_expr')

    run_expression_demo([Expression(Variable('zz')), Expression(Constant(2))], {'a': 1})

    assert capsys.readouterr().out.splitlines() == ["Env: {a=1}", "2 = 2 = 2"]
    assert "unbound zz" in caplog.text


def test_simplify_logs_at_verbose(caplog):
    configure_logging(LogLevel.VERBOSE)
    caplog.set_level(logging.DEBUG, logger='arith_expr')

    Expression(Multiply(Constant(1), Variable('b'))).simplify()

    assert "simplify (1 * b) -> b (3 -> 1 nodes)" in caplog.text
    configure_logging(LogLevel.MINIMAL)
