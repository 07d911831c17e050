"""Verbosity-gated logging"""

import logging

from arith_expr.logging_system import (
    LogLevel, ExpressionLogger, configure_logging, get_logger, set_log_level,
    log_info, log_debug, log_warning, should_log
)


def test_configure_replaces_global_logger():
    first = configure_logging(LogLevel.MINIMAL)
    assert get_logger() is first
    second = configure_logging(LogLevel.DETAILED)
    assert get_logger() is second
    assert second.log_level is LogLevel.DETAILED


def test_silent_logger_has_no_console_handler():
    logger = ExpressionLogger(log_level=LogLevel.SILENT)
    assert logger.logger.handlers == []
    configure_logging(LogLevel.MINIMAL)


def test_levels_gate_messages(caplog):
    configure_logging(LogLevel.MINIMAL)
    caplog.set_level(logging.DEBUG, logger='arith_expr')

    log_info("shown at minimal")
    log_info("needs detailed", LogLevel.DETAILED)
    log_debug("needs verbose")
    log_warning("always a warning")
    get_logger().critical("broken")

    assert "shown at minimal" in caplog.text
    assert "needs detailed" not in caplog.text
    assert "needs verbose" not in caplog.text
    assert "always a warning" in caplog.text
    assert "CRITICAL: broken" in caplog.text


def test_set_log_level(caplog):
    configure_logging(LogLevel.MINIMAL)
    caplog.set_level(logging.DEBUG, logger='arith_expr')

    set_log_level(LogLevel.VERBOSE)
    log_debug("now visible")

    assert "DEBUG: now visible" in caplog.text
    configure_logging(LogLevel.MINIMAL)


def test_simplify_skips_debug_message_below_verbose(monkeypatch):
    from arith_expr import Expression, Constant, Variable, Multiply

    def fail(self):
        raise AssertionError("debug message built below verbose level")

    configure_logging(LogLevel.DETAILED)
    monkeypatch.setattr(Expression, "size", fail)
    monkeypatch.setattr(Expression, "display", fail)

    simplified = Expression(Multiply(Constant(1), Variable('b'))).simplify()

    assert simplified.root == Variable('b')
    configure_logging(LogLevel.MINIMAL)


def test_should_log_follows_level():
    configure_logging(LogLevel.VERBOSE)
    assert should_log(LogLevel.VERBOSE)
    configure_logging(LogLevel.MINIMAL)
    assert should_log(LogLevel.MINIMAL)
    assert not should_log(LogLevel.VERBOSE)
