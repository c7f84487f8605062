import logging

from ll1.grammars import expression
from ll1.logging_config import setup_logger
from ll1.sets import analyze


def test_main_prints_every_sample(capsys):
    from ll1.__main__ import main

    main()
    out = capsys.readouterr().out
    assert "== expression" in out
    assert "== dangling" in out
    assert "A failed rule 2: {a}" in out
    assert "left recursive: list" in out


def test_setup_logger_is_idempotent(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "debug")
    logger = setup_logger("ll1.test_setup")
    assert setup_logger("ll1.test_setup") is logger
    assert len(logger.handlers) == 1
    assert logger.level == logging.DEBUG


def test_engines_log_convergence(caplog):
    with caplog.at_level(logging.DEBUG, logger="ll1"):
        analyze(expression)
    assert "FIRST sets converged" in caplog.text
    assert "FOLLOW sets converged" in caplog.text
