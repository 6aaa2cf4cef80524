import logging
import sys

from mergefold.logger.logger import get_logger, logger, setup_logger


def stdout_handlers(log):
    return [
        handler
        for handler in log.handlers
        if type(handler) is logging.StreamHandler and handler.stream is sys.stdout
    ]


def test_default_logger():
    assert logger.name == "mergefold"
    assert not logger.propagate
    assert len(stdout_handlers(logger)) == 1


def test_setup_logger_level():
    custom = setup_logger("mergefold.tests.level", level="debug")
    assert custom.level == logging.DEBUG


def test_setup_logger_env_level(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "WARNING")
    custom = setup_logger("mergefold.tests.env")
    assert custom.level == logging.WARNING


def test_setup_logger_configures_once():
    first = setup_logger("mergefold.tests.once", level="INFO")
    second = setup_logger("mergefold.tests.once", level="ERROR")
    assert first is second
    assert len(stdout_handlers(second)) == 1
    assert second.level == logging.INFO


def test_module_loggers_are_package_children():
    child = get_logger("mergefold.core.merge_fold")
    assert child.name == "mergefold.core.merge_fold"
    assert child.parent is logger
    assert child.propagate
    assert stdout_handlers(child) == []
    assert child.getEffectiveLevel() == logger.level


def test_foreign_names_nested_under_package():
    assert get_logger("scratch").name == "mergefold.scratch"
    assert get_logger("mergefold").name == "mergefold"
