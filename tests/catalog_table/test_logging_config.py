import logging

import pytest
from pythonjsonlogger.json import JsonFormatter

from catalog_table.logging_config import configure_logging


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)


def test_json_is_the_default(restore_root_logger, monkeypatch):
    monkeypatch.delenv("CATALOG_TABLE_LOG_FORMAT", raising=False)
    configure_logging()

    assert len(restore_root_logger.handlers) == 1
    assert isinstance(restore_root_logger.handlers[0].formatter, JsonFormatter)


def test_env_var_selects_plain(restore_root_logger, monkeypatch):
    monkeypatch.setenv("CATALOG_TABLE_LOG_FORMAT", "plain")
    configure_logging(level=logging.DEBUG)

    formatter = restore_root_logger.handlers[0].formatter
    assert not isinstance(formatter, JsonFormatter)
    assert restore_root_logger.level == logging.DEBUG


def test_force_format_wins_over_env(restore_root_logger, monkeypatch):
    monkeypatch.setenv("CATALOG_TABLE_LOG_FORMAT", "plain")
    configure_logging(force_format="json")

    assert isinstance(restore_root_logger.handlers[0].formatter, JsonFormatter)
