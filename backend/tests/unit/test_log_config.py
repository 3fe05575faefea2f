"""Unit tests for the per-category logging setup."""

import logging

import pytest

from sakila_api.config import Settings
from sakila_api.infrastructure.logging import log_config


@pytest.fixture
def restore_logger_levels():
    """Put back every logger level that setup_logging may change."""
    names = [""] + [name for group in log_config._CATEGORY_MAP.values() for name in group]
    saved = {name: logging.getLogger(name or None).level for name in names}
    root_handlers = list(logging.getLogger().handlers)
    yield
    for name, level in saved.items():
        logging.getLogger(name or None).setLevel(level)
    for handler in logging.getLogger().handlers[:]:
        if handler not in root_handlers:
            logging.getLogger().removeHandler(handler)


def test_setup_logging_applies_category_levels(monkeypatch, restore_logger_levels):
    settings = Settings(
        _env_file=None,
        log_level="WARNING",
        log_level_sql="ERROR",
        log_level_datasource="DEBUG",
    )
    monkeypatch.setattr(log_config, "get_settings", lambda: settings)

    log_config.setup_logging()

    assert logging.getLogger().level == logging.WARNING
    assert logging.getLogger("sqlalchemy.engine").level == logging.ERROR
    assert (
        logging.getLogger("sakila_api.infrastructure.database.datasources").level
        == logging.DEBUG
    )


def test_unknown_level_name_falls_back_to_info():
    assert log_config._parse_level("verbose") == logging.INFO
    assert log_config._parse_level("debug") == logging.DEBUG
