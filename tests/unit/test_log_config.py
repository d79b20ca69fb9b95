"""Unit tests for logging configuration."""

import logging

from one_api_sdk.config import ClientSettings
from one_api_sdk.infrastructure.logging.log_config import _parse_level, setup_logging


def test_setup_logging_applies_category_levels():
    settings = ClientSettings(
        _env_file=None,
        log_level="WARNING",
        log_level_http="ERROR",
        log_level_client="DEBUG",
    )

    setup_logging(settings)

    assert logging.getLogger().level == logging.WARNING
    assert logging.getLogger("httpx").level == logging.ERROR
    assert logging.getLogger("httpcore").level == logging.ERROR
    assert logging.getLogger("one_api_sdk").level == logging.DEBUG


def test_parse_level_defaults_to_info():
    assert _parse_level("debug") == logging.DEBUG
    assert _parse_level("chatty") == logging.INFO
