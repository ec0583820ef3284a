from __future__ import annotations

import logging
import typing as typ

import pytest
import structlog

from artia_pages._logging import configure_logging


@pytest.fixture(autouse=True)
def reset_structlog() -> typ.Iterator[None]:
    """Restore structlog defaults after each test."""
    yield
    structlog.reset_defaults()


def test_environment_selects_json_and_level() -> None:
    configure_logging(environ={"ARTIA_LOG_LEVEL": "debug", "ARTIA_LOG_JSON": "true"})
    config = structlog.get_config()
    assert isinstance(config["processors"][-1], structlog.processors.JSONRenderer)
    assert config["wrapper_class"] is structlog.make_filtering_bound_logger(
        logging.DEBUG
    )


def test_explicit_arguments_win_over_environment() -> None:
    configure_logging(
        "warning", json=False, environ={"ARTIA_LOG_LEVEL": "debug", "ARTIA_LOG_JSON": "true"}
    )
    config = structlog.get_config()
    assert isinstance(config["processors"][-1], structlog.dev.ConsoleRenderer)
    assert config["wrapper_class"] is structlog.make_filtering_bound_logger(
        logging.WARNING
    )


def test_unknown_level_falls_back_to_info() -> None:
    configure_logging("chatty", environ={})
    assert structlog.get_config()["wrapper_class"] is structlog.make_filtering_bound_logger(
        logging.INFO
    )
