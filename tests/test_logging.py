# Copyright 2026 Dodo Payments SDK Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the SDK's logging setup."""

import logging
from collections.abc import Iterator

import pytest

from dodopayments import setup_logging

# ###############
# Helpers
# ###############


@pytest.fixture(autouse=True)
def sdk_logger(monkeypatch: pytest.MonkeyPatch) -> Iterator[logging.Logger]:
    monkeypatch.delenv("DODO_PAYMENTS_LOG", raising=False)
    logger = logging.getLogger("dodopayments")
    level, handlers = logger.level, list(logger.handlers)
    yield logger
    logger.setLevel(level)
    logger.handlers[:] = handlers


def _own_handlers(logger: logging.Logger) -> list[logging.Handler]:
    return [h for h in logger.handlers if getattr(h, "_dodopayments", False)]


# ###############
# Normal Cases
# ###############


def test_defaults_to_warning(sdk_logger: logging.Logger) -> None:
    assert setup_logging() is sdk_logger
    assert sdk_logger.level == logging.WARNING


def test_level_names_are_case_insensitive(sdk_logger: logging.Logger) -> None:
    setup_logging("info")
    assert sdk_logger.level == logging.INFO


def test_environment_variable_sets_the_level(sdk_logger: logging.Logger, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DODO_PAYMENTS_LOG", "debug")
    setup_logging()
    assert sdk_logger.level == logging.DEBUG


def test_repeated_setup_adds_one_handler(sdk_logger: logging.Logger) -> None:
    setup_logging(logging.INFO)
    setup_logging(logging.ERROR)
    assert len(_own_handlers(sdk_logger)) == 1
    assert sdk_logger.level == logging.ERROR


def test_unknown_level_raises() -> None:
    with pytest.raises(ValueError):
        setup_logging("chatty")
