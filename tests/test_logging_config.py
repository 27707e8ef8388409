"""Tests for root logging setup."""

from __future__ import annotations

import logging

import pytest

from shared.logging_config import configure_logging


@pytest.fixture
def root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)


def test_existing_root_handlers_are_kept(root_logger) -> None:
    existing = logging.NullHandler()
    root_logger.addHandler(existing)
    before = list(root_logger.handlers)

    configure_logging("DEBUG")

    assert root_logger.handlers == before
    assert root_logger.level == logging.DEBUG


def test_fresh_root_gets_a_stream_handler(root_logger) -> None:
    root_logger.handlers[:] = []

    configure_logging(logging.WARNING)

    assert len(root_logger.handlers) == 1
    assert isinstance(root_logger.handlers[0], logging.StreamHandler)
    assert root_logger.level == logging.WARNING


def test_unknown_level_name_falls_back_to_info(root_logger) -> None:
    configure_logging("chatty")
    assert root_logger.level == logging.INFO
    assert logging.getLogger("PIL").level == logging.WARNING
