"""Unit tests for observability logging."""

from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest
import structlog

from saga_storage.config import SagaStorageSettings
from saga_storage.observability.logging import JsonLoggerFactory, configure_logging, get_logger


@pytest.fixture
def restore_logging() -> Iterator[None]:
    root = logging.getLogger()
    level = root.level
    yield
    structlog.reset_defaults()
    for handler in list(root.handlers):
        if isinstance(handler.formatter, structlog.stdlib.ProcessorFormatter):
            root.removeHandler(handler)
    root.setLevel(level)


class TestGetLogger:
    def test_returns_structlog_logger(self) -> None:
        logger = get_logger("saga_storage.test")
        assert hasattr(logger, "info")
        assert hasattr(logger, "bind")

    def test_initial_values_are_bound(self) -> None:
        with structlog.testing.capture_logs() as logs:
            get_logger("x", saga_type="Order").info("hello", step=1)
        assert logs == [{"event": "hello", "log_level": "info", "saga_type": "Order", "step": 1}]


class TestJsonLoggerFactory:
    def test_installs_single_root_handler(self, restore_logging: None) -> None:
        JsonLoggerFactory.configure(level=logging.WARNING)
        root = logging.getLogger()
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0].formatter, structlog.stdlib.ProcessorFormatter)
        assert root.level == logging.WARNING

    def test_emits_json(self, restore_logging: None, capsys: pytest.CaptureFixture[str]) -> None:
        JsonLoggerFactory.configure(level=logging.INFO)
        get_logger("saga_storage.json").info("saga_inserted", saga_id="abc")
        err = capsys.readouterr().err
        assert '"event": "saga_inserted"' in err
        assert '"saga_id": "abc"' in err

    def test_configure_logging_from_settings(self, restore_logging: None) -> None:
        configure_logging(SagaStorageSettings(log_level="DEBUG", json_logs=False))
        assert logging.getLogger().level == logging.DEBUG
