"""Tests for src.logging_config."""

import logging
import logging.handlers

import pytest

from src.logging_config import setup_logging


@pytest.fixture
def fresh_root_logger():
    """Return a callable that empties the root logger and hands it back.

    Call it inside the test body, right before ``setup_logging``: pytest
    attaches its own capture handlers to the root logger for each test
    phase, which would otherwise look like an existing configuration.
    Whatever was detached is put back, and added handlers closed, on teardown.
    """
    root = logging.getLogger()
    saved = {"handlers": None, "level": root.level}

    def _reset():
        saved["handlers"] = root.handlers[:]
        root.handlers = []
        return root

    yield _reset

    for handler in root.handlers:
        handler.close()
    if saved["handlers"] is not None:
        root.handlers = saved["handlers"]
    root.setLevel(saved["level"])


class TestSetupLogging:
    def test_console_only(self, fresh_root_logger):
        root = fresh_root_logger()
        setup_logging("WARNING", log_to_file=False)

        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0], logging.StreamHandler)
        assert root.level == logging.WARNING

    def test_file_handler_created(self, fresh_root_logger, tmp_path):
        root = fresh_root_logger()
        setup_logging("INFO", log_dir=tmp_path / "logs")

        assert (tmp_path / "logs" / "draft_luck.log").exists()
        assert len(root.handlers) == 2
        file_handlers = [
            h for h in root.handlers
            if isinstance(h, logging.handlers.RotatingFileHandler)
        ]
        assert len(file_handlers) == 1
        assert file_handlers[0].level == logging.DEBUG
        assert root.level == logging.DEBUG

    def test_second_call_is_noop(self, fresh_root_logger):
        root = fresh_root_logger()
        setup_logging(log_to_file=False)
        setup_logging(log_to_file=False)

        assert len(root.handlers) == 1

    def test_existing_handler_is_left_alone(self, fresh_root_logger, tmp_path):
        root = fresh_root_logger()
        existing = logging.NullHandler()
        root.addHandler(existing)

        setup_logging("DEBUG", log_dir=tmp_path / "logs")

        assert root.handlers == [existing]
        assert not (tmp_path / "logs").exists()

    def test_unknown_level_falls_back_to_info(self, fresh_root_logger):
        root = fresh_root_logger()
        setup_logging("chatty", log_to_file=False)

        assert root.handlers[0].level == logging.INFO
        assert root.level == logging.INFO
