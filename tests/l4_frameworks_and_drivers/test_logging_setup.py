"""Tests for file logging setup."""

from __future__ import annotations

import logging

import pytest

from chromedriver_picker.l4_frameworks_and_drivers.logging_setup import setup_file_logging


@pytest.fixture
def clean_logger():
    logger = logging.getLogger('cdpicker')
    saved_handlers = list(logger.handlers)
    saved_level = logger.level
    yield logger
    for handler in list(logger.handlers):
        if handler not in saved_handlers:
            handler.close()
            logger.removeHandler(handler)
    logger.setLevel(saved_level)


class TestSetupFileLogging:
    def test_creates_log_file(self, tmp_path, clean_logger):
        log_dir = tmp_path / 'logs' / 'nested'
        log_path = setup_file_logging(log_dir)
        assert log_path == log_dir / 'cdpicker_debug.log'
        assert log_path.exists()
        assert 'Debug logging started' in log_path.read_text(encoding='utf-8')

    def test_child_loggers_reach_file(self, tmp_path, clean_logger):
        log_path = setup_file_logging(tmp_path)
        logging.getLogger('cdpicker.detect').debug('probe result')
        for handler in clean_logger.handlers:
            handler.flush()
        assert 'cdpicker.detect probe result' in log_path.read_text(encoding='utf-8')

    def test_level(self, tmp_path, clean_logger):
        setup_file_logging(tmp_path, 'warning')
        assert clean_logger.level == logging.WARNING

    def test_repeated_setup_attaches_one_handler(self, tmp_path, clean_logger):
        before = len(clean_logger.handlers)
        log_path = setup_file_logging(tmp_path)
        setup_file_logging(tmp_path)
        assert len(clean_logger.handlers) == before + 1

        logging.getLogger('cdpicker.app').info('single line')
        for handler in clean_logger.handlers:
            handler.flush()
        assert log_path.read_text(encoding='utf-8').count('single line') == 1
