"""
Test suite for logging setup
File: tests/test_logging_config.py
"""

import logging
import uuid

from ride_sheets_api.app.core.logging_config import HANDLER_TAG, setup_logging


def installed_handlers(logger):
    return [handler for handler in logger.handlers if getattr(handler, HANDLER_TAG, False)]


class TestSetupLogging:

    def setup_method(self):
        self.name = f"ride-sheets-test-{uuid.uuid4().hex}"
        self.logger = logging.getLogger(self.name)
        self.logger.propagate = False

    def teardown_method(self):
        for handler in installed_handlers(self.logger):
            self.logger.removeHandler(handler)
            handler.close()

    def test_console_and_file_handlers(self, tmp_path):
        logfile = tmp_path / "api.log"
        setup_logging("debug", str(logfile), logger_name=self.name)

        assert self.logger.level == logging.DEBUG
        handlers = installed_handlers(self.logger)
        assert len(handlers) == 2
        self.logger.info("hello")
        for handler in handlers:
            handler.flush()
        assert f"[INFO] {self.name}: hello" in logfile.read_text(encoding="utf-8")

    def test_configures_once(self):
        setup_logging("INFO", logger_name=self.name)
        setup_logging("DEBUG", logger_name=self.name)
        assert len(installed_handlers(self.logger)) == 1
        assert self.logger.level == logging.INFO

    def test_foreign_handlers_do_not_block_setup(self):
        foreign = logging.NullHandler()
        self.logger.addHandler(foreign)
        try:
            setup_logging("WARNING", logger_name=self.name)
            assert self.logger.level == logging.WARNING
            assert len(installed_handlers(self.logger)) == 1
            assert foreign in self.logger.handlers
        finally:
            self.logger.removeHandler(foreign)

    def test_unknown_level_falls_back_to_info(self):
        setup_logging("chatty", logger_name=self.name)
        assert self.logger.level == logging.INFO

    def test_quiets_google_client_cache_logger(self):
        setup_logging("INFO", logger_name=self.name)
        assert logging.getLogger("googleapiclient.discovery_cache").level == logging.ERROR
