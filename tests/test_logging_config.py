"""
Test suite for structured logging configuration
"""

import json
import logging

from asset_ledger.logging_config import JSONFormatter, log_action, setup_logging


class CaptureHandler(logging.Handler):
    def __init__(self):
        super().__init__()
        self.lines = []

    def emit(self, record):
        self.lines.append(self.format(record))


class TestJSONFormatter:

    def test_structured_fields(self):
        logger = logging.getLogger("test_ledger_json")
        logger.setLevel(logging.INFO)
        handler = CaptureHandler()
        handler.setFormatter(JSONFormatter())
        logger.addHandler(handler)

        try:
            log_action(
                logger, "info", "transfer committed",
                caller="0x1", action="transfer", resource="account:0x2",
                extra={"amount": 10 ** 30}
            )
        finally:
            logger.removeHandler(handler)

        entry = json.loads(handler.lines[0])
        assert entry["level"] == "INFO"
        assert entry["message"] == "transfer committed"
        assert entry["caller"] == "0x1"
        assert entry["action"] == "transfer"
        assert entry["extra"] == {"amount": 10 ** 30}
        assert "error" not in entry

    def test_disabled_level_is_skipped(self):
        logger = logging.getLogger("test_ledger_quiet")
        logger.setLevel(logging.ERROR)
        handler = CaptureHandler()
        logger.addHandler(handler)

        try:
            log_action(logger, "info", "ignored")
        finally:
            logger.removeHandler(handler)

        assert handler.lines == []


class TestSetupLogging:

    def test_replaces_handlers(self):
        logger = setup_logging("DEBUG", "test_ledger_setup")
        logger = setup_logging("WARNING", "test_ledger_setup")

        assert len(logger.handlers) == 1
        assert logger.level == logging.WARNING
        assert isinstance(logger.handlers[0].formatter, JSONFormatter)
        assert not logger.propagate

    def test_text_format_to_file(self, tmp_path):
        log_file = tmp_path / "ledger.log"
        logger = setup_logging("INFO", "test_ledger_file", log_format="text", log_file=str(log_file))

        logger.info("hello")
        for handler in logger.handlers:
            handler.flush()
            handler.close()

        assert "hello" in log_file.read_text()
