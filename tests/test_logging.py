"""Tests for the shared logging setup."""

import json
import logging

from shared.utils.logging import (
    CONSOLE_HANDLER_NAME,
    FILE_HANDLER_NAME,
    JSONFormatter,
    remove_handlers,
    setup_logging,
)


class TestJSONFormatter:
    """Test cases for JSONFormatter."""

    def test_format_record(self):
        """Test a record becomes a single JSON object."""
        record = logging.LogRecord(
            name="scramble.game",
            level=logging.INFO,
            pathname=__file__,
            lineno=1,
            msg="Accepted '%s'",
            args=("silk",),
            exc_info=None,
        )
        entry = json.loads(JSONFormatter().format(record))
        assert entry["level"] == "INFO"
        assert entry["logger"] == "scramble.game"
        assert entry["message"] == "Accepted 'silk'"
        assert "timestamp" in entry


class TestSetupLogging:
    """Test cases for setup_logging()."""

    def teardown_method(self):
        """Detach handlers added by setup_logging."""
        remove_handlers()

    def _handler_names(self):
        return sorted(h.get_name() for h in logging.getLogger().handlers if h.get_name())

    def test_writes_json_lines(self, tmp_path):
        """Test log messages land in the JSON lines file."""
        log_file = setup_logging(tmp_path / "logs")
        logging.getLogger("scramble.test").info("new root word 'silkworm'")

        for handler in logging.getLogger().handlers:
            handler.flush()

        lines = log_file.read_text().strip().splitlines()
        messages = [json.loads(line)["message"] for line in lines]
        assert "new root word 'silkworm'" in messages

    def test_handlers_are_named(self, tmp_path):
        """Test the installed handlers carry their names."""
        setup_logging(tmp_path)
        names = self._handler_names()
        assert FILE_HANDLER_NAME in names
        assert CONSOLE_HANDLER_NAME in names

    def test_repeated_setup_does_not_duplicate(self, tmp_path):
        """Test calling setup twice keeps one pair of handlers."""
        setup_logging(tmp_path)
        setup_logging(tmp_path, verbose=True)
        names = self._handler_names()
        assert names.count(FILE_HANDLER_NAME) == 1
        assert names.count(CONSOLE_HANDLER_NAME) == 1

    def test_remove_handlers(self, tmp_path):
        """Test remove_handlers leaves other handlers alone."""
        other = logging.NullHandler()
        logging.getLogger().addHandler(other)
        try:
            setup_logging(tmp_path)
            remove_handlers()
            names = self._handler_names()
            assert FILE_HANDLER_NAME not in names
            assert CONSOLE_HANDLER_NAME not in names
            assert other in logging.getLogger().handlers
        finally:
            logging.getLogger().removeHandler(other)
