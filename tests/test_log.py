"""Tests for folio.log: handler selection and JSON output."""

import json
import logging

import pytest
from rich.logging import RichHandler

from folio.log import JSONFormatter, configure_logging


@pytest.fixture(autouse=True)
def _restore_folio_logger():
    logger = logging.getLogger("folio")
    handlers, level, propagate = list(logger.handlers), logger.level, logger.propagate
    yield
    logger.handlers = handlers
    logger.setLevel(level)
    logger.propagate = propagate


class TestConfigureLogging:
    def test_text_uses_rich(self):
        handler = configure_logging("info", "text")
        assert isinstance(handler, RichHandler)

    def test_json_uses_json_formatter(self):
        handler = configure_logging("info", "json")
        assert isinstance(handler.formatter, JSONFormatter)

    @pytest.mark.parametrize(
        "level,expected",
        [("debug", logging.DEBUG), ("warn", logging.WARNING), ("error", logging.ERROR)],
    )
    def test_level(self, level, expected):
        configure_logging(level, "text")
        assert logging.getLogger("folio").level == expected

    def test_reconfigure_replaces_handler(self):
        configure_logging("info", "text")
        handler = configure_logging("info", "json")
        assert logging.getLogger("folio").handlers == [handler]


class TestJSONFormatter:
    def _record(self, msg, *args, exc_info=None):
        return logging.LogRecord("folio.pipeline", logging.INFO, __file__, 1, msg, args, exc_info)

    def test_fields(self):
        payload = json.loads(JSONFormatter().format(self._record("converted %d page(s)", 3)))
        assert payload["level"] == "INFO"
        assert payload["logger"] == "folio.pipeline"
        assert payload["message"] == "converted 3 page(s)"
        assert payload["ts"].endswith("Z")
        assert "exc_info" not in payload

    def test_exception_included(self):
        try:
            raise RuntimeError("boom")
        except RuntimeError:
            import sys

            record = self._record("failed", exc_info=sys.exc_info())
        payload = json.loads(JSONFormatter().format(record))
        assert "RuntimeError: boom" in payload["exc_info"]
