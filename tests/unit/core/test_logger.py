"""
Unit tests for roots.core.logger.

Tests:
- Key=value formatting, escaping and truncation
- StructuredFormatter output
- Logger levels, bound context and JSON mode
- configure_logging() root handler replacement
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterator
from contextlib import contextmanager

import pytest

from roots.core.logger import Logger, StructuredFormatter, configure_logging, format_kv_pairs


class TestFormatKvPairs:
    """Key-value pairs formatting and escaping."""

    def test_simple(self) -> None:
        assert format_kv_pairs({"key": "hello"}) == " key=hello"
        assert format_kv_pairs({"key": 123}) == " key=123"

    def test_with_spaces(self) -> None:
        assert format_kv_pairs({"key": "hello world"}) == ' key="hello world"'

    def test_with_equals(self) -> None:
        assert format_kv_pairs({"key": "foo=bar"}) == ' key="foo=bar"'

    def test_with_double_quotes(self) -> None:
        assert format_kv_pairs({"key": 'say "hello"'}) == ' key="say \\"hello\\""'

    def test_empty_value(self) -> None:
        assert format_kv_pairs({"key": ""}) == ' key=""'

    def test_empty_dict(self) -> None:
        assert format_kv_pairs({}) == ""

    def test_truncation(self) -> None:
        result = format_kv_pairs({"key": "x" * 1500}, max_value_length=1000)
        assert "truncated 500 chars" in result

    def test_no_truncation(self) -> None:
        result = format_kv_pairs({"key": "x" * 1500}, max_value_length=None)
        assert "truncated" not in result

    def test_custom_prefix(self) -> None:
        assert format_kv_pairs({"key": "val"}, prefix="") == "key=val"


class TestStructuredFormatter:
    def _record(self, **extra: object) -> logging.LogRecord:
        record = logging.LogRecord("roots.test", logging.INFO, __file__, 1, "hello", None, None)
        for key, value in extra.items():
            setattr(record, key, value)
        return record

    def test_plain_record(self) -> None:
        assert StructuredFormatter().format(self._record()) == "info roots.test hello"

    def test_structured_fields_appended(self) -> None:
        record = self._record(structured_kv={"reason": "bad sig", "n": 2})
        assert StructuredFormatter().format(record) == 'info roots.test hello reason="bad sig" n=2'


class TestLogger:
    """Level methods, context binding and JSON output."""

    def test_name(self) -> None:
        assert Logger("roots.test").name == "roots.test"

    @pytest.mark.parametrize(
        ("method", "level"),
        [
            ("debug", logging.DEBUG),
            ("info", logging.INFO),
            ("warning", logging.WARNING),
            ("error", logging.ERROR),
        ],
    )
    def test_levels(self, caplog: pytest.LogCaptureFixture, method: str, level: int) -> None:
        logger = Logger("roots.test.levels")
        with caplog.at_level(logging.DEBUG, logger="roots.test.levels"):
            getattr(logger, method)("something_happened", count=3)
        assert len(caplog.records) == 1
        record = caplog.records[0]
        assert record.levelno == level
        assert record.getMessage() == "something_happened"
        assert record.structured_kv == {"count": 3}

    def test_disabled_level_is_skipped(self, caplog: pytest.LogCaptureFixture) -> None:
        logger = Logger("roots.test.disabled")
        with caplog.at_level(logging.WARNING, logger="roots.test.disabled"):
            logger.debug("hidden")
        assert caplog.records == []

    def test_bind_merges_context(self, caplog: pytest.LogCaptureFixture) -> None:
        logger = Logger("roots.test.bind").bind(relay="wss://r")
        with caplog.at_level(logging.INFO, logger="roots.test.bind"):
            logger.info("ok", n=1)
        assert caplog.records[0].structured_kv == {"relay": "wss://r", "n": 1}

    def test_bind_does_not_mutate_parent(self) -> None:
        parent = Logger("roots.test.parent")
        parent.bind(a=1)
        assert parent._context == {}

    def test_values_truncated(self, caplog: pytest.LogCaptureFixture) -> None:
        logger = Logger("roots.test.trunc", max_value_length=10)
        with caplog.at_level(logging.INFO, logger="roots.test.trunc"):
            logger.info("long", content="y" * 50)
        assert caplog.records[0].structured_kv["content"].startswith("y" * 10 + "...<truncated")

    def test_json_output(self, caplog: pytest.LogCaptureFixture) -> None:
        logger = Logger("roots.test.json", json_output=True)
        with caplog.at_level(logging.INFO, logger="roots.test.json"):
            logger.info("event_rejected", event_id="abc", error="EmptyIdError")
        payload = json.loads(caplog.records[0].getMessage())
        assert payload["level"] == "info"
        assert payload["logger"] == "roots.test.json"
        assert payload["message"] == "event_rejected"
        assert payload["event_id"] == "abc"
        assert payload["error"] == "EmptyIdError"
        assert "timestamp" in payload

    def test_exception_includes_traceback(self, caplog: pytest.LogCaptureFixture) -> None:
        logger = Logger("roots.test.exc")
        with caplog.at_level(logging.ERROR, logger="roots.test.exc"):
            try:
                raise ValueError("boom")
            except ValueError:
                logger.exception("failed")
        assert caplog.records[0].exc_info is not None


@contextmanager
def _preserved_root_logger() -> Iterator[logging.Logger]:
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    try:
        yield root
    finally:
        root.handlers = handlers
        root.setLevel(level)


class TestConfigureLogging:
    def test_installs_structured_formatter(self) -> None:
        with _preserved_root_logger() as root:
            configure_logging("debug")
            assert len(root.handlers) == 1
            assert isinstance(root.handlers[0].formatter, StructuredFormatter)
            assert root.level == logging.DEBUG

    def test_json_mode_uses_passthrough_formatter(self) -> None:
        with _preserved_root_logger() as root:
            configure_logging(logging.WARNING, json_output=True)
            assert not isinstance(root.handlers[0].formatter, StructuredFormatter)
            assert root.level == logging.WARNING
