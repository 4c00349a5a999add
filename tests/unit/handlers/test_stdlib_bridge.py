"""Unit tests for the logging-module bridges – JoinLogHandler / LoggingHandler."""

from __future__ import annotations

import logging
import uuid
from unittest.mock import MagicMock

import pytest

from mp_joinlog.handlers import JoinLogHandler, LoggingHandler, join_handlers
from mp_joinlog.records import Attr, Level, Record
from mp_joinlog.testing import FailingHandler, RecordingHandler


class _ListHandler(logging.Handler):
    def __init__(self) -> None:
        super().__init__()
        self.records: list[logging.LogRecord] = []

    def emit(self, record: logging.LogRecord) -> None:
        self.records.append(record)


@pytest.fixture()
def std_logger() -> logging.Logger:
    logger = logging.getLogger(f"test.bridge.{uuid.uuid4().hex}")
    logger.propagate = False
    logger.setLevel(logging.DEBUG)
    return logger


# ---------------------------------------------------------------------------
# JoinLogHandler (stdlib -> joinlog)
# ---------------------------------------------------------------------------


class TestJoinLogHandler:
    def test_forwards_message_level_and_extra(self, std_logger: logging.Logger) -> None:
        a, b = RecordingHandler(), RecordingHandler()
        std_logger.addHandler(JoinLogHandler(join_handlers(a, b)))

        std_logger.info("hello %s", "world", extra={"user": "test"})

        for sink in (a, b):
            assert len(sink.handled) == 1
            handled = sink.handled[0]
            assert handled.message == "hello world"
            assert handled.record.level == logging.INFO
            assert handled.fields() == {"user": "test"}
            assert handled.record.time.tzinfo is not None

    def test_skips_when_joined_handler_not_enabled(self, std_logger: logging.Logger) -> None:
        quiet = RecordingHandler(level=Level.ERROR)
        std_logger.addHandler(JoinLogHandler(quiet))
        std_logger.info("ignored")
        assert quiet.handled == []
        assert quiet.enabled_calls == [(logging.INFO, None)]

    def test_handler_failure_goes_to_handle_error(self, std_logger: logging.Logger) -> None:
        bridge = JoinLogHandler(join_handlers(FailingHandler(RuntimeError("boom")), RecordingHandler()))
        bridge.handleError = MagicMock()  # type: ignore[method-assign]
        std_logger.addHandler(bridge)

        std_logger.warning("still returns")

        bridge.handleError.assert_called_once()
        assert bridge.handleError.call_args.args[0].getMessage() == "still returns"

    def test_exception_info_becomes_an_attr(self, std_logger: logging.Logger) -> None:
        sink = RecordingHandler()
        std_logger.addHandler(JoinLogHandler(sink))
        try:
            raise ValueError("bad input")
        except ValueError:
            std_logger.exception("failed")
        fields = sink.handled[0].fields()
        assert "ValueError: bad input" in fields["exc_info"]
        assert sink.handled[0].record.level == logging.ERROR

    def test_stdlib_level_filter_applies_first(self, std_logger: logging.Logger) -> None:
        sink = RecordingHandler()
        std_logger.addHandler(JoinLogHandler(sink, level=logging.ERROR))
        std_logger.warning("filtered")
        assert sink.enabled_calls == []


# ---------------------------------------------------------------------------
# LoggingHandler (joinlog -> stdlib)
# ---------------------------------------------------------------------------


class TestLoggingHandler:
    def test_enabled_follows_logger_level(self, std_logger: logging.Logger) -> None:
        std_logger.setLevel(logging.WARNING)
        handler = LoggingHandler(std_logger)
        assert not handler.enabled(Level.INFO)
        assert handler.enabled(Level.WARNING)

    def test_accepts_logger_name(self) -> None:
        assert LoggingHandler("test.bridge.named").logger is logging.getLogger("test.bridge.named")

    def test_reemits_record_with_dotted_extra(self, std_logger: logging.Logger) -> None:
        captured = _ListHandler()
        std_logger.addHandler(captured)
        handler = LoggingHandler(std_logger).with_attrs([Attr("svc", "api")]).with_group("req")
        record = Record.now(Level.INFO, "user login", Attr("user_id", 42), Attr.group("auth", Attr("ok", True)))

        handler.handle(record)

        out = captured.records[0]
        assert out.getMessage() == "user login"
        assert out.levelno == logging.INFO
        assert out.created == pytest.approx(record.time.timestamp())
        assert getattr(out, "svc") == "api"
        assert getattr(out, "req.user_id") == 42
        assert getattr(out, "req.auth.ok") is True

    def test_reserved_keys_are_not_overwritten(self, std_logger: logging.Logger) -> None:
        captured = _ListHandler()
        std_logger.addHandler(captured)
        LoggingHandler(std_logger).handle(Record.now(Level.INFO, "m", Attr("message", "x"), Attr("name", "y")))
        assert captured.records[0].name == std_logger.name

    def test_joined_with_structured_sink(self, std_logger: logging.Logger) -> None:
        captured = _ListHandler()
        std_logger.addHandler(captured)
        sink = RecordingHandler()
        joined = join_handlers(LoggingHandler(std_logger), sink).with_attrs([Attr("a", 1)])
        joined.handle(Record.now(Level.INFO, "both"))
        assert getattr(captured.records[0], "a") == 1
        assert sink.handled[0].fields() == {"a": 1}
