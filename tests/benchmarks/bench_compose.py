"""Benchmark: fan-out dispatch cost.

Compares a bare leaf against pair and list joins, and measures the cost of
the per-child record clone and of ``with_attrs`` on joined handlers.
"""

from __future__ import annotations

from mp_joinlog.handlers import JSONHandler, TextHandler, join_handlers
from mp_joinlog.logger import Logger
from mp_joinlog.records import Attr, Level, Record
from mp_joinlog.testing import RecordingHandler

_ATTRS = [Attr("user_id", "user-1"), Attr("action", "login"), Attr("ip", "127.0.0.1")]


def _record() -> Record:
    return Record.now(Level.INFO, "order_placed", *_ATTRS)


# ---------------------------------------------------------------------------
# a) dispatch through in-memory sinks
# ---------------------------------------------------------------------------


def test_leaf_handle(benchmark):
    """Single handler; ``join_handlers`` returns it unwrapped."""
    sink = RecordingHandler()
    handler = join_handlers(sink)
    benchmark(handler.handle, _record())
    assert sink.handled


def test_pair_handle(benchmark):
    """Two handlers: one clone per record."""
    a, b = RecordingHandler(), RecordingHandler()
    handler = join_handlers(a, b)
    benchmark(handler.handle, _record())
    assert len(a.handled) == len(b.handled)


def test_list_handle_five(benchmark):
    """Five handlers: four clones per record."""
    sinks = [RecordingHandler() for _ in range(5)]
    handler = join_handlers(*sinks)
    benchmark(handler.handle, _record())
    assert all(s.handled for s in sinks)


def test_enabled_all_disabled(benchmark):
    """Worst case for ``enabled``: every child is asked."""
    handler = join_handlers(*(RecordingHandler(level=Level.ERROR) for _ in range(5)))
    result = benchmark(handler.enabled, Level.DEBUG)
    assert result is False


def test_with_attrs_list(benchmark):
    """``with_attrs`` copies the attr buffer once per child."""
    handler = join_handlers(*(RecordingHandler() for _ in range(5)))
    benchmark(handler.with_attrs, _ATTRS)


# ---------------------------------------------------------------------------
# b) structlog-rendered sinks
# ---------------------------------------------------------------------------


def test_text_and_json_logger(benchmark, null_stream):
    """Full front-end call rendered as logfmt and JSON."""
    log = Logger(join_handlers(TextHandler(null_stream), JSONHandler(null_stream)))

    def _log():
        log.info("order_placed", order_id="o-1", user_id="u-1")

    benchmark(_log)
