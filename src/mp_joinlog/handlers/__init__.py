"""Handlers – the Handler capability, fan-out composition and concrete sinks."""
from mp_joinlog.handlers.compose import flatten, join_handlers
from mp_joinlog.handlers.protocol import Handler
from mp_joinlog.handlers.stdlib import JoinLogHandler, LoggingHandler
from mp_joinlog.handlers.structured import JSONHandler, TextHandler, stream_lock

__all__ = [
    "Handler",
    "JSONHandler",
    "JoinLogHandler",
    "LoggingHandler",
    "TextHandler",
    "flatten",
    "join_handlers",
    "stream_lock",
]
