"""Config – build the joined handler and logger described by settings."""
from __future__ import annotations

import logging
import sys
from typing import TextIO

from mp_joinlog.config.settings import JoinLogSettings
from mp_joinlog.handlers import Handler, JSONHandler, TextHandler, join_handlers
from mp_joinlog.logger import Logger

logger = logging.getLogger(__name__)

_SINK_TYPES = {"text": TextHandler, "json": JSONHandler}


def build_handler(settings: JoinLogSettings | None = None, stream: TextIO | None = None) -> Handler:
    """One leaf per configured sink, joined into a single handler.

    All sinks write to *stream* (default :data:`sys.stderr`).
    """
    settings = settings or JoinLogSettings()
    stream = stream if stream is not None else sys.stderr
    leaves = [
        _SINK_TYPES[sink](stream, level=settings.level_value, add_timestamp=settings.add_timestamp)
        for sink in settings.sinks
    ]
    handler = join_handlers(*leaves)
    logger.debug("joinlog.configured sinks=%s level=%s", ",".join(settings.sinks), settings.level)
    return handler


def configure_logger(settings: JoinLogSettings | None = None, stream: TextIO | None = None) -> Logger:
    settings = settings or JoinLogSettings()
    return Logger(build_handler(settings, stream), raise_errors=settings.raise_errors)


__all__ = ["build_handler", "configure_logger"]
