"""
mp_joinlog – Fan-out structured logging.

Import path convention::

    from mp_joinlog.handlers import JSONHandler, TextHandler, join_handlers
    from mp_joinlog.logger import Logger
    from mp_joinlog.records import Attr, Level, Record
"""

from mp_joinlog.handlers import Handler, JSONHandler, TextHandler, join_handlers
from mp_joinlog.logger import Logger
from mp_joinlog.records import Attr, Level, Record

__version__ = "0.1.0"
__all__ = [
    "Attr",
    "Handler",
    "JSONHandler",
    "Level",
    "Logger",
    "Record",
    "TextHandler",
    "__version__",
    "join_handlers",
]
