"""Records – levels, attributes and the log record value."""
from mp_joinlog.records.attr import Attr, attrs_from_kwargs
from mp_joinlog.records.level import Level, level_name, parse_level
from mp_joinlog.records.record import Record

__all__ = ["Attr", "Level", "Record", "attrs_from_kwargs", "level_name", "parse_level"]
