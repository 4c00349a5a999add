"""Testing – in-memory handler doubles."""
from mp_joinlog.testing.fakes import FailingHandler, HandledRecord, RecordingHandler

__all__ = ["FailingHandler", "HandledRecord", "RecordingHandler"]
