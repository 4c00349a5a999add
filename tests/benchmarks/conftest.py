"""conftest.py for benchmarks.

Provides a shared null sink so benchmarks measure dispatch, not I/O.
"""

from __future__ import annotations

import io

import pytest


class _NullStream(io.TextIOBase):
    def write(self, s: str) -> int:
        return len(s)


@pytest.fixture(scope="session")
def null_stream() -> io.TextIOBase:
    """A text stream that discards everything written to it."""
    return _NullStream()
