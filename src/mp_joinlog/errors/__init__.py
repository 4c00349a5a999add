"""Error hierarchy – public re-export surface.

Hierarchy::

    BaseError
    ├── HandlerError             (handler.py)
    │   └── HandlerWriteError
    └── ConfigError              (mp_joinlog.config.errors)
        └── InvalidSettingValueError

    ExceptionGroup
    └── HandlerErrorGroup        (handler.py)
"""

from mp_joinlog.errors.base import BaseError
from mp_joinlog.errors.handler import (
    HandlerError,
    HandlerErrorGroup,
    HandlerWriteError,
    join_errors,
    raise_joined,
)

__all__ = [
    "BaseError",
    "HandlerError",
    "HandlerErrorGroup",
    "HandlerWriteError",
    "join_errors",
    "raise_joined",
]
