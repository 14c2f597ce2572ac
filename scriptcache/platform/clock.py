"""
Timestamps for build freshness checks.

Both producers return integer milliseconds since the UNIX epoch and clamp
anything at or before the epoch to 0, so a caller can compare a recorded
build time against a source file's modification time directly:

    is_fresh(built_at, file_last_modified(f))

Clock and metadata anomalies are never raised. A zero modification time
makes a source look maximally old, and a zero build time makes a cached
artifact look maximally stale.
"""

from __future__ import annotations

import logging
import os
import time
from typing import Any, Callable, Protocol

logger = logging.getLogger(__name__)

_NS_PER_MS = 1_000_000


class HasFileno(Protocol):
    def fileno(self) -> int:
        ...


def _ns_to_ms(ns: int) -> int:
    if ns <= 0:
        return 0
    return ns // _NS_PER_MS


def current_time(clock: Callable[[], int] = time.time_ns) -> int:
    """Get the current system time, in milliseconds since the UNIX epoch."""
    return _ns_to_ms(clock())


def file_last_modified(
    file: HasFileno,
    stat: Callable[[int], Any] = os.fstat,
) -> int:
    """
    Get the last-modified time of an open file, in milliseconds since the UNIX epoch.

    Returns 0 when the metadata cannot be read, including for a closed file.
    """
    try:
        st = stat(file.fileno())
    except (OSError, ValueError) as e:
        logger.debug("could not read mtime of %r: %s", file, e)
        return 0
    return _ns_to_ms(st.st_mtime_ns)


def is_fresh(built_at: int, source_modified: int) -> bool:
    """True if an artifact built at `built_at` is not older than its source."""
    return built_at >= source_modified
