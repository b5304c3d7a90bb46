"""Process-wide monotonic correlation ids.

JSON-RPC style subscribe and auth messages carry an ``id`` the exchange
echoes back. Several exchange sessions can share one process, so a single
counter owned by the process hands out ids to every caller.
"""

from __future__ import annotations

import itertools
import threading


class RequestIdGenerator:
    """Thread-safe strictly increasing integer id source."""

    def __init__(self, start: int = 1) -> None:
        self._counter = itertools.count(start)
        self._lock = threading.Lock()

    def next_id(self) -> int:
        """Return the next id; never repeats within the generator's lifetime."""
        with self._lock:
            return next(self._counter)

    def next_string_id(self, prefix: str = "id") -> str:
        """Return the next id rendered as ``<prefix><n>`` (e.g. "id42")."""
        return f"{prefix}{self.next_id()}"


_default_generator: RequestIdGenerator | None = None
_default_lock = threading.Lock()


def get_id_generator() -> RequestIdGenerator:
    """Get the global id generator instance.

    Returns:
        Process-wide RequestIdGenerator
    """
    global _default_generator

    if _default_generator is None:
        with _default_lock:
            if _default_generator is None:
                _default_generator = RequestIdGenerator()
    return _default_generator


def next_request_id() -> int:
    """Return the next process-wide integer correlation id."""
    return get_id_generator().next_id()


def next_string_id(prefix: str = "id") -> str:
    """Return the next process-wide string correlation id."""
    return get_id_generator().next_string_id(prefix)
