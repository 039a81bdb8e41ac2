"""Identifier generators for records that arrive without an id.

Generated ids always look like ``<prefix>-<digits>`` so callers can tell
which component (or nested item) produced them.
"""

import itertools
import threading
import uuid
from functools import lru_cache
from typing import Protocol

from ..config import get_id_strategy


class IdGenerator(Protocol):
    """Anything that can mint a fresh id for a prefix."""

    def next_id(self, prefix: str) -> str: ...


class CounterIdGenerator:
    """Monotonic counter shared by all prefixes.

    Deterministic, so tests can assert exact ids. Safe to share between
    threads.
    """

    def __init__(self, start: int = 1):
        self._counter = itertools.count(start)
        self._lock = threading.Lock()

    def next_id(self, prefix: str) -> str:
        with self._lock:
            value = next(self._counter)
        return f"{prefix}-{value}"


class RandomIdGenerator:
    """uuid4-derived ids with negligible collision probability."""

    def next_id(self, prefix: str) -> str:
        return f"{prefix}-{uuid.uuid4().int}"


def create_id_generator(strategy: str | None = None) -> IdGenerator:
    """Create a new generator for a strategy.

    Args:
        strategy: "random" or "counter". Defaults to COSMO_ID_STRATEGY.

    Raises:
        ValueError: If the strategy is unknown.
    """
    if get_id_strategy(strategy) == "counter":
        return CounterIdGenerator()
    return RandomIdGenerator()


@lru_cache(maxsize=None)
def _shared_generator(strategy: str) -> IdGenerator:
    return create_id_generator(strategy)


def default_id_generator() -> IdGenerator:
    """Process-wide generator for the configured strategy."""
    return _shared_generator(get_id_strategy())


__all__ = [
    "IdGenerator",
    "CounterIdGenerator",
    "RandomIdGenerator",
    "create_id_generator",
    "default_id_generator",
]
