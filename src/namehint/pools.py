"""
Explicitly owned cache of candidate pools.

Collecting candidates (every type name visible in a compilation, every
namespace, ...) can cost far more than ranking them. A calling layer that
wants to reuse a pool across many unresolved names creates one
``CandidatePoolCache`` per analysis session, passes it where it is needed
and invalidates it when the session's inputs change. The ranking engine
itself never caches.

Example:
    cache = CandidatePoolCache()
    types = cache.get_or_build("types", lambda: collect_type_names(compilation))
    suggestions = rank_flat("Dictionry", types)
    ...
    cache.invalidate()  # compilation changed
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Hashable, Iterable
from typing import Callable, Generic, Optional, TypeVar

T = TypeVar("T")

logger = logging.getLogger(__name__)


class CandidatePoolCache(Generic[T]):
    """
    Thread-safe cache of built candidate pools keyed by the caller.

    Pools are stored as tuples so a cached pool cannot be changed by one
    consumer under another's feet.
    """

    def __init__(self) -> None:
        self._pools: dict[Hashable, tuple[T, ...]] = {}
        self._lock = threading.Lock()
        self.builds = 0

    def get_or_build(
        self,
        key: Hashable,
        builder: Callable[[], Iterable[T]],
    ) -> tuple[T, ...]:
        """
        Get the pool for ``key``, building it on first use.

        The builder runs under the cache lock, so concurrent callers asking
        for the same key build it once.

        Args:
            key: Caller-defined pool identity
            builder: Produces the pool's candidates

        Returns:
            The cached candidates
        """
        with self._lock:
            pool = self._pools.get(key)
            if pool is None:
                pool = tuple(builder())
                self._pools[key] = pool
                self.builds += 1
                logger.debug("Built candidate pool %r with %d entries", key, len(pool))
            return pool

    def get(self, key: Hashable) -> Optional[tuple[T, ...]]:
        """Get a cached pool without building it."""
        with self._lock:
            return self._pools.get(key)

    def invalidate(self, key: Optional[Hashable] = None) -> None:
        """
        Drop one cached pool, or every pool when ``key`` is None.
        """
        with self._lock:
            if key is None:
                logger.debug("Invalidating %d candidate pools", len(self._pools))
                self._pools.clear()
            else:
                self._pools.pop(key, None)

    def __contains__(self, key: Hashable) -> bool:
        with self._lock:
            return key in self._pools

    def __len__(self) -> int:
        with self._lock:
            return len(self._pools)


__all__ = [
    "CandidatePoolCache",
]
