"""Memoization of PRB constants keyed on the Parameter Set value.

Optional: ``evaluate`` always recomputes. Callers sweeping many angles over
one Parameter Set may use ``get_prb_cache().get(params)`` instead; the cached
value is identical to ``compute_prb_details(params)``.
"""

from __future__ import annotations

from dataclasses import astuple, dataclass
from typing import TYPE_CHECKING

from .constants import MODEL_VERSION_PRB

if TYPE_CHECKING:
    from .types import MechanismParams, PRBDetails


@dataclass(frozen=True)
class CacheKey:
    """Immutable cache key for PRB constants."""

    values: tuple[float, ...]
    version: str


def make_cache_key(params: MechanismParams) -> CacheKey:
    """Create cache key from the Parameter Set fields."""
    return CacheKey(values=astuple(params), version=MODEL_VERSION_PRB)


class PRBCache:
    """In-memory cache of derived PRB constants."""

    def __init__(self, maxsize: int = 256) -> None:
        self._cache: dict[CacheKey, PRBDetails] = {}
        self._maxsize = maxsize
        self._hits = 0
        self._misses = 0

    def get(self, params: MechanismParams) -> PRBDetails:
        """Return PRB constants for params, computing them on a miss."""
        from .evaluator import compute_prb_details

        key = make_cache_key(params)
        result = self._cache.get(key)
        if result is not None:
            self._hits += 1
            return result

        self._misses += 1
        # Simple LRU-like eviction: clear oldest half when full
        if len(self._cache) >= self._maxsize:
            keys = list(self._cache.keys())
            for k in keys[: len(keys) // 2]:
                del self._cache[k]

        result = compute_prb_details(params)
        self._cache[key] = result
        return result

    def clear(self) -> None:
        """Clear all cached entries."""
        self._cache.clear()
        self._hits = 0
        self._misses = 0

    @property
    def stats(self) -> dict[str, int]:
        """Return cache statistics."""
        return {
            "hits": self._hits,
            "misses": self._misses,
            "size": len(self._cache),
        }


# Global cache instance
_global_cache = PRBCache()


def get_prb_cache() -> PRBCache:
    """Get global PRB constants cache."""
    return _global_cache
