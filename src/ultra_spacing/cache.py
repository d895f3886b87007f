"""Single-slot memoization for breakpoint and spacing resolution.

Views rebuild far more often than the device configuration changes, so the
last resolution is kept together with the exact key that produced it. A call
whose key equals the stored key returns the stored value; any other key
recomputes and replaces the slot. Only one entry is ever held.

Two facades share the slot implementation:

 - `BreakpointCache.detect(width, height)` keyed on the raw size pair.
 - `SpacingCache.resolve(width, is_rtl, is_landscape)` keyed on
   ``(breakpoint_index, is_rtl, is_landscape)``.

Caches are plain objects so tests and independent render contexts can own
separate instances. The module-level defaults back `cached_resolve`,
`detect_breakpoint` and `invalidate_cache`.

Threading: caches assume a single rendering thread unless created with
``thread_safe=True``, in which case an RLock serializes lookup and
replacement. The slot is always replaced as one ``(key, value)`` tuple.
"""

from __future__ import annotations

from contextlib import nullcontext
import logging
from threading import RLock
from typing import Callable, Generic, Hashable, Optional, Tuple, TypeVar

from . import settings
from .breakpoints import Breakpoint, breakpoint_at, resolve_breakpoint, shortest_side
from .profile import SpacingProfile
from .tables import SpacingTables, default_tables

_logger = logging.getLogger(__name__)

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")

__all__ = [
    "SingleSlotCache",
    "BreakpointCache",
    "SpacingCache",
    "cached_resolve",
    "cached_resolve_size",
    "detect_breakpoint",
    "invalidate_cache",
    "default_spacing_cache",
    "default_breakpoint_cache",
]


class SingleSlotCache(Generic[K, V]):
    """Memoize the most recent ``compute(key)`` result.

    ``compute`` may also be supplied per call, for values that depend on
    inputs outside the key.
    """

    def __init__(
        self, compute: Optional[Callable[[K], V]] = None, thread_safe: bool = False
    ) -> None:
        self._compute = compute
        self._slot: Optional[Tuple[K, V]] = None
        self._lock = RLock() if thread_safe else None
        self.hits = 0
        self.misses = 0

    @property
    def thread_safe(self) -> bool:
        return self._lock is not None

    def get(self, key: K, compute: Optional[Callable[[K], V]] = None) -> V:
        producer = compute or self._compute
        if producer is None:
            raise TypeError("SingleSlotCache.get requires a compute function")
        with self._lock if self._lock is not None else nullcontext():
            slot = self._slot
            if slot is not None and slot[0] == key:
                self.hits += 1
                return slot[1]
            value = producer(key)
            self._slot = (key, value)
            self.misses += 1
            _logger.debug("cache miss: key=%r", key)
            return value

    def peek(self) -> Optional[V]:
        """Stored value without triggering a computation."""
        slot = self._slot
        return None if slot is None else slot[1]

    def invalidate(self) -> None:
        with self._lock if self._lock is not None else nullcontext():
            self._slot = None
        _logger.debug("cache invalidated")


class BreakpointCache:
    """Detect breakpoints from a viewport size, reusing the last result."""

    def __init__(self, tables: Optional[SpacingTables] = None, thread_safe: bool = False) -> None:
        self.tables = tables or default_tables()
        self._cache: SingleSlotCache[Tuple[float, float], Breakpoint] = SingleSlotCache(
            self._compute, thread_safe=thread_safe
        )

    def _compute(self, size: Tuple[float, float]) -> Breakpoint:
        index = resolve_breakpoint(shortest_side(*size), self.tables)
        return breakpoint_at(index, self.tables)

    def detect(self, width: float, height: float) -> Breakpoint:
        return self._cache.get((width, height))

    def invalidate(self) -> None:
        self._cache.invalidate()

    @property
    def stats(self) -> Tuple[int, int]:
        """``(hits, misses)`` since construction."""
        return self._cache.hits, self._cache.misses


class SpacingCache:
    """Produce `SpacingProfile` instances, reusing the last one when unchanged."""

    def __init__(self, tables: Optional[SpacingTables] = None, thread_safe: bool = False) -> None:
        self.tables = tables or default_tables()
        self._cache: SingleSlotCache[Tuple[int, bool, bool], SpacingProfile] = SingleSlotCache(
            thread_safe=thread_safe
        )

    def resolve(
        self,
        width: float,
        is_rtl: bool = False,
        is_landscape: bool = False,
        screen_width: Optional[float] = None,
    ) -> SpacingProfile:
        """Profile for a shortest-side width and direction/orientation flags.

        ``screen_width`` is recorded on newly created profiles (defaults to
        ``width``); a cache hit keeps the profile created earlier.
        """
        index = resolve_breakpoint(width, self.tables)
        key = (index, bool(is_rtl), bool(is_landscape))
        recorded_width = width if screen_width is None else screen_width

        def build(k: Tuple[int, bool, bool]) -> SpacingProfile:
            return SpacingProfile(k[0], k[1], k[2], recorded_width, self.tables)

        return self._cache.get(key, build)

    def resolve_size(self, width: float, height: float, is_rtl: bool = False) -> SpacingProfile:
        """Profile for a full viewport size; landscape when wider than tall."""
        return self.resolve(
            shortest_side(width, height),
            is_rtl=is_rtl,
            is_landscape=width > height,
            screen_width=width,
        )

    def invalidate(self) -> None:
        self._cache.invalidate()

    @property
    def stats(self) -> Tuple[int, int]:
        return self._cache.hits, self._cache.misses


_default_spacing: Optional[SpacingCache] = None
_default_breakpoints: Optional[BreakpointCache] = None


def default_spacing_cache() -> SpacingCache:
    global _default_spacing
    if _default_spacing is None:
        _default_spacing = SpacingCache(thread_safe=settings.THREAD_SAFE_DEFAULT_CACHES)
    return _default_spacing


def default_breakpoint_cache() -> BreakpointCache:
    global _default_breakpoints
    if _default_breakpoints is None:
        _default_breakpoints = BreakpointCache(thread_safe=settings.THREAD_SAFE_DEFAULT_CACHES)
    return _default_breakpoints


def cached_resolve(width: float, is_rtl: bool = False, is_landscape: bool = False) -> SpacingProfile:
    return default_spacing_cache().resolve(width, is_rtl=is_rtl, is_landscape=is_landscape)


def cached_resolve_size(width: float, height: float, is_rtl: bool = False) -> SpacingProfile:
    return default_spacing_cache().resolve_size(width, height, is_rtl=is_rtl)


def detect_breakpoint(width: float, height: float) -> Breakpoint:
    return default_breakpoint_cache().detect(width, height)


def invalidate_cache() -> None:
    """Force the next default-cache resolution to recompute."""
    default_spacing_cache().invalidate()
    default_breakpoint_cache().invalidate()
