import threading
import time
from typing import Any, Callable, Dict, Optional, Tuple

from pokedex.utils import get_logger
from .constants import DEFAULT_RETENTION_SECONDS, MIN_SWEEP_INTERVAL
from .models import CacheEntry

logger = get_logger("TimedCache")


class TimedCache:
    """
    Thread-safe in-memory cache whose entries are dropped by a background
    sweeper once they are older than the retention interval.

    Reads never check age: an entry stays visible to ``get`` until a sweep
    physically removes it, so a payload slightly older than ``retention``
    may still be returned between sweep ticks.

    A single lock guards the entry map for readers, writers and the sweeper.
    """

    def __init__(
        self,
        retention: float = DEFAULT_RETENTION_SECONDS,
        clock: Callable[[], float] = time.monotonic,
    ):
        """
        Create the cache and start its sweeper thread.

        Args:
            retention: Seconds an entry is kept. Also the sweep period.
                Zero or negative values are accepted; every entry is then
                dropped on the first sweep after it was added.
            clock: Monotonic time source, injectable for tests.
        """
        self.retention = float(retention)
        self._clock = clock
        self._entries: Dict[str, CacheEntry] = {}
        self._lock = threading.Lock()
        self._stop = threading.Event()

        self._stats = {
            "hits": 0,
            "misses": 0,
            "adds": 0,
            "evictions": 0,
        }

        self._sweeper = threading.Thread(
            target=self._sweep_loop,
            name="timed-cache-sweeper",
            daemon=True,
        )
        self._sweeper.start()

    def __enter__(self) -> "TimedCache":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    # =========================================================================
    # Public API
    # =========================================================================

    def add(self, key: str, value: bytes) -> None:
        """Insert or replace the entry for ``key`` with a fresh timestamp."""
        payload = memoryview(value).tobytes()
        with self._lock:
            self._entries[key] = CacheEntry(payload=payload, created_at=self._clock())
            self._stats["adds"] += 1

    def get(self, key: str) -> Tuple[bytes, bool]:
        """
        Look up ``key``.

        Returns:
            ``(payload, True)`` if the key is present, ``(b"", False)`` otherwise.
        """
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                self._stats["misses"] += 1
                return b"", False
            self._stats["hits"] += 1
            return entry.payload, True

    def sweep(self) -> int:
        """Remove every entry older than ``retention``. Returns the number removed."""
        with self._lock:
            now = self._clock()
            expired = [
                key for key, entry in self._entries.items()
                if now - entry.created_at > self.retention
            ]
            for key in expired:
                del self._entries[key]
            self._stats["evictions"] += len(expired)

        if expired:
            logger.debug(f"Swept {len(expired)} expired entries")
        return len(expired)

    def close(self, timeout: Optional[float] = 1.0) -> None:
        """Stop the sweeper thread. Safe to call more than once."""
        self._stop.set()
        if self._sweeper.is_alive() and self._sweeper is not threading.current_thread():
            self._sweeper.join(timeout)

    @property
    def closed(self) -> bool:
        return self._stop.is_set()

    # =========================================================================
    # Statistics
    # =========================================================================

    def get_stats(self) -> Dict[str, Any]:
        """Get cache statistics."""
        with self._lock:
            stats = dict(self._stats)
            stats["entries"] = len(self._entries)

        hit_rate = 0.0
        total_access = stats["hits"] + stats["misses"]
        if total_access > 0:
            hit_rate = stats["hits"] / total_access

        return {
            **stats,
            "retention_seconds": self.retention,
            "hit_rate": hit_rate,
        }

    # =========================================================================
    # Sweeper
    # =========================================================================

    def _sweep_loop(self) -> None:
        interval = max(self.retention, MIN_SWEEP_INTERVAL)
        logger.debug(f"Sweeper started (interval={interval}s)")
        while not self._stop.wait(interval):
            self.sweep()
        logger.debug("Sweeper stopped")
