from dataclasses import dataclass


@dataclass(frozen=True)
class CacheEntry:
    """A cached response body and the clock reading taken when it was added."""
    payload: bytes
    created_at: float
