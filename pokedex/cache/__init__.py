from .timed_cache import TimedCache
from .models import CacheEntry
from .constants import DEFAULT_RETENTION_SECONDS

__all__ = ["TimedCache", "CacheEntry", "DEFAULT_RETENTION_SECONDS"]
