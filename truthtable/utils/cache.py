import threading

from truthtable.config import TABLE_CONFIG


class TableCache:
    """Bounded formula -> TruthTable cache shared by the API routes. Oldest entry is evicted first."""
    MAX_SIZE = TABLE_CONFIG["cache_size"]
    cache = {}
    # Routes are plain functions run in the threadpool, so inserts are guarded by a thread lock.
    _lock = threading.Lock()

    @classmethod
    def add_to_cache(cls, key, value):
        with cls._lock:
            if key not in cls.cache and len(cls.cache) >= cls.MAX_SIZE:
                oldest_key = next(iter(cls.cache))
                cls.cache.pop(oldest_key)
            cls.cache[key] = value

    @classmethod
    def get(cls, key):
        return cls.cache.get(key)

    @classmethod
    def clear(cls):
        with cls._lock:
            cls.cache.clear()
