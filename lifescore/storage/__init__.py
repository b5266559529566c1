"""Standing cache and its key-value backends."""

from .kv_store import KeyValueStore, InMemoryKeyValueStore, PostgresKeyValueStore
from .standing_cache import (
    StandingCache,
    get_cached_global_standing,
    set_cached_global_standing,
)

__all__ = [
    'KeyValueStore',
    'InMemoryKeyValueStore',
    'PostgresKeyValueStore',
    'StandingCache',
    'get_cached_global_standing',
    'set_cached_global_standing',
]
