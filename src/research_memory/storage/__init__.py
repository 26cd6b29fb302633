"""
Storage backends.

- KeyValueStore: flat string-keyed store behind the research paper service
- VectorIndex: similarity index behind semantic memory
"""
from .kv_store import KeyValueStore, InMemoryKeyValueStore
from .redis_store import RedisKeyValueStore
from .vector_index import VectorIndex, FaissVectorIndex

__all__ = [
    "KeyValueStore",
    "InMemoryKeyValueStore",
    "RedisKeyValueStore",
    "VectorIndex",
    "FaissVectorIndex",
]
