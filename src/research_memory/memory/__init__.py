"""
Semantic memory layer.

Memories are free text ranked by an external vector index.
"""
from .semantic_memory import SemanticMemoryService, build_memory_payload

__all__ = [
    "SemanticMemoryService",
    "build_memory_payload",
]
