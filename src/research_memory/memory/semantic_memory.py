"""
Semantic memory over a vector index.

Similarity itself lives in the index; this layer only shapes payloads and
interprets results.
"""
import logging
from typing import List, Optional

from ..schemas import ScoredRecord
from ..storage.vector_index import VectorIndex


logger = logging.getLogger(__name__)


def build_memory_payload(content: str, metadata: Optional[str] = None) -> str:
    """
    Text that gets embedded for a memory.

    Metadata, when present, is appended as "<content> [metadata: <metadata>]".
    """
    if metadata:
        return f"{content} [metadata: {metadata}]"
    return content


class SemanticMemoryService:
    """
    Stores free-text memories and finds them by meaning.

    get_memory is a top-1 similarity query with the ID as query text, accepted
    only when the top hit carries that ID. It is not an exact key lookup: a
    stored memory can be reported missing if another one ranks above it.
    """

    def __init__(self, index: VectorIndex, default_top_k: int = 5):
        """
        :param index: Vector index holding memories
        :param default_top_k: Result count when search_memory gets no top_k
        """
        if default_top_k < 1:
            raise ValueError(f"default_top_k must be at least 1, got {default_top_k}")

        self._index = index
        self.default_top_k = default_top_k

    def add_memory(self, memory_id: str, content: str, metadata: Optional[str] = None) -> str:
        """
        Add a new memory or replace an existing one.

        :return: The payload written to the index
        :raises VectorIndexError: If the index rejects the write
        """
        payload = build_memory_payload(content, metadata)
        self._index.upsert(memory_id, payload)
        logger.info(f"Stored memory '{memory_id}' ({len(payload)} chars)")
        return payload

    def search_memory(self, query: str, top_k: Optional[int] = None) -> List[ScoredRecord]:
        """Return up to top_k memories ranked by similarity to query."""
        top_k = top_k or self.default_top_k
        results = self._index.query(query, top_k=top_k)
        logger.debug(f"Memory search for '{query}' returned {len(results)} results")
        return results

    def get_memory(self, memory_id: str) -> Optional[ScoredRecord]:
        """Return the memory with memory_id if it is the top hit for its own ID."""
        results = self._index.query(memory_id, top_k=1)

        if not results or results[0].id != memory_id:
            return None

        return results[0]
