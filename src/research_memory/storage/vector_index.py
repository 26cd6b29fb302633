import logging
import os
import threading
from abc import ABC, abstractmethod
from typing import List, Optional

from langchain_community.vectorstores import FAISS
from langchain_core.embeddings import Embeddings

from ..exceptions import VectorIndexError
from ..schemas import ScoredRecord


logger = logging.getLogger(__name__)


class VectorIndex(ABC):
    """Protocol for the similarity index behind semantic memory."""

    @abstractmethod
    def upsert(self, record_id: str, data: str) -> None:
        """Embed data and store it under record_id, replacing any previous record."""
        pass

    @abstractmethod
    def query(self, data: str, top_k: int = 5) -> List[ScoredRecord]:
        """Return up to top_k records ranked by similarity to data, best first."""
        pass


class FaissVectorIndex(VectorIndex):
    def __init__(self, embedding_model: Embeddings, index_path: Optional[str] = None):
        self._embedding_model = embedding_model
        self._index_path = index_path
        self._vectorstore: FAISS | None = None
        self._lock = threading.Lock()

    def is_initialized(self) -> bool:
        return self._vectorstore is not None

    def upsert(self, record_id: str, data: str) -> None:
        metadata = {"id": record_id}
        try:
            with self._lock:
                if self._vectorstore is None:
                    self._vectorstore = FAISS.from_texts(
                        texts=[data],
                        embedding=self._embedding_model,
                        metadatas=[metadata],
                        ids=[record_id],
                    )
                    return

                if record_id in self._vectorstore.index_to_docstore_id.values():
                    self._vectorstore.delete(ids=[record_id])
                self._vectorstore.add_texts(texts=[data], metadatas=[metadata], ids=[record_id])
        except Exception as e:
            raise VectorIndexError(f"error storing memory: {e}") from e

    def query(self, data: str, top_k: int = 5) -> List[ScoredRecord]:
        if self._vectorstore is None:
            return []

        try:
            with self._lock:
                results = self._vectorstore.similarity_search_with_relevance_scores(data, k=top_k)
        except Exception as e:
            raise VectorIndexError(f"error searching memories: {e}") from e

        return [
            ScoredRecord(id=doc.metadata.get("id", ""), score=float(score), data=doc.page_content)
            for doc, score in results
        ]

    def save(self) -> None:
        if not self._index_path or self._vectorstore is None:
            return
        with self._lock:
            self._vectorstore.save_local(self._index_path)
        logger.info(f"Saved vector index to {self._index_path}")

    def load(self) -> None:
        if not self._index_path:
            raise VectorIndexError("No index path configured.")
        self._vectorstore = FAISS.load_local(
            self._index_path,
            self._embedding_model,
            allow_dangerous_deserialization=True,
        )

    def load_if_exists(self) -> None:
        if self._index_path and os.path.exists(self._index_path):
            self.load()
            logger.info(f"Loaded vector index from {self._index_path}")
