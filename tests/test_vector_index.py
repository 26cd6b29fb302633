import math

import pytest
from langchain_core.embeddings import Embeddings

from research_memory.storage import FaissVectorIndex

VOCABULARY = ["redis", "cache", "python", "snake", "coffee", "morning"]


class KeywordEmbedding(Embeddings):
    """Bag-of-words over a tiny vocabulary, L2-normalized."""

    def _embed(self, text: str) -> list[float]:
        words = text.lower().split()
        vector = [float(sum(word.startswith(term) for word in words)) for term in VOCABULARY]
        vector.append(0.1)
        norm = math.sqrt(sum(v * v for v in vector))
        return [v / norm for v in vector]

    def embed_documents(self, texts: list[str]) -> list[list[float]]:
        return [self._embed(text) for text in texts]

    def embed_query(self, text: str) -> list[float]:
        return self._embed(text)


@pytest.fixture
def index():
    index = FaissVectorIndex(embedding_model=KeywordEmbedding())
    index.upsert("m1", "redis is a cache")
    index.upsert("m2", "python is not a snake")
    index.upsert("m3", "coffee every morning")
    return index


def test_query_empty_index_returns_nothing():
    index = FaissVectorIndex(embedding_model=KeywordEmbedding())

    assert not index.is_initialized()
    assert index.query("anything") == []


def test_query_ranks_by_similarity(index):
    results = index.query("which cache should I use with redis", top_k=2)

    assert len(results) == 2
    assert results[0].id == "m1"
    assert results[0].data == "redis is a cache"
    assert results[0].score >= results[1].score


def test_upsert_replaces_existing_record(index):
    index.upsert("m1", "morning coffee habit")

    results = index.query("coffee morning", top_k=3)

    assert [r.id for r in results].count("m1") == 1
    assert all(r.data != "redis is a cache" for r in results)


def test_save_and_load_round_trip(tmp_path):
    path = str(tmp_path / "memory_index")
    index = FaissVectorIndex(embedding_model=KeywordEmbedding(), index_path=path)
    index.upsert("m1", "redis is a cache")
    index.save()

    reloaded = FaissVectorIndex(embedding_model=KeywordEmbedding(), index_path=path)
    reloaded.load_if_exists()

    assert reloaded.query("redis", top_k=1)[0].id == "m1"
