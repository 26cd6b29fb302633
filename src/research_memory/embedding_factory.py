import logging

from langchain_core.embeddings import DeterministicFakeEmbedding, Embeddings

from .config_validator import get_required_env
from .exceptions import ConfigurationError


logger = logging.getLogger(__name__)

FAKE_EMBEDDING_SIZE = 256


def create_embedding_model(provider: str, model: str) -> Embeddings:
    """
    Factory to return an embedding model for the vector index.

    :param provider: 'openai' or 'fake' (deterministic hashes, for local development)
    :param model: Embedding model name (ignored by 'fake')
    :return: LangChain Embeddings instance
    """
    provider = provider.lower()

    if provider == "openai":
        from langchain_openai import OpenAIEmbeddings

        api_key = get_required_env(
            "OPENAI_API_KEY",
            description="OpenAI API key for embeddings (get from https://platform.openai.com/api-keys)"
        )
        return OpenAIEmbeddings(model=model, api_key=api_key)

    if provider == "fake":
        logger.warning("Using deterministic fake embeddings; search results carry no meaning")
        return DeterministicFakeEmbedding(size=FAKE_EMBEDDING_SIZE)

    raise ConfigurationError(f"Unknown embedding provider: {provider}")
