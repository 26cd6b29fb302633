class ResearchMemoryError(Exception):
    """Base exception for research memory service."""


class ConfigurationError(ResearchMemoryError):
    """Raised when configuration is missing or invalid."""


class ServiceNotInitializedError(ResearchMemoryError):
    """Raised when the application is used before initialization."""


class RetrievalError(ResearchMemoryError):
    """Raised when a read could not complete. Never means "no match"."""


class StoreUnavailableError(RetrievalError):
    """Raised when the backing key-value store fails."""


class KeyVanishedError(RetrievalError):
    """Raised when a matched key disappears before its value is re-fetched."""

    def __init__(self, key: str):
        super().__init__(f"error retrieving content for key '{key}': key no longer exists")
        self.key = key


class VectorIndexError(ResearchMemoryError):
    """Raised when the vector index fails."""
