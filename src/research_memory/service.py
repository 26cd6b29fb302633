import logging
from typing import Any

from .resolution import PaperTitleResolver, ResolutionResult
from .security import InputValidator, ValidationError
from .storage.kv_store import KeyValueStore


logger = logging.getLogger(__name__)


class ResearchPaperService:
    """
    Facade over the research paper store.
    Writes go straight to the store; reads go through the title resolver.
    """

    def __init__(self, store: KeyValueStore, resolver: PaperTitleResolver):
        """
        :param store: Long-lived store handle
        :param resolver: Resolver bound to the same store
        """
        self._store = store
        self._resolver = resolver

    def set_paper(self, title: str, summarization: Any = "") -> None:
        """
        Create or overwrite a paper.

        :raises ValidationError: If title is not a string
        :raises StoreUnavailableError: If the store rejects the write
        """
        title = InputValidator.validate_key(title, "title")
        self._store.set(title, InputValidator.optional_text(summarization))
        logger.info(f"Stored paper '{title}'")

    def get_paper(self, title: str) -> ResolutionResult:
        """
        Look up a paper by exact title, falling back to the closest title.

        :raises ValidationError: If title is not a non-empty string
        :raises RetrievalError: If the store fails or the matched key vanishes
        """
        title = InputValidator.validate_key(title, "title")
        if not title:
            raise ValidationError("argument 'title' must not be empty")

        result = self._resolver.resolve(title)

        if result.strategy_used == "fuzzy":
            logger.info(f"Fuzzy match for '{title}': '{result.key}' (distance {result.distance})")
        elif result.strategy_used == "none":
            logger.info(f"No paper matching '{title}'")

        return result
