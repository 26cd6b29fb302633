"""
Concrete resolver for research paper titles.

Combines matchers and policy into a complete resolution system bound to one store.
"""
from typing import List

from .key_resolver import ResolutionResult
from .exact_matcher import ExactKeyMatcher
from .fuzzy_matcher import FuzzyKeyMatcher, DEFAULT_MAX_DISTANCE
from .resolution_policy import ResolutionPolicy
from ..storage.kv_store import KeyValueStore


class PaperTitleResolver:
    """
    Resolver for paper titles held in a key-value store.

    Combines:
    - ExactKeyMatcher (single lookup, case-sensitive)
    - FuzzyKeyMatcher (full scan, case-insensitive, bounded distance)
    - ResolutionPolicy (escalation logic)

    Usage:
        resolver = PaperTitleResolver(store)
        result = resolver.resolve("Deep Leaning")
        if result.is_match():
            summary = result.value
    """

    def __init__(
        self,
        store: KeyValueStore,
        max_distance: int = DEFAULT_MAX_DISTANCE,
    ):
        """
        :param store: Long-lived store handle shared across requests
        :param max_distance: Largest accepted edit distance for fuzzy matches
        """
        self._store = store
        self._fuzzy = FuzzyKeyMatcher(max_distance=max_distance)
        self._policy = ResolutionPolicy(matchers=[ExactKeyMatcher(), self._fuzzy])

    @property
    def max_distance(self) -> int:
        return self._fuzzy.max_distance

    def resolve(self, query: str) -> ResolutionResult:
        """
        Resolve a paper title.

        :param query: Title to look up; callers reject empty titles beforehand
        :return: ExactMatch, FuzzyMatch or NoMatch
        :raises RetrievalError: If the store fails or the matched key vanishes
        """
        return self._policy.resolve(query, self._store)

    def resolve_multiple(self, queries: List[str]) -> List[ResolutionResult]:
        """Resolve multiple titles in batch."""
        return [self.resolve(query) for query in queries]
