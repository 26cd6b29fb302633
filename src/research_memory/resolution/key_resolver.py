"""
Core abstractions for key resolution.

Defines the resolver protocol and the three possible outcomes of resolving a
query against a key-value store.
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Union

from ..storage.kv_store import KeyValueStore


@dataclass(frozen=True)
class ExactMatch:
    """
    The query equals a stored key byte-for-byte.

    Attributes:
        original_query: The query that was resolved
        key: The matched key (identical to original_query)
        value: The value stored under key
    """
    original_query: str
    key: str
    value: str

    strategy_used = "exact"

    def is_match(self) -> bool:
        return True


@dataclass(frozen=True)
class FuzzyMatch:
    """
    No exact key exists, but key is the closest one within the distance
    threshold, compared case-insensitively.

    Attributes:
        original_query: The query that was resolved
        key: The closest stored key
        value: The value stored under key, re-fetched after the scan
        distance: Edit distance between the lowercased query and key
    """
    original_query: str
    key: str
    value: str
    distance: int

    strategy_used = "fuzzy"

    def is_match(self) -> bool:
        return True

    def __post_init__(self):
        if self.distance < 0:
            raise ValueError(f"Distance must be non-negative, got {self.distance}")


@dataclass(frozen=True)
class NoMatch:
    """Neither an exact key nor a key within the threshold exists."""
    original_query: str

    strategy_used = "none"

    def is_match(self) -> bool:
        return False


ResolutionResult = Union[ExactMatch, FuzzyMatch, NoMatch]


class KeyResolver(ABC):
    """
    Protocol for key resolution strategies.

    Resolvers only read from the store. Store failures propagate as
    RetrievalError and are never reported as NoMatch.
    """

    @abstractmethod
    def resolve(
        self,
        query: str,
        store: KeyValueStore,
    ) -> ResolutionResult:
        """
        Resolve a query against the keys of a store.

        :param query: The title to look up
        :param store: Store holding the key space
        :return: ExactMatch, FuzzyMatch or NoMatch
        :raises RetrievalError: If the store cannot be read
        """
        pass
