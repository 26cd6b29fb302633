"""
Fuzzy matching strategy for key resolution.

Handles typos and letter-case differences by scanning the whole key space for
the closest key by Levenshtein distance.
"""
import logging
from typing import Callable, List, Optional

from .edit_distance import edit_distance
from .key_resolver import KeyResolver, ResolutionResult, FuzzyMatch, NoMatch
from ..exceptions import KeyVanishedError
from ..storage.kv_store import KeyValueStore


logger = logging.getLogger(__name__)

DEFAULT_MAX_DISTANCE = 3


class FuzzyKeyMatcher(KeyResolver):
    """
    Closest-key match within an inclusive edit distance bound.

    Handles:
    - Typos ("Deep Leaning" -> "Deep Learning")
    - Case differences ("neural networks" -> "Neural Networks")

    Tie-break: a key only replaces the current best when its distance is
    strictly smaller, so among equally distant keys the first one enumerated
    wins. The result under ties therefore depends on the store's enumeration
    order, which is not guaranteed to be stable.

    Every miss scans all keys: cost is O(keys x key length x query length).
    """

    def __init__(
        self,
        max_distance: int = DEFAULT_MAX_DISTANCE,
        distance_fn: Callable[..., int] = edit_distance,
    ):
        """
        Initialize fuzzy matcher.

        :param max_distance: Largest accepted edit distance (inclusive)
        :param distance_fn: Metric called as distance_fn(a, b, score_cutoff=...)
        """
        if max_distance < 0:
            raise ValueError(f"max_distance must be non-negative, got {max_distance}")

        self.max_distance = max_distance
        self._distance_fn = distance_fn

    def resolve(
        self,
        query: str,
        store: KeyValueStore,
    ) -> ResolutionResult:
        """
        Find the closest key and re-fetch its value.

        :param query: Query to match
        :param store: Store holding the key space
        :return: FuzzyMatch for the closest key, or NoMatch if none is within max_distance
        :raises KeyVanishedError: If the winning key is deleted before its value is re-fetched
        """
        keys = store.scan_keys()
        best_key, best_distance = self.closest_key(query, keys)

        if best_key is None:
            logger.debug(f"No key within distance {self.max_distance} of '{query}' ({len(keys)} keys scanned)")
            return NoMatch(original_query=query)

        value = store.get(best_key)
        if value is None:
            logger.warning(f"Key '{best_key}' vanished between scan and fetch")
            raise KeyVanishedError(best_key)

        return FuzzyMatch(
            original_query=query,
            key=best_key,
            value=value,
            distance=best_distance,
        )

    def closest_key(self, query: str, keys: List[str]) -> tuple[Optional[str], Optional[int]]:
        """
        Pick the closest key in enumeration order.

        :return: (key, distance), or (None, None) if no key is within max_distance
        """
        needle = query.lower()
        best_key: Optional[str] = None
        best_distance: Optional[int] = None

        for key in keys:
            distance = self._distance_fn(needle, key.lower(), score_cutoff=self.max_distance)

            if distance <= self.max_distance and (best_distance is None or distance < best_distance):
                best_key = key
                best_distance = distance

        return best_key, best_distance
