"""
Resolution policy for matcher escalation.

Implements the escalation logic: exact -> fuzzy.
"""
import logging
from typing import List

from .key_resolver import KeyResolver, ResolutionResult, NoMatch
from ..storage.kv_store import KeyValueStore


logger = logging.getLogger(__name__)


class ResolutionPolicy:
    """
    Policy for escalating through multiple matching strategies.

    Tries matchers in order and returns the first match. Errors raised by a
    matcher stop the escalation: a failed read is not a miss.
    """

    def __init__(self, matchers: List[KeyResolver]):
        """
        :param matchers: Matchers to try in order (e.g., [ExactKeyMatcher, FuzzyKeyMatcher])
        """
        if not matchers:
            raise ValueError("At least one matcher must be provided")

        self._matchers = matchers

    def resolve(
        self,
        query: str,
        store: KeyValueStore,
    ) -> ResolutionResult:
        """
        Resolve query by trying matchers in order.

        :param query: Query to resolve
        :param store: Store holding the key space
        :return: First match found, or NoMatch once every matcher missed
        """
        for matcher in self._matchers:
            result = matcher.resolve(query, store)

            if result.is_match():
                logger.debug(f"Resolved '{query}' via {result.strategy_used} strategy")
                return result

        return NoMatch(original_query=query)
