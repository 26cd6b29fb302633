"""
Exact matching strategy for key resolution.

Fast path: a single store lookup, no distance computation.
"""
from .key_resolver import KeyResolver, ResolutionResult, ExactMatch, NoMatch
from ..storage.kv_store import KeyValueStore


class ExactKeyMatcher(KeyResolver):
    """
    Exact match strategy.

    Byte-for-byte and case-sensitive: "deep learning" does not hit
    "Deep Learning" here, the fuzzy matcher handles that.
    """

    def resolve(
        self,
        query: str,
        store: KeyValueStore,
    ) -> ResolutionResult:
        value = store.get(query)

        if value is None:
            return NoMatch(original_query=query)

        return ExactMatch(original_query=query, key=query, value=value)
