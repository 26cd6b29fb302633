"""
Key resolution layer for approximate title lookup.

Turns a caller's title into a stored key when the backing store can only be
queried by exact key.

Key components:
- KeyResolver: Protocol for resolution strategies
- ExactMatch / FuzzyMatch / NoMatch: Immutable outcomes
- Matchers: Exact and Fuzzy (Levenshtein) strategies
- ResolutionPolicy: Escalation logic for matcher strategies
"""
from .edit_distance import edit_distance
from .key_resolver import KeyResolver, ResolutionResult, ExactMatch, FuzzyMatch, NoMatch
from .exact_matcher import ExactKeyMatcher
from .fuzzy_matcher import FuzzyKeyMatcher, DEFAULT_MAX_DISTANCE
from .resolution_policy import ResolutionPolicy
from .paper_title_resolver import PaperTitleResolver
from .resolver_factory import create_title_resolver

__all__ = [
    "edit_distance",
    "KeyResolver",
    "ResolutionResult",
    "ExactMatch",
    "FuzzyMatch",
    "NoMatch",
    "ExactKeyMatcher",
    "FuzzyKeyMatcher",
    "DEFAULT_MAX_DISTANCE",
    "ResolutionPolicy",
    "PaperTitleResolver",
    "create_title_resolver",
]
