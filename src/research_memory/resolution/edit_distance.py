"""
Levenshtein edit distance.

A pure metric: no case folding or trimming happens here. Callers normalize
both strings before comparing them.
"""
from typing import Optional

from rapidfuzz.distance import Levenshtein


def edit_distance(a: str, b: str, score_cutoff: Optional[int] = None) -> int:
    """
    Minimum number of single-character insertions, deletions or substitutions
    turning a into b.

    :param a: First string
    :param b: Second string
    :param score_cutoff: If given, any distance above it is reported as score_cutoff + 1
    :return: Non-negative edit distance
    """
    return Levenshtein.distance(a, b, score_cutoff=score_cutoff)
