"""
Research Memory Service.

Title-keyed research paper store with typo-tolerant lookup, plus a semantic
memory store backed by a vector index.
"""
