"""
Factory for creating title resolvers from configuration.
"""
from typing import Optional

from .paper_title_resolver import PaperTitleResolver
from ..config import ResearchMemoryConfig
from ..storage.kv_store import KeyValueStore


def create_title_resolver(
    store: KeyValueStore,
    config: Optional[ResearchMemoryConfig] = None,
) -> PaperTitleResolver:
    """
    Factory function to create a PaperTitleResolver.

    :param store: Store holding paper titles
    :param config: ResearchMemoryConfig instance; defaults apply when None
    :return: PaperTitleResolver bound to store
    """
    config = config or ResearchMemoryConfig()

    return PaperTitleResolver(
        store=store,
        max_distance=config.max_edit_distance,
    )
