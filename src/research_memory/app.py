"""
Public application facade for Research Memory Service.

This is the single stable entry point for the library.
It owns the long-lived store handle: opened once in initialize(), released in close().
"""
import logging
from typing import Any, Dict, List, Optional

from langchain_core.tools import BaseTool

from .config import ResearchMemoryConfig
from .embedding_factory import create_embedding_model
from .exceptions import ServiceNotInitializedError
from .memory import SemanticMemoryService
from .resolution import create_title_resolver
from .service import ResearchPaperService
from .storage import KeyValueStore, RedisKeyValueStore, VectorIndex, FaissVectorIndex
from .tools import (
    SetResearchPaperTool,
    GetResearchPaperTool,
    AddToMemoryTool,
    SearchMemoryTool,
    GetMemoryTool,
)


logger = logging.getLogger(__name__)


class ResearchMemoryApp:
    """
    Public application facade for Research Memory Service.

    All dependency wiring and factory usage is encapsulated here.

    Usage:
        config = load_config_from_env()
        with ResearchMemoryApp(config) as app:
            text = app.call_tool("get-research-paper", {"title": "Deep Leaning"})
    """

    def __init__(
        self,
        config: ResearchMemoryConfig,
        store: Optional[KeyValueStore] = None,
        vector_index: Optional[VectorIndex] = None,
    ):
        """
        :param config: ResearchMemoryConfig instance
        :param store: Pre-built store; a Redis store is created from config when None
        :param vector_index: Pre-built vector index; a FAISS index is created from config when None
        """
        self._config = config
        self._store = store
        self._vector_index = vector_index
        self._paper_service: Optional[ResearchPaperService] = None
        self._memory_service: Optional[SemanticMemoryService] = None
        self._tools: Dict[str, BaseTool] = {}

    @property
    def config(self) -> ResearchMemoryConfig:
        return self._config

    def initialize(self) -> None:
        """
        Open the store, build services and register tools.

        Call this once at startup; repeated calls are no-ops.
        """
        if self._paper_service:
            return

        if self._store is None:
            self._store = RedisKeyValueStore.from_url(
                self._config.redis_url,
                scan_count=self._config.scan_batch_size,
            )
            if self._store.ping():
                logger.info("Connected to key-value store")
            else:
                logger.warning("Key-value store is not reachable yet; requests will fail until it is")

        resolver = create_title_resolver(store=self._store, config=self._config)
        self._paper_service = ResearchPaperService(self._store, resolver)
        self._register(SetResearchPaperTool(service=self._paper_service))
        self._register(GetResearchPaperTool(service=self._paper_service))

        if self._config.enable_memory:
            if self._vector_index is None:
                self._vector_index = self._build_vector_index()

            self._memory_service = SemanticMemoryService(
                self._vector_index,
                default_top_k=self._config.default_top_k,
            )
            self._register(AddToMemoryTool(memory=self._memory_service))
            self._register(SearchMemoryTool(memory=self._memory_service))
            self._register(GetMemoryTool(memory=self._memory_service))

        logger.info(f"Research memory service initialized with tools: {', '.join(self._tools)}")

    def close(self) -> None:
        """Persist the vector index (if configured) and release the store."""
        if isinstance(self._vector_index, FaissVectorIndex):
            self._vector_index.save()

        if self._store is not None:
            self._store.close()

        self._paper_service = None
        self._memory_service = None
        self._tools = {}

    def __enter__(self) -> "ResearchMemoryApp":
        self.initialize()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    @property
    def papers(self) -> ResearchPaperService:
        if not self._paper_service:
            raise ServiceNotInitializedError("App not initialized. Call initialize() first.")
        return self._paper_service

    @property
    def memory(self) -> SemanticMemoryService:
        if not self._memory_service:
            raise ServiceNotInitializedError(
                "Semantic memory is not available. Call initialize() with enable_memory=True."
            )
        return self._memory_service

    @property
    def tools(self) -> List[BaseTool]:
        return list(self._tools.values())

    def get_tool(self, name: str) -> Optional[BaseTool]:
        return self._tools.get(name)

    def call_tool(self, name: str, arguments: Dict[str, Any]) -> str:
        """
        Invoke a registered tool by name.

        :raises ServiceNotInitializedError: If initialize() has not been called
        :raises KeyError: If no tool is registered under name
        """
        if not self._paper_service:
            raise ServiceNotInitializedError("App not initialized. Call initialize() first.")

        tool = self._tools.get(name)
        if tool is None:
            raise KeyError(name)

        return tool.invoke(arguments)

    def is_healthy(self) -> bool:
        return self._store is not None and self._store.ping()

    def _register(self, tool: BaseTool) -> None:
        self._tools[tool.name] = tool

    def _build_vector_index(self) -> FaissVectorIndex:
        embedding_model = create_embedding_model(
            provider=self._config.embedding_provider,
            model=self._config.embedding_model,
        )
        index = FaissVectorIndex(
            embedding_model=embedding_model,
            index_path=self._config.vector_store_path,
        )
        index.load_if_exists()
        return index
