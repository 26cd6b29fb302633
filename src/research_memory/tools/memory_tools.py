from typing import Any, List
from pydantic import BaseModel, Field
from langchain_core.tools import BaseTool

from ..memory import SemanticMemoryService
from ..schemas import ScoredRecord
from ..security import InputValidator


class AddToMemoryArgs(BaseModel):
    id: str = Field(description="Unique identifier for the memory")
    content: str = Field(description="The memory content to store")
    metadata: Any = Field(default=None, description="Additional metadata for the memory")


class SearchMemoryArgs(BaseModel):
    query: str = Field(description="Search query text")
    top_k: Any = Field(
        default=None,
        description="Number of results to return (default: 5)",
    )


class GetMemoryArgs(BaseModel):
    id: str = Field(description="Memory ID to retrieve")


def format_search_results(results: List[ScoredRecord]) -> str:
    """Render ranked memories as the text returned to callers."""
    if not results:
        return "No memories found matching your query"

    lines = [f"Found {len(results)} memories:\n"]
    for i, record in enumerate(results, start=1):
        lines.append(f"{i}. ID: {record.id}, Score: {record.score:.4f}, Content: {record.data}\n")
    return "".join(lines)


class _BaseMemoryTool(BaseTool):
    """Shared wiring for semantic memory tools."""

    memory: Any = Field(default=None)

    def __init__(self, memory: SemanticMemoryService, **kwargs):
        super().__init__(**kwargs)
        self.memory = memory

    async def _arun(self, *args, **kwargs) -> str:
        return self._run(*args, **kwargs)


class AddToMemoryTool(_BaseMemoryTool):
    name: str = "add-to-memory"
    description: str = "Add a new memory or update an existing memory"
    args_schema: type[BaseModel] = AddToMemoryArgs

    def _run(self, id: str, content: str, metadata: Any = None) -> str:
        memory_id = InputValidator.validate_key(id, "id")
        self.memory.add_memory(memory_id, content, InputValidator.optional_text(metadata) or None)
        return f"Successfully stored memory with ID: {memory_id}"


class SearchMemoryTool(_BaseMemoryTool):
    name: str = "search-memory"
    description: str = "Search for memories using semantic similarity"
    args_schema: type[BaseModel] = SearchMemoryArgs

    def _run(self, query: str, top_k: Any = None) -> str:
        top_k = InputValidator.parse_top_k(top_k, default=self.memory.default_top_k)
        return format_search_results(self.memory.search_memory(query, top_k=top_k))


class GetMemoryTool(_BaseMemoryTool):
    name: str = "get-memory"
    description: str = "Get a specific memory by ID"
    args_schema: type[BaseModel] = GetMemoryArgs

    def _run(self, id: str) -> str:
        memory_id = InputValidator.validate_key(id, "id")
        record = self.memory.get_memory(memory_id)

        if record is None:
            return f"Memory with ID '{memory_id}' not found"

        return f"Memory ID: {record.id}\nContent: {record.data}"
