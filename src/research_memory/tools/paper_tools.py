from typing import Any
from pydantic import BaseModel, Field
from langchain_core.tools import BaseTool

from ..resolution import ResolutionResult
from ..service import ResearchPaperService


class SetResearchPaperArgs(BaseModel):
    title: str = Field(description="The name of the paper")
    summarization: Any = Field(default=None, description="The main content of the paper")


class GetResearchPaperArgs(BaseModel):
    title: str = Field(description="The name of the paper")


def format_resolution(result: ResolutionResult) -> str:
    """Render a resolution result as the text returned to callers."""
    if result.strategy_used == "exact":
        return f"Found exact match for '{result.original_query}': {result.value}"
    if result.strategy_used == "fuzzy":
        return f"Found closest match '{result.key}' (distance: {result.distance}): {result.value}"
    return f"No research paper found matching '{result.original_query}'"


class _BasePaperTool(BaseTool):
    """Shared wiring for research paper tools."""

    # Pydantic v2 requires declared fields for assignment
    service: Any = Field(default=None)

    def __init__(self, service: ResearchPaperService, **kwargs):
        super().__init__(**kwargs)
        self.service = service

    async def _arun(self, *args, **kwargs) -> str:
        return self._run(*args, **kwargs)


class SetResearchPaperTool(_BasePaperTool):
    name: str = "set-new-research-paper"
    description: str = "Add a new research paper"
    args_schema: type[BaseModel] = SetResearchPaperArgs

    def _run(self, title: str, summarization: Any = None) -> str:
        self.service.set_paper(title, summarization)
        return "Successful update of the knowledge base"


class GetResearchPaperTool(_BasePaperTool):
    name: str = "get-research-paper"
    description: str = (
        "Get the content of a research paper based on its name. "
        "Falls back to the closest title within a few typos when there is no exact match."
    )
    args_schema: type[BaseModel] = GetResearchPaperArgs

    def _run(self, title: str) -> str:
        return format_resolution(self.service.get_paper(title))
