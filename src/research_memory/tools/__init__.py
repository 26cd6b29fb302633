from .paper_tools import (
    SetResearchPaperTool,
    GetResearchPaperTool,
    format_resolution,
)
from .memory_tools import (
    AddToMemoryTool,
    SearchMemoryTool,
    GetMemoryTool,
    format_search_results,
)

__all__ = [
    "SetResearchPaperTool",
    "GetResearchPaperTool",
    "format_resolution",
    "AddToMemoryTool",
    "SearchMemoryTool",
    "GetMemoryTool",
    "format_search_results",
]
