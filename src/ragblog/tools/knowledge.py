"""Tools over the embedded knowledge base.

Both tools are pure reads of the in-memory corpus and never touch the network.
Results are JSON documents so an LLM can quote individual fields.
"""

from __future__ import annotations

import json
from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, Field

from ..foundation.core import BaseTool, ToolMetadata
from ..knowledge import ALL, LexicalSearchEngine, SearchCategory, SearchQuery, StyleRetrieval

DATA_SOURCE = "embedded_rag_data"


def dump(payload: dict[str, Any]) -> str:
    return json.dumps(payload, indent=2, ensure_ascii=False)


class SearchKnowledgeParams(BaseModel):
    """Parameters for knowledge base search."""

    model_config = ConfigDict(str_strip_whitespace=True, extra="forbid")

    query: str = Field(..., min_length=1, description="Search query to find relevant information")
    category: SearchCategory = Field(default=ALL, description="Category to search in (default: all)")
    limit: int = Field(default=5, description="Maximum number of results to return (default: 5)")


class SearchKnowledgeTool(BaseTool[SearchKnowledgeParams]):
    """Ranked lexical search over training data, style guides, Q&A pairs and documents."""

    metadata: ClassVar[ToolMetadata] = ToolMetadata(
        name="search_rag_knowledge",
        description=(
            "Search through the RAG knowledge base including training data, "
            "style guides, Q&A pairs, and documents"
        ),
        category="knowledge",
    )
    params_schema: ClassVar[type[SearchKnowledgeParams]] = SearchKnowledgeParams

    def __init__(self, engine: LexicalSearchEngine) -> None:
        self._engine = engine

    def _run(self, params: SearchKnowledgeParams) -> str:
        hits = self._engine.run(SearchQuery(query=params.query, category=params.category, limit=params.limit))
        return dump({
            "query": params.query,
            "category": params.category,
            "results": [hit.to_dict() for hit in hits],
            "total_found": len(hits),
            "data_source": DATA_SOURCE,
        })

    async def _async_run(self, params: SearchKnowledgeParams) -> str:
        # In-memory and fast; no need for a worker thread
        return self._run(params)


class WritingStyleParams(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True, extra="forbid")

    category: str | None = Field(default=None, description="Specific style category to retrieve")


class WritingStyleTool(BaseTool[WritingStyleParams]):
    """Writing style and persona guidelines, optionally narrowed to one label."""

    metadata: ClassVar[ToolMetadata] = ToolMetadata(
        name="get_writing_style",
        description="Get writing style and persona information for blog content creation",
        category="knowledge",
    )
    params_schema: ClassVar[type[WritingStyleParams]] = WritingStyleParams

    def __init__(self, styles: StyleRetrieval) -> None:
        self._styles = styles

    def _run(self, params: WritingStyleParams) -> str:
        guidelines = self._styles.get_writing_style(params.category)
        return dump({
            "category": params.category or ALL,
            "style_guidelines": [entry.to_dict() for entry in guidelines],
            "total_guidelines": len(guidelines),
            "data_source": DATA_SOURCE,
        })

    async def _async_run(self, params: WritingStyleParams) -> str:
        return self._run(params)
