"""The server's tool catalog.

Quick Start:
    >>> from ragblog.tools import build_registry
    >>> registry = build_registry()
    >>> registry.names
    ['search_rag_knowledge', 'search_internet', 'search_gamified_sites', 'get_writing_style', 'scrape_gamified_content']

Individual Tools:
    >>> from ragblog.tools import ScrapeGamifiedContentTool, ScrapeConfig
    >>> scrape = ScrapeGamifiedContentTool(fetcher, ScrapeConfig(max_links=5))
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..foundation.config import RagBlogSettings, get_settings
from ..foundation.registry import ToolRegistry
from ..knowledge import Corpus, LexicalSearchEngine, StyleRetrieval, load_corpus
from .knowledge import SearchKnowledgeParams, SearchKnowledgeTool, WritingStyleParams, WritingStyleTool
from .prebuilt.web import CustomSearchClient, HttpFetcher, HttpxFetcher
from .web import (
    GAMIFIED_DOMAINS,
    ScrapeConfig,
    ScrapeGamifiedContentTool,
    ScrapeParams,
    SearchGamifiedSitesParams,
    SearchGamifiedSitesTool,
    SearchInternetParams,
    SearchInternetTool,
)

if TYPE_CHECKING:
    from pydantic import BaseModel

    from ..foundation.core import BaseTool


def standard_tools(corpus: Corpus, fetcher: HttpFetcher, *, user_agent: str | None = None) -> list[BaseTool[BaseModel]]:
    """The five catalog tools, in published order."""
    client = CustomSearchClient(fetcher)
    scrape_config = ScrapeConfig(user_agent=user_agent) if user_agent else None
    return [
        SearchKnowledgeTool(LexicalSearchEngine(corpus)),
        SearchInternetTool(client),
        SearchGamifiedSitesTool(client),
        WritingStyleTool(StyleRetrieval(corpus)),
        ScrapeGamifiedContentTool(fetcher, scrape_config),
    ]


def build_registry(
    corpus: Corpus | None = None,
    fetcher: HttpFetcher | None = None,
    settings: RagBlogSettings | None = None,
) -> ToolRegistry:
    """Build and freeze the registry the server exposes.

    Missing pieces come from settings: the corpus from `corpus_path` (or the
    packaged copy), the fetcher from the `http` section.
    """
    settings = settings or get_settings()
    if corpus is None:
        corpus = load_corpus(settings.corpus_path)
    if fetcher is None:
        fetcher = HttpxFetcher(
            settings.http.timeout,
            follow_redirects=settings.http.follow_redirects,
            user_agent=settings.http.user_agent,
        )
    registry = ToolRegistry()
    registry.register_all(*standard_tools(corpus, fetcher, user_agent=settings.http.user_agent))
    return registry.freeze()


__all__ = [
    "standard_tools", "build_registry", "GAMIFIED_DOMAINS",
    "SearchKnowledgeTool", "SearchKnowledgeParams", "WritingStyleTool", "WritingStyleParams",
    "SearchInternetTool", "SearchInternetParams", "SearchGamifiedSitesTool", "SearchGamifiedSitesParams",
    "ScrapeGamifiedContentTool", "ScrapeParams", "ScrapeConfig",
]
