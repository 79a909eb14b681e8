"""ragblog - a knowledge-base and web-research tool server for blog writing agents.

Exposes five tools over an MCP-style HTTP contract:

- search_rag_knowledge: ranked lexical search over the embedded corpus
- get_writing_style: style and persona guidelines
- search_internet / search_gamified_sites: web search via a custom search API
- scrape_gamified_content: text, headings and links from allow-listed sites

Quick Start:
    >>> from ragblog import build_registry, Dispatcher, ToolCallEnvelope
    >>> dispatcher = Dispatcher(build_registry())
    >>> result = await dispatcher.invoke(
    ...     ToolCallEnvelope(name="search_rag_knowledge", arguments={"query": "hexad"})
    ... )
"""

__version__ = "1.0.0"

from .ext.mcp import Dispatcher, HTTPToolServer, ToolCallEnvelope, ToolResultEnvelope, create_http_app, serve_http
from .foundation import (
    BaseTool,
    CollaboratorFailure,
    DispatchFault,
    InternalError,
    InvalidArgument,
    InvalidParams,
    MethodNotFound,
    ToolMetadata,
    ToolRegistry,
    get_settings,
)
from .knowledge import Corpus, KnowledgeEntry, LexicalSearchEngine, StyleRetrieval, load_corpus
from .tools import build_registry, standard_tools

__all__ = [
    "__version__",
    "Corpus", "KnowledgeEntry", "load_corpus", "LexicalSearchEngine", "StyleRetrieval",
    "BaseTool", "ToolMetadata", "ToolRegistry", "build_registry", "standard_tools",
    "Dispatcher", "ToolCallEnvelope", "ToolResultEnvelope", "HTTPToolServer", "create_http_app", "serve_http",
    "InvalidArgument", "CollaboratorFailure", "DispatchFault", "MethodNotFound", "InvalidParams", "InternalError",
    "get_settings",
]
