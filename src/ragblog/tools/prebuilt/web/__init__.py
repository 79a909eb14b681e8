"""Web collaborators: HTTP fetch, HTML extraction and the custom search client."""

from .fetch import DEFAULT_USER_AGENT, FetchResponse, HttpFetcher, HttpxFetcher
from .parse import ExtractType, HtmlExtractor
from .search import CUSTOM_SEARCH_ENDPOINT, CustomSearchClient

__all__ = [
    "HttpFetcher", "HttpxFetcher", "FetchResponse", "DEFAULT_USER_AGENT",
    "HtmlExtractor", "ExtractType",
    "CustomSearchClient", "CUSTOM_SEARCH_ENDPOINT",
]
