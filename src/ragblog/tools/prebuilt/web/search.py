"""Google Custom Search JSON API client.

Credentials come from `SEARCH_API_KEY` and `CUSTOM_SEARCH_ENGINE_ID` and are
read on every call, so a server started without them still serves every other
tool and picks them up once they are exported.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any
from urllib.parse import urlencode

from ....foundation.config import SearchCredentials
from ....foundation.errors import CollaboratorFailure, ErrorCode
from .fetch import HttpFetcher

logger = logging.getLogger("ragblog.search")

CUSTOM_SEARCH_ENDPOINT = "https://www.googleapis.com/customsearch/v1"
MAX_RESULTS = 5


class CustomSearchClient:
    """Runs a web search and returns `{query, results, total_results}`.

    Each result is `{title, link, snippet}`; at most five are kept.
    """

    __slots__ = ("_fetcher", "_credentials", "_endpoint")

    def __init__(
        self,
        fetcher: HttpFetcher,
        credentials_factory: Callable[[], SearchCredentials] = SearchCredentials,
        endpoint: str = CUSTOM_SEARCH_ENDPOINT,
    ) -> None:
        self._fetcher = fetcher
        self._credentials = credentials_factory
        self._endpoint = endpoint

    @staticmethod
    def effective_query(query: str, site: str | None = None) -> str:
        return f"site:{site} {query}" if site else query

    async def search(self, query: str, site: str | None = None) -> dict[str, Any]:
        """Query the search API.

        Raises:
            CollaboratorFailure: credentials missing, non-2xx status or a body
                that is not JSON
        """
        creds = self._credentials()
        if not creds.configured:
            raise CollaboratorFailure(
                "Search API credentials not configured (set SEARCH_API_KEY and CUSTOM_SEARCH_ENGINE_ID)",
                code=ErrorCode.API_KEY_MISSING,
            )

        q = self.effective_query(query, site)
        url = f"{self._endpoint}?" + urlencode({
            "key": creds.search_api_key.get_secret_value(),  # type: ignore[union-attr]
            "cx": creds.custom_search_engine_id,
            "q": q,
        })
        logger.debug(f"Custom search q={q!r}")
        resp = await self._fetcher.fetch(url)
        data = resp.json()

        if not resp.ok:
            message = (data.get("error") or {}).get("message") if isinstance(data, dict) else None
            raise CollaboratorFailure(f"Search API error: {message or 'Unknown error'}")
        if not isinstance(data, dict):
            raise CollaboratorFailure("Search API returned an unexpected payload", code=ErrorCode.PARSE_ERROR)

        raw_total = (data.get("searchInformation") or {}).get("totalResults") or 0
        try:
            total = int(raw_total)
        except (TypeError, ValueError) as e:
            raise CollaboratorFailure(
                f"Search API returned a non-numeric totalResults: {raw_total!r}", code=ErrorCode.PARSE_ERROR,
            ) from e

        items = data.get("items") or []
        return {
            "query": q,
            "results": [
                {"title": item.get("title"), "link": item.get("link"), "snippet": item.get("snippet")}
                for item in items[:MAX_RESULTS]
            ],
            "total_results": total,
        }
