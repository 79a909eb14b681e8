"""Web tools: internet search, gamification-site search and page scraping.

All three report collaborator failures as result text rather than faults
(see `ToolMetadata.failure_prefix`). Bad arguments, including a scrape URL
outside the allow-list, are still raised as `InvalidArgument`.

Example:
    >>> fetcher = HttpxFetcher()
    >>> scrape = ScrapeGamifiedContentTool(fetcher)
    >>> await scrape.acall(url="https://gamified.uk/user-types/", extract_type="headings")
"""

from __future__ import annotations

import asyncio
import logging
from datetime import UTC, datetime
from typing import Any, ClassVar, Literal
from urllib.parse import urlparse

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..foundation.core import BaseTool, ConfigurableTool, ToolConfig, ToolMetadata
from ..foundation.errors import CollaboratorFailure
from .knowledge import dump
from .prebuilt.web import DEFAULT_USER_AGENT, CustomSearchClient, ExtractType, HtmlExtractor, HttpFetcher

logger = logging.getLogger("ragblog.tools.web")

GAMIFIED_DOMAINS: tuple[str, ...] = ("gamified.uk", "marczewski.me.uk")

DomainChoice = Literal["gamified.uk", "marczewski.me.uk", "both"]


# ─────────────────────────────────────────────────────────────────────────────
# search_internet
# ─────────────────────────────────────────────────────────────────────────────


class SearchInternetParams(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True, extra="forbid")

    query: str = Field(..., min_length=1, description="Search query")
    site: str | None = Field(
        default=None, description="Specific site to search (e.g., gamified.uk, marczewski.me.uk)",
    )


class SearchInternetTool(BaseTool[SearchInternetParams]):
    """General web search through the custom search API."""

    metadata: ClassVar[ToolMetadata] = ToolMetadata(
        name="search_internet",
        description="Search the internet for information using Google Custom Search",
        category="web",
        failure_prefix="Error searching internet",
    )
    params_schema: ClassVar[type[SearchInternetParams]] = SearchInternetParams

    def __init__(self, client: CustomSearchClient) -> None:
        self._client = client

    async def _async_run(self, params: SearchInternetParams) -> str:
        return dump(await self._client.search(params.query, params.site or None))


# ─────────────────────────────────────────────────────────────────────────────
# search_gamified_sites
# ─────────────────────────────────────────────────────────────────────────────


class SearchGamifiedSitesParams(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True, extra="forbid")

    query: str = Field(..., min_length=1, description="Search query for gamification content")
    domain: DomainChoice = Field(default="both", description="Which domain to search (default: both)")


class SearchGamifiedSitesTool(BaseTool[SearchGamifiedSitesParams]):
    """Site-restricted search over the gamification domains.

    Domains are searched concurrently. A failure on one domain is recorded in
    that domain's entry and does not hide results from the other.
    """

    metadata: ClassVar[ToolMetadata] = ToolMetadata(
        name="search_gamified_sites",
        description="Search specifically on gamified.uk and marczewski.me.uk domains",
        category="web",
        failure_prefix="Error searching gamified sites",
    )
    params_schema: ClassVar[type[SearchGamifiedSitesParams]] = SearchGamifiedSitesParams

    def __init__(self, client: CustomSearchClient) -> None:
        self._client = client

    async def _search_domain(self, query: str, domain: str) -> dict[str, Any]:
        try:
            found = await self._client.search(query, domain)
        except Exception as e:
            logger.warning(f"[{self.metadata.name}] {domain}: {e}")
            return {"domain": domain, "error": f"Failed to search {domain}: {e}"}
        return {"domain": domain, "results": found["results"], "total_results": found["total_results"]}

    async def _async_run(self, params: SearchGamifiedSitesParams) -> str:
        domains = list(GAMIFIED_DOMAINS) if params.domain == "both" else [params.domain]
        results = await asyncio.gather(*(self._search_domain(params.query, d) for d in domains))
        return dump({"query": params.query, "domains_searched": domains, "results": list(results)})


# ─────────────────────────────────────────────────────────────────────────────
# scrape_gamified_content
# ─────────────────────────────────────────────────────────────────────────────


class ScrapeConfig(ToolConfig):
    """Configuration for ScrapeGamifiedContentTool.

    Attributes:
        allowed_domains: Exact hostnames that may be fetched
        user_agent: User-Agent header sent with every request
        max_text_length: Extracted text is cut to this many characters
        max_links: At most this many links are returned
    """

    allowed_domains: frozenset[str] = Field(default=frozenset(GAMIFIED_DOMAINS))
    user_agent: str = Field(default=DEFAULT_USER_AGENT)
    max_text_length: int = Field(default=2000, ge=1)
    max_links: int = Field(default=10, ge=1)

    @field_validator("allowed_domains", mode="before")
    @classmethod
    def _normalize_domains(cls, v: frozenset[str] | set[str] | list[str] | tuple[str, ...]) -> frozenset[str]:
        return frozenset(d.lower() for d in v)


class ScrapeParams(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True, extra="forbid")

    url: str = Field(..., min_length=1, description="URL to scrape content from")
    extract_type: ExtractType = Field(default="text", description="Type of content to extract (default: text)")


class ScrapeGamifiedContentTool(ConfigurableTool[ScrapeParams, ScrapeConfig]):
    """Fetch a page from an allow-listed domain and extract its content."""

    metadata: ClassVar[ToolMetadata] = ToolMetadata(
        name="scrape_gamified_content",
        description="Scrape content from gamified.uk or marczewski.me.uk pages",
        category="web",
        failure_prefix="Error scraping content",
    )
    params_schema: ClassVar[type[ScrapeParams]] = ScrapeParams
    config_class: ClassVar[type[ScrapeConfig]] = ScrapeConfig

    def __init__(self, fetcher: HttpFetcher, config: ScrapeConfig | None = None) -> None:
        super().__init__(config)
        self._fetcher = fetcher
        self._extractor = HtmlExtractor(self.config.max_text_length, self.config.max_links)

    def _check_url(self, url: str) -> None:
        """Raise InvalidArgument unless `url` is http(s) on an allowed host."""
        try:
            parsed = urlparse(url)
            host = (parsed.hostname or "").lower()
        except ValueError as e:
            raise self._invalid(f"Invalid URL: {e}") from e
        if parsed.scheme not in ("http", "https"):
            raise self._invalid(f"Invalid URL scheme '{parsed.scheme}'. Use http or https.")
        if host not in self.config.allowed_domains:
            allowed = ", ".join(sorted(self.config.allowed_domains))
            raise self._invalid(f"URL must be from one of: {allowed} (got '{host or url}')")

    async def _async_run(self, params: ScrapeParams) -> str:
        self._check_url(params.url)
        resp = await self._fetcher.fetch(params.url, {"User-Agent": self.config.user_agent})
        if not resp.ok:
            raise CollaboratorFailure(f"HTTP {resp.status}: {resp.reason}", self.metadata.name)
        return dump({
            "url": params.url,
            "extract_type": params.extract_type,
            "content": self._extractor.extract(resp.body, params.extract_type),
            "scraped_at": datetime.now(UTC).isoformat().replace("+00:00", "Z"),
        })
