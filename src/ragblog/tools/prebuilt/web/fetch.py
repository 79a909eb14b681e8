"""Outbound HTTP fetch.

Tools never talk to httpx directly; they take an `HttpFetcher`, so tests can
swap in a recording fake and the server can share one configured fetcher.

Example:
    >>> fetcher = HttpxFetcher(timeout=10.0)
    >>> resp = await fetcher.fetch("https://gamified.uk/")
    >>> resp.ok, resp.status
    (True, 200)
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable

import httpx

from ....foundation.errors import CollaboratorFailure, ErrorCode

logger = logging.getLogger("ragblog.fetch")

DEFAULT_USER_AGENT = "RAG-Blog-MCP-Server/1.0"


@dataclass(frozen=True, slots=True)
class FetchResponse:
    """Status and body of a completed request."""

    status: int
    reason: str
    body: str
    url: str = ""

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300

    def json(self) -> Any:
        """Decode the body as JSON.

        Raises:
            CollaboratorFailure: body is not valid JSON (PARSE_ERROR)
        """
        try:
            return json.loads(self.body)
        except json.JSONDecodeError as e:
            raise CollaboratorFailure(f"Invalid JSON response: {e}", code=ErrorCode.PARSE_ERROR) from e


@runtime_checkable
class HttpFetcher(Protocol):
    """Anything that can GET a URL asynchronously."""

    async def fetch(self, url: str, headers: Mapping[str, str] | None = None) -> FetchResponse: ...


class HttpxFetcher:
    """`HttpFetcher` backed by `httpx.AsyncClient`.

    Non-2xx statuses are returned, not raised; callers decide what a bad
    status means. Transport-level problems become `CollaboratorFailure`.
    """

    __slots__ = ("_timeout", "_follow_redirects", "_user_agent", "_transport")

    def __init__(
        self,
        timeout: float = 30.0,
        *,
        follow_redirects: bool = True,
        user_agent: str = DEFAULT_USER_AGENT,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._timeout = timeout
        self._follow_redirects = follow_redirects
        self._user_agent = user_agent
        self._transport = transport

    async def fetch(self, url: str, headers: Mapping[str, str] | None = None) -> FetchResponse:
        merged = {"User-Agent": self._user_agent, **(headers or {})}
        logger.debug(f"GET {url}")
        try:
            async with httpx.AsyncClient(
                follow_redirects=self._follow_redirects,
                timeout=self._timeout,
                transport=self._transport,
            ) as client:
                resp = await client.get(url, headers=merged)
        except httpx.TimeoutException as e:
            raise CollaboratorFailure(f"Request timed out after {self._timeout}s", code=ErrorCode.TIMEOUT) from e
        except httpx.HTTPError as e:
            raise CollaboratorFailure(f"Request failed: {e}", code=ErrorCode.NETWORK_ERROR) from e
        return FetchResponse(status=resp.status_code, reason=resp.reason_phrase, body=resp.text, url=str(resp.url))

    def __repr__(self) -> str:
        return f"HttpxFetcher(timeout={self._timeout}, user_agent={self._user_agent!r})"
