"""Test doubles and sample data."""

from __future__ import annotations

import json
from collections.abc import Callable, Mapping

from ragblog.tools.prebuilt.web import FetchResponse

CATALOG = [
    "search_rag_knowledge",
    "search_internet",
    "search_gamified_sites",
    "get_writing_style",
    "scrape_gamified_content",
]

CORPUS_DATA: dict[str, object] = {
    "metadata": {"version": "test", "totalItems": 7},
    "training": [
        {"id": "t-hexad", "title": "Hexad user types", "content": "Six user types for gamified systems",
         "tags": ["motivation"]},
        {"id": "t-ramp", "title": "RAMP model", "content": "Relatedness, autonomy, mastery and purpose. Hexad types map onto it.",
         "tags": ["motivation"]},
    ],
    "style": [
        {"id": "s-tone", "subcategory": "tone", "title": "Friendly voice", "content": "Write like a peer",
         "tags": ["persona"]},
        {"id": "s-structure", "subcategory": "structure", "title": "Short sections", "content": "Use headings",
         "tags": ["layout"]},
    ],
    "qa": [
        {"id": "q-what", "question": "What is gamification?",
         "answer": "Using game design elements in non-game contexts."},
    ],
    "documents": [
        {"id": "d-guide", "title": "Framework guide", "content": "Design process for gamification projects",
         "metadata": {"source": "gamified.uk"}},
        {"id": "d-ethics", "title": "Ethics", "content": "Avoid dark patterns"},
    ],
}

SEARCH_PAYLOAD: dict[str, object] = {
    "searchInformation": {"totalResults": "1234"},
    "items": [
        {"title": f"Result {i}", "link": f"https://gamified.uk/post-{i}", "snippet": f"Snippet {i}", "kind": "x"}
        for i in range(7)
    ],
}

PAGE_HTML = """
<html>
  <head><title>User types</title><style>.hidden { display: none; }</style></head>
  <body>
    <script>var tracking = "secret";</script>
    <h1>User Types</h1>
    <h2>Hexad</h2>
    <h3></h3>
    <p>Six    types
       of users.</p>
    <a href="/achievers">Achievers</a>
    <a href="/empty"></a>
    <a>No href</a>
    {links}
  </body>
</html>
""".replace("{links}", "\n".join(f'<a href="/more-{i}">More {i}</a>' for i in range(15)))


def ok_json(payload: object) -> FetchResponse:
    return FetchResponse(status=200, reason="OK", body=json.dumps(payload))


class FakeFetcher:
    """Records every request and answers from a handler (or a fixed response)."""

    def __init__(
        self,
        response: FetchResponse | None = None,
        handler: Callable[[str], FetchResponse] | None = None,
        error: Exception | None = None,
    ) -> None:
        self.response = response or ok_json(SEARCH_PAYLOAD)
        self.handler = handler
        self.error = error
        self.calls: list[tuple[str, dict[str, str]]] = []

    async def fetch(self, url: str, headers: Mapping[str, str] | None = None) -> FetchResponse:
        self.calls.append((url, dict(headers or {})))
        if self.error is not None:
            raise self.error
        return self.handler(url) if self.handler else self.response

    @property
    def urls(self) -> list[str]:
        return [url for url, _ in self.calls]
