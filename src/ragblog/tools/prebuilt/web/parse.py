"""HTML extraction for scraped pages.

Pulls three kinds of content out of a document with BeautifulSoup:
- text: visible text with scripts and styles removed, whitespace collapsed
- headings: h1-h6 text in document order
- links: anchors with an href and non-empty text
"""

from __future__ import annotations

import re
from typing import Any, Literal

from bs4 import BeautifulSoup

ExtractType = Literal["text", "links", "headings", "all"]

_WS_RE = re.compile(r"\s+")
_HEADINGS = ["h1", "h2", "h3", "h4", "h5", "h6"]


class HtmlExtractor:
    """Extract text, headings and links from an HTML document.

    Example:
        >>> HtmlExtractor().extract("<h1>Hexad</h1><p>Six types</p>", "all")
        {'text': 'Hexad Six types', 'headings': ['Hexad'], 'links': []}
    """

    __slots__ = ("max_text_length", "max_links")

    def __init__(self, max_text_length: int = 2000, max_links: int = 10) -> None:
        self.max_text_length = max_text_length
        self.max_links = max_links

    def text(self, soup: BeautifulSoup) -> str:
        for tag in soup(["script", "style"]):
            tag.decompose()
        return _WS_RE.sub(" ", soup.get_text(separator=" ")).strip()[: self.max_text_length]

    def headings(self, soup: BeautifulSoup) -> list[str]:
        return [text for h in soup.find_all(_HEADINGS) if (text := h.get_text(strip=True))]

    def links(self, soup: BeautifulSoup) -> list[dict[str, str]]:
        found: list[dict[str, str]] = []
        for a in soup.find_all("a", href=True):
            if text := a.get_text(strip=True):
                found.append({"url": a["href"], "text": text})
                if len(found) >= self.max_links:
                    break
        return found

    def extract(self, html: str, extract_type: ExtractType = "text") -> dict[str, Any]:
        """Return only the sections `extract_type` asks for."""
        soup = BeautifulSoup(html, "html.parser")
        content: dict[str, Any] = {}
        # Headings and links first: text() decomposes script/style in place
        if extract_type in ("headings", "all"):
            content["headings"] = self.headings(soup)
        if extract_type in ("links", "all"):
            content["links"] = self.links(soup)
        if extract_type in ("text", "all"):
            content["text"] = self.text(soup)
        return {k: content[k] for k in ("text", "headings", "links") if k in content}
