"""Writing-style guideline lookup over the "style" slice of the corpus."""

from __future__ import annotations

from .corpus import Corpus, KnowledgeEntry


class StyleRetrieval:
    __slots__ = ("_entries",)

    def __init__(self, corpus: Corpus) -> None:
        self._entries = corpus.by_category("style")

    def get_writing_style(self, category: str | None = None) -> list[KnowledgeEntry]:
        """All style guidelines, or those whose subcategory/tag equals `category` (case-insensitive).

        An unknown category yields an empty list.
        """
        if category is None or not category.strip():
            return list(self._entries)
        return [e for e in self._entries if e.has_label(category)]
