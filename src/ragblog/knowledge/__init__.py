"""Embedded knowledge base: corpus store, lexical search and style retrieval."""

from .corpus import ALL, CATEGORIES, Category, Corpus, KnowledgeEntry, SearchCategory, load_corpus
from .search import FIELD_WEIGHTS, LexicalSearchEngine, SearchHit, SearchQuery, tokenize
from .style import StyleRetrieval

__all__ = [
    "Corpus", "KnowledgeEntry", "Category", "SearchCategory", "CATEGORIES", "ALL", "load_corpus",
    "LexicalSearchEngine", "SearchQuery", "SearchHit", "FIELD_WEIGHTS", "tokenize",
    "StyleRetrieval",
]
