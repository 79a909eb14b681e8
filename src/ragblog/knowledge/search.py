"""Lexical search over the knowledge corpus.

Scoring is plain token overlap with fixed field weights:

=====================  ======
field                  weight
=====================  ======
title, question        3
subcategory, tags      2
content, answer        1
metadata values        1
=====================  ======

Each distinct query token contributes the highest weight among the fields it
appears in; an entry's score is the sum over query tokens. Entries scoring zero
are dropped. Ties keep corpus order.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from ..foundation.errors import InvalidArgument, format_validation_error
from .corpus import ALL, Corpus, KnowledgeEntry, SearchCategory

_TOKEN_RE = re.compile(r"[a-z0-9]+")

FIELD_WEIGHTS: Mapping[str, int] = {
    "title": 3,
    "question": 3,
    "subcategory": 2,
    "tags": 2,
    "content": 1,
    "answer": 1,
    "metadata": 1,
}

DEFAULT_LIMIT = 5


def tokenize(text: str | None) -> frozenset[str]:
    """Lowercase alphanumeric word set."""
    return frozenset(_TOKEN_RE.findall(text.lower())) if text else frozenset()


def _field_tokens(entry: KnowledgeEntry) -> tuple[tuple[int, frozenset[str]], ...]:
    fields = {
        "title": tokenize(entry.title),
        "question": tokenize(entry.question),
        "subcategory": tokenize(entry.subcategory),
        "tags": tokenize(" ".join(entry.tags)),
        "content": tokenize(entry.content),
        "answer": tokenize(entry.answer),
        "metadata": tokenize(" ".join(entry.metadata.values())),
    }
    # Heaviest first so scoring can stop at the first containing field
    ordered = sorted(fields.items(), key=lambda kv: -FIELD_WEIGHTS[kv[0]])
    return tuple((FIELD_WEIGHTS[name], tokens) for name, tokens in ordered if tokens)


class SearchQuery(BaseModel):
    """Validated search request. `limit` below 1 is clamped to 1."""

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    query: str = Field(..., min_length=1)
    category: SearchCategory = ALL
    limit: int = DEFAULT_LIMIT

    @field_validator("limit", mode="after")
    @classmethod
    def _clamp_limit(cls, v: int) -> int:
        return max(1, v)


class SearchHit(BaseModel):
    """One ranked result."""

    model_config = ConfigDict(frozen=True)

    entry: KnowledgeEntry
    score: int = Field(..., gt=0)
    matched_category: str

    def to_dict(self) -> dict[str, Any]:
        return {**self.entry.to_dict(), "score": self.score, "matched_category": self.matched_category}


class LexicalSearchEngine:
    """Scores and ranks corpus entries against a free-text query.

    Token sets are computed once at construction; the corpus never changes
    afterwards, so a single engine can serve concurrent requests.
    """

    __slots__ = ("_corpus", "_index")

    def __init__(self, corpus: Corpus) -> None:
        self._corpus = corpus
        self._index = tuple((entry, _field_tokens(entry)) for entry in corpus.entries)

    @property
    def corpus(self) -> Corpus:
        return self._corpus

    @staticmethod
    def score(query_tokens: frozenset[str], fields: tuple[tuple[int, frozenset[str]], ...]) -> int:
        total = 0
        for token in query_tokens:
            for weight, tokens in fields:
                if token in tokens:
                    total += weight
                    break
        return total

    def search(self, query: str, category: str = ALL, limit: int = DEFAULT_LIMIT) -> list[SearchHit]:
        """Rank entries for `query`.

        Raises:
            InvalidArgument: empty/whitespace query or unknown category
        """
        try:
            request = SearchQuery(query=query, category=category, limit=limit)  # type: ignore[arg-type]
        except ValidationError as e:
            raise InvalidArgument(format_validation_error(e, tool_name="search"), "search") from e
        return self.run(request)

    def run(self, request: SearchQuery) -> list[SearchHit]:
        query_tokens = tokenize(request.query)
        scored = [
            (score, entry)
            for entry, fields in self._index
            if request.category in (ALL, entry.category)
            and (score := self.score(query_tokens, fields)) > 0
        ]
        # sorted() is stable: equal scores stay in corpus order
        ranked = sorted(scored, key=lambda pair: -pair[0])[: request.limit]
        return [SearchHit(entry=entry, score=score, matched_category=entry.category) for score, entry in ranked]
