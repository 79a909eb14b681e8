"""Read-only knowledge corpus.

The corpus is loaded once per process from a JSON document shaped like::

    {
      "metadata": {"version": "2024.06", "generatedAt": "...", "totalItems": 17},
      "training":  [{"title": ..., "content": ...}, ...],
      "style":     [{"subcategory": "tone", "title": ..., "content": ...}, ...],
      "qa":        [{"question": ..., "answer": ...}, ...],
      "documents": [{"title": ..., "content": ..., "metadata": {"source": ...}}, ...]
    }

Entries take their category from the section they are listed under.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from datetime import UTC, datetime
from importlib import resources
from pathlib import Path
from typing import Any, Literal, Self, get_args

from pydantic import BaseModel, ConfigDict, Field, computed_field, model_validator

logger = logging.getLogger("ragblog.knowledge")

Category = Literal["training", "style", "qa", "documents"]
SearchCategory = Literal["training", "style", "qa", "documents", "all"]

CATEGORIES: tuple[Category, ...] = get_args(Category)
ALL = "all"

DEFAULT_CORPUS = "corpus.json"


class KnowledgeEntry(BaseModel):
    """One unit of retrievable content.

    Which text fields are populated depends on the category: Q&A pairs carry
    `question`/`answer`, everything else carries `content` and usually a `title`.
    """

    model_config = ConfigDict(frozen=True, extra="ignore", str_strip_whitespace=True)

    id: str = Field(..., min_length=1)
    category: Category
    title: str | None = None
    content: str | None = None
    question: str | None = None
    answer: str | None = None
    subcategory: str | None = None
    tags: tuple[str, ...] = ()
    metadata: dict[str, str] = Field(default_factory=dict)

    @model_validator(mode="after")
    def _check_payload(self) -> Self:
        if self.category == "qa":
            if not (self.question and self.answer):
                raise ValueError(f"qa entry '{self.id}' needs both question and answer")
        elif not self.content:
            raise ValueError(f"{self.category} entry '{self.id}' has no content")
        return self

    def has_label(self, label: str) -> bool:
        """Case-insensitive exact match against subcategory or any tag."""
        wanted = label.strip().casefold()
        if self.subcategory and self.subcategory.casefold() == wanted:
            return True
        return any(tag.casefold() == wanted for tag in self.tags)

    def to_dict(self) -> dict[str, Any]:
        """JSON-ready payload without empty fields."""
        data = self.model_dump(mode="json", exclude_none=True)
        if not data.get("tags"):
            data.pop("tags", None)
        if not data.get("metadata"):
            data.pop("metadata", None)
        return data


class Corpus(BaseModel):
    """Ordered, immutable collection of knowledge entries."""

    model_config = ConfigDict(frozen=True)

    entries: tuple[KnowledgeEntry, ...]
    version: str = "unversioned"
    loaded_at: datetime = Field(default_factory=lambda: datetime.now(UTC))

    @model_validator(mode="after")
    def _unique_ids(self) -> Self:
        seen: set[str] = set()
        for entry in self.entries:
            if entry.id in seen:
                raise ValueError(f"duplicate entry id '{entry.id}'")
            seen.add(entry.id)
        return self

    @computed_field
    @property
    def total_items(self) -> int:
        return len(self.entries)

    def by_category(self, category: str) -> tuple[KnowledgeEntry, ...]:
        if category == ALL:
            return self.entries
        return tuple(e for e in self.entries if e.category == category)

    def summary(self) -> dict[str, Any]:
        counts = {c: sum(1 for e in self.entries if e.category == c) for c in CATEGORIES}
        return {"version": self.version, "totalItems": self.total_items, "categories": counts,
                "loadedAt": self.loaded_at.isoformat()}

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> Corpus:
        """Build a corpus from the sectioned JSON shape described in the module docstring."""
        meta = data.get("metadata") or {}
        entries: list[KnowledgeEntry] = []
        for category in CATEGORIES:
            for index, raw in enumerate(data.get(category) or ()):
                entries.append(KnowledgeEntry.model_validate(
                    {"id": f"{category}-{index + 1}", **raw, "category": category}
                ))

        corpus = cls(entries=tuple(entries), version=str(meta.get("version", "unversioned")))
        declared = meta.get("totalItems")
        if declared is not None and declared != corpus.total_items:
            logger.warning(
                f"Corpus metadata declares totalItems={declared} but {corpus.total_items} entries were loaded"
            )
        return corpus

    @classmethod
    def from_path(cls, path: str | Path) -> Corpus:
        with open(path, encoding="utf-8") as fh:
            return cls.from_mapping(json.load(fh))


def load_corpus(path: str | Path | None = None) -> Corpus:
    """Load the corpus from `path`, or the copy packaged with ragblog."""
    if path is not None:
        corpus = Corpus.from_path(path)
        source = str(path)
    else:
        packaged = resources.files("ragblog.knowledge").joinpath("data").joinpath(DEFAULT_CORPUS)
        corpus = Corpus.from_mapping(json.loads(packaged.read_text(encoding="utf-8")))
        source = f"package:{DEFAULT_CORPUS}"
    logger.info(f"RAG data loaded from {source}: version={corpus.version} total_items={corpus.total_items}")
    return corpus
