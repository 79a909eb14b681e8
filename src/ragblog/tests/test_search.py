"""Tests for lexical search.

Validates:
- Field weighting and per-token scoring
- Ordering: descending score, ties in corpus order
- Category filtering and limit handling
- Argument errors
"""

from __future__ import annotations

import pytest

from ragblog.foundation.errors import ErrorCode, InvalidArgument
from ragblog.knowledge import Corpus, LexicalSearchEngine, tokenize


@pytest.fixture
def engine(corpus: Corpus) -> LexicalSearchEngine:
    return LexicalSearchEngine(corpus)


def ids(hits: list) -> list[str]:
    return [h.entry.id for h in hits]


# ─────────────────────────────────────────────────────────────────────────────
# Scoring
# ─────────────────────────────────────────────────────────────────────────────


def test_tokenize_lowercases_and_dedupes() -> None:
    assert tokenize("Hexad, hexad & RAMP-2!") == frozenset({"hexad", "ramp", "2"})
    assert tokenize(None) == frozenset()


def test_qa_entry_ranks_first_for_its_question(engine: LexicalSearchEngine) -> None:
    hits = engine.search("gamification", category="qa")
    assert ids(hits) == ["q-what"]
    assert hits[0].matched_category == "qa"


def test_title_outweighs_content(engine: LexicalSearchEngine) -> None:
    hits = engine.search("hexad")
    assert ids(hits) == ["t-hexad", "t-ramp"]
    assert [h.score for h in hits] == [3, 1]


def test_subcategory_and_metadata_weights(engine: LexicalSearchEngine) -> None:
    assert [(h.entry.id, h.score) for h in engine.search("tone")] == [("s-tone", 2)]
    assert [(h.entry.id, h.score) for h in engine.search("uk")] == [("d-guide", 1)]


def test_score_sums_over_distinct_tokens(engine: LexicalSearchEngine) -> None:
    hits = engine.search("hexad types")
    assert [(h.entry.id, h.score) for h in hits] == [("t-hexad", 6), ("t-ramp", 2)]


def test_token_order_and_repeats_do_not_change_scores(engine: LexicalSearchEngine) -> None:
    def scored(q: str) -> list[tuple[str, int]]:
        return [(h.entry.id, h.score) for h in engine.search(q)]

    assert scored("hexad types") == scored("types hexad") == scored("types HEXAD hexad")


def test_ties_keep_corpus_order(engine: LexicalSearchEngine) -> None:
    hits = engine.search("motivation")
    assert ids(hits) == ["t-hexad", "t-ramp"]
    assert hits[0].score == hits[1].score == 2


def test_results_sorted_by_descending_score(engine: LexicalSearchEngine) -> None:
    hits = engine.search("What is gamification?")
    assert ids(hits) == ["q-what", "d-guide"]
    assert hits[0].score > hits[1].score


# ─────────────────────────────────────────────────────────────────────────────
# Filtering and limits
# ─────────────────────────────────────────────────────────────────────────────


def test_category_filter(engine: LexicalSearchEngine) -> None:
    assert ids(engine.search("gamification", category="documents")) == ["d-guide"]
    assert all(h.entry.category == "training" for h in engine.search("hexad motivation", category="training"))


@pytest.mark.parametrize("category", ["training", "style", "qa", "documents"])
def test_all_is_a_superset_of_each_category(engine: LexicalSearchEngine, category: str) -> None:
    query = "gamification hexad motivation tone uk"
    assert set(ids(engine.search(query, category=category, limit=50))) <= set(ids(engine.search(query, limit=50)))


def test_limit_truncates(engine: LexicalSearchEngine) -> None:
    assert ids(engine.search("motivation", limit=1)) == ["t-hexad"]


@pytest.mark.parametrize("limit", [0, -3])
def test_non_positive_limit_is_clamped_to_one(engine: LexicalSearchEngine, limit: int) -> None:
    assert len(engine.search("motivation", limit=limit)) == 1


def test_no_match_is_empty_not_error(engine: LexicalSearchEngine) -> None:
    assert engine.search("zeppelin") == []
    assert engine.search("???") == []


def test_hit_to_dict_carries_score_and_category(engine: LexicalSearchEngine) -> None:
    data = engine.search("gamification", category="qa")[0].to_dict()
    assert data["id"] == "q-what"
    assert data["score"] == 3
    assert data["matched_category"] == "qa"


# ─────────────────────────────────────────────────────────────────────────────
# Errors
# ─────────────────────────────────────────────────────────────────────────────


@pytest.mark.parametrize("query", ["", "   "])
def test_blank_query_is_invalid(engine: LexicalSearchEngine, query: str) -> None:
    with pytest.raises(InvalidArgument) as exc_info:
        engine.search(query)
    assert exc_info.value.code == ErrorCode.INVALID_PARAMS


def test_unknown_category_is_invalid(engine: LexicalSearchEngine) -> None:
    with pytest.raises(InvalidArgument, match="category"):
        engine.search("hexad", category="podcasts")
