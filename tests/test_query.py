from typing import Dict, List

import pytest

from wikisearch.exceptions import IndexLookupError, QuerySyntaxError, SearchError
from wikisearch.index import InMemoryIndex
from wikisearch.search import ResultSet, evaluate_query, normalize_term, parse_query, search

# ---------- Helpers ----------


class RecordingIndex(InMemoryIndex):
    def __init__(self, counts: Dict[str, Dict[str, int]]) -> None:
        super().__init__(counts)
        self.calls: List[str] = []

    def get_counts(self, term: str) -> Dict[str, int]:
        self.calls.append(term)
        return super().get_counts(term)


class FailingIndex:
    def get_counts(self, term: str) -> Dict[str, int]:
        raise IndexLookupError("connection refused")


@pytest.fixture
def index() -> RecordingIndex:
    return RecordingIndex(
        {
            "java": {"u1": 2, "u2": 3, "u4": 1},
            "programming": {"u2": 1, "u3": 5},
            "coffee": {"u4": 7},
        }
    )


# ---------- search ----------


def test_search_wraps_counts(index: RecordingIndex) -> None:
    rs = search("java", index)
    assert isinstance(rs, ResultSet)
    assert rs == {"u1": 2, "u2": 3, "u4": 1}
    assert index.calls == ["java"]


def test_search_unknown_term_is_empty(index: RecordingIndex) -> None:
    assert len(search("haskell", index)) == 0


def test_search_propagates_index_errors() -> None:
    with pytest.raises(IndexLookupError):
        search("java", FailingIndex())


def test_search_and_example(index: RecordingIndex) -> None:
    both = search("java", index) & search("programming", index)
    assert both == {"u2": 4}


# ---------- parse_query ----------


def test_parse_single_term() -> None:
    assert parse_query("Java") == ["java"]


def test_parse_precedence_and_binds_tighter_than_or() -> None:
    assert parse_query("a OR b AND c") == ["a", "b", "c", "AND", "OR"]
    assert parse_query("a AND b OR c") == ["a", "b", "AND", "c", "OR"]


def test_parse_parentheses_override_precedence() -> None:
    assert parse_query("(a OR b) AND c") == ["a", "b", "OR", "c", "AND"]


def test_parse_implicit_and() -> None:
    assert parse_query("java programming") == ["java", "programming", "AND"]
    assert parse_query("java (a | b)") == ["java", "a", "b", "OR", "AND"]


def test_parse_symbol_aliases_and_and_not() -> None:
    assert parse_query("a & b | c - d") == ["a", "b", "AND", "c", "d", "NOT", "OR"]
    assert parse_query("a AND NOT b") == ["a", "b", "NOT"]
    assert parse_query("a and not b") == ["a", "b", "NOT"]


def test_parse_attached_minus_excludes() -> None:
    assert parse_query("a -b") == ["a", "b", "NOT"]
    assert parse_query("java -Coffee,") == ["java", "coffee", "NOT"]
    assert parse_query("(a | b) -c") == ["a", "b", "OR", "c", "NOT"]
    assert parse_query("a AND -b") == ["a", "b", "NOT"]


def test_parse_strips_punctuation() -> None:
    assert parse_query('"Java," programming!') == ["java", "programming", "AND"]


def test_normalize_term() -> None:
    assert normalize_term("Java,") == "java"
    assert normalize_term('"C++"') == "c"
    assert normalize_term("...") == ""


def test_parse_empty() -> None:
    assert parse_query("") == []
    assert parse_query("   ") == []
    assert parse_query("?!") == []


@pytest.mark.parametrize(
    "query",
    [
        "AND java",
        "NOT java",
        "-java",
        "-java programming",
        "java OR",
        "java AND NOT",
        "(java",
        "java)",
        "()",
        "java ( )",
    ],
)
def test_parse_rejects_malformed_queries(query: str) -> None:
    with pytest.raises(QuerySyntaxError):
        parse_query(query)


def test_query_syntax_error_is_search_error() -> None:
    with pytest.raises(SearchError):
        parse_query("OR")


# ---------- evaluate_query ----------


def test_evaluate_and(index: RecordingIndex) -> None:
    assert evaluate_query("java AND programming", index) == {"u2": 4}


def test_evaluate_or(index: RecordingIndex) -> None:
    assert evaluate_query("java OR programming", index) == {"u1": 2, "u2": 4, "u3": 5, "u4": 1}


def test_evaluate_not(index: RecordingIndex) -> None:
    assert evaluate_query("java NOT coffee", index) == {"u1": 2, "u2": 3}
    assert evaluate_query("java -programming", index) == {"u1": 2, "u4": 1}


def test_evaluate_attached_minus_matches_not(index: RecordingIndex) -> None:
    assert evaluate_query("java -coffee", index) == evaluate_query("java NOT coffee", index)
    assert evaluate_query("java -coffee", index) == {"u1": 2, "u2": 3}


def test_evaluate_grouping(index: RecordingIndex) -> None:
    out = evaluate_query("(java OR programming) NOT coffee", index)
    assert out == {"u1": 2, "u2": 4, "u3": 5}


def test_evaluate_resolves_each_term_once(index: RecordingIndex) -> None:
    evaluate_query("java OR (java AND programming)", index)
    assert sorted(index.calls) == ["java", "programming"]


def test_evaluate_empty_query_skips_index(index: RecordingIndex) -> None:
    assert len(evaluate_query("", index)) == 0
    assert index.calls == []


def test_evaluate_propagates_index_errors() -> None:
    with pytest.raises(IndexLookupError):
        evaluate_query("java OR programming", FailingIndex())
