import logging

import pytest

from littlesearch.data_models.keyword_index import KeywordIndex
from littlesearch.data_models.occurrence import Occurrence
from littlesearch.search import merge_ranked, top_k_search


def _index(entries: dict[str, list[tuple[str, int]]]) -> KeywordIndex:
    index = KeywordIndex()
    writable = index.writable_entries()
    for keyword, pairs in entries.items():
        writable[keyword] = [Occurrence(doc_id=d, frequency=f) for d, f in pairs]
    index.freeze()
    return index


def test_tie_favors_first_keyword():
    index = _index({"red": [("docA", 3)], "blue": [("docB", 3)]})
    assert top_k_search(index, "red", "blue") == ["docA", "docB"]
    assert top_k_search(index, "blue", "red") == ["docB", "docA"]


def test_interleaves_by_frequency():
    index = _index(
        {
            "red": [("a", 5), ("b", 1)],
            "blue": [("c", 3), ("d", 2)],
        }
    )
    assert top_k_search(index, "red", "blue") == ["a", "c", "d", "b"]


def test_document_in_both_lists_appears_once():
    index = _index(
        {
            "red": [("a", 4), ("b", 2)],
            "blue": [("b", 3), ("a", 1)],
        }
    )
    assert top_k_search(index, "red", "blue") == ["a", "b"]


def test_result_capped_at_five():
    index = _index(
        {
            "red": [(f"r{i}", 10 - i) for i in range(4)],
            "blue": [(f"b{i}", 10 - i) for i in range(4)],
        }
    )
    result = top_k_search(index, "red", "blue")
    assert result == ["r0", "b0", "r1", "b1", "r2"]


def test_one_keyword_missing_drains_other():
    index = _index({"red": [("a", 2), ("b", 1)]})
    assert top_k_search(index, "nothing", "red") == ["a", "b"]
    assert top_k_search(index, "red", "nothing") == ["a", "b"]


def test_same_keyword_twice():
    index = _index({"red": [("a", 2), ("b", 1)]})
    assert top_k_search(index, "red", "red") == ["a", "b"]


def test_no_match_returns_none():
    index = _index({"red": [("a", 2)]})
    assert top_k_search(index, "green", "blue") is None
    assert top_k_search(KeywordIndex(), "red", "blue") is None


def test_keywords_lowercased():
    index = _index({"red": [("a", 2)], "blue": [("b", 1)]})
    assert top_k_search(index, "RED", "Blue") == ["a", "b"]


def test_keywords_not_stripped():
    index = _index({"red": [("a", 2)]})
    assert top_k_search(index, "red.", "red!") is None


def test_does_not_modify_index():
    index = _index({"red": [("a", 2), ("b", 1)], "blue": [("b", 5)]})
    before = index.to_polars()
    top_k_search(index, "red", "blue")
    assert index.to_polars().equals(before)


def test_result_logged_at_debug(caplog: pytest.LogCaptureFixture):
    index = _index({"red": [("a", 2)], "blue": [("b", 1)]})
    with caplog.at_level(logging.DEBUG, logger="littlesearch.search"):
        top_k_search(index, "red", "blue")
    assert "a, b" in caplog.text


def test_merge_ranked_custom_k():
    first = [Occurrence(doc_id=d, frequency=f) for d, f in [("a", 3), ("b", 2)]]
    second = [Occurrence(doc_id="c", frequency=9)]
    assert merge_ranked(first, second, k=2) == ["c", "a"]


def test_merge_ranked_rejects_bad_k():
    with pytest.raises(ValueError, match="k must be at least 1"):
        merge_ranked([], [], k=0)
