"""Unit tests for the SearchServer facade."""

from __future__ import annotations

import logging
import math

import pytest

from search_server import (
    Document,
    DocumentNotFoundError,
    DocumentStatus,
    DuplicateDocumentError,
    MatchResult,
    SearchServer,
    Settings,
    by_status,
)
from search_server.search_server import resolve_predicate
from search_server.search.ranking import actual_only
from tests.fixtures.sample_corpus import SAMPLE_QUERY


@pytest.mark.unit
class TestSampleScenario:
    """The four-document sample corpus with stop words "и в на"."""

    def test_default_returns_actual_documents(self, server: SearchServer):
        results = server.find_top_documents(SAMPLE_QUERY)

        assert [doc.id for doc in results] == [1, 0, 2]
        assert [doc.rating for doc in results] == [5, 2, -1]
        assert results[0].relevance == pytest.approx(0.866434, abs=1e-6)
        assert results[1].relevance == pytest.approx(0.173287, abs=1e-6)
        assert results[2].relevance == pytest.approx(0.173287, abs=1e-6)

    def test_banned_status(self, server: SearchServer):
        results = server.find_top_documents(SAMPLE_QUERY, DocumentStatus.BANNED)

        assert len(results) == 1
        assert results[0].id == 3
        assert results[0].rating == 9
        assert results[0].relevance == pytest.approx(math.log(2) / 3)

    def test_even_id_predicate(self, server: SearchServer):
        results = server.find_top_documents(SAMPLE_QUERY, lambda doc_id, status, rating: doc_id % 2 == 0)

        assert [doc.id for doc in results] == [0, 2]

    def test_default_form_equals_actual_status_form(self, server: SearchServer):
        assert server.find_top_documents(SAMPLE_QUERY) == server.find_top_documents(
            SAMPLE_QUERY, DocumentStatus.ACTUAL
        )

    def test_status_form_equals_predicate_form(self, server: SearchServer):
        assert server.find_top_documents(SAMPLE_QUERY, DocumentStatus.BANNED) == server.find_top_documents(
            SAMPLE_QUERY, by_status(DocumentStatus.BANNED)
        )

    def test_document_count(self, server: SearchServer):
        assert server.get_document_count() == 4

    def test_match_document(self, server: SearchServer):
        assert server.match_document(SAMPLE_QUERY, 1) == MatchResult(["кот", "пушистый"], DocumentStatus.ACTUAL)
        assert server.match_document(SAMPLE_QUERY, 3) == MatchResult(["ухоженный"], DocumentStatus.BANNED)

    def test_match_document_with_minus_word(self, server: SearchServer):
        words, status = server.match_document("пушистый кот -ошейник", 0)

        assert words == []
        assert status is DocumentStatus.ACTUAL

    def test_minus_word_removes_document_from_results(self, server: SearchServer):
        results = server.find_top_documents("пушистый ухоженный кот -хвост")

        assert 1 not in [doc.id for doc in results]
        assert [doc.id for doc in results] == [0, 2]


@pytest.mark.unit
class TestIngestion:
    def test_duplicate_id_is_rejected_and_count_unchanged(self, server: SearchServer, caplog):
        with caplog.at_level(logging.WARNING, logger="search_server.search_server"):
            with pytest.raises(DuplicateDocumentError):
                server.add_document(1, "чёрный пёс", DocumentStatus.ACTUAL, [1])

        assert server.get_document_count() == 4
        assert server.match_document("пёс", 1).matched_words == []
        assert "duplicate" in caplog.text

    def test_duplicate_does_not_shift_idf(self, server: SearchServer):
        before = server.find_top_documents(SAMPLE_QUERY)
        with pytest.raises(DuplicateDocumentError):
            server.add_document(0, "белый кот", DocumentStatus.ACTUAL, [])

        assert server.find_top_documents(SAMPLE_QUERY) == before

    def test_document_count_tracks_distinct_ids(self):
        server = SearchServer()
        for doc_id in (10, 20, 30):
            server.add_document(doc_id, "кот", DocumentStatus.ACTUAL, [])

        assert server.get_document_count() == 3

    def test_document_with_only_stop_words(self, server: SearchServer):
        server.add_document(5, "и в на", DocumentStatus.ACTUAL, [3, 4])

        assert server.get_document_count() == 5
        assert server.match_document("кот", 5) == MatchResult([], DocumentStatus.ACTUAL)
        # The empty document still counts toward N in IDF
        result = server.find_top_documents("пушистый")
        assert result[0].relevance == pytest.approx(0.5 * math.log(5))

    def test_ratings_default_to_zero(self):
        server = SearchServer()
        server.add_document(0, "кот", DocumentStatus.ACTUAL)
        server.add_document(1, "пёс", DocumentStatus.ACTUAL)

        assert server.find_top_documents("кот") == [Document(id=0, relevance=math.log(2), rating=0)]


@pytest.mark.unit
class TestStopWords:
    def test_constructor_accepts_iterable(self):
        server = SearchServer(["и", "в"])
        server.add_document(0, "кот и пёс", DocumentStatus.ACTUAL, [])

        assert server.match_document("и кот", 0).matched_words == ["кот"]

    def test_settings_seed_stop_words(self):
        server = SearchServer(settings=Settings(stop_words="и"))
        server.add_document(0, "кот и пёс", DocumentStatus.ACTUAL, [])
        server.add_document(1, "слон", DocumentStatus.ACTUAL, [])

        assert server.find_top_documents("и") == []

    def test_set_stop_words_is_additive(self):
        server = SearchServer("и")
        server.set_stop_words("в")
        server.set_stop_words("в")
        server.add_document(0, "кот и пёс в доме", DocumentStatus.ACTUAL, [])

        assert server.match_document("кот и в доме", 0).matched_words == ["доме", "кот"]

    def test_stop_word_query_returns_nothing(self, server: SearchServer):
        assert server.find_top_documents("и в на") == []


@pytest.mark.unit
class TestResultLimits:
    def test_at_most_five_results(self):
        server = SearchServer()
        for doc_id in range(9):
            server.add_document(doc_id, f"кот номер{doc_id}", DocumentStatus.ACTUAL, [doc_id])
        server.add_document(100, "слон", DocumentStatus.ACTUAL, [])

        results = server.find_top_documents("кот")

        assert len(results) == 5
        # Equal relevance everywhere, so rating decides
        assert [doc.id for doc in results] == [8, 7, 6, 5, 4]

    def test_limit_comes_from_settings(self):
        server = SearchServer(settings=Settings(max_result_document_count=2))
        for doc_id in range(4):
            server.add_document(doc_id, "кот", DocumentStatus.ACTUAL, [doc_id])
        server.add_document(10, "пёс", DocumentStatus.ACTUAL, [])

        assert [doc.id for doc in server.find_top_documents("кот")] == [3, 2]


@pytest.mark.unit
class TestErrors:
    def test_match_unknown_document(self, server: SearchServer, caplog):
        with caplog.at_level(logging.WARNING, logger="search_server.search_server"):
            with pytest.raises(DocumentNotFoundError) as excinfo:
                server.match_document("кот", 42)

        assert excinfo.value.doc_id == 42
        assert "unknown document" in caplog.text

    def test_invalid_filter_type(self, server: SearchServer):
        with pytest.raises(TypeError, match="document_filter"):
            server.find_top_documents("кот", 5)  # type: ignore[arg-type]


@pytest.mark.unit
class TestResolvePredicate:
    def test_none_is_actual_only(self):
        assert resolve_predicate(None) is actual_only

    def test_status_builds_status_predicate(self):
        predicate = resolve_predicate(DocumentStatus.REMOVED)

        assert predicate(0, DocumentStatus.REMOVED, 0)
        assert not predicate(0, DocumentStatus.ACTUAL, 0)

    def test_callable_is_used_as_is(self):
        def predicate(doc_id, status, rating):
            return True

        assert resolve_predicate(predicate) is predicate


@pytest.mark.unit
def test_document_to_dict():
    assert Document(id=1, relevance=0.5, rating=3).to_dict() == {"id": 1, "relevance": 0.5, "rating": 3}


@pytest.mark.unit
def test_readers_never_see_half_indexed_documents():
    import threading

    server = SearchServer()
    errors: list[BaseException] = []
    done = threading.Event()

    def write() -> None:
        try:
            for doc_id in range(300):
                server.add_document(doc_id, f"кот пёс слово{doc_id}", DocumentStatus.ACTUAL, [doc_id])
        finally:
            done.set()

    def read() -> None:
        try:
            while not done.is_set():
                for doc in server.find_top_documents("кот слово7"):
                    words, _status = server.match_document("кот пёс", doc.id)
                    assert words == ["кот", "пёс"]
        except BaseException as exc:  # collected for the main thread
            errors.append(exc)

    readers = [threading.Thread(target=read) for _ in range(3)]
    writer = threading.Thread(target=write)
    for thread in readers:
        thread.start()
    writer.start()
    writer.join()
    for thread in readers:
        thread.join()

    assert errors == []
    assert server.get_document_count() == 300
