"""Public search server API.

``SearchServer`` wires the analyzer, inverted index, query parser, ranker and
matcher together and adds logging, tracing and metrics around each call.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
import logging

from search_server.config import Settings
from search_server.errors import DocumentNotFoundError, DuplicateDocumentError
from search_server.observability import (
    ERROR_COUNT,
    INDEX_DOC_COUNT,
    SEARCH_LATENCY,
    SEARCH_RESULTS,
    create_span,
    track_latency,
)
from search_server.search.analyzers import StandardAnalyzer
from search_server.search.index import InvertedIndex
from search_server.search.matcher import DocumentMatcher
from search_server.search.models import Document, DocumentPredicate, DocumentStatus, MatchResult
from search_server.search.query import QueryParser
from search_server.search.ranking import TfIdfRanker, actual_only, by_status


logger = logging.getLogger(__name__)

DocumentFilter = DocumentPredicate | DocumentStatus | None


def resolve_predicate(document_filter: DocumentFilter) -> DocumentPredicate:
    """Turn the filter argument of ``find_top_documents`` into a predicate.

    ``None`` searches ``ACTUAL`` documents, a status searches documents with
    that status, and a callable is used as is.
    """
    if document_filter is None:
        return actual_only
    if isinstance(document_filter, DocumentStatus):
        return by_status(document_filter)
    if callable(document_filter):
        return document_filter
    raise TypeError(
        f"document_filter must be None, a DocumentStatus or a callable, got {type(document_filter).__name__}"
    )


class SearchServer:
    """TF-IDF search over a small in-memory corpus."""

    def __init__(
        self,
        stop_words: str | Iterable[str] | None = None,
        *,
        settings: Settings | None = None,
    ) -> None:
        self.settings = settings or Settings()
        self.analyzer = StandardAnalyzer(stopwords=self.settings.get_stop_words())
        if stop_words:
            self.set_stop_words(stop_words if isinstance(stop_words, str) else " ".join(stop_words))

        self.index = InvertedIndex(self.analyzer)
        self.parser = QueryParser(self.analyzer)
        self.ranker = TfIdfRanker(
            self.index,
            max_results=self.settings.max_result_document_count,
            epsilon=self.settings.relevance_epsilon,
        )
        self.matcher = DocumentMatcher(self.index)

    def set_stop_words(self, text: str) -> None:
        """Register space-delimited stop words.

        Stop words apply to documents added and queries parsed afterwards;
        documents already indexed keep their words.
        """
        self.analyzer.add_stop_words(text)
        logger.debug("Stop words now: %d", len(self.analyzer.stop_filter.stopwords))

    def add_document(
        self,
        doc_id: int,
        text: str,
        status: DocumentStatus,
        ratings: Sequence[int] = (),
    ) -> None:
        """Index a document.

        Raises:
            DuplicateDocumentError: If ``doc_id`` was already added
        """
        with (
            create_span("search.add_document", attributes={"search.doc_id": doc_id}),
            track_latency(SEARCH_LATENCY, operation="add_document"),
        ):
            try:
                self.index.add_document(doc_id, text, status, ratings)
            except DuplicateDocumentError:
                ERROR_COUNT.labels(error_type="duplicate_document", operation="add_document").inc()
                logger.warning("Rejected duplicate document id", extra={"doc_id": doc_id})
                raise
        INDEX_DOC_COUNT.set(self.index.document_count)

    def find_top_documents(self, raw_query: str, document_filter: DocumentFilter = None) -> list[Document]:
        """Return up to ``max_result_document_count`` documents ranked by TF-IDF.

        Args:
            raw_query: Space-delimited words; ``-word`` excludes documents
            document_filter: ``None`` (ACTUAL documents), a ``DocumentStatus``,
                or a ``(doc_id, status, rating) -> bool`` predicate

        Returns:
            Documents sorted by relevance descending, near-ties by rating descending
        """
        predicate = resolve_predicate(document_filter)
        with (
            create_span("search.find_top_documents", attributes={"search.query": raw_query}),
            track_latency(SEARCH_LATENCY, operation="find_top_documents"),
        ):
            query = self.parser.parse(raw_query)
            results = self.ranker.rank(query, predicate)

        SEARCH_RESULTS.inc(len(results))
        logger.debug(
            "Query matched %d documents",
            len(results),
            extra={"plus_words": query.plus_words, "minus_words": query.minus_words},
        )
        return results

    def match_document(self, raw_query: str, doc_id: int) -> MatchResult:
        """Return the query's plus words found in ``doc_id`` and the document status.

        Raises:
            DocumentNotFoundError: If ``doc_id`` was never added
        """
        with (
            create_span("search.match_document", attributes={"search.doc_id": doc_id}),
            track_latency(SEARCH_LATENCY, operation="match_document"),
        ):
            query = self.parser.parse(raw_query)
            try:
                return self.matcher.match(query, doc_id)
            except DocumentNotFoundError:
                ERROR_COUNT.labels(error_type="document_not_found", operation="match_document").inc()
                logger.warning("Match requested for unknown document", extra={"doc_id": doc_id})
                raise

    def get_document_count(self) -> int:
        """Return the number of indexed documents."""
        return self.index.document_count
