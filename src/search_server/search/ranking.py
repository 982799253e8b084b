"""TF-IDF ranking over the inverted index."""

from __future__ import annotations

from collections import defaultdict
from functools import cmp_to_key
import logging

from search_server.search.index import InvertedIndex
from search_server.search.models import Document, DocumentPredicate, DocumentStatus, Query
from search_server.search.stats import calculate_idf


logger = logging.getLogger(__name__)

MAX_RESULT_DOCUMENT_COUNT = 5
RELEVANCE_EPSILON = 1e-6


def by_status(status: DocumentStatus) -> DocumentPredicate:
    """Build a predicate accepting documents with the given status."""

    def predicate(doc_id: int, doc_status: DocumentStatus, rating: int) -> bool:
        return doc_status == status

    return predicate


def actual_only(doc_id: int, status: DocumentStatus, rating: int) -> bool:
    """Default predicate: only ``ACTUAL`` documents are searchable."""
    return status == DocumentStatus.ACTUAL


class TfIdfRanker:
    """Compute TF-IDF relevance for documents stored in an inverted index."""

    def __init__(
        self,
        index: InvertedIndex,
        *,
        max_results: int = MAX_RESULT_DOCUMENT_COUNT,
        epsilon: float = RELEVANCE_EPSILON,
    ) -> None:
        self.index = index
        self.max_results = max_results
        self.epsilon = epsilon

    def _is_excluded(self, doc_id: int, minus_words: frozenset[str]) -> bool:
        if not minus_words:
            return False
        return not minus_words.isdisjoint(self.index.get_document_info(doc_id).words)

    def find_all_documents(self, query: Query, predicate: DocumentPredicate) -> list[Document]:
        """Return every matching document, unsorted by relevance, in ascending id order."""

        doc_scores: dict[int, float] = defaultdict(float)
        with self.index.lock:
            total_docs = self.index.total_documents
            # sorted() keeps float accumulation order reproducible
            for word in sorted(query.plus_words - query.minus_words):
                postings = self.index.postings(word)
                if not postings:
                    continue
                idf = calculate_idf(self.index.document_frequency(word), total_docs)
                for doc_id, frequency in postings.items():
                    if self._is_excluded(doc_id, query.minus_words):
                        continue
                    info = self.index.get_document_info(doc_id)
                    if not predicate(doc_id, info.status, info.rating):
                        continue
                    doc_scores[doc_id] += idf * frequency

            return [
                Document(id=doc_id, relevance=doc_scores[doc_id], rating=self.index.get_document_info(doc_id).rating)
                for doc_id in sorted(doc_scores)
            ]

    def _compare(self, lhs: Document, rhs: Document) -> int:
        if abs(lhs.relevance - rhs.relevance) < self.epsilon:
            return (lhs.rating < rhs.rating) - (lhs.rating > rhs.rating)
        return -1 if lhs.relevance > rhs.relevance else 1

    def sort_documents(self, documents: list[Document]) -> list[Document]:
        """Stable sort by relevance descending; near-equal relevance falls back to rating."""
        return sorted(documents, key=cmp_to_key(self._compare))

    def rank(self, query: Query, predicate: DocumentPredicate) -> list[Document]:
        """Return at most ``max_results`` documents for a parsed query."""

        if query.is_empty():
            return []
        matched = self.find_all_documents(query, predicate)
        ranked = self.sort_documents(matched)[: self.max_results]
        logger.debug("Ranked %d of %d matching documents", len(ranked), len(matched))
        return ranked
