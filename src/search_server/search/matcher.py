"""Per-document query matching."""

from __future__ import annotations

from search_server.search.index import InvertedIndex
from search_server.search.models import MatchResult, Query


class DocumentMatcher:
    """Reports which plus words of a query a single document contains."""

    def __init__(self, index: InvertedIndex) -> None:
        self.index = index

    def match(self, query: Query, doc_id: int) -> MatchResult:
        """Return matched plus words (ascending) and the document status.

        A document holding any minus word matches nothing, whatever plus words
        it contains.

        Raises:
            DocumentNotFoundError: If ``doc_id`` is not indexed
        """
        with self.index.lock:
            info = self.index.get_document_info(doc_id)
        if not query.minus_words.isdisjoint(info.words):
            return MatchResult([], info.status)
        return MatchResult(sorted(query.plus_words & info.words), info.status)
