"""In-memory inverted index with per-document metadata.

Structure: word -> {doc_id: term frequency}, plus doc_id -> DocumentInfo.
The index is the only component that mutates this state; the ranker and the
matcher read it through the lookups below.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Mapping, Sequence
import logging
import threading
from types import MappingProxyType

from search_server.errors import DocumentNotFoundError, DuplicateDocumentError
from search_server.search.analyzers import StandardAnalyzer
from search_server.search.models import DocumentInfo, DocumentStatus
from search_server.search.stats import compute_average_rating, term_frequency


logger = logging.getLogger(__name__)

_EMPTY_POSTINGS: Mapping[int, float] = MappingProxyType({})


class InvertedIndex:
    """Inverted index over a small in-memory corpus.

    ``add_document`` builds the complete record before touching shared state
    and publishes it while holding :attr:`lock`. Readers that take the same
    lock never see a half-indexed document.
    """

    def __init__(self, analyzer: StandardAnalyzer | None = None) -> None:
        self.analyzer = analyzer or StandardAnalyzer()
        self.lock = threading.RLock()
        self._postings: dict[str, dict[int, float]] = {}
        self._documents: dict[int, DocumentInfo] = {}
        self._total_documents = 0

    def add_document(
        self,
        doc_id: int,
        text: str,
        status: DocumentStatus,
        ratings: Sequence[int] = (),
    ) -> DocumentInfo:
        """Index a document.

        Args:
            doc_id: Caller-assigned unique id
            text: Raw text, discarded after analysis
            status: Document status
            ratings: Ratings averaged (truncated toward zero) into one value

        Returns:
            The stored document metadata

        Raises:
            DuplicateDocumentError: If ``doc_id`` is already indexed
        """
        words = self.analyzer.words(text)
        counts = Counter(words)
        frequencies = {word: term_frequency(count, len(words)) for word, count in counts.items()}
        info = DocumentInfo(
            words=frozenset(counts),
            status=DocumentStatus(status),
            rating=compute_average_rating(ratings),
        )

        with self.lock:
            if doc_id in self:
                raise DuplicateDocumentError(doc_id)
            for word, frequency in frequencies.items():
                self._postings.setdefault(word, {})[doc_id] = frequency
            self._documents[doc_id] = info
            self._total_documents += 1

        if not words:
            logger.debug("Document %s has no indexable words; stored with an empty word set", doc_id)
        else:
            logger.debug("Document %s indexed: %d words, %d unique", doc_id, len(words), len(counts))
        return info

    @property
    def document_count(self) -> int:
        """Number of distinct document ids with metadata."""
        return len(self._documents)

    @property
    def total_documents(self) -> int:
        """Running count of successful ``add_document`` calls, used as N in IDF."""
        return self._total_documents

    def postings(self, word: str) -> Mapping[int, float]:
        """Return a read-only view of doc_id -> term frequency for ``word``."""
        postings = self._postings.get(word)
        if postings is None:
            return _EMPTY_POSTINGS
        return MappingProxyType(postings)

    def document_frequency(self, word: str) -> int:
        return len(self._postings.get(word, ()))

    def get_document_info(self, doc_id: int) -> DocumentInfo:
        try:
            return self._documents[doc_id]
        except KeyError:
            raise DocumentNotFoundError(doc_id) from None

    def __contains__(self, doc_id: object) -> bool:
        return doc_id in self._documents
