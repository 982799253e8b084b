"""Domain errors raised by the search server."""

from __future__ import annotations


class SearchServerError(Exception):
    """Base error for the search server domain."""


class DocumentNotFoundError(SearchServerError, KeyError):
    """Raised when an id-keyed lookup targets a document that was never added."""

    def __init__(self, doc_id: int) -> None:
        self.doc_id = doc_id
        super().__init__(f"Document {doc_id} is not indexed")

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return self.args[0]


class DuplicateDocumentError(SearchServerError, ValueError):
    """Raised when a document id is added a second time."""

    def __init__(self, doc_id: int) -> None:
        self.doc_id = doc_id
        super().__init__(f"Document {doc_id} is already indexed")
