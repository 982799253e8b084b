"""TF-IDF search server over an in-memory document corpus."""

from search_server.config import Settings
from search_server.errors import DocumentNotFoundError, DuplicateDocumentError, SearchServerError
from search_server.observability import configure_logging_from_settings
from search_server.search.models import Document, DocumentStatus, MatchResult
from search_server.search.ranking import actual_only, by_status
from search_server.search_server import SearchServer


__all__ = [
    "Document",
    "DocumentNotFoundError",
    "DocumentStatus",
    "DuplicateDocumentError",
    "MatchResult",
    "SearchServer",
    "SearchServerError",
    "Settings",
    "actual_only",
    "by_status",
    "configure_logging_from_settings",
]
