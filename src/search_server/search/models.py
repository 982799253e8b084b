"""Search data models."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, NamedTuple


class DocumentStatus(str, Enum):
    """Lifecycle status attached to every indexed document."""

    ACTUAL = "actual"
    IRRELEVANT = "irrelevant"
    BANNED = "banned"
    REMOVED = "removed"


DocumentPredicate = Callable[[int, DocumentStatus, int], bool]
"""Caller filter receiving ``(doc_id, status, rating)``."""


@dataclass(frozen=True)
class Document:
    """A ranked search result."""

    id: int
    relevance: float
    rating: int

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {"id": self.id, "relevance": self.relevance, "rating": self.rating}


@dataclass(slots=True, frozen=True)
class DocumentInfo:
    """Metadata kept for an indexed document once its text is discarded."""

    words: frozenset[str]
    status: DocumentStatus
    rating: int


@dataclass(frozen=True)
class Include:
    """Query term a document should contain."""

    word: str


@dataclass(frozen=True)
class Exclude:
    """Query term that removes any document containing it."""

    word: str


QueryTerm = Include | Exclude


@dataclass(frozen=True)
class Query:
    """Parsed query with disjoint plus and minus word sets."""

    plus_words: frozenset[str] = field(default_factory=frozenset)
    minus_words: frozenset[str] = field(default_factory=frozenset)

    @classmethod
    def from_terms(cls, terms: list[QueryTerm] | tuple[QueryTerm, ...]) -> Query:
        includes = {term.word for term in terms if isinstance(term, Include)}
        excludes = frozenset(term.word for term in terms if isinstance(term, Exclude))
        return cls(plus_words=frozenset(includes - excludes), minus_words=excludes)

    def is_empty(self) -> bool:
        return not self.plus_words


class MatchResult(NamedTuple):
    """Plus words of a query found in one document, with its status."""

    matched_words: list[str]
    status: DocumentStatus
