"""Plus/minus query parsing.

Every distinct token that survives analysis becomes either an
:class:`Include` or an :class:`Exclude` term. A token is an exclusion when it
starts with ``-``; exactly one leading ``-`` is stripped, so ``--x`` excludes
``-x``. A bare ``-`` carries no word and is dropped.
"""

from __future__ import annotations

import logging

from search_server.search.analyzers import Analyzer, StandardAnalyzer
from search_server.search.models import Exclude, Include, Query, QueryTerm


logger = logging.getLogger(__name__)

MINUS_MARKER = "-"


def classify_term(token: str) -> QueryTerm | None:
    """Return the tagged term for ``token``, or ``None`` when it carries no word."""

    if not token.startswith(MINUS_MARKER):
        return Include(token)
    word = token[len(MINUS_MARKER) :]
    if not word:
        return None
    return Exclude(word)


def parse_terms(text: str, analyzer: Analyzer) -> list[QueryTerm]:
    """Return the distinct tagged terms of ``text`` in first-seen order."""

    seen: set[str] = set()
    terms: list[QueryTerm] = []
    for token in analyzer(text):
        if token.text in seen:
            continue
        seen.add(token.text)
        term = classify_term(token.text)
        if term is None:
            logger.debug("Dropping bare minus marker at position %d", token.position)
            continue
        terms.append(term)
    return terms


def parse_query(text: str, analyzer: Analyzer | None = None) -> Query:
    """Parse raw query text into disjoint plus and minus word sets."""

    return Query.from_terms(parse_terms(text, analyzer or StandardAnalyzer()))


class QueryParser:
    """Parses queries with the analyzer used for indexing."""

    def __init__(self, analyzer: Analyzer) -> None:
        self.analyzer = analyzer

    def parse(self, text: str) -> Query:
        return parse_query(text, self.analyzer)
