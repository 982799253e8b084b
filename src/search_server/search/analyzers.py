"""Analyzer utilities for the TF-IDF search stack.

Text is split on the space character only and stop words are matched
exactly. Other whitespace, punctuation and letter case are left untouched,
so ``"Кот"`` and ``"кот"`` are different words.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, MutableMapping, Sequence
from dataclasses import dataclass, field
from typing import Any, Protocol


@dataclass
class Token:
    """Represents a token emitted by analyzers."""

    text: str
    position: int
    start_char: int
    end_char: int
    attributes: MutableMapping[str, Any] = field(default_factory=dict)


class Analyzer(Protocol):
    """Protocol implemented by analyzers."""

    def __call__(self, text: str) -> list[Token]:  # pragma: no cover - interface definition
        ...


class Tokenizer(Protocol):
    """Protocol implemented by tokenizers."""

    def __call__(self, text: str) -> Iterator[Token]:  # pragma: no cover - interface definition
        ...


class TokenFilter(Protocol):
    """Protocol implemented by token filters."""

    def __call__(self, tokens: Iterable[Token]) -> Iterator[Token]:  # pragma: no cover - interface definition
        ...


class SpaceTokenizer:
    """Tokenizer that yields maximal runs of characters between spaces."""

    separator = " "

    def __call__(self, text: str) -> Iterator[Token]:
        position = 0
        start = 0
        for end, char in enumerate(text):
            if char != self.separator:
                continue
            if end > start:
                yield Token(text=text[start:end], position=position, start_char=start, end_char=end)
                position += 1
            start = end + 1
        if len(text) > start:
            yield Token(text=text[start:], position=position, start_char=start, end_char=len(text))


def split_into_words(text: str) -> list[str]:
    """Return the space-delimited words of ``text`` in order."""

    return [token.text for token in SpaceTokenizer()(text)]


class StopFilter:
    """Removes stop words from the stream.

    The vocabulary grows through :meth:`add_stop_words`; registering the same
    word twice is a no-op.
    """

    def __init__(self, stopwords: Sequence[str] | None = None) -> None:
        self.stopwords: set[str] = set(stopwords or ())

    def add_stop_words(self, text: str) -> None:
        self.stopwords.update(split_into_words(text))

    def is_stop_word(self, word: str) -> bool:
        return word in self.stopwords

    def __call__(self, tokens: Iterable[Token]) -> Iterator[Token]:
        for token in tokens:
            if not self.is_stop_word(token.text):
                yield token


class AnalyzerPipeline:
    """Composable analyzer pipeline (tokenizer + filters)."""

    def __init__(self, tokenizer: Tokenizer, filters: Sequence[TokenFilter] | None = None) -> None:
        self.tokenizer = tokenizer
        self.filters = list(filters or [])

    def __call__(self, text: str) -> list[Token]:
        stream: Iterable[Token] = self.tokenizer(text)
        for token_filter in self.filters:
            stream = token_filter(stream)
        tokens = list(stream)
        for idx, token in enumerate(tokens):  # normalize positions post-filtering
            token.position = idx
        return tokens


class StandardAnalyzer:
    """Default analyzer: space tokenizer followed by a stop filter.

    The stop filter is exposed so callers can keep registering stop words
    after the analyzer has been built.
    """

    def __init__(self, *, stopwords: Sequence[str] | None = None) -> None:
        self.stop_filter = StopFilter(stopwords)
        self.pipeline = AnalyzerPipeline(SpaceTokenizer(), [self.stop_filter])

    def add_stop_words(self, text: str) -> None:
        self.stop_filter.add_stop_words(text)

    def words(self, text: str) -> list[str]:
        """Return the indexable words of ``text`` in order."""
        return [token.text for token in self.pipeline(text)]

    def __call__(self, text: str) -> list[Token]:
        return self.pipeline(text)
