"""Statistical helpers for TF-IDF scoring.

The functions here stay independent of the index so they can be unit tested
on plain numbers.
"""

from __future__ import annotations

from collections.abc import Sequence
import math


def term_frequency(occurrences: int, word_count: int) -> float:
    """Return ``occurrences / word_count``; zero for an empty document."""

    if word_count <= 0:
        return 0.0
    return occurrences / word_count


def calculate_idf(doc_freq: int, total_docs: int) -> float:
    """Return the natural-log inverse document frequency ``ln(N / df)``.

    Words that appear in every document score ``0.0``. A word that appears in
    no document has no meaningful IDF and also yields ``0.0``.
    """

    if doc_freq <= 0 or total_docs <= 0:
        return 0.0
    return math.log(total_docs / doc_freq)


def compute_average_rating(ratings: Sequence[int]) -> int:
    """Return the integer average of ``ratings`` truncated toward zero.

    ``[5, -12, 2, 1]`` averages to ``-1`` rather than ``-2``.
    """

    if not ratings:
        return 0
    total = sum(ratings)
    quotient = abs(total) // len(ratings)
    return -quotient if total < 0 else quotient
