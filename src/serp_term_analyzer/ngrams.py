"""
Unigram and bigram extraction from a token sequence.
"""

from collections import Counter
from typing import AbstractSet, Sequence

from .stopwords import GERMAN_STOPWORDS, is_stopword


def extract_ngrams(
    tokens: Sequence[str],
    stopwords: AbstractSet[str] = GERMAN_STOPWORDS,
) -> Counter:
    """
    Count the unigrams and adjacent-word bigrams of one text.

    Stopwords never appear as unigrams, and a bigram is discarded when either
    of its words is a stopword. Counts are local to the given token sequence
    so callers can tell "occurs k times in this text" apart from "occurs in
    this text at all".

    Args:
        tokens: Output of tokenize() for a single title or snippet.
        stopwords: Stopword set used for gating.

    Returns:
        Counter keyed by term text, in order of first appearance.
    """
    counts: Counter = Counter()
    blocked = [is_stopword(token, stopwords) for token in tokens]

    for index, token in enumerate(tokens):
        if not blocked[index]:
            counts[token] += 1

        if index + 1 < len(tokens) and not blocked[index] and not blocked[index + 1]:
            counts[f"{token} {tokens[index + 1]}"] += 1

    return counts
