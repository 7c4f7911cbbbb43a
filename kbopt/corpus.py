"""Unigram, bigram and trigram counts over a body of text."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from os import PathLike

from .common import sorted_counts

_NO_RUNE = "\0"
_NOT_SPACE = frozenset("\x1c\x1d\x1e\x1f")


def _is_space(ch: str) -> bool:
    return ch.isspace() and ch not in _NOT_SPACE


@dataclass
class Corpus:
    """N-gram counts of a text, with totals including and excluding spaces.

    N-grams are stored as strings of one, two or three characters.
    """

    name: str
    unigrams: Counter = field(default_factory=Counter)
    total_unigrams_count: int = 0
    total_unigrams_no_space: int = 0
    bigrams: Counter = field(default_factory=Counter)
    total_bigrams_count: int = 0
    total_bigrams_no_space: int = 0
    trigrams: Counter = field(default_factory=Counter)
    total_trigrams_count: int = 0
    total_trigrams_no_space: int = 0

    def add_unigram(self, unigram: str) -> None:
        """Count one occurrence of a single character."""
        self.unigrams[unigram] += 1
        self.total_unigrams_count += 1
        if not _is_space(unigram):
            self.total_unigrams_no_space += 1

    def add_bigram(self, bigram: str) -> None:
        """Count one occurrence of a two-character sequence."""
        self.bigrams[bigram] += 1
        self.total_bigrams_count += 1
        if not any(_is_space(ch) for ch in bigram):
            self.total_bigrams_no_space += 1

    def add_trigram(self, trigram: str) -> None:
        """Count one occurrence of a three-character sequence."""
        self.trigrams[trigram] += 1
        self.total_trigrams_count += 1
        if not any(_is_space(ch) for ch in trigram):
            self.total_trigrams_no_space += 1

    def add_text(self, text: str) -> None:
        """Count every unigram, bigram and trigram of the lower-cased text."""
        prev1 = prev2 = _NO_RUNE
        for ch in text.lower():
            self.add_unigram(ch)
            if prev1 != _NO_RUNE:
                self.add_bigram(prev1 + ch)
                if prev2 != _NO_RUNE:
                    self.add_trigram(prev2 + prev1 + ch)
            prev2, prev1 = prev1, ch

    def string_sorted(self, limit: int) -> str:
        """Describe the most frequent n-grams; a limit of 0 or less means all."""
        if limit <= 0:
            limit = 2**31 - 1
        parts = [f"Corpus: {self.name}\n"]
        for heading, counts in (
            ("Unigrams:\n", self.unigrams),
            ("Bigrams:\n", self.bigrams),
            ("\nTrigrams:\n", self.trigrams),
        ):
            parts.append(heading)
            ordered = sorted_counts(counts)
            limit = min(limit, len(ordered))
            parts.extend(f"{key}: {count}\n" for key, count in ordered[:limit])
        return "".join(parts)

    def __str__(self) -> str:
        return self.string_sorted(10)


def load_corpus(name: str, filename: str | PathLike) -> Corpus:
    """Build a corpus from a text file, line by line, skipping blank lines."""
    corpus = Corpus(name)
    with open(filename, encoding="utf-8", newline="\n") as handle:
        for line in handle:
            line = line.removesuffix("\n").removesuffix("\r")
            if not line.strip():
                continue
            corpus.add_text(line)
    return corpus