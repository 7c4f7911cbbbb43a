"""Analyses of a layout against a corpus: hand usage, SFBs, SFSs and LSBs."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from .common import comma
from .corpus import Corpus
from .layout import SplitLayout

# Lateral stretch bigrams spanning at least 2U.
_KEY_PAIRS_20 = (
    (0, 2), (0, 14), (0, 26), (12, 2), (12, 14), (12, 26), (24, 2), (24, 14), (24, 26),
    (3, 5), (3, 17), (3, 29), (15, 5), (15, 17), (15, 29), (27, 5), (27, 17), (27, 29),
    (6, 8), (6, 20), (6, 32), (18, 8), (18, 20), (18, 32), (30, 8), (30, 20), (30, 32),
    (9, 11), (9, 23), (9, 35), (21, 11), (21, 23), (21, 35), (33, 11), (33, 23), (33, 35),
)

# Lateral stretch bigrams spanning at least 3.5U.
_KEY_PAIRS_35 = (
    (2, 16), (2, 17), (2, 28), (2, 29), (14, 28), (14, 29),
    (26, 4), (26, 5), (26, 16), (26, 17),
    (9, 18), (9, 19), (9, 30), (9, 31), (21, 6), (21, 7),
    (33, 6), (33, 7), (33, 18), (33, 19),
)


def _ratio(numerator: float, denominator: float) -> float:
    """Divide like floating-point hardware: x/0 gives inf, 0/0 gives nan."""
    if denominator == 0:
        return math.nan if numerator == 0 else math.inf
    return numerator / denominator


@dataclass
class Usage:
    """Key presses for one hand, row, column or finger."""

    count: int = 0
    percentage: float = 0.0


def _new_usage(size: int) -> list[Usage]:
    return [Usage() for _ in range(size)]


def _format_usage(usage: list[Usage]) -> str:
    return ", ".join(f"{u.percentage:.1f}%" for u in usage)


def _format_unavailable(unavailable: dict[str, int]) -> str:
    ordered = sorted(unavailable.items(), key=lambda item: item[1], reverse=True)
    return ", ".join(f"{rune} ({comma(count)})" for rune, count in ordered)


@dataclass
class HandAnalysis:
    """How key presses of a corpus spread over hands, rows, columns and fingers."""

    layout_name: str
    corpus_name: str
    total_unigram_count: int = 0
    hand_usage: list[Usage] = field(default_factory=lambda: _new_usage(2))
    row_usage: list[Usage] = field(default_factory=lambda: _new_usage(4))
    column_usage: list[Usage] = field(default_factory=lambda: _new_usage(12))
    finger_usage: list[Usage] = field(default_factory=lambda: _new_usage(10))
    runes_unavailable: dict[str, int] = field(default_factory=dict)

    def __str__(self) -> str:
        return (
            f"{self.layout_name} ({self.corpus_name}):\n"
            f"Hands: {_format_usage(self.hand_usage)}\n"
            f"Rows: {_format_usage(self.row_usage)}\n"
            f"Columns: {_format_usage(self.column_usage)}\n"
            f"Fingers: {_format_usage(self.finger_usage)}\n"
            f"Unavailable runes: {_format_unavailable(self.runes_unavailable)}"
        )


def analyze_hand_usage(layout: SplitLayout, corpus: Corpus) -> HandAnalysis:
    """Count key presses per hand, row, column and finger."""
    analysis = HandAnalysis(layout_name=layout.filename, corpus_name=corpus.name)

    for rune, count in corpus.unigrams.items():
        info = layout.rune_info.get(rune)
        if info is None:
            analysis.runes_unavailable[rune] = analysis.runes_unavailable.get(rune, 0) + count
            continue
        analysis.total_unigram_count += count
        analysis.hand_usage[0 if info.hand == "left" else 1].count += count
        analysis.row_usage[info.row].count += count
        analysis.column_usage[info.column].count += count
        analysis.finger_usage[info.finger].count += count

    total = analysis.total_unigram_count
    for group in (
        analysis.hand_usage,
        analysis.row_usage,
        analysis.column_usage,
        analysis.finger_usage,
    ):
        for usage in group:
            usage.percentage = 100 * _ratio(usage.count, total)
    return analysis


@dataclass
class Sfb:
    """A same-finger bigram with its key distance and frequency."""

    bigram: str
    distance: float
    count: int
    percentage: float


@dataclass
class SfbAnalysis:
    """All same-finger bigrams of a corpus on a layout."""

    layout: SplitLayout
    corpus: Corpus
    sfbs: list[Sfb] = field(default_factory=list)
    total_sfb_count: int = 0
    total_sfb_perc: float = 0.0
    unsupported: list[tuple[str, int]] = field(default_factory=list)


def simple_sfbs(layout: SplitLayout, corpus: Corpus) -> float:
    """Fraction of space-free bigrams typed with one finger on two different keys."""
    total = 0
    for bigram, count in corpus.bigrams.items():
        if bigram[0] == bigram[1]:
            continue
        info0 = layout.rune_info.get(bigram[0])
        info1 = layout.rune_info.get(bigram[1])
        if info0 is not None and info1 is not None and info0.finger == info1.finger:
            total += count
    return _ratio(total, corpus.total_bigrams_no_space)


def analyze_sfbs(layout: SplitLayout, corpus: Corpus) -> SfbAnalysis:
    """List same-finger bigrams, most frequent first, and bigrams the layout lacks."""
    analysis = SfbAnalysis(layout=layout, corpus=corpus)

    for bigram, count in corpus.bigrams.items():
        if bigram[0] == bigram[1]:
            continue
        info0 = layout.rune_info.get(bigram[0])
        info1 = layout.rune_info.get(bigram[1])
        if info0 is None or info1 is None:
            analysis.unsupported.append((bigram, count))
        elif info0.finger == info1.finger:
            percentage = _ratio(count, corpus.total_bigrams_no_space)
            analysis.sfbs.append(
                Sfb(bigram, layout.key_distance(info0, info1), count, percentage)
            )
            analysis.total_sfb_count += count
            analysis.total_sfb_perc += percentage

    analysis.sfbs.sort(key=lambda sfb: sfb.count, reverse=True)
    return analysis


@dataclass
class Sfs:
    """A same-finger skipgram with its key distance and frequency."""

    trigram: str
    distance: float
    count: int
    percentage: float


@dataclass
class SfsAnalysis:
    """All same-finger skipgrams of a corpus on a layout."""

    layout: SplitLayout
    corpus: Corpus
    sfss: list[Sfs] = field(default_factory=list)
    total_sfs_count: int = 0
    total_sfs_perc: float = 0.0
    merged_sfss: list[Sfs] = field(default_factory=list)
    unsupported: list[tuple[str, int]] = field(default_factory=list)


def _is_sfs(layout: SplitLayout, trigram: str):
    """Return the outer keys' infos if the trigram is a skipgram, False if not, None if unsupported."""
    infos = [layout.rune_info.get(ch) for ch in trigram]
    if any(info is None for info in infos):
        return None
    first, middle, last = infos
    if first.finger == last.finger and first.finger != middle.finger:
        return first, last
    return False


def simple_sfss(layout: SplitLayout, corpus: Corpus) -> float:
    """Fraction of trigrams whose outer characters share a finger the middle does not."""
    total = 0
    for trigram, count in corpus.trigrams.items():
        if trigram[0] == trigram[2]:
            continue
        if _is_sfs(layout, trigram):
            total += count
    return _ratio(total, corpus.total_trigrams_count)


def analyze_sfss(layout: SplitLayout, corpus: Corpus) -> SfsAnalysis:
    """List same-finger skipgrams, also merged by their outer characters."""
    analysis = SfsAnalysis(layout=layout, corpus=corpus)
    merged: dict[str, Sfs] = {}

    for trigram, count in corpus.trigrams.items():
        if trigram[0] == trigram[2]:
            continue
        outer = _is_sfs(layout, trigram)
        if outer is None:
            analysis.unsupported.append((trigram, count))
            continue
        if not outer:
            continue

        distance = layout.key_distance(*outer)
        percentage = _ratio(count, corpus.total_trigrams_count)
        analysis.sfss.append(Sfs(trigram, distance, count, percentage))
        analysis.total_sfs_count += count
        analysis.total_sfs_perc += percentage

        low, high = sorted((trigram[0], trigram[2]))
        key = f"{low}_{high}"
        existing = merged.get(key)
        if existing is None:
            merged[key] = Sfs(key, distance, count, percentage)
        else:
            existing.count += count
            existing.percentage += percentage

    analysis.sfss.sort(key=lambda sfs: sfs.count, reverse=True)
    analysis.merged_sfss = sorted(merged.values(), key=lambda sfs: sfs.count, reverse=True)
    return analysis


@dataclass
class Lsb:
    """A lateral stretch bigram with its key distance and frequency."""

    bigram: str
    distance: float
    count: int
    percentage: float


@dataclass
class LsbAnalysis:
    """All lateral stretch bigrams of a corpus on a layout."""

    layout: SplitLayout
    corpus: Corpus
    lsbs: list[Lsb] = field(default_factory=list)
    total_lsb_count: int = 0
    total_lsb_perc: float = 0.0


def _collect_lsbs(
    layout: SplitLayout,
    corpus: Corpus,
    analysis: LsbAnalysis,
    min_distance: float,
    key_pairs: tuple[tuple[int, int], ...],
) -> None:
    for first, second in key_pairs:
        r0, r1 = layout.runes[first], layout.runes[second]
        if r0 is None or r1 is None:
            continue
        bigram = r0 + r1
        if bigram not in corpus.bigrams:
            continue
        count = corpus.bigrams[bigram]
        distance = layout.get_distance(r0, r1)
        if distance < min_distance:
            continue
        percentage = _ratio(count, corpus.total_bigrams_count)
        analysis.lsbs.append(Lsb(bigram, distance, count, percentage))
        analysis.total_lsb_count += count
        analysis.total_lsb_perc += percentage


def analyze_lsbs(layout: SplitLayout, corpus: Corpus) -> LsbAnalysis:
    """List lateral stretch bigrams of at least 2U and of at least 3.5U."""
    analysis = LsbAnalysis(layout=layout, corpus=corpus)
    _collect_lsbs(layout, corpus, analysis, 2.0, _KEY_PAIRS_20)
    _collect_lsbs(layout, corpus, analysis, 3.5, _KEY_PAIRS_35)
    return analysis