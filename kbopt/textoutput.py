"""Plain-text tables for the SFB, SFS and LSB analyses."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from .analysis import LsbAnalysis, SfbAnalysis, SfsAnalysis
from .common import comma, frac, perc

_SFS_MIN_DISTANCE = 1.2


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _cell(text: str, width: int, right: bool) -> str:
    return text.rjust(width) if right else text.ljust(width)


def render_table(
    title: str,
    header: Sequence[Any],
    rows: Sequence[Sequence[Any]],
    footer: Sequence[Any],
    caption: str,
) -> str:
    """Render a boxed table with a centred title, numbered rows and a caption below."""
    header_cells = ["", *(str(h) for h in header)]
    raw_rows = [[index, *row] for index, row in enumerate(rows, 1)]
    body = [[str(value) for value in row] for row in raw_rows]
    footer_cells = ["", *(str(f) for f in footer)]

    widths = [
        max(len(row[col]) for row in (header_cells, footer_cells, *body))
        for col in range(len(header_cells))
    ]

    title_lines = title.split("\n") if title else []
    inner = sum(w + 3 for w in widths) - 3
    longest_title = max((len(line) for line in title_lines), default=0)
    if longest_title > inner:
        widths[-1] += longest_title - inner
        inner = longest_title

    rule = "+" + "+".join("-" * (w + 2) for w in widths) + "+"

    def line(cells: Sequence[str], aligns: Sequence[bool]) -> str:
        parts = (_cell(c, w, r) for c, w, r in zip(cells, widths, aligns))
        return "| " + " | ".join(parts) + " |"

    left = [False] * len(widths)
    lines: list[str] = []
    if title_lines:
        lines.append("+" + "-" * (len(rule) - 2) + "+")
        lines.extend("| " + t.center(inner) + " |" for t in title_lines)
    lines.append(rule)
    lines.append(line(header_cells, left))
    lines.append(rule)
    if body:
        for raw, cells in zip(raw_rows, body):
            lines.append(line(cells, [_is_number(v) for v in raw]))
        lines.append(rule)
    lines.append(line(footer_cells, [True] * len(widths)))
    lines.append(rule)
    if caption:
        lines.append(caption)
    return "\n".join(lines) + "\n"


def _by_count(rows: list[list[Any]]) -> list[list[Any]]:
    return sorted(rows, key=lambda row: row[2], reverse=True)


def render_sfbs(analysis: SfbAnalysis) -> str:
    """Table of same-finger bigrams, most frequent first."""
    layout, corpus = analysis.layout, analysis.corpus
    rows = [
        [sfb.bigram, frac(sfb.distance), sfb.count, perc(sfb.percentage)]
        for sfb in analysis.sfbs
    ]
    return render_table(
        f"{layout.name} ({layout.layout_type.value})\nSame Finger Bigrams",
        ["SFB", "Distance", "Count", "%"],
        _by_count(rows),
        ["", "", comma(analysis.total_sfb_count), perc(analysis.total_sfb_perc)],
        f"Corpus: {corpus.name} ({comma(corpus.total_bigrams_no_space)} bigrams)",
    )


def render_sfss(analysis: SfsAnalysis) -> str:
    """Table of same-finger skipgrams longer than 1.2U, most frequent first."""
    layout, corpus = analysis.layout, analysis.corpus
    rows = [
        [sfs.trigram, frac(sfs.distance), sfs.count, perc(sfs.percentage)]
        for sfs in analysis.sfss
        if sfs.distance > _SFS_MIN_DISTANCE
    ]
    return render_table(
        f"{layout.name} ({layout.layout_type.value})\nSame Finger Skipgrams (>=1.2U)",
        ["SFS", "Distance", "Count", "%"],
        _by_count(rows),
        ["", "", comma(analysis.total_sfs_count), perc(analysis.total_sfs_perc)],
        f"Corpus: {corpus.name} ({comma(corpus.total_trigrams_count)} trigrams)",
    )


def render_lsbs(analysis: LsbAnalysis) -> str:
    """Table of lateral stretch bigrams, most frequent first."""
    layout, corpus = analysis.layout, analysis.corpus
    rows = [
        [lsb.bigram, frac(lsb.distance), lsb.count, perc(lsb.percentage)]
        for lsb in analysis.lsbs
    ]
    return render_table(
        f"{layout.name} ({layout.layout_type.value})\nLateral Stretch Bigrams",
        ["LSB", "Distance", "Count", "%"],
        _by_count(rows),
        ["", "", comma(analysis.total_lsb_count), perc(analysis.total_lsb_perc)],
        f"Corpus: {corpus.name}",
    )