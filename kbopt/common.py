"""Small formatting and counting helpers shared across the package."""

from __future__ import annotations

from collections.abc import Hashable, Mapping
from typing import TypeVar

K = TypeVar("K", bound=Hashable)


def comma(value: int) -> str:
    """Format a non-negative integer with thousands separators."""
    return f"{value:,}"


def frac(value: float) -> str:
    """Format a fraction with two decimals."""
    return f"{value:.2f}"


def perc(value: float) -> str:
    """Format a fraction as a percentage with two decimals."""
    return f"{100 * value:.2f}%"


def sorted_counts(counts: Mapping[K, int] | None) -> list[tuple[K, int]]:
    """Return the (key, count) items of a mapping, highest count first."""
    if counts is None:
        return []
    return sorted(counts.items(), key=lambda item: item[1], reverse=True)