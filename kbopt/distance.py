"""Distances between keys, measured in key units, for each keyboard geometry."""

from __future__ import annotations

import math
from dataclasses import dataclass

from .keys import KeyInfo, LayoutType

# Corne-style column offsets.
_COL_STAG_OFFSETS = (0.35, 0.35, 0.1, 0, 0.1, 0.2, 0.2, 0.1, 0, 0.1, 0.35, 0.35)
_ROW_STAG_OFFSETS = {1: 0.25, 2: 0.75}


@dataclass(frozen=True)
class KeyPair:
    """Two key positions in a canonical order, so the pair is symmetric."""

    row1: int
    col1: int
    row2: int
    col2: int


def key_pair(a: KeyInfo, b: KeyInfo) -> KeyPair:
    """Pair two keys, ordered by row then column."""
    if (a.row, a.column) < (b.row, b.column):
        first, second = a, b
    else:
        first, second = b, a
    return KeyPair(first.row, first.column, second.row, second.column)


def _from_squared(squared: float) -> float:
    if squared == 1:
        return 1.0
    if squared == 2:
        return math.sqrt(2)
    return math.sqrt(squared)


def _ortho(kp: KeyPair) -> float:
    if kp.row1 == 3:
        return float(kp.col2 - kp.col1)
    if kp.col1 == kp.col2:
        return float(kp.row2 - kp.row1)
    dx = abs(kp.col2 - kp.col1)
    dy = kp.row2 - kp.row1
    return _from_squared(dx * dx + dy * dy)


def _row_stag(kp: KeyPair) -> float:
    if kp.row1 == 3:
        return float(kp.col2 - kp.col1)
    dx = (kp.col2 + _ROW_STAG_OFFSETS.get(kp.row2, 0.0)) - (
        kp.col1 + _ROW_STAG_OFFSETS.get(kp.row1, 0.0)
    )
    dy = kp.row2 - kp.row1
    return _from_squared(dx * dx + dy * dy)


def _col_stag(kp: KeyPair) -> float:
    if kp.row1 == 3:
        return float(kp.col2 - kp.col1)
    dx = kp.col2 - kp.col1
    dy = (kp.row2 + _COL_STAG_OFFSETS[kp.col2]) - (kp.row1 + _COL_STAG_OFFSETS[kp.col1])
    return _from_squared(dx * dx + dy * dy)


_CALCULATORS = {
    LayoutType.ORTHO: _ortho,
    LayoutType.ROWSTAG: _row_stag,
    LayoutType.COLSTAG: _col_stag,
}


class KeyDistance:
    """Computes and caches key distances for one keyboard geometry."""

    def __init__(self, layout_type: LayoutType | str) -> None:
        self.layout_type = LayoutType(layout_type)
        self._calculate = _CALCULATORS[self.layout_type]
        self._cache: dict[KeyPair, float] = {}

    def get_distance(self, key1: KeyInfo, key2: KeyInfo) -> float:
        """Distance between two keys of one hand; 0 across hands or thumb/finger."""
        if key1.hand != key2.hand:
            return 0.0
        if (key1.row == 3) != (key2.row == 3):
            return 0.0
        kp = key_pair(key1, key2)
        try:
            return self._cache[kp]
        except KeyError:
            distance = self._cache[kp] = self._calculate(kp)
            return distance